"""Truncation rules for rendered source lines.

Two independent rules shorten what gets printed:

1. Span-length truncation: a highlighted span wider than
   ``max_span_length`` keeps ``context_width`` characters from each end
   with ``" ... "`` in between.
2. Line-length truncation: a line longer than ``max_line_length`` is cut
   down to a window around the (possibly already shortened) span, with
   ``" ... "`` / ``" ..."`` marking a cut head / tail.

Both rules are pure functions over an immutable RenderedLine and are
applied in that order by ``truncate``. Every result keeps
``0 <= start_column <= end_column <= len(text)`` so the highlight and
caret line stay aligned with the printed text.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sourceref.constants import ELLIPSIS_INNER, ELLIPSIS_TRAILING

from .render_config import RenderConfig

__all__ = [
    "RenderedLine",
    "caret_prefix",
    "left_pad_width",
    "truncate",
    "truncate_long_line",
    "truncate_long_span",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenderedLine:
    """Line text plus the highlighted column range, ready for printing.

    Attributes:
        text: Line text as it will be printed
        start_column: First highlighted column (0-based)
        end_column: Column after the last highlighted one
    """

    text: str
    start_column: int
    end_column: int

    @classmethod
    def clamped(cls, text: str, start_column: int, end_column: int) -> RenderedLine:
        """Build a RenderedLine with columns forced into the line bounds.

        Columns coming from inconsistent offsets are pulled into
        ``[0, len(text)]`` and end never precedes start.

        Example:
            >>> RenderedLine.clamped("abc", 2, 10)
            RenderedLine(text='abc', start_column=2, end_column=3)
            >>> RenderedLine.clamped("abc", 5, 1)
            RenderedLine(text='abc', start_column=3, end_column=3)
        """
        length = len(text)
        start = max(0, min(start_column, length))
        end = max(start, min(end_column, length))
        return cls(text, start, end)

    @property
    def highlight_length(self) -> int:
        return self.end_column - self.start_column

    @property
    def before(self) -> str:
        return self.text[: self.start_column]

    @property
    def highlighted(self) -> str:
        return self.text[self.start_column : self.end_column]

    @property
    def after(self) -> str:
        return self.text[self.end_column :]


def truncate_long_span(line: RenderedLine, config: RenderConfig) -> RenderedLine:
    """Elide the middle of an overly wide highlighted span.

    Args:
        line: Line with the span to check
        config: Truncation limits

    Returns:
        The same line if the span fits, otherwise a new line whose span is
        exactly ``config.truncated_span_length`` wide

    Example:
        >>> line = RenderedLine("x" * 200, 0, 200)
        >>> short = truncate_long_span(line, RenderConfig())
        >>> short.highlight_length
        75
        >>> short.highlighted[35:40]
        ' ... '
    """
    if line.highlight_length <= config.max_span_length:
        return line

    context = config.context_width
    text = (
        line.text[: line.start_column + context]
        + ELLIPSIS_INNER
        + line.text[max(0, line.end_column - context) :]
    )
    logger.debug(
        "Elided span of %d columns to %d",
        line.highlight_length,
        config.truncated_span_length,
    )
    return RenderedLine.clamped(
        text, line.start_column, line.start_column + config.truncated_span_length
    )


def truncate_long_line(line: RenderedLine, config: RenderConfig) -> RenderedLine:
    """Cut an overly long line down to a window around its span.

    At most ``context_width`` characters are kept before the span and
    ``context_width`` after it. A cut head is replaced by ``" ... "``,
    which moves the span to ``config.shifted_start_column``; a cut tail
    gets ``" ..."`` appended.

    Args:
        line: Line to check
        config: Truncation limits

    Returns:
        The same line if it fits, otherwise the windowed line
    """
    total = len(line.text)
    if total <= config.max_line_length:
        return line

    context = config.context_width
    start = line.start_column
    length = line.highlight_length

    window_start = max(0, start - context)
    window_length = min(start, context) + min(length + context, total - start)
    text = line.text[window_start : window_start + window_length]

    if start + length + context < total:
        text += ELLIPSIS_TRAILING
    if start > context:
        text = ELLIPSIS_INNER + text
        start = config.shifted_start_column

    logger.debug("Windowed line of %d characters to %d", total, len(text))
    return RenderedLine.clamped(text, start, start + length)


def truncate(line: RenderedLine, config: RenderConfig) -> RenderedLine:
    """Apply span-length then line-length truncation."""
    return truncate_long_line(truncate_long_span(line, config), config)


def left_pad_width(line_number: int) -> int:
    """Width of the frame margin for a 0-based start line.

    Equals the decimal digit count of ``line_number``; non-positive
    numbers get width 1.

    Example:
        >>> left_pad_width(7), left_pad_width(42), left_pad_width(100)
        (1, 2, 3)
    """
    if line_number <= 0:
        return 1
    return len(str(line_number))


def caret_prefix(text: str, column: int) -> str:
    """Blank out ``text[:column]`` for the caret line, keeping tabs as tabs.

    Tabs survive so the carets line up under the same tab expansion as
    the source line above them.
    """
    return "".join("\t" if char == "\t" else " " for char in text[:column])
