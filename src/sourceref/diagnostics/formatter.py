"""Source reference formatting service.

Renders framed, annotated source excerpts for diagnostics:

    TypeError: Type mismatch.
     --> test.sol:3:9:
      |
    2 |     x = "a" + 1;
      |         ^^^^^^^

Single-line spans are underlined with carets; a span crossing lines shows
its first line highlighted from the start column onward with a note.
Long spans and long lines are truncated (see truncation.py) without
breaking caret alignment.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from sourceref.constants import (
    CARET,
    FRAME_BAR,
    FRAME_EMPTY,
    MULTILINE_NOTE,
    SOURCE_ARROW,
)

from .accessor import DiagnosticAccessor, record_from
from .codes import DiagnosticRecord, LineColumn, Severity, SourceSpan
from .render_config import RenderConfig
from .styling import PlainStyler, Style, Styler
from .truncation import RenderedLine, caret_prefix, left_pad_width, truncate

if TYPE_CHECKING:
    from sourceref.source.line_index import LineProvider
    from sourceref.source.registry import LineLocator

__all__ = [
    "SourceReferenceFormatter",
    "render_diagnostic",
    "render_source_location",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _ResolvedLocation:
    """A printable location with its coordinates looked up once."""

    source_name: str
    offset: int
    provider: LineProvider
    start: LineColumn
    end: LineColumn

    @property
    def is_multiline(self) -> bool:
        return self.start.line != self.end.line

    @property
    def left_pad(self) -> int:
        return left_pad_width(self.start.line)


class SourceReferenceFormatter:
    """Writes source excerpts and diagnostics to a text stream.

    The formatter holds no state between calls beyond its stream. Several
    formatters may share one line locator; callers sharing one stream
    between threads must serialize access themselves.

    Attributes:
        stream: Output sink
        line_locator: Resolves a source name to a LineProvider
        styler: Wraps styled runs (default: PlainStyler)
        config: Truncation limits (default: RenderConfig())

    Example:
        >>> from sourceref.source import SourceRegistry
        >>> registry = SourceRegistry({"test.sol": "foo = bar;\\n"})
        >>> out = io.StringIO()
        >>> formatter = SourceReferenceFormatter(out, registry.get_provider)
        >>> formatter.format_source_location(
        ...     SourceSpan("test.sol", 6, 9), "undeclared identifier"
        ... )
        >>> print(out.getvalue(), end="")
         --> test.sol:1:7: undeclared identifier
          |
        0 | foo = bar;
          |       ^^^
        <BLANKLINE>
    """

    __slots__ = ("config", "line_locator", "stream", "styler")

    def __init__(
        self,
        stream: TextIO,
        line_locator: LineLocator,
        *,
        styler: Styler | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self.stream = stream
        self.line_locator = line_locator
        self.styler: Styler = styler if styler is not None else PlainStyler()
        self.config = config if config is not None else RenderConfig()

    def _styled(self, text: str, style: Style) -> str:
        return self.styler.styled(text, style)

    def _resolve(self, location: SourceSpan | None) -> _ResolvedLocation | None:
        if location is None or location.source_name is None:
            logger.debug("Skipping unprintable location: %r", location)
            return None
        provider = self.line_locator(location.source_name)
        return _ResolvedLocation(
            source_name=location.source_name,
            offset=location.start,
            provider=provider,
            start=provider.position_to_line_column(location.start),
            end=provider.position_to_line_column(location.end),
        )

    def _write_source_name(self, resolved: _ResolvedLocation) -> None:
        start = resolved.start
        self.stream.write(
            " " * resolved.left_pad
            + self._styled(SOURCE_ARROW, Style.FRAME)
            + f"{resolved.source_name}:{start.line + 1}:{start.column + 1}: "
        )

    def format_source_name(self, location: SourceSpan | None) -> None:
        """Write the ``--> file:line:col: `` header fragment.

        Nothing is written for an absent or unnamed location. No message
        and no newline follow, so the caller can append its own styled
        text.

        Args:
            location: Span whose start is reported
        """
        resolved = self._resolve(location)
        if resolved is not None:
            self._write_source_name(resolved)

    def format_source_location(self, location: SourceSpan | None, message: str = "") -> None:
        """Write a framed excerpt for a span.

        Nothing is written for an absent or unnamed location.

        Args:
            location: Span to show
            message: Text appended to the location header (may be empty)
        """
        resolved = self._resolve(location)
        if resolved is None:
            return

        self._write_source_name(resolved)
        if message:
            self.stream.write(self._styled(message, Style.MESSAGE))
        self.stream.write("\n")

        text = resolved.provider.line_at(resolved.offset)
        if resolved.is_multiline:
            # Only the first line is shown; highlight to its end
            end_column = len(text)
        else:
            end_column = resolved.end.column
        line = truncate(
            RenderedLine.clamped(text, resolved.start.column, end_column), self.config
        )

        pad = " " * resolved.left_pad
        # Margin carries the 0-based start line; the header is 1-based
        line_number = resolved.start.line
        write = self.stream.write

        write(pad + self._styled(FRAME_EMPTY, Style.FRAME) + "\n")
        if resolved.is_multiline:
            write(
                self._styled(f"{line_number}{FRAME_BAR}", Style.FRAME)
                + line.before
                + self._styled(line.text[line.start_column :], Style.HIGHLIGHT)
                + "\n"
            )
            write(
                pad
                + self._styled(FRAME_BAR, Style.FRAME)
                + " " * line.start_column
                + self._styled(f"{CARET} {MULTILINE_NOTE}", Style.DIAGNOSTIC)
                + "\n"
            )
        else:
            write(
                self._styled(f"{line_number}{FRAME_BAR}", Style.FRAME)
                + line.before
                + self._styled(line.highlighted, Style.HIGHLIGHT)
                + line.after
                + "\n"
            )
            write(
                pad
                + self._styled(FRAME_BAR, Style.FRAME)
                + caret_prefix(line.text, line.start_column)
                + self._styled(CARET * line.highlight_length, Style.DIAGNOSTIC)
                + "\n"
            )
        write("\n")

    def format_diagnostic(self, record: DiagnosticRecord) -> None:
        """Write a diagnostic header followed by its location excerpts.

        The primary location is shown without a message (the comment is
        already in the header); secondary locations follow in stored order,
        each with its own message.

        Args:
            record: Diagnostic to format
        """
        name_style = Style.WARNING if record.severity == Severity.WARNING else Style.ERROR
        header = self._styled(record.name, name_style)
        if record.comment is not None:
            header += self._styled(f": {record.comment}", Style.MESSAGE)
        self.stream.write(header + "\n")

        primary = record.primary_location
        if primary is None or not primary.is_printable:
            self.stream.write("\n")

        self.format_source_location(primary)
        for secondary in record.secondary_locations:
            self.format_source_location(secondary.location, secondary.message)

    def format_diagnostics(self, records: Iterable[DiagnosticRecord]) -> None:
        """Format several diagnostics in order."""
        for record in records:
            self.format_diagnostic(record)

    def format_exception_information(
        self,
        value: object,
        name: str,
        accessor: DiagnosticAccessor | None = None,
    ) -> None:
        """Format a caller-defined diagnostic value.

        Args:
            value: Diagnostic value, e.g. an exception carrying a record
            name: Diagnostic kind to show in the header
            accessor: How to read value (default: AttributeAccessor)
        """
        self.format_diagnostic(record_from(value, name, accessor))


def render_source_location(
    location: SourceSpan | None,
    line_locator: LineLocator,
    message: str = "",
    *,
    styler: Styler | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render a span excerpt to a string.

    Returns:
        The excerpt text, or "" for an absent or unnamed location
    """
    buffer = io.StringIO()
    SourceReferenceFormatter(
        buffer, line_locator, styler=styler, config=config
    ).format_source_location(location, message)
    return buffer.getvalue()


def render_diagnostic(
    record: DiagnosticRecord,
    line_locator: LineLocator,
    *,
    styler: Styler | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render a full diagnostic to a string."""
    buffer = io.StringIO()
    SourceReferenceFormatter(
        buffer, line_locator, styler=styler, config=config
    ).format_diagnostic(record)
    return buffer.getvalue()
