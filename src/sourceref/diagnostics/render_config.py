"""Rendering configuration for SourceReferenceFormatter.

Provides a single frozen dataclass holding the truncation limits, so the
formatter takes one typed object instead of several loose integers.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from sourceref.constants import (
    CONTEXT_WIDTH,
    ELLIPSIS_INNER,
    MAX_LINE_LENGTH,
    MAX_SPAN_LENGTH,
)

__all__ = ["RenderConfig"]


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable truncation limits for rendered excerpts.

    Constructing ``RenderConfig()`` with no arguments gives the standard
    150/35/150 layout.

    Attributes:
        max_span_length: Spans wider than this are elided in the middle
            (default: 150).
        context_width: Characters kept on each side of an elision
            (default: 35).
        max_line_length: Lines longer than this are windowed around the
            span (default: 150).

    Example:
        >>> config = RenderConfig()
        >>> config.truncated_span_length
        75
        >>> config.shifted_start_column
        40
    """

    max_span_length: int = MAX_SPAN_LENGTH
    context_width: int = CONTEXT_WIDTH
    max_line_length: int = MAX_LINE_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If a limit is not positive, or if the elided span
                would not be shorter than max_span_length.
        """
        if self.context_width <= 0:
            msg = "context_width must be positive"
            raise ValueError(msg)
        if self.max_line_length <= 0:
            msg = "max_line_length must be positive"
            raise ValueError(msg)
        if self.max_span_length < self.truncated_span_length:
            msg = (
                f"max_span_length ({self.max_span_length}) must be >= "
                f"truncated_span_length ({self.truncated_span_length})"
            )
            raise ValueError(msg)

    @property
    def truncated_span_length(self) -> int:
        """Highlighted length of a span after middle elision."""
        return 2 * self.context_width + len(ELLIPSIS_INNER)

    @property
    def shifted_start_column(self) -> int:
        """Start column after the head of a long line was cut off."""
        return self.context_width + len(ELLIPSIS_INNER)
