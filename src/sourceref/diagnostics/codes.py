"""Diagnostic data structures.

Defines source spans, resolved line/column coordinates, and the
diagnostic record consumed by the formatter.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "DiagnosticRecord",
    "LineColumn",
    "SecondaryLocation",
    "Severity",
    "SourceSpan",
]


class Severity(StrEnum):
    """Diagnostic severity, used to pick the header style.

    Inherits from ``StrEnum`` so ``str(severity)`` yields ``"error"`` or
    ``"warning"`` directly.
    """

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Offset range inside one named source.

    Note:
        Offsets are Python string indices (Unicode code points), the same
        unit the line locator uses. They are not byte offsets.

    Attributes:
        source_name: Name the line locator resolves (None means the span
            cannot be printed)
        start: Starting offset (0-indexed, inclusive)
        end: Ending offset (exclusive)
    """

    source_name: str | None
    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def is_printable(self) -> bool:
        """True when the span names a source."""
        return self.source_name is not None


@dataclass(frozen=True, slots=True)
class LineColumn:
    """Resolved position. Both fields are 0-based; add 1 for display."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class SecondaryLocation:
    """Related location attached to a diagnostic.

    Attributes:
        message: Text shown in the location header
        location: Span pointing at the related code
    """

    message: str
    location: SourceSpan


@dataclass(frozen=True, slots=True)
class DiagnosticRecord:
    """Structured diagnostic handed to the formatter.

    Constructed entirely by the caller. The formatter reads it and never
    keeps a reference past the call.

    Attributes:
        name: Diagnostic kind shown first in the header (e.g. "TypeError")
        comment: Free-text description appended to the header
        primary_location: Where the problem is
        secondary_locations: Related locations, rendered in this order
        severity: Selects the header style
    """

    name: str
    comment: str | None = None
    primary_location: SourceSpan | None = None
    secondary_locations: tuple[SecondaryLocation, ...] = ()
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        """Return the header text without styling."""
        if self.comment is not None:
            return f"{self.name}: {self.comment}"
        return self.name
