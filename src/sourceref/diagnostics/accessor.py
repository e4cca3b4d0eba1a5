"""Extraction of diagnostic records from arbitrary diagnostic values.

The formatter does not know how callers represent their diagnostics. A
DiagnosticAccessor pulls the pieces it needs (primary location, comment,
secondary locations, severity) out of whatever value it is given.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable
from typing import Protocol

from .codes import DiagnosticRecord, SecondaryLocation, Severity, SourceSpan

__all__ = [
    "AttributeAccessor",
    "DiagnosticAccessor",
    "record_from",
]

logger = logging.getLogger(__name__)


class DiagnosticAccessor(Protocol):
    """Reads the parts of a diagnostic value the formatter needs."""

    def primary_location(self, value: object) -> SourceSpan | None: ...

    def comment(self, value: object) -> str | None: ...

    def secondary_locations(self, value: object) -> tuple[SecondaryLocation, ...]: ...

    def severity(self, value: object) -> Severity: ...


class AttributeAccessor:
    """Default accessor using duck typing.

    Resolution order for a value:
        1. A DiagnosticRecord is read directly.
        2. A value with a ``diagnostic`` attribute holding a DiagnosticRecord
           (e.g. SourceReferenceError) is read through that record.
        3. Otherwise same-named attributes are looked up on the value;
           ``location`` is accepted as an alias of ``primary_location``.
           Secondary locations may be SecondaryLocation objects or
           ``(message, span)`` pairs; other entries are skipped.
    """

    __slots__ = ()

    @staticmethod
    def _target(value: object) -> object:
        if isinstance(value, DiagnosticRecord):
            return value
        diagnostic = getattr(value, "diagnostic", None)
        if isinstance(diagnostic, DiagnosticRecord):
            return diagnostic
        return value

    def primary_location(self, value: object) -> SourceSpan | None:
        target = self._target(value)
        location = getattr(target, "primary_location", None)
        if location is None:
            location = getattr(target, "location", None)
        if isinstance(location, SourceSpan):
            return location
        if location is not None:
            logger.debug("Ignoring primary location that is not a SourceSpan: %r", location)
        return None

    def comment(self, value: object) -> str | None:
        comment = getattr(self._target(value), "comment", None)
        return comment if isinstance(comment, str) else None

    def secondary_locations(self, value: object) -> tuple[SecondaryLocation, ...]:
        raw = getattr(self._target(value), "secondary_locations", None)
        if not raw:
            return ()
        converted = (_as_secondary(item) for item in raw)
        return tuple(item for item in converted if item is not None)

    def severity(self, value: object) -> Severity:
        severity = getattr(self._target(value), "severity", Severity.ERROR)
        return Severity(severity) if severity in tuple(Severity) else Severity.ERROR


def _as_secondary(item: object) -> SecondaryLocation | None:
    """Convert one entry; malformed entries are dropped."""
    if isinstance(item, SecondaryLocation):
        return item
    if not isinstance(item, Iterable) or isinstance(item, str):
        logger.debug("Skipping secondary location that is not a pair: %r", item)
        return None
    parts = tuple(item)
    if len(parts) != 2:
        logger.debug("Skipping secondary location that is not a pair: %r", item)
        return None
    message, location = parts
    if not isinstance(location, SourceSpan):
        logger.debug("Skipping secondary location without a SourceSpan: %r", item)
        return None
    return SecondaryLocation(message=str(message), location=location)


def record_from(
    value: object, name: str, accessor: DiagnosticAccessor | None = None
) -> DiagnosticRecord:
    """Build a DiagnosticRecord from any diagnostic value.

    Args:
        value: Caller-defined diagnostic value (record, exception, ...)
        name: Diagnostic kind to show in the header
        accessor: How to read the value (default: AttributeAccessor)

    Returns:
        A new DiagnosticRecord; the value itself is not modified
    """
    reader = accessor if accessor is not None else AttributeAccessor()
    return DiagnosticRecord(
        name=name,
        comment=reader.comment(value),
        primary_location=reader.primary_location(value),
        secondary_locations=reader.secondary_locations(value),
        severity=reader.severity(value),
    )
