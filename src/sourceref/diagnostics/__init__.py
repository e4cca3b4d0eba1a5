"""Diagnostic rendering for source references.

Provides the diagnostic data model, the exception hierarchy, styling,
truncation rules, and the SourceReferenceFormatter that renders framed
source excerpts.

Python 3.13+. Zero external dependencies.
"""

from .accessor import AttributeAccessor, DiagnosticAccessor, record_from
from .codes import DiagnosticRecord, LineColumn, SecondaryLocation, Severity, SourceSpan
from .errors import SourceReferenceError, UnknownSourceError
from .formatter import SourceReferenceFormatter, render_diagnostic, render_source_location
from .render_config import RenderConfig
from .styling import AnsiStyler, PlainStyler, Style, Styler, styler_for
from .truncation import RenderedLine

__all__ = [
    "AnsiStyler",
    "AttributeAccessor",
    "DiagnosticAccessor",
    "DiagnosticRecord",
    "LineColumn",
    "PlainStyler",
    "RenderConfig",
    "RenderedLine",
    "SecondaryLocation",
    "Severity",
    "SourceReferenceError",
    "SourceReferenceFormatter",
    "SourceSpan",
    "Style",
    "Styler",
    "UnknownSourceError",
    "record_from",
    "render_diagnostic",
    "render_source_location",
    "styler_for",
]
