"""sourceref - framed, annotated source excerpts for diagnostics.

Renders compiler-style diagnostics: a header naming the problem, then for
each location a ``--> file:line:col`` line and the offending source line
with the relevant part highlighted and underlined.

Public API:
    SourceReferenceFormatter - Writes excerpts and diagnostics to a stream
    render_source_location - Render one span excerpt to a string
    render_diagnostic - Render a full diagnostic to a string
    SourceSpan - Offset range inside a named source
    DiagnosticRecord - Name, comment, primary and secondary locations
    SourceRegistry - Default line locator over named source texts

Exceptions:
    SourceReferenceError - Base exception class
    UnknownSourceError - Source name not known to the registry

Submodules:
    sourceref.diagnostics - Data model, styling, truncation, formatter
    sourceref.source - Line indexing and the source registry
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    AnsiStyler,
    DiagnosticRecord,
    PlainStyler,
    RenderConfig,
    SecondaryLocation,
    Severity,
    SourceReferenceError,
    SourceReferenceFormatter,
    SourceSpan,
    UnknownSourceError,
    render_diagnostic,
    render_source_location,
    styler_for,
)
from .source import LineIndex, SourceRegistry

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("sourceref")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AnsiStyler",
    "DiagnosticRecord",
    "LineIndex",
    "PlainStyler",
    "RenderConfig",
    "SecondaryLocation",
    "Severity",
    "SourceReferenceError",
    "SourceReferenceFormatter",
    "SourceRegistry",
    "SourceSpan",
    "UnknownSourceError",
    "__version__",
    "render_diagnostic",
    "render_source_location",
    "styler_for",
]
