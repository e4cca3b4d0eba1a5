"""Shared constants for sourceref.

Centralizes the truncation limits and fixed marker strings used when
rendering source excerpts. Placing them here keeps the configuration
defaults and the renderer in agreement.

Constants are grouped by domain:
- Truncation limits: when long spans and long lines get elided
- Markers: the literal text inserted into rendered excerpts
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Truncation limits
    "MAX_SPAN_LENGTH",
    "MAX_LINE_LENGTH",
    "CONTEXT_WIDTH",
    # Markers
    "ELLIPSIS_INNER",
    "ELLIPSIS_TRAILING",
    "CARET",
    "FRAME_EMPTY",
    "FRAME_BAR",
    "SOURCE_ARROW",
    "MULTILINE_NOTE",
]

# ============================================================================
# TRUNCATION LIMITS
# ============================================================================

# Highlighted spans wider than this many columns are elided in the middle.
MAX_SPAN_LENGTH: int = 150

# Rendered lines longer than this many characters are windowed around the span.
MAX_LINE_LENGTH: int = 150

# Characters kept on each side of an elision point.
CONTEXT_WIDTH: int = 35

# ============================================================================
# MARKERS
# ============================================================================

# Replaces the interior of an elided span, or the cut-off head of a line.
ELLIPSIS_INNER: str = " ... "

# Appended when the tail of a line was cut off.
ELLIPSIS_TRAILING: str = " ..."

CARET: str = "^"

# Frame margin pieces. The empty frame line has no trailing space.
FRAME_EMPTY: str = " |"
FRAME_BAR: str = " | "

SOURCE_ARROW: str = "--> "

MULTILINE_NOTE: str = "(Relevant source part starts here and spans across multiple lines)."
