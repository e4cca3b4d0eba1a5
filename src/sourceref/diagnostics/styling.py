"""Styling of rendered diagnostics.

The formatter never writes escape codes itself; it asks a Styler to wrap
each styled run. AnsiStyler targets terminals, PlainStyler emits bare text.

Python 3.13+. Zero external dependencies.
"""

import os
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

__all__ = [
    "AnsiStyler",
    "PlainStyler",
    "Style",
    "Styler",
    "styler_for",
]


class Style(StrEnum):
    """Roles a styled run can play in a rendered excerpt."""

    FRAME = "frame"  # Margin, arrow
    MESSAGE = "message"  # Location messages, diagnostic comment
    ERROR = "error"  # Diagnostic name (error severity)
    WARNING = "warning"  # Diagnostic name (warning severity)
    DIAGNOSTIC = "diagnostic"  # Carets, multi-line note
    HIGHLIGHT = "highlight"  # Highlighted source text


class Styler(Protocol):
    """Capability that wraps text in begin/reset style markers."""

    def styled(self, text: str, style: Style) -> str:
        """Return text wrapped for the given style.

        Implementations must emit the reset marker even for empty text so
        no style leaks into whatever is written next.
        """
        ...


_ANSI_RESET = "\033[0m"

_ANSI_CODES: dict[Style, str] = {
    Style.FRAME: "\033[1;34m",  # Bold blue
    Style.MESSAGE: "\033[1;37m",  # Bold white
    Style.ERROR: "\033[1;31m",  # Bold red
    Style.WARNING: "\033[1;33m",  # Bold yellow
    Style.DIAGNOSTIC: "\033[1;33m",  # Bold yellow
    Style.HIGHLIGHT: "\033[33m",  # Yellow
}


@dataclass(frozen=True, slots=True)
class AnsiStyler:
    """Styler emitting ANSI SGR sequences.

    Example:
        >>> AnsiStyler().styled("^^^", Style.DIAGNOSTIC)
        '\\x1b[1;33m^^^\\x1b[0m'
    """

    def styled(self, text: str, style: Style) -> str:
        return f"{_ANSI_CODES[style]}{text}{_ANSI_RESET}"


@dataclass(frozen=True, slots=True)
class PlainStyler:
    """Styler that leaves text untouched."""

    def styled(self, text: str, style: Style) -> str:  # noqa: ARG002 - protocol signature
        return text


def styler_for(color: bool) -> Styler:
    """Pick a styler for the given color preference.

    ``NO_COLOR=1`` in the environment forces plain output.

    Args:
        color: Whether colored output was requested

    Returns:
        AnsiStyler when color is enabled, otherwise PlainStyler
    """
    if color and os.environ.get("NO_COLOR", "") != "1":
        return AnsiStyler()
    return PlainStyler()
