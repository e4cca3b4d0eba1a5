"""Exception hierarchy with structured diagnostics.

Errors may carry a DiagnosticRecord so that a caught exception can be
handed straight to the formatter.

Python 3.13+. Zero external dependencies.
"""

from .codes import DiagnosticRecord

__all__ = [
    "SourceReferenceError",
    "UnknownSourceError",
]


class SourceReferenceError(Exception):
    """Base exception for sourceref errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | DiagnosticRecord) -> None:
        """Initialize SourceReferenceError.

        Args:
            message: Error message string OR DiagnosticRecord object
        """
        if isinstance(message, DiagnosticRecord):
            self.diagnostic: DiagnosticRecord | None = message
            super().__init__(str(message))
        else:
            self.diagnostic = None
            super().__init__(message)


class UnknownSourceError(SourceReferenceError, KeyError):
    """Line locator was asked for a source it does not know.

    Also a ``KeyError`` so mapping-style callers can catch it as one.

    Attributes:
        source_name: The name that failed to resolve
    """

    def __init__(self, source_name: str) -> None:
        """Initialize UnknownSourceError.

        Args:
            source_name: The unregistered source name
        """
        super().__init__(f"Unknown source '{source_name}'")
        self.source_name = source_name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
