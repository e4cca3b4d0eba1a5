"""Source text lookup: line indexing and the named-source registry."""

from .line_index import LineIndex, LineProvider
from .registry import LineLocator, SourceRegistry

__all__ = [
    "LineIndex",
    "LineLocator",
    "LineProvider",
    "SourceRegistry",
]
