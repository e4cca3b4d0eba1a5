"""Source registry: the default line locator.

Maps source names to their text and lazily builds a LineIndex for each
source the first time a location in it is formatted.

Thread Safety:
    All operations protected by RLock. Safe for concurrent lookups and
    registrations.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Callable, Iterator
from threading import RLock
from typing import TypeAlias

from sourceref.diagnostics.errors import UnknownSourceError

from .line_index import LineIndex, LineProvider

__all__ = ["LineLocator", "SourceRegistry"]

logger = logging.getLogger(__name__)

# Resolves a source name to a provider of line text and line/column
LineLocator: TypeAlias = Callable[[str], LineProvider]


class SourceRegistry:
    """Named sources with lazily built line indexes.

    Pass ``registry.get_provider`` to the formatter as its line locator.

    Example:
        >>> registry = SourceRegistry()
        >>> registry.add("test.sol", "foo = bar;\\n")
        >>> registry.get_provider("test.sol").position_to_line_column(6)
        LineColumn(line=0, column=6)
        >>> "test.sol" in registry
        True
    """

    __slots__ = ("_indexes", "_lock", "_sources")

    def __init__(self, sources: dict[str, str] | None = None) -> None:
        """Initialize registry.

        Args:
            sources: Initial mapping of source name to text
        """
        self._sources: dict[str, str] = dict(sources) if sources else {}
        self._indexes: dict[str, LineIndex] = {}
        self._lock = RLock()

    def add(self, name: str, text: str) -> None:
        """Register (or replace) a source.

        Replacing a source drops its cached index.
        """
        with self._lock:
            self._sources[name] = text
            self._indexes.pop(name, None)

    def get_provider(self, name: str) -> LineIndex:
        """Return the line index for a source, building it on first use.

        Raises:
            UnknownSourceError: If no source with that name is registered
        """
        with self._lock:
            index = self._indexes.get(name)
            if index is not None:
                return index
            try:
                text = self._sources[name]
            except KeyError:
                raise UnknownSourceError(name) from None
            index = LineIndex(text)
            self._indexes[name] = index
            logger.debug("Indexed source '%s': %d lines", name, index.line_count)
            return index

    def names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._sources)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._sources

    def __len__(self) -> int:
        with self._lock:
            return len(self._sources)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
