"""Line indexing for source text.

LineIndex precomputes line start offsets in a single O(n) pass and then
answers offset -> line/column and offset -> line text queries with a
binary search. It is the LineProvider the formatter consumes.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter; the
      trailing \\r is dropped from returned line text)
    - CR-only (Classic Mac, \\r): NOT supported

Python 3.13+. Zero external dependencies.
"""

from typing import Protocol

from sourceref.diagnostics.codes import LineColumn

__all__ = ["LineIndex", "LineProvider"]


class LineProvider(Protocol):
    """What the formatter needs from one source."""

    def line_at(self, offset: int) -> str:
        """Return the text of the line containing offset, without terminator."""
        ...

    def position_to_line_column(self, offset: int) -> LineColumn:
        """Return the 0-based line and column of offset."""
        ...


class LineIndex:
    """Cached line offsets for efficient position lookups.

    Example:
        >>> index = LineIndex("line1\\nline2\\nline3")
        >>> index.position_to_line_column(0)
        LineColumn(line=0, column=0)
        >>> index.position_to_line_column(8)
        LineColumn(line=1, column=2)
        >>> index.line_at(8)
        'line2'

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source")

    def __init__(self, source: str) -> None:
        """Build line offset index from source.

        Args:
            source: Source text to index

        Complexity:
            O(n) where n = len(source)
        """
        # Line 0 starts at offset 0; every newline starts another line
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source = source

    @property
    def source(self) -> str:
        return self._source

    @property
    def line_count(self) -> int:
        """Number of lines, counting the (possibly empty) one after a final newline."""
        return len(self._offsets)

    def _line_of(self, pos: int) -> int:
        # Binary search: index of the largest line offset <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1
        return left

    def _clamp(self, offset: int) -> int:
        if offset < 0:
            return 0
        return min(offset, len(self._source))

    def position_to_line_column(self, offset: int) -> LineColumn:
        """Get 0-based line and column for an offset.

        Offsets outside the source are clamped to its bounds.

        Args:
            offset: Character position in source (0-indexed)

        Returns:
            LineColumn with 0-based line and column

        Complexity:
            O(log n) where n = number of lines
        """
        pos = self._clamp(offset)
        line = self._line_of(pos)
        return LineColumn(line=line, column=pos - self._offsets[line])

    def line_at(self, offset: int) -> str:
        """Get the text of the line containing an offset.

        Args:
            offset: Character position in source (0-indexed)

        Returns:
            Line text without the trailing newline (or CRLF)
        """
        line = self._line_of(self._clamp(offset))
        start = self._offsets[line]
        if line + 1 < len(self._offsets):
            end = self._offsets[line + 1] - 1  # Exclude the \n
        else:
            end = len(self._source)
        text = self._source[start:end]
        if text.endswith("\r"):
            text = text[:-1]
        return text
