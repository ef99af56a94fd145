"""A symmetric distance table that stores only the lower triangle."""

from __future__ import annotations

_MAX_SIZE = 255


class DistanceTable:
    """Distances between size points; get(x, y) == get(y, x) and get(x, x) == 0."""

    def __init__(self, size: int):
        if not 1 <= size <= _MAX_SIZE:
            raise ValueError(f"size must be between 1 and {_MAX_SIZE}, got {size}")
        self._size = size
        self._table = [0.0] * (size * (size - 1) // 2)

    def clear(self) -> None:
        """Set every distance to zero."""
        self._table = [0.0] * len(self._table)

    def _index(self, x: int, y: int) -> int | None:
        if not (0 <= x < self._size and 0 <= y < self._size):
            raise IndexError(f"({x}, {y}) is outside a table of size {self._size}")
        if x == y:
            return None
        if x < y:
            x, y = y, x
        return x * (x - 1) // 2 + y

    def set(self, x: int, y: int, value: float) -> None:
        """Store the distance between x and y; the diagonal stays zero."""
        index = self._index(x, y)
        if index is not None:
            self._table[index] = value

    def get(self, x: int, y: int) -> float:
        index = self._index(x, y)
        if index is None:
            return 0
        return self._table[index]

    def dump(self) -> str:
        """The lower triangle, one tab-separated row per line, two decimals each."""
        rows = []
        start = 0
        for row in range(1, self._size):
            cells = self._table[start : start + row]
            rows.append("".join(f"{v:.2f}\t" for v in cells) + "\n")
            start += row
        return "".join(rows) + "\n"