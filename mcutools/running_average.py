"""Average over the last N values in a circular buffer."""

from __future__ import annotations

import math

_MAX_SIZE = 255


class RunningAverage:
    """Keeps the last size values and their running sum, minimum and maximum."""

    def __init__(self, size: int):
        if not 1 <= size <= _MAX_SIZE:
            raise ValueError(f"size must be between 1 and {_MAX_SIZE}, got {size}")
        self._size = size
        self.clear()

    def clear(self) -> None:
        """Forget all values."""
        self._buffer = [0.0] * self._size
        self._count = 0
        self._index = 0
        self._sum = 0.0
        self._min = math.nan
        self._max = math.nan

    def add(self, value: float) -> None:
        """Add a value, replacing the oldest one when the buffer is full."""
        self._sum -= self._buffer[self._index]
        self._buffer[self._index] = value
        self._sum += value
        self._index = (self._index + 1) % self._size
        if self._count == 0:
            self._min = self._max = value
        elif value < self._min:
            self._min = value
        elif value > self._max:
            self._max = value
        if self._count < self._size:
            self._count += 1

    def fill(self, value: float, number: int) -> None:
        """Clear, then add value number times."""
        self.clear()
        for _ in range(number):
            self.add(value)

    def average(self) -> float:
        """The average, summed afresh over the buffer."""
        if self._count == 0:
            return math.nan
        return sum(self._buffer[: self._count]) / self._count

    def fast_average(self) -> float:
        """The average from the running sum."""
        if self._count == 0:
            return math.nan
        return self._sum / self._count

    def minimum(self) -> float:
        """The smallest value added since the last clear."""
        return self._min

    def maximum(self) -> float:
        """The largest value added since the last clear."""
        return self._max

    def min_in_buffer(self) -> float:
        if self._count == 0:
            return math.nan
        return min(self._buffer[: self._count])

    def max_in_buffer(self) -> float:
        if self._count == 0:
            return math.nan
        return max(self._buffer[: self._count])

    def element(self, index: int) -> float:
        """The value stored at a buffer position, or NaN if there is none."""
        if not 0 <= index < self._count:
            return math.nan
        return self._buffer[index]

    def size(self) -> int:
        return self._size

    def count(self) -> int:
        return self._count