"""Median and related statistics over the last N values."""

from __future__ import annotations

import math

MIN_SIZE = 1
MAX_SIZE = 19


class RunningMedian:
    """Keeps the last size values (1..19) and reports their median and spread."""

    def __init__(self, size: int):
        self._size = min(max(size, MIN_SIZE), MAX_SIZE)
        self._buffer = [0.0] * self._size
        self.clear()

    def clear(self) -> None:
        """Forget all values."""
        self._count = 0
        self._index = 0
        self._sorted: list[float] | None = None

    def add(self, value: float) -> None:
        """Add a value, overwriting the oldest one when the buffer is full."""
        self._buffer[self._index] = value
        self._index = (self._index + 1) % self._size
        if self._count < self._size:
            self._count += 1
        self._sorted = None

    def _ordered(self) -> list[float]:
        if self._sorted is None:
            self._sorted = sorted(self._buffer[: self._count])
        return self._sorted

    def median(self) -> float:
        """The middle value, or the mean of the two middle values for an even count."""
        if self._count == 0:
            return math.nan
        ordered = self._ordered()
        half = self._count // 2
        if self._count & 1:
            return ordered[half]
        return (ordered[half] + ordered[half - 1]) / 2

    def average(self, n_medians: int | None = None) -> float:
        """The mean of all values, or of the n_medians values around the median."""
        if self._count == 0:
            return math.nan
        if n_medians is None:
            return sum(self._buffer[: self._count]) / self._count
        if n_medians <= 0:
            return math.nan
        n = min(n_medians, self._count)
        start = (self._count - n) // 2
        return sum(self._ordered()[start : start + n]) / n

    def highest(self) -> float:
        return self.sorted_element(self._count - 1)

    def lowest(self) -> float:
        return self.sorted_element(0)

    def element(self, n: int) -> float:
        """The value at buffer position n, or NaN if there is none."""
        if not 0 <= n < self._count:
            return math.nan
        return self._buffer[n]

    def sorted_element(self, n: int) -> float:
        """The n-th smallest value, or NaN if there is none."""
        if not 0 <= n < self._count:
            return math.nan
        return self._ordered()[n]

    def predict(self, n: int) -> float:
        """The largest change of the median that n more additions can cause."""
        if self._count == 0 or not 0 <= n < self._count // 2:
            return math.nan
        med = self.median()
        ordered = self._ordered()
        half = self._count // 2
        if self._count & 1:
            return max(med - ordered[half - n], ordered[half + n] - med)
        f1 = (ordered[half - n] + ordered[half - n - 1]) / 2
        f2 = (ordered[half + n] + ordered[half + n - 1]) / 2
        return max(med - f1, f2 - med) / 2

    def size(self) -> int:
        """The capacity of the buffer."""
        return self._size

    def count(self) -> int:
        """The number of values held, at most size()."""
        return self._count