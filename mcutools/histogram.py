"""A histogram over fixed bucket boundaries."""

from __future__ import annotations

import math
from collections.abc import Sequence


class Histogram:
    """Counts values into len(bounds) + 1 buckets.

    Bucket i holds values v with bounds[i-1] < v <= bounds[i]; the last bucket
    holds everything above the last bound.
    """

    def __init__(self, bounds: Sequence[float]):
        self._bounds = tuple(bounds)
        self._data = [0] * (len(self._bounds) + 1)
        self._count = 0

    def clear(self) -> None:
        """Reset all counters."""
        self._data = [0] * len(self._data)
        self._count = 0

    def add(self, value: float) -> None:
        self._data[self.find(value)] += 1
        self._count += 1

    def sub(self, value: float) -> None:
        """Decrease the bucket of value; the total count still goes up."""
        self._data[self.find(value)] -= 1
        self._count += 1

    def size(self) -> int:
        """The number of buckets."""
        return len(self._data)

    def count(self) -> int:
        """The number of values added or subtracted."""
        return self._count

    def bucket(self, index: int) -> int:
        if not 0 <= index < len(self._data):
            return 0
        return self._data[index]

    def frequency(self, index: int) -> float:
        """The relative frequency of a bucket."""
        if self._count == 0:
            return math.nan
        if not 0 <= index < len(self._data):
            return 0.0
        return self._data[index] / self._count

    def pmf(self, value: float) -> float:
        """The probability of the bucket that holds value."""
        if self._count == 0:
            return math.nan
        return self._data[self.find(value)] / self._count

    def cdf(self, value: float) -> float:
        """The cumulative probability up to and including the bucket of value."""
        if self._count == 0:
            return math.nan
        return sum(self._data[: self.find(value) + 1]) / self._count

    def val(self, probability: float) -> float:
        """The lowest bound at which the cumulative probability reaches probability."""
        if self._count == 0:
            return math.nan
        p = min(max(probability, 0.0), 1.0)
        target = p * self._count
        total = 0
        for bound, n in zip(self._bounds, self._data):
            total += n
            if total >= target:
                return bound
        return math.inf

    def find(self, value: float) -> int:
        """The bucket index for value."""
        return next(
            (i for i, bound in enumerate(self._bounds) if bound >= value),
            len(self._bounds),
        )