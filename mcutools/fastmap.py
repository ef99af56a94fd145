"""Linear mapping between two ranges with precomputed factors."""

from __future__ import annotations


class FastMap:
    """Maps [in_min, in_max] linearly onto [out_min, out_max] and back."""

    __slots__ = ("_in_min", "_in_max", "_out_min", "_out_max",
                 "_factor", "_base", "_back_factor", "_back_base")

    def __init__(self, in_min: float, in_max: float, out_min: float, out_max: float):
        if in_min == in_max:
            raise ValueError("input range is empty")
        if out_min == out_max:
            raise ValueError("output range is empty")
        self._in_min = in_min
        self._in_max = in_max
        self._out_min = out_min
        self._out_max = out_max
        self._factor = (out_max - out_min) / (in_max - in_min)
        self._base = out_min - in_min * self._factor
        self._back_factor = 1 / self._factor
        self._back_base = in_min - out_min * self._back_factor

    def map(self, value: float) -> float:
        return self._base + value * self._factor

    def back(self, value: float) -> float:
        """The inverse of map."""
        return self._back_base + value * self._back_factor

    def constrained_map(self, value: float) -> float:
        """Map, clamping inputs outside the input range to the output ends."""
        if value <= self._in_min:
            return self._out_min
        if value >= self._in_max:
            return self._out_max
        return self.map(value)

    def lower_constrained_map(self, value: float) -> float:
        if value <= self._in_min:
            return self._out_min
        return self.map(value)

    def upper_constrained_map(self, value: float) -> float:
        if value >= self._in_max:
            return self._out_max
        return self.map(value)