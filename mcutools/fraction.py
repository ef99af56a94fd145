"""Rational numbers with a small, bounded denominator."""

from __future__ import annotations

import math

_PRECISION = 0.000001
_MAX_DENOMINATOR = 10000
_SMALL = 0.00001


def _gcd(a: int, b: int) -> int:
    while a != 0:
        a, b = b % a, a
    return b


def _simplify(n: int, d: int) -> tuple[int, int]:
    """Reduce n/d, keep the denominator positive and at most four digits."""
    if n == 0:
        return 0, 1
    neg = (n < 0) != (d < 0)
    p, q = abs(n), abs(d)
    x = _gcd(p, q)
    p, q = p // x, q // x
    while q > _MAX_DENOMINATOR:
        p = (p + 5) // 10
        q = (q + 5) // 10
        x = _gcd(p, q)
        p, q = p // x, q // x
    return (-p if neg else p), q


def _fractionize(val: float) -> tuple[int, int]:
    """Find a nearby fraction for 0 <= val <= 1 by mediant search."""
    low_n, low_d = 0, 1
    high_n, high_d = 1, 1
    for i in range(100):
        test_low = low_d * val - low_n
        test_high = high_n - high_d * val
        if test_high < _PRECISION * high_d:
            break
        if test_low < _PRECISION * low_d:
            high_n, high_d = low_n, low_d
            break
        if i & 1:
            count = int(test_high / test_low)
            n = (count + 1) * low_n + high_n
            d = (count + 1) * low_d + high_d
            if n > 0x8000 or d > 0x10000:
                break
            high_n, high_d = n - low_n, d - low_d
            low_n, low_d = n, d
        else:
            count = int(test_low / test_high)
            n = low_n + (count + 1) * high_n
            d = low_d + (count + 1) * high_d
            if n > 0x10000 or d > 0x10000:
                break
            low_n, low_d = n - high_n, d - high_d
            high_n, high_d = n, d
    return high_n, high_d


def _round_half_away(x: float) -> int:
    r = math.floor(abs(x) + 0.5)
    return -r if x < 0 else r


class Fraction:
    """A fraction n/d whose denominator is kept at most 10000 after arithmetic."""

    __slots__ = ("_n", "_d")

    def __init__(self, value: int | float | Fraction = 0, denominator: int | None = None):
        if denominator is None:
            if isinstance(value, Fraction):
                self._n, self._d = value._n, value._d
            elif isinstance(value, int):
                self._n, self._d = int(value), 1
            elif isinstance(value, float):
                self._n, self._d = self._from_float(value)
            else:
                raise TypeError(f"cannot make a Fraction from {type(value).__name__}")
            return
        if not isinstance(value, int) or not isinstance(denominator, int):
            raise TypeError("numerator and denominator must be integers")
        if denominator == 0:
            raise ZeroDivisionError("fraction with zero denominator")
        self._n, self._d = _simplify(value, denominator)

    @staticmethod
    def _from_float(f: float) -> tuple[int, int]:
        if not math.isfinite(f):
            raise ValueError(f"cannot convert {f!r} to a Fraction")
        if abs(f) < _SMALL:
            return 0, 1
        neg = f < 0
        if neg:
            f = -f
        rec = f > 1
        if rec:
            f = 1 / f
        n, d = _simplify(*_fractionize(f))
        if rec:
            n, d = d, n
        if neg:
            n = -n
        return n, d

    @staticmethod
    def _coerce(other: object) -> Fraction | None:
        if isinstance(other, Fraction):
            return other
        if isinstance(other, (int, float)):
            return Fraction(other)
        return None

    @property
    def numerator(self) -> int:
        return self._n

    @property
    def denominator(self) -> int:
        return self._d

    def __str__(self) -> str:
        return f"{self._n}/{self._d}"

    def __repr__(self) -> str:
        return f"Fraction({self._n}, {self._d})"

    def __hash__(self) -> int:
        return hash((self._n, self._d))

    def __eq__(self, other: object) -> bool:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return self._n * c._d == self._d * c._n

    def __lt__(self, other: object) -> bool:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return self._n * c._d < self._d * c._n

    def __le__(self, other: object) -> bool:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return self._n * c._d <= self._d * c._n

    def __gt__(self, other: object) -> bool:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return self._n * c._d > self._d * c._n

    def __ge__(self, other: object) -> bool:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return self._n * c._d >= self._d * c._n

    def __neg__(self) -> Fraction:
        return Fraction(-self._n, self._d)

    def __add__(self, other: object) -> Fraction:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        if self._d == c._d:
            return Fraction(self._n + c._n, self._d)
        return Fraction(self._n * c._d + c._n * self._d, self._d * c._d)

    def __radd__(self, other: object) -> Fraction:
        return self.__add__(other)

    def __sub__(self, other: object) -> Fraction:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        if self._d == c._d:
            return Fraction(self._n - c._n, self._d)
        return Fraction(self._n * c._d - c._n * self._d, self._d * c._d)

    def __rsub__(self, other: object) -> Fraction:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return c - self

    def __mul__(self, other: object) -> Fraction:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Fraction(self._n * c._n, self._d * c._d)

    def __rmul__(self, other: object) -> Fraction:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Fraction:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Fraction(self._n * c._d, self._d * c._n)

    def __rtruediv__(self, other: object) -> Fraction:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return c / self

    def __float__(self) -> float:
        return self._n / self._d

    def to_float(self) -> float:
        """Return the value as a float."""
        return float(self)

    def is_proper(self) -> bool:
        """True when the absolute value is below one."""
        return abs(self._n) < abs(self._d)

    def to_angle(self) -> float:
        """The fraction seen as the slope of a line, in degrees."""
        return math.degrees(math.atan2(self._n, self._d))

    @staticmethod
    def mediant(a: Fraction, b: Fraction) -> Fraction:
        """Return (a.n + b.n) / (a.d + b.d), which lies between a and b."""
        return Fraction(a._n + b._n, a._d + b._d)

    @staticmethod
    def with_denominator(a: Fraction, denominator: int) -> Fraction:
        """Approximate a by a fraction with the given denominator."""
        n = _round_half_away(a._n * denominator / a._d)
        return Fraction(n, denominator)