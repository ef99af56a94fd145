"""Angles held as degrees, minutes, seconds and ten-thousandths of a second."""

from __future__ import annotations

import math
import re
from enum import IntEnum

_TICKS_PER_SECOND = 10000
_PARSE = re.compile(r"[^0-9-]*(-?)([0-9]*)(?:.([0-9]{0,9}))?", re.DOTALL)


class AngleFormat(IntEnum):
    """How much of an angle to print: degrees, minutes, seconds or all."""

    D = 1
    M = 2
    S = 3
    T = 4


def _pad(value: int, width: int) -> str:
    zeros = sum(1 for k in range(1, width) if value < 10**k)
    return "0" * zeros + str(value)


class Angle:
    """An angle with whole degrees, minutes, seconds and 1/10000 seconds."""

    __slots__ = ("_d", "_m", "_s", "_t")

    def __init__(
        self,
        degrees: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        tenthousandths: int = 0,
    ):
        for part in (degrees, minutes, seconds, tenthousandths):
            if not isinstance(part, int):
                raise TypeError("angle parts must be integers; use Angle.from_float")
        self._d = degrees
        self._m = minutes
        self._s = seconds
        self._t = tenthousandths
        self._normalize()

    @classmethod
    def _raw(cls, d: int, m: int, s: int, t: int) -> Angle:
        obj = cls.__new__(cls)
        obj._d, obj._m, obj._s, obj._t = d, m, s, t
        return obj

    @classmethod
    def from_float(cls, alpha: float) -> Angle:
        """Build an angle from a value in degrees."""
        if not math.isfinite(alpha):
            raise ValueError(f"cannot make an Angle from {alpha!r}")
        a = abs(alpha)
        d = int(a)
        # 36,000,000 ticks per degree, split as 256 * 140625 to keep precision
        frac = (a - d) * 256
        p = math.floor(frac * 140625.0 + 0.5)
        t = p % _TICKS_PER_SECOND
        p //= _TICKS_PER_SECOND
        s = p % 60
        m = p // 60
        if alpha < 0:
            d = -d
        return cls._raw(d, m, s, t)

    @classmethod
    def parse(cls, text: str) -> Angle:
        """Parse a decimal degree string such as "-12.3456"."""
        if not re.search(r"[0-9-]", text):
            raise ValueError(f"no angle found in {text!r}")
        match = _PARSE.match(text)
        sign, whole, decimals = match.group(1), match.group(2), match.group(3) or ""
        d = int(whole) if whole else 0
        if sign:
            d = -d
        yy = int(decimals) if decimals else 0
        yy *= 10 ** (9 - len(decimals))
        yy = yy * 4 // 125
        yy = yy + (yy + 4) // 8
        t = yy % _TICKS_PER_SECOND
        yy //= _TICKS_PER_SECOND
        return cls._raw(d, yy // 60, yy % 60, t)

    @classmethod
    def from_radians(cls, rad: float) -> Angle:
        return cls.from_float(rad * 180.0 / math.pi)

    @property
    def degree(self) -> int:
        return self._d

    @property
    def minute(self) -> int:
        return self._m

    @property
    def second(self) -> int:
        return self._s

    @property
    def tenthousand(self) -> int:
        return self._t

    def format(self, mode: AngleFormat | int = AngleFormat.T) -> str:
        """Render as d.mm'ss"tttt, cut off after the part that mode names."""
        mode = AngleFormat(mode)
        parts = [f"{self._d}."]
        if mode >= AngleFormat.M:
            parts.append(_pad(self._m, 2) + "'")
        if mode >= AngleFormat.S:
            parts.append(_pad(self._s, 2) + '"')
        if mode >= AngleFormat.T:
            parts.append(_pad(self._t, 4))
        return "".join(parts)

    def __str__(self) -> str:
        return self.format(AngleFormat.T)

    def __repr__(self) -> str:
        return f"Angle({self._d}, {self._m}, {self._s}, {self._t})"

    def to_float(self) -> float:
        """The angle in degrees."""
        v = self._t + self._s * _TICKS_PER_SECOND + self._m * 600000
        val = ((1.0 / 140625.0) / 256) * v + abs(self._d)
        return -val if self._d < 0 else val

    def __float__(self) -> float:
        return self.to_float()

    def to_radians(self) -> float:
        return self.to_float() * math.pi / 180.0

    def _key(self) -> tuple[int, int, int, int]:
        return (self._d, self._m, self._s, self._t)

    def __hash__(self) -> int:
        return hash(self._key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._key() >= other._key()

    def __neg__(self) -> Angle:
        return Angle(-self._d, self._m, self._s, self._t)

    def __add__(self, other: object) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        d, m, s, t = self._key()
        if (d < 0) == (other._d < 0):
            d += other._d
            m, s, t = m + other._m, s + other._s, t + other._t
        else:
            magnitude = abs(d) - abs(other._d)
            d = -magnitude if d < 0 else magnitude
            m, s, t = m - other._m, s - other._s, t - other._t
        result = Angle._raw(d, m, s, t)
        result._normalize()
        return result

    def __sub__(self, other: object) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        d, m, s, t = self._key()
        if (d < 0) == (other._d < 0):
            d -= other._d
            m, s, t = m - other._m, s - other._s, t - other._t
        else:
            magnitude = abs(d) + abs(other._d)
            d = -magnitude if d < 0 else magnitude
            m, s, t = m + other._m, s + other._s, t + other._t
        result = Angle._raw(d, m, s, t)
        result._normalize()
        return result

    def __mul__(self, factor: object) -> Angle:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Angle.from_float(self.to_float() * factor)

    def __rmul__(self, factor: object) -> Angle:
        return self.__mul__(factor)

    def __truediv__(self, other: object) -> Angle | float:
        """Divide by a number to get an Angle, or by an Angle to get a ratio."""
        if isinstance(other, Angle):
            return self.to_float() / other.to_float()
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return Angle.from_float(self.to_float() / other)

    def _normalize(self) -> None:
        neg = self._d < 0
        d = abs(self._d)
        carry, t = divmod(self._t, _TICKS_PER_SECOND)
        carry, s = divmod(self._s + carry, 60)
        carry, m = divmod(self._m + carry, 60)
        d += carry
        self._d = -d if neg else d
        self._m, self._s, self._t = m, s, t