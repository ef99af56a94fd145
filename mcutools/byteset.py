"""A set of integers 0..255 stored as a bitmap."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

UNIVERSE = 256
_FULL = (1 << UNIVERSE) - 1


def _check(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"ByteSet elements must be integers, got {type(value).__name__}")
    if not 0 <= value < UNIVERSE:
        raise ValueError(f"ByteSet elements must be in 0..255, got {value}")
    return value


class ByteSet:
    """A mutable set of the values 0..255 with a cursor for stepping through it."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[int] = ()):
        self._bits = 0
        self._current: int | None = None
        for v in values:
            self.add(v)

    @classmethod
    def _from_bits(cls, bits: int) -> ByteSet:
        obj = cls()
        obj._bits = bits
        return obj

    def clear(self) -> None:
        self._bits = 0

    def invert(self, value: int | None = None) -> None:
        """Flip one element, or every element when value is omitted."""
        if value is None:
            self._bits ^= _FULL
        else:
            self._bits ^= 1 << _check(value)

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def add(self, value: int) -> None:
        self._bits |= 1 << _check(value)

    def discard(self, value: int) -> None:
        self._bits &= ~(1 << _check(value))

    def __contains__(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < UNIVERSE:
            return False
        return bool(self._bits >> value & 1)

    def __iter__(self) -> Iterator[int]:
        bits = self._bits
        while bits:
            low = bits & -bits
            yield low.bit_length() - 1
            bits ^= low

    def __repr__(self) -> str:
        return f"ByteSet({list(self)!r})"

    def copy(self) -> ByteSet:
        return ByteSet._from_bits(self._bits)

    def __or__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return ByteSet._from_bits(self._bits | other._bits)

    def __sub__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return ByteSet._from_bits(self._bits & ~other._bits)

    def __and__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return ByteSet._from_bits(self._bits & other._bits)

    def __ior__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        self._bits |= other._bits
        return self

    def __isub__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        self._bits &= ~other._bits
        return self

    def __iand__(self, other: object) -> ByteSet:
        if not isinstance(other, ByteSet):
            return NotImplemented
        self._bits &= other._bits
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteSet):
            return NotImplemented
        return self._bits == other._bits

    def __le__(self, other: object) -> bool:
        """True when every element of self is in other."""
        if not isinstance(other, ByteSet):
            return NotImplemented
        return self._bits & ~other._bits == 0

    def _find_next(self, start: int) -> int | None:
        rest = self._bits >> start
        if rest == 0:
            self._current = None
        else:
            self._current = start + (rest & -rest).bit_length() - 1
        return self._current

    def _find_prev(self, start: int) -> int | None:
        rest = self._bits & ((1 << (start + 1)) - 1)
        self._current = rest.bit_length() - 1 if rest else None
        return self._current

    def first(self) -> int | None:
        """Move the cursor to the smallest element and return it, or None."""
        return self._find_next(0)

    def next(self) -> int | None:
        """Move the cursor to the next larger element and return it, or None."""
        if self._current is None or self._current >= UNIVERSE - 1:
            self._current = None
            return None
        return self._find_next(self._current + 1)

    def prev(self) -> int | None:
        """Move the cursor to the next smaller element and return it, or None."""
        if self._current is None or self._current <= 0:
            self._current = None
            return None
        return self._find_prev(self._current - 1)

    def last(self) -> int | None:
        """Move the cursor to the largest element and return it, or None."""
        return self._find_prev(UNIVERSE - 1)