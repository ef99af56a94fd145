"""Bit-level tools for IEEE 754 single precision floats."""

from __future__ import annotations

import math
import struct

_MANT_MASK = 0x7FFFFF


def _bits(number: float) -> int:
    try:
        packed = struct.pack("<f", number)
    except OverflowError:
        packed = struct.pack("<f", math.copysign(math.inf, number))
    return struct.unpack("<I", packed)[0]


def _from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & 0xFFFFFFFF))[0]


def _parts(number: float) -> tuple[int, int, int]:
    b = _bits(number)
    return b >> 31, (b >> 23) & 0xFF, b & _MANT_MASK


def _join(s: int, e: int, m: int) -> float:
    return _from_bits(((s & 1) << 31) | ((e & 0xFF) << 23) | (m & _MANT_MASK))


def _check_order(byteorder: str) -> str:
    if byteorder not in ("little", "big"):
        raise ValueError(f"byteorder must be 'little' or 'big', got {byteorder!r}")
    return byteorder


def dump_float(number: float) -> str:
    """Sign, exponent and mantissa of a float as tab-separated hex."""
    s, e, m = _parts(number)
    return f"{s:X}\t{e:X}\t{m:X}"


def float_to_double_packed(number: float, byteorder: str = "little") -> bytes:
    """Pack a float into the eight bytes of a 64-bit double.

    Only the exponent is rebased; special values and zero are not treated
    specially, and the low 29 mantissa bits are zero.
    """
    _check_order(byteorder)
    s, e, m = _parts(number)
    de = (e - 127 + 1023) & 0x7FF
    bits = (s << 63) | (de << 52) | (m << 29)
    return bits.to_bytes(8, byteorder)


def double_packed_to_float(data: bytes, byteorder: str = "little") -> float:
    """Unpack eight bytes of a 64-bit double into a 32-bit float value.

    The mantissa is truncated to 23 bits and the exponent is not checked
    for overflow: it wraps to eight bits.
    """
    _check_order(byteorder)
    data = bytes(data)
    if len(data) != 8:
        raise ValueError(f"a packed double needs 8 bytes, got {len(data)}")
    bits = int.from_bytes(data, byteorder)
    s = bits >> 63
    e = ((bits >> 52) & 0x7FF) - 1023 + 127
    m = (bits >> 29) & _MANT_MASK
    return _join(s, e, m)


def is_nan(number: float) -> bool:
    """True for the default quiet NaN pattern."""
    return _bits(number) >> 16 == 0x7FC0


def is_inf(number: float) -> int:
    """1 for +inf, -1 for -inf, 0 otherwise."""
    b = _bits(number)
    if (b >> 16) & 0xFF != 0x80:
        return 0
    top = b >> 24
    if top == 0x7F:
        return 1
    if top == 0xFF:
        return -1
    return 0


def is_pos_inf(number: float) -> bool:
    return _bits(number) >> 16 == 0x7F80


def is_neg_inf(number: float) -> bool:
    return _bits(number) >> 16 == 0xFF80


def sign(number: float) -> int:
    """The sign bit: 1 for negative numbers."""
    return _parts(number)[0]


def exponent(number: float) -> int:
    """The unbiased exponent."""
    return _parts(number)[1] - 127


def mantissa(number: float) -> int:
    """The 23 stored mantissa bits."""
    return _parts(number)[2]


def pow2(number: float, n: int) -> float:
    """Multiply by 2**n through the exponent; out of range gives signed infinity."""
    s, e, m = _parts(number)
    e += n
    if 0 <= e < 256:
        return _join(s, e, m)
    return -math.inf if s else math.inf


def pow2_fast(number: float, n: int) -> float:
    """Add n to the exponent field without any overflow check."""
    s, e, m = _parts(number)
    return _join(s, e + n, m)


def flip(number: float) -> float:
    """Negate the exponent field and complement the mantissa."""
    s, e, m = _parts(number)
    return _join(s, -e, _MANT_MASK - m)