"""Binary to packed BCD conversion (double dabble)."""

from __future__ import annotations

from .int128 import Int128Base, UnsignedInt128

_BCD_BYTES = 20
_HALF_MASK = (1 << 64) - 1
_WORD_MASK = (1 << 32) - 1


def double_dabble(value) -> bytes:
    """Convert a 128-bit unsigned value to 20 bytes of packed BCD.

    The most significant digit pair comes first. Signed inputs are taken
    by their two's complement bits.
    """
    if isinstance(value, Int128Base):
        bits = value.hi() << 64 | value.lo()
    else:
        bits = int(UnsignedInt128(value))
    digits = f"{bits:0{_BCD_BYTES * 2}d}"
    return bytes.fromhex(digits)


def double_dabble128(high: int, low: int) -> bytes:
    """Convert a value given as two 64-bit halves to packed BCD."""
    return double_dabble(UnsignedInt128.from_halves(high & _HALF_MASK, low & _HALF_MASK))


def double_dabble128_words(hh: int, lh: int, hl: int, ll: int) -> bytes:
    """Convert a value given as four 32-bit words to packed BCD."""
    return double_dabble(
        UnsignedInt128.from_words(hh & _WORD_MASK, lh & _WORD_MASK, hl & _WORD_MASK, ll & _WORD_MASK)
    )