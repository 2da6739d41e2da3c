"""128-bit two's complement integers with signed and unsigned flavours."""

from __future__ import annotations

import operator
from typing import Union

_WIDTH = 128
_HALF_WIDTH = 64
_MASK = (1 << _WIDTH) - 1
_HALF_MASK = (1 << _HALF_WIDTH) - 1
_WORD_MASK = (1 << 32) - 1
_MSB = 1 << (_WIDTH - 1)
_MAX_BYTES = _WIDTH // 8

_MIN_INPUT = -(1 << (_WIDTH - 1))
_MAX_INPUT = _MASK

IntLike = Union[int, "Int128Base"]


def _check_range(value: int, mask: int, what: str) -> int:
    if not 0 <= value <= mask:
        raise ValueError(f"{what} out of range: {value}")
    return value


class Int128Base:
    """A 128-bit value stored as two's complement bits.

    Plain integers are accepted from -2**127 up to 2**128 - 1 and wrapped
    into 128 bits, so negative values are sign extended.
    """

    __slots__ = ("_bits",)
    _signed = False

    def __init__(self, value: IntLike = 0) -> None:
        self._bits = self._to_bits(value)

    @staticmethod
    def _to_bits(value: IntLike) -> int:
        if isinstance(value, Int128Base):
            return value._bits
        value = operator.index(value)
        if not _MIN_INPUT <= value <= _MAX_INPUT:
            raise ValueError(f"value does not fit into 128 bits: {value}")
        return value & _MASK

    @classmethod
    def _from_bits(cls, bits: int):
        obj = cls.__new__(cls)
        obj._bits = bits & _MASK
        return obj

    @classmethod
    def from_halves(cls, high: int, low: int):
        """Build from the high and low 64-bit halves."""
        high = _check_range(operator.index(high), _HALF_MASK, "high half")
        low = _check_range(operator.index(low), _HALF_MASK, "low half")
        return cls._from_bits((high << _HALF_WIDTH) | low)

    @classmethod
    def from_words(cls, hh: int, lh: int, hl: int, ll: int):
        """Build from four 32-bit words, most significant first."""
        bits = 0
        for word in (hh, lh, hl, ll):
            word = _check_range(operator.index(word), _WORD_MASK, "word")
            bits = (bits << 32) | word
        return cls._from_bits(bits)

    @classmethod
    def from_bytes(cls, data: bytes, signed: bool = False):
        """Read a big endian buffer of at most 16 bytes.

        With ``signed`` the most significant bit of the first byte is
        extended. An empty buffer yields zero.
        """
        data = bytes(data)
        if len(data) > _MAX_BYTES:
            raise OverflowError("more than 16 bytes do not fit into 128 bits")
        if not data:
            return cls._from_bits(0)
        return cls._from_bits(int.from_bytes(data, "big", signed=signed))

    def hi(self) -> int:
        """The high 64 bits, unsigned."""
        return self._bits >> _HALF_WIDTH

    def lo(self) -> int:
        """The low 64 bits, unsigned."""
        return self._bits & _HALF_MASK

    def his(self) -> int:
        """The high 64 bits, read as a signed value."""
        high = self.hi()
        return high - (1 << _HALF_WIDTH) if high & (1 << (_HALF_WIDTH - 1)) else high

    def __int__(self) -> int:
        if self._signed and self._bits & _MSB:
            return self._bits - (1 << _WIDTH)
        return self._bits

    def __index__(self) -> int:
        return int(self)

    def __hash__(self) -> int:
        return hash(int(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def _coerce(self, other) -> int | None:
        if isinstance(other, (Int128Base, int)):
            return self._to_bits(other)
        return None

    def __add__(self, other):
        bits = self._coerce(other)
        if bits is None:
            return NotImplemented
        return self._from_bits(self._bits + bits)

    def __sub__(self, other):
        bits = self._coerce(other)
        if bits is None:
            return NotImplemented
        return self._from_bits(self._bits - bits)

    def __and__(self, other):
        bits = self._coerce(other)
        if bits is None:
            return NotImplemented
        return self._from_bits(self._bits & bits)

    def __or__(self, other):
        bits = self._coerce(other)
        if bits is None:
            return NotImplemented
        return self._from_bits(self._bits | bits)

    def __xor__(self, other):
        bits = self._coerce(other)
        if bits is None:
            return NotImplemented
        return self._from_bits(self._bits ^ bits)

    def __invert__(self):
        return self._from_bits(~self._bits)

    def __neg__(self):
        return self._from_bits(-self._bits)

    def __pos__(self):
        return self._from_bits(self._bits)

    def __lshift__(self, count: int):
        count = operator.index(count)
        if count < 0:
            raise ValueError("negative shift count")
        if count >= _WIDTH:
            return self._from_bits(0)
        return self._from_bits(self._bits << count)

    @staticmethod
    def _as_number(other) -> int | None:
        if isinstance(other, Int128Base):
            return int(other)
        if isinstance(other, int):
            return other
        return None

    def __eq__(self, other) -> bool:
        number = self._as_number(other)
        if number is None:
            return NotImplemented
        return int(self) == number

    def __lt__(self, other) -> bool:
        number = self._as_number(other)
        if number is None:
            return NotImplemented
        return int(self) < number

    def __le__(self, other) -> bool:
        number = self._as_number(other)
        if number is None:
            return NotImplemented
        return int(self) <= number

    def __gt__(self, other) -> bool:
        number = self._as_number(other)
        if number is None:
            return NotImplemented
        return int(self) > number

    def __ge__(self, other) -> bool:
        number = self._as_number(other)
        if number is None:
            return NotImplemented
        return int(self) >= number


class SignedInt128(Int128Base):
    """128-bit integer read as two's complement signed value."""

    __slots__ = ()
    _signed = True

    def is_negative(self) -> bool:
        return bool(self._bits & _MSB)

    def sign(self) -> int:
        """-1 if negative, 1 otherwise (zero counts as positive)."""
        return -1 if self.is_negative() else 1

    def __rshift__(self, count: int) -> "SignedInt128":
        count = operator.index(count)
        if count < 0:
            raise ValueError("negative shift count")
        return self._from_bits(int(self) >> count)


class UnsignedInt128(Int128Base):
    """128-bit integer read as unsigned value."""

    __slots__ = ()
    _signed = False

    def __rshift__(self, count: int) -> "UnsignedInt128":
        count = operator.index(count)
        if count < 0:
            raise ValueError("negative shift count")
        return self._from_bits(self._bits >> count)