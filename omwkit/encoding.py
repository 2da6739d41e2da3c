"""Big endian encoding and decoding of fixed width integers."""

from __future__ import annotations

from .int128 import Int128Base, SignedInt128, UnsignedInt128


def _decode(data, size: int, signed: bool, name: str) -> int:
    if data is None:
        raise ValueError(f"{name}: no data")
    data = bytes(data)
    if not data:
        raise ValueError(f"{name}: no data")
    if len(data) > size:
        raise OverflowError(f"{name}: {len(data)} bytes do not fit into {size} bytes")
    return int.from_bytes(data, "big", signed=signed)


def decode_i16(data) -> int:
    """Decode up to 2 big endian bytes as a signed value (sign extended)."""
    return _decode(data, 2, True, "decode_i16")


def decode_ui16(data) -> int:
    """Decode up to 2 big endian bytes as an unsigned value."""
    return _decode(data, 2, False, "decode_ui16")


def decode_i32(data) -> int:
    """Decode up to 4 big endian bytes as a signed value (sign extended)."""
    return _decode(data, 4, True, "decode_i32")


def decode_ui32(data) -> int:
    """Decode up to 4 big endian bytes as an unsigned value."""
    return _decode(data, 4, False, "decode_ui32")


def decode_i64(data) -> int:
    """Decode up to 8 big endian bytes as a signed value (sign extended)."""
    return _decode(data, 8, True, "decode_i64")


def decode_ui64(data) -> int:
    """Decode up to 8 big endian bytes as an unsigned value."""
    return _decode(data, 8, False, "decode_ui64")


def decode_i128(data) -> SignedInt128:
    """Decode up to 16 big endian bytes as a signed 128-bit value."""
    return SignedInt128(_decode(data, 16, True, "decode_i128"))


def decode_ui128(data) -> UnsignedInt128:
    """Decode up to 16 big endian bytes as an unsigned 128-bit value."""
    return UnsignedInt128(_decode(data, 16, False, "decode_ui128"))


def _encode(value, size: int, name: str) -> bytes:
    if value is None:
        raise ValueError(f"{name}: no value")
    value = int(value)
    bits = size * 8
    if not -(1 << (bits - 1)) <= value < (1 << bits):
        raise ValueError(f"{name}: value does not fit into {bits} bits: {value}")
    return (value & ((1 << bits) - 1)).to_bytes(size, "big")


def encode_16(value: int) -> bytes:
    """Encode a signed or unsigned 16-bit value as 2 big endian bytes."""
    return _encode(value, 2, "encode_16")


def encode_32(value: int) -> bytes:
    """Encode a signed or unsigned 32-bit value as 4 big endian bytes."""
    return _encode(value, 4, "encode_32")


def encode_64(value: int) -> bytes:
    """Encode a signed or unsigned 64-bit value as 8 big endian bytes."""
    return _encode(value, 8, "encode_64")


def encode_128(value) -> bytes:
    """Encode a 128-bit value (or a plain integer) as 16 big endian bytes."""
    if value is None:
        raise ValueError("encode_128: no value")
    if not isinstance(value, Int128Base):
        value = UnsignedInt128(value)
    return value.hi().to_bytes(8, "big") + value.lo().to_bytes(8, "big")