import pytest

from omwkit.encoding import (
    decode_i16,
    decode_i32,
    decode_i64,
    decode_i128,
    decode_ui16,
    decode_ui32,
    decode_ui64,
    decode_ui128,
    encode_16,
    encode_32,
    encode_64,
    encode_128,
)
from omwkit.int128 import SignedInt128, UnsignedInt128


def test_encode_16_byte_order():
    assert encode_16(0x1234) == bytes([0x12, 0x34])


def test_encode_32_byte_order():
    assert encode_32(0x12345678) == bytes([0x12, 0x34, 0x56, 0x78])


def test_encode_negative_is_twos_complement():
    assert encode_16(-1) == b"\xff\xff"
    assert encode_64(-1) == b"\xff" * 8


@pytest.mark.parametrize("value", [0, 1, 0x7FFF, -0x8000, -1, 0x1234])
def test_i16_round_trip(value):
    assert decode_i16(encode_16(value)) == value


@pytest.mark.parametrize("value", [0, 0xFFFF, 0x8000, 0x00FF])
def test_ui16_round_trip(value):
    assert decode_ui16(encode_16(value)) == value


@pytest.mark.parametrize("value", [0, -1, 0x7FFFFFFF, -0x80000000, 123456])
def test_i32_round_trip(value):
    assert decode_i32(encode_32(value)) == value


@pytest.mark.parametrize("value", [0, 0xFFFFFFFF, 0x80000000])
def test_ui32_round_trip(value):
    assert decode_ui32(encode_32(value)) == value


@pytest.mark.parametrize("value", [0, -1, (1 << 63) - 1, -(1 << 63)])
def test_i64_round_trip(value):
    assert decode_i64(encode_64(value)) == value


@pytest.mark.parametrize("value", [0, (1 << 64) - 1, 1 << 63])
def test_ui64_round_trip(value):
    assert decode_ui64(encode_64(value)) == value


def test_short_signed_buffer_is_sign_extended():
    assert decode_i32(b"\xff") == -1
    assert decode_i64(b"\xff\xfe") == decode_i16(b"\xff\xfe")


def test_short_unsigned_buffer_is_not_sign_extended():
    assert decode_ui32(b"\x80") == 0x80
    assert decode_ui64(b"\x12\x34") == 0x1234


def test_int128_round_trip():
    value = SignedInt128(-12345678901234567890)
    decoded = decode_i128(encode_128(value))
    assert isinstance(decoded, SignedInt128)
    assert decoded == value

    uvalue = UnsignedInt128.from_halves(0x0123456789ABCDEF, 0xFEDCBA9876543210)
    assert decode_ui128(encode_128(uvalue)) == uvalue


def test_encode_128_halves():
    value = UnsignedInt128.from_halves(0x0102030405060708, 0x090A0B0C0D0E0F10)
    assert encode_128(value) == bytes(range(1, 17))


def test_decode_i128_short_negative():
    assert decode_i128(b"\xff") == SignedInt128(-1)
    assert decode_ui128(b"\xff") == UnsignedInt128(0xFF)


@pytest.mark.parametrize(
    "decoder", [decode_i16, decode_ui16, decode_i32, decode_ui32, decode_i64, decode_ui64, decode_i128, decode_ui128]
)
def test_empty_data_raises(decoder):
    with pytest.raises(ValueError):
        decoder(b"")
    with pytest.raises(ValueError):
        decoder(None)


@pytest.mark.parametrize(
    "decoder, size",
    [
        (decode_i16, 2),
        (decode_ui16, 2),
        (decode_i32, 4),
        (decode_ui32, 4),
        (decode_i64, 8),
        (decode_ui64, 8),
        (decode_i128, 16),
        (decode_ui128, 16),
    ],
)
def test_too_much_data_overflows(decoder, size):
    with pytest.raises(OverflowError):
        decoder(bytes(size + 1))


def test_encode_out_of_range():
    with pytest.raises(ValueError):
        encode_16(0x10000)
    with pytest.raises(ValueError):
        encode_32(-(1 << 31) - 1)
    with pytest.raises(ValueError):
        encode_64(None)