import pytest

from omwkit.algorithm import double_dabble, double_dabble128, double_dabble128_words
from omwkit.int128 import SignedInt128, UnsignedInt128


def _bcd_value(bcd: bytes) -> int:
    return int(bcd.hex())


def test_zero():
    assert double_dabble(0) == bytes(20)


def test_low_digits():
    bcd = double_dabble(1234)
    assert len(bcd) == 20
    assert bcd[-2:] == b"\x12\x34"
    assert bcd[:-2] == bytes(18)


def test_maximum_value():
    bcd = double_dabble(UnsignedInt128(-1))
    assert bcd.hex() == "0340282366920938463463374607431768211455"


@pytest.mark.parametrize("value", [1, 9, 10, 99, 100, 2**64, 2**64 - 1, 10**38, 2**127 + 12345])
def test_round_trip(value):
    assert _bcd_value(double_dabble(value)) == value


def test_every_nibble_is_a_digit():
    bcd = double_dabble(2**128 - 1)
    assert all((b >> 4) < 10 and (b & 0x0F) < 10 for b in bcd)


def test_halves_and_words_agree():
    value = UnsignedInt128.from_halves(0x0123456789ABCDEF, 0x0FEDCBA987654321)
    expected = double_dabble(value)
    assert double_dabble128(0x0123456789ABCDEF, 0x0FEDCBA987654321) == expected
    assert double_dabble128_words(0x01234567, 0x89ABCDEF, 0x0FEDCBA9, 0x87654321) == expected
    assert _bcd_value(expected) == int(value)


def test_signed_input_uses_bits():
    assert double_dabble(SignedInt128(-1)) == double_dabble(UnsignedInt128(-1))
    assert double_dabble(-1) == double_dabble(2**128 - 1)