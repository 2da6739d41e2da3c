import pytest

from omwkit.int128 import SignedInt128, UnsignedInt128

ALL64 = 0xFFFFFFFFFFFFFFFF


def test_signed_max_min_builtins():
    values = [SignedInt128(3), SignedInt128(1), SignedInt128(8), SignedInt128(-6)]
    assert max(values[:2]) == SignedInt128.from_halves(0, 3)
    assert max(values[:3]) == SignedInt128.from_halves(0, 8)
    assert max(values) == SignedInt128.from_halves(0, 8)
    assert min(values[:2]) == SignedInt128.from_halves(0, 1)
    assert min(values[:3]) == SignedInt128.from_halves(0, 1)
    assert min(values) == SignedInt128.from_halves(ALL64, 0xFFFFFFFFFFFFFFFA)


def test_unsigned_max_min_builtins():
    values = [UnsignedInt128(3), UnsignedInt128(1), UnsignedInt128(8), UnsignedInt128(-6)]
    assert max(values[:3]) == UnsignedInt128.from_halves(0, 8)
    assert max(values) == UnsignedInt128.from_halves(ALL64, 0xFFFFFFFFFFFFFFFA)
    assert min(values) == UnsignedInt128.from_halves(0, 1)


def test_sign_extension_of_negative_input():
    value = SignedInt128(-1)
    assert value.hi() == ALL64
    assert value.lo() == ALL64
    assert value.his() == -1
    assert int(value) == -1
    assert value.is_negative()
    assert value.sign() == -1
    assert SignedInt128(0).sign() == 1


def test_unsigned_reads_bits_as_positive():
    assert int(UnsignedInt128(-1)) == (1 << 128) - 1


def test_from_words_matches_halves():
    words = UnsignedInt128.from_words(0x01234567, 0x89ABCDEF, 0x76543210, 0xFEDCBA98)
    assert words == UnsignedInt128.from_halves(0x0123456789ABCDEF, 0x76543210FEDCBA98)
    assert words.hi() == 0x0123456789ABCDEF
    assert words.lo() == 0x76543210FEDCBA98


def test_from_bytes_signed_and_unsigned():
    assert int(SignedInt128.from_bytes(b"\xff", signed=True)) == -1
    assert int(UnsignedInt128.from_bytes(b"\xff")) == 0xFF
    assert int(SignedInt128.from_bytes(b"")) == 0
    data = bytes(range(1, 17))
    assert UnsignedInt128.from_bytes(data).hi() == int.from_bytes(data[:8], "big")


def test_from_bytes_too_long():
    with pytest.raises(OverflowError):
        UnsignedInt128.from_bytes(bytes(17))


def test_out_of_range_inputs():
    with pytest.raises(ValueError):
        UnsignedInt128(1 << 128)
    with pytest.raises(ValueError):
        SignedInt128.from_halves(1 << 64, 0)
    with pytest.raises(ValueError):
        UnsignedInt128.from_words(1 << 32, 0, 0, 0)


def test_add_carry_and_sub_borrow():
    low_full = UnsignedInt128.from_halves(0, ALL64)
    carried = low_full + 1
    assert carried == UnsignedInt128.from_halves(1, 0)
    assert carried - 1 == low_full
    assert UnsignedInt128(0) - 1 == UnsignedInt128(-1)


def test_negation_is_twos_complement():
    assert -SignedInt128(5) == SignedInt128(-5)
    assert -(-SignedInt128(123)) == SignedInt128(123)
    assert +SignedInt128(7) == SignedInt128(7)
    assert ~UnsignedInt128(0) == UnsignedInt128(-1)


def test_bitwise_ops():
    a = UnsignedInt128.from_halves(ALL64, 0)
    b = UnsignedInt128.from_halves(0, ALL64)
    assert (a | b) == UnsignedInt128(-1)
    assert (a & b) == UnsignedInt128(0)
    assert (a ^ a) == UnsignedInt128(0)


def test_left_shift():
    one = UnsignedInt128(1)
    assert (one << 64) == UnsignedInt128.from_halves(1, 0)
    assert (one << 127).hi() == 1 << 63
    assert (one << 128) == UnsignedInt128(0)
    with pytest.raises(ValueError):
        one << -1


def test_right_shift_signed_is_arithmetic():
    value = SignedInt128(-1)
    assert (value >> 100) == SignedInt128(-1)
    assert (value >> 200) == SignedInt128(-1)
    assert (SignedInt128(-256) >> 4) == SignedInt128(-16)
    assert (SignedInt128(256) >> 200) == SignedInt128(0)


def test_right_shift_unsigned_is_logical():
    value = UnsignedInt128(-1)
    shifted = value >> 64
    assert shifted.hi() == 0
    assert shifted.lo() == ALL64
    assert (value >> 128) == UnsignedInt128(0)


def test_mixed_comparisons():
    assert SignedInt128(-1) < UnsignedInt128(0)
    assert SignedInt128(-1) != UnsignedInt128(-1)
    assert UnsignedInt128(-1) > SignedInt128(5)
    assert SignedInt128(5) == UnsignedInt128(5)
    assert SignedInt128(5) <= UnsignedInt128(5)
    assert UnsignedInt128(4) >= SignedInt128(-4)


def test_hash_and_index_follow_value():
    assert hash(SignedInt128(-3)) == hash(-3)
    assert [10, 20, 30][UnsignedInt128(2)] == 30
    assert repr(SignedInt128(-3)) == "SignedInt128(-3)"


def test_result_type_follows_left_operand():
    result = SignedInt128(1) + UnsignedInt128(2)
    assert isinstance(result, SignedInt128) and int(result) == 3