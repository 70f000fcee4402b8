import pytest
from hypothesis import given
from hypothesis import strategies as st

from poolmath.errors import ErrorCode, WhirlpoolError
from poolmath.u256 import (
    U128_MAX,
    U256_MAX,
    U64_MAX,
    U256Muldiv,
    hi_lo,
    mul_u256,
    u256_from_le_bytes,
    u256_to_le_bytes,
    u256_try_into_u64,
    u256_try_into_u128,
)

u256s = st.integers(min_value=0, max_value=U256_MAX)
u128s = st.integers(min_value=0, max_value=U128_MAX)
nonzero_u256s = st.integers(min_value=1, max_value=U256_MAX)


def test_from_parts_word_layout():
    value = U256Muldiv.from_parts(5, 7)
    assert value.get_word(0) == 7
    assert value.get_word(1) == 0
    assert value.get_word(2) == 5
    assert value.get_word(3) == 0


def test_get_word_out_of_range():
    with pytest.raises(IndexError):
        U256Muldiv(1).get_word(4)


def test_constructor_rejects_out_of_range():
    with pytest.raises(ValueError):
        U256Muldiv(U256_MAX + 1)
    with pytest.raises(ValueError):
        U256Muldiv(-1)


def test_from_parts_rejects_oversized_half():
    with pytest.raises(ValueError):
        U256Muldiv.from_parts(U128_MAX + 1, 0)


@given(u256s)
def test_shift_word_left_then_right(x):
    value = U256Muldiv(x)
    shifted = value.checked_shift_word_left()
    if value.get_word(3) > 0:
        assert shifted is None
    else:
        assert shifted is not None
        assert shifted.shift_word_right() == value
        assert shifted == value.shift_word_left()


@given(u256s, u256s)
def test_add_sub_round_trip(a, b):
    x, y = U256Muldiv(a), U256Muldiv(b)
    assert x.add(y).sub(y) == x
    assert x.sub(y).add(y) == x


@given(u256s)
def test_add_inverse_sums_to_zero(a):
    x = U256Muldiv(a)
    assert x.add(x.get_add_inverse()).is_zero()


def test_max_plus_one_wraps_to_zero():
    assert U256Muldiv(U256_MAX).add(U256Muldiv(1)).is_zero()
    assert U256Muldiv(0).sub(U256Muldiv(1)) == U256Muldiv(U256_MAX)


@given(u128s, u128s)
def test_mul_matches_mul_u256(a, b):
    assert U256Muldiv(a).mul(U256Muldiv(b)) == mul_u256(a, b)


@given(u256s, nonzero_u256s)
def test_div_invariant(n, d):
    quotient, remainder = U256Muldiv(n).div(U256Muldiv(d), True)
    assert remainder < U256Muldiv(d)
    assert int(quotient) * d + int(remainder) == n


@given(u256s, nonzero_u256s)
def test_div_without_remainder_returns_zero_remainder(n, d):
    with_rem, _ = U256Muldiv(n).div(U256Muldiv(d), True)
    quotient, remainder = U256Muldiv(n).div(U256Muldiv(d), False)
    assert remainder.is_zero()
    assert quotient == with_rem


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        U256Muldiv(10).div(U256Muldiv(0), True)


def test_try_into_u128_limits():
    assert U256Muldiv(U128_MAX).try_into_u128() == U128_MAX
    with pytest.raises(WhirlpoolError) as info:
        U256Muldiv(U128_MAX + 1).try_into_u128()
    assert info.value.code is ErrorCode.NUMBER_DOWN_CAST_ERROR


@given(u256s, u256s)
def test_comparisons_are_consistent(a, b):
    x, y = U256Muldiv(a), U256Muldiv(b)
    assert (x < y) == (not x >= y)
    assert (x > y) == (not x <= y)
    assert (x == y) == (x <= y and x >= y)


def test_str_decimal():
    assert str(U256Muldiv(12345)) == "12345"
    assert str(U256Muldiv(0)) == "0"
    assert str(U256Muldiv(U256_MAX)) == (
        "115792089237316195423570985008687907853269984665640564039457584007913129639935"
    )


@given(st.integers(min_value=0, max_value=U64_MAX), st.integers(min_value=0, max_value=U64_MAX))
def test_hi_lo_splits_back(hi, lo):
    joined = hi_lo(hi, lo)
    assert joined >> 64 == hi
    assert joined & U64_MAX == lo


def test_mul_u256_rejects_oversized():
    with pytest.raises(ValueError):
        mul_u256(U128_MAX + 1, 1)


def test_le_bytes_layout():
    assert u256_to_le_bytes(1) == b"\x01" + b"\x00" * 31
    assert len(u256_to_le_bytes(U256_MAX)) == 32


@given(u256s)
def test_le_bytes_round_trip(x):
    assert u256_from_le_bytes(u256_to_le_bytes(x)) == x


def test_from_le_bytes_ignores_trailing_and_rejects_short():
    data = u256_to_le_bytes(42) + b"\xff\xff"
    assert u256_from_le_bytes(data) == 42
    with pytest.raises(ValueError):
        u256_from_le_bytes(b"\x00" * 31)


def test_try_into_u64_limits():
    assert u256_try_into_u64(U64_MAX) == U64_MAX
    with pytest.raises(WhirlpoolError) as info:
        u256_try_into_u64(U64_MAX + 1)
    assert info.value.code is ErrorCode.NUMBER_CAST_ERROR


def test_try_into_u128_function_limits():
    assert u256_try_into_u128(U128_MAX) == U128_MAX
    with pytest.raises(WhirlpoolError) as info:
        u256_try_into_u128(U128_MAX + 1)
    assert info.value.code is ErrorCode.NUMBER_CAST_ERROR