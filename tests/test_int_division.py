import pytest
from hypothesis import given
from hypothesis import strategies as st

from poolmath.int_division import ceil_division, floor_division


@given(st.integers(-(2**31), 2**31 - 1), st.integers(1, 2**31 - 1))
def test_floor_division_brackets_quotient(dividend, divisor):
    q = floor_division(dividend, divisor)
    assert q * divisor <= dividend < (q + 1) * divisor


@given(st.integers(0, 2**128 - 1), st.integers(1, 2**128 - 1))
def test_ceil_division_brackets_quotient(dividend, divisor):
    q = ceil_division(dividend, divisor)
    assert (q - 1) * divisor < dividend <= q * divisor


def test_floor_division_negative_rounds_down():
    assert floor_division(-1, 4) == -1


def test_floor_division_exact_negative():
    assert floor_division(-8, 4) == -2


def test_ceil_division_rounds_up():
    assert ceil_division(7, 2) == 4


@pytest.mark.parametrize("divisor", [0, -3])
def test_floor_division_rejects_non_positive_divisor(divisor):
    with pytest.raises(ValueError):
        floor_division(5, divisor)


@pytest.mark.parametrize("divisor", [0, -1])
def test_ceil_division_rejects_non_positive_divisor(divisor):
    with pytest.raises(ValueError):
        ceil_division(5, divisor)