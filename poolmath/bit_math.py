"""Checked multiply/divide helpers over u128 and Q64.64 values."""

from __future__ import annotations

from .errors import ErrorCode, WhirlpoolError
from .u256 import U64_MAX, U128_MAX, U256Muldiv

Q64_RESOLUTION = 64
Q64_MASK = 0xFFFF_FFFF_FFFF_FFFF
TO_Q64 = 1 << Q64_RESOLUTION


def checked_mul_div(n0: int, n1: int, d: int) -> int:
    """Compute ``n0 * n1 / d`` rounded down."""
    return checked_mul_div_round_up_if(n0, n1, d, False)


def checked_mul_div_round_up(n0: int, n1: int, d: int) -> int:
    """Compute ``n0 * n1 / d`` rounded up."""
    return checked_mul_div_round_up_if(n0, n1, d, True)


def checked_mul_div_round_up_if(n0: int, n1: int, d: int, round_up: bool) -> int:
    """Compute ``n0 * n1 / d``; the product must fit in 128 bits."""
    if d == 0:
        raise WhirlpoolError(ErrorCode.DIVIDE_BY_ZERO)
    p = n0 * n1
    if p > U128_MAX:
        raise WhirlpoolError(ErrorCode.MUL_DIV_OVERFLOW)
    q, r = divmod(p, d)
    return q + 1 if round_up and r > 0 else q


def checked_mul_shift_right(n0: int, n1: int) -> int:
    """Multiply an integer by a Q64.64 value, rounding down to a u64."""
    return checked_mul_shift_right_round_up_if(n0, n1, False)


def checked_mul_shift_right_round_up_if(n0: int, n1: int, round_up: bool) -> int:
    """Multiply an integer by a Q64.64 value and return the u64 integer part."""
    if n0 == 0 or n1 == 0:
        return 0
    p = n0 * n1
    if p > U128_MAX:
        raise WhirlpoolError(ErrorCode.MULTIPLICATION_SHIFT_RIGHT_OVERFLOW)
    result = p >> Q64_RESOLUTION
    should_round = round_up and (p & Q64_MASK) > 0
    if should_round and result == U64_MAX:
        raise WhirlpoolError(ErrorCode.MULTIPLICATION_OVERFLOW)
    return result + 1 if should_round else result


def div_round_up(n: int, d: int) -> int:
    """Divide rounding up."""
    return div_round_up_if(n, d, True)


def div_round_up_if(n: int, d: int, round_up: bool) -> int:
    """Divide, rounding up when ``round_up`` is set."""
    if d == 0:
        raise WhirlpoolError(ErrorCode.DIVIDE_BY_ZERO)
    q, r = divmod(n, d)
    return q + 1 if round_up and r > 0 else q


def div_round_up_if_u256(n: U256Muldiv, d: U256Muldiv, round_up: bool) -> int:
    """Divide two 256-bit values and narrow the quotient to 128 bits."""
    quotient, remainder = n.div(d, round_up)
    if round_up and not remainder.is_zero():
        quotient = quotient.add(U256Muldiv(1))
    return quotient.try_into_u128()