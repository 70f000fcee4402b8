"""Applying signed liquidity deltas to unsigned liquidity amounts."""

from __future__ import annotations

from .errors import ErrorCode, WhirlpoolError
from .u256 import U128_MAX

I128_MAX = (1 << 127) - 1


def add_liquidity_delta(liquidity: int, delta: int) -> int:
    """Add a signed delta to a u128 liquidity, failing on overflow or underflow."""
    if delta == 0:
        return liquidity
    if delta > 0:
        result = liquidity + delta
        if result > U128_MAX:
            raise WhirlpoolError(ErrorCode.LIQUIDITY_OVERFLOW)
        return result
    if -delta > liquidity:
        raise WhirlpoolError(ErrorCode.LIQUIDITY_UNDERFLOW)
    return liquidity + delta


def convert_to_liquidity_delta(liquidity_amount: int, positive: bool) -> int:
    """Turn an unsigned liquidity amount into a signed i128 delta."""
    if liquidity_amount > I128_MAX:
        raise WhirlpoolError(ErrorCode.LIQUIDITY_TOO_HIGH)
    return liquidity_amount if positive else -liquidity_amount