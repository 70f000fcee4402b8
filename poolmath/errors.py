"""Error codes raised by the pool arithmetic."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Reasons a pool calculation can fail."""

    INVALID_TIMESTAMP = "Invalid timestamp"
    LIQUIDITY_ZERO = "Liquidity amount must be greater than zero"
    LIQUIDITY_TOO_HIGH = "Liquidity amount must be less than i128::MAX"
    LIQUIDITY_OVERFLOW = "Liquidity overflow"
    LIQUIDITY_UNDERFLOW = "Liquidity underflow"
    LIQUIDITY_NET_ERROR = "Tick liquidity net underflowed or overflowed"
    TOKEN_MAX_EXCEEDED = "Exceeded token max"
    TOKEN_MIN_SUBCEEDED = "Did not meet token min"
    DIVIDE_BY_ZERO = "Unable to divide by zero"
    NUMBER_CAST_ERROR = "Unable to cast number into a smaller type"
    NUMBER_DOWN_CAST_ERROR = "Unable to down cast number"
    MUL_DIV_OVERFLOW = "Multiplication with division overflow"
    MULTIPLICATION_OVERFLOW = "Multiplication overflow"
    MULTIPLICATION_SHIFT_RIGHT_OVERFLOW = "Multiplication with shift right overflow"
    SQRT_PRICE_OUT_OF_BOUNDS = "Provided sqrt price out of bounds"
    INVALID_SQRT_PRICE_LIMIT_DIRECTION = "Provided sqrt price limit is in the wrong direction"
    ZERO_TRADABLE_AMOUNT = "There are no tradable amount to swap"
    AMOUNT_REMAINING_OVERFLOW = "Amount remaining overflows"
    AMOUNT_CALC_OVERFLOW = "Amount calculated overflows"
    PARTIAL_FILL_ERROR = "Trade resulted in partial fill"
    RENT_CALCULATION_ERROR = "Rent calculation error"


class WhirlpoolError(Exception):
    """An arithmetic or state error carrying an :class:`ErrorCode`."""

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(f"{code.name}: {code.value}")
        self.code = code