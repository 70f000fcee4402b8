"""Token amounts for price moves, and price moves for token amounts."""

from __future__ import annotations

from dataclasses import dataclass

from .bit_math import Q64_MASK, Q64_RESOLUTION, div_round_up_if, div_round_up_if_u256
from .errors import ErrorCode, WhirlpoolError
from .tick_math import MAX_SQRT_PRICE_X64, MIN_SQRT_PRICE_X64
from .u256 import U64_MAX, U128_MAX, U256Muldiv, mul_u256

# Fee rate is in hundredths of a basis point: fee = amount * fee_rate / 1_000_000.
MAX_FEE_RATE = 60_000
FEE_RATE_MUL_VALUE = 1_000_000

# Protocol fee rate is in basis points of the fee: protocol = fee * rate / 10_000.
MAX_PROTOCOL_FEE_RATE = 2_500
PROTOCOL_FEE_RATE_MUL_VALUE = 10_000


@dataclass(frozen=True)
class AmountDelta:
    """A token amount that either fits in a u64 or exceeded it with an error."""

    value: int | None = None
    error: ErrorCode | None = None

    @classmethod
    def valid(cls, value: int) -> AmountDelta:
        return cls(value=value)

    @classmethod
    def exceeding(cls, error: ErrorCode) -> AmountDelta:
        return cls(error=error)

    def lte(self, other: int) -> bool:
        """True if the amount fits and is at most ``other``."""
        return self.value is not None and self.value <= other

    def exceeds_max(self) -> bool:
        return self.value is None

    def unwrap(self) -> int:
        """Return the amount, raising the stored error if it exceeded the maximum."""
        if self.value is None:
            raise WhirlpoolError(self.error or ErrorCode.TOKEN_MAX_EXCEEDED)
        return self.value


def increasing_price_order(sqrt_price_0: int, sqrt_price_1: int) -> tuple[int, int]:
    """Return the two prices as ``(lower, upper)``."""
    if sqrt_price_0 > sqrt_price_1:
        return sqrt_price_1, sqrt_price_0
    return sqrt_price_0, sqrt_price_1


def try_get_amount_delta_a(
    sqrt_price_0: int, sqrt_price_1: int, liquidity: int, round_up: bool
) -> AmountDelta:
    """Token A needed to move between two prices: L * (upper - lower) / (upper * lower)."""
    lower, upper = increasing_price_order(sqrt_price_0, sqrt_price_1)
    numerator = mul_u256(liquidity, upper - lower).checked_shift_word_left()
    if numerator is None:
        raise WhirlpoolError(ErrorCode.MULTIPLICATION_OVERFLOW)
    denominator = mul_u256(upper, lower)

    quotient, remainder = numerator.div(denominator, round_up)
    if round_up and not remainder.is_zero():
        quotient = quotient.add(U256Muldiv(1))
    try:
        result = quotient.try_into_u128()
    except WhirlpoolError as exc:
        return AmountDelta.exceeding(exc.code)

    if result > U64_MAX:
        return AmountDelta.exceeding(ErrorCode.TOKEN_MAX_EXCEEDED)
    return AmountDelta.valid(result)


def get_amount_delta_a(
    sqrt_price_0: int, sqrt_price_1: int, liquidity: int, round_up: bool
) -> int:
    """Token A needed to move between two prices, as a u64."""
    return try_get_amount_delta_a(sqrt_price_0, sqrt_price_1, liquidity, round_up).unwrap()


def try_get_amount_delta_b(
    sqrt_price_0: int, sqrt_price_1: int, liquidity: int, round_up: bool
) -> AmountDelta:
    """Token B needed to move between two prices: L * (upper - lower)."""
    lower, upper = increasing_price_order(sqrt_price_0, sqrt_price_1)
    n0 = liquidity
    n1 = upper - lower
    if n0 == 0 or n1 == 0:
        return AmountDelta.valid(0)

    p = n0 * n1
    if p > U128_MAX:
        return AmountDelta.exceeding(ErrorCode.MULTIPLICATION_SHIFT_RIGHT_OVERFLOW)

    result = p >> Q64_RESOLUTION
    should_round = round_up and (p & Q64_MASK) > 0
    if should_round and result == U64_MAX:
        return AmountDelta.exceeding(ErrorCode.MULTIPLICATION_OVERFLOW)
    return AmountDelta.valid(result + 1 if should_round else result)


def get_amount_delta_b(
    sqrt_price_0: int, sqrt_price_1: int, liquidity: int, round_up: bool
) -> int:
    """Token B needed to move between two prices, as a u64."""
    return try_get_amount_delta_b(sqrt_price_0, sqrt_price_1, liquidity, round_up).unwrap()


def get_next_sqrt_price_from_a_round_up(
    sqrt_price: int, liquidity: int, amount: int, amount_specified_is_input: bool
) -> int:
    """New price after adding (input) or removing (output) ``amount`` of token A.

    Computes ``sqrt_price * L / (L +/- amount * sqrt_price)`` rounded up.
    """
    if amount == 0:
        return sqrt_price

    product = mul_u256(sqrt_price, amount)
    numerator = mul_u256(liquidity, sqrt_price).checked_shift_word_left()
    if numerator is None:
        raise WhirlpoolError(ErrorCode.MULTIPLICATION_OVERFLOW)

    liquidity_shift_left = U256Muldiv(liquidity).shift_word_left()
    if not amount_specified_is_input and liquidity_shift_left <= product:
        raise WhirlpoolError(ErrorCode.DIVIDE_BY_ZERO)

    if amount_specified_is_input:
        denominator = liquidity_shift_left.add(product)
    else:
        denominator = liquidity_shift_left.sub(product)

    price = div_round_up_if_u256(numerator, denominator, True)
    if price < MIN_SQRT_PRICE_X64:
        raise WhirlpoolError(ErrorCode.TOKEN_MIN_SUBCEEDED)
    if price > MAX_SQRT_PRICE_X64:
        raise WhirlpoolError(ErrorCode.TOKEN_MAX_EXCEEDED)
    return price


def get_next_sqrt_price_from_b_round_down(
    sqrt_price: int, liquidity: int, amount: int, amount_specified_is_input: bool
) -> int:
    """New price after adding (input) or removing (output) ``amount`` of token B.

    The price is always rounded down.
    """
    amount_x64 = amount << Q64_RESOLUTION
    delta = div_round_up_if(amount_x64, liquidity, not amount_specified_is_input)

    if amount_specified_is_input:
        result = sqrt_price + delta
        if result > U128_MAX:
            raise WhirlpoolError(ErrorCode.SQRT_PRICE_OUT_OF_BOUNDS)
        return result
    if delta > sqrt_price:
        raise WhirlpoolError(ErrorCode.SQRT_PRICE_OUT_OF_BOUNDS)
    return sqrt_price - delta


def get_next_sqrt_price(
    sqrt_price: int,
    liquidity: int,
    amount: int,
    amount_specified_is_input: bool,
    a_to_b: bool,
) -> int:
    """New price after a swap of ``amount`` with the given direction and mode.

    When token A is the fixed side the price rounds up, otherwise it rounds down,
    so the user never pays more nor receives less than specified.
    """
    if amount_specified_is_input == a_to_b:
        return get_next_sqrt_price_from_a_round_up(
            sqrt_price, liquidity, amount, amount_specified_is_input
        )
    return get_next_sqrt_price_from_b_round_down(
        sqrt_price, liquidity, amount, amount_specified_is_input
    )