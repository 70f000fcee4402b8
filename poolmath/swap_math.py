"""One step of a swap within a single price range."""

from __future__ import annotations

from dataclasses import dataclass

from .bit_math import checked_mul_div, checked_mul_div_round_up
from .errors import ErrorCode, WhirlpoolError
from .token_math import (
    FEE_RATE_MUL_VALUE,
    AmountDelta,
    get_amount_delta_a,
    get_amount_delta_b,
    get_next_sqrt_price,
    try_get_amount_delta_a,
    try_get_amount_delta_b,
)
from .u256 import U64_MAX

NO_EXPLICIT_SQRT_PRICE_LIMIT = 0


@dataclass(frozen=True)
class SwapStepComputation:
    """Amounts moved and the resulting price for one swap step."""

    amount_in: int
    amount_out: int
    next_price: int
    fee_amount: int


def _to_u64(value: int) -> int:
    if value > U64_MAX:
        raise WhirlpoolError(ErrorCode.NUMBER_CAST_ERROR)
    return value


def _fixes_a(amount_specified_is_input: bool, a_to_b: bool) -> bool:
    return a_to_b == amount_specified_is_input


def _try_fixed_delta(
    current: int, target: int, liquidity: int, is_input: bool, a_to_b: bool
) -> AmountDelta:
    if _fixes_a(is_input, a_to_b):
        return try_get_amount_delta_a(current, target, liquidity, is_input)
    return try_get_amount_delta_b(current, target, liquidity, is_input)


def _fixed_delta(
    current: int, target: int, liquidity: int, is_input: bool, a_to_b: bool
) -> int:
    if _fixes_a(is_input, a_to_b):
        return get_amount_delta_a(current, target, liquidity, is_input)
    return get_amount_delta_b(current, target, liquidity, is_input)


def _unfixed_delta(
    current: int, target: int, liquidity: int, is_input: bool, a_to_b: bool
) -> int:
    if _fixes_a(is_input, a_to_b):
        return get_amount_delta_b(current, target, liquidity, not is_input)
    return get_amount_delta_a(current, target, liquidity, not is_input)


def compute_swap(
    amount_remaining: int,
    fee_rate: int,
    liquidity: int,
    sqrt_price_current: int,
    sqrt_price_target: int,
    amount_specified_is_input: bool,
    a_to_b: bool,
) -> SwapStepComputation:
    """Swap as much of ``amount_remaining`` as fits before ``sqrt_price_target``."""
    if fee_rate > FEE_RATE_MUL_VALUE:
        raise ValueError(f"fee rate above {FEE_RATE_MUL_VALUE}: {fee_rate}")

    # The fixed delta to reach the target may exceed u64; that only means the
    # step cannot be a max swap.
    initial_fixed_delta = _try_fixed_delta(
        sqrt_price_current, sqrt_price_target, liquidity, amount_specified_is_input, a_to_b
    )

    amount_calc = amount_remaining
    if amount_specified_is_input:
        amount_calc = _to_u64(
            checked_mul_div(
                amount_remaining, FEE_RATE_MUL_VALUE - fee_rate, FEE_RATE_MUL_VALUE
            )
        )

    if initial_fixed_delta.lte(amount_calc):
        next_sqrt_price = sqrt_price_target
    else:
        next_sqrt_price = get_next_sqrt_price(
            sqrt_price_current, liquidity, amount_calc, amount_specified_is_input, a_to_b
        )

    is_max_swap = next_sqrt_price == sqrt_price_target

    amount_unfixed = _unfixed_delta(
        sqrt_price_current, next_sqrt_price, liquidity, amount_specified_is_input, a_to_b
    )

    if not is_max_swap or initial_fixed_delta.exceeds_max():
        amount_fixed = _fixed_delta(
            sqrt_price_current, next_sqrt_price, liquidity, amount_specified_is_input, a_to_b
        )
    else:
        amount_fixed = initial_fixed_delta.unwrap()

    if amount_specified_is_input:
        amount_in, amount_out = amount_fixed, amount_unfixed
    else:
        amount_in, amount_out = amount_unfixed, amount_fixed
        amount_out = min(amount_out, amount_remaining)

    if amount_specified_is_input and not is_max_swap:
        fee_amount = amount_remaining - amount_in
    else:
        fee_amount = _to_u64(
            checked_mul_div_round_up(amount_in, fee_rate, FEE_RATE_MUL_VALUE - fee_rate)
        )

    return SwapStepComputation(
        amount_in=amount_in,
        amount_out=amount_out,
        next_price=next_sqrt_price,
        fee_amount=fee_amount,
    )