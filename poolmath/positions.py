"""Position state, its updates on liquidity changes, and token amounts owed."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .bit_math import checked_mul_shift_right
from .errors import ErrorCode, WhirlpoolError
from .liquidity_math import add_liquidity_delta
from .rewards import NUM_REWARDS
from .tick_math import sqrt_price_from_tick_index
from .token_math import get_amount_delta_a, get_amount_delta_b
from .u256 import U64_MAX, U128_MAX


@dataclass(frozen=True)
class PositionRewardInfo:
    """Reward checkpoint and amount owed for one reward slot of a position."""

    growth_inside_checkpoint: int = 0
    amount_owed: int = 0


def _empty_rewards() -> tuple[PositionRewardInfo, ...]:
    return tuple(PositionRewardInfo() for _ in range(NUM_REWARDS))


@dataclass(frozen=True)
class PositionState:
    """Liquidity, range and accrued fees and rewards of a position."""

    liquidity: int = 0
    tick_lower_index: int = 0
    tick_upper_index: int = 0
    fee_growth_checkpoint_a: int = 0
    fee_owed_a: int = 0
    fee_growth_checkpoint_b: int = 0
    fee_owed_b: int = 0
    reward_infos: tuple[PositionRewardInfo, ...] = field(default_factory=_empty_rewards)


def _owed_delta(liquidity: int, growth_inside: int, checkpoint: int) -> int:
    # An overflowing delta forfeits what was earned since the last checkpoint.
    growth_delta = (growth_inside - checkpoint) & U128_MAX
    try:
        return checked_mul_shift_right(liquidity, growth_delta)
    except WhirlpoolError:
        return 0


def next_position_modify_liquidity_update(
    position: PositionState,
    liquidity_delta: int,
    fee_growth_inside_a: int,
    fee_growth_inside_b: int,
    reward_growths_inside: Sequence[int],
) -> PositionState:
    """Position state after accruing fees and rewards and applying ``liquidity_delta``."""
    fee_delta_a = _owed_delta(
        position.liquidity, fee_growth_inside_a, position.fee_growth_checkpoint_a
    )
    fee_delta_b = _owed_delta(
        position.liquidity, fee_growth_inside_b, position.fee_growth_checkpoint_b
    )

    # Owed amounts wrap; they must be collected before they overflow.
    rewards = tuple(
        PositionRewardInfo(
            growth_inside_checkpoint=growth_inside,
            amount_owed=(
                info.amount_owed
                + _owed_delta(
                    position.liquidity, growth_inside, info.growth_inside_checkpoint
                )
            )
            & U64_MAX,
        )
        for info, growth_inside in zip(position.reward_infos, reward_growths_inside)
    )

    return PositionState(
        liquidity=add_liquidity_delta(position.liquidity, liquidity_delta),
        tick_lower_index=position.tick_lower_index,
        tick_upper_index=position.tick_upper_index,
        fee_growth_checkpoint_a=fee_growth_inside_a,
        fee_owed_a=(position.fee_owed_a + fee_delta_a) & U64_MAX,
        fee_growth_checkpoint_b=fee_growth_inside_b,
        fee_owed_b=(position.fee_owed_b + fee_delta_b) & U64_MAX,
        reward_infos=rewards,
    )


def calculate_liquidity_token_deltas(
    current_tick_index: int,
    sqrt_price: int,
    tick_lower_index: int,
    tick_upper_index: int,
    liquidity_delta: int,
) -> tuple[int, int]:
    """Token A and B amounts for changing a position's liquidity by ``liquidity_delta``.

    Amounts are rounded up when liquidity is added and down when it is removed.
    """
    if liquidity_delta == 0:
        raise WhirlpoolError(ErrorCode.LIQUIDITY_ZERO)

    liquidity = abs(liquidity_delta)
    round_up = liquidity_delta > 0
    lower_price = sqrt_price_from_tick_index(tick_lower_index)
    upper_price = sqrt_price_from_tick_index(tick_upper_index)

    if current_tick_index < tick_lower_index:
        return get_amount_delta_a(lower_price, upper_price, liquidity, round_up), 0
    if current_tick_index < tick_upper_index:
        return (
            get_amount_delta_a(sqrt_price, upper_price, liquidity, round_up),
            get_amount_delta_b(lower_price, sqrt_price, liquidity, round_up),
        )
    return 0, get_amount_delta_b(lower_price, upper_price, liquidity, round_up)