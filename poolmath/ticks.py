"""Tick state and its updates on crossing and on liquidity changes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from .errors import ErrorCode, WhirlpoolError
from .liquidity_math import add_liquidity_delta
from .rewards import NUM_REWARDS, RewardInfo
from .u256 import U128_MAX

_I128_MIN = -(1 << 127)
_I128_MAX = (1 << 127) - 1


def _wrapping_sub(a: int, b: int) -> int:
    return (a - b) & U128_MAX


def _zero_growths() -> tuple[int, ...]:
    return (0,) * NUM_REWARDS


@dataclass(frozen=True)
class Tick:
    """State stored for one tick; also used as the value of a tick update."""

    initialized: bool = False
    liquidity_net: int = 0
    liquidity_gross: int = 0
    fee_growth_outside_a: int = 0
    fee_growth_outside_b: int = 0
    reward_growths_outside: tuple[int, ...] = field(default_factory=_zero_growths)


def next_tick_cross_update(
    tick: Tick,
    fee_growth_global_a: int,
    fee_growth_global_b: int,
    reward_infos: Sequence[RewardInfo],
) -> Tick:
    """Flip the tick's outside growths as the price crosses it."""
    rewards = tuple(
        _wrapping_sub(info.growth_global_x64, outside) if info.initialized() else outside
        for info, outside in zip(reward_infos, tick.reward_growths_outside)
    )
    return replace(
        tick,
        fee_growth_outside_a=_wrapping_sub(fee_growth_global_a, tick.fee_growth_outside_a),
        fee_growth_outside_b=_wrapping_sub(fee_growth_global_b, tick.fee_growth_outside_b),
        reward_growths_outside=rewards,
    )


def next_tick_modify_liquidity_update(
    tick: Tick,
    tick_index: int,
    tick_current_index: int,
    fee_growth_global_a: int,
    fee_growth_global_b: int,
    reward_infos: Sequence[RewardInfo],
    liquidity_delta: int,
    is_upper_tick: bool,
) -> Tick:
    """Tick state after a position bounded by it changes liquidity."""
    if liquidity_delta == 0:
        return tick

    liquidity_gross = add_liquidity_delta(tick.liquidity_gross, liquidity_delta)
    if liquidity_gross == 0:
        return Tick()

    if tick.liquidity_gross == 0:
        # By convention, all prior growth happened below the tick.
        if tick_current_index >= tick_index:
            fee_a, fee_b = fee_growth_global_a, fee_growth_global_b
            rewards = tuple(info.growth_global_x64 for info in reward_infos)
        else:
            fee_a, fee_b = 0, 0
            rewards = (0,) * len(reward_infos)
    else:
        fee_a, fee_b = tick.fee_growth_outside_a, tick.fee_growth_outside_b
        rewards = tick.reward_growths_outside

    if is_upper_tick:
        liquidity_net = tick.liquidity_net - liquidity_delta
    else:
        liquidity_net = tick.liquidity_net + liquidity_delta
    if not _I128_MIN <= liquidity_net <= _I128_MAX:
        raise WhirlpoolError(ErrorCode.LIQUIDITY_NET_ERROR)

    return Tick(
        initialized=True,
        liquidity_net=liquidity_net,
        liquidity_gross=liquidity_gross,
        fee_growth_outside_a=fee_a,
        fee_growth_outside_b=fee_b,
        reward_growths_outside=rewards,
    )


def _growth_below(global_growth: int, outside: int, lower: Tick, current: int, index: int) -> int:
    if not lower.initialized:
        return global_growth
    if current < index:
        return _wrapping_sub(global_growth, outside)
    return outside


def _growth_above(global_growth: int, outside: int, upper: Tick, current: int, index: int) -> int:
    if not upper.initialized:
        return 0
    if current < index:
        return outside
    return _wrapping_sub(global_growth, outside)


def next_fee_growths_inside(
    tick_current_index: int,
    tick_lower: Tick,
    tick_lower_index: int,
    tick_upper: Tick,
    tick_upper_index: int,
    fee_growth_global_a: int,
    fee_growth_global_b: int,
) -> tuple[int, int]:
    """Fee growth for tokens A and B between the two ticks."""

    def inside(global_growth: int, lower_outside: int, upper_outside: int) -> int:
        below = _growth_below(
            global_growth, lower_outside, tick_lower, tick_current_index, tick_lower_index
        )
        above = _growth_above(
            global_growth, upper_outside, tick_upper, tick_current_index, tick_upper_index
        )
        return _wrapping_sub(_wrapping_sub(global_growth, below), above)

    return (
        inside(fee_growth_global_a, tick_lower.fee_growth_outside_a, tick_upper.fee_growth_outside_a),
        inside(fee_growth_global_b, tick_lower.fee_growth_outside_b, tick_upper.fee_growth_outside_b),
    )


def next_reward_growths_inside(
    tick_current_index: int,
    tick_lower: Tick,
    tick_lower_index: int,
    tick_upper: Tick,
    tick_upper_index: int,
    reward_infos: Sequence[RewardInfo],
) -> tuple[int, ...]:
    """Reward growth between the two ticks; uninitialized rewards give zero."""
    result = []
    for info, lower_outside, upper_outside in zip(
        reward_infos, tick_lower.reward_growths_outside, tick_upper.reward_growths_outside
    ):
        if not info.initialized():
            result.append(0)
            continue
        global_growth = info.growth_global_x64
        below = _growth_below(
            global_growth, lower_outside, tick_lower, tick_current_index, tick_lower_index
        )
        above = _growth_above(
            global_growth, upper_outside, tick_upper, tick_current_index, tick_upper_index
        )
        result.append(_wrapping_sub(_wrapping_sub(global_growth, below), above))
    return tuple(result)