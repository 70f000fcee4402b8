"""Pool-wide reward growth and liquidity updates."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .bit_math import checked_mul_div
from .errors import ErrorCode, WhirlpoolError
from .liquidity_math import add_liquidity_delta
from .u256 import U128_MAX

NUM_REWARDS = 3


@dataclass(frozen=True)
class RewardInfo:
    """Emission settings and accumulated growth for one reward slot."""

    mint: str | None = None
    emissions_per_second_x64: int = 0
    growth_global_x64: int = 0

    def initialized(self) -> bool:
        """True when a reward token has been assigned to this slot."""
        return self.mint is not None


def next_reward_infos(
    reward_infos: Sequence[RewardInfo],
    liquidity: int,
    last_updated_timestamp: int,
    next_timestamp: int,
) -> tuple[RewardInfo, ...]:
    """Advance global reward growths from the last update to ``next_timestamp``."""
    if next_timestamp < last_updated_timestamp:
        raise WhirlpoolError(ErrorCode.INVALID_TIMESTAMP)

    if liquidity == 0 or next_timestamp == last_updated_timestamp:
        return tuple(reward_infos)

    time_delta = next_timestamp - last_updated_timestamp
    updated = []
    for info in reward_infos:
        if not info.initialized():
            updated.append(info)
            continue
        # An overflowing delta halts distribution for this reward.
        try:
            delta = checked_mul_div(
                time_delta, info.emissions_per_second_x64, liquidity
            )
        except WhirlpoolError:
            delta = 0
        updated.append(
            replace(info, growth_global_x64=(info.growth_global_x64 + delta) & U128_MAX)
        )
    return tuple(updated)


def next_whirlpool_liquidity(
    tick_current_index: int,
    liquidity: int,
    tick_upper_index: int,
    tick_lower_index: int,
    liquidity_delta: int,
) -> int:
    """Pool liquidity after a position change; only in-range positions count."""
    if tick_lower_index <= tick_current_index < tick_upper_index:
        return add_liquidity_delta(liquidity, liquidity_delta)
    return liquidity