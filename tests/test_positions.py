import pytest
from hypothesis import given, strategies as st

from poolmath.errors import ErrorCode, WhirlpoolError
from poolmath.positions import (
    PositionRewardInfo,
    PositionState,
    calculate_liquidity_token_deltas,
    next_position_modify_liquidity_update,
)
from poolmath.tick_math import sqrt_price_from_tick_index
from poolmath.token_math import get_amount_delta_a, get_amount_delta_b
from poolmath.u256 import U64_MAX

Q64 = 1 << 64


def test_default_position_has_three_empty_rewards():
    position = PositionState()
    assert position.reward_infos == (PositionRewardInfo(),) * 3


def test_adding_liquidity_sets_checkpoints():
    position = PositionState()
    update = next_position_modify_liquidity_update(position, 1000, 7, 9, (1, 2, 3))
    assert update.liquidity == 1000
    assert update.fee_growth_checkpoint_a == 7
    assert update.fee_growth_checkpoint_b == 9
    assert [r.growth_inside_checkpoint for r in update.reward_infos] == [1, 2, 3]
    # No liquidity before the update, so nothing was earned.
    assert update.fee_owed_a == 0
    assert update.fee_owed_b == 0
    assert all(r.amount_owed == 0 for r in update.reward_infos)


def test_fees_accrue_by_liquidity_times_growth():
    position = PositionState(liquidity=Q64, fee_owed_a=10, fee_owed_b=20)
    update = next_position_modify_liquidity_update(position, 0, 5, 6, (0, 0, 0))
    assert update.fee_owed_a == 10 + 5
    assert update.fee_owed_b == 20 + 6
    assert update.liquidity == Q64


def test_rewards_accrue_from_checkpoint():
    rewards = (
        PositionRewardInfo(growth_inside_checkpoint=2, amount_owed=1),
        PositionRewardInfo(),
        PositionRewardInfo(),
    )
    position = PositionState(liquidity=Q64, reward_infos=rewards)
    update = next_position_modify_liquidity_update(position, 0, 0, 0, (5, 4, 0))
    assert update.reward_infos[0] == PositionRewardInfo(5, 1 + 3)
    assert update.reward_infos[1] == PositionRewardInfo(4, 4)
    assert update.reward_infos[2] == PositionRewardInfo(0, 0)


def test_overflowing_fee_delta_is_forfeited():
    position = PositionState(liquidity=Q64, fee_growth_checkpoint_a=10, fee_owed_a=3)
    update = next_position_modify_liquidity_update(position, 0, 5, 0, (0, 0, 0))
    assert update.fee_owed_a == 3
    assert update.fee_growth_checkpoint_a == 5


def test_fee_owed_wraps_around_u64():
    position = PositionState(liquidity=Q64, fee_owed_a=U64_MAX)
    update = next_position_modify_liquidity_update(position, 0, 1, 0, (0, 0, 0))
    assert update.fee_owed_a == 0


def test_range_is_preserved():
    position = PositionState(liquidity=10, tick_lower_index=-64, tick_upper_index=128)
    update = next_position_modify_liquidity_update(position, -4, 0, 0, (0, 0, 0))
    assert (update.tick_lower_index, update.tick_upper_index) == (-64, 128)
    assert update.liquidity == 6


def test_removing_too_much_liquidity_underflows():
    position = PositionState(liquidity=10)
    with pytest.raises(WhirlpoolError) as info:
        next_position_modify_liquidity_update(position, -11, 0, 0, (0, 0, 0))
    assert info.value.code is ErrorCode.LIQUIDITY_UNDERFLOW


def test_zero_liquidity_delta_is_rejected():
    with pytest.raises(WhirlpoolError) as info:
        calculate_liquidity_token_deltas(0, Q64, -100, 100, 0)
    assert info.value.code is ErrorCode.LIQUIDITY_ZERO


def test_current_tick_below_range_needs_only_token_a():
    lower, upper = sqrt_price_from_tick_index(100), sqrt_price_from_tick_index(200)
    delta_a, delta_b = calculate_liquidity_token_deltas(
        0, sqrt_price_from_tick_index(0), 100, 200, 1_000_000
    )
    assert delta_b == 0
    assert delta_a == get_amount_delta_a(lower, upper, 1_000_000, True)
    assert delta_a > 0


def test_current_tick_above_range_needs_only_token_b():
    lower, upper = sqrt_price_from_tick_index(-200), sqrt_price_from_tick_index(-100)
    delta_a, delta_b = calculate_liquidity_token_deltas(
        0, sqrt_price_from_tick_index(0), -200, -100, 1_000_000
    )
    assert delta_a == 0
    assert delta_b == get_amount_delta_b(lower, upper, 1_000_000, True)
    assert delta_b > 0


def test_current_tick_at_upper_bound_counts_as_above():
    delta_a, delta_b = calculate_liquidity_token_deltas(
        100, sqrt_price_from_tick_index(100), -100, 100, 1_000_000
    )
    assert delta_a == 0
    assert delta_b > 0


def test_current_tick_inside_range_needs_both_tokens():
    price = sqrt_price_from_tick_index(0)
    delta_a, delta_b = calculate_liquidity_token_deltas(0, price, -100, 100, 1_000_000)
    assert delta_a == get_amount_delta_a(
        price, sqrt_price_from_tick_index(100), 1_000_000, True
    )
    assert delta_b == get_amount_delta_b(
        sqrt_price_from_tick_index(-100), price, 1_000_000, True
    )


@given(
    liquidity=st.integers(min_value=1, max_value=10**18),
    current=st.integers(min_value=-500, max_value=500),
)
def test_adding_rounds_up_and_removing_rounds_down(liquidity, current):
    price = sqrt_price_from_tick_index(current)
    add_a, add_b = calculate_liquidity_token_deltas(current, price, -200, 200, liquidity)
    rem_a, rem_b = calculate_liquidity_token_deltas(current, price, -200, 200, -liquidity)
    assert 0 <= add_a - rem_a <= 1
    assert 0 <= add_b - rem_b <= 1