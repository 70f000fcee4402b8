# poolmath

Exact integer math for concentrated-liquidity pools. It covers the Q64.64 fixed-point
price representation, conversion between ticks and square-root prices, token amount
deltas and single swap steps. It also covers fee and reward growth bookkeeping for ticks
and positions.

Values are plain Python `int`s, and results follow the u64/u128/u256 widths and the
overflow and wrapping rules of the pool arithmetic. Where that arithmetic fails, the
functions raise `poolmath.errors.WhirlpoolError`, whose `code` attribute holds a member of
`poolmath.errors.ErrorCode`. A few argument checks (for example a non-positive divisor in
`int_division`, or a fee rate above 1,000,000 in `compute_swap`) raise `ValueError`.

## Installation

```
pip install poolmath
```

For running the test suite:

```
pip install "poolmath[test]"
pytest
```

## Modules

- `poolmath.errors`: `ErrorCode` and `WhirlpoolError`.
- `poolmath.u256`: `U256Muldiv`, an immutable 256-bit unsigned value with word access,
  shifts, wrapping `add`, `sub` and `mul`, `div` returning quotient and remainder, and
  comparisons. Also `mul_u256`, `hi_lo`, `u256_to_le_bytes`, `u256_from_le_bytes`,
  `u256_try_into_u64` and `u256_try_into_u128`.
- `poolmath.int_division`: `floor_division` and `ceil_division`.
- `poolmath.liquidity_math`: `add_liquidity_delta` and `convert_to_liquidity_delta`.
- `poolmath.bit_math`: `checked_mul_div`, `checked_mul_div_round_up`,
  `checked_mul_div_round_up_if`, `checked_mul_shift_right`,
  `checked_mul_shift_right_round_up_if`, `div_round_up`, `div_round_up_if` and
  `div_round_up_if_u256`.
- `poolmath.tick_math`: `sqrt_price_from_tick_index`, `tick_index_from_sqrt_price`, and
  the `MIN_SQRT_PRICE_X64` / `MAX_SQRT_PRICE_X64` bounds.
- `poolmath.token_math`: `get_amount_delta_a`, `get_amount_delta_b`, their `try_` forms
  returning an `AmountDelta`, `increasing_price_order` and the `get_next_sqrt_price`
  family.
- `poolmath.swap_math`: `compute_swap`, which returns a `SwapStepComputation`.
- `poolmath.rewards`: `RewardInfo`, `next_reward_infos` and `next_whirlpool_liquidity`.
- `poolmath.ticks`: `Tick`, `next_tick_cross_update`, `next_tick_modify_liquidity_update`,
  `next_fee_growths_inside` and `next_reward_growths_inside`.
- `poolmath.positions`: `PositionState`, `PositionRewardInfo`,
  `next_position_modify_liquidity_update` and `calculate_liquidity_token_deltas`.
- `poolmath.tick_arrays`: `calculate_modify_tick_array`, which returns a `TickArrayUpdate`
  made of a `RentTransfer` and a `SizeUpdate`.

## Example

```python
from poolmath.errors import ErrorCode, WhirlpoolError
from poolmath.positions import calculate_liquidity_token_deltas
from poolmath.swap_math import compute_swap
from poolmath.tick_math import sqrt_price_from_tick_index, tick_index_from_sqrt_price

price = sqrt_price_from_tick_index(0)          # 1 << 64
assert tick_index_from_sqrt_price(price) == 0

step = compute_swap(
    amount_remaining=1_000_000,
    fee_rate=3000,                             # hundredths of a basis point
    liquidity=10**12,
    sqrt_price_current=price,
    sqrt_price_target=sqrt_price_from_tick_index(-64),
    amount_specified_is_input=True,
    a_to_b=True,
)
print(step.amount_in, step.amount_out, step.fee_amount, step.next_price)

try:
    calculate_liquidity_token_deltas(0, price, -64, 64, liquidity_delta=0)
except WhirlpoolError as err:
    assert err.code is ErrorCode.LIQUIDITY_ZERO
```

## What it does not do

The package computes values; it keeps no pool, position or tick-array state of its own
and stores nothing. `compute_swap` handles one step within a single price range: there is
no swap loop that walks across initialized ticks, applies protocol fees per step or
crosses ticks for you, and there is no adaptive (volatility-based) fee rate.
`calculate_modify_tick_array` only says whether rent should move and whether a tick array
should grow or shrink; it does not compute rent amounts or move any funds.