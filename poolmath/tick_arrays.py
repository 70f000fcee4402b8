"""Rent and size changes a variable-size tick array needs after a position change."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RentTransfer(Enum):
    """Direction in which tick rent moves between a position and a tick array."""

    NONE = "none"
    TO_TICK_ARRAY = "to_tick_array"
    TO_POSITION = "to_position"


class SizeUpdate(Enum):
    """Whether a tick array grows or shrinks by one initialized tick."""

    NONE = "none"
    INCREASE = "increase"
    DECREASE = "decrease"


@dataclass(frozen=True)
class TickArrayUpdate:
    """Rent transfer and size change to apply to one tick array."""

    transfer_rent: RentTransfer = RentTransfer.NONE
    size_update: SizeUpdate = SizeUpdate.NONE


def calculate_modify_tick_array(
    position_liquidity: int,
    next_position_liquidity: int,
    is_variable_size_tick_array: bool,
    tick_initialized: bool,
    next_tick_initialized: bool,
) -> TickArrayUpdate:
    """Work out what a tick array needs when a position and its tick change."""
    if not is_variable_size_tick_array:
        return TickArrayUpdate()

    transfer_rent = RentTransfer.NONE
    if position_liquidity == 0 and next_position_liquidity != 0:
        transfer_rent = RentTransfer.TO_TICK_ARRAY
    elif position_liquidity != 0 and next_position_liquidity == 0:
        transfer_rent = RentTransfer.TO_POSITION

    size_update = SizeUpdate.NONE
    if not tick_initialized and next_tick_initialized:
        size_update = SizeUpdate.INCREASE
    elif tick_initialized and not next_tick_initialized:
        size_update = SizeUpdate.DECREASE

    return TickArrayUpdate(transfer_rent=transfer_rent, size_update=size_update)