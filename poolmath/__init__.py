"""Integer fixed-point math for concentrated-liquidity pools."""

__version__ = "0.5.0"
__all__ = [
    "bit_math",
    "errors",
    "int_division",
    "liquidity_math",
    "positions",
    "rewards",
    "swap_math",
    "tick_arrays",
    "tick_math",
    "ticks",
    "token_math",
    "u256",
]