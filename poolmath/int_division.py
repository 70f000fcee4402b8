"""Integer division helpers with explicit rounding direction."""

from __future__ import annotations


def floor_division(dividend: int, divisor: int) -> int:
    """Divide rounding towards negative infinity; ``divisor`` must be positive."""
    if divisor <= 0:
        raise ValueError("Divisor must be positive.")
    return dividend // divisor


def ceil_division(dividend: int, divisor: int) -> int:
    """Divide rounding towards positive infinity; ``divisor`` must be positive."""
    if divisor <= 0:
        raise ValueError("Divisor must be positive.")
    return -(-dividend // divisor)