"""Unsigned 256-bit integers with wrapping arithmetic and word access."""

from __future__ import annotations

from .errors import ErrorCode, WhirlpoolError

NUM_WORDS = 4
WORD_BITS = 64
U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1
U256_MAX = (1 << 256) - 1
_TOTAL_BITS = NUM_WORDS * WORD_BITS
_BYTE_LEN = 32


class U256Muldiv:
    """An immutable unsigned 256-bit integer made of four 64-bit words."""

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if not isinstance(value, int) or not 0 <= value <= U256_MAX:
            raise ValueError(f"value out of u256 range: {value!r}")
        self._value = value

    @classmethod
    def from_parts(cls, high: int, low: int) -> U256Muldiv:
        """Build from a high and a low 128-bit half."""
        for part in (high, low):
            if not 0 <= part <= U128_MAX:
                raise ValueError(f"part out of u128 range: {part!r}")
        return cls((high << 128) | low)

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"U256Muldiv({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def get_word(self, index: int) -> int:
        """Return the 64-bit word at ``index`` (0 is least significant)."""
        if not 0 <= index < NUM_WORDS:
            raise IndexError(f"word index out of range: {index}")
        return (self._value >> (WORD_BITS * index)) & U64_MAX

    def shift_word_left(self) -> U256Muldiv:
        """Shift left by one word, dropping the top word."""
        return U256Muldiv((self._value << WORD_BITS) & U256_MAX)

    def checked_shift_word_left(self) -> U256Muldiv | None:
        """Shift left by one word, or ``None`` if the top word is not zero."""
        if self.get_word(NUM_WORDS - 1) > 0:
            return None
        return self.shift_word_left()

    def shift_left(self, shift_amount: int) -> U256Muldiv:
        """Logical left shift; bits beyond 256 are discarded."""
        if shift_amount >= _TOTAL_BITS:
            return U256Muldiv(0)
        return U256Muldiv((self._value << shift_amount) & U256_MAX)

    def shift_word_right(self) -> U256Muldiv:
        """Shift right by one word."""
        return U256Muldiv(self._value >> WORD_BITS)

    def shift_right(self, shift_amount: int) -> U256Muldiv:
        """Logical right shift."""
        if shift_amount >= _TOTAL_BITS:
            return U256Muldiv(0)
        return U256Muldiv(self._value >> shift_amount)

    def add(self, other: U256Muldiv) -> U256Muldiv:
        """Sum modulo 2**256."""
        return U256Muldiv((self._value + other._value) & U256_MAX)

    def sub(self, other: U256Muldiv) -> U256Muldiv:
        """Difference modulo 2**256."""
        return U256Muldiv((self._value - other._value) & U256_MAX)

    def mul(self, other: U256Muldiv) -> U256Muldiv:
        """Product modulo 2**256."""
        return U256Muldiv((self._value * other._value) & U256_MAX)

    def div(
        self, divisor: U256Muldiv, return_remainder: bool
    ) -> tuple[U256Muldiv, U256Muldiv]:
        """Return ``(quotient, remainder)``; the remainder is zero unless requested."""
        if divisor.is_zero():
            raise ZeroDivisionError("divide by zero")
        quotient, remainder = divmod(self._value, divisor._value)
        return U256Muldiv(quotient), U256Muldiv(remainder if return_remainder else 0)

    def get_add_inverse(self) -> U256Muldiv:
        """Return r such that self + r is 0 modulo 2**256."""
        return U256Muldiv((-self._value) & U256_MAX)

    def try_into_u128(self) -> int:
        """Return the value as an int, failing if it does not fit in 128 bits."""
        if self._value > U128_MAX:
            raise WhirlpoolError(ErrorCode.NUMBER_DOWN_CAST_ERROR)
        return self._value

    def is_zero(self) -> bool:
        return self._value == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, U256Muldiv):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, U256Muldiv):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, U256Muldiv):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, U256Muldiv):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, U256Muldiv):
            return NotImplemented
        return self._value >= other._value


def hi_lo(hi: int, lo: int) -> int:
    """Join two 64-bit words into a 128-bit integer."""
    return ((hi & U64_MAX) << WORD_BITS) | (lo & U64_MAX)


def mul_u256(v: int, n: int) -> U256Muldiv:
    """Full 256-bit product of two 128-bit integers."""
    if not 0 <= v <= U128_MAX or not 0 <= n <= U128_MAX:
        raise ValueError("operands must be u128")
    return U256Muldiv(v * n)


def _check_u256(value: int) -> int:
    if not 0 <= value <= U256_MAX:
        raise ValueError(f"value out of u256 range: {value!r}")
    return value


def u256_to_le_bytes(value: int) -> bytes:
    """Encode a 256-bit value as 32 little-endian bytes."""
    return int(_check_u256(int(value))).to_bytes(_BYTE_LEN, "little")


def u256_from_le_bytes(data: bytes) -> int:
    """Decode the first 32 little-endian bytes of ``data``."""
    if len(data) < _BYTE_LEN:
        raise ValueError("Unexpected length of input")
    return int.from_bytes(bytes(data[:_BYTE_LEN]), "little")


def u256_try_into_u64(value: int) -> int:
    """Narrow a 256-bit value to 64 bits, failing if it does not fit."""
    if _check_u256(int(value)) > U64_MAX:
        raise WhirlpoolError(ErrorCode.NUMBER_CAST_ERROR)
    return int(value)


def u256_try_into_u128(value: int) -> int:
    """Narrow a 256-bit value to 128 bits, failing if it does not fit."""
    if _check_u256(int(value)) > U128_MAX:
        raise WhirlpoolError(ErrorCode.NUMBER_CAST_ERROR)
    return int(value)