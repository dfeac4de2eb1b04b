"""Unsigned 128-bit integer with wrapping (modulo 2**128) arithmetic."""

from __future__ import annotations

import functools
import operator
from typing import Union

_MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1

IntLike = Union[int, "UInt128"]


def _as_int(value: IntLike) -> int:
    """Return ``value`` reduced to the 128-bit range."""
    return operator.index(value) & _MASK128


@functools.total_ordering
class UInt128:
    """An immutable unsigned 128-bit integer.

    Arithmetic wraps around modulo 2**128. Shifts by 128 or more bits give
    zero, and division or remainder by zero gives zero.
    """

    __slots__ = ("_value",)

    def __init__(self, value: IntLike = 0, lower: IntLike | None = None) -> None:
        if lower is None:
            # Negative values take their two's-complement form.
            self._value = _as_int(value)
        else:
            upper = operator.index(value) & _MASK64
            self._value = (upper << 64) | (operator.index(lower) & _MASK64)

    @property
    def upper(self) -> int:
        """The high 64 bits."""
        return self._value >> 64

    @property
    def lower(self) -> int:
        """The low 64 bits."""
        return self._value & _MASK64

    def bits(self) -> int:
        """Number of significant bits (0 for zero)."""
        return self._value.bit_length()

    def to_bytes(self) -> bytes:
        """The value as 16 little-endian bytes."""
        return self._value.to_bytes(16, "little")

    @classmethod
    def from_bytes(cls, data: bytes) -> UInt128:
        """Build a value from exactly 16 little-endian bytes."""
        if len(data) != 16:
            raise ValueError(f"expected 16 bytes, got {len(data)}")
        return cls(int.from_bytes(data, "little"))

    # Conversions

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"UInt128(0x{self._value:032x})"

    def __str__(self) -> str:
        return str(self._value)

    # Comparison

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (UInt128, int)):
            return self._value == _as_int(other)
        return NotImplemented

    def __lt__(self, other: IntLike) -> bool:
        if isinstance(other, (UInt128, int)):
            return self._value < _as_int(other)
        return NotImplemented

    # Bitwise

    def __and__(self, other: IntLike) -> UInt128:
        return UInt128(self._value & _as_int(other))

    __rand__ = __and__

    def __or__(self, other: IntLike) -> UInt128:
        return UInt128(self._value | _as_int(other))

    __ror__ = __or__

    def __xor__(self, other: IntLike) -> UInt128:
        return UInt128(self._value ^ _as_int(other))

    __rxor__ = __xor__

    def __invert__(self) -> UInt128:
        return UInt128(~self._value)

    # Shifts

    def __lshift__(self, shift: IntLike) -> UInt128:
        amount = _as_int(shift)
        if amount >= 128:
            return UInt128(0)
        return UInt128(self._value << amount)

    def __rlshift__(self, other: int) -> UInt128:
        return UInt128(other) << self

    def __rshift__(self, shift: IntLike) -> UInt128:
        amount = _as_int(shift)
        if amount >= 128:
            return UInt128(0)
        return UInt128(self._value >> amount)

    def __rrshift__(self, other: int) -> UInt128:
        return UInt128(other) >> self

    # Arithmetic

    def __add__(self, other: IntLike) -> UInt128:
        return UInt128(self._value + _as_int(other))

    __radd__ = __add__

    def __sub__(self, other: IntLike) -> UInt128:
        return UInt128(self._value - _as_int(other))

    def __rsub__(self, other: int) -> UInt128:
        return UInt128(_as_int(other) - self._value)

    def __mul__(self, other: IntLike) -> UInt128:
        return UInt128(self._value * _as_int(other))

    __rmul__ = __mul__

    def __divmod__(self, other: IntLike) -> tuple[UInt128, UInt128]:
        divisor = _as_int(other)
        if divisor == 0:
            return UInt128(0), UInt128(0)
        quotient, remainder = divmod(self._value, divisor)
        return UInt128(quotient), UInt128(remainder)

    def __rdivmod__(self, other: int) -> tuple[UInt128, UInt128]:
        return divmod(UInt128(other), self)

    def __floordiv__(self, other: IntLike) -> UInt128:
        return divmod(self, other)[0]

    def __rfloordiv__(self, other: int) -> UInt128:
        return divmod(UInt128(other), self)[0]

    def __mod__(self, other: IntLike) -> UInt128:
        return divmod(self, other)[1]

    def __rmod__(self, other: int) -> UInt128:
        return divmod(UInt128(other), self)[1]

    def __neg__(self) -> UInt128:
        return UInt128(-self._value)

    def __pos__(self) -> UInt128:
        return self