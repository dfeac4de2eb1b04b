"""Wrapping unsigned arithmetic on integers of an arbitrary bit width."""

from __future__ import annotations

import operator


def _mask(bit_width: int) -> int:
    if bit_width <= 0:
        raise ValueError(f"bit width must be positive, got {bit_width}")
    return (1 << bit_width) - 1


def wrap(value: int, bit_width: int) -> int:
    """Reduce ``value`` modulo ``2**bit_width``.

    Negative values take their two's-complement form.
    """
    return operator.index(value) & _mask(bit_width)


def _shift_amount(shift: int) -> int:
    amount = operator.index(shift)
    if amount < 0:
        raise ValueError(f"shift amount must not be negative, got {amount}")
    return amount


def shift_left(x: int, shift: int, bit_width: int) -> int:
    """Shift left, discarding bits beyond ``bit_width``.

    Shifting by ``bit_width`` or more bits gives zero.
    """
    value = wrap(x, bit_width)
    amount = _shift_amount(shift)
    if amount >= bit_width:
        return 0
    return wrap(value << amount, bit_width)


def shift_right(x: int, shift: int, bit_width: int) -> int:
    """Logical right shift of ``x`` viewed as a ``bit_width``-bit value.

    Shifting by ``bit_width`` or more bits gives zero.
    """
    value = wrap(x, bit_width)
    amount = _shift_amount(shift)
    if amount >= bit_width:
        return 0
    return value >> amount


def divmod_wrapped(lhs: int, rhs: int, bit_width: int) -> tuple[int, int]:
    """Unsigned quotient and remainder of ``bit_width``-bit operands.

    Division by zero gives ``(0, 0)`` rather than raising.
    """
    dividend = wrap(lhs, bit_width)
    divisor = wrap(rhs, bit_width)
    if divisor == 0:
        return 0, 0
    return divmod(dividend, divisor)