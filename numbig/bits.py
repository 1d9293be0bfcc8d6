"""Bit queries and updates on integers, using two's complement for negatives."""

from __future__ import annotations

import operator
from typing import SupportsIndex


def _position(position: SupportsIndex) -> int:
    index = operator.index(position)
    if index < 0:
        raise ValueError(f"bit position cannot be negative: {index}")
    return index


def trailing_zeros(value: SupportsIndex) -> int | None:
    """Count the least significant zero bits; None when the value is zero.

    The count is the same for a number and its negation, since two's
    complement keeps the lowest set bit in place.
    """
    number = operator.index(value)
    if number == 0:
        return None
    return (number & -number).bit_length() - 1


def bit(value: SupportsIndex, position: SupportsIndex) -> bool:
    """Return whether the bit at ``position`` is set in two's complement.

    Negative numbers behave as if sign-extended with infinitely many ones.
    """
    number = operator.index(value)
    return bool((number >> _position(position)) & 1)


def set_bit(value: SupportsIndex, position: SupportsIndex, flag: bool) -> int:
    """Return ``value`` with the bit at ``position`` set or cleared.

    The operation works on the two's complement form, so clearing a bit
    above the length of a negative number makes it more negative, and
    setting such a bit leaves it unchanged.
    """
    number = operator.index(value)
    mask = 1 << _position(position)
    if flag:
        return number | mask
    return number & ~mask