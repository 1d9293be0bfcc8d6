"""Bit shifts of signed integers with floor rounding for right shifts."""

from __future__ import annotations

import operator
from typing import SupportsIndex


def _amount(amount: SupportsIndex) -> int:
    count = operator.index(amount)
    if count < 0:
        raise ValueError(f"attempt to shift by a negative amount: {count}")
    return count


def shift_left(value: SupportsIndex, amount: SupportsIndex) -> int:
    """Multiply ``value`` by two to the power ``amount``."""
    return operator.index(value) << _amount(amount)


def shift_right(value: SupportsIndex, amount: SupportsIndex) -> int:
    """Shift right, rounding towards negative infinity like two's complement."""
    number = operator.index(value)
    count = _amount(amount)
    sign = -1 if number < 0 else 1
    magnitude = abs(number)
    shifted = magnitude >> count
    # Negative values round down when any one-bits are shifted out.
    if number < 0 and count > 0 and magnitude & ((1 << count) - 1):
        shifted += 1
    return sign * shifted