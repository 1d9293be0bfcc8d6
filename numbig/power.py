"""Integer powers and modular exponentiation for signed integers."""

from __future__ import annotations

import operator
from typing import SupportsIndex


def power(value: SupportsIndex, exponent: SupportsIndex) -> int:
    """Return ``value`` raised to a non-negative ``exponent``.

    The result is negative only for a negative base with an odd exponent,
    and any base to the power zero is one.
    """
    base = operator.index(value)
    count = operator.index(exponent)
    if count < 0:
        raise ValueError("negative exponentiation is not supported!")
    return base**count


def modpow(x: SupportsIndex, exponent: SupportsIndex, modulus: SupportsIndex) -> int:
    """Return ``x ** exponent`` reduced like a floored modulo.

    The result lies in ``[0, modulus)`` for a positive modulus and in
    ``(modulus, 0]`` for a negative one.
    """
    base = operator.index(x)
    count = operator.index(exponent)
    divisor = operator.index(modulus)
    if count < 0:
        raise ValueError("negative exponentiation is not supported!")
    if divisor == 0:
        raise ZeroDivisionError("attempt to calculate with zero modulus!")
    return pow(base, count, divisor)