"""Integer division variants, divisibility and integer roots for signed integers."""

from __future__ import annotations

import math
import operator
from typing import SupportsIndex


def _ints(*values: SupportsIndex) -> tuple[int, ...]:
    return tuple(operator.index(v) for v in values)


def _nonzero(divisor: int) -> None:
    if divisor == 0:
        raise ZeroDivisionError("attempt to divide by zero")


def div_rem(a: SupportsIndex, b: SupportsIndex) -> tuple[int, int]:
    """Truncating division: the quotient rounds towards zero and the
    remainder takes the sign of ``a``."""
    x, y = _ints(a, b)
    _nonzero(y)
    quotient = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        quotient = -quotient
    return quotient, x - quotient * y


def div_floor(a: SupportsIndex, b: SupportsIndex) -> int:
    """Quotient rounded towards negative infinity."""
    x, y = _ints(a, b)
    _nonzero(y)
    return x // y


def mod_floor(a: SupportsIndex, b: SupportsIndex) -> int:
    """Remainder that takes the sign of ``b``."""
    x, y = _ints(a, b)
    _nonzero(y)
    return x % y


def div_mod_floor(a: SupportsIndex, b: SupportsIndex) -> tuple[int, int]:
    """Floored quotient and remainder together."""
    x, y = _ints(a, b)
    _nonzero(y)
    return divmod(x, y)


def div_ceil(a: SupportsIndex, b: SupportsIndex) -> int:
    """Quotient rounded towards positive infinity."""
    x, y = _ints(a, b)
    _nonzero(y)
    return -((-x) // y)


def div_euclid(a: SupportsIndex, b: SupportsIndex) -> int:
    """Euclidean quotient, for which the remainder is never negative."""
    return div_rem_euclid(a, b)[0]


def rem_euclid(a: SupportsIndex, b: SupportsIndex) -> int:
    """Euclidean remainder, always in ``[0, |b|)``."""
    return div_rem_euclid(a, b)[1]


def div_rem_euclid(a: SupportsIndex, b: SupportsIndex) -> tuple[int, int]:
    """Euclidean quotient and remainder together."""
    x, y = _ints(a, b)
    quotient, remainder = div_rem(x, y)
    if remainder < 0:
        if y > 0:
            return quotient - 1, remainder + y
        return quotient + 1, remainder - y
    return quotient, remainder


def next_multiple_of(a: SupportsIndex, b: SupportsIndex) -> int:
    """Round ``a`` up (towards the sign of ``b``) to a multiple of ``b``."""
    x, y = _ints(a, b)
    m = mod_floor(x, y)
    return x if m == 0 else x + (y - m)


def prev_multiple_of(a: SupportsIndex, b: SupportsIndex) -> int:
    """Round ``a`` down (away from the sign of ``b``) to a multiple of ``b``."""
    x, y = _ints(a, b)
    return x - mod_floor(x, y)


def gcd(a: SupportsIndex, b: SupportsIndex) -> int:
    """Greatest common divisor; never negative."""
    x, y = _ints(a, b)
    return math.gcd(x, y)


def lcm(a: SupportsIndex, b: SupportsIndex) -> int:
    """Least common multiple of the magnitudes; zero if either is zero."""
    x, y = _ints(a, b)
    if x == 0 or y == 0:
        return 0
    return abs(x) // math.gcd(x, y) * abs(y)


def _extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        q, _ = div_rem(old_r, r)
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    if old_r < 0:
        return -old_r, -old_s, -old_t
    return old_r, old_s, old_t


def extended_gcd_lcm(
    a: SupportsIndex, b: SupportsIndex
) -> tuple[tuple[int, int, int], int]:
    """Return ``((gcd, x, y), lcm)`` where ``a*x + b*y == gcd``."""
    x, y = _ints(a, b)
    egcd = _extended_gcd(x, y)
    divisor = egcd[0]
    multiple = 0 if divisor == 0 else abs(x) // divisor * abs(y)
    return egcd, multiple


def modinv(value: SupportsIndex, modulus: SupportsIndex) -> int | None:
    """Modular inverse rounded like :func:`mod_floor`, or None if none exists.

    The result lies in ``[0, modulus)`` for a positive modulus and in
    ``(modulus, 0]`` for a negative one.
    """
    x, m = _ints(value, modulus)
    _nonzero(m)
    size = abs(m)
    if size == 1:
        return 0
    divisor, coefficient, _ = _extended_gcd(x % size, size)
    if divisor != 1:
        return None
    inverse = coefficient % size
    if m < 0 and inverse:
        inverse -= size
    return inverse


def _root_magnitude(x: int, n: int) -> int:
    if x < 2 or n == 1:
        return x
    if n == 2:
        return math.isqrt(x)
    if n >= x.bit_length():
        return 1
    guess = 1 << -(-x.bit_length() // n)
    while True:
        better = ((n - 1) * guess + x // guess ** (n - 1)) // n
        if better >= guess:
            return guess
        guess = better


def nth_root(value: SupportsIndex, n: SupportsIndex) -> int:
    """Truncated principal ``n``-th root; the sign follows ``value``."""
    x, degree = _ints(value, n)
    if degree <= 0:
        raise ValueError(f"root degree {degree} is meaningless")
    if x < 0 and degree % 2 == 0:
        raise ValueError(f"root of degree {degree} is imaginary")
    root = _root_magnitude(abs(x), degree)
    return -root if x < 0 else root


def sqrt(value: SupportsIndex) -> int:
    """Truncated square root of a non-negative integer."""
    x = operator.index(value)
    if x < 0:
        raise ValueError("square root is imaginary")
    return math.isqrt(x)


def cbrt(value: SupportsIndex) -> int:
    """Truncated cube root; the sign follows ``value``."""
    return nth_root(value, 3)