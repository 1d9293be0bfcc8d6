"""Random generation of arbitrary precision integers."""

from __future__ import annotations

import operator
import random
from dataclasses import dataclass
from typing import SupportsIndex


def _bit_count(bit_size: SupportsIndex) -> int:
    bits = operator.index(bit_size)
    if bits < 0:
        raise ValueError(f"bit size cannot be negative: {bits}")
    return bits


def gen_biguint(rng: random.Random, bit_size: SupportsIndex) -> int:
    """Return a uniformly random non-negative integer below ``2 ** bit_size``."""
    return rng.getrandbits(_bit_count(bit_size))


def gen_bigint(rng: random.Random, bit_size: SupportsIndex) -> int:
    """Return a random signed integer whose magnitude has at most ``bit_size`` bits.

    Zero is redrawn half of the time so it is no likelier than any other value.
    """
    bits = _bit_count(bit_size)
    while True:
        magnitude = gen_biguint(rng, bits)
        if magnitude == 0:
            if rng.getrandbits(1):
                continue
            return 0
        return magnitude if rng.getrandbits(1) else -magnitude


def gen_biguint_below(rng: random.Random, bound: SupportsIndex) -> int:
    """Return a random integer in ``[0, bound)``; the bound must be positive."""
    limit = operator.index(bound)
    if limit <= 0:
        raise ValueError(f"bound must be positive: {limit}")
    bits = limit.bit_length()
    while True:
        candidate = gen_biguint(rng, bits)
        if candidate < limit:
            return candidate


def gen_biguint_range(
    rng: random.Random, lbound: SupportsIndex, ubound: SupportsIndex
) -> int:
    """Return a random non-negative integer in ``[lbound, ubound)``."""
    low = operator.index(lbound)
    high = operator.index(ubound)
    if low < 0:
        raise ValueError(f"lower bound cannot be negative: {low}")
    if not low < high:
        raise ValueError(f"empty range: {low}..{high}")
    if low == 0:
        return gen_biguint_below(rng, high)
    return low + gen_biguint_below(rng, high - low)


def gen_bigint_range(
    rng: random.Random, lbound: SupportsIndex, ubound: SupportsIndex
) -> int:
    """Return a random integer in ``[lbound, ubound)``."""
    low = operator.index(lbound)
    high = operator.index(ubound)
    if not low < high:
        raise ValueError(f"empty range: {low}..{high}")
    if low == 0:
        return gen_biguint_below(rng, abs(high))
    if high == 0:
        return low + gen_biguint_below(rng, abs(low))
    return low + gen_biguint_below(rng, high - low)


class UniformBigInt:
    """Uniform distribution over the half-open range ``[low, high)``."""

    def __init__(self, low: SupportsIndex, high: SupportsIndex) -> None:
        start = operator.index(low)
        stop = operator.index(high)
        if not start < stop:
            raise ValueError(f"empty range: {start}..{stop}")
        self._base = start
        self._length = stop - start

    @classmethod
    def inclusive(cls, low: SupportsIndex, high: SupportsIndex) -> UniformBigInt:
        """Build a distribution over the closed range ``[low, high]``."""
        start = operator.index(low)
        stop = operator.index(high)
        if not start <= stop:
            raise ValueError(f"empty range: {start}..={stop}")
        return cls(start, stop + 1)

    def sample(self, rng: random.Random) -> int:
        """Draw one value."""
        return self._base + gen_biguint_below(rng, self._length)

    def __repr__(self) -> str:
        return f"UniformBigInt({self._base}, {self._base + self._length})"


@dataclass(frozen=True)
class RandomBits:
    """Distribution of integers of a fixed maximum bit size."""

    bits: int

    def __post_init__(self) -> None:
        _bit_count(self.bits)

    def sample_unsigned(self, rng: random.Random) -> int:
        """Draw a non-negative value below ``2 ** bits``."""
        return gen_biguint(rng, self.bits)

    def sample(self, rng: random.Random) -> int:
        """Draw a signed value whose magnitude is below ``2 ** bits``."""
        return gen_bigint(rng, self.bits)