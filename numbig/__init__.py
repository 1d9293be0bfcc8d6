"""Arbitrary-precision integer helpers: division, bits, shifts, radix conversion, powers and randomness."""

__version__ = "0.1.0"

__all__ = ["arith", "bits", "power", "radix", "rand", "shift"]