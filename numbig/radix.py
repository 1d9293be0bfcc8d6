"""Text, byte and digit conversions for arbitrary precision integers."""

from __future__ import annotations

import enum
import operator
from collections.abc import Iterable
from typing import SupportsIndex

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


class ParseErrorKind(enum.Enum):
    """Why a string could not be parsed as an integer."""

    EMPTY = "cannot parse integer from empty string"
    INVALID = "invalid digit found in string"


class ParseBigIntError(ValueError):
    """Raised when a string does not hold an integer in the given radix."""

    def __init__(self, kind: ParseErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class TryFromBigIntError(ValueError):
    """Raised when an integer does not fit in the requested fixed-size type."""

    def __init__(self, original: int) -> None:
        super().__init__("out of range conversion regarding big integer attempted")
        self.original = original


def _check_radix(radix: SupportsIndex, low: int, high: int) -> int:
    base = operator.index(radix)
    if not low <= base <= high:
        raise ValueError(f"The radix must be within {low}...{high}, got {base}")
    return base


def _magnitude(value: SupportsIndex) -> int:
    number = operator.index(value)
    if number < 0:
        raise ValueError(f"a magnitude cannot be negative: {number}")
    return number


def _digits_le(number: int, radix: int) -> list[int]:
    """Digits of a non-negative number, least significant first; zero is [0]."""
    if number == 0:
        return [0]
    per_chunk = max(1, 60 // radix.bit_length())
    chunk_base = radix**per_chunk
    digits: list[int] = []
    while number:
        number, chunk = divmod(number, chunk_base)
        for _ in range(per_chunk):
            chunk, digit = divmod(chunk, radix)
            digits.append(digit)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits


def _fold_be(digits: Iterable[int], radix: int) -> int:
    value = 0
    for digit in digits:
        value = value * radix + digit
    return value


def _parse_unsigned(text: str, radix: int) -> int:
    if text.startswith("+") and not text[1:].startswith("+"):
        text = text[1:]
    if not text:
        raise ParseBigIntError(ParseErrorKind.EMPTY)
    if text.startswith("_"):
        raise ParseBigIntError(ParseErrorKind.INVALID)
    digits = []
    for char in text:
        if char == "_":
            continue
        position = _ALPHABET.find(char.lower()) if char.isascii() else -1
        if position < 0 or position >= radix:
            raise ParseBigIntError(ParseErrorKind.INVALID)
        digits.append(position)
    return _fold_be(digits, radix)


def parse_str_radix(s: str, radix: SupportsIndex) -> int:
    """Parse a signed integer written in ``radix`` (2 to 36).

    A single leading ``-`` or ``+`` is accepted, and underscores may separate
    digits after the first one.
    """
    base = _check_radix(radix, 2, 36)
    negative = False
    if s.startswith("-") and not s[1:].startswith("+"):
        s = s[1:]
        negative = True
    magnitude = _parse_unsigned(s, base)
    return -magnitude if negative else magnitude


def to_str_radix(value: SupportsIndex, radix: SupportsIndex) -> str:
    """Format an integer in ``radix`` (2 to 36) with lowercase digits."""
    base = _check_radix(radix, 2, 36)
    number = operator.index(value)
    text = "".join(_ALPHABET[d] for d in reversed(_digits_le(abs(number), base)))
    return "-" + text if number < 0 else text


def from_signed_bytes_be(data: bytes | Iterable[int]) -> int:
    """Read a two's complement big-endian byte string; empty input is zero."""
    return int.from_bytes(bytes(data), "big", signed=True)


def from_signed_bytes_le(data: bytes | Iterable[int]) -> int:
    """Read a two's complement little-endian byte string; empty input is zero."""
    return int.from_bytes(bytes(data), "little", signed=True)


def _signed_length(number: int) -> int:
    bits = (number if number >= 0 else ~number).bit_length()
    return bits // 8 + 1


def to_signed_bytes_be(value: SupportsIndex) -> bytes:
    """Shortest two's complement form, big-endian; zero is one zero byte."""
    number = operator.index(value)
    return number.to_bytes(_signed_length(number), "big", signed=True)


def to_signed_bytes_le(value: SupportsIndex) -> bytes:
    """Shortest two's complement form, little-endian; zero is one zero byte."""
    number = operator.index(value)
    return number.to_bytes(_signed_length(number), "little", signed=True)


def to_radix_le(magnitude: SupportsIndex, radix: SupportsIndex) -> list[int]:
    """Digit values in ``radix`` (2 to 256), least significant first."""
    base = _check_radix(radix, 2, 256)
    return _digits_le(_magnitude(magnitude), base)


def to_radix_be(magnitude: SupportsIndex, radix: SupportsIndex) -> list[int]:
    """Digit values in ``radix`` (2 to 256), most significant first."""
    return list(reversed(to_radix_le(magnitude, radix)))


def from_radix_be(digits: Iterable[SupportsIndex], radix: SupportsIndex) -> int | None:
    """Build a magnitude from big-endian digit values; None if a digit is too big."""
    base = _check_radix(radix, 2, 256)
    values = [operator.index(d) for d in digits]
    if any(not 0 <= d < base for d in values):
        return None
    return _fold_be(values, base)


def from_radix_le(digits: Iterable[SupportsIndex], radix: SupportsIndex) -> int | None:
    """Build a magnitude from little-endian digit values; None if a digit is too big."""
    return from_radix_be(list(digits)[::-1], radix)


def _split(magnitude: SupportsIndex, width: int) -> list[int]:
    number = _magnitude(magnitude)
    mask = (1 << width) - 1
    digits = []
    while number:
        digits.append(number & mask)
        number >>= width
    return digits


def to_u32_digits(magnitude: SupportsIndex) -> list[int]:
    """Base 2**32 digits, least significant first; zero has none."""
    return _split(magnitude, 32)


def to_u64_digits(magnitude: SupportsIndex) -> list[int]:
    """Base 2**64 digits, least significant first; zero has none."""
    return _split(magnitude, 64)


def checked_fixed(value: SupportsIndex, bits: SupportsIndex, signed: bool) -> int:
    """Return ``value`` if it fits a fixed-width integer type, else raise."""
    number = operator.index(value)
    width = operator.index(bits)
    if width <= 0:
        raise ValueError(f"bit width must be positive: {width}")
    if signed:
        low, high = -(1 << (width - 1)), (1 << (width - 1)) - 1
    else:
        low, high = 0, (1 << width) - 1
    if not low <= number <= high:
        raise TryFromBigIntError(number)
    return number