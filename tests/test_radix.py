import pytest
from hypothesis import given
from hypothesis import strategies as st

from numbig.radix import (
    ParseBigIntError,
    ParseErrorKind,
    TryFromBigIntError,
    checked_fixed,
    from_radix_be,
    from_radix_le,
    from_signed_bytes_be,
    from_signed_bytes_le,
    parse_str_radix,
    to_radix_be,
    to_radix_le,
    to_signed_bytes_be,
    to_signed_bytes_le,
    to_str_radix,
    to_u32_digits,
    to_u64_digits,
)


@given(st.integers(min_value=-(1 << 300), max_value=1 << 300), st.integers(2, 36))
def test_str_radix_round_trip(value, radix):
    assert parse_str_radix(to_str_radix(value, radix), radix) == value


@given(st.integers(min_value=-(1 << 300), max_value=1 << 300))
def test_signed_bytes_round_trip(value):
    assert from_signed_bytes_be(to_signed_bytes_be(value)) == value
    assert from_signed_bytes_le(to_signed_bytes_le(value)) == value


@given(st.integers(min_value=0, max_value=1 << 300), st.integers(2, 256))
def test_radix_digits_round_trip(value, radix):
    assert from_radix_be(to_radix_be(value, radix), radix) == value
    assert from_radix_le(to_radix_le(value, radix), radix) == value


def test_parse_examples():
    assert parse_str_radix("1234", 10) == 1234
    assert parse_str_radix("ABCD", 16) == 0xABCD
    assert parse_str_radix("ff", 16) == 255
    assert parse_str_radix("-5", 10) == -5
    assert parse_str_radix("+5", 10) == 5
    assert parse_str_radix("1_000", 10) == 1000


@pytest.mark.parametrize("text", ["G", "-+5", "+-5", "++5", "_1", "1 2", "é"])
def test_parse_invalid(text):
    with pytest.raises(ParseBigIntError) as info:
        parse_str_radix(text, 16)
    assert info.value.kind is ParseErrorKind.INVALID


@pytest.mark.parametrize("text", ["", "-", "+"])
def test_parse_empty(text):
    with pytest.raises(ParseBigIntError) as info:
        parse_str_radix(text, 10)
    assert info.value.kind is ParseErrorKind.EMPTY


def test_parse_bad_radix():
    with pytest.raises(ValueError):
        parse_str_radix("1", 37)


def test_to_str_radix_examples():
    assert to_str_radix(255, 16) == "ff"
    assert to_str_radix(-255, 2) == "-11111111"
    assert to_str_radix(0, 10) == "0"
    assert to_str_radix(10**5000, 10) == "1" + "0" * 5000


def test_signed_bytes_examples():
    assert to_signed_bytes_be(-1125) == bytes([251, 155])
    assert to_signed_bytes_le(-1125) == bytes([155, 251])
    assert to_signed_bytes_be(0) == b"\x00"
    assert to_signed_bytes_be(-128) == b"\x80"
    assert to_signed_bytes_be(128) == b"\x00\x80"
    assert to_signed_bytes_be(-256) == b"\xff\x00"
    assert from_signed_bytes_be(b"") == 0
    assert from_signed_bytes_le(b"") == 0
    assert from_signed_bytes_be(bytes([251, 155])) == -1125


def test_radix_examples():
    assert to_radix_be(0xFFFF, 159) == [2, 94, 27]
    assert to_radix_le(0xFFFF, 159) == [27, 94, 2]
    assert to_radix_be(0, 10) == [0]
    digits = [15, 33, 125, 12, 14]
    assert to_radix_be(from_radix_be(digits, 190), 190) == digits
    assert from_radix_be([], 10) == 0
    assert from_radix_be([1, 10], 10) is None
    with pytest.raises(ValueError):
        to_radix_be(5, 257)
    with pytest.raises(ValueError):
        to_radix_be(-5, 10)


def test_u32_u64_digits():
    assert to_u32_digits(1125) == [1125]
    assert to_u32_digits(4294967295) == [4294967295]
    assert to_u32_digits(4294967296) == [0, 1]
    assert to_u32_digits(112500000000) == [830850304, 26]
    assert to_u32_digits(0) == []
    assert to_u64_digits(4294967296) == [4294967296]
    assert to_u64_digits(112500000000) == [112500000000]
    assert to_u64_digits(1 << 64) == [0, 1]


def test_checked_fixed():
    assert checked_fixed(-128, 8, True) == -128
    assert checked_fixed(255, 8, False) == 255
    assert checked_fixed(-(1 << 63), 64, True) == -(1 << 63)
    with pytest.raises(TryFromBigIntError) as info:
        checked_fixed(128, 8, True)
    assert info.value.original == 128
    with pytest.raises(TryFromBigIntError):
        checked_fixed(-1, 64, False)
    with pytest.raises(TryFromBigIntError):
        checked_fixed(1 << 64, 64, False)