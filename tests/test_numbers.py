import pytest

from ftprintf.numbers import (
    DIGITS,
    HEXLOW,
    OCTAL,
    encode_wchar,
    fill,
    to_base,
    to_decimal,
    to_hex,
)


def test_zero_writes_first_digit():
    assert to_decimal(0) == "0"
    assert to_hex(0) == "0"
    assert to_base(0, OCTAL) == "0"


def test_largest_unsigned_value():
    assert to_decimal(18446744073709551615) == "18446744073709551615"


@pytest.mark.parametrize("value", [1, 9, 10, 255, 123456, 4294967295, 2**63, 2**64 - 1])
def test_decimal_round_trip(value):
    assert int(to_decimal(value)) == value


@pytest.mark.parametrize("value", [1, 15, 16, 255, 4294967295, 2**64 - 1])
def test_hex_round_trip_and_case(value):
    low = to_hex(value)
    up = to_hex(value, uppercase=True)
    assert int(low, 16) == value
    assert up == low.upper()
    assert low == low.lower()


@pytest.mark.parametrize("value", [0, 7, 8, 64, 511, 10**12])
def test_octal_round_trip(value):
    assert int(to_base(value, OCTAL), 8) == value


def test_to_base_uses_given_alphabet():
    text = to_base(12345, "ab")
    assert set(text) <= {"a", "b"}
    assert int(text.replace("a", "0").replace("b", "1"), 2) == 12345


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        to_decimal(-1)
    with pytest.raises(ValueError):
        to_hex(-42)


def test_value_above_unsigned_range_rejected():
    with pytest.raises(ValueError):
        to_base(2**64, HEXLOW)


def test_base_too_short_rejected():
    with pytest.raises(ValueError):
        to_base(5, "0")


def test_decimal_matches_digits_alphabet():
    assert to_decimal(123456) == to_base(123456, DIGITS)


def test_fill():
    assert fill(3, "0") == "000"
    assert fill(0, " ") == ""


def test_fill_rejects_negative_size():
    with pytest.raises(ValueError):
        fill(-1, "0")


@pytest.mark.parametrize("code", [0, 0x41, 0x7F, 0x80, 0xE9, 0x3A9, 0x7FF, 0x800, 0x4F60, 0xD7FF, 0xE000, 0xFFFF])
def test_encode_up_to_three_bytes_is_utf8(code):
    assert encode_wchar(code) == chr(code).encode("utf-8")


@pytest.mark.parametrize("code", [0x10000, 0x1F600, 0x1F40D, 0x10FFFF])
def test_encode_four_byte_range(code):
    encoded = encode_wchar(code)
    assert len(encoded) == 4
    assert encoded[1:] == chr(code).encode("utf-8")[1:]
    assert encoded[0] & 0xF8 == 0xE0


@pytest.mark.parametrize("code", [0xD800, 0xDABC, 0xDFFF, 0x110000, -1])
def test_encode_invalid_code_points(code):
    with pytest.raises(ValueError):
        encode_wchar(code)