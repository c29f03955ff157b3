"""Number-to-text helpers and UTF-8 encoding of single code points."""

from __future__ import annotations

DIGITS = "0123456789"
HEXLOW = "0123456789abcdef"
HEXUPP = "0123456789ABCDEF"
OCTAL = "01234567"

UINTMAX_MAX = 2**64 - 1

UCODE_MAX = 0x10FFFF
ASCII_MAX = 0x7F
UTF8_2_BYTES_MAX = 0x7FF
UTF8_3_BYTES_MAX = 0xFFFF
UTF16_SURROGATE_MIN = 0xD800
UTF16_SURROGATE_MAX = 0xDFFF

UTF8_MASK_2BYTE = 0xC0
UTF8_MASK_3BYTE = 0xE0
UTF8_MASK_CONT = 0x80
UTF8_6BITS = 0x3F


def _check_unsigned(value: int) -> None:
    if not 0 <= value <= UINTMAX_MAX:
        raise ValueError(f"value out of unsigned 64-bit range: {value}")


def to_base(value: int, digits: str) -> str:
    """Write a non-negative integer with the given digit alphabet."""
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    _check_unsigned(value)
    base = len(digits)
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def to_decimal(value: int) -> str:
    """Write a non-negative integer in decimal."""
    return to_base(value, DIGITS)


def to_hex(value: int, uppercase: bool = False) -> str:
    """Write a non-negative integer in hexadecimal."""
    return to_base(value, HEXUPP if uppercase else HEXLOW)


def fill(size: int, char: str) -> str:
    """Return ``char`` repeated ``size`` times."""
    if size < 0:
        raise ValueError("size must not be negative")
    if len(char) != 1:
        raise ValueError("fill needs exactly one character")
    return char * size


def encode_wchar(code: int) -> bytes:
    """Encode one code point to its multi-byte form.

    Surrogates, negative values and values above U+10FFFF raise ValueError.
    """
    if code < 0 or code > UCODE_MAX or UTF16_SURROGATE_MIN <= code <= UTF16_SURROGATE_MAX:
        raise ValueError(f"invalid code point: {code:#x}" if code >= 0 else f"invalid code point: {code}")
    if code <= ASCII_MAX:
        return bytes([code])
    if code <= UTF8_2_BYTES_MAX:
        return bytes([
            UTF8_MASK_2BYTE | (code >> 6),
            UTF8_MASK_CONT | (code & UTF8_6BITS),
        ])
    if code <= UTF8_3_BYTES_MAX:
        return bytes([
            UTF8_MASK_3BYTE | (code >> 12),
            UTF8_MASK_CONT | ((code >> 6) & UTF8_6BITS),
            UTF8_MASK_CONT | (code & UTF8_6BITS),
        ])
    return bytes([
        UTF8_MASK_3BYTE | ((code >> 18) & 0x07),
        UTF8_MASK_CONT | ((code >> 12) & UTF8_6BITS),
        UTF8_MASK_CONT | ((code >> 6) & UTF8_6BITS),
        UTF8_MASK_CONT | (code & UTF8_6BITS),
    ])