"""Conversion of one argument under one conversion specification.

Every conversion returns the bytes it writes. Errors are raised:
``IndexError`` when the arguments run out, ``TypeError`` for an argument
of the wrong kind and ``ValueError`` for a wide character that cannot be
encoded.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from .numbers import UINTMAX_MAX, to_decimal, to_hex
from .padding import (
    apply_hash,
    apply_precision,
    apply_precision_int,
    apply_sign,
    apply_width,
)
from .spec import Arguments, FormatSpec, Length
from .values import (
    NULL_TEXT,
    signed_value,
    unsigned_value,
    wchar_to_utf8,
    wstr_to_utf8,
)

NIL_TEXT = b"(nil)"
POINTER_PREFIX = b"0x"
SPECIFIERS = "cspdiuxX%"


def _char_code(value: Any) -> int:
    """Return the single byte a '%c' argument stands for."""
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise TypeError("'%c' needs a single byte")
        return value[0]
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("'%c' needs a single character")
        code = ord(value)
        if code > 0xFF:
            raise ValueError("character does not fit in one byte; use '%lc'")
        return code
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'%c' needs an int or a character, got {type(value).__name__}")
    return value & 0xFF


def _c_string(value: Any) -> bytes:
    """Return the bytes of a '%s' argument, up to its first NUL."""
    if isinstance(value, str):
        data = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray)):
        data = bytes(value)
    else:
        raise TypeError(f"'%s' needs a str or bytes, got {type(value).__name__}")
    return data.split(b"\0", 1)[0]


def _address(value: Any) -> int:
    """Return the address a '%p' argument stands for; ``None`` is 0."""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'%p' needs an int address or None, got {type(value).__name__}")
    return value & UINTMAX_MAX


def _ascii(text: str) -> bytes:
    return text.encode("ascii")


def convert_char(spec: FormatSpec, args: Arguments) -> bytes:
    """Convert a '%c' argument; with 'l' it is a wide character."""
    value = args.next()
    spec = replace(spec, zero=False)
    if spec.length is Length.L:
        text = wchar_to_utf8(value)
    else:
        text = bytes([_char_code(value)])
    return apply_width(text, spec, 1)


def convert_string(spec: FormatSpec, args: Arguments) -> bytes:
    """Convert a '%s' argument; with 'l' it is a wide string."""
    value = args.next()
    if spec.length is Length.L:
        text = wstr_to_utf8(value)
    elif value is None:
        text = b"" if 0 <= spec.precision < len(NULL_TEXT) else NULL_TEXT
    else:
        text = _c_string(value)
    text = apply_precision(text, spec)
    return apply_width(text, replace(spec, zero=False), len(text))


def convert_pointer(spec: FormatSpec, args: Arguments) -> bytes:
    """Convert a '%p' argument: '0x' and hex digits, or '(nil)' for 0."""
    address = _address(args.next())
    if address == 0:
        text = NIL_TEXT
    else:
        digits = _ascii(to_hex(address))
        if (
            spec.zero
            and not spec.minus
            and spec.precision < 0
            and spec.width > len(digits) + len(POINTER_PREFIX)
        ):
            spec = replace(spec, precision=spec.width - len(POINTER_PREFIX), width=0)
        text = POINTER_PREFIX + apply_precision_int(digits, spec)
    return apply_width(text, spec, len(text))


def convert_int(spec: FormatSpec, args: Arguments) -> bytes:
    """Convert a '%d' or '%i' argument."""
    num = signed_value(args.next(), spec.length)
    if num == 0 and spec.precision == 0:
        text = b""
    else:
        text = _ascii(to_decimal(abs(num)))
    text = apply_precision_int(text, spec)
    text = apply_sign(text, spec, num)
    return apply_width(text, spec, len(text))


def convert_uint(spec: FormatSpec, args: Arguments) -> bytes:
    """Convert a '%u' argument."""
    num = unsigned_value(args.next(), spec.length)
    if num == 0 and spec.precision == 0:
        text = b""
    else:
        text = _ascii(to_decimal(num))
    text = apply_precision_int(text, spec)
    return apply_width(text, spec, len(text))


def convert_hex(spec: FormatSpec, args: Arguments, uppercase: bool = False) -> bytes:
    """Convert a '%x' or, with ``uppercase``, a '%X' argument."""
    num = unsigned_value(args.next(), spec.length)
    if num == 0 and spec.precision == 0:
        text = b""
    else:
        text = _ascii(to_hex(num, uppercase))
    text = apply_precision_int(text, spec)
    if num != 0:
        text = apply_hash(text, spec, uppercase)
    return apply_width(text, spec, len(text))


def convert(specifier: str, spec: FormatSpec, args: Arguments) -> bytes:
    """Convert by conversion character.

    '%%' gives a bare '%'; an unknown character is written back after a '%';
    an empty specifier writes nothing.
    """
    if not specifier:
        return b""
    if specifier == "c":
        return convert_char(spec, args)
    if specifier == "s":
        return convert_string(spec, args)
    if specifier == "p":
        return convert_pointer(spec, args)
    if specifier in ("d", "i"):
        return convert_int(spec, args)
    if specifier == "u":
        return convert_uint(spec, args)
    if specifier == "x":
        return convert_hex(spec, args, False)
    if specifier == "X":
        return convert_hex(spec, args, True)
    if specifier == "%":
        return b"%"
    return b"%" + specifier.encode("utf-8")