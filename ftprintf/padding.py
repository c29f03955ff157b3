"""Width, precision, sign and '#' adjustments applied to converted text.

Every function takes the text of one conversion, either ``str`` or
``bytes``, and returns a new value of the same type.
"""

from __future__ import annotations

from typing import AnyStr

from .spec import FormatSpec

_SIGN_CHARS = "-+ "


def _like(text: AnyStr, chars: str) -> AnyStr:
    """Return ``chars`` as the same type as ``text``."""
    if isinstance(text, (bytes, bytearray)):
        return chars.encode("ascii")
    return chars


def _starts_with_sign(text: AnyStr) -> bool:
    first = text[:1]
    return bool(first) and first in _like(text, _SIGN_CHARS)


def apply_width(text: AnyStr, spec: FormatSpec, content_len: int) -> AnyStr:
    """Pad ``text`` up to ``spec.width``, counting it as ``content_len`` wide.

    Padding goes on the right with '-', otherwise on the left; zeros are
    used with '0' when no '-' and no precision were given, and then go
    after a leading sign character.
    """
    if spec.width <= content_len:
        return text
    padding = spec.width - content_len
    use_zero = spec.zero and not spec.minus and spec.precision == -1
    if spec.minus:
        return text + _like(text, " ") * padding
    if use_zero and _starts_with_sign(text):
        return text[:1] + _like(text, "0") * padding + text[1:]
    pad = _like(text, "0" if use_zero else " ")
    return pad * padding + text


def apply_precision(text: AnyStr, spec: FormatSpec) -> AnyStr:
    """Cut a string conversion down to at most ``spec.precision`` units."""
    if spec.precision < 0:
        return text
    if len(text) > spec.precision:
        return text[:spec.precision]
    return text


def apply_precision_int(text: AnyStr, spec: FormatSpec) -> AnyStr:
    """Left-pad the digits with zeros up to ``spec.precision`` digits.

    A leading '-' is kept in front of the added zeros.
    """
    minus = _like(text, "-")
    has_sign = text[:1] == minus
    digits = text[1:] if has_sign else text
    if spec.precision < 0 or spec.precision <= len(digits):
        return text
    zeros = _like(text, "0") * (spec.precision - len(digits))
    return (minus if has_sign else text[:0]) + zeros + digits


def apply_sign(text: AnyStr, spec: FormatSpec, num: int) -> AnyStr:
    """Prefix '-' for negative numbers, else '+' or ' ' when asked for."""
    if num < 0:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        return text
    return _like(text, sign) + text


def apply_hash(text: AnyStr, spec: FormatSpec, uppercase: bool) -> AnyStr:
    """Prefix '0x' or '0X' under the '#' flag unless the text starts with '0'."""
    if not spec.hash or text[:1] == _like(text, "0"):
        return text
    return _like(text, "0X" if uppercase else "0x") + text