"""Narrowing of integer arguments by length modifier, and wide-text encoding."""

from __future__ import annotations

from typing import Iterable, Union

from .numbers import encode_wchar
from .spec import Length

_BITS = {
    Length.NONE: 32,
    Length.HH: 8,
    Length.H: 16,
    Length.L: 64,
    Length.LL: 64,
    Length.J: 64,
    Length.Z: 64,
    Length.T: 64,
}

NULL_TEXT = b"(null)"

WideText = Union[str, Iterable[int]]


def _check_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"integer conversion needs an int, got {type(value).__name__}")
    return value


def unsigned_value(value: int, length: Length) -> int:
    """Reduce ``value`` to the unsigned type the length modifier names."""
    bits = _BITS[length]
    return _check_int(value) & ((1 << bits) - 1)


def signed_value(value: int, length: Length) -> int:
    """Reduce ``value`` to the signed type the length modifier names."""
    bits = _BITS[length]
    unsigned = unsigned_value(value, length)
    if unsigned >= 1 << (bits - 1):
        return unsigned - (1 << bits)
    return unsigned


def _code_of(item: Union[int, str]) -> int:
    if isinstance(item, str):
        if len(item) != 1:
            raise TypeError("a wide character must be a single character")
        return ord(item)
    return _check_int(item)


def wchar_to_utf8(code: Union[int, str]) -> bytes:
    """Encode one wide character; invalid code points raise ValueError."""
    return encode_wchar(_code_of(code))


def wstr_to_utf8(codes: WideText | None) -> bytes:
    """Encode a wide string up to its first NUL; ``None`` gives '(null)'."""
    if codes is None:
        return NULL_TEXT
    parts = []
    for item in codes:
        code = _code_of(item)
        if code == 0:
            break
        parts.append(encode_wchar(code))
    return b"".join(parts)