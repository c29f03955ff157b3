"""Parsing of conversion specifications: flags, width, precision and length."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

FLAG_CHARS = "-0# +"


class Length(Enum):
    """Length modifier of a conversion."""

    NONE = ""
    HH = "hh"
    H = "h"
    L = "l"
    LL = "ll"
    J = "j"
    Z = "z"
    T = "t"


_TWO_CHAR_LENGTHS = {"hh": Length.HH, "ll": Length.LL}
_ONE_CHAR_LENGTHS = {
    "h": Length.H,
    "l": Length.L,
    "j": Length.J,
    "z": Length.Z,
    "t": Length.T,
}


@dataclass
class FormatSpec:
    """Options of one conversion; a precision of -1 means none was given."""

    width: int = 0
    precision: int = -1
    minus: bool = False
    zero: bool = False
    hash: bool = False
    space: bool = False
    plus: bool = False
    length: Length = Length.NONE


class Arguments:
    """The values that conversions consume, in order."""

    __slots__ = ("_values", "_index")

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values = list(values)
        self._index = 0

    def next(self) -> Any:
        """Return the next value; raise IndexError when none is left."""
        if self._index >= len(self._values):
            raise IndexError("not enough arguments for format string")
        value = self._values[self._index]
        self._index += 1
        return value

    def __len__(self) -> int:
        return len(self._values) - self._index


def _char_at(fmt: str, pos: int) -> str:
    return fmt[pos] if pos < len(fmt) else ""


def _next_int(args: Arguments) -> int:
    value = args.next()
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'*' requires an int argument, got {type(value).__name__}")
    return value


def _read_digits(fmt: str, pos: int) -> tuple[int, int]:
    end = pos
    while _char_at(fmt, end).isdigit() and _char_at(fmt, end).isascii():
        end += 1
    return int(fmt[pos:end]), end


def _parse_flags(fmt: str, pos: int, spec: FormatSpec) -> int:
    while (char := _char_at(fmt, pos)) and char in FLAG_CHARS:
        if char == "-":
            spec.minus = True
            spec.zero = False
        elif char == "0" and not spec.minus:
            spec.zero = True
        elif char == "#":
            spec.hash = True
        elif char == " " and not spec.plus:
            spec.space = True
        elif char == "+":
            spec.plus = True
            spec.space = False
        pos += 1
    return pos


def _is_digit(char: str) -> bool:
    return char.isascii() and char.isdigit()


def _parse_width(fmt: str, pos: int, spec: FormatSpec, args: Arguments) -> int:
    char = _char_at(fmt, pos)
    if char == "*":
        width = _next_int(args)
        if width < 0:
            spec.minus = True
            width = -width
        spec.width = width
        return pos + 1
    if _is_digit(char):
        spec.width, pos = _read_digits(fmt, pos)
    return pos


def _parse_precision(fmt: str, pos: int, spec: FormatSpec, args: Arguments) -> int:
    if _char_at(fmt, pos) != ".":
        spec.precision = -1
        return pos
    pos += 1
    char = _char_at(fmt, pos)
    if char == "*":
        precision = _next_int(args)
        spec.precision = precision if precision >= 0 else -1
        return pos + 1
    if _is_digit(char):
        spec.precision, pos = _read_digits(fmt, pos)
    else:
        spec.precision = 0
    return pos


def _parse_length(fmt: str, pos: int, spec: FormatSpec) -> int:
    pair = fmt[pos:pos + 2]
    if pair in _TWO_CHAR_LENGTHS:
        spec.length = _TWO_CHAR_LENGTHS[pair]
        pos += 2
    single = _char_at(fmt, pos)
    if single in _ONE_CHAR_LENGTHS:
        spec.length = _ONE_CHAR_LENGTHS[single]
        pos += 1
    return pos


def parse_spec(fmt: str, pos: int, args: Arguments) -> tuple[FormatSpec, int]:
    """Parse the options that start at ``pos``, just after a '%'.

    Returns the options and the position of the conversion character.
    Widths and precisions given as '*' are taken from ``args``.
    """
    spec = FormatSpec()
    pos = _parse_flags(fmt, pos, spec)
    pos = _parse_width(fmt, pos, spec, args)
    pos = _parse_precision(fmt, pos, spec, args)
    pos = _parse_length(fmt, pos, spec)
    return spec, pos