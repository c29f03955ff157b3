"""Formatted output: walks a format string and writes the converted bytes."""

from __future__ import annotations

import io
import sys
from typing import Any, BinaryIO, Iterator, TextIO, Union

from .conversions import SPECIFIERS, convert
from .spec import Arguments, parse_spec

Stream = Union[BinaryIO, TextIO]


def _literal(text: str) -> bytes:
    return text.encode("utf-8", errors="surrogateescape")


def _render(fmt: str, args: Arguments) -> Iterator[bytes]:
    pos = 0
    end = len(fmt)
    while pos < end:
        percent = fmt.find("%", pos)
        if percent == -1:
            yield _literal(fmt[pos:])
            return
        if percent > pos:
            yield _literal(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent + 1, args)
        char = fmt[pos:pos + 1]
        if char and char in SPECIFIERS:
            yield convert(char, spec, args)
            pos += 1
        else:
            # Unknown conversion: write back '%' and the character, dropping options.
            yield b"%" + _literal(char)
            pos += len(char)


def format_bytes(fmt: str, *args: Any) -> bytes:
    """Return the bytes that ``fmt`` produces with ``args``.

    Raises IndexError when the arguments run out, TypeError for an
    argument of the wrong kind and ValueError for a wide character that
    cannot be encoded.
    """
    return b"".join(_render(fmt, Arguments(args)))


def _write(data: bytes, stream: Stream | None) -> None:
    target = sys.stdout if stream is None else stream
    if isinstance(target, io.TextIOBase):
        buffer = getattr(target, "buffer", None)
        if buffer is not None:
            target.flush()
            buffer.write(data)
            buffer.flush()
        else:
            target.write(data.decode("utf-8", errors="replace"))
        return
    target.write(data)


def printf(fmt: str, *args: Any, stream: Stream | None = None) -> int:
    """Write the formatted bytes to ``stream`` (standard output by default).

    Returns the number of bytes written. Nothing is written when the
    conversion fails; write errors propagate as OSError.
    """
    data = format_bytes(fmt, *args)
    _write(data, stream)
    return len(data)


_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


def _mandatory_checks() -> list[tuple[str, tuple[Any, ...]]]:
    address = id(object())
    return [
        ("===== SPECIFIER: %%c =====\n", ()),
        ("Char simple       : [%c]\n", ("A",)),
        ("Char with width   : [%5c]\n", ("B",)),
        ("Char left align   : [%-5c]\n", ("C",)),
        ("Char \\0           : [%c]\n", (0,)),
        ("Char \\0 padded    : [%5c]\n", (0,)),
        ("\n===== SPECIFIER: %%s =====\n", ()),
        ("String simple     : [%s]\n", ("Hello",)),
        ("String width      : [%10s]\n", ("World",)),
        ("String precision  : [%.3s]\n", ("Truncate",)),
        ("Left align + prec : [%-10.5s]\n", ("Align",)),
        ("NULL string       : [%s]\n", (None,)),
        ("NULL str width    : [%10s]\n", (None,)),
        ("NULL str prec     : [%.3s]\n", (None,)),
        ("\n===== SPECIFIER: %%p =====\n", ()),
        ("Pointer address   : [%p]\n", (address,)),
        ("NULL pointer      : [%p]\n", (None,)),
        ("\n===== SPECIFIER: %%d / %%i =====\n", ()),
        ("Int simple        : [%d]\n", (42,)),
        ("Negative int      : [%i]\n", (-42,)),
        ("Int max           : [%d]\n", (_INT_MAX,)),
        ("Int min           : [%d]\n", (_INT_MIN,)),
        ("Cast > INT_MAX    : [%d]\n", (_INT_MAX + 1,)),
        ("Cast < INT_MIN    : [%d]\n", (_INT_MIN - 1,)),
        ("\n===== SPECIFIER: %%u =====\n", ()),
        ("Unsigned          : [%u]\n", (123456,)),
        ("\n===== SPECIFIER: %%x / %%X =====\n", ()),
        ("Hex lower         : [%x]\n", (255,)),
        ("Hex upper         : [%X]\n", (255,)),
        ("\n===== SPECIFIER: %% =====\n", ()),
        ("Percent literal   : [%%]\n", ()),
    ]


def _bonus_checks() -> list[tuple[str, tuple[Any, ...]]]:
    return [
        ("\n===== BONUS FLAGS / WIDTH / PRECISION =====\n", ()),
        ("+ flag            : [%+d]\n", (42,)),
        ("Space flag        : [% d]\n", (42,)),
        ("Zero padded       : [%05d]\n", (42,)),
        ("Left align        : [%-5d]\n", (42,)),
        ("Precision         : [%.4d]\n", (42,)),
        ("Width + prec      : [%8.4d]\n", (42,)),
        ("Zero + .0         : [%.0d]\n", (0,)),
        ("Zero + width .0   : [%5.0d]\n", (0,)),
        ("Zero padded       : [%08u]\n", (123456,)),
        ("Precision         : [%.5u]\n", (123,)),
        ("Width + prec      : [%10.5u]\n", (123,)),
        ("Zero with .0      : [%.0u]\n", (0,)),
        ("With # lower      : [%#x]\n", (255,)),
        ("With # upper      : [%#X]\n", (255,)),
        ("Zero padded       : [%08x]\n", (255,)),
        ("Precision         : [%.4x]\n", (255,)),
        ("Width + prec      : [%10.4x]\n", (255,)),
        ("Zero with .0      : [%.0x]\n", (0,)),
        ("Zero with #       : [%#x]\n", (0,)),
        ("Width + %%         : [%5%]\n", ()),
        ("Left align %%      : [%-5%]\n", ()),
        ("\n===== MODIFICATEURS DE LENGTH =====\n", ()),
        ("%%hd  : [%hd]\n", (-32768,)),
        ("%%hhd : [%hhd]\n", (-128,)),
        ("%%ld  : [%ld]\n", (2147483648,)),
        ("%%lld : [%lld]\n", (9223372036854775807,)),
        ("%%hu  : [%hu]\n", (65535,)),
        ("%%hhu : [%hhu]\n", (255,)),
        ("%%lu  : [%lu]\n", (4294967295,)),
        ("%%llu : [%llu]\n", (18446744073709551615,)),
        ("%%lx  : [%lx]\n", (4294967295,)),
        ("%%llx : [%llx]\n", (18446744073709551615,)),
        ("%%lX  : [%lX]\n", (4294967295,)),
        ("%%llX : [%llX]\n", (18446744073709551615,)),
    ]


def main(argv: list[str] | None = None) -> int:
    """Print a demonstration of every supported conversion."""
    for fmt, args in _mandatory_checks() + _bonus_checks():
        printf(fmt, *args)
    return 0


if __name__ == "__main__":
    sys.exit(main())