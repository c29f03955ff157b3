# ftprintf

A small printf-style formatter that produces bytes. It understands the
conversions `c s p d i u x X %`, the flags `-`, `0`, `#`, space and `+`,
a field width and a precision (either one may be `*`, taken from the
arguments) and the length modifiers `hh h l ll j z t`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from ftprintf.printer import format_bytes, printf

format_bytes("[%5d]", 42)          # b'[   42]'
format_bytes("[%-5d]", 42)         # b'[42   ]'
format_bytes("[%08x]", 255)        # b'[000000ff]'
format_bytes("[%#X]", 255)         # b'[0XFF]'
format_bytes("[%.3s]", "Truncate") # b'[Tru]'
format_bytes("[%s]", None)         # b'[(null)]'
format_bytes("[%p]", None)         # b'[(nil)]'
format_bytes("[%hhd]", -128)       # b'[-128]'
format_bytes("[%lc]", "é")         # b'[\xc3\xa9]'

count = printf("%s, %d%%\n", "done", 100)   # writes to standard output
```

`format_bytes(fmt, *args)` returns the formatted bytes.
`printf(fmt, *args, stream=None)` writes them to `stream` (standard output
when none is given; text and binary streams are both accepted) and returns
the number of bytes written. If formatting fails, nothing is written.

### Arguments

- `%c` takes an int (its low byte is written), a one-character `str` up to
  U+00FF or a one-byte `bytes`. `%c` with 0 writes a NUL byte.
- `%lc` takes a code point (int or one-character `str`) and writes it in
  UTF-8; `%ls` takes a `str` or an iterable of code points, stops at the
  first NUL and gives `(null)` for `None`.
- `%s` takes a `str` (UTF-8 encoded) or `bytes`, cut at the first NUL.
  `None` gives `(null)`, or nothing when a precision below 6 is given.
- `%p` takes an int address; 0 or `None` gives `(nil)`, anything else
  `0x` followed by lower-case hex digits.
- `%d %i %u %x %X` take ints, reduced to the width the length modifier
  selects: 32 bits with no modifier, 8 with `hh`, 16 with `h`, 64 with
  `l ll j z t`. So `format_bytes("%d", 2**31)` gives `b'-2147483648'`.

A conversion character outside the list above is written back after a
`%`, without its flags, width or precision.

### Errors

- `IndexError` when the format asks for more arguments than were given;
- `TypeError` for an argument of the wrong kind;
- `ValueError` for a wide character that is a surrogate, negative or above
  U+10FFFF, or a `%c` character above U+00FF.

### Lower-level pieces

- `ftprintf.spec`: `parse_spec`, `FormatSpec`, `Length`, `Arguments`.
- `ftprintf.conversions`: `convert` and one `convert_*` function per
  conversion.
- `ftprintf.padding`: `apply_width`, `apply_precision`,
  `apply_precision_int`, `apply_sign`, `apply_hash`.
- `ftprintf.values`: `signed_value`, `unsigned_value`, `wchar_to_utf8`,
  `wstr_to_utf8`.
- `ftprintf.numbers`: `to_base`, `to_decimal`, `to_hex`, `fill`,
  `encode_wchar`.

## Not supported

There are no floating-point conversions (`%f`, `%e`, `%g`), no octal
(`%o`) and no `%n`; such characters are written back as unknown
conversions.

## Demonstration

The package installs a command that prints a table of example conversions:

```
ftprintf-demo
```