# miniprintf

A small printf-style formatter. It reads a format string, fills in the
conversions, and either returns the text or writes it to a stream.

## Supported conversions

| Spec | Argument                | Output                                                 |
|------|-------------------------|--------------------------------------------------------|
| `%c` | one-character `str` or `int` | that character; an `int` is reduced to 0–255 first |
| `%s` | `str` or `None`         | the string, or `(null)` for `None`                     |
| `%d` | integer, as signed 32-bit | decimal                                              |
| `%i` | integer, as signed 32-bit | decimal                                              |
| `%u` | integer, as unsigned 32-bit | decimal                                            |
| `%x` | integer, as unsigned 32-bit | lower-case hexadecimal                             |
| `%X` | integer, as unsigned 32-bit | upper-case hexadecimal                             |
| `%p` | integer address or `None` | `0x` and lower-case hex, or `(nil)` for `None` or 0 |
| `%%` | none                    | a literal `%`                                          |

Integers outside the stated range wrap around as they would in C, so
`-1` under `%u` prints `4294967295` and `2147483648` under `%d` prints
`-2147483648`.

There are no flags, field widths or precisions. Any other character
after `%` takes no argument and produces no output. A `%` at the very end
of the format string is printed as it is.

Too few arguments raise `TypeError`, as does an argument of the wrong
kind (for example a `str` for `%d`, or a `bool` for any integer
conversion). A `%c` string of any length other than one raises
`ValueError`. Extra arguments are ignored.

## Usage

```python
from miniprintf.printf import render, printf

render("[%s] %d%%", "Hello, World!", 42)
# '[Hello, World!] 42%'

render("%x %X %p", 255, 255, None)
# 'ff FF (nil)'

count = printf("value: %u\n", 3000000000)
# prints "value: 3000000000" and returns 18, the number of characters written
```

`printf(fmt, *args, file=None)` writes to standard output by default;
pass `file=` to write to another text stream.

`convert(spec, args)` in `miniprintf.printf` applies one conversion
character, taking its value (if it needs one) from the iterable `args`.

The functions in `miniprintf.conversions` each format a single value:

- `format_char(value)`
- `format_str(value)`
- `format_signed(value)` — 32-bit signed decimal
- `format_unsigned(value)` — 32-bit unsigned decimal
- `format_base(value, digits)` — the value as a 64-bit unsigned integer,
  written with the given digit string (its length is the base; at least
  two digits, else `ValueError`)
- `format_pointer(value)`

## What it does not do

This is a library only: it has no command-line tool. It does not support
length modifiers, floating-point conversions, or padding and alignment.

## Running the tests

```
pip install -e .[test]
pytest
```