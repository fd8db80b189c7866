"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterable, TextIO

from miniprintf.conversions import (
    format_base,
    format_char,
    format_pointer,
    format_signed,
    format_str,
    format_unsigned,
)

_UINT_MASK = (1 << 32) - 1


def _next_arg(args: Any) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _hex_of_unsigned(value: Any, digits: str) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"a hex conversion requires an integer, got {type(value).__name__}")
    return format_base(value & _UINT_MASK, digits)


def convert(spec: str, args: Iterable[Any]) -> str:
    """Return the text for one conversion character, taking its value from ``args``.

    Unknown conversion characters produce no text and take no value.
    """
    args = iter(args)
    if spec == "%":
        return "%"
    if spec == "c":
        return format_char(_next_arg(args))
    if spec == "s":
        return format_str(_next_arg(args))
    if spec in ("d", "i"):
        return format_signed(_next_arg(args))
    if spec == "p":
        return format_pointer(_next_arg(args))
    if spec == "u":
        return format_unsigned(_next_arg(args))
    if spec == "x":
        return _hex_of_unsigned(_next_arg(args), "0123456789abcdef")
    if spec == "X":
        return _hex_of_unsigned(_next_arg(args), "0123456789ABCDEF")
    return ""


def render(fmt: str, *args: Any) -> str:
    """Return the text ``fmt`` produces with ``args`` filled in.

    A ``%`` at the very end of ``fmt`` is kept as a plain character.
    """
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for char in chars:
        if char == "%":
            spec = next(chars, None)
            if spec is None:
                out.append(char)
            else:
                out.append(convert(spec, values))
        else:
            out.append(char)
    return "".join(out)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the rendered text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)