"""Conversions that turn single values into their printed text."""

from __future__ import annotations

_INT_BITS = 32
_LONG_BITS = 64
_HEX_LOWER = "0123456789abcdef"


def _wrap_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _wrap_unsigned(value: int, bits: int) -> int:
    return value % (1 << bits)


def _require_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} requires an integer, got {type(value).__name__}")
    return value


def format_char(value: str | int) -> str:
    """Return a single character.

    A one-character string is returned as is; an integer is reduced to
    a byte value first, as a C ``char`` would be.
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character conversion needs exactly one character")
        return value
    code = _require_int(value, "a character conversion")
    return chr(_wrap_unsigned(code, 8))


def format_str(value: str | None) -> str:
    """Return the string, or ``(null)`` when there is none."""
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"a string conversion requires a str, got {type(value).__name__}")
    return value


def format_signed(value: int) -> str:
    """Return the decimal text of a value taken as a 32-bit signed integer."""
    return str(_wrap_signed(_require_int(value, "a signed conversion"), _INT_BITS))


def format_unsigned(value: int) -> str:
    """Return the decimal text of a value taken as a 32-bit unsigned integer."""
    return str(_wrap_unsigned(_require_int(value, "an unsigned conversion"), _INT_BITS))


def format_base(value: int, digits: str) -> str:
    """Return a value, taken as a 64-bit unsigned integer, written in ``digits``.

    The base is the number of digits; the first digit stands for zero.
    """
    number = _wrap_unsigned(_require_int(value, "a base conversion"), _LONG_BITS)
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    out: list[str] = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def format_pointer(value: int | None) -> str:
    """Return an address as ``0x`` and lowercase hex, or ``(nil)`` for a null one."""
    if value is None:
        return "(nil)"
    address = _wrap_unsigned(_require_int(value, "a pointer conversion"), _LONG_BITS)
    if address == 0:
        return "(nil)"
    return "0x" + format_base(address, _HEX_LOWER)