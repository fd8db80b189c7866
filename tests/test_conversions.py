import pytest
from hypothesis import given, strategies as st

from miniprintf.conversions import (
    format_base,
    format_char,
    format_pointer,
    format_signed,
    format_str,
    format_unsigned,
)

HEX = "0123456789abcdef"


def test_char_from_string():
    assert format_char("A") == "A"


def test_char_from_code():
    assert format_char(ord("A")) == "A"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("AB")


def test_char_rejects_other_types():
    with pytest.raises(TypeError):
        format_char(1.5)


def test_str_null():
    assert format_str(None) == "(null)"


def test_str_plain():
    assert format_str("Hello, World!") == "Hello, World!"
    assert format_str("") == ""


def test_str_rejects_non_string():
    with pytest.raises(TypeError):
        format_str(42)


def test_signed_minimum():
    assert format_signed(-2147483648) == "-2147483648"


def test_signed_wraps_past_maximum():
    assert format_signed(2147483647 + 1) == "-2147483648"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_signed_round_trip(value):
    assert int(format_signed(value)) == value


def test_unsigned_wraps_negative():
    assert int(format_unsigned(-1)) == 4294967295


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_unsigned_round_trip(value):
    text = format_unsigned(value)
    assert int(text) == value
    assert not text.startswith("-")


def test_base_zero():
    assert format_base(0, HEX) == "0"


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_base_hex_round_trip(value):
    text = format_base(value, HEX)
    assert int(text, 16) == value
    assert text == text.lower()


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_base_upper_matches_lower(value):
    assert format_base(value, HEX.upper()) == format_base(value, HEX).upper()


@given(st.integers(min_value=0, max_value=2**32))
def test_base_binary_round_trip(value):
    assert int(format_base(value, "01"), 2) == value


@pytest.mark.parametrize("digits", ["", "a"])
def test_base_rejects_short_digit_sets(digits):
    with pytest.raises(ValueError):
        format_base(5, digits)


def test_pointer_null():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"


def test_pointer_address():
    assert format_pointer(0x7FFE2B8EF1DC) == "0x7ffe2b8ef1dc"


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_round_trip(value):
    text = format_pointer(value)
    assert text.startswith("0x")
    assert int(text[2:], 16) == value