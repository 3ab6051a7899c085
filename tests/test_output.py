import io

import pytest
from hypothesis import given, strategies as st

from pushswap.output import (
    format_printf,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def test_put_char_str_and_int():
    buf = io.StringIO()
    assert put_char("a", buf) == 1
    assert put_char(ord("b"), buf) == 1
    assert buf.getvalue() == "ab"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_and_endl():
    buf = io.StringIO()
    assert put_str("sa", buf) == 2
    assert put_endl("pb", buf) == 3
    assert buf.getvalue() == "sapb\n"


def test_put_str_defaults_to_stdout(capsys):
    put_endl("ra")
    assert capsys.readouterr().out == "ra\n"


@given(st.integers(min_value=-(2**63), max_value=2**63))
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    count = put_nbr(n, buf)
    assert int(buf.getvalue()) == n
    assert count == len(buf.getvalue())


def test_plain_text_passes_through():
    assert format_printf("rra\n") == "rra\n"


def test_percent_literal():
    assert format_printf("100%%") == "100%"


def test_string_and_null():
    assert format_printf("%s-%s", "pa", None) == "pa-(null)"


def test_char_conversion():
    assert format_printf("%c%c", "s", ord("b")) == "sb"


def test_nil_pointer():
    assert format_printf("%p", 0) == "(nil)"
    assert format_printf("%p", None) == "(nil)"


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_round_trip(address):
    out = format_printf("%p", address)
    assert out.startswith("0x")
    assert int(out[2:], 16) == address


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_decimal_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert int(format_printf("%i", n)) == n


def test_decimal_wraps_to_32_bits():
    assert int(format_printf("%d", 2**31)) == -(2**31)


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_hex_and_unsigned_round_trip(n):
    low = format_printf("%x", n)
    high = format_printf("%X", n)
    assert int(low, 16) == n
    assert int(high, 16) == n
    assert low == low.lower()
    assert high == high.upper()
    assert int(format_printf("%u", n)) == n


def test_unsigned_wraps_negative():
    assert int(format_printf("%u", -1)) == 2**32 - 1


def test_hex_zero():
    assert format_printf("%x", 0) == "0"


def test_unknown_conversion_raises():
    with pytest.raises(ValueError):
        format_printf("%q", 1)


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        format_printf("abc%")


def test_missing_argument_raises():
    with pytest.raises(IndexError):
        format_printf("%d %d", 1)


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("%s %d\n", "rr", 7, stream=buf)
    assert buf.getvalue() == "rr 7\n"
    assert count == len(buf.getvalue())