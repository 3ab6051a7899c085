"""Writing characters, strings and numbers to text streams.

``format_printf`` renders a small printf dialect understanding the
conversions ``%d %i %u %x %X %c %s %p %%``. Integer conversions behave
like their fixed-width counterparts: ``%d``/``%i`` wrap to a signed
32-bit value, ``%u``/``%x``/``%X`` to an unsigned 32-bit value and
``%p`` to an unsigned 64-bit value.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from pushswap.strings import itoa

__all__ = [
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
    "format_printf",
    "printf",
]

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def put_char(c: int | str, stream: Optional[TextIO] = None) -> int:
    """Write one character to ``stream`` (stdout by default); return 1."""
    return _target(stream).write(_char(c))


def put_str(text: str, stream: Optional[TextIO] = None) -> int:
    """Write ``text`` to ``stream``; return the number of characters written."""
    _target(stream).write(text)
    return len(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> int:
    """Write ``text`` followed by a newline; return the number of characters written."""
    return put_str(text + "\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal form of ``n``; return the number of characters written."""
    return put_str(itoa(n), stream)


def _wrap_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _wrap_unsigned(value: int, bits: int) -> int:
    return value % (1 << bits)


def _hex(value: int, digits: str) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def _convert(spec: str, arg) -> str:
    if spec in "di":
        return itoa(_wrap_signed(int(arg), 32))
    if spec == "u":
        return itoa(_wrap_unsigned(int(arg), 32))
    if spec == "x":
        return _hex(_wrap_unsigned(int(arg), 32), _HEX_LOWER)
    if spec == "X":
        return _hex(_wrap_unsigned(int(arg), 32), _HEX_UPPER)
    if spec == "c":
        return _char(arg)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        address = 0 if arg is None else _wrap_unsigned(int(arg), 64)
        if address == 0:
            return "(nil)"
        return "0x" + _hex(address, _HEX_LOWER)
    raise ValueError(f"Invalid Input: unknown conversion %{spec}")


def format_printf(fmt: str, *args) -> str:
    """Render ``fmt`` with ``args`` and return the resulting string.

    Raises ValueError for an unknown conversion or a trailing ``%`` and
    IndexError when there are fewer arguments than conversions.
    """
    parts = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("Invalid Input: format ends with '%'")
        if spec == "%":
            parts.append("%")
            continue
        if spec not in "diuxXcsp":
            raise ValueError(f"Invalid Input: unknown conversion %{spec}")
        try:
            arg = next(remaining)
        except StopIteration:
            raise IndexError(f"missing argument for %{spec}") from None
        parts.append(_convert(spec, arg))
    return "".join(parts)


def printf(fmt: str, *args, stream: Optional[TextIO] = None) -> int:
    """Write the rendering of ``fmt`` to ``stream``; return the characters written."""
    return put_str(format_printf(fmt, *args), stream)