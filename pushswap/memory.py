"""Byte-buffer helpers working on mutable buffers such as ``bytearray``.

Functions that fill or copy write into the buffer they are given and
return it. Lengths that reach past the end of a buffer raise ValueError.
"""

from __future__ import annotations

from typing import Optional

__all__ = ["memset", "bzero", "calloc", "memcpy", "memmove", "memchr", "memcmp"]


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf, value: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (truncated to a byte)."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest, src, n: int):
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``.

    When both are None, None is returned.
    """
    if dest is None and src is None:
        return None
    _check_length(n, dest, src)
    if n:
        dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes like :func:`memcpy`, correct for overlapping views."""
    if dest is None and src is None:
        return None
    _check_length(n, dest, src)
    if n:
        # Take a snapshot first so overlapping views of one buffer stay correct.
        chunk = bytes(src[:n])
        dest[:n] = chunk
    return dest


def memchr(buf, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in ``buf[:n]``, or None."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0