"""String helpers: number conversion, splitting, searching and trimming.

Searches return indices (or None when nothing is found) instead of
pointers. Bounded copies return the resulting string together with the
length the caller would have needed.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, TypeVar

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "substr",
    "strjoin",
    "strtrim",
    "strmapi",
    "striteri",
]

_WHITESPACE = " \t\n\v\f\r"

_Seq = TypeVar("_Seq", bound=MutableSequence)


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ints are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def atoi(text: str) -> int:
    """Parse a decimal integer.

    Leading whitespace is skipped and a single ``-`` is honoured; a ``+``
    sign is not recognised. Parsing stops at the first non-digit, and a
    string without leading digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if n < 0:
        return "-" + itoa(-n)
    digits = []
    while True:
        n, digit = divmod(n, 10)
        digits.append(chr(ord("0") + digit))
        if n == 0:
            break
    return "".join(reversed(digits))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    sep = _char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: int | str) -> Optional[int]:
    """Index of the first ``c`` in ``text``; a NUL character finds the end."""
    ch = _char(c)
    if ch == "\0" and ch not in text:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> Optional[int]:
    """Index of the last ``c`` in ``text``; a NUL character finds the end."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the first code difference.

    The end of a string compares as code 0, and comparison stops there.
    """
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if not little:
        return 0
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied string and the full length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full result would
    need; when ``dest`` already fills the buffer, that length is
    ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    result = dest
    if size > 0:
        room = max(0, size - 1 - len(dest))
        result = dest + src[:room]
    if len(dest) >= size:
        return result, size + len(src)
    return result, len(dest) + len(src)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: _Seq, func: Callable[[int, object], object]) -> _Seq:
    """Call ``func(index, item)`` on each item of a mutable sequence.

    A result other than None replaces the item in place. The sequence is
    returned.
    """
    for index, item in enumerate(list(text)):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement
    return text