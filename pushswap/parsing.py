"""Turning command-line arguments into the numbers to sort."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from pushswap.strings import atoi, split

__all__ = [
    "InputError",
    "validate_tokens",
    "check_limits",
    "check_duplicates",
    "parse_arguments",
]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class InputError(ValueError):
    """Raised for any invalid input; its message is always ``Error``."""

    def __init__(self) -> None:
        super().__init__("Error")


def _is_number_token(token: str) -> bool:
    digits = token[1:] if token.startswith("-") and len(token) > 1 else token
    return all("0" <= ch <= "9" for ch in digits)


def validate_tokens(tokens: Iterable[str]) -> None:
    """Accept tokens made of decimal digits after an optional leading ``-``.

    A token that is empty passes, and later reads as zero.
    """
    if not all(_is_number_token(token) for token in tokens):
        raise InputError()


def check_limits(numbers: Iterable[int]) -> None:
    """Reject numbers outside the signed 32-bit range."""
    if any(not INT_MIN <= n <= INT_MAX for n in numbers):
        raise InputError()


def check_duplicates(numbers: Iterable[int]) -> None:
    """Reject a value that appears more than once."""
    if any(count > 1 for count in Counter(numbers).values()):
        raise InputError()


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Return the numbers given by ``args`` (the arguments after the program name).

    A single argument is split on spaces. No arguments, or an empty first
    argument, give an empty list. Invalid input raises InputError.
    """
    if not args or args[0] == "":
        return []
    if len(args) == 1:
        tokens = split(args[0], " ")
        if not tokens:
            raise InputError()
    else:
        tokens = list(args)
    validate_tokens(tokens)
    numbers = [atoi(token) for token in tokens]
    check_limits(numbers)
    check_duplicates(numbers)
    return numbers