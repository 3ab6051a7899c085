"""Command line: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from pushswap.large_sort import sort_more
from pushswap.parsing import InputError, parse_arguments
from pushswap.small_sort import sort_five, sort_four, sort_three, sort_two
from pushswap.stacks import StackError, Stacks, is_sorted

__all__ = ["solve", "main"]

_SMALL_SORTS = {2: sort_two, 3: sort_three, 4: sort_four, 5: sort_five}


def _sort(stacks: Stacks) -> None:
    if is_sorted(stacks.a):
        return
    _SMALL_SORTS.get(len(stacks.a), sort_more)(stacks)


def solve(numbers: Iterable[int]) -> list[str]:
    """Return the moves that sort ``numbers``; raises StackError if a move fails."""
    stacks = Stacks(numbers)
    _sort(stacks)
    return list(stacks.moves)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_arguments(args)
    except InputError as error:
        sys.stderr.write(f"{error}\n")
        return 1
    if not numbers:
        return 1

    stacks = Stacks(numbers)
    failed = False
    try:
        _sort(stacks)
    except StackError:
        failed = True
    for move in stacks.moves:
        sys.stdout.write(move + "\n")
    if failed:
        sys.stderr.write("Error\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())