"""The two stacks of the push-swap puzzle and the moves between them.

Index 0 of each stack is its top. Every successful move is recorded by
name in :attr:`Stacks.moves`.
"""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Optional, Sequence

__all__ = [
    "StackError",
    "Stacks",
    "find_min",
    "find_max",
    "position_of",
    "is_sorted",
]


class StackError(Exception):
    """Raised when a move cannot be made on the current stacks."""


class Stacks:
    """Stack ``a`` holding the numbers to sort and an initially empty stack ``b``."""

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self.a: list[int] = list(numbers)
        self.b: list[int] = []
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def _record(self, name: Optional[str]) -> None:
        if name is not None:
            self.moves.append(name)

    @staticmethod
    def _need_two(stack: list[int], label: str) -> None:
        if len(stack) < 2:
            raise StackError(f"stack {label} needs at least two elements")

    @staticmethod
    def _swap(stack: list[int]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        stack.insert(0, stack.pop())

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._need_two(self.a, "a")
        self._swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._need_two(self.b, "b")
        self._swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        """``sa`` and ``sb`` at once."""
        self._need_two(self.a, "a")
        self._need_two(self.b, "b")
        self._swap(self.a)
        self._swap(self.b)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            raise StackError("stack b is empty")
        self.a.insert(0, self.b.pop(0))
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            raise StackError("stack a is empty")
        self.b.insert(0, self.a.pop(0))
        self._record("pb")

    def ra(self) -> None:
        """The top of ``a`` becomes its bottom."""
        self._need_two(self.a, "a")
        self._rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        """The top of ``b`` becomes its bottom."""
        self._need_two(self.b, "b")
        self._rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        """``ra`` and ``rb`` at once."""
        self._need_two(self.a, "a")
        self._need_two(self.b, "b")
        self._rotate(self.a)
        self._rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        """The bottom of ``a`` becomes its top."""
        self._need_two(self.a, "a")
        self._reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        """The bottom of ``b`` becomes its top."""
        self._need_two(self.b, "b")
        self._reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        """``rra`` and ``rrb`` at once."""
        self._need_two(self.a, "a")
        self._need_two(self.b, "b")
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._record("rrr")


def find_min(values: Iterable[int]) -> int:
    """Smallest value; raises ValueError when there is none."""
    return min(values)


def find_max(values: Iterable[int]) -> int:
    """Largest value; raises ValueError when there is none."""
    return max(values)


def position_of(values: Sequence[int], target: int) -> int:
    """Distance of ``target`` from the top; raises ValueError if absent."""
    return list(values).index(target)


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease from top to bottom."""
    return all(x <= y for x, y in pairwise(values))