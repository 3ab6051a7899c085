"""Sorting six or more numbers by pushing the cheapest number to b each turn."""

from __future__ import annotations

from typing import Sequence

from pushswap.moves_cost import Info, move_cost
from pushswap.small_sort import sort_three
from pushswap.stacks import Stacks, find_max, find_min, is_sorted, position_of

__all__ = [
    "find_target_in_b",
    "cheapest_to_move",
    "place_on_tops",
    "push_all_to_a",
    "rotate_min_to_top",
    "sort_more",
]


def find_target_in_b(stack_b: Sequence[int], number: int) -> Info:
    """The element of b that ``number`` must be pushed on top of.

    That is the largest element below ``number``, or the maximum of b
    when ``number`` lies outside b's range.
    """
    high = find_max(stack_b)
    low = find_min(stack_b)
    if number > high or number < low:
        target = high
    else:
        target = low
        for value in stack_b:
            if number > value and value > target:
                target = value
    return Info(size=len(stack_b), rotations=position_of(stack_b, target), content=target)


def cheapest_to_move(stacks: Stacks, info_a: Info) -> Info:
    """The element of a that is cheapest to push to its place in b.

    Distances are counted from ``info_a.rotations``; the first of equally
    cheap elements wins. Raises ValueError when stack a is empty.
    """
    best = None
    best_cost = 0
    for offset, value in enumerate(stacks.a):
        rotations = info_a.rotations + offset
        cost = move_cost(
            Info(size=info_a.size, rotations=rotations),
            find_target_in_b(stacks.b, value),
        )
        if best is None or best_cost > cost:
            best_cost = cost
            best = Info(size=len(stacks.a), rotations=rotations, content=value)
    if best is None:
        raise ValueError("stack a is empty")
    return best


def _heads_for_reverse(info: Info) -> bool:
    return info.rotations > info.size // 2


def _put_both_on_top(stacks: Stacks, number: Info, target: Info) -> None:
    while stacks.a[0] != number.content and stacks.b[0] != target.content:
        half_n = number.size // 2
        half_t = target.size // 2
        if number.rotations > half_n and target.rotations > half_t:
            stacks.rrr()
        elif number.rotations < half_n and target.rotations > half_t:
            stacks.ra()
        elif target.rotations < half_t and number.rotations > half_n:
            stacks.rb()
        else:
            stacks.rr()


def _put_a_on_top(stacks: Stacks, number: Info) -> None:
    while stacks.a[0] != number.content:
        if _heads_for_reverse(number):
            stacks.rra()
        else:
            stacks.ra()


def _put_b_on_top(stacks: Stacks, target: Info) -> None:
    while stacks.b[0] != target.content:
        if _heads_for_reverse(target):
            stacks.rrb()
        else:
            stacks.rb()


def place_on_tops(stacks: Stacks, number: Info, target: Info) -> None:
    """Rotate ``number`` to the top of a and ``target`` to the top of b, then push."""
    _put_both_on_top(stacks, number, target)
    a_ready = stacks.a[0] == number.content
    b_ready = stacks.b[0] == target.content
    if a_ready and not b_ready:
        _put_b_on_top(stacks, target)
    elif b_ready and not a_ready:
        _put_a_on_top(stacks, number)
    stacks.pb()


def _rotate_a_to(stacks: Stacks, target: int, size: int) -> None:
    position = position_of(stacks.a, target)
    while stacks.a[0] != target:
        if position > size // 2:
            stacks.rra()
        else:
            stacks.ra()


def push_all_to_a(stacks: Stacks) -> None:
    """Push every element of b back onto a in front of its successor."""
    while stacks.b:
        top = stacks.b[0]
        size = len(stacks.a)
        high = find_max(stacks.a)
        low = find_min(stacks.a)
        if top > high or top < low:
            target = low
        else:
            target = high
            for value in stacks.a:
                if target > value and value > top:
                    target = value
        _rotate_a_to(stacks, target, size)
        stacks.pa()


def rotate_min_to_top(stacks: Stacks) -> None:
    """Rotate a the short way round until its smallest element is on top."""
    _rotate_a_to(stacks, find_min(stacks.a), len(stacks.a))


def sort_more(stacks: Stacks) -> None:
    """Sort a stack of more than five numbers."""
    stacks.pb()
    stacks.pb()
    info_a = Info(size=len(stacks.a), rotations=0)
    while info_a.size > 3:
        number = cheapest_to_move(stacks, info_a)
        number.size = len(stacks.a)
        target = find_target_in_b(stacks.b, number.content)
        target.size = len(stacks.b)
        place_on_tops(stacks, number, target)
        info_a.size = len(stacks.a)
    sort_three(stacks)
    push_all_to_a(stacks)
    if not is_sorted(stacks.a):
        rotate_min_to_top(stacks)