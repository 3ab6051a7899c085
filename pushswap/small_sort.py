"""Fixed sequences of moves for stacks of two to five numbers."""

from __future__ import annotations

from pushswap.stacks import Stacks, find_min, is_sorted, position_of

__all__ = ["sort_two", "sort_three", "min_index", "sort_four", "sort_five"]


def sort_two(stacks: Stacks) -> None:
    """Order the two numbers of stack a."""
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def _min_on_top(stacks: Stacks) -> None:
    if stacks.a[1] > stacks.a[2]:
        stacks.sa()
        stacks.ra()


def _min_in_middle(stacks: Stacks) -> None:
    if stacks.a[0] < stacks.a[2]:
        stacks.sa()
    else:
        stacks.ra()


def _min_at_bottom(stacks: Stacks) -> None:
    if stacks.a[0] < stacks.a[1]:
        stacks.rra()
    else:
        stacks.ra()
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Order the first three numbers of stack a, judged against its smallest."""
    small = find_min(stacks.a)
    if stacks.a[0] == small:
        _min_on_top(stacks)
    if stacks.a[1] == small:
        _min_in_middle(stacks)
    if stacks.a[2] == small:
        _min_at_bottom(stacks)


def min_index(stacks: Stacks) -> int:
    """Distance of the smallest number of stack a from its top."""
    return position_of(stacks.a, find_min(stacks.a))


def _push_index_of_four(stacks: Stacks, index: int) -> bool:
    """Bring ``index`` to the top and push it to b.

    Returns False when stack a became sorted on the way and nothing was pushed.
    """
    if index == 0:
        stacks.pb()
        return True
    if index in (1, 2, 3):
        if index == 3:
            stacks.rra()
        else:
            for _ in range(index):
                stacks.ra()
        if is_sorted(stacks.a):
            return False
        stacks.pb()
    return True


def _push_index_of_five(stacks: Stacks, index: int) -> bool:
    if index <= 2:
        _push_index_of_four(stacks, index)
    elif index in (3, 4):
        for _ in range(5 - index):
            stacks.rra()
        if is_sorted(stacks.a):
            return False
        stacks.pb()
    return True


def sort_four(stacks: Stacks) -> None:
    """Sort four numbers by setting the smallest aside in b."""
    if not _push_index_of_four(stacks, min_index(stacks)):
        return
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort five numbers by setting the two smallest aside in b."""
    _push_index_of_five(stacks, min_index(stacks))
    index = min_index(stacks)
    if is_sorted(stacks.a):
        return
    _push_index_of_four(stacks, index)
    sort_three(stacks)
    stacks.pa()
    stacks.pa()