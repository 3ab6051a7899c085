"""Estimating how many moves it takes to bring two elements to their tops."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Info", "move_cost"]


@dataclass
class Info:
    """An element of a stack: the stack's size, its distance from the top, its value."""

    size: int = 0
    rotations: int = 0
    content: int = 0


def _cost_with_a_line_still(info_a: Info, info_b: Info) -> int:
    # The half used for stack b's rotations is taken from stack a's size.
    half_a = info_a.size // 2
    if info_a.rotations > half_a:
        return info_a.size - info_a.rotations
    if info_b.rotations > half_a:
        return info_b.size - info_b.rotations
    return max(info_b.rotations, info_a.rotations)


def move_cost(info_a: Info, info_b: Info) -> int:
    """Moves needed to bring both elements to the top of their stacks, plus the push."""
    half_a = info_a.size // 2
    half_b = info_b.size // 2
    if info_a.rotations and info_b.rotations:
        if info_a.rotations >= half_a and info_b.rotations >= half_b:
            cost = max(info_b.size - info_b.rotations, info_a.size - info_a.rotations)
        elif info_a.rotations > half_a and info_b.rotations < half_b:
            cost = (info_a.size - info_a.rotations) + info_b.rotations
        elif info_a.rotations < half_a and info_b.rotations > half_b:
            cost = (info_b.size - info_b.rotations) + info_a.rotations
        else:
            cost = max(info_b.rotations, info_a.rotations)
    else:
        cost = _cost_with_a_line_still(info_a, info_b)
    return cost + 1