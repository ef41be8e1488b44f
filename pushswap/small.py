"""Helpers on stack values and the solvers for three to five values."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from .stacks import Stacks


def _stack(stacks: Stacks, which: str) -> list[int]:
    if which == "a":
        return stacks.a
    if which == "b":
        return stacks.b
    raise ValueError(f"no stack named {which!r}")


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the values never decrease from top to bottom."""
    return all(x <= y for x, y in pairwise(values))


def is_sorted_reverse(values: Sequence[int]) -> bool:
    """Tell whether the values never increase from top to bottom."""
    return all(x >= y for x, y in pairwise(values))


def find_min(values: Sequence[int]) -> int:
    """Smallest value; raises ValueError on an empty stack."""
    return min(values)


def find_max(values: Sequence[int]) -> int:
    """Largest value; raises ValueError on an empty stack."""
    return max(values)


def insertion_place(values: Sequence[int], value: int) -> int:
    """Index after which ``value`` fits in a rotated ascending stack."""
    for index, (here, after) in enumerate(pairwise(values)):
        if here < value < after:
            return index
        if value > here and value > after and here > after:
            return index
        if value < here and value < after and here > after:
            return index
    return max(len(values) - 1, 0)


def insertion_place_reverse(values: Sequence[int], value: int) -> int:
    """Index after which ``value`` fits in a rotated descending stack."""
    for index, (here, after) in enumerate(pairwise(values)):
        if value < here and here < after:
            return index
        if here > value > after:
            return index
        if value > here and value > after and here < after:
            return index
    return max(len(values) - 1, 0)


def _first_three(stack: list[int]) -> tuple[int, int, int]:
    if len(stack) < 3:
        raise ValueError("at least three values are needed")
    return stack[0], stack[1], stack[2]


def solve_three(stacks: Stacks, which: str) -> None:
    """Put the three top values of a stack in ascending order."""
    x, y, z = _first_three(_stack(stacks, which))
    if x < y < z:
        return
    if x < y and y > z and x < z:
        stacks.swap(which)
        stacks.rotate(which)
    elif x > y and y < z and x < z:
        stacks.swap(which)
    elif x < y and y > z and x > z:
        stacks.reverse_rotate(which)
    elif x > y and y < z and x > z:
        stacks.rotate(which)
    elif x > y and y > z and x > z:
        stacks.swap(which)
        stacks.reverse_rotate(which)


def solve_three_reverse(stacks: Stacks, which: str) -> None:
    """Put the three top values of a stack in descending order."""
    x, y, z = _first_three(_stack(stacks, which))
    if x > y > z:
        return
    if x < y and y < z and x < z:
        stacks.rotate(which)
        stacks.swap(which)
    elif x < y and y > z and x < z:
        stacks.rotate(which)
    elif x > y and y < z and x < z:
        stacks.reverse_rotate(which)
    elif x < y and y > z and x > z:
        stacks.swap(which)
    elif x > y and y < z and x > z:
        stacks.reverse_rotate(which)
        stacks.swap(which)


def _insert_top_of_b(stacks: Stacks) -> None:
    a = stacks.a
    index = insertion_place(a, stacks.b[0])
    if index >= len(a) // 2:
        for _ in range(len(a) - 1 - index):
            stacks.reverse_rotate("a")
    else:
        for _ in range(index + 1):
            stacks.rotate("a")
    stacks.push("a")


def _push_a_correct_order(stacks: Stacks, size: int) -> None:
    while len(stacks.a) != size:
        a, b = stacks.a, stacks.b
        highest, lowest = find_max(a), find_min(a)
        if b[0] > highest and a[-1] == highest:
            stacks.push("a")
            stacks.rotate("a")
        elif b[0] < lowest and a[0] == lowest:
            stacks.push("a")
        else:
            _insert_top_of_b(stacks)


def solve_four_five(stacks: Stacks, size: int) -> None:
    """Sort stack A when it holds ``size`` values, four or five."""
    if is_sorted(stacks.a):
        return
    remaining = size
    while remaining != 3 and remaining:
        remaining -= 1
        stacks.push("b")
    if len(stacks.b) == 2 and stacks.b[0] > stacks.b[1]:
        stacks.swap("b")
    solve_three(stacks, "a")
    _push_a_correct_order(stacks, size)
    if is_sorted(stacks.a):
        return
    drop = next(i for i, (x, y) in enumerate(pairwise(stacks.a)) if x > y)
    step = stacks.reverse_rotate if drop > size // 2 else stacks.rotate
    while not is_sorted(stacks.a):
        step("a")