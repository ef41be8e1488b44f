"""Solvers for six values and more, working by chunks of the smallest values."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from .small import (
    find_max,
    find_min,
    insertion_place_reverse,
    is_sorted,
    is_sorted_reverse,
    solve_four_five,
    solve_three,
    solve_three_reverse,
)
from .stacks import Stacks


def get_chunk(values: Sequence[int], size: int) -> list[int]:
    """The ``size`` smallest values, ascending; fewer if the stack is shorter."""
    lowest, highest = find_min(values), find_max(values)
    size = min(size, len(values))
    chunk = [lowest] * size
    for position in range(1, size):
        candidate = highest
        for value in values:
            if value < candidate and value not in chunk:
                candidate = value
        chunk[position] = candidate
    return chunk


def set_closest_top_min_on_top(stacks: Stacks, distance: int) -> None:
    """Rotate A ``distance`` times, or reverse-rotate it when negative."""
    if distance > 0:
        for _ in range(distance):
            stacks.rotate("a")
    else:
        for _ in range(-distance):
            stacks.reverse_rotate("a")


def set_value_to_top(stacks: Stacks, index: int, which: str, odd: int) -> None:
    """Bring the value at ``index`` to the top by the shorter way round.

    Nothing happens unless ``odd`` is 0 or 1.
    """
    if odd not in (0, 1):
        return
    stack = stacks.a if which == "a" else stacks.b
    if index <= len(stack) // 2:
        for _ in range(index):
            stacks.rotate(which)
    else:
        for _ in range(len(stack) - index):
            stacks.reverse_rotate(which)


def push_closest_min(stacks: Stacks, count: int, chunk: Sequence[int]) -> None:
    """Push ``count`` values of the chunk from A to B, one at a time."""
    members = set(chunk[:5])
    for _ in range(count):
        a = stacks.a
        first = next(i for i, v in enumerate(a) if v in members)
        from_bottom = -1 - next(i for i, v in enumerate(reversed(a)) if v in members)
        if first <= from_bottom:
            set_closest_top_min_on_top(stacks, first)
        else:
            set_closest_top_min_on_top(stacks, from_bottom)
        stacks.push("b")


def _insert_top_of_a(stacks: Stacks) -> None:
    b = stacks.b
    index = insertion_place_reverse(b, stacks.a[0])
    if index >= len(b) // 2:
        for _ in range(len(b) - 1 - index):
            stacks.reverse_rotate("b")
    else:
        for _ in range(index + 1):
            stacks.rotate("b")
    stacks.push("b")


def push_a_to_b_reverse_sort(stacks: Stacks) -> None:
    """Push the top of A into B where it keeps B a rotated descending run."""
    length = len(stacks.a)
    while len(stacks.a) == length:
        a, b = stacks.a, stacks.b
        highest, lowest = find_max(b), find_min(b)
        if a[0] > highest and b[0] == highest:
            stacks.push("b")
        elif a[0] < lowest and b[-1] == lowest:
            stacks.push("b")
            stacks.rotate("b")
        else:
            _insert_top_of_a(stacks)


def push_min(stacks: Stacks, count: int) -> None:
    """Move the smallest value of A into B, ``count`` times."""
    for _ in range(count):
        a = stacks.a
        index = a.index(find_min(a))
        set_value_to_top(stacks, index, "a", len(a) % 2)
        push_a_to_b_reverse_sort(stacks)


def fix_stack(stacks: Stacks) -> None:
    """Rotate B until it reads in descending order."""
    b = stacks.b
    if is_sorted_reverse(b):
        return
    peak = next(i for i, (x, y) in enumerate(pairwise(b)) if x < y) + 1
    step = stacks.reverse_rotate if peak > len(b) // 2 else stacks.rotate
    while not is_sorted_reverse(stacks.b):
        step("b")


def push_back(stacks: Stacks) -> None:
    """Order B descending, then move all of it onto A."""
    fix_stack(stacks)
    while stacks.b:
        stacks.push("a")


def solve_ten(stacks: Stacks) -> None:
    """Sort stack A when it holds six to ten values."""
    if is_sorted(stacks.a):
        return
    five_lowest = get_chunk(stacks.a, 5)
    push_closest_min(stacks, 3, five_lowest)
    solve_three_reverse(stacks, "b")
    push_min(stacks, 2)
    fix_stack(stacks)
    remaining = len(stacks.a)
    if remaining > 3:
        solve_four_five(stacks, remaining)
    elif remaining == 3:
        solve_three(stacks, "a")
    elif remaining == 2 and stacks.a[0] > stacks.a[1]:
        stacks.swap("a")
    while stacks.b:
        stacks.push("a")


def solve_hundred(stacks: Stacks, chunk_size: int) -> None:
    """Sort stack A by moving chunks of its smallest values into B."""
    if chunk_size < 1:
        raise ValueError("chunk size must be positive")
    while stacks.a:
        chunk = get_chunk(stacks.a, chunk_size)
        chunk_size = len(chunk)
        members = set(chunk)
        for _ in range(chunk_size):
            a = stacks.a
            first = next(i for i, v in enumerate(a) if v in members)
            from_bottom = 1 + next(i for i, v in enumerate(reversed(a)) if v in members)
            if first <= from_bottom:
                set_closest_top_min_on_top(stacks, first)
            else:
                set_closest_top_min_on_top(stacks, -from_bottom)
            if len(stacks.b) < 2:
                stacks.push("b")
            else:
                push_a_to_b_reverse_sort(stacks)
    push_back(stacks)