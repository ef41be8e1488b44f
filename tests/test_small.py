from itertools import permutations

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from pushswap.small import (
    find_max,
    find_min,
    insertion_place,
    insertion_place_reverse,
    is_sorted,
    is_sorted_reverse,
    solve_four_five,
    solve_three,
    solve_three_reverse,
)
from pushswap.stacks import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for name in operations:
        stacks.apply(name)
    return stacks


def _descents(seq):
    return sum(x > y for x, y in zip(seq, seq[1:] + seq[:1]))


def _ascents(seq):
    return sum(x < y for x, y in zip(seq, seq[1:] + seq[:1]))


def test_is_sorted_on_ordered_and_unordered():
    assert is_sorted([1, 2, 3])
    assert not is_sorted([2, 1, 3])
    assert is_sorted([])


def test_is_sorted_reverse():
    assert is_sorted_reverse([3, 2, 1])
    assert not is_sorted_reverse([1, 3, 2])


def test_find_min_and_max():
    values = [4, -7, 12, 0]
    assert find_min(values) == min(values)
    assert find_max(values) == max(values)


def test_find_min_of_empty_stack_raises():
    with pytest.raises(ValueError):
        find_min([])


def test_solve_three_single_swap():
    stacks = Stacks([2, 1, 3])
    solve_three(stacks, "a")
    assert stacks.operations == ["sa"]


def test_solve_three_descending():
    stacks = Stacks([3, 2, 1])
    solve_three(stacks, "a")
    assert stacks.operations == ["sa", "rra"]


def test_solve_three_reverse_ascending_in_b():
    stacks = Stacks([], [1, 2, 3])
    solve_three_reverse(stacks, "b")
    assert stacks.operations == ["rb", "sb"]


@pytest.mark.parametrize("values", list(permutations([5, -2, 9])))
def test_solve_three_sorts_every_order(values):
    stacks = Stacks(values)
    solve_three(stacks, "a")
    assert stacks.a == sorted(values)
    assert _replay(values, stacks.operations).a == stacks.a


@pytest.mark.parametrize("values", list(permutations([5, -2, 9])))
def test_solve_three_reverse_sorts_every_order(values):
    stacks = Stacks([], values)
    solve_three_reverse(stacks, "b")
    assert stacks.b == sorted(values, reverse=True)


def test_solve_three_needs_three_values():
    with pytest.raises(ValueError):
        solve_three(Stacks([1, 2]), "a")


@given(
    st.lists(st.integers(-100, 100), min_size=2, max_size=8, unique=True),
    st.integers(0, 7),
    st.integers(-150, 150),
)
def test_insertion_place_keeps_rotation_sorted(values, shift, value):
    assume(value not in values)
    ordered = sorted(values)
    shift %= len(ordered)
    rotated = ordered[shift:] + ordered[:shift]
    index = insertion_place(rotated, value)
    result = rotated[: index + 1] + [value] + rotated[index + 1 :]
    assert _descents(result) == 1


@given(
    st.lists(st.integers(-100, 100), min_size=2, max_size=8, unique=True),
    st.integers(0, 7),
    st.integers(-150, 150),
)
def test_insertion_place_reverse_keeps_rotation_sorted(values, shift, value):
    assume(value not in values)
    ordered = sorted(values, reverse=True)
    shift %= len(ordered)
    rotated = ordered[shift:] + ordered[:shift]
    index = insertion_place_reverse(rotated, value)
    result = rotated[: index + 1] + [value] + rotated[index + 1 :]
    assert _ascents(result) == 1


@settings(max_examples=150)
@given(st.lists(st.integers(-1000, 1000), min_size=4, max_size=5, unique=True))
def test_solve_four_five_sorts(values):
    stacks = Stacks(values)
    solve_four_five(stacks, len(values))
    assert stacks.a == sorted(values)
    assert stacks.b == []
    replayed = _replay(values, stacks.operations)
    assert replayed.a == stacks.a
    assert replayed.is_solved()


def test_solve_four_five_leaves_sorted_input_alone():
    stacks = Stacks([1, 2, 3, 4, 5])
    solve_four_five(stacks, 5)
    assert not stacks.operations
    assert stacks.a == [1, 2, 3, 4, 5]