"""Command that prints the instructions sorting the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .chunks import solve_hundred, solve_ten
from .parsing import InputError, parse_stack
from .small import solve_four_five, solve_three
from .stacks import Stacks


def _chunk_size(length: int) -> int:
    if length <= 30:
        return 8
    if length < 100:
        return 15
    if length <= 300:
        return 20
    if length <= 700:
        return 72
    return 80


def launch_solver(stacks: Stacks) -> None:
    """Sort stack A with the strategy suited to its length."""
    length = len(stacks.a)
    if length == 2:
        if stacks.a[0] > stacks.a[1]:
            stacks.swap("a")
    elif length == 3:
        solve_three(stacks, "a")
    elif 4 <= length <= 5:
        solve_four_five(stacks, length)
    elif 6 <= length <= 10:
        solve_ten(stacks)
    elif length > 10:
        solve_hundred(stacks, _chunk_size(length))


def sort_operations(values: Iterable[int]) -> list[str]:
    """The instructions that sort ``values`` (top first) into ascending order."""
    stacks = Stacks(values)
    launch_solver(stacks)
    return stacks.operations


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line; print Error and return 1 on bad input."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_stack(args)
    except InputError:
        print("Error")
        return 1
    for operation in sort_operations(values):
        print(operation)
    return 0


if __name__ == "__main__":
    sys.exit(main())