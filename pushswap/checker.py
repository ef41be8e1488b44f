"""Command that reads instructions and tells whether they sort the stack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .parsing import InputError, parse_stack
from .stacks import InvalidOperation, Stacks


def read_orders(stream: TextIO) -> Iterator[str]:
    """Yield each newline-terminated line without its newline.

    A final line with no newline after it is not an instruction and is dropped.
    """
    for line in stream:
        if line.endswith("\n"):
            yield line[:-1]


def run_checker(values: Iterable[int], orders: Iterable[str]) -> str:
    """Run the orders on a stack of ``values`` and return "OK" or "KO".

    Raises InvalidOperation at the first order that is not an instruction.
    """
    stacks = Stacks(values)
    for order in orders:
        stacks.apply(order)
    return "OK" if stacks.is_solved() else "KO"


def main(argv: Sequence[str] | None = None) -> int:
    """Check the instructions read from standard input against the arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_stack(args)
    except InputError:
        print("Error")
        return 0
    try:
        verdict = run_checker(values, read_orders(sys.stdin))
    except InvalidOperation:
        print("Error")
        return 0
    print(verdict)
    return 0


if __name__ == "__main__":
    sys.exit(main())