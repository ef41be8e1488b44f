"""The two stacks of the puzzle and the instructions that act on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import pairwise


class InvalidOperation(ValueError):
    """Raised for an instruction name that is not part of the puzzle."""


def _swap_top(stack: list[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: list[int]) -> bool:
    if not stack:
        return False
    stack.append(stack.pop(0))
    return True


def _reverse_rotate(stack: list[int]) -> bool:
    if not stack:
        return False
    stack.insert(0, stack.pop())
    return True


_BOTH: dict[str, Callable[[list[int]], bool]] = {
    "ss": _swap_top,
    "rr": _rotate,
    "rrr": _reverse_rotate,
}


class Stacks:
    """Stacks A and B, top first, with a record of the instructions run."""

    def __init__(self, a: Iterable[int], b: Iterable[int] | None = None) -> None:
        self.a: list[int] = list(a)
        self.b: list[int] = list(b) if b is not None else []
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def _stack(self, which: str) -> list[int]:
        if which == "a":
            return self.a
        if which == "b":
            return self.b
        raise ValueError(f"no stack named {which!r}")

    def swap(self, which: str) -> None:
        """Exchange the two top values of a stack."""
        if _swap_top(self._stack(which)):
            self.operations.append("s" + which)

    def push(self, which: str) -> None:
        """Move the top of the other stack onto stack ``which``."""
        dest = self._stack(which)
        src = self.b if dest is self.a else self.a
        if not src:
            return
        dest.insert(0, src.pop(0))
        self.operations.append("p" + which)

    def rotate(self, which: str) -> None:
        """Move the top value of a stack to its bottom."""
        if _rotate(self._stack(which)):
            self.operations.append("r" + which)

    def reverse_rotate(self, which: str) -> None:
        """Move the bottom value of a stack to its top."""
        if _reverse_rotate(self._stack(which)):
            self.operations.append("rr" + which)

    def apply(self, name: str) -> None:
        """Run one instruction by name; an empty name does nothing."""
        if not name:
            return
        both = _BOTH.get(name)
        if both is not None:
            both(self.a)
            both(self.b)
            self.operations.append(name)
            return
        single = {
            "s": self.swap,
            "p": self.push,
            "r": self.rotate,
            "rr": self.reverse_rotate,
        }
        prefix, which = name[:-1], name[-1:]
        if which in ("a", "b") and prefix in single:
            single[prefix](which)
            return
        raise InvalidOperation(name)

    def is_solved(self) -> bool:
        """Tell whether A is in ascending order with B empty.

        As the checker does, B is only looked at when A holds two or more values.
        """
        if len(self.a) < 2:
            return True
        return not self.b and all(x <= y for x, y in pairwise(self.a))

    def format(self) -> str:
        """Render both stacks for display, one line each, then a blank line."""
        lines = []
        if self.a:
            lines.append("stack A = " + "".join(f"{v} " for v in self.a) + "\n")
        if self.b:
            lines.append("stack B = " + "".join(f"{v} " for v in self.b) + "\n")
        lines.append("\n")
        return "".join(lines)