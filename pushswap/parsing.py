"""Reading and validating the integers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_SPACES = "\t\n\v\f\r "
_DIGITS = "0123456789"
_ATOI = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_NUMBER_WORD = re.compile(r"[\t\n\v\f\r ]*-?[0-9]*")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def atoi(text: str) -> int:
    """Read a leading integer: optional blanks, one sign, then decimal digits."""
    match = _ATOI.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def is_space(char: str) -> bool:
    """Tell whether a single character is a blank (space, tab, newline, ...)."""
    return len(char) == 1 and char in _SPACES


def join_args(args: Sequence[str]) -> str:
    """Join the arguments with single spaces and drop trailing spaces."""
    joined = " ".join(args) + " "
    trimmed = joined.rstrip(" ")
    # A string made of spaces only keeps its first character.
    return trimmed if trimmed else joined[:1]


def _check_characters(text: str) -> None:
    for position, char in enumerate(text):
        if char not in _DIGITS and not is_space(char) and char != "-":
            raise InputError(f"unexpected character {char!r}")
        if char == "-" and position != 0 and text[position - 1] != " ":
            raise InputError("a minus sign must start a number")


def validate_numbers(text: str) -> None:
    """Check that the text holds distinct integers that fit in 32 bits.

    Raises InputError on any other character, a misplaced minus sign,
    an out-of-range number or a repeated number.
    """
    _check_characters(text)
    length = len(text)
    position = 0
    while position < length:
        value = atoi(text[position:])
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"{value} does not fit in 32 bits")
        earlier = 0
        while earlier < position and position + 1 < length:
            if atoi(text[earlier:]) == value:
                raise InputError(f"{value} appears more than once")
            earlier = _NUMBER_WORD.match(text, earlier).end() + 1
        position = _NUMBER_WORD.match(text, position).end()


def parse_stack(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the values of stack A, top first."""
    if not args:
        raise InputError("no arguments given")
    text = join_args(args)
    validate_numbers(text)
    return [atoi(word) for word in text.split(" ") if word]