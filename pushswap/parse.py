"""Reading the puzzle's integers from command-line arguments."""

from __future__ import annotations

from typing import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def parse_integer(token: str) -> int:
    """Parse one token: an optional sign followed by ASCII digits.

    A bare sign is read as zero. The value must fit in a 32-bit signed int.
    """
    sign = 1
    digits = token
    if token[:1] in ("-", "+"):
        if token[0] == "-":
            sign = -1
        digits = token[1:]
    if not all(_is_ascii_digit(char) for char in digits):
        raise ParseError(f"not an integer: {token!r}")
    value = sign * int(digits) if digits else 0
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"integer out of range: {token!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Join the arguments with spaces, split on spaces and parse each word.

    Raises ParseError when there are no numbers, when a word is not a valid
    integer, or when a value appears more than once.
    """
    words = [word for word in " ".join(args).split(" ") if word]
    if not words:
        raise ParseError("no numbers given")
    values = [parse_integer(word) for word in words]
    if len(set(values)) != len(values):
        raise ParseError("duplicate values")
    return values