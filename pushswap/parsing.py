"""Turning command-line words into the integers to be sorted."""

from __future__ import annotations

from typing import List, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\r\f\v"


class InputError(ValueError):
    """Raised when the arguments do not describe distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_words(text: str, sep: str = " ") -> List[str]:
    """Split text on a separator character, dropping empty words."""
    return [word for word in text.split(sep) if word]


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def parse_long(text: str) -> int:
    """Read an optionally signed decimal number after leading whitespace.

    Reading stops at the first character that is not a digit.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not _is_digit(char):
            break
        result = result * 10 + int(char)
    return result * sign


def _bad_word(word: str) -> bool:
    if not word:
        return True
    head, tail = word[0], word[1:]
    if head in "+-":
        if not tail or not _is_digit(tail[0]):
            return True
    elif not _is_digit(head):
        return True
    return not all(_is_digit(char) for char in tail)


def has_syntax_error(args: Sequence[str]) -> bool:
    """Tell whether any word is not an optionally signed run of digits."""
    return any(_bad_word(word) for word in args)


def parse_values(args: Sequence[str]) -> List[int]:
    """Convert the words into integers, rejecting bad syntax, range and repeats."""
    if has_syntax_error(args):
        raise InputError()
    values: List[int] = []
    seen = set()
    for word in args:
        number = parse_long(word)
        if number > INT_MAX or number < INT_MIN or number in seen:
            raise InputError()
        seen.add(number)
        values.append(number)
    return values