"""Turning command-line arguments into a validated list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

from cursus.chars import is_digit

INT_MAX = 2147483647
INT_MIN = -2147483648

_SPACES = frozenset(" \t\n\v\f\r")


class InputError(ValueError):
    """The arguments do not form a valid list of distinct integers."""


def is_space(c: str) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    return c in _SPACES


def is_empty(text: str) -> bool:
    """True when ``text`` holds nothing but whitespace."""
    return all(is_space(c) for c in text)


def split_words(text: str, sep: str) -> list[str]:
    """The non-empty words of ``text`` separated by ``sep``."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def collect_tokens(args: Iterable[str]) -> list[str]:
    """Join all arguments with spaces and split them into tokens.

    An argument made only of whitespace is an error.
    """
    args = list(args)
    for arg in args:
        if is_empty(arg):
            raise InputError("empty argument")
    return split_words(" ".join(args), " ")


def _unsigned(token: str) -> str:
    return token[1:] if token[:1] in ("+", "-") else token


def check_argument(token: str) -> bool:
    """True when ``token`` is an optional sign followed only by digits."""
    return all(is_digit(c) for c in _unsigned(token))


def is_zero(token: str) -> bool:
    """True when ``token`` is an optional sign followed only by zeros."""
    return all(c == "0" for c in _unsigned(token))


def compare_num(first: str, second: str) -> int:
    """Compare two number tokens as text, ignoring a leading '+' on one side.

    Returns 0 when they are the same, otherwise the difference of the first
    characters that differ (the end of a token counting as 0).
    """
    i = j = 0
    if first[:1] == "+":
        if second[:1] != "+":
            i = 1
    elif second[:1] == "+":
        j = 1
    while i < len(first) and j < len(second) and first[i] == second[j]:
        i += 1
        j += 1
    a = ord(first[i]) if i < len(first) else 0
    b = ord(second[j]) if j < len(second) else 0
    return a - b


def check_input(tokens: Sequence[str]) -> list[str]:
    """Validate the tokens and return them.

    Raises InputError for repeated tokens, tokens that are not signed digit
    strings, or more than one spelling of zero.
    """
    tokens = list(tokens)
    for first, second in combinations(tokens, 2):
        if compare_num(first, second) == 0:
            raise InputError(f"duplicate value {first!r}")
    for token in tokens:
        if not check_argument(token):
            raise InputError(f"not a number: {token!r}")
    if sum(is_zero(token) for token in tokens) > 1:
        raise InputError("zero given more than once")
    return tokens


def parse_long(text: str) -> int:
    """Parse leading whitespace, an optional sign and the digits that follow."""
    position = 0
    while position < len(text) and is_space(text[position]):
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    number = 0
    while position < len(text) and is_digit(text[position]):
        number = number * 10 + ord(text[position]) - ord("0")
        position += 1
    return sign * number


def parse_numbers(tokens: Iterable[str]) -> list[int]:
    """Convert the tokens to integers, each within the 32-bit signed range."""
    values = []
    for token in tokens:
        value = parse_long(token)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"value out of range: {token!r}")
        values.append(value)
    return values


def format_stack(values: Iterable[int]) -> str:
    """Render values as a chain ending in NULL, without a trailing newline."""
    return "".join(f"{value} -> " for value in values) + "NULL"