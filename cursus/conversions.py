"""Integer parsing and formatting, and splitting a string into words."""

from __future__ import annotations

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = frozenset(chr(code) for code in (9, 10, 11, 12, 13, 32))


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Reaching exactly 2147483647 while reading digits returns the
    limit for the sign at once. Other values wrap to 32 bits.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < len(text) and "0" <= text[position] <= "9":
        result = result * 10 + ord(text[position]) - ord("0")
        position += 1
        if result == INT_MAX:
            return INT_MAX if sign == 1 else INT_MIN
    return _to_int32(sign * result)


def itoa(n: int) -> str:
    """Decimal text of ``n``."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]