"""String searching, comparison, slicing and C-style bounded copies.

The search functions return indices rather than pointers: ``None`` stands
for "not found". The bounded-copy functions work on NUL-terminated byte
buffers held in ``bytearray`` objects.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def _c_length(buffer: bytes) -> int:
    """Length of the NUL-terminated string stored in ``buffer``."""
    end = buffer.find(0)
    return len(buffer) if end < 0 else end


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``text``; the end index for NUL; None if absent."""
    char = _char(c)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``text``; the end index for NUL; None if absent."""
    char = _char(c)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if not little:
        return 0
    if length <= 0:
        return None
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(buffer: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` on each item, storing any non-None result in place."""
    for index, item in enumerate(buffer):
        result = func(index, item)
        if result is not None:
            buffer[index] = result


def strlcpy(dst: bytearray, src: bytes, size: int) -> int:
    """Copy ``src`` into ``dst`` with at most ``size - 1`` bytes plus a NUL.

    Returns the length of ``src``, so a result of ``size`` or more means the
    copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    src_len = _c_length(src)
    if size == 0:
        return src_len
    copied = min(src_len, size - 1)
    if copied >= len(dst):
        raise IndexError(f"destination holds {len(dst)} bytes, {copied + 1} needed")
    dst[:copied] = src[:copied]
    dst[copied] = 0
    return src_len


def strlcat(dst: bytearray, src: bytes, size: int) -> int:
    """Append ``src`` to the string in ``dst`` within a total of ``size`` bytes.

    Returns the length of the string it tried to create.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dst_len = _c_length(dst)
    src_len = _c_length(src)
    if size <= dst_len:
        return size + src_len
    copied = min(src_len, size - dst_len - 1)
    end = dst_len + copied
    if end >= len(dst):
        raise IndexError(f"destination holds {len(dst)} bytes, {end + 1} needed")
    dst[dst_len:end] = src[:copied]
    dst[end] = 0
    return dst_len + src_len