"""Byte-buffer operations: fill, zero, allocate, search, compare, copy, move."""

from __future__ import annotations

from typing import Optional


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_room(length: int, n: int, what: str) -> None:
    if n > length:
        raise IndexError(f"{what} holds {length} bytes, {n} requested")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (as an unsigned byte)."""
    _check_count(n)
    _check_room(len(buffer), n, "buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` within the first ``n`` bytes, or None."""
    _check_count(n)
    _check_room(len(data), n, "data")
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n)
    _check_room(len(first), n, "first")
    _check_room(len(second), n, "second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``."""
    _check_count(n)
    _check_room(len(src), n, "src")
    _check_room(len(dest), n, "dest")
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dest`` within ``buffer``.

    Overlapping regions are handled as if the source were copied out first.
    """
    _check_count(n)
    if dest < 0 or src < 0:
        raise IndexError("offsets must not be negative")
    _check_room(len(buffer), src + n, "buffer")
    _check_room(len(buffer), dest + n, "buffer")
    if dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer