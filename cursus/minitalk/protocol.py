"""Bit framing for messages sent one bit at a time.

Each byte travels as eight bits, most significant first. A message ends
with a NUL byte. A bit of 1 is carried by SIGUSR1 and a bit of 0 by SIGUSR2.
"""

from __future__ import annotations

from typing import Optional, Union


def encode_byte(value: int) -> list[int]:
    """The eight bits of ``value``, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return [(value >> position) & 1 for position in range(7, -1, -1)]


def encode_message(message: Union[str, bytes]) -> list[int]:
    """Bits for every byte of ``message`` followed by a terminating NUL byte."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if 0 in data:
        raise ValueError("message must not contain a NUL byte")
    return [bit for value in data + b"\0" for bit in encode_byte(value)]


class BitDecoder:
    """Collects bits into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the byte once eight bits have arrived, else None."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._value = ((self._value << 1) | bit) & 0xFF
        self._count += 1
        if self._count < 8:
            return None
        value = self._value
        self._value = 0
        self._count = 0
        return value