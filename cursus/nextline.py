"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional

BUFFER_SIZE = 1024


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Each line keeps its trailing newline. The last line of the input is
    returned without one if the input does not end with a newline.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> Optional[bytes]:
        """The next line, or None once the input is exhausted.

        A read error discards any buffered data and is raised.
        """
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                line, self._pending = self._pending, b""
                return line or None
            self._pending += chunk
        line, _, self._pending = self._pending.partition(b"\n")
        return line + b"\n"

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.read_line, None)


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """The next line from ``fd``, keeping separate state for every descriptor."""
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line