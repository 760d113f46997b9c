"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

__all__ = ["BUFFER_SIZE", "LineReader", "get_next_line"]

BUFFER_SIZE = 32

_NEWLINE = b"\n"


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="surrogateescape")


class LineReader:
    """Reads lines from an open file descriptor in chunks of ``buffer_size`` bytes.

    Lines are returned without their newline. A final line without a
    newline is still returned; a trailing newline does not produce an extra
    empty line.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> Optional[str]:
        """The next line, or None once the input is exhausted."""
        while True:
            newline = self._pending.find(_NEWLINE)
            if newline >= 0:
                line = self._pending[:newline]
                self._pending = self._pending[newline + 1 :]
                return _decode(line)
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if self._pending:
            line, self._pending = self._pending, b""
            return _decode(line)
        return None

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """The next line of ``fd``, keeping separate state for every descriptor.

    Returns None at the end of input and forgets the descriptor's state.
    """
    if fd < 0:
        raise ValueError(f"file descriptor must not be negative, got {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    line = reader.read_line()
    if line is None:
        del _readers[fd]
    return line