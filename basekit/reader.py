"""Line-by-line reading from streams and file descriptors in fixed-size chunks."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Optional, Union

BUFFER_SIZE = 5
OPEN_MAX = 1024

Chunk = Union[str, bytes]


class LineReader:
    """Reads lines from any object with a ``read(size)`` method.

    Data is pulled ``buffer_size`` units at a time; whatever follows a line
    is kept for the next call. Lines keep their trailing newline.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer: Optional[Chunk] = None

    def _newline_index(self) -> int:
        if not self._buffer:
            return -1
        newline = "\n" if isinstance(self._buffer, str) else b"\n"
        return self._buffer.find(newline)

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the stream has nothing more."""
        while self._newline_index() < 0:
            try:
                chunk = self._stream.read(self._buffer_size)
            except BaseException:
                self._buffer = None
                raise
            if not chunk:
                break
            self._buffer = chunk if self._buffer is None else self._buffer + chunk
        if not self._buffer:
            self._buffer = None
            return None
        index = self._newline_index()
        if index < 0:
            line, self._buffer = self._buffer, None
        else:
            line, self._buffer = self._buffer[: index + 1], self._buffer[index + 1 :]
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.read_line()) is not None:
            yield line


class _FdStream:
    def __init__(self, fd: int) -> None:
        self._fd = fd

    def read(self, size: int) -> bytes:
        return os.read(self._fd, size)


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line read from file descriptor ``fd``, or None at its end.

    Leftover data is kept per descriptor between calls.
    """
    if fd < 0 or fd >= OPEN_MAX:
        raise ValueError(f"file descriptor {fd} is out of range")
    reader = _readers.setdefault(fd, LineReader(_FdStream(fd), BUFFER_SIZE))
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line