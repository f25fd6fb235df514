"""Buffered line reading from a raw file descriptor."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 1024


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Each line keeps its trailing newline; the last line of the input is
    returned without one if the input does not end in a newline.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    @staticmethod
    def _decode(data: bytes) -> str:
        return data.decode("utf-8", errors="surrogateescape")

    def read_line(self) -> str | None:
        """Return the next line, or None once the input is exhausted.

        Read errors surface as OSError.
        """
        while True:
            newline = self._pending.find(b"\n")
            if newline != -1:
                line = bytes(self._pending[: newline + 1])
                del self._pending[: newline + 1]
                return self._decode(line)
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                if not self._pending:
                    return None
                rest = bytes(self._pending)
                self._pending.clear()
                return self._decode(rest)
            self._pending += chunk

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line