"""Reading a descriptor or stream one line at a time through a small buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Optional, Union

BUFFER_SIZE = 5

Chunk = Union[str, bytes]


class LineReader:
    """Hand out the lines of a source one call at a time.

    The source is an integer file descriptor, read with ``os.read``, or
    any object with a ``read(size)`` method returning ``bytes`` or
    ``str``. Lines keep their trailing newline. Text left over when the
    source ends without a final newline is discarded, and the end is
    reported as None.
    """

    def __init__(self, source: Union[int, Any], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.source = source
        self.buffer_size = buffer_size
        self._stash: Optional[Chunk] = None

    def _read(self) -> Chunk:
        if isinstance(self.source, int):
            return os.read(self.source, self.buffer_size)
        return self.source.read(self.buffer_size)

    @staticmethod
    def _newline(chunk: Chunk) -> Chunk:
        return b"\n" if isinstance(chunk, bytes) else "\n"

    def next_line(self) -> Optional[Chunk]:
        """The next line including its newline, or None once the source is spent."""
        stash = self._stash
        while stash is None or self._newline(stash) not in stash:
            try:
                chunk = self._read()
            except OSError:
                self._stash = None
                raise
            if not chunk:
                self._stash = None
                return None
            stash = chunk if stash is None else stash + chunk
        end = stash.index(self._newline(stash)) + 1
        line, rest = stash[:end], stash[end:]
        self._stash = rest or None
        return line

    def reset(self) -> None:
        """Forget any text read ahead but not yet handed out."""
        self._stash = None

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line