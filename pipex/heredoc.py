"""Collecting here-document input up to a limiter line."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO, Union

from pipex.libft.reader import LineReader

PROMPT = ">"
STDIN_FILENO = 0


def read_heredoc(
    limiter: Union[str, bytes],
    stream: Optional[Union[int, Any]] = None,
    prompt: Optional[TextIO] = None,
) -> bytes:
    """Read lines from ``stream`` until one equals ``limiter`` or input ends.

    A ``>`` prompt is written to ``prompt`` (standard error by default)
    before every line is read. ``stream`` is a file descriptor or an
    object with ``read(size)``; standard input by default. The collected
    lines come back as bytes, each ending in a newline. A final line
    without a newline is dropped, as the line reader discards it.
    """
    source = STDIN_FILENO if stream is None else stream
    out = sys.stderr if prompt is None else prompt
    target = limiter.encode() if isinstance(limiter, str) else bytes(limiter)
    reader = LineReader(source)
    collected = bytearray()
    while True:
        out.write(PROMPT)
        out.flush()
        line = reader.next_line()
        if line is None:
            break
        data = line.encode() if isinstance(line, str) else bytes(line)
        if data.endswith(b"\n"):
            data = data[:-1]
        if data == target:
            break
        collected += data + b"\n"
    return bytes(collected)