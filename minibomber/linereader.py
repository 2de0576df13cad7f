"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO

from minibomber.errors import GameError

BUFFER_SIZE = 32
"""Default number of characters requested from the stream per read."""

_READ_FAILED = 16


def read_lines(stream: IO[str], buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield each newline-terminated line of a text stream, without its newline.

    The stream is read ``buffer_size`` characters at a time. Text after the
    last newline is not yielded. A non-positive buffer size or a failing read
    raises GameError with the "get_next_line failed" code.
    """
    if buffer_size <= 0:
        raise GameError(_READ_FAILED)
    return _lines(stream, buffer_size)


def _lines(stream: IO[str], buffer_size: int) -> Iterator[str]:
    pending = ""
    while True:
        while "\n" not in pending:
            try:
                chunk = stream.read(buffer_size)
            except OSError as exc:
                raise GameError(_READ_FAILED) from exc
            if not chunk:
                return
            pending += chunk
        line, _, pending = pending.partition("\n")
        yield line