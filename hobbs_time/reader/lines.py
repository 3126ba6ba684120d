"""Split a binary stream into newline-terminated lines, one chunk at a time."""

import logging
from typing import BinaryIO, Iterator, NamedTuple

from hobbs_time.config import DEFAULT_CHUNK_SIZE

LOGGER = logging.getLogger(__name__)

NEWLINE = b"\n"


class RawLine(NamedTuple):
    """One line without its terminator and its 1-based position in the file."""

    number: int
    data: bytes


def iter_lines(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[RawLine]:
    """Yield the newline-terminated lines of ``stream`` in order.

    The buffer holds at most the unconsumed tail of the chunks read so far.
    End of input and read failures both end the sequence; bytes after the
    last newline are dropped.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    buffer = bytearray()
    number = 0
    scan_from = 0
    while True:
        index = buffer.find(NEWLINE, scan_from)
        if index >= 0:
            number += 1
            line = bytes(buffer[:index])
            del buffer[: index + 1]
            scan_from = 0
            yield RawLine(number, line)
            continue

        # no terminator in what we hold; skip re-scanning it after the next read
        scan_from = len(buffer)
        try:
            chunk = stream.read(chunk_size)
        except OSError as exc:
            LOGGER.warning("Read failed after line %s: %s", number, exc)
            return
        if not chunk:
            if buffer:
                LOGGER.debug("Dropping %s bytes without a line terminator", len(buffer))
            return
        buffer.extend(chunk)


__all__ = ["RawLine", "iter_lines", "NEWLINE"]
