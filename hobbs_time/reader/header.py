"""Signature check for the three header lines of a logger export."""

from typing import Iterable, Iterator, Tuple

from hobbs_time.errors import HeaderMismatch
from hobbs_time.reader.lines import RawLine

HEADER_SIGNATURE: Tuple[bytes, ...] = (
    b"#airframe_info",
    b"#yyy-mm-dd, hh:mm:ss,   hh:mm,",
    b"  Lcl Date, Lcl Time, UTCOfst,",
)


def validate_header(lines: Iterable[RawLine]) -> Iterator[RawLine]:
    """Check the header lines and yield the data lines that follow them.

    Raises ``HeaderMismatch`` on the first pull if a signature line does not
    match or the input ends inside the header.
    """
    iterator = iter(lines)
    for line_number, expected in enumerate(HEADER_SIGNATURE, start=1):
        line = next(iterator, None)
        if line is None:
            raise HeaderMismatch(line_number, expected, None)
        if not line.data.startswith(expected):
            raise HeaderMismatch(line_number, expected, line.data)
    yield from iterator


__all__ = ["HEADER_SIGNATURE", "validate_header"]
