"""Streaming reader for logger CSV exports.

Exports:
- ``iter_lines``: chunked newline splitter over a binary stream.
- ``validate_header``: three-line signature check.
- ``decode_row``: fixed-column timestamp decoder.
- ``days_from_civil`` / ``to_epoch_seconds``: calendar arithmetic.
"""

from hobbs_time.reader.civil import days_from_civil, to_epoch_seconds
from hobbs_time.reader.columns import COLUMN_MAP, SENTINEL, decode_row
from hobbs_time.reader.header import HEADER_SIGNATURE, validate_header
from hobbs_time.reader.lines import RawLine, iter_lines

__all__ = [
    "COLUMN_MAP",
    "HEADER_SIGNATURE",
    "RawLine",
    "SENTINEL",
    "days_from_civil",
    "decode_row",
    "iter_lines",
    "to_epoch_seconds",
    "validate_header",
]
