"""Turn one logger export into a ``FlightTimeRecord``.

Usage example:

    from hobbs_time.extractor import extract_path

    record = extract_path("log_250317_095911_KPDK.csv")
    print(record.start, record.end, record.duration)
"""

import logging
from contextlib import ExitStack
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Dict, Tuple, Union

from hobbs_time.config import DEFAULT_CHUNK_SIZE
from hobbs_time.errors import ExtractionError, ResourceUnavailable
from hobbs_time.formatting import format_duration, format_utc
from hobbs_time.logging_utils import perf
from hobbs_time.reader import decode_row, iter_lines, validate_header
from hobbs_time.sources import SourceOpener, path_opener
from hobbs_time.window import FlightWindow, fold_window

LOGGER = logging.getLogger(__name__)

TABLE_COLUMNS: Tuple[str, ...] = ("File Name", "Start (UTC)", "End (UTC)", "Time (H.h)")


@dataclass(frozen=True)
class FlightTimeRecord:
    """Recording window of one file, rendered for display."""

    file_name: str
    start: str
    end: str
    duration: str

    @classmethod
    def from_window(cls, file_name: str, window: FlightWindow) -> "FlightTimeRecord":
        return cls(
            file_name=file_name,
            start=format_utc(window.start),
            end=format_utc(window.end),
            duration=format_duration(window.start, window.end),
        )

    def to_row(self) -> Tuple[str, str, str, str]:
        return (self.file_name, self.start, self.end, self.duration)

    def to_dict(self) -> Dict[str, str]:
        return dict(zip(TABLE_COLUMNS, self.to_row()))


def scan_window(
    open_source: SourceOpener,
    display_name: str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> FlightWindow:
    """Stream one source and fold its rows into a window.

    Raises ``ResourceUnavailable`` if the source cannot be opened and
    ``HeaderMismatch`` if it is not a supported export. The stream is closed
    on every path.
    """
    with ExitStack() as stack:
        try:
            stream = stack.enter_context(open_source())
        except OSError as exc:
            raise ResourceUnavailable(display_name, str(exc)) from exc

        lines = validate_header(iter_lines(stream, chunk_size))
        return fold_window(decode_row(line.data) for line in lines)


@perf("extractor.extract", tags={"component": "extractor"})
def extract(
    open_source: SourceOpener,
    display_name: str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    strict: bool = False,
) -> FlightTimeRecord:
    """Return the flight window of one source as a display record.

    Unreadable and unsupported sources yield the zero window
    (``1970-01-01 00:00:00`` twice, ``0.0`` hours) unless ``strict`` is set,
    in which case the ``ExtractionError`` propagates.
    """
    try:
        window = scan_window(open_source, display_name, chunk_size=chunk_size)
    except ExtractionError as exc:
        if strict:
            raise
        LOGGER.warning("Skipping %s: %s", display_name, exc)
        window = FlightWindow()

    if window.sentinel_rows:
        LOGGER.debug(
            "%s: %s rows without time fix, %s valid rows",
            display_name,
            window.sentinel_rows,
            window.valid_rows,
        )
    return FlightTimeRecord.from_window(display_name, window)


def extract_path(
    path: Union[str, PathLike],
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    strict: bool = False,
) -> FlightTimeRecord:
    """Extract a local file, labelled with its base name."""
    return extract(path_opener(path), Path(path).name, chunk_size=chunk_size, strict=strict)


__all__ = [
    "FlightTimeRecord",
    "SourceOpener",
    "TABLE_COLUMNS",
    "extract",
    "extract_path",
    "scan_window",
]
