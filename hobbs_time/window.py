"""Fold decoded row values into the recording window of one file."""

from dataclasses import dataclass
from typing import Iterable

# Values at or below one year of seconds cannot be a real timestamp from the
# logger; they are rows written before the GPS time fix (or unreadable rows).
NO_FIX_THRESHOLD = 365 * 24 * 3600


@dataclass(frozen=True)
class FlightWindow:
    """First and last instant of a recording, in UTC epoch seconds."""

    start: int = 0
    end: int = 0
    valid_rows: int = 0
    sentinel_rows: int = 0

    @property
    def has_fix(self) -> bool:
        return self.valid_rows > 0

    @property
    def duration_seconds(self) -> int:
        return self.end - self.start


def fold_window(values: Iterable[int]) -> FlightWindow:
    """Reduce row values to a ``FlightWindow``.

    The logger writes one row per second, also before it has a time fix. The
    start is therefore moved back by the number of no-fix rows that precede
    the first valid value. Later no-fix rows are counted but do not move the
    start again.
    """
    start = end = 0
    valid_rows = 0
    missing_before_fix = 0
    sentinel_rows = 0

    for value in values:
        if value <= NO_FIX_THRESHOLD:
            sentinel_rows += 1
            if not valid_rows:
                missing_before_fix += 1
            continue
        if not valid_rows:
            start = value - missing_before_fix
            end = value
        elif value > end:
            end = value
        valid_rows += 1

    return FlightWindow(start=start, end=end, valid_rows=valid_rows, sentinel_rows=sentinel_rows)


__all__ = ["FlightWindow", "NO_FIX_THRESHOLD", "fold_window"]
