"""Integer conversion from civil (proleptic Gregorian) dates to epoch values.

Functions:
    days_from_civil(year, month, day): Days since 1970-01-01.
    to_epoch_seconds(...): UTC epoch seconds for a local wall-clock time and
        its UTC offset.
"""

SECONDS_PER_DAY = 86_400
# day number of 1970-01-01 in the March-based count below
EPOCH_DAY_OFFSET = 719_484


def days_from_civil(year: int, month: int, day: int) -> int:
    """Return the number of days between 1970-01-01 and the given date.

    The year is shifted to start in March so the leap day falls at the end;
    ``1461`` is the length of a four-year cycle and ``(m * 979 + 15) // 32``
    yields the cumulative days before month ``m`` of the shifted year. Exact
    for years 1901 through 2099 and for 2100-01-01 .. 2100-02-28, which
    covers every year the row decoder accepts.
    """
    if month < 3:
        year -= 1
        month += 9
    else:
        month -= 3
    return year * 1461 // 4 + (month * 979 + 15) // 32 + day - EPOCH_DAY_OFFSET


def to_epoch_seconds(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    tz_sign: int = 1,
    tz_hour: int = 0,
    tz_minute: int = 0,
) -> int:
    """Return UTC epoch seconds for a wall-clock time at offset ``±tz_hour:tz_minute``."""
    local_seconds = hour * 3600 + minute * 60 + second
    offset_seconds = tz_sign * (tz_hour * 3600 + tz_minute * 60)
    return days_from_civil(year, month, day) * SECONDS_PER_DAY + local_seconds - offset_seconds


__all__ = ["days_from_civil", "to_epoch_seconds", "SECONDS_PER_DAY"]
