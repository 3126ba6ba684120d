"""Decode the fixed-column timestamp at the start of a logger data row.

The logger renders local date, local time and UTC offset at fixed byte
positions::

    0         1         2
    0123456789012345678901234567890
    2025-03-17, 09:59:11,  -05:00,

Each field owns a half-open column range in ``COLUMN_MAP``. A row shorter
than ``ROW_WIDTH`` is incomplete and decodes to ``SENTINEL``. Separators are
skipped wherever they appear; every other byte inside the scanned width must
be a digit (or the offset sign) or the row decodes to ``SENTINEL``.
"""

from typing import Dict, Optional, Sequence, Tuple

from hobbs_time.reader.civil import to_epoch_seconds

SENTINEL = 0
ROW_WIDTH = 30
MIN_YEAR = 2020
MAX_YEAR = 2100

COLUMN_MAP: Sequence[Tuple[str, int, int]] = (
    ("year", 0, 4),
    ("month", 4, 7),
    ("day", 7, 10),
    ("hour", 10, 14),
    ("minute", 14, 17),
    ("second", 17, 20),
    ("tz_hour", 20, 26),
    ("tz_minute", 26, 29),
)
# columns strictly after this one belong to the UTC offset
DATE_SEPARATOR_LIMIT = 20

SKIP_BYTES = frozenset(b" ,:")
MINUS = ord("-")
PLUS = ord("+")
ZERO = ord("0")
NINE = ord("9")


def _field_by_column() -> Tuple[Optional[str], ...]:
    owners = []
    for column in range(ROW_WIDTH):
        owner = None
        for name, start, stop in COLUMN_MAP:
            if start <= column < stop:
                owner = name
                break
        owners.append(owner)
    return tuple(owners)


FIELD_BY_COLUMN = _field_by_column()


def extract_fields(line: bytes) -> Optional[Dict[str, int]]:
    """Return the numeric fields of ``line`` plus ``tz_sign``, or None if malformed."""
    if len(line) < ROW_WIDTH:
        return None
    fields = {name: 0 for name, _, _ in COLUMN_MAP}
    fields["tz_sign"] = 1

    for column, byte in enumerate(line[:ROW_WIDTH]):
        if byte in SKIP_BYTES:
            continue
        if column > DATE_SEPARATOR_LIMIT:
            if byte == MINUS:
                fields["tz_sign"] = -1
                continue
            if byte == PLUS:
                fields["tz_sign"] = 1
                continue
        elif byte == MINUS:
            continue

        if not ZERO <= byte <= NINE:
            return None
        owner = FIELD_BY_COLUMN[column]
        if owner is not None:
            fields[owner] = fields[owner] * 10 + (byte - ZERO)

    return fields


def decode_row(line: bytes) -> int:
    """Return the UTC epoch seconds of a data row, or ``SENTINEL``."""
    fields = extract_fields(line)
    if fields is None:
        return SENTINEL
    if not MIN_YEAR <= fields["year"] <= MAX_YEAR:
        return SENTINEL
    return to_epoch_seconds(
        fields["year"],
        fields["month"],
        fields["day"],
        fields["hour"],
        fields["minute"],
        fields["second"],
        fields["tz_sign"],
        fields["tz_hour"],
        fields["tz_minute"],
    )


__all__ = ["COLUMN_MAP", "SENTINEL", "decode_row", "extract_fields"]
