"""Render epoch values and window lengths for the summary table."""

from datetime import datetime, timezone

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_utc(epoch_seconds: int) -> str:
    """Return ``YYYY-MM-DD HH:MM:SS`` for ``epoch_seconds`` in UTC."""
    return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc).strftime(TIMESTAMP_FORMAT)


def format_duration(start: int, end: int) -> str:
    """Return the window length in hours with one decimal digit."""
    return f"{(end - start) / 3600.0:.1f}"


__all__ = ["TIMESTAMP_FORMAT", "format_duration", "format_utc"]
