"""Command-line entry point: print the recording window of each imported log.

Usage:
    hobbs-time log_250317_095911_KPDK.csv log_250318_*.csv
    hobbs-time --csv https://example.org/logs/log_250317_095911_KPDK.csv
"""

import argparse
import csv
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from hobbs_time.config import REPO_ROOT, AppConfig, load_config
from hobbs_time.extractor import TABLE_COLUMNS, FlightTimeRecord
from hobbs_time.jobs import build_sources, run_batch
from hobbs_time.logging_utils import configure_logging, perf_span
from hobbs_time.sources import LogDownloadClient

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_DEGRADED = 2


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract start/end times and duration from flight data logger CSV exports.",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        help="Log files or http(s) URLs, processed in the order given.",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help="Write CSV to stdout instead of an aligned table.",
    )
    parser.add_argument(
        "--chunk-size",
        type=_positive_int,
        default=None,
        help="Read size in bytes (overrides HOBBS_CHUNK_SIZE, default 4096).",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="dotenv file to read configuration from (default: repo .env).",
    )
    parser.add_argument(
        "--fail-on-degraded",
        action="store_true",
        help="Exit with status 2 if any input was unreadable or unsupported.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Log to the run file only, not to stderr.",
    )
    return parser.parse_args(argv)


def render_table(records: Sequence[FlightTimeRecord]) -> str:
    """Return the records as a left-aligned text table with a header row."""
    rows: List[Sequence[str]] = [TABLE_COLUMNS] + [record.to_row() for record in records]
    widths = [max(len(row[i]) for row in rows) for i in range(len(TABLE_COLUMNS))]
    lines = ["  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip() for row in rows]
    return "\n".join(lines) + "\n"


def write_csv(records: Sequence[FlightTimeRecord], stream: TextIO) -> None:
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(TABLE_COLUMNS)
    for record in records:
        writer.writerow(record.to_row())


def _load_config_or_fallback(env_file: Optional[Path]) -> Optional[AppConfig]:
    try:
        return load_config(env_file)
    except ValueError as exc:
        # Fall back to a default log location so failures are still captured per run.
        fallback = AppConfig(log_directory=REPO_ROOT / "logs", log_level="INFO")
        configure_logging(fallback)
        LOGGER.error("Failed to load configuration: %s", exc)
        return None


def main(argv: Optional[Sequence[str]] = None, stdout: Optional[TextIO] = None) -> int:
    args = parse_args(argv)
    out = stdout or sys.stdout

    config = _load_config_or_fallback(args.env_file)
    if config is None:
        return EXIT_CONFIG_ERROR
    if args.chunk_size is not None:
        config = dataclasses.replace(config, chunk_size=args.chunk_size)

    configure_logging(config, include_console=not args.quiet)

    with LogDownloadClient(
        timeout=config.http_timeout_seconds,
        chunk_size=config.chunk_size,
    ) as download_client:
        sources = build_sources(args.inputs, download_client)
        with perf_span(
            "batch.total",
            tags={"files": len(sources), "app": config.app_name},
            logger=LOGGER,
        ):
            result = run_batch(sources, config)

    if args.csv:
        write_csv(result.records, out)
    else:
        out.write(render_table(result.records))

    if args.fail_on_degraded and result.degraded:
        return EXIT_DEGRADED
    return EXIT_OK


__all__ = ["main", "parse_args", "render_table", "write_csv"]
