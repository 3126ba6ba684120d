"""Batch runner: extract every imported log, one file after another."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from hobbs_time.config import AppConfig
from hobbs_time.errors import ExtractionError
from hobbs_time.extractor import FlightTimeRecord, extract
from hobbs_time.logging_utils import perf, perf_span
from hobbs_time.sources import (
    LogDownloadClient,
    SourceOpener,
    is_url,
    path_opener,
    url_display_name,
)
from hobbs_time.window import FlightWindow

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogSource:
    """A display label and the opener for its bytes."""

    label: str
    opener: SourceOpener


@dataclass(frozen=True)
class BatchResult:
    records: Tuple[FlightTimeRecord, ...]
    degraded: Tuple[str, ...]
    threshold: int = 0

    @property
    def status(self) -> str:
        return "DEGRADED" if len(self.degraded) > self.threshold else "OK"


def build_sources(
    locations: Iterable[str],
    download_client: Optional[LogDownloadClient] = None,
) -> List[LogSource]:
    """Map paths and http(s) URLs to ``LogSource`` entries, keeping order."""
    sources: List[LogSource] = []
    for location in locations:
        if is_url(location):
            if download_client is None:
                raise ValueError(f"download client required for {location}")
            sources.append(LogSource(url_display_name(location), download_client.opener(location)))
        else:
            sources.append(LogSource(Path(location).name, path_opener(location)))
    return sources


@perf("jobs.run_batch", tags={"component": "jobs"}, level=logging.INFO)
def run_batch(sources: Sequence[LogSource], config: AppConfig) -> BatchResult:
    """Extract each source in order; unusable files get the zero record."""
    records: List[FlightTimeRecord] = []
    degraded: List[str] = []

    LOGGER.info("%s batch started for %s files", config.app_name, len(sources))
    for index, source in enumerate(sources):
        with perf_span(
            "jobs.file",
            tags={"file": source.label, "index": index},
            level=logging.DEBUG,
            logger=LOGGER,
        ):
            try:
                record = extract(
                    source.opener,
                    source.label,
                    chunk_size=config.chunk_size,
                    strict=True,
                )
            except ExtractionError as exc:
                LOGGER.warning("Unusable log %s: %s", source.label, exc)
                degraded.append(source.label)
                record = FlightTimeRecord.from_window(source.label, FlightWindow())
        LOGGER.info(
            "Processed %s start=%s end=%s hours=%s",
            record.file_name,
            record.start,
            record.end,
            record.duration,
        )
        records.append(record)

    result = BatchResult(
        records=tuple(records),
        degraded=tuple(degraded),
        threshold=config.degraded_threshold,
    )
    log = LOGGER.warning if result.status == "DEGRADED" else LOGGER.info
    log(
        "Batch summary: files=%s unusable=%s threshold=%s status=%s",
        len(records),
        len(degraded),
        config.degraded_threshold,
        result.status,
    )
    return result


__all__ = ["BatchResult", "LogSource", "build_sources", "run_batch"]
