"""Centralized logging utilities for Hobbs time extraction runs.

Each run writes to its own log file under ``logs/`` and every record carries
the run identifier. Two timing helpers write one structured line per call:

- ``perf``: a decorator for functions such as the per-file extractor.
- ``perf_span``: a context manager for arbitrary blocks, e.g. a whole batch.
"""

import functools
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from hobbs_time.config import AppConfig

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [run=%(run_id)s] %(message)s"
PERF_LINE = "event=perf name=%s duration_ms=%.3f success=%s tags=%s"


class _RunContextFilter(logging.Filter):
    """Inject the current run identifier into every log record."""

    def __init__(self, run_id: str) -> None:
        super().__init__()
        self._run_id = run_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = self._run_id
        return True


def _sanitize_run_id(run_id: str) -> str:
    """Convert a run identifier into a filesystem-friendly token."""
    return "".join(ch if ch.isalnum() or ch in ("-", "_") else "-" for ch in run_id)


def generate_run_id() -> str:
    """Return a default run identifier based on the current UTC timestamp."""
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def configure_logging(
    config: AppConfig,
    run_id: Optional[str] = None,
    include_console: bool = True,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> Path:
    """Replace root handlers with a run-scoped file handler (and stderr)."""
    resolved_run_id = run_id or generate_run_id()
    safe_run_id = _sanitize_run_id(resolved_run_id)

    log_dir = config.log_directory
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{config.app_name}-{safe_run_id}.log"

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    handlers = [logging.FileHandler(log_path, encoding="utf-8")]
    if include_console:
        # stdout carries the summary table
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setFormatter(logging.Formatter(fmt))
        handler.addFilter(_RunContextFilter(resolved_run_id))
        root_logger.addHandler(handler)

    level = getattr(logging, config.log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    return log_path


def _format_tags(tags: Optional[Mapping[str, Any]]) -> str:
    """Render tags as a sorted single-line ``{k='v', ...}`` string."""
    if not tags:
        return "{}"
    items = ", ".join(f"{k}={tags[k]!r}" for k in sorted(tags))
    return "{" + items + "}"


def _elapsed_ms(start_ns: int) -> float:
    return (time.monotonic_ns() - start_ns) / 1_000_000.0


def perf(
    name: Optional[str] = None,
    *,
    tags: Optional[Mapping[str, Any]] = None,
    level: int = logging.DEBUG,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator that logs execution time of a function.

    Args:
        name: Optional span name; defaults to ``<module>.<func>``.
        tags: Optional mapping of additional metadata to include in the log.
        level: Logging level to use. Per-file work is frequent, so the
            default is ``logging.DEBUG``.

    The wrapped function's exceptions propagate unchanged after the
    ``success=false`` line is written.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        span_name = name or f"{func.__module__}.{func.__qualname__}"
        logger = logging.getLogger(func.__module__)
        rendered_tags = _format_tags(tags)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            start_ns = time.monotonic_ns()
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.log(level, PERF_LINE, span_name, _elapsed_ms(start_ns), "false", rendered_tags)
                raise
            logger.log(level, PERF_LINE, span_name, _elapsed_ms(start_ns), "true", rendered_tags)
            return result

        return wrapper

    return decorator


class perf_span:
    """Context manager to time an arbitrary code block and log its duration.

    Example:
        with perf_span("batch.total", tags={"files": 3}):
            run_batch(sources, config)
    """

    def __init__(
        self,
        name: str,
        *,
        tags: Optional[Mapping[str, Any]] = None,
        level: int = logging.INFO,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._name = name
        self._tags = tags or {}
        self._level = level
        self._logger = logger or logging.getLogger(__name__)
        self._start_ns: Optional[int] = None

    def __enter__(self) -> "perf_span":
        self._start_ns = time.monotonic_ns()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        start_ns = self._start_ns if self._start_ns is not None else time.monotonic_ns()
        self._logger.log(
            self._level,
            PERF_LINE,
            self._name,
            _elapsed_ms(start_ns),
            "true" if exc_type is None else "false",
            _format_tags(self._tags),
        )
        return False


__all__ = [
    "configure_logging",
    "generate_run_id",
    "DEFAULT_LOG_FORMAT",
    "perf",
    "perf_span",
]
