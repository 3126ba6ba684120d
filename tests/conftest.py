"""Shared pytest fixtures for the hobbs_time tests.

Provides sample logger exports and configuration objects so tests stay
deterministic and never touch real user config.
"""

import io
import logging
from pathlib import Path
from typing import Callable, Iterable, Sequence

import pytest

from hobbs_time.config import AppConfig
from hobbs_time.reader import HEADER_SIGNATURE

SAMPLE_ROWS = (
    "2025-03-17, 09:59:11,  -05:00, 33.875,  -84.302, 1012.3",
    "2025-03-17, 11:29:41,  -05:00, 33.876,  -84.301, 1011.9",
)
NO_FIX_ROW = "          ,         ,        ,       ,         ,       "


def build_log(rows: Iterable[str], header: Sequence[bytes] = HEADER_SIGNATURE) -> bytes:
    """Return a complete export: header lines then ``rows``, LF-terminated."""
    lines = [line for line in header] + [row.encode("ascii") for row in rows]
    return b"".join(line + b"\n" for line in lines)


class TrackingBytesIO(io.BytesIO):
    """BytesIO that remembers it was closed, for scoped-release checks."""

    closed_by_caller = False

    def close(self) -> None:
        self.closed_by_caller = True
        super().close()


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    """Application config fixture logging to a temporary directory."""
    return AppConfig(
        log_directory=tmp_path,
        log_level="INFO",
    )


@pytest.fixture
def sample_log() -> bytes:
    return build_log(SAMPLE_ROWS)


@pytest.fixture
def write_log(tmp_path: Path) -> Callable[..., Path]:
    """Write an export under ``tmp_path`` and return its path."""

    def _write(name: str, rows: Iterable[str] = SAMPLE_ROWS, **kwargs) -> Path:
        path = tmp_path / name
        path.write_bytes(build_log(rows, **kwargs))
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by ``configure_logging`` during a test."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)
