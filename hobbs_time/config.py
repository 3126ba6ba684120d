"""Configuration utilities for Hobbs time extraction runs.

This module reads environment variables (optionally from an `.env` file) and
produces an application configuration object consumed across the project.

Supported keys: `LOG_DIR`, `LOG_LEVEL`, `APP_NAME`, `HOBBS_CHUNK_SIZE`,
`HOBBS_DEGRADED_THRESHOLD` and `HOBBS_HTTP_TIMEOUT`.

Usage example:

    from hobbs_time.config import load_config

    config = load_config()
    records = run_batch(sources, config)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_ENV_FILE = REPO_ROOT / ".env"
DEFAULT_CHUNK_SIZE = 4096


def _load_env_file(path: Path) -> Dict[str, str]:
    """Parse a dotenv-style file into a dictionary."""
    if not path.exists():
        return {}

    data: Dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = value.strip().strip("\"'")
    return data


def _positive_int(values: Mapping[str, str], key: str, default: int) -> int:
    raw = values.get(key)
    if raw is None or raw == "":
        return default
    try:
        number = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if number <= 0:
        raise ValueError(f"{key} must be positive, got {number}")
    return number


def _non_negative_int(values: Mapping[str, str], key: str, default: int) -> int:
    raw = values.get(key)
    if raw is None or raw == "":
        return default
    try:
        number = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if number < 0:
        raise ValueError(f"{key} must be non-negative, got {number}")
    return number


def _positive_float(values: Mapping[str, str], key: str, default: float) -> float:
    raw = values.get(key)
    if raw is None or raw == "":
        return default
    try:
        number = float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None
    if number <= 0:
        raise ValueError(f"{key} must be positive, got {number}")
    return number


@dataclass(frozen=True)
class AppConfig:
    """Application-level configuration values."""

    log_directory: Path
    log_level: str
    app_name: str = "hobbs-time"
    chunk_size: int = DEFAULT_CHUNK_SIZE
    degraded_threshold: int = 0
    http_timeout_seconds: float = 10.0


def _merge_envs(dotenv_values: Mapping[str, str], env: MutableMapping[str, str]) -> Dict[str, str]:
    """Merge dotenv values with the current environment, preferring os.environ."""
    merged = dict(dotenv_values)
    merged.update(env)  # os.environ wins
    return merged


def load_config(env_file: Optional[Path] = None) -> AppConfig:
    """Load configuration values using environment defaults."""
    target_file = env_file or DEFAULT_ENV_FILE
    dotenv_values = _load_env_file(target_file)
    merged = _merge_envs(dotenv_values, os.environ)

    log_directory = Path(merged.get("LOG_DIR", REPO_ROOT / "logs"))
    if not log_directory.is_absolute():
        log_directory = REPO_ROOT / log_directory

    log_level = merged.get("LOG_LEVEL", "INFO").upper()

    return AppConfig(
        log_directory=log_directory,
        log_level=log_level,
        app_name=merged.get("APP_NAME", "hobbs-time"),
        chunk_size=_positive_int(merged, "HOBBS_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
        degraded_threshold=_non_negative_int(merged, "HOBBS_DEGRADED_THRESHOLD", 0),
        http_timeout_seconds=_positive_float(merged, "HOBBS_HTTP_TIMEOUT", 10.0),
    )


__all__ = ["AppConfig", "load_config", "REPO_ROOT", "DEFAULT_CHUNK_SIZE"]
