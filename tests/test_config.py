import pytest

from hobbs_time.config import DEFAULT_CHUNK_SIZE, REPO_ROOT, load_config

CONFIG_KEYS = [
    "LOG_DIR",
    "LOG_LEVEL",
    "APP_NAME",
    "HOBBS_CHUNK_SIZE",
    "HOBBS_DEGRADED_THRESHOLD",
    "HOBBS_HTTP_TIMEOUT",
]


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_load_config_defaults_without_env_file(tmp_path):
    config = load_config(tmp_path / "missing.env")

    assert config.log_directory == REPO_ROOT / "logs"
    assert config.log_level == "INFO"
    assert config.app_name == "hobbs-time"
    assert config.chunk_size == DEFAULT_CHUNK_SIZE == 4096
    assert config.degraded_threshold == 0
    assert config.http_timeout_seconds == 10.0


def test_load_config_reads_env_file(tmp_path):
    env_file = tmp_path / "test.env"
    env_file.write_text(
        "\n".join(
            [
                "# local overrides",
                "LOG_DIR=logs/testing",
                "LOG_LEVEL=debug",
                "APP_NAME='hobbs-nightly'",
                "HOBBS_CHUNK_SIZE=512",
                "HOBBS_DEGRADED_THRESHOLD=3",
                "HOBBS_HTTP_TIMEOUT=2.5",
            ]
        ),
        encoding="utf-8",
    )

    config = load_config(env_file)

    assert config.log_directory == REPO_ROOT / "logs/testing"
    assert config.log_level == "DEBUG"
    assert config.app_name == "hobbs-nightly"
    assert config.chunk_size == 512
    assert config.degraded_threshold == 3
    assert config.http_timeout_seconds == 2.5


def test_load_config_prefers_environment_variables(tmp_path, monkeypatch):
    env_file = tmp_path / "test.env"
    env_file.write_text(
        "\n".join(
            [
                f"LOG_DIR={tmp_path / 'from_env_file'}",
                "HOBBS_CHUNK_SIZE=512",
            ]
        ),
        encoding="utf-8",
    )

    env_log_dir = tmp_path / "from_env"
    monkeypatch.setenv("LOG_DIR", str(env_log_dir))
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("HOBBS_CHUNK_SIZE", "64")

    config = load_config(env_file)

    assert config.log_directory == env_log_dir
    assert config.log_level == "WARNING"
    assert config.chunk_size == 64


@pytest.mark.parametrize(
    "key,value",
    [
        ("HOBBS_CHUNK_SIZE", "0"),
        ("HOBBS_CHUNK_SIZE", "-4"),
        ("HOBBS_CHUNK_SIZE", "4k"),
        ("HOBBS_DEGRADED_THRESHOLD", "-1"),
        ("HOBBS_HTTP_TIMEOUT", "0"),
        ("HOBBS_HTTP_TIMEOUT", "soon"),
    ],
)
def test_load_config_rejects_invalid_numbers(tmp_path, monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ValueError):
        load_config(tmp_path / "missing.env")
