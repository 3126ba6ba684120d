import logging
from datetime import datetime

from hobbs_time.logging_utils import (
    configure_logging,
    generate_run_id,
    perf,
    perf_span,
)


def _flush_and_read(log_path):
    for handler in logging.getLogger().handlers:
        handler.flush()
    return log_path.read_text(encoding="utf-8")


def test_configure_logging_creates_run_scoped_file(app_config):
    run_id = "run id/123"
    log_path = configure_logging(app_config, run_id=run_id, include_console=False)

    expected_name = f"{app_config.app_name}-run-id-123.log"
    assert log_path.name == expected_name
    assert log_path.exists()

    logging.getLogger("hobbs_time.tests").info("hello from test")

    contents = _flush_and_read(log_path)
    assert "hello from test" in contents
    assert "run id/123" in contents


def test_configure_logging_replaces_previous_handlers(app_config):
    configure_logging(app_config, run_id="first", include_console=False)
    configure_logging(app_config, run_id="second", include_console=True)

    handlers = logging.getLogger().handlers
    file_handlers = [h for h in handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename.endswith("hobbs-time-second.log")
    assert len(handlers) == 2


def test_generate_run_id_uses_utc_timestamp_format():
    run_id = generate_run_id()
    datetime.strptime(run_id, "%Y%m%dT%H%M%SZ")


def test_perf_decorator_logs_success(app_config):
    log_path = configure_logging(app_config, run_id="perf-decorator-success", include_console=False)

    @perf("test_func", tags={"k": "v"}, level=logging.INFO)
    def fast_fn(x: int) -> int:
        return x + 1

    assert fast_fn(1) == 2

    contents = _flush_and_read(log_path)
    assert "event=perf name=test_func" in contents
    assert "success=true" in contents
    assert "duration_ms=" in contents
    assert "k='v'" in contents


def test_perf_decorator_defaults_to_debug(app_config):
    log_path = configure_logging(app_config, run_id="perf-debug", include_console=False)

    @perf("quiet")
    def noop() -> None:
        return None

    noop()

    assert "name=quiet" not in _flush_and_read(log_path)


def test_perf_decorator_logs_failure_and_reraises(app_config):
    log_path = configure_logging(app_config, run_id="perf-decorator-failure", include_console=False)

    @perf("explode", level=logging.INFO)
    def boom():
        raise RuntimeError("boom")

    try:
        boom()
        raise AssertionError("Expected RuntimeError to be raised")
    except RuntimeError:
        pass

    contents = _flush_and_read(log_path)
    assert "event=perf name=explode" in contents
    assert "success=false" in contents


def test_perf_span_logs_block(app_config):
    log_path = configure_logging(app_config, run_id="perf-span", include_console=False)

    with perf_span("block", tags={"file": "log_250317.csv"}):
        _ = sum(range(10))

    contents = _flush_and_read(log_path)
    assert "event=perf name=block" in contents
    assert "success=true" in contents
    assert "file='log_250317.csv'" in contents
