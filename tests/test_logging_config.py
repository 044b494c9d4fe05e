"""Tests for logging setup and the performance decorator."""

import json
import logging

import pytest

from speedread.logging_config import ConsoleFormatter, JSONFormatter, log_performance, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(**extra):
    record = logging.LogRecord("speedread.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(make_record(extra_data={"duration_ms": 1.5})))
        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "speedread.test"
        assert data["duration_ms"] == 1.5

    def test_console_formatter_shows_duration(self):
        line = ConsoleFormatter().format(make_record(extra_data={"duration_ms": 2.0}))
        assert "speedread.test - hello world" in line
        assert "(2.00ms)" in line


class TestSetupLogging:
    def test_file_handler_writes_json(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "speedread.log"
        setup_logging(log_level="DEBUG", log_file=str(log_file), enable_console_logging=False)

        logging.getLogger("speedread.test").info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["message"] == "written"

    def test_level_applied(self, restore_root_logger):
        setup_logging(log_level="warning")
        assert logging.getLogger().level == logging.WARNING


class TestLogPerformance:
    def test_sync_success(self, caplog):
        @log_performance("double")
        def double(x):
            return x * 2

        with caplog.at_level(logging.DEBUG):
            assert double(4) == 8
        assert "double completed" in caplog.text

    def test_sync_failure_reraises(self, caplog):
        @log_performance("explode")
        def explode():
            raise ValueError("nope")

        with pytest.raises(ValueError):
            explode()
        assert "explode failed: nope" in caplog.text

    async def test_async_success(self, caplog):
        @log_performance("fetch")
        async def fetch():
            return "ok"

        with caplog.at_level(logging.DEBUG):
            assert await fetch() == "ok"
        assert "fetch completed" in caplog.text
