"""Tests for structured logging and dev diagnostics."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys

import pytest

from habitflow.config import BaseConfig
from habitflow.devtools import dev_log, format_dev_line
from habitflow.logging_config import JSONFormatter, get_logger, setup_logging


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITFLOW_DATA_DIR", str(tmp_path))
    return BaseConfig()


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger("habitflow")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _record(**kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="habitflow.test",
        level=kwargs.pop("level", logging.INFO),
        pathname="test.py",
        lineno=42,
        msg=kwargs.pop("msg", "Test message"),
        args=(),
        exc_info=kwargs.pop("exc_info", None),
    )
    record.module = "test_module"
    record.funcName = "test_function"
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


def test_json_formatter():
    log_data = json.loads(JSONFormatter().format(_record()))

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "habitflow.test"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_includes_extra_fields():
    log_data = json.loads(JSONFormatter().format(_record(habit_id="abc", revision=3)))

    assert log_data["extra"] == {"habit_id": "abc", "revision": 3}


def test_json_formatter_with_exception():
    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(_record(level=logging.ERROR, exc_info=exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"]


def test_setup_logging_writes_json_lines(config, tmp_path):
    logger = setup_logging(config)

    assert logger.name == "habitflow"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2

    logger.warning("Habit created", extra={"habit_id": "abc"})
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "logs" / "habitflow.log"
    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert lines[0]["message"] == "Logging initialized"
    assert lines[-1]["extra"] == {"habit_id": "abc"}


def test_setup_logging_twice_does_not_stack_handlers(config):
    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


@pytest.mark.parametrize("dev_mode", [True, False])
def test_console_level_by_mode(config, dev_mode):
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console = next(
        h
        for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.handlers.RotatingFileHandler)
    )
    assert console.level == (logging.INFO if dev_mode else logging.WARNING)


def test_get_logger_namespacing():
    assert get_logger("module1").name == "habitflow.module1"
    assert get_logger("habitflow.services.tracker").name == "habitflow.services.tracker"


def test_format_dev_line():
    assert format_dev_line("Habit created") == "[DEV] Habit created"
    assert format_dev_line("Toggle", {"habit_id": "a", "completed": True}) == "[DEV] Toggle (habit_id=a completed=True)"


def test_dev_log_prints_only_in_dev_mode(config, capsys):
    config.DEV_MODE = False
    dev_log(config, "hidden")
    config.DEV_MODE = True
    dev_log(config, "shown", context={"n": 1})
    dev_log(None, "no config")

    assert capsys.readouterr().out == "[DEV] shown (n=1)\n"
