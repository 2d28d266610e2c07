"""Tests for structured logging functionality."""

from __future__ import annotations

import json
import logging
import logging.handlers

import pytest

from vaultflow.config import BaseConfig
from vaultflow.logging_config import JSONFormatter, get_logger, setup_logging


def _record(msg: str = "Test message", level: int = logging.INFO, exc_info=None) -> logging.LogRecord:
    record = logging.LogRecord(
        name="vaultflow.test",
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.module = "test_module"
    record.funcName = "test_function"
    return record


def test_json_formatter():
    formatted = JSONFormatter().format(_record())
    log_data = json.loads(formatted)

    assert log_data["level"] == "INFO"
    assert log_data["logger"] == "vaultflow.test"
    assert log_data["message"] == "Test message"
    assert log_data["module"] == "test_module"
    assert log_data["function"] == "test_function"
    assert log_data["line"] == 42
    assert "timestamp" in log_data
    assert "extra" not in log_data


def test_json_formatter_with_exception():
    import sys

    try:
        raise ValueError("Test error")
    except ValueError:
        exc_info = sys.exc_info()

    log_data = json.loads(JSONFormatter().format(_record("Error occurred", logging.ERROR, exc_info)))

    assert log_data["exception"]["type"] == "ValueError"
    assert "Test error" in log_data["exception"]["message"]
    assert log_data["exception"]["traceback"] is not None


def test_json_formatter_collects_extra_fields():
    record = _record()
    record.user_id = 7
    record.transaction_id = 12

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["extra"] == {"user_id": 7, "transaction_id": 12}


def test_json_formatter_ignores_fields_set_by_other_formatters():
    record = _record()
    record.user_id = 7
    logging.Formatter("%(asctime)s %(message)s").format(record)

    log_data = json.loads(JSONFormatter().format(record))

    assert log_data["extra"] == {"user_id": 7}


def test_setup_logging(tmp_path):
    """Logging setup creates a rotating JSON log file under the data dir."""
    config = BaseConfig()
    config.DATA_DIR = str(tmp_path)
    config.DEV_MODE = True

    logger = setup_logging(config)

    assert logger.name == "vaultflow"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2  # Console + File

    log_file = tmp_path / "logs" / "vaultflow.log"
    assert log_file.exists()

    logger.info("Test info message")
    logger.warning("Test warning message", extra={"vault_id": 3})
    for handler in logger.handlers:
        handler.flush()

    lines = [line for line in log_file.read_text().splitlines() if line.strip()]
    assert len(lines) >= 3
    entries = [json.loads(line) for line in lines]
    for entry in entries:
        assert "timestamp" in entry
        assert "level" in entry
        assert "message" in entry
    assert entries[0]["message"] == "Logging initialized"
    assert entries[-1]["extra"] == {"vault_id": 3}


def test_setup_logging_twice_does_not_duplicate_handlers(tmp_path):
    config = BaseConfig()
    config.DATA_DIR = str(tmp_path)

    setup_logging(config)
    logger = setup_logging(config)

    assert len(logger.handlers) == 2


def test_get_logger():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")

    assert logger1.name == "vaultflow.module1"
    assert logger2.name == "vaultflow.module2"
    assert logger1 != logger2


def test_get_logger_keeps_package_names():
    assert get_logger("vaultflow.services.allocation").name == "vaultflow.services.allocation"
    assert get_logger("vaultflow").name == "vaultflow"


@pytest.mark.parametrize("dev_mode", [True, False])
def test_logging_levels_by_mode(tmp_path, dev_mode):
    """Console logging level adjusts based on dev mode."""
    config = BaseConfig()
    config.DATA_DIR = str(tmp_path)
    config.DEV_MODE = dev_mode

    logger = setup_logging(config)

    console_handler = None
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, logging.handlers.RotatingFileHandler
        ):
            console_handler = handler
            break

    assert console_handler is not None
    expected_level = logging.INFO if dev_mode else logging.WARNING
    assert console_handler.level == expected_level
