"""Tests for structured JSON logging."""

import json
import logging
import sys

import pytest

from sastcore.core.config import settings
from sastcore.core.logging import JSONFormatter, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg="test", args=(), level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="sastcore.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


def test_json_formatter_produces_valid_json():
    data = json.loads(JSONFormatter().format(_record("hello %s", ("world",))))
    assert data["level"] == "INFO"
    assert data["logger"] == "sastcore.test"
    assert data["msg"] == "hello world"
    assert "ts" in data


def test_json_formatter_includes_module_key():
    record = _record()
    record.module_key = "findSecBugs"  # type: ignore[attr-defined]
    data = json.loads(JSONFormatter().format(record))
    assert data["module"] == "findSecBugs"


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record("failed", level=logging.ERROR, exc_info=sys.exc_info())
    data = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in data["exc"]


def test_setup_logging_uses_configured_level(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "DEBUG")
    setup_logging()
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_explicit_level_wins(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "DEBUG")
    setup_logging("warning")
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "chatty")
    setup_logging()
    assert logging.getLogger().level == logging.INFO


def test_log_output_is_json(capsys, monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", "INFO")
    setup_logging()
    logging.getLogger("sastcore.structured").warning("There was an error while executing FindSecBugs: Error!")
    data = json.loads(capsys.readouterr().out.strip())
    assert data["level"] == "WARNING"
    assert data["msg"] == "There was an error while executing FindSecBugs: Error!"
