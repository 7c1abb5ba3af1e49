"""Tests for package logging setup."""


import json
import logging

import pytest

from scam_guard.log import (
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    JSONFormatter,
    TextFormatter,
    get_logger,
    setup_logging,
)


def _record(msg: str = "Analyzed message") -> logging.LogRecord:
    return logging.LogRecord(
        name="scam_guard.engine",
        level=logging.INFO,
        pathname="engine.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter() -> None:
    """JSON lines carry the core record fields."""
    parsed = json.loads(JSONFormatter().format(_record()))

    assert parsed["level"] == "INFO"
    assert parsed["logger"] == "scam_guard.engine"
    assert parsed["message"] == "Analyzed message"
    assert "timestamp" in parsed


def test_json_formatter_extra_fields() -> None:
    """Known extra fields are copied into the JSON line."""
    record = _record()
    record.score = 72
    record.mode = "paranoid"
    record.unrelated = "dropped"

    parsed = json.loads(JSONFormatter().format(record))

    assert parsed["score"] == 72
    assert parsed["mode"] == "paranoid"
    assert "unrelated" not in parsed


def test_get_logger() -> None:
    """Loggers live under the package namespace."""
    assert get_logger("rules.pipeline").name == "scam_guard.rules.pipeline"


def test_setup_logging_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Level and format default from environment variables."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    monkeypatch.setenv(LOG_FORMAT_ENV, "json")

    root = setup_logging()

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JSONFormatter)


def test_setup_logging_is_idempotent() -> None:
    """Calling setup twice should not stack handlers."""
    setup_logging(level="warning", fmt="text")
    root = setup_logging(level="warning", fmt="text")

    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, TextFormatter)
