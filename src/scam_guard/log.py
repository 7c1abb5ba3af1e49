"""Logging setup shared by the CLI tools and the MCP server.

Usage:
    from scam_guard.log import get_logger
    logger = get_logger("rules.pipeline")
    logger.warning("Rule failed", extra={"rule": "prize_claim"})
"""


import json
import logging
import os
import sys
from datetime import datetime, timezone

LOG_LEVEL_ENV = "SCAM_GUARD_LOG_LEVEL"
LOG_FORMAT_ENV = "SCAM_GUARD_LOG_FORMAT"
ROOT_LOGGER_NAME = "scam_guard"

_EXTRA_FIELDS: tuple[str, ...] = (
    "rule",
    "category",
    "mode",
    "score",
    "trigger_count",
    "source",
)


class JSONFormatter(logging.Formatter):
    """Formats log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable format for terminals."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Logger:
    """Configure the package logger on stderr. Safe to call more than once.

    Args:
        level: Level name. Defaults to ``$SCAM_GUARD_LOG_LEVEL`` or WARNING.
        fmt: ``"text"`` or ``"json"``. Defaults to ``$SCAM_GUARD_LOG_FORMAT``
            or text.
    """
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    format_name = (fmt or os.getenv(LOG_FORMAT_ENV, "text")).lower()

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level_name, logging.WARNING))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if format_name == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())
    root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the ``scam_guard`` namespace."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
