"""Structured JSON logging configuration.

All log output goes to stdout in JSON format so scan diagnostics
(missing tools, failed runs, unparseable reports) can be collected
by whatever drives the scanner.

Format per line:
    {"ts": "2025-03-01T12:00:00Z", "level": "WARNING", "logger": "sastcore.modules.find_sec_bugs", "msg": "...", ...}
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from sastcore.core.config import settings


class JSONFormatter(logging.Formatter):
    """Emit each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        # Include the scan module key if attached to the record via extra={}
        if hasattr(record, "module_key"):
            payload["module"] = record.module_key

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(level_name: str | None = None) -> None:
    """Configure root logger with JSON output to stdout.

    The level defaults to ``settings.LOG_LEVEL`` (the ``LOG_LEVEL`` env var,
    ``INFO`` when unset).
    """
    level_name = (level_name or settings.LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers (e.g. uvicorn defaults)
    root.handlers.clear()
    root.addHandler(handler)

    for noisy in ("uvicorn.access", "httpcore", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
