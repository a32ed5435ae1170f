"""JSON log output for applications built on subscribable channels."""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from .config.settings import log_level

_RESERVED_ATTRS = {
    "args", "created", "exc_info", "exc_text", "filename", "funcName", "levelname", "levelno",
    "lineno", "message", "module", "msecs", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "taskName", "thread", "threadName",
}


class JSONLogFormatter(logging.Formatter):
    """Serialize log records as structured JSON for easy filtering."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack_info"] = self.formatStack(record.stack_info)
        for key, value in record.__dict__.items():
            if key.startswith("_"):
                continue
            if key in payload or key in _RESERVED_ATTRS:
                continue
            payload[key] = value
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str | None = None) -> None:
    """Install a JSON handler on the root logger.

    ``level`` falls back to ``SUBSCRIBABLE_LOG_LEVEL`` and then ``INFO``.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONLogFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel((level or log_level()).upper())
