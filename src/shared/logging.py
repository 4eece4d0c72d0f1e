"""Structured JSON logging with suite_id support."""
from __future__ import annotations

import contextvars
import json
import logging
from datetime import datetime, timezone
from typing import Any

# Context variable for the suite currently booting or tearing down
suite_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "suite_id", default=""
)

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(suite_id)s %(message)s"


class JSONFormatter(logging.Formatter):
    """Custom JSON log formatter."""

    def __init__(self, service_name: str = "unknown") -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service_name": self.service_name,
            "logger": record.name,
            "suite_id": suite_id_var.get(""),
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])
        return json.dumps(log_entry)


class SuiteIdFilter(logging.Filter):
    """Copy the current suite_id onto each record for the text format."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.suite_id = suite_id_var.get("")
        return True


def setup_logging(
    service_name: str,
    level: str = "INFO",
    fmt: str = "json",
) -> logging.Logger:
    """Configure logging for the harness.

    Args:
        service_name: Logger name; usually the top-level package.
        level: Log level string (e.g. "INFO", "DEBUG").
        fmt: ``"json"`` for one JSON object per line, ``"text"`` otherwise.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(service_name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter(service_name=service_name))
    else:
        handler.addFilter(SuiteIdFilter())
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    logger.addHandler(handler)

    return logger
