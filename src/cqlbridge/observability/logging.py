"""
Logging — Structured logging with run ID propagation.

Provides consistent logging across all cqlbridge components, tagging
every record with the ID of the translation run that produced it.
"""

import logging
import json
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any
from uuid import UUID


# Context variable for the current run ID
_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)


def set_run_id(rid: UUID | str | None) -> None:
    """Set run ID for current context."""
    _run_id.set(str(rid) if rid else None)


def get_run_id() -> str | None:
    """Get run ID from current context."""
    return _run_id.get()


class RunIdFilter(logging.Filter):
    """Adds run_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = get_run_id() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON for machine consumption.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "run_id": getattr(record, "run_id", None),
        }

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class ReadableFormatter(logging.Formatter):
    """
    Human-readable formatter for terminals.
    """

    def format(self, record: logging.LogRecord) -> str:
        rid = getattr(record, "run_id", "-")
        rid_short = rid[:8] if rid and rid != "-" else "-"

        base = f"{record.levelname:<7} [{rid_short}] {record.name}: {record.getMessage()}"

        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)

        return base


def configure_logging(
    level: int = logging.WARNING,
    json_format: bool = False,
    stream: Any = None,
) -> None:
    """
    Configure cqlbridge logging.

    Args:
        level: Logging level (DEBUG shows skipped capabilities)
        json_format: Use JSON format
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(RunIdFilter())

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ReadableFormatter())

    bridge_logger = logging.getLogger("cqlbridge")
    bridge_logger.setLevel(level)
    bridge_logger.handlers.clear()
    bridge_logger.addHandler(handler)
    bridge_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a cqlbridge component."""
    return logging.getLogger(f"cqlbridge.{name}")


class LogContext:
    """
    Context manager scoping log records to one run.

    Usage:
        with LogContext(run_id):
            logger.info("Translating...")  # Includes run_id
    """

    def __init__(self, run_id: UUID | str | None):
        self.run_id = run_id
        self._token = None

    def __enter__(self):
        self._token = _run_id.set(
            str(self.run_id) if self.run_id else None
        )
        return self

    def __exit__(self, *args):
        if self._token is not None:
            _run_id.reset(self._token)
