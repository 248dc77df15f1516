"""
Centralized logging configuration.
Plain text in development/test, single-line JSON in production.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, UTC
from typing import Any, Dict

from tuf_portal.core.settings import settings

# LogRecord attributes that are not user-supplied ``extra`` fields
_RESERVED = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'pathname', 'process',
    'processName', 'relativeCreated', 'stack_info', 'exc_info', 'exc_text',
    'thread', 'threadName', 'message', 'taskName',
}


class JSONFormatter(logging.Formatter):
    """JSON formatter for log aggregation in production."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info) if record.exc_info[0] else None,
            }

        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith('_'):
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging() -> logging.Logger:
    """Configure the ``tuf_portal`` logger tree once and return the app logger."""
    root_logger = logging.getLogger("tuf_portal")
    root_logger.setLevel(settings.log_level.upper())

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        if settings.is_production:
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
        root_logger.addHandler(handler)
        root_logger.propagate = False

    # Keep SQL echo out of the app stream unless explicitly requested
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.sql_debug else logging.WARNING
    )
    return logging.getLogger("tuf_portal.main")
