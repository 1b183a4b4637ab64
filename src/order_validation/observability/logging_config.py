"""Structured JSON logging configuration.

Provides logging setup with order-context stamping and JSON formatting.
The library itself only creates module loggers; applications call
configure_logging() once at startup.
"""

import logging
import json
import sys
from datetime import datetime
from typing import Optional

from ..config import get_settings
from .order_context import NO_ORDER, get_current_order


class OrderContextFilter(logging.Filter):
    """Stamp each record with the order number bound by bind_order()."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.order_number = get_current_order()
        return True


class JSONFormatter(logging.Formatter):
    """Format log records as JSON.

    Args:
        environment: Deployment environment name added to every record
    """

    def __init__(self, environment: Optional[str] = None):
        super().__init__()
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.utcnow().isoformat() + "Z",
            "level": record.levelname,
            "order_number": getattr(record, "order_number", NO_ORDER),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        if self.environment:
            log_data["environment"] = self.environment

        # Add exception info if present
        if record.exc_info:
            log_data["error"] = str(record.exc_info[1])
            log_data["traceback"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(level: Optional[str] = None, json_format: Optional[bool] = None) -> None:
    """Configure application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR); defaults to LOG_LEVEL
        json_format: If True, use JSON formatter; defaults to LOG_JSON
    """
    settings = get_settings()
    level = (level or settings.LOG_LEVEL).upper()
    if json_format is None:
        json_format = settings.LOG_JSON

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level))

    # Remove existing handlers
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level))

    if json_format:
        formatter = JSONFormatter(environment=settings.ENVIRONMENT)
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - [%(order_number)s] - %(module)s.%(funcName)s - %(message)s'
        )

    handler.setFormatter(formatter)
    handler.addFilter(OrderContextFilter())
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)
