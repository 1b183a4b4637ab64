"""Observability helpers: structured logging and order context"""

from .logging_config import configure_logging, get_logger, JSONFormatter, OrderContextFilter
from .order_context import NO_ORDER, bind_order, current_order_var, get_current_order

__all__ = [
    "configure_logging",
    "get_logger",
    "JSONFormatter",
    "OrderContextFilter",
    "NO_ORDER",
    "bind_order",
    "current_order_var",
    "get_current_order",
]
