"""Order context for log records.

Validation and status changes bind the number of the order they work on.
Every log line emitted inside the binding carries it, so the rule functions
do not need to pass it around.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

# Stamped on records emitted outside any binding, or for orders not yet numbered
NO_ORDER = "<new>"

current_order_var: ContextVar[Optional[str]] = ContextVar("current_order", default=None)


def get_current_order() -> str:
    return current_order_var.get() or NO_ORDER


@contextmanager
def bind_order(order_number: Optional[str]) -> Iterator[str]:
    """Bind an order number to log records emitted inside the block.

    The previous binding is restored on exit, so nested calls (an engine
    validating inside a status change) leave the outer order in place.

    Yields:
        The order number as it will appear in log records
    """
    token = current_order_var.set(order_number)
    try:
        yield get_current_order()
    finally:
        current_order_var.reset(token)
