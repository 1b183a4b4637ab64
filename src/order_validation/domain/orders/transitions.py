"""Applying status changes to an order payload.

``transition_order`` is the write-side counterpart of
``validate_status_transition``: it refuses illegal changes and otherwise
returns a new order with the status updated and the change recorded on the
status history. Storing the result is up to the caller.
"""

import logging
from datetime import datetime
from typing import Any, Optional

from ...observability.order_context import bind_order
from ..validation.rules.status_rules import validate_status_transition
from .schemas import OrderFormData, StatusHistoryEntry, coerce_model
from .status import OrderStatus, StateTransitionError, StatusLike, status_value


logger = logging.getLogger(__name__)


def transition_order(
    order: Any,
    new_status: StatusLike,
    notes: Optional[str] = None,
    updated_by: Optional[str] = None,
    now: Optional[datetime] = None
) -> OrderFormData:
    """Move an order to a new status.

    Orders without a status are treated as PENDING, the status new orders
    are created with.

    Args:
        order: OrderFormData or mapping holding the current status
        new_status: Requested status
        notes: Optional note stored on the history entry
        updated_by: Optional user identifier stored on the history entry
        now: Timestamp for the history entry (defaults to utcnow)

    Returns:
        New OrderFormData; the input order is left untouched

    Raises:
        StateTransitionError: If the transition has blocking errors.
            ``error.result`` holds the ValidationResult.
    """
    order = coerce_model(OrderFormData, order)
    current_status = order.status or OrderStatus.PENDING
    target = OrderStatus(status_value(new_status))

    if current_status == target:
        return order

    with bind_order(order.order_number) as order_label:
        result = validate_status_transition(current_status, target, order)
        if not result.is_valid:
            raise StateTransitionError(
                f"Invalid transition: {current_status.value} -> {target.value}: "
                + "; ".join(issue.message for issue in result.errors),
                result=result
            )

        entry = StatusHistoryEntry(
            status=target,
            timestamp=now or datetime.utcnow(),
            notes=notes,
            updated_by=updated_by,
        )

        logger.info(
            f"Order {order_label} status {current_status.value} -> {target.value}"
            + (f" by {updated_by}" if updated_by else "")
        )

    return order.model_copy(update={
        "status": target,
        "status_history": [*order.status_history, entry],
    })
