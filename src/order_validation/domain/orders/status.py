"""Order status state machine.

Two status types cooperate here:

- ``OrderStatus`` is the full set of statuses an order can display on its
  timeline.
- ``LifecycleStatus`` is the subset the transition table actually enforces.

State Flow:
    PENDING → PROCESSING → SHIPPED → DELIVERED → COMPLETED
    PENDING|PROCESSING → CANCELLED
    SHIPPED|DELIVERED → RETURNED → PROCESSING

Terminal States: COMPLETED, CANCELLED

The remaining display statuses (DRAFT, PENDING_APPROVAL, APPROVED, CONFIRMED,
PICKING, PACKED, OUT_FOR_DELIVERY, REFUNDED) have no entry in the table.
``to_lifecycle_status`` returns None for them, so every change into or out of
one of them is reported as an invalid transition.
"""

from enum import Enum
from typing import Any, List, Optional, Union


class OrderStatus(str, Enum):
    """Order status enumeration (display/timeline set)"""
    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    PICKING = "picking"
    PACKED = "packed"
    SHIPPED = "shipped"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RETURNED = "returned"
    REFUNDED = "refunded"


class LifecycleStatus(str, Enum):
    """Statuses constrained by the transition table"""
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RETURNED = "returned"


class PaymentStatus(str, Enum):
    """Payment status enumeration.

    Only PENDING, PARTIAL, PAID and REFUNDED carry consistency rules.
    """
    PENDING = "pending"
    AUTHORIZED = "authorized"
    PARTIAL = "partial"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"
    DISPUTED = "disputed"


class PaymentMethod(str, Enum):
    CASH = "cash"
    CREDIT_CARD = "credit_card"
    BANK_TRANSFER = "bank_transfer"
    UPI = "upi"
    CHECK = "check"
    OTHER = "other"


# Allowed state transitions
ALLOWED_TRANSITIONS = {
    LifecycleStatus.PENDING: [
        LifecycleStatus.PROCESSING,
        LifecycleStatus.CANCELLED
    ],
    LifecycleStatus.PROCESSING: [
        LifecycleStatus.SHIPPED,
        LifecycleStatus.CANCELLED
    ],
    LifecycleStatus.SHIPPED: [
        LifecycleStatus.DELIVERED,
        LifecycleStatus.RETURNED
    ],
    LifecycleStatus.DELIVERED: [
        LifecycleStatus.COMPLETED,
        LifecycleStatus.RETURNED
    ],
    LifecycleStatus.COMPLETED: [],  # Terminal state
    LifecycleStatus.CANCELLED: [],  # Terminal state
    LifecycleStatus.RETURNED: [LifecycleStatus.PROCESSING],  # Can be reprocessed
}

TERMINAL_STATUSES = frozenset({LifecycleStatus.COMPLETED, LifecycleStatus.CANCELLED})

StatusLike = Union[OrderStatus, LifecycleStatus, str]


class StateTransitionError(Exception):
    """Raised when an invalid state transition is attempted.

    ``result`` holds the ValidationResult that rejected the change, when one
    was computed.
    """

    def __init__(self, message: str, result: Optional[Any] = None):
        super().__init__(message)
        self.result = result


def status_value(status: StatusLike) -> str:
    """Return the raw string value of a status enum member or string"""
    if isinstance(status, Enum):
        return status.value
    return str(status)


def to_lifecycle_status(status: Optional[StatusLike]) -> Optional[LifecycleStatus]:
    """Map a display status onto the enforceable subset.

    Args:
        status: OrderStatus, LifecycleStatus or raw string value

    Returns:
        Matching LifecycleStatus, or None for display-only/unknown statuses

    Example:
        >>> to_lifecycle_status(OrderStatus.SHIPPED)
        <LifecycleStatus.SHIPPED: 'shipped'>
        >>> to_lifecycle_status(OrderStatus.PICKING) is None
        True
    """
    if status is None:
        return None
    try:
        return LifecycleStatus(status_value(status))
    except ValueError:
        return None


def get_allowed_transitions(status: StatusLike) -> List[LifecycleStatus]:
    """Get list of allowed transitions from a given status.

    Args:
        status: Current status

    Returns:
        List of allowed target statuses (empty for terminal and display-only statuses)
    """
    lifecycle = to_lifecycle_status(status)
    if lifecycle is None:
        return []
    return list(ALLOWED_TRANSITIONS.get(lifecycle, []))


def can_transition(current_status: StatusLike, new_status: StatusLike) -> bool:
    """Check if the transition table allows a change without raising.

    Only table membership is checked here. Destination preconditions are
    evaluated by ``validate_status_transition``.
    """
    target = to_lifecycle_status(new_status)
    if target is None:
        return False
    return target in get_allowed_transitions(current_status)


def validate_transition(current_status: StatusLike, new_status: StatusLike) -> None:
    """Validate that a state transition is allowed by the table.

    Args:
        current_status: Current order status
        new_status: Target status to transition to

    Raises:
        StateTransitionError: If transition is not allowed
    """
    if not can_transition(current_status, new_status):
        allowed = get_allowed_transitions(current_status)
        raise StateTransitionError(
            f"Invalid transition: {status_value(current_status)} -> {status_value(new_status)}. "
            f"Allowed transitions from {status_value(current_status)}: "
            f"{[s.value for s in allowed]}"
        )


def is_terminal(status: StatusLike) -> bool:
    return to_lifecycle_status(status) in TERMINAL_STATUSES
