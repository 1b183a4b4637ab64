"""Order schemas and status lifecycle"""

from .status import (
    OrderStatus,
    LifecycleStatus,
    PaymentStatus,
    PaymentMethod,
    ALLOWED_TRANSITIONS,
    TERMINAL_STATUSES,
    StateTransitionError,
    to_lifecycle_status,
    can_transition,
    get_allowed_transitions,
    validate_transition,
    is_terminal,
)
from .schemas import OrderFormData, OrderItem, Party, Product, StatusHistoryEntry

__all__ = [
    "OrderStatus",
    "LifecycleStatus",
    "PaymentStatus",
    "PaymentMethod",
    "ALLOWED_TRANSITIONS",
    "TERMINAL_STATUSES",
    "StateTransitionError",
    "to_lifecycle_status",
    "can_transition",
    "get_allowed_transitions",
    "validate_transition",
    "is_terminal",
    "OrderFormData",
    "OrderItem",
    "Party",
    "Product",
    "StatusHistoryEntry",
]
