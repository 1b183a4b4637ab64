"""Order validation and status-transition library.

Typical use from a submit handler:

    from order_validation import validate_order, group_validation_errors_by_field

    result = validate_order(payload, products=products, party=party)
    if not result.is_valid:
        field_errors = group_validation_errors_by_field(result.errors)
"""

from .domain.orders import (
    OrderFormData,
    OrderItem,
    OrderStatus,
    LifecycleStatus,
    Party,
    PaymentStatus,
    Product,
    StateTransitionError,
    StatusHistoryEntry,
)
from .domain.orders.transitions import transition_order
from .domain.validation import (
    ValidationEngine,
    ValidationIssue,
    ValidationIssueCode,
    ValidationResult,
    format_validation_errors,
    group_validation_errors_by_field,
    validate_order,
    validate_status_transition,
)

__version__ = "0.1.0"

__all__ = [
    "OrderFormData",
    "OrderItem",
    "OrderStatus",
    "LifecycleStatus",
    "Party",
    "PaymentStatus",
    "Product",
    "StateTransitionError",
    "StatusHistoryEntry",
    "transition_order",
    "ValidationEngine",
    "ValidationIssue",
    "ValidationIssueCode",
    "ValidationResult",
    "format_validation_errors",
    "group_validation_errors_by_field",
    "validate_order",
    "validate_status_transition",
]
