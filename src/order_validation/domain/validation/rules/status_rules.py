"""Order status transition rules.

A transition is accepted when the destination is in ALLOWED_TRANSITIONS for
the current status AND the destination's entry requirements hold.

Note: the table allows SHIPPED → RETURNED, but the RETURNED requirement only
accepts orders that were DELIVERED or COMPLETED. A request to return a
shipped order is therefore always rejected with INVALID_RETURN.
"""

import logging
from typing import Any, Callable, Optional

from ...orders.schemas import OrderFormData, coerce_model
from ...orders.status import (
    LifecycleStatus,
    PaymentStatus,
    StatusLike,
    can_transition,
    get_allowed_transitions,
    status_value,
    to_lifecycle_status,
)
from ..models import ValidationIssue, ValidationIssueCode, ValidationResult


logger = logging.getLogger(__name__)


def _processing_requirements(current: Optional[LifecycleStatus], order: OrderFormData) -> ValidationResult:
    if order.payment_status == PaymentStatus.PENDING and not order.payment_method:
        return ValidationResult.of(warnings=[ValidationIssue.warning(
            "paymentMethod",
            "Orders in processing should have a payment method specified",
            ValidationIssueCode.MISSING_PAYMENT_METHOD
        )])
    return ValidationResult()


def _shipped_requirements(current: Optional[LifecycleStatus], order: OrderFormData) -> ValidationResult:
    errors = []

    if not order.tracking_number:
        errors.append(ValidationIssue.error(
            "trackingNumber",
            "Tracking number is required for shipped orders",
            ValidationIssueCode.TRACKING_NUMBER_REQUIRED
        ))

    if not order.shipping_address:
        errors.append(ValidationIssue.error(
            "shippingAddress",
            "Shipping address is required for shipped orders",
            ValidationIssueCode.SHIPPING_ADDRESS_REQUIRED
        ))

    return ValidationResult.of(errors)


def _delivered_requirements(current: Optional[LifecycleStatus], order: OrderFormData) -> ValidationResult:
    if order.payment_status not in (PaymentStatus.PAID, PaymentStatus.PARTIAL):
        return ValidationResult.of(warnings=[ValidationIssue.warning(
            "paymentStatus",
            "Order is delivered but payment is not complete",
            ValidationIssueCode.PAYMENT_INCOMPLETE
        )])
    return ValidationResult()


def _completed_requirements(current: Optional[LifecycleStatus], order: OrderFormData) -> ValidationResult:
    if order.payment_status != PaymentStatus.PAID:
        return ValidationResult.of([ValidationIssue.error(
            "paymentStatus",
            "Order cannot be marked as completed until fully paid",
            ValidationIssueCode.PAYMENT_REQUIRED
        )])
    return ValidationResult()


def _returned_requirements(current: Optional[LifecycleStatus], order: OrderFormData) -> ValidationResult:
    if current not in (LifecycleStatus.DELIVERED, LifecycleStatus.COMPLETED):
        return ValidationResult.of([ValidationIssue.error(
            "status",
            "Only delivered or completed orders can be returned",
            ValidationIssueCode.INVALID_RETURN
        )])
    return ValidationResult()


def _no_requirements(current: Optional[LifecycleStatus], order: OrderFormData) -> ValidationResult:
    return ValidationResult()


# Entry requirements per destination status
STATUS_REQUIREMENTS: dict[LifecycleStatus, Callable[[Optional[LifecycleStatus], OrderFormData], ValidationResult]] = {
    LifecycleStatus.PENDING: _no_requirements,
    LifecycleStatus.PROCESSING: _processing_requirements,
    LifecycleStatus.SHIPPED: _shipped_requirements,
    LifecycleStatus.DELIVERED: _delivered_requirements,
    LifecycleStatus.COMPLETED: _completed_requirements,
    LifecycleStatus.CANCELLED: _no_requirements,
    LifecycleStatus.RETURNED: _returned_requirements,
}


def validate_status_transition(
    current_status: StatusLike,
    new_status: StatusLike,
    order: Optional[Any] = None
) -> ValidationResult:
    """Validate an order status change.

    Args:
        current_status: Status the order is in now
        new_status: Requested status
        order: Order payload (model or mapping) used by the entry requirements

    Returns:
        ValidationResult; unchanged status is always valid with no issues
    """
    if status_value(current_status) == status_value(new_status):
        return ValidationResult()

    order = coerce_model(OrderFormData, order) or OrderFormData()

    if not can_transition(current_status, new_status):
        allowed = get_allowed_transitions(current_status)
        allowed_text = ", ".join(s.value for s in allowed) or "none"
        logger.info(
            f"Rejected status transition {status_value(current_status)} -> "
            f"{status_value(new_status)} (allowed: {allowed_text})"
        )
        return ValidationResult.of([ValidationIssue.error(
            "status",
            f"Cannot change status from {status_value(current_status)} to "
            f"{status_value(new_status)}. Allowed transitions: {allowed_text}",
            ValidationIssueCode.INVALID_STATUS_TRANSITION
        )])

    target = to_lifecycle_status(new_status)
    requirements = STATUS_REQUIREMENTS[target]
    return requirements(to_lifecycle_status(current_status), order)
