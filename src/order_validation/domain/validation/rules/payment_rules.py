"""Payment status and payment method validation rules"""

from decimal import Decimal
from typing import Any, Optional, Union

from ...orders.status import PaymentStatus
from ..constants import MONEY_EPSILON, ORDER_VALIDATION_RULES
from ..models import ValidationIssue, ValidationIssueCode, ValidationResult


def _decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def validate_payment_status(
    payment_status: Union[PaymentStatus, str],
    order_total: Any,
    paid_amount: Optional[Any] = None,
    payment_method: Optional[str] = None
) -> ValidationResult:
    """Validate payment status against the paid amount and payment method.

    Rules:
    - INVALID_PAYMENT_METHOD: method not in the allowed list
    - PAYMENT_METHOD_REQUIRED: paid/partial orders need a method
    - INVALID_PAID_AMOUNT: paid amount below 0
    - PAYMENT_STATUS_MISMATCH: "paid" but paid amount != total
    - PARTIAL_PAYMENT_MISMATCH: "partial" but paid amount not strictly between 0 and total
    - EXCESSIVE_REFUND: "refunded" with paid amount above total

    Warnings:
    - PENDING_WITH_PAYMENT: "pending" with a positive paid amount
    - MISSING_PAID_AMOUNT: paid/partial status without a paid amount

    Args:
        payment_status: Current payment status
        order_total: Order grand total
        paid_amount: Amount received so far, if known
        payment_method: Payment method value, if set

    Returns:
        ValidationResult with errors and warnings

    Raises:
        ValueError: If payment_status is not a known PaymentStatus value
    """
    status = PaymentStatus(payment_status)
    allowed_methods = ORDER_VALIDATION_RULES["payment_method"].allowed_values
    errors = []
    warnings = []

    if payment_method:
        if payment_method not in allowed_methods:
            errors.append(ValidationIssue.error(
                "paymentMethod",
                f"Invalid payment method. Allowed: {', '.join(allowed_methods)}",
                ValidationIssueCode.INVALID_PAYMENT_METHOD
            ))
    elif status in (PaymentStatus.PAID, PaymentStatus.PARTIAL):
        errors.append(ValidationIssue.error(
            "paymentMethod",
            "Payment method is required for paid or partially paid orders",
            ValidationIssueCode.PAYMENT_METHOD_REQUIRED
        ))

    if paid_amount is not None:
        paid = _decimal(paid_amount)
        total = _decimal(order_total)

        if paid < 0:
            errors.append(ValidationIssue.error(
                "paidAmount",
                "Paid amount cannot be negative",
                ValidationIssueCode.INVALID_PAID_AMOUNT
            ))

        if status == PaymentStatus.PAID and abs(paid - total) > MONEY_EPSILON:
            errors.append(ValidationIssue.error(
                "paymentStatus",
                'Payment status is "Paid" but paid amount does not match order total',
                ValidationIssueCode.PAYMENT_STATUS_MISMATCH
            ))

        if status == PaymentStatus.PARTIAL and (paid <= 0 or paid >= total):
            errors.append(ValidationIssue.error(
                "paymentStatus",
                'Payment status is "Partial" but paid amount is not between 0 and total',
                ValidationIssueCode.PARTIAL_PAYMENT_MISMATCH
            ))

        if status == PaymentStatus.PENDING and paid > 0:
            warnings.append(ValidationIssue.warning(
                "paymentStatus",
                'Payment status is "Pending" but some amount has been paid',
                ValidationIssueCode.PENDING_WITH_PAYMENT
            ))

        if status == PaymentStatus.REFUNDED and paid > total:
            errors.append(ValidationIssue.error(
                "paidAmount",
                "Refunded amount cannot be greater than order total",
                ValidationIssueCode.EXCESSIVE_REFUND
            ))
    elif status in (PaymentStatus.PAID, PaymentStatus.PARTIAL):
        warnings.append(ValidationIssue.warning(
            "paidAmount",
            "Paid amount should be specified for paid or partially paid orders",
            ValidationIssueCode.MISSING_PAID_AMOUNT
        ))

    return ValidationResult.of(errors, warnings)
