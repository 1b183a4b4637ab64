"""Financial validation rules (subtotal, discount, tax, shipping, total)"""

from decimal import Decimal
from typing import Any

from ...orders.schemas import OrderFormData, coerce_model
from ..constants import (
    MONEY_EPSILON,
    LARGE_DISCOUNT_RATIO,
    HIGH_TAX_RATIO,
    HIGH_SHIPPING_RATIO,
)
from ..models import ValidationIssue, ValidationIssueCode, ValidationResult


ZERO = Decimal("0")


def _amount(value: Any) -> Decimal:
    return value if value is not None else ZERO


def validate_financials(order: Any) -> ValidationResult:
    """Validate the monetary fields of an order.

    Missing amounts are treated as 0 and missing items as an empty list.

    Invariants checked:
    - subtotal >= 0 and equals the sum of item totals (±MONEY_EPSILON)
    - 0 <= discount <= subtotal
    - tax >= 0, shipping >= 0
    - total > 0 and equals subtotal - discount + tax + shipping (±MONEY_EPSILON)

    Warnings for unusual values relative to the subtotal:
    - LARGE_DISCOUNT (> 50%), HIGH_TAX (> 30%), HIGH_SHIPPING (> 20%)

    Args:
        order: OrderFormData or mapping with the financial fields

    Returns:
        ValidationResult with errors and warnings
    """
    order = coerce_model(OrderFormData, order)
    subtotal = _amount(order.subtotal)
    discount = _amount(order.discount)
    tax = _amount(order.tax)
    shipping = _amount(order.shipping)
    total = _amount(order.total)
    items = order.items or []
    errors = []
    warnings = []

    if subtotal < 0:
        errors.append(ValidationIssue.error(
            "subtotal",
            "Subtotal cannot be negative",
            ValidationIssueCode.INVALID_SUBTOTAL
        ))

    expected_subtotal = sum((_amount(item.total) for item in items), ZERO)
    if abs(subtotal - expected_subtotal) > MONEY_EPSILON:
        errors.append(ValidationIssue.error(
            "subtotal",
            "Subtotal does not match sum of item totals",
            ValidationIssueCode.SUBTOTAL_MISMATCH
        ))

    if discount < 0:
        errors.append(ValidationIssue.error(
            "discount",
            "Discount cannot be negative",
            ValidationIssueCode.INVALID_DISCOUNT
        ))

    if discount > subtotal:
        errors.append(ValidationIssue.error(
            "discount",
            "Discount cannot exceed subtotal",
            ValidationIssueCode.EXCESSIVE_DISCOUNT
        ))

    if tax < 0:
        errors.append(ValidationIssue.error(
            "tax",
            "Tax cannot be negative",
            ValidationIssueCode.INVALID_TAX
        ))

    if shipping < 0:
        errors.append(ValidationIssue.error(
            "shipping",
            "Shipping cost cannot be negative",
            ValidationIssueCode.INVALID_SHIPPING
        ))

    if total <= 0:
        errors.append(ValidationIssue.error(
            "total",
            "Total must be greater than 0",
            ValidationIssueCode.INVALID_TOTAL
        ))

    expected_total = subtotal - discount + tax + shipping
    if abs(total - expected_total) > MONEY_EPSILON:
        errors.append(ValidationIssue.error(
            "total",
            "Total calculation is incorrect",
            ValidationIssueCode.TOTAL_CALCULATION_ERROR
        ))

    if discount > subtotal * LARGE_DISCOUNT_RATIO:
        warnings.append(ValidationIssue.warning(
            "discount",
            "Large discount applied (>50% of subtotal)",
            ValidationIssueCode.LARGE_DISCOUNT
        ))

    if tax > subtotal * HIGH_TAX_RATIO:
        warnings.append(ValidationIssue.warning(
            "tax",
            "High tax amount (>30% of subtotal)",
            ValidationIssueCode.HIGH_TAX
        ))

    if shipping > subtotal * HIGH_SHIPPING_RATIO:
        warnings.append(ValidationIssue.warning(
            "shipping",
            "High shipping cost (>20% of subtotal)",
            ValidationIssueCode.HIGH_SHIPPING
        ))

    return ValidationResult.of(errors, warnings)
