"""Shipping and billing address validation rules"""

from typing import Any

from ...orders.schemas import OrderFormData, coerce_model
from ..constants import ORDER_VALIDATION_RULES
from ..models import ValidationIssue, ValidationIssueCode, ValidationResult


def validate_addresses(order: Any) -> ValidationResult:
    """Validate shipping and billing addresses.

    Completeness is a heuristic only: an address without a comma is assumed
    to be missing city/state/zip parts and produces a warning.

    Rules:
    - MAX_LENGTH: either address above 500 characters
    - REQUIRED: shipping charge without a shipping address
    - INCOMPLETE_ADDRESS (warning): address without a comma
    - DUPLICATE_ADDRESS (warning): billing identical to shipping
    """
    order = coerce_model(OrderFormData, order)
    errors = []
    warnings = []

    shipping_address = order.shipping_address
    billing_address = order.billing_address

    if shipping_address:
        max_length = ORDER_VALIDATION_RULES["shipping_address"].max_length
        if len(shipping_address) > max_length:
            errors.append(ValidationIssue.error(
                "shippingAddress",
                f"Shipping address must not exceed {max_length} characters",
                ValidationIssueCode.MAX_LENGTH
            ))

        if "," not in shipping_address:
            warnings.append(ValidationIssue.warning(
                "shippingAddress",
                "Shipping address may be incomplete. Please include street, city, state, and zip code",
                ValidationIssueCode.INCOMPLETE_ADDRESS
            ))
    elif order.shipping is not None and order.shipping > 0:
        errors.append(ValidationIssue.error(
            "shippingAddress",
            "Shipping address is required when shipping charges are applied",
            ValidationIssueCode.REQUIRED
        ))

    if billing_address:
        max_length = ORDER_VALIDATION_RULES["billing_address"].max_length
        if len(billing_address) > max_length:
            errors.append(ValidationIssue.error(
                "billingAddress",
                f"Billing address must not exceed {max_length} characters",
                ValidationIssueCode.MAX_LENGTH
            ))

        if "," not in billing_address:
            warnings.append(ValidationIssue.warning(
                "billingAddress",
                "Billing address may be incomplete. Please include street, city, state, and zip code",
                ValidationIssueCode.INCOMPLETE_ADDRESS
            ))

    if shipping_address and billing_address and shipping_address == billing_address:
        warnings.append(ValidationIssue.warning(
            "billingAddress",
            "Billing address is identical to shipping address",
            ValidationIssueCode.DUPLICATE_ADDRESS
        ))

    return ValidationResult.of(errors, warnings)
