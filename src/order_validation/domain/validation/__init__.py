"""Validation domain module.

Validates order payloads (shape, financial arithmetic, payment consistency,
addresses) and order status transitions. Every rule returns a
ValidationResult; errors block submission, warnings are advisory.
"""

from .models import (
    ValidationIssueSeverity,
    ValidationIssueCode,
    ValidationIssue,
    ValidationResult,
    ReadyCheckResult,
    ValidationContext,
)
from .constants import MONEY_EPSILON, ORDER_VALIDATION_RULES, ORDER_ITEM_VALIDATION_RULES
from .rules import (
    validate_order_number,
    validate_party,
    validate_order_item,
    validate_order_items,
    validate_financials,
    validate_payment_status,
    validate_addresses,
    validate_tracking_number,
    validate_notes,
    validate_status_transition,
)
from .port import ValidatorPort
from .engine import ValidationEngine, validate_order
from .formatting import format_validation_errors, group_validation_errors_by_field

__all__ = [
    "ValidationIssueSeverity",
    "ValidationIssueCode",
    "ValidationIssue",
    "ValidationResult",
    "ReadyCheckResult",
    "ValidationContext",
    "MONEY_EPSILON",
    "ORDER_VALIDATION_RULES",
    "ORDER_ITEM_VALIDATION_RULES",
    "validate_order_number",
    "validate_party",
    "validate_order_item",
    "validate_order_items",
    "validate_financials",
    "validate_payment_status",
    "validate_addresses",
    "validate_tracking_number",
    "validate_notes",
    "validate_status_transition",
    "ValidatorPort",
    "ValidationEngine",
    "validate_order",
    "format_validation_errors",
    "group_validation_errors_by_field",
]
