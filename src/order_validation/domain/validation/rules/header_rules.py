"""Header-level validation rules (order number, party, tracking number, notes)"""

from typing import Optional

from ...orders.schemas import Party
from ..constants import (
    ORDER_VALIDATION_RULES,
    HIGH_OUTSTANDING_BALANCE,
    CREDIT_LIMIT_WARNING_RATIO,
)
from ..models import ValidationIssue, ValidationIssueCode, ValidationResult


def validate_order_number(order_number: Optional[str]) -> ValidationResult:
    """Validate order number format.

    An empty order number is reported as REQUIRED only; the length and
    pattern checks run only on a non-empty value and are all reported.

    Args:
        order_number: Order number string

    Returns:
        ValidationResult with errors only (no warnings)
    """
    rule = ORDER_VALIDATION_RULES["order_number"]
    errors = []

    if not order_number:
        errors.append(ValidationIssue.error(
            "orderNumber",
            "Order number is required",
            ValidationIssueCode.REQUIRED
        ))
        return ValidationResult.of(errors)

    if len(order_number) < rule.min_length:
        errors.append(ValidationIssue.error(
            "orderNumber",
            f"Order number must be at least {rule.min_length} characters",
            ValidationIssueCode.MIN_LENGTH
        ))

    if len(order_number) > rule.max_length:
        errors.append(ValidationIssue.error(
            "orderNumber",
            f"Order number must not exceed {rule.max_length} characters",
            ValidationIssueCode.MAX_LENGTH
        ))

    if not rule.pattern.fullmatch(order_number):
        errors.append(ValidationIssue.error(
            "orderNumber",
            "Order number can only contain uppercase letters, numbers, and hyphens",
            ValidationIssueCode.INVALID_FORMAT
        ))

    return ValidationResult.of(errors)


def validate_party(
    party_id: Optional[str],
    party_name: Optional[str],
    party: Optional[Party] = None
) -> ValidationResult:
    """Validate the customer selection of an order.

    Rules:
    - REQUIRED: party_id and party_name must be set
    - MIN_LENGTH/MAX_LENGTH: party_name length bounds
    - INACTIVE_CUSTOMER: referenced party is inactive

    Warnings (only when the party record is supplied):
    - HIGH_OUTSTANDING_BALANCE: outstanding balance above 10,000
    - APPROACHING_CREDIT_LIMIT: outstanding balance above 90% of credit limit

    Args:
        party_id: Selected party identifier
        party_name: Party display name on the order
        party: Optional party record looked up by the caller

    Returns:
        ValidationResult with errors and warnings
    """
    rule = ORDER_VALIDATION_RULES["party_name"]
    errors = []
    warnings = []

    if not party_id:
        errors.append(ValidationIssue.error(
            "partyId",
            "Customer selection is required",
            ValidationIssueCode.REQUIRED
        ))

    if not party_name or not party_name.strip():
        errors.append(ValidationIssue.error(
            "partyName",
            "Customer name is required",
            ValidationIssueCode.REQUIRED
        ))
    else:
        if len(party_name) < rule.min_length:
            errors.append(ValidationIssue.error(
                "partyName",
                f"Customer name must be at least {rule.min_length} characters",
                ValidationIssueCode.MIN_LENGTH
            ))

        if len(party_name) > rule.max_length:
            errors.append(ValidationIssue.error(
                "partyName",
                f"Customer name must not exceed {rule.max_length} characters",
                ValidationIssueCode.MAX_LENGTH
            ))

    if party is not None:
        balance = party.outstanding_balance

        if balance is not None and balance > HIGH_OUTSTANDING_BALANCE:
            warnings.append(ValidationIssue.warning(
                "partyId",
                f"Customer has high outstanding balance: {balance:,}",
                ValidationIssueCode.HIGH_OUTSTANDING_BALANCE
            ))

        if (
            party.credit_limit is not None
            and balance is not None
            and balance > party.credit_limit * CREDIT_LIMIT_WARNING_RATIO
        ):
            warnings.append(ValidationIssue.warning(
                "partyId",
                "Customer is approaching credit limit",
                ValidationIssueCode.APPROACHING_CREDIT_LIMIT
            ))

        if party.is_active is False:
            errors.append(ValidationIssue.error(
                "partyId",
                "Selected customer is inactive",
                ValidationIssueCode.INACTIVE_CUSTOMER
            ))

    return ValidationResult.of(errors, warnings)


def validate_tracking_number(tracking_number: Optional[str] = None) -> ValidationResult:
    """Validate tracking number length and characters.

    A missing tracking number is valid here; shipped orders require one
    through the status transition rules.
    """
    rule = ORDER_VALIDATION_RULES["tracking_number"]
    errors = []

    if tracking_number:
        if len(tracking_number) > rule.max_length:
            errors.append(ValidationIssue.error(
                "trackingNumber",
                f"Tracking number must not exceed {rule.max_length} characters",
                ValidationIssueCode.MAX_LENGTH
            ))

        if not rule.pattern.fullmatch(tracking_number):
            errors.append(ValidationIssue.error(
                "trackingNumber",
                "Tracking number contains invalid characters",
                ValidationIssueCode.INVALID_FORMAT
            ))

    return ValidationResult.of(errors)


def validate_notes(notes: Optional[str]) -> ValidationResult:
    rule = ORDER_VALIDATION_RULES["notes"]

    if notes and len(notes) > rule.max_length:
        return ValidationResult.of([ValidationIssue.error(
            "notes",
            f"Notes must not exceed {rule.max_length} characters",
            ValidationIssueCode.MAX_LENGTH
        )])

    return ValidationResult()
