"""Validation rules implementations.

Each rule module contains pure validation functions that return a
ValidationResult with the errors and warnings they detected.
"""

from .header_rules import (
    validate_order_number,
    validate_party,
    validate_tracking_number,
    validate_notes,
)
from .line_rules import validate_order_item, validate_order_items
from .financial_rules import validate_financials
from .payment_rules import validate_payment_status
from .address_rules import validate_addresses
from .status_rules import validate_status_transition

__all__ = [
    "validate_order_number",
    "validate_party",
    "validate_tracking_number",
    "validate_notes",
    "validate_order_item",
    "validate_order_items",
    "validate_financials",
    "validate_payment_status",
    "validate_addresses",
    "validate_status_transition",
]
