"""Order validation rule tables.

Field bounds, allowed values and patterns used by the validation rules.
These are process-wide constants and are never modified at runtime.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Optional

from ..orders.status import PaymentMethod


# Absolute tolerance for comparing stated vs computed monetary amounts
MONEY_EPSILON = Decimal("0.01")


@dataclass(frozen=True)
class FieldRule:
    """Declarative constraints for a single field"""
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    max: Optional[Decimal] = None
    max_items: Optional[int] = None
    pattern: Optional[re.Pattern[str]] = None
    allowed_values: tuple[str, ...] = ()


PAYMENT_METHODS = tuple(method.value for method in PaymentMethod)


ORDER_VALIDATION_RULES = MappingProxyType({
    "order_number": FieldRule(
        min_length=3,
        max_length=50,
        pattern=re.compile(r"^[A-Z0-9-]+$"),
    ),
    "party_name": FieldRule(min_length=2, max_length=100),
    "items": FieldRule(max_items=100),
    "notes": FieldRule(max_length=1000),
    "payment_method": FieldRule(allowed_values=PAYMENT_METHODS),
    "tracking_number": FieldRule(
        max_length=100,
        pattern=re.compile(r"^[A-Za-z0-9\-\s]+$"),
    ),
    "shipping_address": FieldRule(max_length=500),
    "billing_address": FieldRule(max_length=500),
})


ORDER_ITEM_VALIDATION_RULES = MappingProxyType({
    "name": FieldRule(max_length=200),
    "sku": FieldRule(max_length=50),
    "quantity": FieldRule(max=Decimal("10000")),
})


# Party warning thresholds
HIGH_OUTSTANDING_BALANCE = Decimal("10000")
CREDIT_LIMIT_WARNING_RATIO = Decimal("0.9")

# Financial warning thresholds (fraction of subtotal)
LARGE_DISCOUNT_RATIO = Decimal("0.5")
HIGH_TAX_RATIO = Decimal("0.3")
HIGH_SHIPPING_RATIO = Decimal("0.2")

# Stock on hand below this multiple of the requested quantity triggers LOW_STOCK
LOW_STOCK_MULTIPLIER = 2
