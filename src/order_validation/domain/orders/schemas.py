"""Pydantic schemas for order payloads and reference records

Every field is optional: validators receive partial payloads and decide
themselves which missing fields matter. Keys are accepted in snake_case or in
the camelCase form used by the web client (``partyId``, ``discountedPrice``).
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List

from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel

from .status import OrderStatus, PaymentStatus


class OrderSchema(BaseModel):
    """Base schema with shared model configuration"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ============================================================================
# Reference Records (read-only lookups supplied by the caller)
# ============================================================================

class Party(OrderSchema):
    """Customer/counterparty reference"""
    id: Optional[str] = None
    name: Optional[str] = None
    is_active: Optional[bool] = None
    outstanding_balance: Optional[Decimal] = None
    credit_limit: Optional[Decimal] = None


class Product(OrderSchema):
    """Catalog product reference used for stock and price cross-checks"""
    id: Optional[str] = None
    name: Optional[str] = None
    sku: Optional[str] = None
    quantity: Optional[Decimal] = Field(None, description="Stock on hand")
    is_active: Optional[bool] = None
    price: Optional[Decimal] = None
    discounted_price: Optional[Decimal] = None


# ============================================================================
# Order Schemas
# ============================================================================

class OrderItem(OrderSchema):
    """One line of an order"""
    product_id: Optional[str] = None
    name: Optional[str] = None
    sku: Optional[str] = None
    quantity: Optional[Decimal] = None
    price: Optional[Decimal] = None
    discounted_price: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    total: Optional[Decimal] = None
    notes: Optional[str] = None


class StatusHistoryEntry(OrderSchema):
    """One entry on an order's status timeline"""
    status: OrderStatus
    timestamp: datetime
    notes: Optional[str] = None
    updated_by: Optional[str] = None


class OrderFormData(OrderSchema):
    """Order payload under validation (create or update)"""
    order_number: Optional[str] = None
    party_id: Optional[str] = None
    party_name: Optional[str] = None
    items: Optional[List[OrderItem]] = None
    subtotal: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    tax: Optional[Decimal] = None
    shipping: Optional[Decimal] = None
    total: Optional[Decimal] = None
    notes: Optional[str] = None
    payment_method: Optional[str] = None
    payment_status: Optional[PaymentStatus] = None
    paid_amount: Optional[Decimal] = None
    tracking_number: Optional[str] = None
    shipping_address: Optional[str] = None
    billing_address: Optional[str] = None
    status: Optional[OrderStatus] = None
    status_history: List[StatusHistoryEntry] = Field(default_factory=list)


def coerce_model(model: type[OrderSchema], value):
    """Parse a mapping into ``model``; model instances pass through unchanged.

    Raises:
        pydantic.ValidationError: If the mapping cannot be parsed
    """
    if value is None or isinstance(value, model):
        return value
    return model.model_validate(value)
