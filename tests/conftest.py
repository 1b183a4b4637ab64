"""Pytest fixtures for order validation tests.

Provides reusable order payloads and reference records:
- A complete, valid order payload (camelCase keys, as sent by the web client)
- Catalog products matching the payload's items
- An active customer record

Usage:
    def test_valid_order(valid_order_data):
        assert validate_order(valid_order_data).is_valid
"""

import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Make the src/ layout importable without installing the package
package_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(package_src))

from order_validation.domain.orders import OrderItem, Party, Product


@pytest.fixture
def valid_order_data() -> dict:
    """A complete new order that passes every rule without warnings"""
    return {
        "orderNumber": "ORD-001",
        "partyId": "c1",
        "partyName": "Acme",
        "items": [
            {
                "productId": "p1",
                "name": "Widget",
                "sku": "W1",
                "quantity": 2,
                "price": 50,
                "total": 100,
            }
        ],
        "subtotal": 100,
        "discount": 0,
        "tax": 0,
        "shipping": 0,
        "total": 100,
        "paymentStatus": "pending",
    }


@pytest.fixture
def widget_item() -> OrderItem:
    return OrderItem(
        product_id="p1",
        name="Widget",
        sku="W1",
        quantity=Decimal("5"),
        price=Decimal("10.00"),
        total=Decimal("50.00"),
    )


@pytest.fixture
def widget_product() -> Product:
    return Product(
        id="p1",
        name="Widget",
        sku="W1",
        quantity=Decimal("100"),
        is_active=True,
        price=Decimal("10.00"),
    )


@pytest.fixture
def active_party() -> Party:
    return Party(
        id="c1",
        name="Acme",
        is_active=True,
        outstanding_balance=Decimal("0"),
        credit_limit=Decimal("50000"),
    )
