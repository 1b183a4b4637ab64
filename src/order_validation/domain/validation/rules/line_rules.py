"""Line-level validation rules (single item and item collection)"""

from typing import Any, Optional, Sequence

from ...orders.schemas import OrderItem, Product, coerce_model
from ..constants import (
    MONEY_EPSILON,
    ORDER_ITEM_VALIDATION_RULES,
    ORDER_VALIDATION_RULES,
    LOW_STOCK_MULTIPLIER,
)
from ..models import ValidationIssue, ValidationIssueCode, ValidationResult


def validate_order_item(item: OrderItem, product: Optional[Product] = None) -> ValidationResult:
    """Validate a single order line.

    Rules implemented:
    - REQUIRED: product_id, name and sku must be set
    - MAX_LENGTH: name (200) and sku (50)
    - INVALID_QUANTITY / MAX_QUANTITY / INVALID_QUANTITY_FORMAT
    - INVALID_PRICE, INVALID_TOTAL
    - TOTAL_MISMATCH: total != quantity * (discounted_price or price)

    With a product record:
    - INSUFFICIENT_STOCK (error) or LOW_STOCK (warning)
    - INACTIVE_PRODUCT
    - PRICE_MISMATCH (warning): price matches neither list nor discounted price

    Args:
        item: Order line (model or mapping)
        product: Catalog product with the same id, if the caller looked it up

    Returns:
        ValidationResult with errors and warnings; fields are item-relative
    """
    item = coerce_model(OrderItem, item)
    product = coerce_model(Product, product)
    name_rule = ORDER_ITEM_VALIDATION_RULES["name"]
    sku_rule = ORDER_ITEM_VALIDATION_RULES["sku"]
    quantity_rule = ORDER_ITEM_VALIDATION_RULES["quantity"]
    errors = []
    warnings = []

    if not item.product_id:
        errors.append(ValidationIssue.error(
            "productId",
            "Product ID is required",
            ValidationIssueCode.REQUIRED
        ))

    if not item.name or not item.name.strip():
        errors.append(ValidationIssue.error(
            "name",
            "Product name is required",
            ValidationIssueCode.REQUIRED
        ))
    elif len(item.name) > name_rule.max_length:
        errors.append(ValidationIssue.error(
            "name",
            f"Product name must not exceed {name_rule.max_length} characters",
            ValidationIssueCode.MAX_LENGTH
        ))

    if not item.sku or not item.sku.strip():
        errors.append(ValidationIssue.error(
            "sku",
            "Product SKU is required",
            ValidationIssueCode.REQUIRED
        ))
    elif len(item.sku) > sku_rule.max_length:
        errors.append(ValidationIssue.error(
            "sku",
            f"Product SKU must not exceed {sku_rule.max_length} characters",
            ValidationIssueCode.MAX_LENGTH
        ))

    quantity = item.quantity
    if quantity is None or quantity <= 0:
        errors.append(ValidationIssue.error(
            "quantity",
            "Quantity must be greater than 0",
            ValidationIssueCode.INVALID_QUANTITY
        ))
    else:
        if quantity > quantity_rule.max:
            errors.append(ValidationIssue.error(
                "quantity",
                f"Quantity cannot exceed {quantity_rule.max}",
                ValidationIssueCode.MAX_QUANTITY
            ))

        if quantity != quantity.to_integral_value():
            errors.append(ValidationIssue.error(
                "quantity",
                "Quantity must be a whole number",
                ValidationIssueCode.INVALID_QUANTITY_FORMAT
            ))

    if item.price is None or item.price < 0:
        errors.append(ValidationIssue.error(
            "price",
            "Price must be 0 or greater",
            ValidationIssueCode.INVALID_PRICE
        ))

    if item.total is None or item.total < 0:
        errors.append(ValidationIssue.error(
            "total",
            "Total must be 0 or greater",
            ValidationIssueCode.INVALID_TOTAL
        ))
    else:
        unit_price = item.discounted_price if item.discounted_price is not None else item.price
        # Nothing to compare against without quantity and a unit price
        if quantity is not None and unit_price is not None:
            expected_total = quantity * unit_price
            if abs(item.total - expected_total) > MONEY_EPSILON:
                errors.append(ValidationIssue.error(
                    "total",
                    "Total does not match quantity × price",
                    ValidationIssueCode.TOTAL_MISMATCH
                ))

    if product is not None:
        stock = product.quantity

        if stock is not None and quantity is not None:
            if stock < quantity:
                errors.append(ValidationIssue.error(
                    "quantity",
                    f"Insufficient stock. Available: {stock}, Requested: {quantity}",
                    ValidationIssueCode.INSUFFICIENT_STOCK
                ))
            elif stock < quantity * LOW_STOCK_MULTIPLIER:
                warnings.append(ValidationIssue.warning(
                    "quantity",
                    f"Low stock warning. Available: {stock}",
                    ValidationIssueCode.LOW_STOCK
                ))

        if product.is_active is False:
            errors.append(ValidationIssue.error(
                "productId",
                "Selected product is inactive",
                ValidationIssueCode.INACTIVE_PRODUCT
            ))

        if item.price != product.price and item.price != product.discounted_price:
            warnings.append(ValidationIssue.warning(
                "price",
                "Price differs from current product price",
                ValidationIssueCode.PRICE_MISMATCH
            ))

    return ValidationResult.of(errors, warnings)


def validate_order_items(
    items: Optional[Sequence[Any]],
    products: Optional[Sequence[Any]] = None
) -> ValidationResult:
    """Validate the item collection of an order.

    Rules implemented:
    - REQUIRED: at least one item (no further checks when empty)
    - MAX_ITEMS: at most 100 items
    - DUPLICATE_PRODUCTS: one error if any product_id appears more than once
    - every item through validate_order_item, re-homed under ``items[i]``

    Args:
        items: Order lines (models or mappings)
        products: Catalog products the caller looked up, matched by id

    Returns:
        ValidationResult with errors and warnings
    """
    rule = ORDER_VALIDATION_RULES["items"]
    errors = []
    warnings = []

    if not items:
        errors.append(ValidationIssue.error(
            "items",
            "At least one item is required",
            ValidationIssueCode.REQUIRED
        ))
        return ValidationResult.of(errors)

    items = [coerce_model(OrderItem, item) for item in items]

    if len(items) > rule.max_items:
        errors.append(ValidationIssue.error(
            "items",
            f"Cannot exceed {rule.max_items} items per order",
            ValidationIssueCode.MAX_ITEMS
        ))

    # Missing product ids are already reported per item as REQUIRED
    product_ids = [item.product_id for item in items if item.product_id]
    if len(set(product_ids)) != len(product_ids):
        errors.append(ValidationIssue.error(
            "items",
            "Duplicate products found in order",
            ValidationIssueCode.DUPLICATE_PRODUCTS
        ))

    products_by_id: dict[str, Product] = {}
    for product in products or []:
        product = coerce_model(Product, product)
        if product.id is not None:
            products_by_id.setdefault(product.id, product)

    for index, item in enumerate(items):
        item_result = validate_order_item(item, products_by_id.get(item.product_id))
        errors.extend(issue.for_item(index) for issue in item_result.errors)
        warnings.extend(issue.for_item(index) for issue in item_result.warnings)

    return ValidationResult.of(errors, warnings)
