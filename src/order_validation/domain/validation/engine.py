"""Order validation composition root and ValidationEngine"""

import logging
from typing import Any, Callable, Optional, Sequence

from ...observability.order_context import bind_order
from ..orders.schemas import OrderFormData, Party, Product, coerce_model
from ..orders.status import StatusLike, status_value
from .models import ReadyCheckResult, ValidationContext, ValidationResult
from .port import ValidatorPort
from .rules import (
    validate_addresses,
    validate_financials,
    validate_notes,
    validate_order_items,
    validate_order_number,
    validate_party,
    validate_payment_status,
    validate_status_transition,
    validate_tracking_number,
)


logger = logging.getLogger(__name__)


def validate_order(
    order: Any,
    products: Optional[Sequence[Any]] = None,
    party: Optional[Any] = None,
    is_update: bool = False,
    current_status: Optional[StatusLike] = None
) -> ValidationResult:
    """Run every applicable rule on an order payload.

    Rules run in a fixed order and their issues are concatenated in that order:
    order number, party, items, financials, payment, addresses, tracking
    number, status transition (updates only), notes. Rules whose input is
    absent from the payload are skipped, except financials and addresses,
    which always run.

    Args:
        order: OrderFormData or mapping (snake_case or camelCase keys)
        products: Catalog products referenced by the items, if looked up
        party: Party record referenced by party_id, if looked up
        is_update: True when updating an existing order
        current_status: Stored status of the order being updated

    Returns:
        Aggregate ValidationResult; is_valid is False only when errors exist

    Raises:
        pydantic.ValidationError: If a mapping cannot be parsed into OrderFormData
    """
    order = coerce_model(OrderFormData, order)
    party = coerce_model(Party, party)

    rule_functions: list[tuple[str, Callable[[], ValidationResult]]] = []

    if order.order_number:
        rule_functions.append(
            ("order_number", lambda: validate_order_number(order.order_number))
        )

    if order.party_id and order.party_name:
        rule_functions.append(
            ("party", lambda: validate_party(order.party_id, order.party_name, party))
        )

    if order.items is not None:
        rule_functions.append(
            ("items", lambda: validate_order_items(order.items, products))
        )

    rule_functions.append(("financials", lambda: validate_financials(order)))

    if order.payment_status and order.total is not None:
        rule_functions.append((
            "payment",
            lambda: validate_payment_status(
                order.payment_status,
                order.total,
                order.paid_amount,
                order.payment_method
            )
        ))

    rule_functions.append(("addresses", lambda: validate_addresses(order)))

    if order.tracking_number:
        rule_functions.append(
            ("tracking_number", lambda: validate_tracking_number(order.tracking_number))
        )

    if (
        is_update
        and current_status
        and order.status
        and status_value(current_status) != status_value(order.status)
    ):
        rule_functions.append((
            "status_transition",
            lambda: validate_status_transition(current_status, order.status, order)
        ))

    rule_functions.append(("notes", lambda: validate_notes(order.notes)))

    results = []
    with bind_order(order.order_number) as order_label:
        for rule_name, rule_func in rule_functions:
            result = rule_func()
            logger.debug(
                f"Validation rule '{rule_name}' found {len(result.errors)} errors, "
                f"{len(result.warnings)} warnings for order {order_label}"
            )
            results.append(result)

    return ValidationResult.merge(results)


class ValidationEngine(ValidatorPort):
    """Concrete implementation of ValidatorPort.

    Validates order payloads with the caller's reference data and computes
    the submit gate. This is the validation service used by submit and
    update handlers.
    """

    def validate(self, order: Any, context: Optional[ValidationContext] = None) -> ValidationResult:
        """Validate an order payload within a context.

        Args:
            order: OrderFormData or mapping
            context: Products, party and update information (defaults to a new order)

        Returns:
            Aggregate ValidationResult
        """
        context = context or ValidationContext()
        order = coerce_model(OrderFormData, order)

        with bind_order(order.order_number) as order_label:
            result = validate_order(
                order,
                products=context.products,
                party=context.party,
                is_update=context.is_update,
                current_status=context.current_status,
            )

            logger.info(
                f"Validation completed for order {order_label}: "
                f"{len(result.errors)} errors, {len(result.warnings)} warnings"
            )

        return result

    def compute_ready_check(self, result: ValidationResult) -> ReadyCheckResult:
        """Compute the submit gate from a validation result.

        Logic:
        - is_ready = True if there are NO errors (warnings never block)
        - blocking_reasons = codes of the blocking errors, in order
        - checked_at = current timestamp
        """
        blocking_reasons = [issue.code.value for issue in result.errors]

        ready_check = ReadyCheckResult(
            is_ready=result.is_valid,
            blocking_reasons=blocking_reasons
        )

        logger.info(
            f"Ready-check: is_ready={ready_check.is_ready}, "
            f"blocking={len(blocking_reasons)}"
        )

        return ready_check
