"""Unit tests for status transition validation (table + entry requirements)"""

import pytest

from order_validation.domain.orders import OrderStatus
from order_validation.domain.validation import ValidationIssueCode, validate_status_transition


class TestTransitionLegality:
    """Test table membership"""

    def test_completed_cannot_be_shipped(self):
        result = validate_status_transition("completed", "shipped", {})

        assert not result.is_valid
        assert result.error_codes == [ValidationIssueCode.INVALID_STATUS_TRANSITION]
        assert result.errors[0].field == "status"
        assert "Allowed transitions: none" in result.errors[0].message

    def test_message_lists_allowed_statuses(self):
        result = validate_status_transition(OrderStatus.PENDING, OrderStatus.SHIPPED)

        assert "Allowed transitions: processing, cancelled" in result.errors[0].message

    def test_pending_to_processing(self):
        result = validate_status_transition("pending", "processing", {})

        assert result.is_valid
        assert result.errors == ()
        assert result.warnings == ()

    @pytest.mark.parametrize("status", list(OrderStatus))
    def test_same_status_is_always_valid(self, status):
        result = validate_status_transition(status, status)

        assert result.is_valid
        assert result.errors == ()
        assert result.warnings == ()

    def test_display_only_destination_is_rejected(self):
        result = validate_status_transition(OrderStatus.PROCESSING, OrderStatus.PACKED)

        assert result.error_codes == [ValidationIssueCode.INVALID_STATUS_TRANSITION]

    def test_display_only_origin_is_rejected(self):
        result = validate_status_transition(OrderStatus.DRAFT, OrderStatus.PENDING)

        assert result.error_codes == [ValidationIssueCode.INVALID_STATUS_TRANSITION]


class TestEntryRequirements:
    """Test destination preconditions"""

    def test_processing_with_pending_payment_and_no_method_warns(self):
        result = validate_status_transition("pending", "processing", {"paymentStatus": "pending"})

        assert result.is_valid
        assert result.warning_codes == [ValidationIssueCode.MISSING_PAYMENT_METHOD]

    def test_processing_with_method_does_not_warn(self):
        result = validate_status_transition(
            "pending", "processing", {"paymentStatus": "pending", "paymentMethod": "cash"}
        )

        assert result.warnings == ()

    def test_shipped_requires_tracking_and_address(self):
        result = validate_status_transition("processing", "shipped", {})

        assert not result.is_valid
        assert result.error_codes == [
            ValidationIssueCode.TRACKING_NUMBER_REQUIRED,
            ValidationIssueCode.SHIPPING_ADDRESS_REQUIRED,
        ]

    def test_shipped_with_tracking_and_address(self):
        result = validate_status_transition("processing", "shipped", {
            "trackingNumber": "1Z999",
            "shippingAddress": "1 Main St, Springfield",
        })

        assert result.is_valid

    @pytest.mark.parametrize("payment_status, warned", [
        (None, True),
        ("pending", True),
        ("partial", False),
        ("paid", False),
    ])
    def test_delivered_payment_warning(self, payment_status, warned):
        result = validate_status_transition("shipped", "delivered", {"paymentStatus": payment_status})

        assert result.is_valid
        assert (result.warning_codes == [ValidationIssueCode.PAYMENT_INCOMPLETE]) is warned

    def test_completed_requires_payment(self):
        result = validate_status_transition("delivered", "completed", {"paymentStatus": "partial"})

        assert result.error_codes == [ValidationIssueCode.PAYMENT_REQUIRED]

    def test_completed_when_paid(self):
        assert validate_status_transition("delivered", "completed", {"paymentStatus": "paid"}).is_valid

    def test_delivered_order_can_be_returned(self):
        assert validate_status_transition("delivered", "returned").is_valid

    def test_shipped_order_cannot_be_returned(self):
        # Table-legal, rejected by the RETURNED entry requirement
        result = validate_status_transition("shipped", "returned")

        assert result.error_codes == [ValidationIssueCode.INVALID_RETURN]

    def test_returned_order_can_be_reprocessed(self):
        assert validate_status_transition("returned", "processing").is_valid

    def test_cancellation_has_no_requirements(self):
        assert validate_status_transition("processing", "cancelled").is_valid

    def test_idempotent(self):
        first = validate_status_transition("processing", "shipped", {})
        second = validate_status_transition("processing", "shipped", {})

        assert first == second
