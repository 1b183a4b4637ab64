"""Unit tests for payment status rules"""

from decimal import Decimal

import pytest

from order_validation.domain.orders import PaymentStatus
from order_validation.domain.validation import ValidationIssueCode, validate_payment_status


class TestPaymentMethod:
    """Test payment method checks"""

    @pytest.mark.parametrize("method", ["cash", "credit_card", "bank_transfer", "upi", "check", "other"])
    def test_allowed_methods(self, method):
        result = validate_payment_status(PaymentStatus.PENDING, 100, payment_method=method)

        assert result.is_valid

    def test_unknown_method(self):
        result = validate_payment_status(PaymentStatus.PENDING, 100, payment_method="barter")

        assert result.error_codes == [ValidationIssueCode.INVALID_PAYMENT_METHOD]
        assert "credit_card" in result.errors[0].message

    @pytest.mark.parametrize("status", [PaymentStatus.PAID, PaymentStatus.PARTIAL])
    def test_method_required_when_money_received(self, status):
        result = validate_payment_status(status, 100)

        assert ValidationIssueCode.PAYMENT_METHOD_REQUIRED in result.error_codes

    def test_pending_without_method_is_valid(self):
        assert validate_payment_status(PaymentStatus.PENDING, 100).is_valid


class TestPaidAmount:
    """Test paid amount consistency"""

    def test_negative_paid_amount(self):
        result = validate_payment_status(PaymentStatus.REFUNDED, 100, paid_amount=-1)

        assert result.error_codes == [ValidationIssueCode.INVALID_PAID_AMOUNT]

    def test_paid_in_full(self):
        result = validate_payment_status("paid", Decimal("100"), Decimal("100.005"), "cash")

        assert result.is_valid
        assert result.warnings == ()

    def test_paid_amount_mismatch(self):
        result = validate_payment_status(PaymentStatus.PAID, 100, 80, "cash")

        assert result.error_codes == [ValidationIssueCode.PAYMENT_STATUS_MISMATCH]

    @pytest.mark.parametrize("paid", [0, 100, 120])
    def test_partial_outside_range(self, paid):
        result = validate_payment_status(PaymentStatus.PARTIAL, 100, paid, "upi")

        assert ValidationIssueCode.PARTIAL_PAYMENT_MISMATCH in result.error_codes

    def test_partial_in_range(self):
        assert validate_payment_status(PaymentStatus.PARTIAL, 100, 40, "upi").is_valid

    def test_pending_with_payment_warning(self):
        result = validate_payment_status(PaymentStatus.PENDING, 100, 10)

        assert result.is_valid
        assert result.warning_codes == [ValidationIssueCode.PENDING_WITH_PAYMENT]

    def test_excessive_refund(self):
        result = validate_payment_status(PaymentStatus.REFUNDED, 100, 150)

        assert result.error_codes == [ValidationIssueCode.EXCESSIVE_REFUND]

    @pytest.mark.parametrize("status", [PaymentStatus.PAID, PaymentStatus.PARTIAL])
    def test_missing_paid_amount_warning(self, status):
        result = validate_payment_status(status, 100, payment_method="cash")

        assert result.is_valid
        assert result.warning_codes == [ValidationIssueCode.MISSING_PAID_AMOUNT]

    def test_unknown_payment_status_raises(self):
        with pytest.raises(ValueError):
            validate_payment_status("bogus", 100)
