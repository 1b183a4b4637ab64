"""Unit tests for address rules"""

from order_validation.domain.validation import ValidationIssueCode, validate_addresses


class TestAddresses:
    """Test shipping and billing address validation"""

    def test_no_addresses_no_shipping(self):
        result = validate_addresses({"shipping": 0})

        assert result.is_valid
        assert result.warnings == ()

    def test_shipping_charge_requires_address(self):
        result = validate_addresses({"shipping": 10})

        assert result.error_codes == [ValidationIssueCode.REQUIRED]
        assert result.errors[0].field == "shippingAddress"

    def test_complete_addresses(self):
        result = validate_addresses({
            "shippingAddress": "1 Main St, Springfield, IL 62701",
            "billingAddress": "PO Box 9, Springfield, IL 62702",
        })

        assert result.is_valid
        assert result.warnings == ()

    def test_incomplete_addresses_warn(self):
        result = validate_addresses({
            "shippingAddress": "1 Main St",
            "billingAddress": "PO Box 9",
        })

        assert result.is_valid
        assert result.warning_codes == [
            ValidationIssueCode.INCOMPLETE_ADDRESS,
            ValidationIssueCode.INCOMPLETE_ADDRESS,
        ]
        assert [w.field for w in result.warnings] == ["shippingAddress", "billingAddress"]

    def test_addresses_too_long(self):
        long_address = "a," * 251

        result = validate_addresses({"shippingAddress": long_address, "billingAddress": long_address + "b"})

        assert result.error_codes == [ValidationIssueCode.MAX_LENGTH, ValidationIssueCode.MAX_LENGTH]

    def test_identical_addresses_warn(self):
        address = "1 Main St, Springfield"

        result = validate_addresses({"shippingAddress": address, "billingAddress": address})

        assert result.is_valid
        assert result.warning_codes == [ValidationIssueCode.DUPLICATE_ADDRESS]

    def test_billing_address_is_never_required(self):
        assert validate_addresses({"shippingAddress": "1 Main St, Springfield", "shipping": 5}).is_valid
