"""Validation models and enums"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Optional, Sequence

from ..orders.schemas import Party, Product
from ..orders.status import OrderStatus


class ValidationIssueSeverity(str, Enum):
    """Validation issue severity levels.

    ERROR blocks submission, WARNING is advisory only.
    """
    WARNING = "WARNING"
    ERROR = "ERROR"


class ValidationIssueCode(str, Enum):
    """Stable machine-readable issue codes"""
    # Generic field issues
    REQUIRED = "REQUIRED"
    MIN_LENGTH = "MIN_LENGTH"
    MAX_LENGTH = "MAX_LENGTH"
    INVALID_FORMAT = "INVALID_FORMAT"

    # Party issues
    INACTIVE_CUSTOMER = "INACTIVE_CUSTOMER"
    HIGH_OUTSTANDING_BALANCE = "HIGH_OUTSTANDING_BALANCE"
    APPROACHING_CREDIT_LIMIT = "APPROACHING_CREDIT_LIMIT"

    # Line issues
    INVALID_QUANTITY = "INVALID_QUANTITY"
    MAX_QUANTITY = "MAX_QUANTITY"
    INVALID_QUANTITY_FORMAT = "INVALID_QUANTITY_FORMAT"
    INVALID_PRICE = "INVALID_PRICE"
    INVALID_TOTAL = "INVALID_TOTAL"
    TOTAL_MISMATCH = "TOTAL_MISMATCH"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    LOW_STOCK = "LOW_STOCK"
    INACTIVE_PRODUCT = "INACTIVE_PRODUCT"
    PRICE_MISMATCH = "PRICE_MISMATCH"
    MAX_ITEMS = "MAX_ITEMS"
    DUPLICATE_PRODUCTS = "DUPLICATE_PRODUCTS"

    # Financial issues
    INVALID_SUBTOTAL = "INVALID_SUBTOTAL"
    SUBTOTAL_MISMATCH = "SUBTOTAL_MISMATCH"
    INVALID_DISCOUNT = "INVALID_DISCOUNT"
    EXCESSIVE_DISCOUNT = "EXCESSIVE_DISCOUNT"
    INVALID_TAX = "INVALID_TAX"
    INVALID_SHIPPING = "INVALID_SHIPPING"
    TOTAL_CALCULATION_ERROR = "TOTAL_CALCULATION_ERROR"
    LARGE_DISCOUNT = "LARGE_DISCOUNT"
    HIGH_TAX = "HIGH_TAX"
    HIGH_SHIPPING = "HIGH_SHIPPING"

    # Payment issues
    INVALID_PAYMENT_METHOD = "INVALID_PAYMENT_METHOD"
    PAYMENT_METHOD_REQUIRED = "PAYMENT_METHOD_REQUIRED"
    INVALID_PAID_AMOUNT = "INVALID_PAID_AMOUNT"
    PAYMENT_STATUS_MISMATCH = "PAYMENT_STATUS_MISMATCH"
    PARTIAL_PAYMENT_MISMATCH = "PARTIAL_PAYMENT_MISMATCH"
    PENDING_WITH_PAYMENT = "PENDING_WITH_PAYMENT"
    EXCESSIVE_REFUND = "EXCESSIVE_REFUND"
    MISSING_PAID_AMOUNT = "MISSING_PAID_AMOUNT"

    # Address issues
    INCOMPLETE_ADDRESS = "INCOMPLETE_ADDRESS"
    DUPLICATE_ADDRESS = "DUPLICATE_ADDRESS"

    # Status transition issues
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"
    MISSING_PAYMENT_METHOD = "MISSING_PAYMENT_METHOD"
    TRACKING_NUMBER_REQUIRED = "TRACKING_NUMBER_REQUIRED"
    SHIPPING_ADDRESS_REQUIRED = "SHIPPING_ADDRESS_REQUIRED"
    PAYMENT_INCOMPLETE = "PAYMENT_INCOMPLETE"
    PAYMENT_REQUIRED = "PAYMENT_REQUIRED"
    INVALID_RETURN = "INVALID_RETURN"


@dataclass(frozen=True)
class ValidationIssue:
    """Represents a single validation rule violation.

    ``field`` is a dot path into the order payload, e.g. ``items[2].quantity``.
    """
    field: str
    message: str
    code: ValidationIssueCode
    severity: ValidationIssueSeverity = ValidationIssueSeverity.ERROR

    @classmethod
    def error(cls, field: str, message: str, code: ValidationIssueCode) -> "ValidationIssue":
        return cls(field=field, message=message, code=code, severity=ValidationIssueSeverity.ERROR)

    @classmethod
    def warning(cls, field: str, message: str, code: ValidationIssueCode) -> "ValidationIssue":
        return cls(field=field, message=message, code=code, severity=ValidationIssueSeverity.WARNING)

    def for_item(self, index: int) -> "ValidationIssue":
        """Re-home an item-level issue under ``items[index]``"""
        return replace(
            self,
            field=f"items[{index}].{self.field}",
            message=f"Item {index + 1}: {self.message}",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "message": self.message,
            "code": self.code.value,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validator run.

    Warnings never affect ``is_valid``.
    """
    errors: tuple[ValidationIssue, ...] = ()
    warnings: tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @classmethod
    def of(
        cls,
        errors: Iterable[ValidationIssue] = (),
        warnings: Iterable[ValidationIssue] = ()
    ) -> "ValidationResult":
        return cls(errors=tuple(errors), warnings=tuple(warnings))

    @classmethod
    def merge(cls, results: Iterable["ValidationResult"]) -> "ValidationResult":
        """Concatenate errors and warnings of several results, in order"""
        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []
        for result in results:
            errors.extend(result.errors)
            warnings.extend(result.warnings)
        return cls(errors=tuple(errors), warnings=tuple(warnings))

    @property
    def error_codes(self) -> list[ValidationIssueCode]:
        return [issue.code for issue in self.errors]

    @property
    def warning_codes(self) -> list[ValidationIssueCode]:
        return [issue.code for issue in self.warnings]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the dictionary shape the web client consumes"""
        return {
            "isValid": self.is_valid,
            "errors": [issue.to_dict() for issue in self.errors],
            "warnings": [issue.to_dict() for issue in self.warnings],
        }


@dataclass
class ReadyCheckResult:
    """Result of the submit gate computation.

    Determines if an order payload can be submitted or an update applied.
    """
    is_ready: bool
    blocking_reasons: list[str] = field(default_factory=list)
    checked_at: str = field(default_factory=lambda: datetime.utcnow().isoformat())

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_ready": self.is_ready,
            "blocking_reasons": self.blocking_reasons,
            "checked_at": self.checked_at
        }


@dataclass
class ValidationContext:
    """Context object passed to the validation engine.

    Contains the reference data looked up by the caller and whether the
    payload is an update of an existing order.
    """
    products: Optional[Sequence[Product]] = None
    party: Optional[Party] = None
    is_update: bool = False
    current_status: Optional[OrderStatus] = None
