"""ValidatorPort interface"""

from abc import ABC, abstractmethod
from typing import Any

from .models import ValidationResult, ReadyCheckResult, ValidationContext


class ValidatorPort(ABC):
    """Port interface for order validation services.

    Defines the contract for validation engines so callers (form submit and
    update handlers) do not depend on a concrete implementation.
    """

    @abstractmethod
    def validate(self, order: Any, context: ValidationContext) -> ValidationResult:
        """Validate an order payload.

        Args:
            order: OrderFormData or mapping to validate
            context: Reference data and update information

        Returns:
            Aggregate ValidationResult
        """
        pass

    @abstractmethod
    def compute_ready_check(self, result: ValidationResult) -> ReadyCheckResult:
        """Compute the submit gate from a validation result.

        Args:
            result: Result returned by validate()

        Returns:
            ReadyCheckResult indicating if the order can be submitted
        """
        pass
