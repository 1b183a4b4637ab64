"""Helpers for presenting validation issues"""

from typing import Iterable

from .models import ValidationIssue


def format_validation_errors(errors: Iterable[ValidationIssue]) -> list[str]:
    """Return the message of each issue, in order"""
    return [error.message for error in errors]


def group_validation_errors_by_field(errors: Iterable[ValidationIssue]) -> dict[str, list[ValidationIssue]]:
    """Group issues by field, keeping their relative order within each field.

    Example:
        >>> grouped = group_validation_errors_by_field(result.errors)
        >>> [e.code for e in grouped["total"]]
        [<ValidationIssueCode.TOTAL_CALCULATION_ERROR: 'TOTAL_CALCULATION_ERROR'>]
    """
    groups: dict[str, list[ValidationIssue]] = {}
    for error in errors:
        groups.setdefault(error.field, []).append(error)
    return groups
