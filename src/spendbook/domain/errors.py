"""Shared domain error messages and error types."""

from typing import Mapping, Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    ``errors`` holds every field message that was found, keyed by field
    (``amount``, ``category``, ``date`` or ``name``).
    """

    def __init__(self, message: str, errors: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.errors = dict(errors or {})


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


AMOUNT_NOT_POSITIVE = "Amount must be greater than zero."
AMOUNT_NOT_INTEGER = "Amount must be an integer minor unit."
CATEGORY_REQUIRED = "Category is required."
DATE_REQUIRED = "Date is required."
DATE_INVALID = "Date must be a valid date."
CATEGORY_NAME_REQUIRED = "Category name is required."
CATEGORY_NAME_NOT_UNIQUE = "Category name must be unique."


def category_not_found(category_id: str) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def expense_not_found(expense_id: str) -> str:
    """Return message for missing expense by ID."""
    return f"Expense {expense_id} not found"


def duplicate_reorder_ids(ids: list[str]) -> str:
    """Return message when a reorder request repeats an id."""
    return f"Category ids must not repeat: {', '.join(ids)}"


def invalid_year(year: int) -> str:
    """Return message for a year datetime cannot represent."""
    return f"Year must be between 1 and 9999, got {year}"


def invalid_month(month: int) -> str:
    """Return message for a month outside 1..12."""
    return f"Month must be between 1 and 12, got {month}"
