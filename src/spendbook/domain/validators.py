"""Input validators for expenses and categories.

Pure functions with no side effects. Repositories call them before every
write; callers may also use them to pre-check form input.
"""

from datetime import date
from typing import Any, Iterable, Mapping, Optional

from spendbook.domain.errors import (
    AMOUNT_NOT_INTEGER,
    AMOUNT_NOT_POSITIVE,
    CATEGORY_NAME_REQUIRED,
    CATEGORY_REQUIRED,
    DATE_INVALID,
    DATE_REQUIRED,
    ValidationError,
)

# Order in which assert_expense_input picks the message to raise
EXPENSE_ERROR_ORDER = ("amount", "category", "date")


def _amount_error(amount_minor: Any) -> Optional[str]:
    if amount_minor is None:
        return AMOUNT_NOT_POSITIVE
    if isinstance(amount_minor, bool) or not isinstance(amount_minor, (int, float)):
        # Decimal, str and friends never count as minor units
        try:
            if amount_minor <= 0:
                return AMOUNT_NOT_POSITIVE
        except TypeError:
            pass
        return AMOUNT_NOT_INTEGER
    if amount_minor <= 0:
        return AMOUNT_NOT_POSITIVE
    if not isinstance(amount_minor, int):
        return AMOUNT_NOT_INTEGER
    return None


def _category_error(category_id: Any) -> Optional[str]:
    if not isinstance(category_id, str) or not category_id.strip():
        return CATEGORY_REQUIRED
    return None


def _date_error(occurred_at: Any) -> Optional[str]:
    if occurred_at is None:
        return DATE_REQUIRED
    if not isinstance(occurred_at, date):
        return DATE_INVALID
    return None


def validate_expense_input(
    data: Mapping[str, Any], require_all: bool = True
) -> dict[str, str]:
    """Validate the amount, category and date of a candidate expense.

    Args:
        data: Mapping with optional keys ``amount_minor``, ``category_id`` and
            ``occurred_at``. An absent key is treated as "not supplied"; a key
            present with None is supplied-but-empty.
        require_all: When True every field is checked and absence is an error.
            When False only keys present in ``data`` are checked (partial update).

    Returns:
        Mapping of ``amount``/``category``/``date`` to a message. Empty when valid.
    """
    errors: dict[str, str] = {}

    if require_all or "amount_minor" in data:
        message = _amount_error(data.get("amount_minor"))
        if message:
            errors["amount"] = message

    if require_all or "category_id" in data:
        message = _category_error(data.get("category_id"))
        if message:
            errors["category"] = message

    if require_all or "occurred_at" in data:
        message = _date_error(data.get("occurred_at"))
        if message:
            errors["date"] = message

    return errors


def assert_expense_input(data: Mapping[str, Any], require_all: bool = True) -> None:
    """Raise ValidationError with the first failing message (amount, category, date)."""
    errors = validate_expense_input(data, require_all=require_all)
    for field in EXPENSE_ERROR_ORDER:
        if errors.get(field):
            raise ValidationError(errors[field], errors)


def normalize_category_name(name: str) -> str:
    """Normalize a category name for comparison only. Never stored."""
    return name.strip().lower()


def validate_category_name(name: Any) -> Optional[str]:
    """Return an error message for an empty name, or None when it is usable."""
    if not isinstance(name, str) or not name.strip():
        return CATEGORY_NAME_REQUIRED
    return None


def validate_category_input(name: Any) -> dict[str, str]:
    """Validate category form input. Empty mapping means valid."""
    error = validate_category_name(name)
    return {"name": error} if error else {}


def is_category_name_unique(name: str, existing_names: Iterable[str]) -> bool:
    """Check ``name`` against ``existing_names`` ignoring case and surrounding space."""
    normalized = normalize_category_name(name)
    return not any(normalize_category_name(existing) == normalized for existing in existing_names)
