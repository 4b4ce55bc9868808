"""Utility functions for spendbook."""

from spendbook.utils.date_parser import parse_date, parse_month
from spendbook.utils.amount_parser import parse_amount_to_minor
from spendbook.utils.formatters import format_amount_minor, format_currency
from spendbook.utils.category_resolver import resolve_category

__all__ = [
    "parse_date",
    "parse_month",
    "parse_amount_to_minor",
    "format_amount_minor",
    "format_currency",
    "resolve_category",
]
