"""Domain layer for spendbook."""

from spendbook.domain.category import CategoryRepository
from spendbook.domain.expense import ExpenseRepository, filter_expenses_by_query
from spendbook.domain.cache import AggregateCache, NullAggregateCache

__all__ = [
    "CategoryRepository",
    "ExpenseRepository",
    "AggregateCache",
    "NullAggregateCache",
    "filter_expenses_by_query",
]
