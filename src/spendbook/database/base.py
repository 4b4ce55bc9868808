"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime
from typing import Any, Mapping, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from spendbook.domain.entities import Category, Expense, ExpenseWithCategory


class Database(ABC):
    """Abstract database interface for spendbook.

    Every method runs inside ``transaction()``. Calls made while a
    transaction is already open join it, so a repository can group several
    calls into one atomic unit.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager[Any]:
        """Open a transaction, or join the one already open.

        The outermost transaction commits on normal exit and rolls back when
        an exception escapes; the exception is re-raised unchanged.
        """
        pass

    # Category operations
    @abstractmethod
    def create_category(
        self,
        category_id: str,
        name: str,
        created_at: datetime,
        icon: Optional[str] = None,
        color_token: Optional[str] = None,
        sort_order: int = 0,
        is_archived: bool = False,
    ) -> Category:
        """Insert a category and return it."""
        pass

    @abstractmethod
    def get_category(self, category_id: str, include_deleted: bool = False) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def list_categories(
        self, include_archived: bool = True, include_deleted: bool = False
    ) -> list[Category]:
        """List categories ordered by sort_order, then name."""
        pass

    @abstractmethod
    def count_categories(self) -> int:
        """Count every category row, soft-deleted ones included."""
        pass

    @abstractmethod
    def get_max_category_sort_order(self) -> Optional[int]:
        """Highest sort_order among non-deleted categories, or None if there are none."""
        pass

    @abstractmethod
    def update_category(self, category_id: str, fields: Mapping[str, Any]) -> bool:
        """Set the given columns on a category. Returns False if no row matched."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self,
        expense_id: str,
        amount_minor: int,
        currency: str,
        category_id: str,
        occurred_at: datetime,
        created_at: datetime,
        note: Optional[str] = None,
        merchant: Optional[str] = None,
        payment_method: Optional[str] = None,
    ) -> Expense:
        """Insert an expense and return it."""
        pass

    @abstractmethod
    def get_expense(
        self, expense_id: str, include_deleted: bool = False
    ) -> Optional[ExpenseWithCategory]:
        """Get expense by ID joined with its category's display fields."""
        pass

    @abstractmethod
    def update_expense(self, expense_id: str, fields: Mapping[str, Any]) -> bool:
        """Set the given columns on an expense. Returns False if no row matched."""
        pass

    @abstractmethod
    def list_expenses(
        self,
        start: datetime,
        end: datetime,
        category_id: Optional[str] = None,
    ) -> list[ExpenseWithCategory]:
        """List non-deleted expenses with start <= occurred_at <= end, newest first."""
        pass

    @abstractmethod
    def get_expense_totals(self, start: datetime, end: datetime) -> tuple[int, int]:
        """Return (total_minor, count) of non-deleted expenses in the window."""
        pass

    @abstractmethod
    def get_category_totals(self, start: datetime, end: datetime) -> list[dict[str, Any]]:
        """Get non-deleted expense totals grouped by category.

        Returns a list of dictionaries (category_id, total_minor, count)
        ordered by total_minor descending, then category_id. Kept as dicts
        since these are aggregation results.
        """
        pass
