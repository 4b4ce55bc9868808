"""Expense repository and monthly aggregates."""

from __future__ import annotations

import logging
import uuid
from datetime import MAXYEAR, MINYEAR, date, datetime, time
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional

from dateutil.relativedelta import relativedelta

from spendbook import config
from spendbook.domain.cache import AggregateCache
from spendbook.domain.entities import (
    CategoryBreakdown,
    CategoryTotal,
    Expense,
    ExpenseWithCategory,
    MonthlySummary,
)
from spendbook.domain.errors import ValidationError, invalid_month, invalid_year
from spendbook.domain.validators import assert_expense_input

if TYPE_CHECKING:
    from spendbook.database.base import Database

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {"amount_minor", "currency", "category_id", "occurred_at", "note", "merchant", "payment_method"}
)


def month_key(year: int, month: int) -> str:
    """Cache key and display label for a calendar month, e.g. "2024-03"."""
    return f"{year:04d}-{month:02d}"


def month_window(year: int, month: int) -> tuple[datetime, datetime]:
    """Return the first and last instant of a calendar month.

    Raises:
        ValidationError: If year is outside datetime's range or month is not 1..12
    """
    if not MINYEAR <= year <= MAXYEAR:
        raise ValidationError(invalid_year(year))
    if not 1 <= month <= 12:
        raise ValidationError(invalid_month(month))
    start = datetime(year, month, 1)
    # day=31 clamps to the month's last day, so December 9999 does not overflow
    end = start + relativedelta(day=31, hour=23, minute=59, second=59, microsecond=999999)
    return start, end


def _as_start(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _as_end(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.max)


def percentage_of(total_minor: int, grand_total_minor: int) -> int:
    """Whole-number share of a total, rounding halves up. 0 when the total is 0."""
    if grand_total_minor <= 0:
        return 0
    return (total_minor * 200 + grand_total_minor) // (grand_total_minor * 2)


def filter_expenses_by_query(
    expenses: Iterable[ExpenseWithCategory], query: str
) -> list[ExpenseWithCategory]:
    """Keep expenses whose category name, merchant or note contains ``query``.

    Matching ignores case. A blank query keeps everything.
    """
    needle = query.strip().lower()
    if not needle:
        return list(expenses)

    return [
        expense
        for expense in expenses
        if needle in (expense.category_name or "").lower()
        or needle in (expense.merchant or "").lower()
        or needle in (expense.note or "").lower()
    ]


class ExpenseRepository:
    """Record, edit and soft-delete expenses, and compute monthly aggregates.

    Monthly summaries and category breakdowns are memoized per "YYYY-MM" in
    two caches owned by this repository. Any write clears both caches
    entirely, whichever month it touched.
    """

    def __init__(
        self,
        db: Database,
        summary_cache: Optional[AggregateCache[MonthlySummary]] = None,
        breakdown_cache: Optional[AggregateCache[tuple[CategoryTotal, ...]]] = None,
        default_currency: Optional[str] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize expense repository.

        Args:
            db: Database instance
            summary_cache: Cache for monthly summaries (a fresh one by default)
            breakdown_cache: Cache for category breakdowns (a fresh one by default)
            default_currency: Currency for expenses created without one;
                falls back to the configured default
            clock: Source of "now" for created/updated/deleted stamps
        """
        self.db = db
        self.summary_cache = summary_cache if summary_cache is not None else AggregateCache("summary")
        self.breakdown_cache = (
            breakdown_cache if breakdown_cache is not None else AggregateCache("breakdown")
        )
        self.default_currency = (default_currency or config.DEFAULT_CURRENCY).upper()
        self.clock = clock

    def invalidate_aggregates(self) -> None:
        """Drop every cached summary and breakdown."""
        self.summary_cache.clear()
        self.breakdown_cache.clear()

    def create(
        self,
        *,
        amount_minor: Optional[int] = None,
        category_id: Optional[str] = None,
        occurred_at: Optional[datetime] = None,
        currency: Optional[str] = None,
        note: Optional[str] = None,
        merchant: Optional[str] = None,
        payment_method: Optional[str] = None,
    ) -> Expense:
        """Record an expense.

        Args:
            amount_minor: Positive amount in minor currency units (e.g. cents)
            category_id: Id of the category the expense belongs to
            occurred_at: When the expense happened; a date means midnight
            currency: Currency code; the repository default when omitted
            note: Optional free text
            merchant: Optional free text
            payment_method: Optional free text

        Returns:
            The created Expense

        Raises:
            ValidationError: If amount, category or date is missing or invalid.
                Nothing is written in that case.
        """
        assert_expense_input(
            {"amount_minor": amount_minor, "category_id": category_id, "occurred_at": occurred_at},
            require_all=True,
        )

        with self.db.transaction():
            expense = self.db.create_expense(
                expense_id=str(uuid.uuid4()),
                amount_minor=amount_minor,
                currency=self._currency(currency),
                category_id=category_id,
                occurred_at=_as_start(occurred_at),
                created_at=self.clock(),
                note=note,
                merchant=merchant,
                payment_method=payment_method,
            )
        self.invalidate_aggregates()

        logger.info(f"Created expense {expense.id} ({expense.amount_minor} {expense.currency})")
        return expense

    def update(self, expense_id: str, **changes: Any) -> None:
        """Partially update an expense. Only supplied fields are validated and written.

        Raises:
            TypeError: If a field is not updatable
            ValidationError: If a supplied amount, category or date is invalid
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise TypeError(f"Cannot update expense field(s): {', '.join(sorted(unknown))}")

        assert_expense_input(changes, require_all=False)

        fields = dict(changes)
        if "occurred_at" in fields:
            fields["occurred_at"] = _as_start(fields["occurred_at"])
        if "currency" in fields:
            fields["currency"] = self._currency(fields["currency"])
        fields["updated_at"] = self.clock()

        with self.db.transaction():
            self._write(expense_id, fields)
        self.invalidate_aggregates()

    def soft_delete(self, expense_id: str) -> None:
        """Hide an expense from listings and aggregates. The row is kept."""
        now = self.clock()
        with self.db.transaction():
            self._write(expense_id, {"deleted_at": now, "updated_at": now})
        self.invalidate_aggregates()

    def restore(self, expense_id: str) -> None:
        """Undo soft_delete."""
        with self.db.transaction():
            self._write(expense_id, {"deleted_at": None, "updated_at": self.clock()})
        self.invalidate_aggregates()

    def get_by_id(self, expense_id: str) -> Optional[ExpenseWithCategory]:
        """Get an expense with its category fields, or None if missing or deleted."""
        return self.db.get_expense(expense_id)

    def list_by_date_range(
        self, start_date: date, end_date: date, category_id: Optional[str] = None
    ) -> list[ExpenseWithCategory]:
        """List non-deleted expenses that occurred within [start_date, end_date].

        Plain dates cover whole days: the start from midnight, the end through
        its last microsecond. Results are newest first.
        """
        return self.db.list_expenses(
            _as_start(start_date), _as_end(end_date), category_id=category_id or None
        )

    def get_monthly_summary(self, year: int, month: int) -> MonthlySummary:
        """Total and count of non-deleted expenses in a calendar month."""
        start, end = month_window(year, month)
        key = month_key(year, month)

        def compute() -> MonthlySummary:
            total_minor, count = self.db.get_expense_totals(start, end)
            logger.debug(f"Computed monthly summary for {key}: {total_minor} over {count}")
            return MonthlySummary(total_minor=total_minor, count=count, month=key)

        return self.summary_cache.get_or_compute(key, compute)

    def get_category_breakdown(self, year: int, month: int) -> list[CategoryBreakdown]:
        """Per-category totals for a calendar month, largest first.

        Percentages are rounded per category, so they need not add up to 100.
        Only the totals are cached; category names and colour tokens are read
        on every call so renames show up immediately.
        """
        start, end = month_window(year, month)
        key = month_key(year, month)

        def compute() -> tuple[CategoryTotal, ...]:
            rows = self.db.get_category_totals(start, end)
            grand_total = sum(row["total_minor"] for row in rows)
            logger.debug(f"Computed category breakdown for {key}: {len(rows)} categories")
            return tuple(
                CategoryTotal(
                    category_id=row["category_id"],
                    total_minor=row["total_minor"],
                    count=row["count"],
                    percentage=percentage_of(row["total_minor"], grand_total),
                )
                for row in rows
            )

        totals = self.breakdown_cache.get_or_compute(key, compute)
        if not totals:
            return []

        categories = {
            cat.id: cat
            for cat in self.db.list_categories(include_archived=True, include_deleted=True)
        }
        breakdown = []
        for item in totals:
            category = categories.get(item.category_id)
            breakdown.append(
                CategoryBreakdown(
                    category_id=item.category_id,
                    category_name=category.name if category else None,
                    category_color_token=category.color_token if category else None,
                    total_minor=item.total_minor,
                    count=item.count,
                    percentage=item.percentage,
                )
            )
        return breakdown

    def _currency(self, currency: Optional[str]) -> str:
        if currency is None or not currency.strip():
            return self.default_currency
        return currency.strip().upper()

    def _write(self, expense_id: str, fields: dict[str, Any]) -> None:
        if self.db.update_expense(expense_id, fields):
            logger.info(f"Updated expense {expense_id}: {', '.join(sorted(fields))}")
        else:
            logger.warning(f"Expense {expense_id} not found, nothing updated")
