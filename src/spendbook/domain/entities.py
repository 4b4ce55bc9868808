"""Domain model entities for spendbook.

These are pure data classes representing business concepts, independent of
the database schema. The storage engine can change without touching the
repositories that produce and consume them.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Category:
    """Expense category domain entity."""

    id: str
    name: str
    icon: Optional[str]
    color_token: Optional[str]
    sort_order: int
    is_archived: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime]

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


@dataclass(frozen=True)
class Expense:
    """Expense domain entity. Amounts are integer minor units."""

    id: str
    amount_minor: int
    currency: str
    category_id: str
    occurred_at: datetime
    note: Optional[str]
    merchant: Optional[str]
    payment_method: Optional[str]
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime]

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


@dataclass(frozen=True)
class ExpenseWithCategory(Expense):
    """Expense joined with the display fields of its category.

    The category fields are None when the referenced category row is missing.
    """

    category_name: Optional[str]
    category_icon: Optional[str]
    category_color_token: Optional[str]


@dataclass(frozen=True)
class MonthlySummary:
    """Total spend and expense count for one calendar month."""

    total_minor: int
    count: int
    month: str  # "YYYY-MM"


@dataclass(frozen=True)
class CategoryBreakdown:
    """Per-category share of a month's spend."""

    category_id: str
    category_name: Optional[str]
    category_color_token: Optional[str]
    total_minor: int
    count: int
    percentage: int


@dataclass(frozen=True)
class CategoryTotal:
    """Cached per-category numbers of a month, without display fields."""

    category_id: str
    total_minor: int
    count: int
    percentage: int
