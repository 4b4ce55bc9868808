"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the storage schema can change
without the repositories noticing.
"""

from typing import Optional

from spendbook.domain import entities as domain
from spendbook.database.models import (
    Category as ORMCategory,
    Expense as ORMExpense,
)


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        icon=orm_category.icon,
        color_token=orm_category.color_token,
        sort_order=orm_category.sort_order,
        is_archived=bool(orm_category.is_archived),
        created_at=orm_category.created_at,
        updated_at=orm_category.updated_at,
        deleted_at=orm_category.deleted_at,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        amount_minor=orm_expense.amount_minor,
        currency=orm_expense.currency,
        category_id=orm_expense.category_id,
        occurred_at=orm_expense.occurred_at,
        note=orm_expense.note,
        merchant=orm_expense.merchant,
        payment_method=orm_expense.payment_method,
        created_at=orm_expense.created_at,
        updated_at=orm_expense.updated_at,
        deleted_at=orm_expense.deleted_at,
    )


def expense_with_category_to_domain(
    orm_expense: ORMExpense, orm_category: Optional[ORMCategory]
) -> domain.ExpenseWithCategory:
    """Convert an expense row and its (outer-joined) category row to a domain entity."""
    return domain.ExpenseWithCategory(
        id=orm_expense.id,
        amount_minor=orm_expense.amount_minor,
        currency=orm_expense.currency,
        category_id=orm_expense.category_id,
        occurred_at=orm_expense.occurred_at,
        note=orm_expense.note,
        merchant=orm_expense.merchant,
        payment_method=orm_expense.payment_method,
        created_at=orm_expense.created_at,
        updated_at=orm_expense.updated_at,
        deleted_at=orm_expense.deleted_at,
        category_name=orm_category.name if orm_category is not None else None,
        category_icon=orm_category.icon if orm_category is not None else None,
        category_color_token=orm_category.color_token if orm_category is not None else None,
    )
