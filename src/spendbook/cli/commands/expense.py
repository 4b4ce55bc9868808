"""Expense commands."""

from datetime import date

import click

from spendbook.cli.error_handling import handle_domain_error
from spendbook.domain.category import CategoryRepository
from spendbook.domain.entities import ExpenseWithCategory
from spendbook.domain.errors import DomainError, expense_not_found
from spendbook.domain.expense import ExpenseRepository, filter_expenses_by_query
from spendbook.utils.amount_parser import parse_amount_to_minor
from spendbook.utils.category_resolver import resolve_category
from spendbook.utils.date_parser import parse_date
from spendbook.utils.formatters import format_currency


def print_expense(expense: ExpenseWithCategory) -> None:
    """Print one expense in detail."""
    click.echo(f"Expense ID: {expense.id}")
    click.echo(f"  Date: {expense.occurred_at:%Y-%m-%d %H:%M}")
    click.echo(f"  Amount: {format_currency(expense.amount_minor, expense.currency)}")
    click.echo(f"  Category: {expense.category_name or 'Uncategorized'}")
    if expense.merchant:
        click.echo(f"  Merchant: {expense.merchant}")
    if expense.payment_method:
        click.echo(f"  Payment method: {expense.payment_method}")
    if expense.note:
        click.echo(f"  Note: {expense.note}")


@click.group()
def expense_group():
    """Record and browse expenses."""
    pass


@expense_group.command("add")
@click.option("--amount", required=True, help="Amount (e.g., 12.50)")
@click.option("--category", required=True, help="Category name or ID")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--currency", help="Currency code (defaults to SPENDBOOK_CURRENCY)")
@click.option("--note", help="Note")
@click.option("--merchant", help="Merchant")
@click.option("--payment-method", help="Payment method")
@click.pass_context
def add_expense(
    ctx,
    amount: str,
    category: str,
    date_str: str,
    currency: str | None,
    note: str | None,
    merchant: str | None,
    payment_method: str | None,
):
    """Record an expense.

    Examples:
        spendbook expense add --amount 12.50 --category Food --merchant "Corner Cafe"
        spendbook expense add --amount 40 --category Transport --date yesterday
    """
    db = ctx.obj["db"]
    expense_repo = ExpenseRepository(db)
    category_repo = CategoryRepository(db)

    try:
        amount_minor = parse_amount_to_minor(amount)
        occurred_on = parse_date(date_str)
        category_id = resolve_category(category_repo, category)
        expense = expense_repo.create(
            amount_minor=amount_minor,
            category_id=category_id,
            occurred_at=occurred_on,
            currency=currency,
            note=note,
            merchant=merchant,
            payment_method=payment_method,
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created expense {expense.id}")
    click.echo(f"  Amount: {format_currency(expense.amount_minor, expense.currency)}")
    click.echo(f"  Date: {expense.occurred_at:%Y-%m-%d}")


@expense_group.command("edit")
@click.argument("expense_id")
@click.option("--amount", help="New amount")
@click.option("--category", help="New category name or ID")
@click.option("--date", "date_str", help="New date")
@click.option("--currency", help="New currency code")
@click.option("--note", help="New note")
@click.option("--merchant", help="New merchant")
@click.option("--payment-method", help="New payment method")
@click.pass_context
def edit_expense(
    ctx,
    expense_id: str,
    amount: str | None,
    category: str | None,
    date_str: str | None,
    currency: str | None,
    note: str | None,
    merchant: str | None,
    payment_method: str | None,
):
    """Change fields of an expense. Only the given options are updated."""
    db = ctx.obj["db"]
    expense_repo = ExpenseRepository(db)
    category_repo = CategoryRepository(db)

    changes = {}
    try:
        if amount is not None:
            changes["amount_minor"] = parse_amount_to_minor(amount)
        if category is not None:
            changes["category_id"] = resolve_category(category_repo, category)
        if date_str is not None:
            changes["occurred_at"] = parse_date(date_str)
        for key, value in (
            ("currency", currency),
            ("note", note),
            ("merchant", merchant),
            ("payment_method", payment_method),
        ):
            if value is not None:
                changes[key] = value

        if not changes:
            click.echo("Nothing to update.")
            return
        if expense_repo.get_by_id(expense_id) is None:
            click.echo(f"Error: {expense_not_found(expense_id)}", err=True)
            ctx.exit(1)
        expense_repo.update(expense_id, **changes)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated expense {expense_id}")


@expense_group.command("delete")
@click.argument("expense_id")
@click.pass_context
def delete_expense(ctx, expense_id: str):
    """Delete an expense (it can be restored)."""
    repo = ExpenseRepository(ctx.obj["db"])
    if repo.get_by_id(expense_id) is None:
        click.echo(f"Error: {expense_not_found(expense_id)}", err=True)
        ctx.exit(1)
    repo.soft_delete(expense_id)
    click.echo(f"Deleted expense {expense_id}")


@expense_group.command("restore")
@click.argument("expense_id")
@click.pass_context
def restore_expense(ctx, expense_id: str):
    """Restore a deleted expense."""
    db = ctx.obj["db"]
    if db.get_expense(expense_id, include_deleted=True) is None:
        click.echo(f"Error: {expense_not_found(expense_id)}", err=True)
        ctx.exit(1)
    ExpenseRepository(db).restore(expense_id)
    click.echo(f"Restored expense {expense_id}")


@expense_group.command("show")
@click.argument("expense_id")
@click.pass_context
def show_expense(ctx, expense_id: str):
    """Show one expense."""
    repo = ExpenseRepository(ctx.obj["db"])
    expense = repo.get_by_id(expense_id)
    if expense is None:
        click.echo(f"Error: {expense_not_found(expense_id)}", err=True)
        ctx.exit(1)
    print_expense(expense)


@expense_group.command("list")
@click.option("--start-date", help="Start date (defaults to the first of this month)")
@click.option("--end-date", help="End date (defaults to today)")
@click.option("--category", help="Category name or ID")
@click.option("--search", help="Only expenses whose category, merchant or note contains this text")
@click.pass_context
def list_expenses(
    ctx,
    start_date: str | None,
    end_date: str | None,
    category: str | None,
    search: str | None,
):
    """List expenses, newest first."""
    db = ctx.obj["db"]
    expense_repo = ExpenseRepository(db)
    category_repo = CategoryRepository(db)

    today = date.today()
    try:
        start = parse_date(start_date) if start_date else today.replace(day=1)
        end = parse_date(end_date) if end_date else today
        category_id = resolve_category(category_repo, category) if category else None
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
        return

    expenses = expense_repo.list_by_date_range(start, end, category_id)
    if search:
        expenses = filter_expenses_by_query(expenses, search)

    if not expenses:
        click.echo("No expenses found.")
        return

    click.echo(f"\nFound {len(expenses)} expense(s):")
    click.echo("-" * 100)
    click.echo(f"{'Date':<12} {'Amount':>14}  {'Category':<16} {'Merchant':<20} {'ID':<36}")
    click.echo("-" * 100)
    for exp in expenses:
        amount_str = format_currency(exp.amount_minor, exp.currency)
        click.echo(
            f"{exp.occurred_at:%Y-%m-%d}   {amount_str:>14}  {(exp.category_name or '')[:16]:<16} "
            f"{(exp.merchant or '')[:20]:<20} {exp.id:<36}"
        )


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
