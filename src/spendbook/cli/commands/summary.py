"""Monthly summary command."""

from datetime import date

import click

from spendbook.cli.error_handling import handle_domain_error
from spendbook.domain.errors import DomainError
from spendbook.domain.expense import ExpenseRepository
from spendbook.utils.date_parser import parse_month
from spendbook.utils.formatters import format_amount_minor


@click.command("summary")
@click.option("--month", help="Month as YYYY-MM, 'this-month' or 'last-month' (default: this month)")
@click.pass_context
def summary(ctx, month: str | None):
    """Show the monthly total and the spend per category."""
    repo = ExpenseRepository(ctx.obj["db"])

    try:
        if month:
            year, month_num = parse_month(month)
        else:
            today = date.today()
            year, month_num = today.year, today.month
        monthly = repo.get_monthly_summary(year, month_num)
        breakdown = repo.get_category_breakdown(year, month_num)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\nSummary for {monthly.month}")
    click.echo(f"  Total: {format_amount_minor(monthly.total_minor)}")
    click.echo(f"  Expenses: {monthly.count}")

    if not breakdown:
        click.echo("\nNo expenses recorded this month.")
        return

    click.echo("\nBy category:")
    click.echo("-" * 60)
    click.echo(f"{'Category':<24} {'Total':>14} {'Count':>7} {'Share':>7}")
    click.echo("-" * 60)
    for item in breakdown:
        name = item.category_name or "Uncategorized"
        click.echo(
            f"{name[:24]:<24} {format_amount_minor(item.total_minor):>14} "
            f"{item.count:>7} {item.percentage:>6}%"
        )


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
