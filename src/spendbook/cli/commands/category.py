"""Category management commands."""

import click

from spendbook.cli.error_handling import handle_domain_error
from spendbook.domain.category import CategoryRepository
from spendbook.domain.errors import DomainError
from spendbook.utils.category_resolver import resolve_category


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.option("--all", "include_archived", is_flag=True, help="Include archived categories")
@click.pass_context
def list_categories(ctx, include_archived: bool):
    """List categories in display order."""
    repo = CategoryRepository(ctx.obj["db"])
    categories = repo.list_all() if include_archived else repo.list_active()

    if not categories:
        click.echo("No categories found. Run 'init' to create default categories.")
        return

    click.echo("\nCategories:")
    for cat in categories:
        archived = " [archived]" if cat.is_archived else ""
        click.echo(f"{cat.sort_order:>3}  {cat.name}{archived} (ID: {cat.id})")


@category_group.command("create")
@click.argument("name")
@click.option("--icon", help="Icon name")
@click.option("--color", "color_token", help="Colour token")
@click.pass_context
def create_category(ctx, name: str, icon: str | None, color_token: str | None):
    """Create a new category."""
    repo = CategoryRepository(ctx.obj["db"])
    try:
        cat = repo.create(name=name, icon=icon, color_token=color_token)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created category '{cat.name}' (ID: {cat.id})")


@category_group.command("rename")
@click.argument("category")
@click.argument("name")
@click.pass_context
def rename_category(ctx, category: str, name: str):
    """Rename CATEGORY (id or name) to NAME."""
    repo = CategoryRepository(ctx.obj["db"])
    try:
        category_id = resolve_category(repo, category)
        repo.update(category_id, name=name)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Renamed category {category_id} to '{name.strip()}'")


@category_group.command("archive")
@click.argument("category")
@click.pass_context
def archive_category(ctx, category: str):
    """Hide CATEGORY from pickers; its expenses are kept."""
    repo = CategoryRepository(ctx.obj["db"])
    try:
        category_id = resolve_category(repo, category)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    repo.archive(category_id)
    click.echo(f"Archived category {category_id}")


@category_group.command("restore")
@click.argument("category")
@click.pass_context
def restore_category(ctx, category: str):
    """Bring an archived CATEGORY back."""
    repo = CategoryRepository(ctx.obj["db"])
    try:
        category_id = resolve_category(repo, category)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    repo.restore(category_id)
    click.echo(f"Restored category {category_id}")


@category_group.command("reorder")
@click.argument("categories", nargs=-1, required=True)
@click.pass_context
def reorder_categories(ctx, categories: tuple[str, ...]):
    """Give CATEGORIES (ids or names) sort positions 0, 1, 2, ... in order."""
    repo = CategoryRepository(ctx.obj["db"])
    try:
        ids = [resolve_category(repo, cat) for cat in categories]
        repo.reorder(ids)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Reordered {len(ids)} categories")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
