"""Initialize the database."""

import click

from spendbook.database.seed import DEFAULT_CATEGORIES


@click.command("init")
@click.pass_context
def init_database(ctx):
    """Create the schema and the default categories."""
    seeded = ctx.obj.get("seeded", 0)
    if seeded:
        names = ", ".join(name for name, _, _, _ in DEFAULT_CATEGORIES)
        click.echo(f"Created {seeded} default categories: {names}")
    else:
        click.echo("Database already initialized.")


def register_commands(cli):
    """Register init command with main CLI."""
    cli.add_command(init_database)
