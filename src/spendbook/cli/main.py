"""Main CLI entry point."""

import click

from spendbook import config
from spendbook.database.factories import create_sqlite_database
from spendbook.database.seed import bootstrap

# Import and register all commands at module level
from spendbook.cli.commands import (
    category,
    expense,
    init_cmd,
    summary,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SPENDBOOK_DB_PATH environment variable)",
    envvar=config.DB_PATH_ENV_VAR,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(config.VERSION)
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """spendbook - Personal expense tracking.

    Record expenses against categories and review monthly totals and
    category breakdowns.
    """
    config.configure_logging(verbose)
    ctx.ensure_object(dict)

    # Open and bootstrap the database only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        ctx.obj["seeded"] = bootstrap(db)
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
init_cmd.register_commands(cli)
category.register_commands(cli)
expense.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
