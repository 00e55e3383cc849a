"""Main CLI entry point."""

import logging

import click
from sieledger.database.factories import create_sqlite_database
from sieledger.logging_config import configure_logging

# Import and register all commands at module level
from sieledger.cli.commands import (
    account,
    chart,
    template,
    settings,
    export,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SIELEDGER_DB_PATH environment variable)",
    envvar="SIELEDGER_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Sieledger - SIE bookkeeping exchange.

    Keep a chart of accounts and verification templates, and exchange them
    with accounting software as SIE files.
    """
    ctx.ensure_object(dict)

    if verbose:
        configure_logging(logging.DEBUG)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
chart.register_commands(cli)
template.register_commands(cli)
settings.register_commands(cli)
export.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
