"""CLI helpers for accounting year resolution."""

from datetime import date

import click

from sieledger.utils.date_parser import accounting_year, parse_date


def resolve_cli_accounting_year(
    ctx,
    *,
    year: int | None,
    start_month: int,
    year_start: str | None,
    year_stop: str | None,
) -> tuple[date | None, date | None]:
    """Resolve accounting year bounds from --year or explicit dates."""
    if year is not None and (year_start or year_stop):
        click.echo(
            "Error: --year cannot be combined with --year-start or --year-stop.",
            err=True,
        )
        ctx.exit(1)

    if year is not None:
        try:
            return accounting_year(year, start_month)
        except ValueError as e:
            click.echo(f"Error: Invalid accounting year: {e}", err=True)
            ctx.exit(1)

    if bool(year_start) != bool(year_stop):
        click.echo(
            "Error: --year-start and --year-stop must be given together.",
            err=True,
        )
        ctx.exit(1)

    start = None
    stop = None

    if year_start:
        try:
            start = parse_date(year_start)
        except ValueError as e:
            click.echo(f"Error: Invalid year start: {e}", err=True)
            ctx.exit(1)

    if year_stop:
        try:
            stop = parse_date(year_stop)
        except ValueError as e:
            click.echo(f"Error: Invalid year stop: {e}", err=True)
            ctx.exit(1)

    return start, stop
