"""SIE ledger export command."""

from pathlib import Path

import click
from sieledger.cli.error_handling import handle_domain_error
from sieledger.cli.year_options import resolve_cli_accounting_year
from sieledger.domain.errors import DomainError
from sieledger.domain.sie_exchange import SIEService


@click.command("export")
@click.argument("output", type=click.Path(dir_okay=False, writable=True))
@click.argument("entries_csv", type=click.Path(exists=True, dir_okay=False))
@click.option("--company", help="Company name (overrides stored setting)")
@click.option("--creator", help="Creator name (overrides stored setting)")
@click.option("--year", type=int, help="Accounting year, e.g. 2024")
@click.option(
    "--year-start-month",
    type=int,
    default=1,
    show_default=True,
    help="First month of the accounting year used with --year",
)
@click.option("--year-start", help="First day of the accounting year")
@click.option("--year-stop", help="Last day of the accounting year")
@click.pass_context
def export_ledger(
    ctx,
    output: str,
    entries_csv: str,
    company: str | None,
    creator: str | None,
    year: int | None,
    year_start_month: int,
    year_start: str | None,
    year_stop: str | None,
):
    """Export verifications built from templates as an SIE 4I file.

    ENTRIES_CSV needs a 'template' and a 'date' column. Every other column
    fills the template placeholder with the same name.

    Examples:
        sieledger export sales.si entries.csv --year 2024
    """
    db = ctx.obj["db"]
    service = SIEService(db)

    start, stop = resolve_cli_accounting_year(
        ctx,
        year=year,
        start_month=year_start_month,
        year_start=year_start,
        year_stop=year_stop,
    )

    try:
        config = service.settings_service.ledger_config(
            company=company,
            creator=creator,
            year_start=start,
            year_stop=stop,
        )
        entries = service.read_entries(entries_csv)
        data = service.export_ledger(config, entries)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    Path(output).write_bytes(data)
    click.echo(f"Exported {len(entries)} verifications to {output}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_ledger)
