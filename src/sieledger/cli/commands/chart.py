"""Chart of accounts import and export commands."""

from pathlib import Path

import click
from sieledger.cli.error_handling import handle_domain_error
from sieledger.domain.account import AccountService
from sieledger.domain.errors import DomainError
from sieledger.domain.sie_exchange import SIEService


@click.group()
def chart_group():
    """Exchange the chart of accounts as SIE files."""
    pass


@chart_group.command("export")
@click.argument("output", type=click.Path(dir_okay=False, writable=True))
@click.option("--description", default="Chart of accounts", help="Text written to the #TEXT record")
@click.pass_context
def export_chart(ctx, output: str, description: str):
    """Write the chart of accounts to an SIE file."""
    db = ctx.obj["db"]
    service = SIEService(db)

    try:
        data = service.export_chart(description)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    Path(output).write_bytes(data)
    count = len(service.account_service.list_accounts())
    click.echo(f"Exported {count} accounts to {output}")


@chart_group.command("import")
@click.argument("sie_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--replace",
    is_flag=True,
    default=False,
    help="Overwrite stored accounts whose name or type differs from the file",
)
@click.pass_context
def import_chart(ctx, sie_file: str, replace: bool):
    """Read the chart of accounts from an SIE file."""
    db = ctx.obj["db"]
    service = SIEService(db)

    try:
        result = service.import_chart(Path(sie_file).read_bytes(), replace=replace)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("\nImport complete:")
    click.echo(f"  Created: {result['created']} accounts")
    click.echo(f"  Updated: {result['updated']} accounts")
    click.echo(f"  Unchanged: {result['unchanged']} accounts")
    if result["skipped"]:
        click.echo(f"  Skipped: {result['skipped']} accounts (use --replace to overwrite)")
    if result["invalid"]:
        click.echo(f"  Invalid: {result['invalid']} accounts (unknown account type)")


@chart_group.command("type")
@click.argument("chart_type", required=False)
@click.pass_context
def chart_type(ctx, chart_type: str | None):
    """Show or set the chart type (e.g. EUBAS97, BAS2024)."""
    db = ctx.obj["db"]
    service = AccountService(db)

    if chart_type is None:
        click.echo(service.settings_service.get_chart_type())
        return

    try:
        service.set_chart_type(chart_type)
        click.echo(f"Chart type set to '{chart_type.strip()}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register chart commands with main CLI."""
    cli.add_command(chart_group, name="chart")
