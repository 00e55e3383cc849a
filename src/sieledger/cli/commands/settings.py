"""Ledger settings commands."""

import click
from sieledger.domain.settings import SettingsService


@click.group()
def settings_group():
    """Manage settings written to exported SIE files."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show stored settings."""
    db = ctx.obj["db"]
    service = SettingsService(db)

    config = service.ledger_config()
    click.echo(f"Company:    {config.company or '(not set)'}")
    click.echo(f"Creator:    {config.creator}")
    click.echo(f"Chart type: {config.chart_type}")


@settings_group.command("set")
@click.option("--company", help="Company name written to #FNAMN")
@click.option("--creator", help="Creator name written to #GEN")
@click.pass_context
def set_settings(ctx, company: str | None, creator: str | None):
    """Update stored settings."""
    db = ctx.obj["db"]
    service = SettingsService(db)

    if company is None and creator is None:
        click.echo("Error: Nothing to update. Use --company or --creator.", err=True)
        ctx.exit(1)

    service.update_ledger_settings(company=company, creator=creator)
    click.echo("Settings updated")


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
