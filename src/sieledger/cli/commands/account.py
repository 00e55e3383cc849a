"""Account management commands."""

import click
from sieledger.cli.error_handling import handle_domain_error
from sieledger.domain.account import ACCOUNT_TYPES, AccountService
from sieledger.domain.errors import DomainError


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("add")
@click.argument("number", metavar="NUMBER")
@click.argument("name", metavar="NAME")
@click.option(
    "--type",
    "account_type",
    type=click.Choice(list(ACCOUNT_TYPES), case_sensitive=False),
    required=True,
    help="SIE account type: T (asset), S (liability), K (expense), I (income)",
)
@click.pass_context
def add_account(ctx, number: str, name: str, account_type: str):
    """Add an account to the chart.

    Examples:
        sieledger account add 1920 "Bank" --type T
        sieledger account add 3000 "Sales" --type I
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        number = service.create_account(number=number, name=name, type=account_type)
        click.echo(f"Created account {number} '{name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 60)
    for acc in accounts:
        type_name = ACCOUNT_TYPES.get(acc.type, acc.type)
        click.echo(f"{acc.number:>6s} | {acc.name:30s} | {acc.type} ({type_name})")


@account_group.command("delete")
@click.argument("number", metavar="NUMBER")
@click.pass_context
def delete_account(ctx, number: str):
    """Delete an account."""
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        service.delete_account(number)
        click.echo(f"Deleted account {number}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
