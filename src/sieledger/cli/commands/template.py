"""Verification template commands."""

import click
from sieledger.cli.error_handling import handle_domain_error
from sieledger.domain.errors import DomainError
from sieledger.domain.template_service import TemplateService
from sieledger.utils.date_parser import parse_date


def parse_pairs(ctx, option: str, pairs: tuple[str, ...]) -> list[tuple[str, str]]:
    """Split KEY=VALUE option values, exiting on malformed input."""
    result = []
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            click.echo(f"Error: Invalid {option} '{pair}'. Use KEY=VALUE.", err=True)
            ctx.exit(1)
        result.append((key.strip(), value.strip()))
    return result


@click.group()
def template_group():
    """Manage verification templates."""
    pass


@template_group.command("create")
@click.argument("template_id", metavar="ID")
@click.option("--name", default="", help="Template name (max 20 characters)")
@click.option("--text", default="", help="Verification text, may hold {placeholders} (max 60 characters)")
@click.option(
    "--transaction",
    "-t",
    "transactions",
    multiple=True,
    help="Transaction as ACCOUNT=AMOUNT, e.g. 1920={amount} or 3000=-{amount}",
)
@click.option("--replace", is_flag=True, default=False, help="Overwrite existing template")
@click.pass_context
def create_template(ctx, template_id: str, name: str, text: str, transactions: tuple[str, ...], replace: bool):
    """Create a verification template.

    Examples:
        sieledger template create SALE --name "Cash sale" --text "Sale {ref}" \\
            -t 1920={amount} -t 3000=-{amount}
    """
    db = ctx.obj["db"]
    service = TemplateService(db)

    pairs = parse_pairs(ctx, "transaction", transactions)

    try:
        template = service.create_template(
            template_id=template_id,
            name=name,
            text=text,
            transactions=pairs,
            replace=replace,
        )
        click.echo(f"Created template '{template.id}' with {len(pairs)} transactions")
    except DomainError as e:
        handle_domain_error(ctx, e)


@template_group.command("list")
@click.pass_context
def list_templates(ctx):
    """List all templates."""
    db = ctx.obj["db"]
    service = TemplateService(db)

    templates = service.list_templates()
    if not templates:
        click.echo("No templates found.")
        return

    click.echo("\nTemplates:")
    click.echo("-" * 60)
    for template in templates:
        click.echo(f"{template.id:6s} | {template.name:20s} | {template.text}")


@template_group.command("show")
@click.argument("template_id", metavar="ID")
@click.pass_context
def show_template(ctx, template_id: str):
    """Show a template and its transactions."""
    db = ctx.obj["db"]
    service = TemplateService(db)

    try:
        template = service.get_template(template_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"ID:   {template.id}")
    click.echo(f"Name: {template.name}")
    click.echo(f"Text: {template.text}")
    click.echo("Transactions:")
    for account, amount in template.transactions:
        click.echo(f"  {account:10s} {amount}")


@template_group.command("delete")
@click.argument("template_id", metavar="ID")
@click.pass_context
def delete_template(ctx, template_id: str):
    """Delete a template."""
    db = ctx.obj["db"]
    service = TemplateService(db)

    try:
        service.delete_template(template_id)
        click.echo(f"Deleted template '{template_id}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


@template_group.command("build")
@click.argument("template_id", metavar="ID")
@click.option("--set", "values", multiple=True, help="Placeholder value as KEY=VALUE")
@click.option("--date", "date_str", help="Verification date (default: today)")
@click.pass_context
def build_verification(ctx, template_id: str, values: tuple[str, ...], date_str: str | None):
    """Fill in a template and show the resulting verification."""
    db = ctx.obj["db"]
    service = TemplateService(db)

    substitutions = dict(parse_pairs(ctx, "value", values))

    ver_date = None
    if date_str:
        try:
            ver_date = parse_date(date_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date: {e}", err=True)
            ctx.exit(1)

    try:
        verification = service.build_verification(template_id, substitutions, ver_date)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\n{verification.date.isoformat()} {verification.text}")
    click.echo("-" * 60)
    for transaction in verification.transactions:
        account = transaction.account
        click.echo(f"{account.number:>6s} | {account.name:30s} | {transaction.amount:>12}")
    click.echo(f"Balanced: {'yes' if verification.is_balanced() else 'no'}")


def register_commands(cli):
    """Register template commands with main CLI."""
    cli.add_command(template_group, name="template")
