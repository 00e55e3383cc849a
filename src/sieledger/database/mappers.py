"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay free of
database concerns.
"""

from sieledger.domain import entities as domain
from sieledger.domain.template import Template
from sieledger.database.models import (
    Account as ORMAccount,
    Template as ORMTemplate,
    TemplateTransaction as ORMTemplateTransaction,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        number=orm_account.number,
        type=orm_account.type,
        name=orm_account.name,
    )


def template_to_domain(orm_template: ORMTemplate) -> Template:
    """Convert SQLAlchemy Template model to domain Template."""
    template = Template(
        id=orm_template.id,
        name=orm_template.name,
        text=orm_template.text,
    )
    for trans in sorted(orm_template.transactions, key=lambda t: t.position):
        template.add_transaction(trans.account_pattern, trans.amount_pattern)
    return template


def template_transactions_to_orm(template: Template) -> list[ORMTemplateTransaction]:
    """Convert domain template transactions to SQLAlchemy models."""
    return [
        ORMTemplateTransaction(
            position=position,
            account_pattern=account,
            amount_pattern=amount,
        )
        for position, (account, amount) in enumerate(template.transactions)
    ]
