"""Account domain service."""

from __future__ import annotations

import logging
from dataclasses import replace as replace_fields
from typing import TYPE_CHECKING, Optional

from sieledger.domain.entities import Account as AccountEntity, ChartOfAccounts
from sieledger.domain.errors import (
    UnknownAccountError,
    ValidationError,
    invalid_account_type,
)
from sieledger.domain.settings import SettingsService

if TYPE_CHECKING:
    from sieledger.database.base import Database

logger = logging.getLogger(__name__)

# SIE account type codes
ACCOUNT_TYPES = {
    "T": "Asset",
    "S": "Liability",
    "K": "Expense",
    "I": "Income",
}


class AccountService:
    """Service for managing the chart of accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db
        self.settings_service = SettingsService(db)

    def create_account(self, number: str, name: str, type: str) -> str:
        """Create a new account.

        Args:
            number: Account number
            name: Account name
            type: SIE account type code (T, S, K or I)

        Returns:
            Account number

        Raises:
            ValidationError: If number is empty or type is unknown
            ConflictError: If account number already exists
        """
        number = number.strip()
        if not number:
            raise ValidationError("Account number cannot be empty")

        type = type.strip().upper()
        if type not in ACCOUNT_TYPES:
            raise ValidationError(invalid_account_type(type, ", ".join(ACCOUNT_TYPES)))

        return self.db.create_account(number=number, type=type, name=name.strip())

    def get_account(self, number: str) -> Optional[AccountEntity]:
        """Get account by number.

        Args:
            number: Account number

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(number)

    def list_accounts(self) -> list[AccountEntity]:
        return self.db.list_accounts()

    def delete_account(self, number: str) -> None:
        """Delete an account.

        Raises:
            UnknownAccountError: If account not found
        """
        if self.db.get_account(number) is None:
            raise UnknownAccountError(number)
        self.db.delete_account(number)

    def set_chart_type(self, chart_type: str) -> None:
        chart_type = chart_type.strip()
        if not chart_type:
            raise ValidationError("Chart type cannot be empty")
        self.settings_service.update_ledger_settings(chart_type=chart_type)

    def load_chart(self) -> ChartOfAccounts:
        """Build a chart of accounts from all stored accounts."""
        chart = ChartOfAccounts(chart_type=self.settings_service.get_chart_type())
        for account in self.db.list_accounts():
            chart.add_account(account)
        return chart

    def import_chart(self, chart: ChartOfAccounts, replace: bool = False) -> dict[str, int]:
        """Store the accounts of a chart.

        Type codes are upper-cased. Accounts whose type is not one of
        ``ACCOUNT_TYPES`` are not stored and are counted as invalid.

        Args:
            chart: Decoded chart of accounts
            replace: If True, existing accounts with a different name or type
                are overwritten; otherwise they are kept as they are

        Returns:
            Dict with counts of created, updated, unchanged, skipped and
            invalid accounts
        """
        result = {"created": 0, "updated": 0, "unchanged": 0, "skipped": 0, "invalid": 0}

        for account in chart:
            account = replace_fields(account, type=account.type.strip().upper())
            if account.type not in ACCOUNT_TYPES:
                logger.warning(
                    "Ignoring account %s %r with invalid type %r",
                    account.number,
                    account.name,
                    account.type,
                )
                result["invalid"] += 1
                continue

            existing = self.db.get_account(account.number)
            if existing is None:
                self.db.create_account(
                    number=account.number, type=account.type, name=account.name
                )
                result["created"] += 1
            elif existing == account:
                result["unchanged"] += 1
            elif replace:
                self.db.update_account(account.number, type=account.type, name=account.name)
                result["updated"] += 1
            else:
                logger.info(
                    "Keeping stored account %s %r, file has %r",
                    account.number,
                    existing.name,
                    account.name,
                )
                result["skipped"] += 1

        if chart.chart_type.strip():
            self.set_chart_type(chart.chart_type)
        return result
