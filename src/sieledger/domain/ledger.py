"""Ledger of verifications to be exported as SIE."""

import logging
from datetime import date, datetime
from types import MappingProxyType
from typing import Mapping, Optional

from sieledger.domain.entities import Account, LedgerConfig, Verification
from sieledger.domain.errors import (
    DateOutOfRangeError,
    UnbalancedVerificationError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class Ledger:
    """Ordered set of accepted verifications plus the accounts they use.

    Only balanced verifications dated within the configured accounting year
    are accepted, so a ledger can always be encoded. A ledger is not safe for
    concurrent mutation; callers sharing one across threads must serialize
    access themselves.
    """

    def __init__(self, config: Optional[LedgerConfig] = None):
        """Initialize an empty ledger.

        Args:
            config: Header settings; defaults to ``LedgerConfig()``
        """
        self._config = config if config is not None else LedgerConfig()
        self._verifications: list[Verification] = []
        self._used_accounts: dict[str, Account] = {}

    @property
    def config(self) -> LedgerConfig:
        return self._config

    def reconfigure(self, config: LedgerConfig) -> None:
        """Replace the ledger configuration.

        Raises:
            ValidationError: If the ledger already holds verifications
        """
        if self._verifications:
            raise ValidationError("Cannot reconfigure a ledger that holds verifications")
        self._config = config

    @property
    def verifications(self) -> tuple[Verification, ...]:
        return tuple(self._verifications)

    @property
    def used_accounts(self) -> Mapping[str, Account]:
        """Accounts referenced by accepted verifications, in order of first use."""
        return MappingProxyType(self._used_accounts)

    def add_verification(self, verification: Verification) -> None:
        """Accept a verification into the ledger.

        Args:
            verification: Verification to add

        Raises:
            UnbalancedVerificationError: If transaction amounts do not sum to zero
            DateOutOfRangeError: If the date is outside the accounting year
        """
        if not verification.is_balanced():
            raise UnbalancedVerificationError(verification.text)

        if self._config.has_year:
            ver_date = _as_date(verification.date)
            if not self._config.year_start <= ver_date <= self._config.year_stop:
                raise DateOutOfRangeError(ver_date.isoformat())

        for account in verification.accounts:
            self._used_accounts[account.number] = account

        self._verifications.append(verification)
        logger.debug(
            "Accepted verification %r with %d transactions",
            verification.text,
            len(verification.transactions),
        )

    def clear(self) -> None:
        """Remove all verifications and used accounts."""
        self._verifications.clear()
        self._used_accounts.clear()

    def __len__(self) -> int:
        return len(self._verifications)


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
