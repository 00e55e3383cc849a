"""Domain model entities for sieledger.

These are pure data classes representing accounting concepts, independent of
both the database schema and the SIE wire format.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Iterator, Optional

from sieledger.domain.errors import UnknownAccountError, ValidationError

DEFAULT_CHART_TYPE = "EUBAS97"


@dataclass(frozen=True)
class Account:
    """Account in a chart of accounts."""

    number: str
    type: str
    name: str


@dataclass(frozen=True)
class Transaction:
    """One debit/credit line of a verification."""

    account: Account
    amount: Decimal


@dataclass(frozen=True)
class Verification:
    """A journal entry composed of transactions."""

    text: str
    date: date = field(default_factory=date.today)
    transactions: tuple[Transaction, ...] = ()

    def is_balanced(self) -> bool:
        """Check that transaction amounts sum to exactly zero."""
        return sum((t.amount for t in self.transactions), Decimal(0)) == 0

    @property
    def accounts(self) -> list[Account]:
        """Accounts referenced by the transactions, in transaction order."""
        return [t.account for t in self.transactions]


@dataclass
class ChartOfAccounts:
    """Registry of accounts keyed by account number.

    Iteration follows insertion order. Two charts are equal when they hold the
    same accounts and the same chart type, regardless of order.
    """

    chart_type: str = DEFAULT_CHART_TYPE
    _accounts: dict[str, Account] = field(default_factory=dict, repr=False)

    def add_account(self, account: Account) -> None:
        """Add account, replacing any account with the same number."""
        self._accounts[account.number] = account

    def get_account(self, number: str) -> Account:
        """Get account by number.

        Raises:
            UnknownAccountError: If the number is not in the chart
        """
        try:
            return self._accounts[number]
        except KeyError:
            raise UnknownAccountError(number) from None

    def has_account(self, number: str) -> bool:
        return number in self._accounts

    def remove_account(self, number: str) -> None:
        if number not in self._accounts:
            raise UnknownAccountError(number)
        del self._accounts[number]

    @property
    def accounts(self) -> list[Account]:
        return list(self._accounts.values())

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts.values()))

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, number: object) -> bool:
        return number in self._accounts


@dataclass(frozen=True)
class LedgerConfig:
    """Settings written to the header of an exported SIE document.

    Instances are immutable; use the ``with_*`` helpers to derive an updated
    copy.
    """

    program: str = "sieledger"
    version: str = "1.0"
    creator: str = "sieledger"
    company: str = ""
    chart_type: str = DEFAULT_CHART_TYPE
    year_start: Optional[date] = None
    year_stop: Optional[date] = None
    generated: date = field(default_factory=date.today)

    def __post_init__(self):
        # Bounds cover whole days
        for name in ("year_start", "year_stop", "generated"):
            value = getattr(self, name)
            if isinstance(value, datetime):
                object.__setattr__(self, name, value.date())

        if (self.year_start is None) != (self.year_stop is None):
            raise ValidationError("Accounting year needs both a start and a stop date")
        if self.year_start is not None and self.year_start > self.year_stop:
            raise ValidationError(
                f"Accounting year start {self.year_start.isoformat()} "
                f"is after stop {self.year_stop.isoformat()}"
            )

    @property
    def has_year(self) -> bool:
        return self.year_start is not None

    def with_program(self, program: str, version: str) -> "LedgerConfig":
        return replace(self, program=program, version=version)

    def with_creator(self, creator: str) -> "LedgerConfig":
        return replace(self, creator=creator)

    def with_company(self, company: str) -> "LedgerConfig":
        return replace(self, company=company)

    def with_chart_type(self, chart_type: str) -> "LedgerConfig":
        return replace(self, chart_type=chart_type)

    def with_year(self, start: Optional[date], stop: Optional[date]) -> "LedgerConfig":
        """Set (or with two Nones, remove) the accounting year bounds."""
        return replace(self, year_start=start, year_stop=stop)
