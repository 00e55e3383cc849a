"""Verification templates.

A template is a verification blueprint whose text, account numbers and
amounts may hold ``{key}`` placeholders. Placeholders are filled in with
:meth:`Template.substitute` and the result is turned into a
:class:`Verification` with :meth:`Template.build_verification`.
"""

import copy
import logging
import re
from datetime import date
from typing import Iterator, Mapping, Optional

from sieledger.domain.entities import ChartOfAccounts, Transaction, Verification
from sieledger.domain.errors import (
    FieldLengthError,
    UnknownTemplateError,
    UnresolvedPlaceholderError,
)
from sieledger.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)

MAX_ID_LENGTH = 6
MAX_NAME_LENGTH = 20
MAX_TEXT_LENGTH = 60

_PLACEHOLDER = re.compile(r"\{([^}]*)\}")


def _check_length(field: str, value: str, limit: int) -> str:
    value = value.strip()
    if len(value) > limit:
        raise FieldLengthError(field, value, limit)
    return value


class Template:
    """Placeholder-parameterized blueprint for a verification."""

    def __init__(self, id: str = "", name: str = "", text: str = ""):
        """Initialize template.

        Args:
            id: Template id, max 6 characters
            name: Template name, max 20 characters
            text: Verification text, max 60 characters

        Raises:
            FieldLengthError: If a value is too long
        """
        self.id = id
        self.name = name
        self.text = text
        self._transactions: list[tuple[str, str]] = []

    @property
    def id(self) -> str:
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        self._id = _check_length("id", value, MAX_ID_LENGTH)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _check_length("name", value, MAX_NAME_LENGTH)

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = _check_length("text", value, MAX_TEXT_LENGTH)

    @property
    def transactions(self) -> list[tuple[str, str]]:
        """(account pattern, amount pattern) pairs in order."""
        return list(self._transactions)

    def add_transaction(self, account: str, amount: str) -> None:
        self._transactions.append((account.strip(), amount.strip()))

    def ready(self) -> tuple[bool, Optional[str]]:
        """Check if all placeholders are substituted.

        Transactions are scanned first, in order and account before amount,
        then the text.

        Returns:
            Tuple of (is_ready, first_unsubstituted_key)
        """
        for account, amount in self._transactions:
            for pattern in (account, amount):
                match = _PLACEHOLDER.search(pattern)
                if match:
                    return (False, match.group(1))

        match = _PLACEHOLDER.search(self._text)
        if match:
            return (False, match.group(1))

        return (True, None)

    def substitute(self, values: Mapping[str, object]) -> None:
        """Replace placeholders in text and transactions.

        Every ``{key}`` occurrence of every given key is replaced, wherever it
        sits, including inside other braces. All keys are replaced in a single
        pass, so a substituted value is never itself searched for
        placeholders. Placeholders without a value are left in place.

        Args:
            values: Placeholder key to replacement value
        """
        if not values:
            return

        replacements = {"{" + key + "}": str(value) for key, value in values.items()}
        # Longest first so a key holding "}" wins over its own prefix
        tokens = sorted(replacements, key=len, reverse=True)
        placeholder = re.compile("|".join(re.escape(token) for token in tokens))

        def apply(pattern: str) -> str:
            return placeholder.sub(lambda match: replacements[match.group(0)], pattern).strip()

        self._text = apply(self._text)
        self._transactions = [
            (apply(account), apply(amount)) for account, amount in self._transactions
        ]

    def build_verification(
        self, chart: ChartOfAccounts, date: Optional[date] = None
    ) -> Verification:
        """Create a verification from this template.

        Transactions with a zero (or blank) amount are left out.

        Args:
            chart: Chart used to look up account numbers
            date: Verification date; defaults to today

        Returns:
            Verification entity

        Raises:
            UnresolvedPlaceholderError: If any placeholder is not substituted
            UnknownAccountError: If an account number is not in the chart
            ValidationError: If an amount cannot be parsed
        """
        is_ready, key = self.ready()
        if not is_ready:
            raise UnresolvedPlaceholderError(key)

        transactions = []
        for number, amount_str in self._transactions:
            if not amount_str:
                continue
            amount = parse_amount(amount_str)
            if amount == 0:
                continue
            transactions.append(Transaction(chart.get_account(number), amount))

        logger.debug(
            "Built verification from template %r with %d transactions",
            self._id,
            len(transactions),
        )
        if date is None:
            return Verification(text=self._text, transactions=tuple(transactions))
        return Verification(text=self._text, date=date, transactions=tuple(transactions))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Template):
            return NotImplemented
        return (
            self._id == other._id
            and self._name == other._name
            and self._text == other._text
            and self._transactions == other._transactions
        )

    def __repr__(self) -> str:
        return f"Template(id={self._id!r}, name={self._name!r}, text={self._text!r})"


class ChartOfTemplates:
    """Collection of templates keyed by template id."""

    def __init__(self):
        self._templates: dict[str, Template] = {}

    def add_template(self, template: Template) -> None:
        """Add template, replacing any template with the same id."""
        self._templates[template.id] = template

    def drop_template(self, template_id: str) -> None:
        self._templates.pop(template_id, None)

    def exists(self, template_id: str) -> bool:
        return template_id in self._templates

    def get_template(self, template_id: str) -> Template:
        """Get a copy of a template, safe to substitute.

        Raises:
            UnknownTemplateError: If no template has this id
        """
        if template_id not in self._templates:
            raise UnknownTemplateError(template_id)
        return copy.deepcopy(self._templates[template_id])

    @property
    def templates(self) -> dict[str, Template]:
        return dict(self._templates)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._templates))

    def __len__(self) -> int:
        return len(self._templates)
