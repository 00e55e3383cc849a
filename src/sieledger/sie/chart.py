"""Chart of accounts records: #KPTYP, #KONTO and #KTYP.

Decoding is a small state machine. A ``#KONTO`` line moves the decoder from
``Idle`` to ``AwaitingType``; the ``#KTYP`` line for the same account number
completes the account and moves it back to ``Idle``. The state is passed
explicitly through :func:`advance` so each transition can be checked in
isolation.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from sieledger.domain.entities import Account, ChartOfAccounts
from sieledger.domain.errors import (
    DanglingAccountError,
    MalformedChartError,
    MismatchedAccountTypeError,
)
from sieledger.sie.quoting import quote
from sieledger.sie.tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """No account is half-way decoded."""


@dataclass(frozen=True)
class AwaitingType:
    """A #KONTO line was read and its #KTYP line is expected next."""

    number: str
    name: str
    line_number: int


DecoderState = Union[Idle, AwaitingType]

IDLE = Idle()


def chart_type_line(chart_type: str) -> str:
    """Return the #KPTYP record, written once before any account records."""
    return f"#KPTYP {quote(chart_type)}"


def encode_account_lines(accounts: Iterable[Account]) -> Iterator[str]:
    """Yield the #KONTO/#KTYP pair for each account."""
    for account in accounts:
        number = quote(account.number)
        yield f"#KONTO {number} {quote(account.name)}"
        yield f"#KTYP {number} {quote(account.type)}"


def advance(
    state: DecoderState, fields: list[str], line_number: int, chart: ChartOfAccounts
) -> DecoderState:
    """Apply one tokenized line to the decoder.

    Args:
        state: Current decoder state
        fields: Tokenized line, tag first
        line_number: Line number used in error messages
        chart: Chart receiving chart type and completed accounts

    Returns:
        The next decoder state

    Raises:
        MalformedChartError: If a record has the wrong number of fields
        MismatchedAccountTypeError: If #KTYP does not match the pending account
        DanglingAccountError: If #KONTO arrives while another account is pending
    """
    if not fields:
        return state

    tag, args = fields[0], fields[1:]

    if tag == "#KPTYP":
        if len(args) < 1:
            raise MalformedChartError("Invalid chart type", line_number)
        chart.chart_type = args[0]
        return state

    if tag == "#KONTO":
        if len(args) != 2:
            raise MalformedChartError("Invalid account values", line_number)
        if isinstance(state, AwaitingType):
            raise DanglingAccountError(state.number, line_number)
        number, name = args
        return AwaitingType(number=number, name=name, line_number=line_number)

    if tag == "#KTYP":
        if len(args) < 2:
            raise MalformedChartError("Invalid account values", line_number)
        number, account_type = args[0], args[1]
        if not isinstance(state, AwaitingType) or number != state.number:
            raise MismatchedAccountTypeError(
                f"Unexpected account type for '{number}'", line_number
            )
        chart.add_account(Account(number=number, type=account_type, name=state.name))
        return IDLE

    return state


def finish(state: DecoderState) -> None:
    """Check that no account is left without its #KTYP line.

    Raises:
        DanglingAccountError: If the decoder is still awaiting a type
    """
    if isinstance(state, AwaitingType):
        raise DanglingAccountError(state.number, state.line_number)


def decode_chart_lines(lines: Iterable[str]) -> ChartOfAccounts:
    """Decode a chart of accounts from SIE text lines.

    Lines are numbered from 1. Tags other than #KPTYP, #KONTO and #KTYP are
    ignored.
    """
    chart = ChartOfAccounts()
    state: DecoderState = IDLE
    line_count = 0

    for line_number, line in enumerate(lines, start=1):
        state = advance(state, tokenize(line, line_number), line_number, chart)
        line_count = line_number

    finish(state)
    logger.debug("Decoded %d accounts from %d lines", len(chart), line_count)
    return chart
