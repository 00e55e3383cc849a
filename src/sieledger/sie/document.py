"""SIE 4I documents.

WARNING: this is not a complete implementation of the SIE file format. Only
subsection 4I (transactions to be imported into regular accounting software)
is written, and only the chart of accounts is read back.
"""

import logging
import re
from decimal import Decimal
from typing import Iterator, Optional

from sieledger.domain.entities import ChartOfAccounts, LedgerConfig, Verification
from sieledger.domain.ledger import Ledger
from sieledger.sie.charset import from_wire_charset, to_wire_charset
from sieledger.sie.chart import (
    chart_type_line,
    decode_chart_lines,
    encode_account_lines,
)
from sieledger.sie.quoting import quote

logger = logging.getLogger(__name__)

SIE_EOL = "\r\n"
DATE_FORMAT = "%Y%m%d"

_LINE_BREAK = re.compile(r"\r?\n")


def format_amount(amount: Decimal) -> str:
    """Format an amount for a #TRANS record, keeping sign and given decimals."""
    return format(amount, "f")


def encode(ledger: Ledger) -> bytes:
    """Encode a ledger as an SIE 4I document in the PC8 charset.

    Raises:
        EncodingError: If any text cannot be represented in PC8
    """
    config = ledger.config
    lines = [
        "#FLAGGA 0",
        _program_line(config),
        "#FORMAT PC8",
        _gen_line(config),
        "#SIETYP 4",
        f"#FNAMN {quote(config.company)}",
        chart_type_line(config.chart_type),
    ]
    if config.has_year:
        start = config.year_start.strftime(DATE_FORMAT)
        stop = config.year_stop.strftime(DATE_FORMAT)
        lines.append(f"#RAR 0 {start} {stop}")
    lines.append("")

    lines.extend(encode_account_lines(ledger.used_accounts.values()))

    for verification in ledger.verifications:
        lines.extend(_verification_lines(verification))

    logger.debug(
        "Encoded %d verifications using %d accounts",
        len(ledger.verifications),
        len(ledger.used_accounts),
    )
    return to_wire_charset(_join(lines))


def encode_chart(
    description: str, chart: ChartOfAccounts, config: Optional[LedgerConfig] = None
) -> bytes:
    """Encode a chart of accounts as an SIE KONTO document.

    Args:
        description: Free text describing the chart
        chart: Accounts to export, in chart order
        config: Source of program, creator and generation date

    Raises:
        EncodingError: If any text cannot be represented in PC8
    """
    if config is None:
        config = LedgerConfig()

    lines = [
        "#FILTYP KONTO",
        _program_line(config),
        f"#TEXT {quote(description)}",
        "#FORMAT PC8",
        _gen_line(config),
        chart_type_line(chart.chart_type),
        "",
    ]
    lines.extend(encode_account_lines(chart))

    logger.debug("Encoded chart %r with %d accounts", chart.chart_type, len(chart))
    return to_wire_charset(_join(lines))


def decode_chart(data: bytes) -> ChartOfAccounts:
    """Decode a chart of accounts from an SIE document in the PC8 charset.

    Any SIE document may be read; records other than the chart records are
    ignored.

    Raises:
        EncodingError: If the data is not valid PC8
        MalformedChartError: If a chart record has the wrong number of fields
        MismatchedAccountTypeError: If #KTYP does not follow its #KONTO
        DanglingAccountError: If an account has no #KTYP line
    """
    text = from_wire_charset(data)
    # Lines end with CRLF, bare LF from hand-edited files is accepted too.
    # Other control characters belong to the record they appear in.
    return decode_chart_lines(_LINE_BREAK.split(text))


def _program_line(config: LedgerConfig) -> str:
    return f"#PROGRAM {quote(config.program)} {quote(config.version)}"


def _gen_line(config: LedgerConfig) -> str:
    return f"#GEN {config.generated.strftime(DATE_FORMAT)} {quote(config.creator)}"


def _verification_lines(verification: Verification) -> Iterator[str]:
    ver_date = verification.date.strftime(DATE_FORMAT)
    yield ""
    # Series and number fields are not used by 4I imports
    yield f'#VER "" "" {ver_date} {quote(verification.text)}'
    yield "{"
    for transaction in verification.transactions:
        amount = format_amount(transaction.amount)
        yield f"\t#TRANS {transaction.account.number} {{}} {amount}"
    yield "}"


def _join(lines: list[str]) -> str:
    return "".join(line + SIE_EOL for line in lines)
