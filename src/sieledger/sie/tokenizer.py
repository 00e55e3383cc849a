"""Splitting SIE lines into fields."""

import csv
import logging
from typing import Optional

from sieledger.domain.errors import MalformedDocumentError

logger = logging.getLogger(__name__)


def tokenize(line: str, line_number: Optional[int] = None) -> list[str]:
    """Split an SIE line into fields.

    Fields are separated by runs of spaces or tabs. Double-quoted fields may
    contain whitespace, tabs included, and backslash-escaped characters. An
    unterminated quote is not an error: the rest of the line becomes the
    last field.

    Args:
        line: One line of SIE text, without line terminator
        line_number: Line number used in log and error messages

    Returns:
        List of fields; empty for a blank line

    Raises:
        MalformedDocumentError: If the csv module rejects the line
    """
    line, unterminated = _separate_with_spaces(line)
    line = line.strip()
    if not line:
        return []

    if unterminated:
        logger.warning("Unterminated quote on line %s: %r", line_number, line)

    reader = csv.reader(
        [line],
        delimiter=" ",
        quotechar='"',
        escapechar="\\",
        doublequote=False,
        skipinitialspace=True,
    )
    try:
        return next(reader, [])
    except csv.Error as e:
        raise MalformedDocumentError(f"Unreadable record: {e}", line_number) from e


def _separate_with_spaces(line: str) -> tuple[str, bool]:
    """Turn tabs outside quoted fields into spaces.

    Returns:
        Tuple of (normalized line, whether a quote is left open)
    """
    chars = []
    in_quotes = False
    escaped = False
    for char in line:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == "\t" and not in_quotes:
            char = " "
        chars.append(char)
    return "".join(chars), in_quotes
