"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "20240115", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def accounting_year(year: int, start_month: int = 1) -> tuple[date, date]:
    """Get first and last day of an accounting year.

    Broken fiscal years are supported: with ``start_month=7`` the 2024
    accounting year runs from 2024-07-01 to 2025-06-30.

    Args:
        year: Calendar year in which the accounting year starts
        start_month: First month of the accounting year (1-12)

    Returns:
        Tuple of (start_date, stop_date), both inclusive

    Raises:
        ValueError: If start_month is not a valid month
    """
    if not 1 <= start_month <= 12:
        raise ValueError(f"Invalid start month: {start_month}. Must be between 1 and 12")

    start = date(year, start_month, 1)
    stop = start + relativedelta(years=1) - timedelta(days=1)
    return (start, stop)
