"""Utility functions for sieledger."""

from sieledger.utils.date_parser import parse_date, accounting_year
from sieledger.utils.amount_parser import parse_amount

__all__ = ["parse_date", "accounting_year", "parse_amount"]
