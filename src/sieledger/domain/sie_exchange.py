"""SIE import and export domain service."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional

from sieledger.domain.account import AccountService
from sieledger.domain.entities import LedgerConfig
from sieledger.domain.errors import DomainError, ValidationError
from sieledger.domain.ledger import Ledger
from sieledger.domain.settings import SettingsService
from sieledger.domain.template_service import TemplateService
from sieledger.sie.document import decode_chart, encode, encode_chart
from sieledger.utils.date_parser import parse_date

if TYPE_CHECKING:
    from sieledger.database.base import Database

logger = logging.getLogger(__name__)

TEMPLATE_COLUMN = "template"
DATE_COLUMN = "date"


@dataclass(frozen=True)
class LedgerEntry:
    """One row of an entries file: a template applied on a date."""

    template_id: str
    date: date
    values: dict[str, str] = field(default_factory=dict)
    row: Optional[int] = None


class SIEService:
    """Service for exchanging charts and ledgers as SIE documents."""

    def __init__(self, db: Database):
        """Initialize SIE service.

        Args:
            db: Database instance
        """
        self.db = db
        self.account_service = AccountService(db)
        self.template_service = TemplateService(db)
        self.settings_service = SettingsService(db)

    def export_chart(self, description: str, config: Optional[LedgerConfig] = None) -> bytes:
        """Encode the stored chart of accounts.

        Args:
            description: Free text written to the #TEXT record
            config: Header settings; defaults to the stored settings

        Returns:
            SIE document bytes (PC8)
        """
        if config is None:
            config = self.settings_service.ledger_config()
        chart = self.account_service.load_chart()
        data = encode_chart(description, chart, config)
        logger.info("Exported chart with %d accounts", len(chart))
        return data

    def import_chart(self, data: bytes, replace: bool = False) -> dict[str, int]:
        """Decode an SIE document and store its chart of accounts.

        Nothing is stored if the document cannot be decoded.

        Returns:
            Dict with counts of created, updated, unchanged and skipped accounts
        """
        chart = decode_chart(data)
        result = self.account_service.import_chart(chart, replace=replace)
        logger.info("Imported chart %r: %s", chart.chart_type, result)
        return result

    def read_entries(self, csv_file_path: str) -> list[LedgerEntry]:
        """Read ledger entries from a CSV file.

        The file needs a ``template`` and a ``date`` column; every other
        column is a placeholder value for the template.

        Args:
            csv_file_path: Path to CSV file

        Returns:
            List of entries in file order

        Raises:
            ValidationError: If columns are missing or a row is invalid
            FileNotFoundError: If CSV file doesn't exist
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

        entries = []
        with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
            # Try to detect delimiter
            sample = f.read(1024)
            f.seek(0)
            try:
                delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t").delimiter
            except csv.Error:
                delimiter = ","

            reader = csv.DictReader(f, delimiter=delimiter)

            csv_columns = reader.fieldnames
            if csv_columns is None:
                raise ValidationError("CSV file has no columns")

            missing_columns = {TEMPLATE_COLUMN, DATE_COLUMN} - set(csv_columns)
            if missing_columns:
                raise ValidationError(
                    f"CSV file missing required columns: {', '.join(sorted(missing_columns))}"
                )

            # Start at 2 (header is row 1)
            for row_num, row in enumerate(reader, start=2):
                template_id = (row.get(TEMPLATE_COLUMN) or "").strip()
                if not template_id:
                    raise ValidationError(f"Row {row_num}: Missing template")

                date_str = (row.get(DATE_COLUMN) or "").strip()
                if not date_str:
                    raise ValidationError(f"Row {row_num}: Missing date")
                try:
                    entry_date = parse_date(date_str)
                except ValueError as e:
                    raise ValidationError(f"Row {row_num}: {e}") from e

                values = {
                    key: (value or "").strip()
                    for key, value in row.items()
                    if key is not None and key not in (TEMPLATE_COLUMN, DATE_COLUMN)
                }
                entries.append(
                    LedgerEntry(template_id=template_id, date=entry_date, values=values, row=row_num)
                )

        logger.debug("Read %d entries from %s", len(entries), csv_path)
        return entries

    def build_ledger(self, config: LedgerConfig, entries: Iterable[LedgerEntry]) -> Ledger:
        """Build a ledger with one verification per entry.

        Raises:
            DomainError: The first entry that cannot be built or is rejected
                by the ledger; the error carries a note naming the entry row
        """
        ledger = Ledger(config)
        chart = self.account_service.load_chart()
        templates = self.template_service.load_chart_of_templates()

        for entry in entries:
            try:
                template = templates.get_template(entry.template_id)
                template.substitute(entry.values)
                ledger.add_verification(template.build_verification(chart, entry.date))
            except DomainError as e:
                if entry.row is not None:
                    e.add_note(f"Entry on row {entry.row}")
                raise

        return ledger

    def export_ledger(self, config: LedgerConfig, entries: Iterable[LedgerEntry]) -> bytes:
        """Build a ledger from entries and encode it as an SIE 4I document."""
        ledger = self.build_ledger(config, entries)
        data = encode(ledger)
        logger.info(
            "Exported %d verifications using %d accounts",
            len(ledger),
            len(ledger.used_accounts),
        )
        return data
