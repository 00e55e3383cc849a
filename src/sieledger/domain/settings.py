"""Stored ledger settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sieledger.domain.entities import DEFAULT_CHART_TYPE, LedgerConfig

if TYPE_CHECKING:
    from sieledger.database.base import Database

COMPANY = "company"
CREATOR = "creator"
CHART_TYPE = "chart_type"


class SettingsService:
    """Service for reading and updating stored ledger settings."""

    def __init__(self, db: Database):
        """Initialize settings service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_ledger_settings(self) -> dict[str, Optional[str]]:
        """Get stored settings.

        Returns:
            Dict with company, creator and chart_type; unset values are None
        """
        return {key: self.db.get_setting(key) for key in (COMPANY, CREATOR, CHART_TYPE)}

    def update_ledger_settings(
        self,
        company: Optional[str] = None,
        creator: Optional[str] = None,
        chart_type: Optional[str] = None,
    ) -> None:
        """Store the given settings; None leaves a setting unchanged."""
        for key, value in ((COMPANY, company), (CREATOR, creator), (CHART_TYPE, chart_type)):
            if value is not None:
                self.db.set_setting(key, value.strip())

    def get_chart_type(self) -> str:
        return self.db.get_setting(CHART_TYPE) or DEFAULT_CHART_TYPE

    def ledger_config(self, **overrides) -> LedgerConfig:
        """Build a ledger config from stored settings.

        Args:
            **overrides: LedgerConfig fields taking precedence over stored
                settings; None values are ignored

        Returns:
            LedgerConfig
        """
        values = {
            key: value
            for key, value in self.get_ledger_settings().items()
            if value is not None
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return LedgerConfig(**values)
