"""Domain layer for sieledger application."""

from sieledger.domain.account import AccountService
from sieledger.domain.settings import SettingsService
from sieledger.domain.template_service import TemplateService

__all__ = [
    "AccountService",
    "SettingsService",
    "TemplateService",
]
