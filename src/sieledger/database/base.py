"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

from sieledger.domain.entities import Account
from sieledger.domain.template import Template


class Database(ABC):
    """Abstract database interface for sieledger."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, number: str, type: str, name: str) -> str:
        """Create a new account. Returns account number."""
        pass

    @abstractmethod
    def get_account(self, number: str) -> Optional[Account]:
        """Get account by number."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts ordered by number."""
        pass

    @abstractmethod
    def update_account(
        self, number: str, type: Optional[str] = None, name: Optional[str] = None
    ) -> None:
        """Update account type and/or name."""
        pass

    @abstractmethod
    def delete_account(self, number: str) -> None:
        """Delete an account."""
        pass

    # Template operations
    @abstractmethod
    def save_template(self, template: Template) -> None:
        """Store a template, replacing any template with the same id."""
        pass

    @abstractmethod
    def get_template(self, template_id: str) -> Optional[Template]:
        """Get template by id."""
        pass

    @abstractmethod
    def list_templates(self) -> list[Template]:
        """List all templates ordered by id."""
        pass

    @abstractmethod
    def delete_template(self, template_id: str) -> None:
        """Delete a template and its transactions."""
        pass

    # Settings operations
    @abstractmethod
    def get_setting(self, key: str) -> Optional[str]:
        """Get a stored setting value."""
        pass

    @abstractmethod
    def set_setting(self, key: str, value: str) -> None:
        """Store a setting value."""
        pass
