"""Template domain service."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Mapping, Optional

from sieledger.domain.account import AccountService
from sieledger.domain.entities import ChartOfAccounts, Verification
from sieledger.domain.errors import ConflictError, UnknownTemplateError
from sieledger.domain.template import ChartOfTemplates, Template

if TYPE_CHECKING:
    from sieledger.database.base import Database


class TemplateService:
    """Service for managing verification templates."""

    def __init__(self, db: Database):
        """Initialize template service.

        Args:
            db: Database instance
        """
        self.db = db
        self.account_service = AccountService(db)

    def create_template(
        self,
        template_id: str,
        name: str,
        text: str,
        transactions: list[tuple[str, str]],
        replace: bool = False,
    ) -> Template:
        """Create and store a template.

        Args:
            template_id: Template id (max 6 characters)
            name: Template name (max 20 characters)
            text: Verification text (max 60 characters)
            transactions: (account pattern, amount pattern) pairs
            replace: Overwrite an existing template with the same id

        Returns:
            The stored template

        Raises:
            FieldLengthError: If id, name or text is too long
            ConflictError: If the id is taken and replace is False
        """
        template = Template(id=template_id, name=name, text=text)
        for account, amount in transactions:
            template.add_transaction(account, amount)

        if not replace and self.db.get_template(template.id) is not None:
            raise ConflictError(f"Template with id '{template.id}' already exists")

        self.db.save_template(template)
        return template

    def save_template(self, template: Template) -> None:
        self.db.save_template(template)

    def get_template(self, template_id: str) -> Template:
        """Get template by id.

        Raises:
            UnknownTemplateError: If template not found
        """
        template = self.db.get_template(template_id)
        if template is None:
            raise UnknownTemplateError(template_id)
        return template

    def list_templates(self) -> list[Template]:
        return self.db.list_templates()

    def delete_template(self, template_id: str) -> None:
        self.db.delete_template(template_id)

    def load_chart_of_templates(self) -> ChartOfTemplates:
        """Collect all stored templates."""
        templates = ChartOfTemplates()
        for template in self.db.list_templates():
            templates.add_template(template)
        return templates

    def build_verification(
        self,
        template_id: str,
        values: Mapping[str, object],
        ver_date: Optional[date] = None,
        chart: Optional[ChartOfAccounts] = None,
    ) -> Verification:
        """Substitute values into a stored template and build a verification.

        Args:
            template_id: Template id
            values: Placeholder values
            ver_date: Verification date; defaults to today
            chart: Chart of accounts; defaults to the stored chart

        Raises:
            UnknownTemplateError: If template not found
            UnresolvedPlaceholderError: If values leave a placeholder unfilled
            UnknownAccountError: If an account is not in the chart
        """
        template = self.get_template(template_id)
        if chart is None:
            chart = self.account_service.load_chart()

        template.substitute(values)
        return template.build_verification(chart, ver_date)
