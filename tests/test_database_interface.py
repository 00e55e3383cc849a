"""Tests for Database interface returning domain models."""

import pytest

from sieledger.domain import entities
from sieledger.domain.errors import ConflictError, UnknownAccountError, UnknownTemplateError
from sieledger.domain.template import Template


class TestAccounts:
    """Tests for account storage."""

    def test_get_account_returns_domain_model(self, temp_db):
        """Test that get_account returns a domain Account entity."""
        number = temp_db.create_account(number="1920", type="T", name="Bank")

        account = temp_db.get_account(number)

        assert isinstance(account, entities.Account)
        assert account == entities.Account("1920", "T", "Bank")

    def test_get_missing_account_returns_none(self, temp_db):
        assert temp_db.get_account("9999") is None

    def test_list_accounts_ordered_by_number(self, temp_db):
        temp_db.create_account(number="3000", type="I", name="Incomes")
        temp_db.create_account(number="1920", type="T", name="Bank")

        accounts = temp_db.list_accounts()

        assert [a.number for a in accounts] == ["1920", "3000"]
        assert all(isinstance(a, entities.Account) for a in accounts)

    def test_create_duplicate_account(self, temp_db):
        temp_db.create_account(number="1920", type="T", name="Bank")

        with pytest.raises(ConflictError):
            temp_db.create_account(number="1920", type="T", name="Other")

    def test_update_account(self, temp_db):
        temp_db.create_account(number="1920", type="T", name="Bank")

        temp_db.update_account("1920", name="Bank account")

        assert temp_db.get_account("1920") == entities.Account("1920", "T", "Bank account")

    def test_update_missing_account(self, temp_db):
        with pytest.raises(UnknownAccountError):
            temp_db.update_account("9999", name="x")

    def test_delete_account(self, temp_db):
        temp_db.create_account(number="1920", type="T", name="Bank")

        temp_db.delete_account("1920")

        assert temp_db.get_account("1920") is None
        with pytest.raises(UnknownAccountError):
            temp_db.delete_account("1920")


class TestTemplates:
    """Tests for template storage."""

    def make_template(self, name="Cash sale"):
        template = Template("SALE", name, "Sale {ref}")
        template.add_transaction("1920", "{amount}")
        template.add_transaction("3000", "-{amount}")
        return template

    def test_save_and_get_template(self, temp_db):
        template = self.make_template()

        temp_db.save_template(template)

        assert temp_db.get_template("SALE") == template

    def test_get_missing_template_returns_none(self, temp_db):
        assert temp_db.get_template("NOPE") is None

    def test_save_replaces_transactions(self, temp_db):
        temp_db.save_template(self.make_template())

        replacement = Template("SALE", "Card sale", "Card {ref}")
        replacement.add_transaction("1510", "{amount}")
        temp_db.save_template(replacement)

        stored = temp_db.get_template("SALE")
        assert stored.name == "Card sale"
        assert stored.transactions == [("1510", "{amount}")]

    def test_list_templates(self, temp_db):
        temp_db.save_template(self.make_template())
        temp_db.save_template(Template("BEN", "Benefit"))

        assert [t.id for t in temp_db.list_templates()] == ["BEN", "SALE"]

    def test_delete_template(self, temp_db):
        temp_db.save_template(self.make_template())

        temp_db.delete_template("SALE")

        assert temp_db.get_template("SALE") is None
        with pytest.raises(UnknownTemplateError):
            temp_db.delete_template("SALE")


class TestSettings:
    """Tests for setting storage."""

    def test_missing_setting(self, temp_db):
        assert temp_db.get_setting("company") is None

    def test_set_and_overwrite_setting(self, temp_db):
        temp_db.set_setting("company", "ACME AB")
        temp_db.set_setting("company", "Other AB")

        assert temp_db.get_setting("company") == "Other AB"
