"""Shared pytest fixtures for sieledger tests."""

import tempfile
import os
from datetime import date
from pathlib import Path
import pytest

from sieledger.database.factories import create_sqlite_database
from sieledger.domain.account import AccountService
from sieledger.domain.entities import Account, ChartOfAccounts, LedgerConfig
from sieledger.domain.settings import SettingsService
from sieledger.domain.sie_exchange import SIEService
from sieledger.domain.template_service import TemplateService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def template_service(temp_db):
    """Create a TemplateService with a temporary database."""
    return TemplateService(temp_db)


@pytest.fixture
def settings_service(temp_db):
    """Create a SettingsService with a temporary database."""
    return SettingsService(temp_db)


@pytest.fixture
def sie_service(temp_db):
    """Create an SIEService with a temporary database."""
    return SIEService(temp_db)


@pytest.fixture
def chart():
    """In-memory chart with a few accounts."""
    c = ChartOfAccounts()
    c.add_account(Account("1920", "T", "Bank"))
    c.add_account(Account("1510", "T", "Claims"))
    c.add_account(Account("3000", "I", "Incomes"))
    c.add_account(Account("3990", "I", "Benefits"))
    return c


@pytest.fixture
def sample_accounts(account_service):
    """Store the accounts used by most tests."""
    account_service.create_account("1920", "Bank", "T")
    account_service.create_account("1510", "Claims", "T")
    account_service.create_account("3000", "Incomes", "I")
    account_service.create_account("3990", "Benefits", "I")
    return account_service.list_accounts()


@pytest.fixture
def sample_template(template_service, sample_accounts):
    """Store a cash sale template."""
    return template_service.create_template(
        template_id="SALE",
        name="Cash sale",
        text="Sale {ref}",
        transactions=[("1920", "{amount}"), ("3000", "-{amount}")],
    )


@pytest.fixture
def config_2024():
    """Ledger config covering calendar year 2024."""
    return LedgerConfig(
        company="ACME AB",
        year_start=date(2024, 1, 1),
        year_stop=date(2024, 12, 31),
        generated=date(2024, 1, 2),
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
