"""Shared pytest fixtures for bankrec tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from bankrec.database.factories import create_sqlite_database
from bankrec.domain.account import AccountService
from bankrec.domain.entities import CSVColumnMapping, ImportedTransaction, TransactionImportConfig
from bankrec.domain.transaction_import import TransactionImportService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path, user_id="test-user")
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
def import_service(temp_db):
    """Create a TransactionImportService with a temporary database."""
    return TransactionImportService(temp_db)


@pytest.fixture
def sample_account(account_service):
    """Create an active sample account for testing."""
    account_id = account_service.create_account(name="Test Account", bank_name="Test Bank")
    return account_service.get_account(account_id)


@pytest.fixture
def inactive_account(account_service):
    """Create a deactivated account."""
    account_id = account_service.create_account(name="Closed Account", bank_name="Old Bank")
    account_service.set_active(account_id, False)
    return account_service.get_account(account_id)


@pytest.fixture
def csv_mapping():
    """Column mapping matching the sample statements."""
    return CSVColumnMapping(
        date="Date",
        description="Description",
        amount="Amount",
        type="Type",
        balance="Balance",
        reference="Reference",
    )


@pytest.fixture
def import_config(sample_account, csv_mapping):
    """Default CSV import configuration for the sample account."""
    return TransactionImportConfig(
        bank_account_id=sample_account.id,
        file_type="csv",
        csv_mapping=csv_mapping,
        skip_duplicates=True,
    )


@pytest.fixture
def sample_csv():
    """A small, valid bank statement."""
    return (
        "Date,Description,Amount,Type,Balance,Reference\n"
        '2024-01-15,"Coffee Shop Purchase",-4.50,DEBIT,1000.50,REF123\n'
        '2024-01-16,"Salary Deposit",2500.00,CREDIT,3500.50,PAY456\n'
        '2024-01-17,"ATM Withdrawal",-100.00,DEBIT,3400.50,ATM789\n'
        '2024-01-18,"Online Purchase XYZ",-25.99,DEBIT,3374.51,WEB001\n'
    )


@pytest.fixture
def make_transaction():
    """Factory for ImportedTransaction records with sensible defaults."""

    def _make(**overrides):
        values = {
            "date": "2024-01-05",
            "description": "Coffee Shop",
            "amount": Decimal("42.50"),
            "type": "debit",
        }
        values.update(overrides)
        return ImportedTransaction(**values)

    return _make


@pytest.fixture
def seed_transaction(temp_db, sample_account):
    """Persist a transaction directly through the repository."""

    def _seed(**overrides):
        values = {
            "bank_account_id": sample_account.id,
            "transaction_date": date(2024, 1, 5),
            "description": "Coffee Shop",
            "amount": Decimal("42.50"),
            "type": "debit",
        }
        values.update(overrides)
        return temp_db.create_bank_transaction(**values)

    return _seed


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def cli_user(monkeypatch):
    """Scope CLI invocations to the same tenant as temp_db."""
    monkeypatch.setenv("BANKREC_USER", "test-user")
    monkeypatch.delenv("BANKREC_DB_PATH", raising=False)
    for name in (
        "BANKREC_LARGE_AMOUNT",
        "BANKREC_MAX_DESCRIPTION",
        "BANKREC_DATE_TOLERANCE",
        "BANKREC_FUZZY_MATCH",
    ):
        monkeypatch.delenv(name, raising=False)
