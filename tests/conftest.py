"""Shared pytest fixtures for tabuledge tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from tabuledge.database.factories import create_sqlite_database
from tabuledge.domain.account import AccountService
from tabuledge.domain.entities import JournalLine
from tabuledge.domain.journal import JournalService
from tabuledge.domain.reports import ReportService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db, user="alice")


@pytest.fixture
def journal_service(temp_db):
    """Create a JournalService with a temporary database."""
    return JournalService(temp_db, user="bob")


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def chart(account_service):
    """Create a small chart of accounts and return account IDs by name."""
    accounts = [
        ("Cash", "101", "Asset", "Current Assets"),
        ("Merchandise Inventory", "130", "Asset", "Inventory"),
        ("Accounts Payable", "201", "Liability", "Current Liabilities"),
        ("Owner Capital", "301", "Equity", ""),
        ("Sales", "401", "Revenue", ""),
        ("Rent Expense", "501", "Expense", ""),
    ]
    return {
        name: account_service.create_account(
            name=name, number=number, category=category, subcategory=subcategory
        )
        for name, number, category, subcategory in accounts
    }


@pytest.fixture
def post_entry(journal_service):
    """Return a helper that submits and approves a journal entry."""

    def post(when, debits, credits, description=None):
        lines = [JournalLine(account_id=a, amount=Decimal(str(x)), side="debit") for a, x in debits]
        lines += [JournalLine(account_id=a, amount=Decimal(str(x)), side="credit") for a, x in credits]
        entry_id = journal_service.create_entry(when, lines, description=description)
        journal_service.approve_entry(entry_id)
        return entry_id

    return post


@pytest.fixture
def posted_ledger(chart, post_entry):
    """Post a balanced set of entries for January 2024."""
    post_entry(
        date(2024, 1, 2),
        [(chart["Cash"], 10000)], [(chart["Owner Capital"], 10000)],
        "Owner investment",
    )
    post_entry(
        date(2024, 1, 5),
        [(chart["Merchandise Inventory"], 2000)], [(chart["Accounts Payable"], 2000)],
        "Stock purchase on credit",
    )
    post_entry(
        date(2024, 1, 15),
        [(chart["Cash"], 3000)], [(chart["Sales"], 3000)],
        "Cash sales",
    )
    post_entry(
        date(2024, 1, 31),
        [(chart["Rent Expense"], 1000)], [(chart["Cash"], 1000)],
        "January rent",
    )
    return chart


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
