"""Shared pytest fixtures for finanzas tests."""

import tempfile
import os
import time
from datetime import datetime, UTC

import pytest
from dateutil import tz

from finanzas.database.factories import create_sqlite_database
from finanzas.domain.credit import CreditService
from finanzas.domain.fixed_expense import FixedExpenseService
from finanzas.domain.stats import StatsService
from finanzas.domain.transaction import TransactionService
from finanzas.utils import date_parser

# Midnight has passed in UTC but it is still May 31st at UTC-3
MONTH_BOUNDARY_NOW = datetime(2024, 6, 1, 1, 0, tzinfo=UTC)


class _BoundaryDateTime(datetime):
    """datetime whose now() is fixed at MONTH_BOUNDARY_NOW."""

    @classmethod
    def now(cls, tz=None):
        return MONTH_BOUNDARY_NOW.astimezone(tz)


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
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def fixed_expense_service(temp_db):
    """Create a FixedExpenseService with a temporary database."""
    return FixedExpenseService(temp_db)


@pytest.fixture
def credit_service(temp_db):
    """Create a CreditService with a temporary database."""
    return CreditService(temp_db)


@pytest.fixture
def stats_service(temp_db):
    """Create a StatsService that classifies months in UTC."""
    return StatsService(temp_db, tz=tz.UTC)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(temp_db):
    """Global CLI options pointing at the temporary database, months in UTC."""
    return ["--db-path", temp_db.database_path, "--timezone", "UTC"]


@pytest.fixture
def month_boundary_clock(monkeypatch):
    """Run with the local zone at UTC-3 and the clock at MONTH_BOUNDARY_NOW."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    # POSIX zone string, no tz database needed
    monkeypatch.setenv("TZ", "UYT+3")
    time.tzset()
    monkeypatch.setattr(date_parser, "datetime", _BoundaryDateTime)

    yield MONTH_BOUNDARY_NOW

    monkeypatch.undo()
    time.tzset()
