"""Shared pytest fixtures for spendbook tests."""

import os
import tempfile
from datetime import datetime, timedelta

import pytest

from spendbook.database.factories import create_sqlite_database
from spendbook.database.seed import bootstrap
from spendbook.domain.category import CategoryRepository
from spendbook.domain.expense import ExpenseRepository


class FakeClock:
    """Deterministic clock that advances one second per reading."""

    def __init__(self, start: datetime = datetime(2024, 3, 1, 9, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(seconds=1)
        return now


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
def clock():
    """Create a deterministic clock."""
    return FakeClock()


@pytest.fixture
def category_repo(temp_db, clock):
    """Create a CategoryRepository with a temporary database."""
    return CategoryRepository(temp_db, clock=clock)


@pytest.fixture
def expense_repo(temp_db, clock):
    """Create an ExpenseRepository with a temporary database."""
    return ExpenseRepository(temp_db, default_currency="USD", clock=clock)


@pytest.fixture
def sample_categories(temp_db, category_repo):
    """Seed the default categories and return their IDs by name."""
    bootstrap(temp_db)
    return {cat.name: cat.id for cat in category_repo.list_all()}


@pytest.fixture
def food_id(sample_categories):
    """ID of the seeded Food category."""
    return sample_categories["Food"]


@pytest.fixture
def transport_id(sample_categories):
    """ID of the seeded Transport category."""
    return sample_categories["Transport"]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_db_path(tmp_path):
    """Path for a database file created by CLI invocations."""
    return str(tmp_path / "cli.db")
