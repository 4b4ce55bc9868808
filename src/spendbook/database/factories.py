"""Database factory functions for creating database instances."""

import os
from typing import Optional

from spendbook import config
from spendbook.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks SPENDBOOK_DB_PATH
            environment variable, then defaults to ~/.spendbook/spendbook.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get(config.DB_PATH_ENV_VAR)

    if database_path is None:
        db_dir = config.DEFAULT_DB_DIR
        db_dir.mkdir(parents=True, exist_ok=True)
        database_path = str(db_dir / config.DEFAULT_DB_FILENAME)

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
