"""Database layer for spendbook."""

from spendbook.database.base import Database
from spendbook.database.factories import create_sqlite_database
from spendbook.database.seed import bootstrap, seed_default_categories

__all__ = ["Database", "create_sqlite_database", "bootstrap", "seed_default_categories"]
