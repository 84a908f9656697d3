"""Database factory functions for creating database instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from fintrack.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENV_VAR = "FINTRACK_DB_PATH"
DEFAULT_DB_PATH = Path("data") / "fintrack.db"


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks FINTRACK_DB_PATH
            environment variable, then defaults to data/fintrack.db relative to the
            working directory

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get(DB_PATH_ENV_VAR)

    if database_path is None:
        DEFAULT_DB_PATH.parent.mkdir(parents=True, exist_ok=True)
        database_path = str(DEFAULT_DB_PATH)

    logger.debug(f"Using database at {database_path}")
    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
