"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from bankrec.database.sqlalchemy_db import DEFAULT_USER_ID, SQLAlchemyDatabase

DEFAULT_DB_DIR = ".bankrec"
DEFAULT_DB_NAME = "bankrec.db"


def default_database_path() -> str:
    """Return ~/.bankrec/bankrec.db, creating the directory if needed."""
    db_dir = Path.home() / DEFAULT_DB_DIR
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / DEFAULT_DB_NAME)


def create_sqlite_database(
    database_path: Optional[str] = None, user_id: Optional[str] = None
) -> SQLAlchemyDatabase:
    """Create a SQLite database instance scoped to one user.

    Args:
        database_path: Path to SQLite database file. Falls back to
            BANKREC_DB_PATH, then to ~/.bankrec/bankrec.db
        user_id: Tenant that reads and writes are scoped to. Falls back to
            BANKREC_USER, then to "local"

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    database_path = database_path or os.environ.get("BANKREC_DB_PATH") or default_database_path()
    user_id = user_id or os.environ.get("BANKREC_USER") or DEFAULT_USER_ID
    return SQLAlchemyDatabase(f"sqlite:///{database_path}", user_id=user_id)
