"""Persistence layer: the abstract Database and its SQLAlchemy implementation."""

from bankrec.database.base import Database
from bankrec.database.factories import create_sqlite_database
from bankrec.database.sqlalchemy_db import DEFAULT_USER_ID, SQLAlchemyDatabase

__all__ = ["Database", "SQLAlchemyDatabase", "DEFAULT_USER_ID", "create_sqlite_database"]
