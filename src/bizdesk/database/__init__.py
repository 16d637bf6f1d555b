"""Database layer for bizdesk application."""

from bizdesk.database.base import Database
from bizdesk.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
