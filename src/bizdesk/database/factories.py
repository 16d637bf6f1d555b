"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from bizdesk.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks BIZDESK_DB_PATH
            environment variable, then defaults to ~/.bizdesk/bizdesk.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("BIZDESK_DB_PATH")

    if database_path is None:
        # Default to ~/.bizdesk/bizdesk.db
        home = Path.home()
        db_dir = home / ".bizdesk"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "bizdesk.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)


def create_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a database instance from the environment.

    An explicit path always selects SQLite. Otherwise BIZDESK_DATABASE_URL, when
    set, selects any SQLAlchemy backend; failing that the SQLite defaults of
    create_sqlite_database apply.
    """
    if database_path is None:
        database_url = os.environ.get("BIZDESK_DATABASE_URL")
        if database_url:
            return SQLAlchemyDatabase(database_url)
    return create_sqlite_database(database_path=database_path)
