"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from finanzas.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance for the on-device ledger.

    Args:
        database_path: Path to SQLite database file. If None, checks FINANZAS_DB_PATH
            environment variable, then defaults to ~/.finanzas/finanzas.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("FINANZAS_DB_PATH")

    if database_path is None:
        # Default to ~/.finanzas/finanzas.db
        home = Path.home()
        db_dir = home / ".finanzas"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "finanzas.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)


def create_database(
    database_url: Optional[str] = None, database_path: Optional[str] = None
) -> SQLAlchemyDatabase:
    """Create a database instance from a URL, falling back to local SQLite.

    Args:
        database_url: SQLAlchemy URL of a relational backend. If None, checks
            FINANZAS_DATABASE_URL environment variable.
        database_path: SQLite path used when no URL is configured

    Returns:
        SQLAlchemyDatabase instance
    """
    if database_url is None:
        database_url = os.environ.get("FINANZAS_DATABASE_URL")

    if database_url:
        return SQLAlchemyDatabase(database_url)
    return create_sqlite_database(database_path=database_path)
