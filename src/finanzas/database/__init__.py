"""Database layer for finanzas application."""

from finanzas.database.base import Database
from finanzas.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
