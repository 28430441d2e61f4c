"""Database layer for tabuledge application."""

from tabuledge.database.base import Database
from tabuledge.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
