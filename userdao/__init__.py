"""Data-access layer for the ``users`` table."""

from __future__ import annotations

from .dao import (
    DataAccessError,
    DuplicateKeyError,
    EmptyResultError,
    SqliteUserDao,
    UserDao,
)
from .datasource import SingleConnectionDataSource, SQLiteDataSource, ensure_schema
from .models import User

__all__ = [
    "DataAccessError",
    "DuplicateKeyError",
    "EmptyResultError",
    "SingleConnectionDataSource",
    "SQLiteDataSource",
    "SqliteUserDao",
    "User",
    "UserDao",
    "ensure_schema",
]
