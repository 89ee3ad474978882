"""SQL-backed persistence for :class:`~userdao.models.User` records."""

from __future__ import annotations

import logging
import sqlite3
from typing import ContextManager, List, Optional, Protocol

from .datasource import DataSource
from .models import User

logger = logging.getLogger("userdao.dao")


class DataAccessError(Exception):
    """Raised when a connection or statement fails."""


class DuplicateKeyError(DataAccessError):
    """Raised when inserting a user whose id is already stored."""


class EmptyResultError(DataAccessError):
    """Raised when a lookup expected one row but found none."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"No user found with id '{user_id}'")
        self.user_id = user_id


class UserDao(Protocol):
    """Persistence operations for :class:`User` records."""

    def set_data_source(self, data_source: DataSource) -> None:
        ...

    def add(self, user: User) -> None:
        ...

    def get(self, user_id: str) -> User:
        ...

    def delete_all(self) -> None:
        ...

    def get_count(self) -> int:
        ...

    def get_all(self) -> List[User]:
        ...


class SqliteUserDao:
    """Maps :class:`User` onto the ``users(id, name, password)`` table."""

    def __init__(self, data_source: Optional[DataSource] = None) -> None:
        self._data_source = data_source

    def set_data_source(self, data_source: DataSource) -> None:
        self._data_source = data_source

    def add(self, user: User) -> None:
        try:
            with self._connection() as conn:
                conn.execute(
                    "INSERT INTO users (id, name, password) VALUES (?, ?, ?)",
                    (user.id, user.name, user.password),
                )
        except sqlite3.IntegrityError as exc:
            if "UNIQUE constraint failed" in str(exc):
                raise DuplicateKeyError(f"A user with id '{user.id}' already exists") from exc
            raise DataAccessError(f"Failed to insert user '{user.id}': {exc}") from exc
        except sqlite3.Error as exc:
            raise DataAccessError(f"Failed to insert user '{user.id}'") from exc
        logger.debug("Inserted user %s", user.id)

    def get(self, user_id: str) -> User:
        try:
            with self._connection() as conn:
                row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        except sqlite3.Error as exc:
            raise DataAccessError(f"Failed to load user '{user_id}'") from exc
        if row is None:
            raise EmptyResultError(user_id)
        return self._row_to_user(row)

    def delete_all(self) -> None:
        try:
            with self._connection() as conn:
                deleted = conn.execute("DELETE FROM users").rowcount
        except sqlite3.Error as exc:
            raise DataAccessError("Failed to delete users") from exc
        logger.info("Deleted %s user(s)", deleted)

    def get_count(self) -> int:
        try:
            with self._connection() as conn:
                row = conn.execute("SELECT COUNT(*) FROM users").fetchone()
        except sqlite3.Error as exc:
            raise DataAccessError("Failed to count users") from exc
        return int(row[0])

    def get_all(self) -> List[User]:
        try:
            with self._connection() as conn:
                rows = conn.execute("SELECT * FROM users ORDER BY id ASC").fetchall()
        except sqlite3.Error as exc:
            raise DataAccessError("Failed to list users") from exc
        return [self._row_to_user(row) for row in rows]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _connection(self) -> ContextManager[sqlite3.Connection]:
        if self._data_source is None:
            raise DataAccessError("No data source configured; call set_data_source() first")
        return self._data_source.connection()

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(
            id=str(row["id"]),
            name=str(row["name"]),
            password=str(row["password"]),
        )


__all__ = [
    "DataAccessError",
    "DuplicateKeyError",
    "EmptyResultError",
    "SqliteUserDao",
    "UserDao",
]
