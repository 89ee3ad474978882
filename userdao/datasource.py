"""Connection factories handed to :meth:`UserDao.set_data_source`."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import ContextManager, Iterator, Optional, Protocol, Union

MEMORY = ":memory:"

USERS_DDL = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    password TEXT NOT NULL
)
"""


class DataSource(Protocol):
    """Anything able to hand out a scoped DB-API connection."""

    def connection(self) -> ContextManager[sqlite3.Connection]:
        ...


def _open(path: Union[str, Path]) -> sqlite3.Connection:
    conn = sqlite3.connect(str(path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def _ensure_directory(path: Union[str, Path]) -> None:
    if str(path) == MEMORY:
        return
    Path(path).parent.mkdir(parents=True, exist_ok=True)


class SQLiteDataSource:
    """Opens a fresh connection for every operation and closes it afterwards."""

    def __init__(self, path: Union[str, Path]) -> None:
        _ensure_directory(path)
        self._path = path

    @property
    def path(self) -> Union[str, Path]:
        return self._path

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        conn = _open(self._path)
        try:
            # Commits on success, rolls back when the body raises.
            with conn:
                yield conn
        finally:
            conn.close()

    def __repr__(self) -> str:
        return f"SQLiteDataSource({str(self._path)!r})"


class SingleConnectionDataSource:
    """Hands out one shared connection.

    With ``suppress_close`` (the default) the connection survives between
    operations until :meth:`close` is called, which keeps ``:memory:``
    databases alive for the lifetime of the data source.
    """

    def __init__(self, path: Union[str, Path] = MEMORY, *, suppress_close: bool = True) -> None:
        _ensure_directory(path)
        self._path = path
        self._suppress_close = suppress_close
        self._conn: Optional[sqlite3.Connection] = None

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        if self._conn is None:
            self._conn = _open(self._path)
        conn = self._conn
        try:
            with conn:
                yield conn
        finally:
            if not self._suppress_close:
                self.close()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "SingleConnectionDataSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def ensure_schema(data_source: DataSource) -> None:
    """Create the ``users`` table if it does not already exist."""

    with data_source.connection() as conn:
        conn.execute(USERS_DDL)


__all__ = [
    "DataSource",
    "MEMORY",
    "SingleConnectionDataSource",
    "SQLiteDataSource",
    "USERS_DDL",
    "ensure_schema",
]
