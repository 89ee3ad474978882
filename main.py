"""Command-line demonstration of the user data-access layer."""

from __future__ import annotations
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from userdao.config import load_settings, resolve_config_path, resolve_database_path
from userdao.dao import DuplicateKeyError, SqliteUserDao
from userdao.datasource import SQLiteDataSource, ensure_schema
from userdao.models import User

logger = logging.getLogger("userdao.main")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Register one user and read it back")
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to the YAML configuration (defaults to USERDAO_CONFIG or config/userdao.yaml)",
    )
    parser.add_argument(
        "--db",
        dest="db_path",
        default=None,
        help="Path to the SQLite database (overrides USERDAO_DB_PATH and the configuration file)",
    )
    parser.add_argument("--id", dest="user_id", default="tyrano", help="Identifier of the demo user")
    parser.add_argument("--name", default="최영진", help="Display name of the demo user")
    parser.add_argument("--password", default="암호1", help="Password stored for the demo user")
    return parser.parse_args(list(argv) if argv is not None else None)


def _resolve_db_path(args: argparse.Namespace) -> Path:
    db_env = args.db_path or os.getenv("USERDAO_DB_PATH")
    if db_env:
        return resolve_database_path(db_env)
    config_path = resolve_config_path(args.config_path or os.getenv("USERDAO_CONFIG"))
    return load_settings(config_path).database_path


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for CLI usage."""

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    args = _parse_args(argv)
    db_path = _resolve_db_path(args)

    data_source = SQLiteDataSource(db_path)
    ensure_schema(data_source)
    logger.info("Using database at %s", db_path)

    dao = SqliteUserDao()
    dao.set_data_source(data_source)

    user = User()
    user.id = args.user_id
    user.name = args.name
    user.password = args.password

    try:
        dao.add(user)
    except DuplicateKeyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"{user.id} registered")

    fetched = dao.get(user.id)
    print(f"{fetched.id} : {fetched.name} : {fetched.password}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
