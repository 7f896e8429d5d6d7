"""Store factory functions."""

import os
from pathlib import Path
from typing import Optional

from cageledger.database.sqlalchemy_db import SQLAlchemyStore

DB_PATH_ENV = "CAGELEDGER_DB_PATH"


def default_database_path() -> str:
    """Return ``~/.cageledger/cageledger.db``, creating the directory."""
    db_dir = Path.home() / ".cageledger"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "cageledger.db")


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyStore:
    """Create a SQLite-backed store.

    Args:
        database_path: Path to SQLite database file. If None, checks CAGELEDGER_DB_PATH
            environment variable, then defaults to ~/.cageledger/cageledger.db

    Returns:
        SQLAlchemyStore instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        database_path = default_database_path()

    return SQLAlchemyStore(f"sqlite:///{database_path}")
