"""Store factory functions for creating storage instances."""

import os
from pathlib import Path
from typing import Optional

import click

from shoptab.database.sqlalchemy_db import SQLAlchemyStore

APP_NAME = "shoptab"
DB_FILENAME = "shoptab.db"


def default_database_path() -> Path:
    """Per-user location of the ledger database (platform app-data directory)."""
    return Path(click.get_app_dir(APP_NAME)) / DB_FILENAME


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyStore:
    """Create a SQLite-backed store instance.

    Args:
        database_path: Path to SQLite database file. If None, checks SHOPTAB_DB_PATH
            environment variable, then falls back to default_database_path().
            A leading ~ is expanded.

    Returns:
        SQLAlchemyStore instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("SHOPTAB_DB_PATH")

    path = Path(database_path).expanduser() if database_path else default_database_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    return SQLAlchemyStore(f"sqlite:///{path}")
