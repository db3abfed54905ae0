"""Storage layer for shoptab application."""

from shoptab.database.base import KeyValueStore
from shoptab.database.factories import create_sqlite_store

__all__ = ["KeyValueStore", "create_sqlite_store"]
