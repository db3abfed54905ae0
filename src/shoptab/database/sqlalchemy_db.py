"""Generic SQLAlchemy key-value store implementation."""

import logging
from typing import Optional
from sqlalchemy.orm import Session

from shoptab.database.base import KeyValueStore
from shoptab.database.models import KeyValueEntry, create_session_factory

logger = logging.getLogger(__name__)


class SQLAlchemyStore(KeyValueStore):
    """SQLAlchemy-based implementation of KeyValueStore interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy store.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the store."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the store."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def get_value(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None if absent."""
        session = self._get_session()
        # Another process may have rewritten the blob since it was cached
        entry = session.get(KeyValueEntry, key, populate_existing=True)
        if entry is None:
            return None
        return entry.value

    def set_value(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        session = self._get_session()
        entry = session.get(KeyValueEntry, key)
        if entry is None:
            session.add(KeyValueEntry(key=key, value=value))
        else:
            entry.value = value
        session.commit()
        logger.debug(f"Wrote {len(value)} characters to '{key}'")

    def delete_value(self, key: str) -> None:
        """Remove key. Missing keys are ignored."""
        session = self._get_session()
        entry = session.get(KeyValueEntry, key)
        if entry is None:
            return
        session.delete(entry)
        session.commit()
        logger.debug(f"Deleted '{key}'")

    def list_keys(self) -> list[str]:
        """List all stored keys."""
        session = self._get_session()
        entries = session.query(KeyValueEntry).order_by(KeyValueEntry.key).all()
        return [entry.key for entry in entries]
