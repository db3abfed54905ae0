"""Abstract key-value store interface."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Durable store of opaque string values under fixed keys."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def get_value(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None if absent."""
        pass

    @abstractmethod
    def set_value(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def delete_value(self, key: str) -> None:
        """Remove key. Missing keys are ignored."""
        pass

    @abstractmethod
    def list_keys(self) -> list[str]:
        """List all stored keys."""
        pass
