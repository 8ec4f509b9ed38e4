"""Abstract interface for durable key-value storage."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """String-keyed storage of string values."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""
        pass
