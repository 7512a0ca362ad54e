"""
Abstract Key-Value Store Interface

DESIGN DECISION: We define an abstract interface for persistence.
This allows us to:
1. Swap the JSON file for browser storage or a database later
2. Use in-memory storage for testing
3. Keep the biometric log decoupled from where its data lives

The interface is intentionally tiny: one string value per key.
Serialization is the caller's concern.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStoreInterface(ABC):
    """
    Abstract interface for a persistent key-value store.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Returns:
            The stored string, or None if the key was never written

        Raises:
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Remove a key.

        Returns:
            True if the key existed
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class CorruptStoreError(StorageError):
    """Stored content exists but cannot be parsed."""
    pass
