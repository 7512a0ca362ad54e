"""
Storage Services Package

Provides the abstract key-value interface and concrete implementations.
"""

from calcsuite.services.storage.interface import (
    CorruptStoreError,
    KeyValueStoreInterface,
    StorageError,
)
from calcsuite.services.storage.json_file import JsonFileKeyValueStore
from calcsuite.services.storage.memory import InMemoryKeyValueStore

__all__ = [
    # Interface
    "KeyValueStoreInterface",
    # Exceptions
    "CorruptStoreError",
    "StorageError",
    # Implementations
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
