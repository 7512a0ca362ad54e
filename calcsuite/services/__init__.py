"""Services package."""

from calcsuite.services.rates import (
    HttpRateProvider,
    RateProviderError,
    RateProviderInterface,
    RateTableManager,
)
from calcsuite.services.solver import GeminiMathSolver, SolverError
from calcsuite.services.storage import (
    CorruptStoreError,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStoreInterface,
    StorageError,
)

__all__ = [
    # Rate services
    "HttpRateProvider",
    "RateProviderError",
    "RateProviderInterface",
    "RateTableManager",
    # Solver
    "GeminiMathSolver",
    "SolverError",
    # Storage services
    "CorruptStoreError",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStoreInterface",
    "StorageError",
]
