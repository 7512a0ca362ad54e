"""
JSON File Key-Value Store

All keys live in one JSON object on disk. Every write rewrites the
file through a temporary sibling and an atomic rename, so a crash
mid-write leaves the previous content intact.

TRADEOFFS:
- Whole-file rewrite per write (fine for a handful of small keys)
- Single process only (no file locking)
"""

import json
import os
from pathlib import Path
from typing import Optional, Union

from calcsuite.audit import get_logger
from calcsuite.config import get_settings
from calcsuite.services.storage.interface import (
    CorruptStoreError,
    KeyValueStoreInterface,
    StorageError,
)


logger = get_logger(__name__)


class JsonFileKeyValueStore(KeyValueStoreInterface):
    """Key-value store persisted as a JSON object in a single file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Args:
            path: File to use. Defaults to the configured store path.
        """
        self._path = Path(path) if path is not None else get_settings().storage.store_path

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e

        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptStoreError(f"{self._path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise CorruptStoreError(f"{self._path} does not hold a JSON object")
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise CorruptStoreError(f"Value under {key!r} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except CorruptStoreError:
            # Overwrite an unreadable file rather than refusing every write
            logger.warning("store_overwriting_corrupt_file", path=str(self._path))
            data = {}
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> bool:
        data = self._read_all()
        if key not in data:
            return False
        del data[key]
        self._write_all(data)
        return True
