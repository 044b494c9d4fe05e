"""
Key-value stores backing local persistence.

Stores hold string values. They raise ``StorageError`` (or ``OSError`` for
the file store) on failure; the settings and recent-text stores catch
those at their boundary.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from speedread.config import get_settings


class StorageError(Exception):
    """A key-value store could not complete an operation."""


class StorageQuotaExceeded(StorageError):
    """Writing a value would exceed the store's quota."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryKeyValueStore:
    """In-memory store with an optional byte quota over keys and values."""

    def __init__(self, max_bytes: Optional[int] = None) -> None:
        self._data: Dict[str, str] = {}
        self.max_bytes = max_bytes

    def _size(self, data: Dict[str, str]) -> int:
        return sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in data.items())

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.max_bytes is not None:
            candidate = dict(self._data)
            candidate[key] = value
            if self._size(candidate) > self.max_bytes:
                raise StorageQuotaExceeded(
                    f"Storing {key!r} would exceed the {self.max_bytes} byte quota"
                )
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileKeyValueStore:
    """Store persisted as one JSON object on disk.

    Writes go to a temporary file that replaces the target, so a crash
    mid-write leaves the previous contents intact.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageError(f"Corrupt store file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Store file {self.path} does not hold an object")
        return data

    def _write_all(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


def open_local_store(path: str | Path | None = None) -> JsonFileKeyValueStore:
    """Open the file store at ``path`` or at the configured ``local_store_path``."""
    if path is None:
        path = get_settings().local_store_path
    return JsonFileKeyValueStore(path)
