"""Local persistence for reader settings and recent texts."""

from .cache import ObservableCache
from .key_value import (
    JsonFileKeyValueStore,
    KeyValueStore,
    MemoryKeyValueStore,
    StorageError,
    StorageQuotaExceeded,
    open_local_store,
)
from .recent_texts import MAX_RECENT, RecentTextsStore
from .settings_store import SettingsStore, merge_settings

__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "StorageError",
    "StorageQuotaExceeded",
    "open_local_store",
    "ObservableCache",
    "SettingsStore",
    "merge_settings",
    "RecentTextsStore",
    "MAX_RECENT",
]
