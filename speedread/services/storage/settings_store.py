"""Reader settings persisted in a key-value store."""

import json
import logging
from typing import Any, Callable, Dict

from pydantic import ValidationError
from pydantic.alias_generators import to_camel, to_snake

from speedread.schemas.settings import ReaderSettings

from .cache import ObservableCache
from .key_value import KeyValueStore, StorageError

logger = logging.getLogger(__name__)

SETTINGS_KEY = "speedread-settings"


def merge_settings(stored: Dict[str, Any]) -> ReaderSettings:
    """
    Merge stored settings over the defaults.

    Unknown keys are ignored and keys with invalid values fall back to
    their defaults, so one bad field never discards the rest.

    Examples:
        >>> merge_settings({"wpm": 500, "chunkSize": 0}).chunk_size
        1
    """
    data = dict(stored)
    for _ in range(len(data) + 1):
        try:
            return ReaderSettings.model_validate(data)
        except ValidationError as e:
            bad = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
            remaining = {
                key: value
                for key, value in data.items()
                if key not in bad and to_camel(key) not in bad and to_snake(key) not in bad
            }
            if remaining == data:
                break
            data = remaining
    return ReaderSettings()


class SettingsStore:
    """
    Load and save reader settings.

    Storage failures never raise: reads fall back to defaults and failed
    writes are logged while the in-memory settings stay current.
    """

    def __init__(self, store: KeyValueStore, key: str = SETTINGS_KEY) -> None:
        self._store = store
        self._key = key
        self._cache: ObservableCache[ReaderSettings] = ObservableCache(self._load)

    def _load(self) -> ReaderSettings:
        try:
            raw = self._store.get(self._key)
        except (StorageError, OSError) as e:
            logger.warning("Could not read settings, using defaults: %s", e)
            return ReaderSettings()

        if not raw:
            return ReaderSettings()

        try:
            stored = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored settings are not valid JSON, using defaults")
            return ReaderSettings()

        if not isinstance(stored, dict):
            return ReaderSettings()
        return merge_settings(stored)

    def get(self) -> ReaderSettings:
        return self._cache.get()

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        return self._cache.subscribe(callback)

    def reload(self) -> ReaderSettings:
        """Drop the cached value and read the store again."""
        self._cache.invalidate()
        self._cache.notify()
        return self.get()

    def save(self, settings: ReaderSettings) -> ReaderSettings:
        try:
            self._store.set(self._key, settings.model_dump_json(by_alias=True))
        except (StorageError, OSError) as e:
            logger.warning("Could not persist settings: %s", e)

        self._cache.prime(settings)
        self._cache.notify()
        return settings

    def update(self, **changes: Any) -> ReaderSettings:
        """
        Apply field changes (snake_case names) and save.

        Raises:
            pydantic.ValidationError: If a changed value is out of range.
        """
        merged = self.get().model_dump()
        merged.update(changes)
        return self.save(ReaderSettings.model_validate(merged))

    def reset(self) -> ReaderSettings:
        return self.save(ReaderSettings())
