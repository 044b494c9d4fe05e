"""Recently read texts persisted in a key-value store.

The list of entries lives under one key; each full text body is stored
under its own key so bodies can be removed independently.
"""

import json
import logging
import time
import uuid
from typing import Callable, List, Optional

from pydantic import TypeAdapter, ValidationError

from speedread.schemas.recent import RecentText
from speedread.services.tokenizer import count_words, create_preview

from .cache import ObservableCache
from .key_value import KeyValueStore, StorageError

logger = logging.getLogger(__name__)

RECENT_TEXTS_KEY = "speedread-recent-texts"
TEXT_KEY_PREFIX = "speedread-text-"
MAX_RECENT = 10

_entries_adapter = TypeAdapter(List[RecentText])


def _generate_id() -> str:
    return uuid.uuid4().hex[:8]


def text_key(text_id: str) -> str:
    return f"{TEXT_KEY_PREFIX}{text_id}"


class RecentTextsStore:
    """
    Bounded most-recent-first list of pasted texts.

    Storage failures are logged and never raised; the in-memory list stays
    current for the session even when it could not be persisted.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = _generate_id,
        max_entries: int = MAX_RECENT,
    ) -> None:
        self._store = store
        self._clock = clock
        self._id_factory = id_factory
        self.max_entries = max_entries
        self._cache: ObservableCache[List[RecentText]] = ObservableCache(self._load)

    def _load(self) -> List[RecentText]:
        try:
            raw = self._store.get(RECENT_TEXTS_KEY)
        except (StorageError, OSError) as e:
            logger.warning("Could not read recent texts: %s", e)
            return []

        if not raw:
            return []

        try:
            return _entries_adapter.validate_json(raw)
        except ValidationError:
            logger.warning("Stored recent texts are malformed, starting empty")
            return []

    def _save(self, entries: List[RecentText]) -> None:
        try:
            payload = json.dumps([e.model_dump(by_alias=True) for e in entries])
            self._store.set(RECENT_TEXTS_KEY, payload)
        except (StorageError, OSError) as e:
            logger.warning("Could not persist recent texts: %s", e)

        self._cache.prime(entries)
        self._cache.notify()

    def _delete_body(self, text_id: str) -> None:
        try:
            self._store.delete(text_key(text_id))
        except (StorageError, OSError) as e:
            logger.warning("Could not remove stored text %s: %s", text_id, e)

    def list(self) -> List[RecentText]:
        return list(self._cache.get())

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        return self._cache.subscribe(callback)

    def add_text(self, text: str) -> str:
        """
        Remember a text and return its id.

        The id is returned even when the body could not be stored.
        """
        text_id = self._id_factory()
        entry = RecentText(
            id=text_id,
            preview=create_preview(text),
            word_count=count_words(text),
            created_at=int(self._clock() * 1000),
        )

        try:
            self._store.set(text_key(text_id), text)
        except (StorageError, OSError) as e:
            logger.warning("Could not store text %s: %s", text_id, e)

        entries = [entry] + self.list()
        for evicted in entries[self.max_entries:]:
            self._delete_body(evicted.id)
        self._save(entries[:self.max_entries])
        return text_id

    def get_text(self, text_id: str) -> Optional[str]:
        try:
            return self._store.get(text_key(text_id))
        except (StorageError, OSError) as e:
            logger.warning("Could not read stored text %s: %s", text_id, e)
            return None

    def remove_text(self, text_id: str) -> None:
        self._delete_body(text_id)
        self._save([e for e in self.list() if e.id != text_id])

    def clear_all(self) -> None:
        for entry in self.list():
            self._delete_body(entry.id)
        self._save([])
