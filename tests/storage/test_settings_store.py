"""Tests for reader settings persistence."""

import json

import pytest
from pydantic import ValidationError

from speedread.schemas.settings import ReaderSettings
from speedread.services.storage import (
    JsonFileKeyValueStore,
    MemoryKeyValueStore,
    SettingsStore,
    StorageError,
    merge_settings,
)
from speedread.services.storage.settings_store import SETTINGS_KEY


class FailingStore:
    """Key-value store whose every operation fails."""

    def get(self, key):
        raise StorageError("unavailable")

    def set(self, key, value):
        raise StorageError("unavailable")

    def delete(self, key):
        raise OSError("read-only")


@pytest.fixture
def kv():
    return MemoryKeyValueStore()


@pytest.fixture
def store(kv):
    return SettingsStore(kv)


# =============================================================================
# Merge Tests
# =============================================================================


class TestMergeSettings:
    def test_empty_gives_defaults(self):
        assert merge_settings({}) == ReaderSettings()

    def test_camel_case_keys(self):
        merged = merge_settings({"wpm": 500, "chunkSize": 3, "orpColor": "#000000"})
        assert merged.wpm == 500
        assert merged.chunk_size == 3
        assert merged.orp_color == "#000000"

    def test_invalid_field_falls_back(self):
        merged = merge_settings({"wpm": 500, "chunkSize": 0})
        assert merged.wpm == 500
        assert merged.chunk_size == 1

    def test_several_invalid_fields(self):
        merged = merge_settings({"wpm": 5, "theme": "neon", "fontSize": "xl"})
        assert merged.wpm == 300
        assert merged.theme == "system"
        assert merged.font_size == "xl"

    def test_unknown_keys_ignored(self):
        merged = merge_settings({"legacyOption": True, "theme": "dark"})
        assert merged.theme == "dark"


# =============================================================================
# Store Tests
# =============================================================================


class TestSettingsStore:
    def test_defaults_when_empty(self, store):
        assert store.get() == ReaderSettings()

    def test_reads_stored_settings(self, kv):
        kv.set(SETTINGS_KEY, json.dumps({"wpm": 450, "adaptiveTiming": False}))
        settings = SettingsStore(kv).get()
        assert settings.wpm == 450
        assert settings.adaptive_timing is False

    @pytest.mark.parametrize("raw", ["{not json", "[1, 2]", '"text"'])
    def test_malformed_value_gives_defaults(self, kv, raw):
        kv.set(SETTINGS_KEY, raw)
        assert SettingsStore(kv).get() == ReaderSettings()

    def test_update_persists_camel_case(self, store, kv):
        store.update(chunk_size=2, wpm=600)
        stored = json.loads(kv.get(SETTINGS_KEY))
        assert stored["chunkSize"] == 2
        assert stored["wpm"] == 600
        assert SettingsStore(kv).get().chunk_size == 2

    def test_update_rejects_invalid_value(self, store):
        with pytest.raises(ValidationError):
            store.update(wpm=5000)
        assert store.get().wpm == 300

    def test_update_notifies(self, store):
        calls = []
        store.subscribe(lambda: calls.append(store.get().wpm))
        store.update(wpm=400)
        assert calls == [400]

    def test_reset(self, store):
        store.update(theme="dark")
        assert store.reset() == ReaderSettings()
        assert store.get().theme == "system"

    def test_reload_sees_external_write(self, store, kv):
        store.get()
        kv.set(SETTINGS_KEY, json.dumps({"wpm": 700}))
        assert store.get().wpm == 300
        assert store.reload().wpm == 700


class TestStorageFailures:
    def test_failing_store_never_raises(self):
        store = SettingsStore(FailingStore())
        assert store.get() == ReaderSettings()
        updated = store.update(wpm=800)
        assert updated.wpm == 800
        assert store.get().wpm == 800

    def test_quota_exceeded_keeps_memory_state(self):
        store = SettingsStore(MemoryKeyValueStore(max_bytes=10))
        store.update(theme="dark")
        assert store.get().theme == "dark"

    def test_failed_write_logs_warning(self, caplog):
        store = SettingsStore(FailingStore())
        with caplog.at_level("WARNING"):
            store.update(wpm=400)
        assert "Could not persist settings" in caplog.text

    def test_undecodable_file_gives_defaults(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_bytes(b"\xff\xfe{\"a\": 1}")
        store = SettingsStore(JsonFileKeyValueStore(path))
        assert store.get() == ReaderSettings()
