"""Tests for the content store service."""

import pytest

from speedread.models import StoredContent
from speedread.services.content_store import ContentStore, is_content_id


@pytest.fixture
def store(db_session, test_settings, clock):
    return ContentStore(db_session, test_settings, clock=clock)


class TestContentStore:
    def test_create_sets_expiry(self, store, clock):
        row = store.create("text", source="paste")
        assert is_content_id(row.id)
        assert row.created_at == int(clock.now * 1000)
        assert row.expires_at == row.created_at + 3600 * 1000
        assert row.source == "paste"

    def test_get(self, store):
        row = store.create("text")
        assert store.get(row.id).text == "text"

    def test_get_expired_purges(self, store, clock, db_session):
        row = store.create("text")
        clock.advance(3600)
        assert store.get(row.id) is None
        assert db_session.query(StoredContent).count() == 0

    def test_get_malformed_id(self, store):
        assert store.get("../etc/passwd") is None

    def test_delete_is_idempotent(self, store):
        row = store.create("text")
        store.delete(row.id)
        store.delete(row.id)
        assert store.get(row.id) is None

    def test_purge_expired(self, store, clock):
        store.create("old")
        clock.advance(1800)
        fresh = store.create("fresh")
        clock.advance(1800)
        assert store.purge_expired() == 1
        assert store.get(fresh.id) is not None


@pytest.mark.parametrize(
    "value,expected",
    [
        ("3f2b8c1e-9a4d-4e6f-8b7a-1c2d3e4f5a6b", True),
        ("3F2B8C1E-9A4D-4E6F-8B7A-1C2D3E4F5A6B", False),
        ("3f2b8c1e", False),
        ("", False),
    ],
)
def test_is_content_id(value, expected):
    assert is_content_id(value) is expected
