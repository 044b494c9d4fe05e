"""Shared pytest fixtures and test helpers."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from speedread.config import Settings, get_settings
from speedread.database import Base, get_db
from speedread.main import create_app


class FakeClock:
    """Manually advanced clock returning epoch seconds."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTimerHandle:
    def __init__(self, delay: float, callback) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Scheduler that records timers and fires them on demand."""

    def __init__(self) -> None:
        self.handles: list[FakeTimerHandle] = []

    def call_later(self, delay: float, callback) -> FakeTimerHandle:
        handle = FakeTimerHandle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeTimerHandle]:
        return [h for h in self.handles if not h.cancelled and h.callback is not None]

    def fire(self) -> FakeTimerHandle:
        """Run the single pending timer."""
        pending = self.pending
        assert len(pending) == 1, f"expected one pending timer, got {len(pending)}"
        handle = pending[0]
        callback, handle.callback = handle.callback, None
        callback()
        return handle

    def run_until_idle(self, limit: int = 10_000) -> int:
        fired = 0
        while self.pending and fired < limit:
            self.fire()
            fired += 1
        return fired


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def test_settings():
    """Settings for API tests: one allowed origin and a small size limit."""
    return Settings(
        database_url="sqlite://",
        allowed_origin="http://localhost:3000",
        max_content_size=1000,
        content_ttl_seconds=3600,
        rate_limit_max=10,
        rate_limit_window_seconds=60,
    )


@pytest.fixture
def db_session():
    """In-memory SQLite session shared across threads for one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def app(test_settings, db_session):
    """Application wired to the in-memory database and test settings."""
    application = create_app(test_settings)

    def override_get_db():
        yield db_session

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_settings] = lambda: test_settings
    return application


@pytest.fixture
def client(app):
    return TestClient(app)
