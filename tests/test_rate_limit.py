"""Tests for the sliding-window rate limiter."""

import pytest

from speedread.models import RateLimitHit
from speedread.services.rate_limit import RateLimiter


@pytest.fixture
def limiter(db_session, clock):
    return RateLimiter(db_session, max_requests=10, window_seconds=60, clock=clock)


def test_allows_up_to_limit(limiter):
    assert all(limiter.check("a") for _ in range(10))
    assert limiter.check("a") is False


def test_rejected_requests_are_not_recorded(limiter, db_session):
    for _ in range(15):
        limiter.check("a")
    assert db_session.query(RateLimitHit).count() == 10


def test_window_slides(limiter, clock):
    for _ in range(5):
        limiter.check("a")
    clock.advance(30)
    for _ in range(5):
        limiter.check("a")

    clock.advance(29)
    assert limiter.check("a") is False

    # The first five hits leave the window
    clock.advance(1)
    assert limiter.check("a") is True


def test_sources_are_independent(limiter):
    for _ in range(10):
        limiter.check("a")
    assert limiter.check("b") is True


def test_old_hits_are_purged(limiter, clock, db_session):
    for _ in range(3):
        limiter.check("a")
    clock.advance(120)
    limiter.check("a")
    assert db_session.query(RateLimitHit).count() == 1
