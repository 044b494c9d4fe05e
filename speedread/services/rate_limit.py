"""Per-source sliding-window rate limiting backed by the database."""

import logging
import time
from typing import Callable

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from speedread.models import RateLimitHit

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Allow at most ``max_requests`` per source within ``window_seconds``.

    A request is recorded only when it is allowed, so rejected requests do
    not extend the lockout.
    """

    def __init__(
        self,
        db: Session,
        max_requests: int,
        window_seconds: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.db = db
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock

    def check(self, source_key: str) -> bool:
        """Record a hit for ``source_key`` and return True if it is allowed."""
        now = int(self._clock())
        window_start = now - self.window_seconds

        self.db.execute(
            delete(RateLimitHit).where(
                RateLimitHit.source_key == source_key,
                RateLimitHit.requested_at <= window_start,
            )
        )
        count = self.db.scalar(
            select(func.count())
            .select_from(RateLimitHit)
            .where(RateLimitHit.source_key == source_key)
        )

        if count >= self.max_requests:
            self.db.commit()
            logger.warning("Rate limit exceeded for %s", source_key)
            return False

        self.db.add(RateLimitHit(source_key=source_key, requested_at=now))
        self.db.commit()
        return True
