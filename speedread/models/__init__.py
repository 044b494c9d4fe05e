"""Database models and shared enums for SpeedRead."""

from speedread.models.content import StoredContent
from speedread.models.enums import Direction, ReaderStatus
from speedread.models.rate_limit import RateLimitHit

__all__ = [
    "StoredContent",
    "RateLimitHit",
    "ReaderStatus",
    "Direction",
]
