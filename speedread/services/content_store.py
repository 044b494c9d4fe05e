"""Shared text blobs with a time-to-live."""

import logging
import re
import time
from typing import Callable, Optional

from sqlalchemy import delete
from sqlalchemy.orm import Session

from speedread.config import Settings
from speedread.models import StoredContent

logger = logging.getLogger(__name__)

# Lowercase canonical form, as produced by str(uuid.uuid4())
CONTENT_ID_PATTERN = re.compile(r"^[a-f0-9-]{36}$")


def is_content_id(value: str) -> bool:
    return bool(CONTENT_ID_PATTERN.match(value))


class ContentStore:
    """
    Create, read and delete stored content rows.

    Expired rows are never returned and are removed when they are touched
    or when ``purge_expired`` runs.

    Example usage:
        >>> store = ContentStore(db, get_settings())
        >>> row = store.create("Some text", source="paste")
        >>> store.get(row.id).text
        'Some text'
    """

    def __init__(
        self,
        db: Session,
        settings: Settings,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.db = db
        self.settings = settings
        self._clock = clock

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def create(self, text: str, source: Optional[str] = None) -> StoredContent:
        now = self._now_ms()
        row = StoredContent(
            text=text,
            source=source,
            created_at=now,
            expires_at=now + self.settings.content_ttl_seconds * 1000,
        )
        self.db.add(row)
        self.db.commit()
        logger.info("Stored content %s (%d chars)", row.id, len(text))
        return row

    def get(self, content_id: str) -> Optional[StoredContent]:
        """Return the live row for ``content_id``, or None if absent or expired."""
        if not is_content_id(content_id):
            return None

        row = self.db.get(StoredContent, content_id)
        if row is None:
            return None

        if row.expires_at <= self._now_ms():
            self.db.delete(row)
            self.db.commit()
            logger.debug("Purged expired content %s on read", content_id)
            return None
        return row

    def delete(self, content_id: str) -> None:
        """Remove the row if present. Deleting a missing id is not an error."""
        self.db.execute(delete(StoredContent).where(StoredContent.id == content_id))
        self.db.commit()

    def purge_expired(self) -> int:
        result = self.db.execute(
            delete(StoredContent).where(StoredContent.expires_at <= self._now_ms())
        )
        self.db.commit()
        if result.rowcount:
            logger.info("Purged %d expired content rows", result.rowcount)
        return result.rowcount
