"""Pydantic schema for recent-text entries."""

from speedread.schemas.settings import CamelModel


class RecentText(CamelModel):
    """One entry of the recent-texts list. ``created_at`` is epoch ms."""

    id: str
    preview: str
    word_count: int
    created_at: int
