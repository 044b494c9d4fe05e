"""Stored content model for shared text blobs."""

import uuid

from sqlalchemy import BigInteger, Column, Index, String, Text

from speedread.database import Base


class StoredContent(Base):
    """SQLAlchemy model for text shared through the content store.

    Timestamps are epoch milliseconds, matching the wire format.
    """

    __tablename__ = "stored_content"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    text = Column(Text, nullable=False)
    source = Column(String(255), nullable=True)

    created_at = Column(BigInteger, nullable=False)
    expires_at = Column(BigInteger, nullable=False)

    __table_args__ = (Index("ix_stored_content_expires_at", "expires_at"),)
