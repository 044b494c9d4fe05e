"""Rate limit bookkeeping model."""

from sqlalchemy import BigInteger, Column, Index, Integer, String

from speedread.database import Base


class RateLimitHit(Base):
    """One accepted request from a source, in epoch seconds."""

    __tablename__ = "rate_limit_hits"

    id = Column(Integer, primary_key=True, autoincrement=True)
    source_key = Column(String(255), nullable=False)
    requested_at = Column(BigInteger, nullable=False)

    __table_args__ = (Index("ix_rate_limit_hits_source_time", "source_key", "requested_at"),)
