"""Database engine, session factory and declarative base."""

from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from speedread.config import get_settings


class Base(DeclarativeBase):
    """Declarative base for all SQLAlchemy models."""


def _make_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = _make_engine(get_settings().database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db() -> Iterator[Session]:
    """Yield a database session and close it after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create all tables that do not exist yet."""
    # Importing the models registers them on Base.metadata
    from speedread import models  # noqa: F401

    bind = bind or engine
    if bind.dialect.name == "sqlite" and bind.url.database not in (None, "", ":memory:"):
        Path(bind.url.database).parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind)
