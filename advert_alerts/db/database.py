from __future__ import annotations

from pathlib import Path

from loguru import logger
from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session

from advert_alerts.config import get_settings


class Base(DeclarativeBase):
    pass


def get_engine(database_url: str | None = None) -> Engine:
    url = make_url(database_url or get_settings().database_url)
    # SQLite will not create missing parent directories for a file database
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url)


def get_sync_session() -> Session:
    return Session(get_engine())


def init_db(engine: Engine | None = None) -> None:
    """Create all tables that do not exist yet."""
    # Register models on Base.metadata
    import advert_alerts.models  # noqa: F401

    Base.metadata.create_all(engine or get_engine())
    logger.info("Database initialized")
