"""
Twitter API — Database Engine & Session Management
====================================================

What:  Async SQLAlchemy engine factory, declarative base and schema sync.
Why:   Centralizes all database connection logic in one place.
How:   build_engine() turns Settings into an AsyncEngine; the dependency
       container owns the engine and its session factory (the per-request
       session dependency lives in twitter_api.dependencies).

SQLite notes:
    - File databases use the dialect's default pool class; pool sizing
      arguments are only passed for server databases.
    - In-memory databases live as long as their single connection, so they
      are served through a StaticPool shared by every session.
    - Foreign keys are declared but SQLite does not enforce them unless
      PRAGMA foreign_keys is enabled; deleting a user leaves its posts in place.
    - Timestamps are stored without an offset; UTCDateTime writes them as UTC
      and marks them UTC again on read.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import DateTime
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy.types import TypeDecorator

from twitter_api.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Only the SQLAlchemy repositories touch subclasses of Base; services work
    with the plain entity records from twitter_api.entities.
    """
    pass


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware datetime stored as UTC.

    SQLite keeps no offset, so values come back naive; they are read as UTC
    and every datetime leaving the database is aware.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine described by the settings.

    Echo SQL when db_echo is set or the log level is DEBUG.
    """
    kwargs: Dict[str, Any] = {
        "echo": settings.db_echo or settings.log_level == "DEBUG",
    }

    if settings.is_in_memory_sqlite:
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    elif not settings.is_sqlite:
        kwargs["pool_size"] = settings.db_pool_size
        kwargs["max_overflow"] = settings.db_max_overflow
        kwargs["pool_pre_ping"] = True
        kwargs["pool_recycle"] = 3600

    return create_async_engine(settings.database_url, **kwargs)


async def create_schema(engine: AsyncEngine) -> None:
    """Create any missing tables (the startup "schema sync")."""
    # Models register themselves on Base.metadata at import time
    import twitter_api.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

