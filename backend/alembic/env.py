"""
Alembic Migration Environment — Twitter API
=============================================

What:  Points Alembic at the users/posts/comments metadata and at the
       database named by DATABASE_URL.
How:   Offline mode renders SQL for the configured URL; online mode opens a
       throwaway async engine and runs the revisions inside run_sync().

SQLite:
    ALTER TABLE support is minimal, so batch mode (copy-and-move) is switched
    on whenever the target is SQLite. Column type changes are compared during
    --autogenerate so UTCDateTime/String edits show up in new revisions.

Usage (from backend/):
    alembic upgrade head
    alembic revision --autogenerate -m "describe change"
"""

import asyncio
from logging.config import fileConfig
from typing import Any, Dict

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

import twitter_api.models  # noqa: F401  (registers the tables on Base.metadata)
from twitter_api.config import settings
from twitter_api.database import Base

alembic_config = context.config

if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)

alembic_config.set_main_option("sqlalchemy.url", settings.database_url)


def _context_options(is_sqlite: bool) -> Dict[str, Any]:
    return {
        "target_metadata": Base.metadata,
        "render_as_batch": is_sqlite,
        "compare_type": True,
    }


def migrate_offline() -> None:
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_context_options(settings.is_sqlite),
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate_with(connection: Connection) -> None:
    context.configure(
        connection=connection,
        **_context_options(connection.dialect.name == "sqlite"),
    )
    with context.begin_transaction():
        context.run_migrations()


async def migrate_online() -> None:
    # NullPool: the migration run owns exactly one short-lived connection
    engine = async_engine_from_config(
        alembic_config.get_section(alembic_config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate_with)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    migrate_offline()
else:
    asyncio.run(migrate_online())
