"""
Twitter API — Dependency Container
====================================

What:  The process-wide objects of one application instance.
Why:   No module-level engine or auth singletons: create_app() builds a
       Container once and stores it on `app.state.container`; request-scoped
       objects (sessions, repositories, services) are derived from it through
       FastAPI dependencies in twitter_api.dependencies.

    Container
    ├── settings          Settings
    ├── engine            AsyncEngine (the single pooled database handle)
    ├── session_factory   async_sessionmaker → one AsyncSession per request
    ├── password_hasher   PasswordHasher (bcrypt)
    └── token_service     TokenService (JWT)
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from twitter_api.config import Settings
from twitter_api.database import build_engine, create_schema
from twitter_api.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


@dataclass
class Container:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker
    password_hasher: PasswordHasher
    token_service: TokenService

    @classmethod
    def build(cls, settings: Settings) -> "Container":
        engine = build_engine(settings)
        # expire_on_commit=False: entities are read after the batch-update
        # commits without triggering lazy loads outside the session
        session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        return cls(
            settings=settings,
            engine=engine,
            session_factory=session_factory,
            password_hasher=PasswordHasher(rounds=settings.password_hash_rounds),
            token_service=TokenService(
                secret=settings.jwt_secret,
                algorithm=settings.jwt_algorithm,
                expires_minutes=settings.jwt_expires_minutes,
            ),
        )

    async def create_schema(self) -> None:
        await create_schema(self.engine)
        logger.info("Database schema synchronized")

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self.engine.dispose()
