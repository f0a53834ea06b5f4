"""
Twitter API — Request-Scoped Dependencies
===========================================

What:  FastAPI dependency providers that turn the application's Container
       into per-request sessions, repositories and services.
How:   FastAPI caches each dependency within a request, so the auth gate and
       the route's service share one AsyncSession (and one transaction).

    Container (app.state) ──▶ get_db_session ──▶ Sql*Repository ──▶ *Service
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from twitter_api.container import Container
from twitter_api.repositories import (
    SqlAlchemyCommentRepository,
    SqlAlchemyPostRepository,
    SqlAlchemyUserRepository,
)
from twitter_api.services import AuthService, CommentService, PostService, UserService


def get_container(request: Request) -> Container:
    return request.app.state.container


async def get_db_session(
    container: Container = Depends(get_container),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Provides a database session per request.

    How it works:
        1. Creates a new session from the container's factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back the transaction and re-raises, so the global
           error handler can respond and no partial write survives
        5. Always: closes the session (returns connection to pool)
    """
    async with container.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(session)


def get_post_repository(
    session: AsyncSession = Depends(get_db_session),
) -> SqlAlchemyPostRepository:
    return SqlAlchemyPostRepository(session)


def get_comment_repository(
    session: AsyncSession = Depends(get_db_session),
) -> SqlAlchemyCommentRepository:
    return SqlAlchemyCommentRepository(session)


def get_auth_service(
    container: Container = Depends(get_container),
    users: SqlAlchemyUserRepository = Depends(get_user_repository),
) -> AuthService:
    return AuthService(
        users=users,
        password_hasher=container.password_hasher,
        token_service=container.token_service,
    )


def get_user_service(
    container: Container = Depends(get_container),
    users: SqlAlchemyUserRepository = Depends(get_user_repository),
) -> UserService:
    return UserService(users=users, password_hasher=container.password_hasher)


def get_post_service(
    posts: SqlAlchemyPostRepository = Depends(get_post_repository),
    users: SqlAlchemyUserRepository = Depends(get_user_repository),
) -> PostService:
    return PostService(posts=posts, users=users)


def get_comment_service(
    comments: SqlAlchemyCommentRepository = Depends(get_comment_repository),
    posts: SqlAlchemyPostRepository = Depends(get_post_repository),
) -> CommentService:
    return CommentService(comments=comments, posts=posts)
