"""
Twitter API — Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (mocked repositories, fast
       security helpers, an isolated application and an API client).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Unit tests (no database):
    ├── mock_user_repository / mock_post_repository / mock_comment_repository
    ├── password_hasher: bcrypt at the minimum cost factor
    ├── token_service: JWTs signed with a test secret
    └── user_factory / post_factory / comment_factory: entity records

    API tests (in-memory SQLite, one fresh database per test):
    ├── test_settings → app → test_client
    └── signed_in_user: a registered account plus its bearer header
"""

import os
from datetime import datetime, timezone
from uuid import uuid4

# Override settings for testing BEFORE any app imports
# Why: the module-level app is built at import time from the environment
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret-not-real"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from twitter_api.config import Settings
from twitter_api.entities import Comment, Post, User
from twitter_api.main import create_app
from twitter_api.repositories import CommentRepository, PostRepository, UserRepository
from twitter_api.security import PasswordHasher, TokenService

TEST_SECRET = "test-secret-not-real"


# ══════════════════════════════════════════════════════════════════════════
# Unit-Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_user_repository():
    """
    A UserRepository whose every method is an AsyncMock.

    Methods the contract does not declare raise AttributeError.

    Usage:
        mock_user_repository.find_by_id.return_value = user
    """
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_post_repository():
    return AsyncMock(spec=PostRepository)


@pytest.fixture
def mock_comment_repository():
    return AsyncMock(spec=CommentRepository)


@pytest.fixture
def password_hasher():
    # 4 is the lowest cost bcrypt accepts
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service():
    return TokenService(secret=TEST_SECRET, expires_minutes=60)


@pytest.fixture
def user_factory():
    """Builds User records; keyword arguments override the defaults."""

    def _make(**overrides) -> User:
        now = datetime.now(timezone.utc)
        data = {
            "id": str(uuid4()),
            "name": "Jane",
            "email": f"jane-{uuid4().hex[:6]}@example.com",
            "password_hash": "not-a-real-hash",
            "created_at": now,
            "updated_at": now,
        }
        data.update(overrides)
        return User(**data)

    return _make


@pytest.fixture
def post_factory():
    def _make(**overrides) -> Post:
        now = datetime.now(timezone.utc)
        data = {
            "id": str(uuid4()),
            "title": "Hello",
            "description": "My first post",
            "user_id": str(uuid4()),
            "created_at": now,
            "updated_at": now,
        }
        data.update(overrides)
        return Post(**data)

    return _make


@pytest.fixture
def comment_factory():
    def _make(**overrides) -> Comment:
        now = datetime.now(timezone.utc)
        data = {
            "id": str(uuid4()),
            "content": "Nice post!",
            "post_id": str(uuid4()),
            "created_at": now,
            "updated_at": now,
        }
        data.update(overrides)
        return Comment(**data)

    return _make


# ══════════════════════════════════════════════════════════════════════════
# API-Test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_settings():
    """Settings for an isolated app backed by a private in-memory database."""
    return Settings(
        database_url="sqlite+aiosqlite://",
        jwt_secret=TEST_SECRET,
        password_hash_rounds=4,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def app(test_settings):
    """
    A fresh application with its schema created.

    ASGITransport does not run the lifespan, so the schema sync that
    startup would perform is done here.
    """
    application = create_app(test_settings)
    container = application.state.container
    await container.create_schema()
    yield application
    await container.dispose()


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def signed_in_user(test_client):
    """
    Registers an account through the API and signs it in.

    Returns:
        dict with the user's `id`, `email`, `password`, `token` and
        ready-to-send `headers`.
    """
    credentials = {"name": "Jane", "email": "jane@example.com", "password": "s3cret!"}
    signup = await test_client.post("/signup", json=credentials)
    assert signup.status_code == 201

    signin = await test_client.post(
        "/signin",
        json={"email": credentials["email"], "password": credentials["password"]},
    )
    assert signin.status_code == 200
    token = signin.json()["token"]

    return {
        "id": signup.json()["id"],
        "email": credentials["email"],
        "password": credentials["password"],
        "token": token,
        "headers": {"Authorization": f"Bearer {token}"},
    }
