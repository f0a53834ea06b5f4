"""
Twitter API — Application Configuration
=========================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a default `settings` object.
Who:   Read by the application factory, which hands it to the dependency
       container; nothing else should import the module-level instance.
When:  Loaded once at module import time; validated before app starts.

Design Decision:
    create_app() accepts an explicit Settings instance. The module-level
    `settings` is only the default used by `uvicorn twitter_api.main:app`,
    so tests can build isolated applications against an in-memory database.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "Twitter-AP1-development-secret"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    Production deployments MUST override JWT_SECRET and usually DATABASE_URL.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: sqlite+aiosqlite:///<path> (relative to the working directory)
    # An in-memory URL (sqlite+aiosqlite://) is shared through a StaticPool.
    database_url: str = Field(
        default="sqlite+aiosqlite:///./twitter.sqlite",
        description="Async SQLAlchemy connection URL",
    )

    # Pool sizing is ignored for SQLite URLs
    db_pool_size: int = Field(default=5, ge=1, le=100)
    db_max_overflow: int = Field(default=10, ge=0, le=50)

    db_echo: bool = Field(default=False)

    # Create missing tables on startup (alembic remains the way to migrate)
    db_auto_create: bool = Field(default=True)

    # ── Authentication ────────────────────────────────────────────────────
    jwt_secret: str = Field(
        default=DEFAULT_JWT_SECRET,
        description="Secret key used to sign bearer tokens",
    )
    jwt_algorithm: str = Field(default="HS256")
    jwt_expires_minutes: int = Field(default=10080, ge=1)  # 7 days

    # bcrypt cost factor; tests lower it to keep hashing fast
    password_hash_rounds: int = Field(default=12, ge=4, le=16)

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(
        default="http://localhost:10000,https://twitter-api-ohjg.onrender.com"
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=10000, ge=1024, le=65535)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_in_memory_sqlite(self) -> bool:
        """True for sqlite URLs without a file path (or with :memory:)."""
        if not self.is_sqlite:
            return False
        _, _, path = self.database_url.partition("://")
        return path in ("", "/", "/:memory:") or ":memory:" in path

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that security-sensitive settings are configured.
        When:  Called during app startup (lifespan).
        How:   Collects problems and raises a single ValueError with guidance.
        """
        errors = []
        if not self.jwt_secret or self.jwt_secret == DEFAULT_JWT_SECRET:
            errors.append(
                "JWT_SECRET is not set. Tokens are signed with the development secret."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


settings = Settings()
