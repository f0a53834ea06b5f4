"""
Twitter API — User SQLAlchemy Model
=====================================

What:  ORM model representing the `users` table.
Who:   Used by SqlAlchemyUserRepository and by Alembic for schema management.

Table Design Rationale:
    - id: UUID rendered as a 36-char string; SQLite has no native UUID type
      and lookups by arbitrary path strings simply miss instead of failing
    - email: unique at the storage layer, the last word on duplicate sign-ups
    - password: bcrypt hash, never the plaintext
"""

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from twitter_api.database import Base, UTCDateTime

if TYPE_CHECKING:
    from twitter_api.models.post import PostModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserModel(Base):
    """
    A registered account.

    Lifecycle:
        Created by sign-up or POST /users; updated by id or in batch;
        deleted by id or all at once. Posts are not cascaded.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    password: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    # One-to-many User → Post. passive_deletes: deleting a user issues no
    # UPDATE/DELETE against posts.
    posts: Mapped[List["PostModel"]] = relationship(
        back_populates="user",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email='{self.email}')>"
