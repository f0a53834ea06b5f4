"""
Twitter API — Post SQLAlchemy Model
=====================================

What:  ORM model representing the `posts` table.
Who:   Used by SqlAlchemyPostRepository and by Alembic.

`user_id` references users.id. The reference is checked by PostService when
the post is created; it is not maintained afterwards (no cascade).
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from twitter_api.database import Base, UTCDateTime
from twitter_api.models.user import _utcnow

if TYPE_CHECKING:
    from twitter_api.models.comment import CommentModel
    from twitter_api.models.user import UserModel


class PostModel(Base):
    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False)

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

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

    user: Mapped["UserModel"] = relationship(back_populates="posts")

    # One-to-many Post → Comment
    comments: Mapped[List["CommentModel"]] = relationship(
        back_populates="post",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<PostModel(id={self.id}, user_id={self.user_id}, title='{self.title}')>"
