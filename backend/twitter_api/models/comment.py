"""
Twitter API — Comment SQLAlchemy Model
========================================

What:  ORM model representing the `comments` table.
Who:   Used by SqlAlchemyCommentRepository and by Alembic.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from twitter_api.database import Base, UTCDateTime
from twitter_api.models.user import _utcnow

if TYPE_CHECKING:
    from twitter_api.models.post import PostModel


class CommentModel(Base):
    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    post_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("posts.id"),
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

    post: Mapped["PostModel"] = relationship(back_populates="comments")

    def __repr__(self) -> str:
        return f"<CommentModel(id={self.id}, post_id={self.post_id})>"
