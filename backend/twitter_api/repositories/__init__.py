# Repositories package init
"""
Twitter API — Repository Layer
================================

One abstract contract plus one SQLAlchemy implementation per entity.
Repositories return plain entity records (twitter_api.entities) and never
leak ORM instances upward.
"""

from twitter_api.repositories.comment_repository import (
    CommentRepository,
    SqlAlchemyCommentRepository,
)
from twitter_api.repositories.post_repository import PostRepository, SqlAlchemyPostRepository
from twitter_api.repositories.user_repository import SqlAlchemyUserRepository, UserRepository

__all__ = [
    "UserRepository",
    "SqlAlchemyUserRepository",
    "PostRepository",
    "SqlAlchemyPostRepository",
    "CommentRepository",
    "SqlAlchemyCommentRepository",
]
