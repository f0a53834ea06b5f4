# Models package init
"""
Twitter API — ORM Models
==========================

Importing this package registers every table on Base.metadata, which is
what create_schema() and Alembic's autogenerate rely on.

    users ──< posts ──< comments
"""

from twitter_api.models.comment import CommentModel
from twitter_api.models.post import PostModel
from twitter_api.models.user import UserModel

__all__ = ["UserModel", "PostModel", "CommentModel"]
