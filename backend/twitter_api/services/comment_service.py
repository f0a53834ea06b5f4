"""
Twitter API — Comment Service
===============================

What:  Business rules for comments. Every operation is scoped to a parent
       post, and the post must exist ("Post not found" otherwise).
Who:   Called by routes/comments.py.
"""

import logging
from typing import List, Optional

from twitter_api.entities import Comment
from twitter_api.exceptions import NotFoundError, ValidationError
from twitter_api.repositories.comment_repository import CommentRepository
from twitter_api.repositories.post_repository import PostRepository
from twitter_api.services.validation import is_blank

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, comments: CommentRepository, posts: PostRepository):
        self.comments = comments
        self.posts = posts

    async def _require_post(self, post_id: str) -> None:
        if await self.posts.find_by_id(post_id) is None:
            raise NotFoundError(resource="post", resource_id=post_id)

    async def list_comments(self, post_id: str) -> List[Comment]:
        await self._require_post(post_id)
        comments = await self.comments.find_by_post(post_id)
        if not comments:
            raise NotFoundError(resource="comment", message="No comments found")
        return comments

    async def get_comment(self, post_id: str, comment_id: str) -> Comment:
        await self._require_post(post_id)
        comment = await self.comments.find_by_id(comment_id=comment_id, post_id=post_id)
        if comment is None:
            raise NotFoundError(resource="comment", resource_id=comment_id)
        return comment

    async def create_comment(self, post_id: str, content: Optional[str]) -> Comment:
        """
        Add a comment to a post.

        Content is checked first (400), then the post (404); nothing is
        written unless both pass.
        """
        if is_blank(content):
            raise ValidationError(message="Comment content is required", field="content")

        await self._require_post(post_id)

        comment = await self.comments.create(post_id=post_id, content=content)
        logger.info("Comment %s created on post %s", comment.id, post_id)
        return comment

    async def delete_comment(self, post_id: str, comment_id: str) -> None:
        await self._require_post(post_id)
        if not await self.comments.delete_by_id(comment_id=comment_id, post_id=post_id):
            raise NotFoundError(resource="comment", resource_id=comment_id)
        logger.info("Comment %s deleted from post %s", comment_id, post_id)

    async def delete_all_comments(self, post_id: str) -> int:
        await self._require_post(post_id)
        count = await self.comments.delete_by_post(post_id)
        logger.info("Deleted %d comments from post %s", count, post_id)
        return count
