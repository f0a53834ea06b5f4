"""
Twitter API — Post Service
============================

What:  Business rules for posts: every write is checked against the
       existence of the user and/or post it refers to.
Who:   Called by routes/posts.py.

Check order (the first failing check decides the status):
    create:  fields (400) → user (404)
    update:  post (404)   → fields (400)
    delete:  user (404)   → post (404) → ownership (404, nothing deleted)
"""

import logging
from typing import List, Optional

from twitter_api.entities import Post
from twitter_api.exceptions import NotFoundError, ValidationError
from twitter_api.repositories.post_repository import PostRepository
from twitter_api.repositories.user_repository import UserRepository
from twitter_api.services.validation import is_blank

logger = logging.getLogger(__name__)

FIELDS_REQUIRED = "Title and description are required"


class PostService:
    def __init__(self, posts: PostRepository, users: UserRepository):
        self.posts = posts
        self.users = users

    async def list_posts(self) -> List[Post]:
        posts = await self.posts.find_all()
        if not posts:
            raise NotFoundError(resource="post", message="No posts found")
        return posts

    async def get_post(self, post_id: str) -> Post:
        post = await self.posts.find_by_id(post_id)
        if post is None:
            raise NotFoundError(resource="post", resource_id=post_id)
        return post

    async def create_post(
        self,
        user_id: str,
        title: Optional[str],
        description: Optional[str],
    ) -> Post:
        if is_blank(title) or is_blank(description):
            raise ValidationError(message=FIELDS_REQUIRED)

        if await self.users.find_by_id(user_id) is None:
            raise NotFoundError(resource="user", resource_id=user_id)

        post = await self.posts.create(user_id=user_id, title=title, description=description)
        logger.info("Post %s created by user %s", post.id, user_id)
        return post

    async def update_post(
        self,
        post_id: str,
        title: Optional[str],
        description: Optional[str],
    ) -> Post:
        if await self.posts.find_by_id(post_id) is None:
            raise NotFoundError(resource="post", resource_id=post_id)

        if is_blank(title) or is_blank(description):
            raise ValidationError(message=FIELDS_REQUIRED)

        post = await self.posts.update(post_id, title=title, description=description)
        if post is None:
            raise NotFoundError(resource="post", resource_id=post_id)
        logger.info("Post %s updated", post_id)
        return post

    async def delete_post(self, user_id: str, post_id: str) -> None:
        """
        Delete a post owned by `user_id`.

        A post that exists but belongs to someone else is reported as not
        found and left untouched.
        """
        if await self.users.find_by_id(user_id) is None:
            raise NotFoundError(resource="user", resource_id=user_id)

        if await self.posts.find_by_id(post_id) is None:
            raise NotFoundError(resource="post", resource_id=post_id)

        if not await self.posts.delete_by_id(post_id=post_id, user_id=user_id):
            logger.warning("Post %s is not owned by user %s; nothing deleted", post_id, user_id)
            raise NotFoundError(
                resource="post",
                resource_id=post_id,
                context={"user_id": user_id},
            )
        logger.info("Post %s deleted by user %s", post_id, user_id)

    async def delete_all_posts(self) -> int:
        count = await self.posts.delete_all()
        logger.info("Deleted all posts (%d rows)", count)
        return count
