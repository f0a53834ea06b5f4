"""
Twitter API — Post Repository
===============================

What:  Storage operations for posts behind a narrow interface.
Who:   PostService, and CommentService for the parent-post existence check.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import delete, select

from twitter_api.entities import Post
from twitter_api.models.post import PostModel
from twitter_api.repositories.base import SqlAlchemyRepository


def _to_entity(row: PostModel) -> Post:
    return Post(
        id=row.id,
        title=row.title,
        description=row.description,
        user_id=row.user_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class PostRepository(ABC):
    """Contract for post storage."""

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        ...

    @abstractmethod
    async def find_all(self) -> List[Post]:
        ...

    @abstractmethod
    async def create(self, user_id: str, title: str, description: str) -> Post:
        ...

    @abstractmethod
    async def update(self, post_id: str, title: str, description: str) -> Optional[Post]:
        ...

    @abstractmethod
    async def delete_by_id(self, post_id: str, user_id: str) -> bool:
        """Delete the post only if it belongs to user_id."""
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        ...


class SqlAlchemyPostRepository(SqlAlchemyRepository, PostRepository):
    """PostRepository on top of an AsyncSession."""

    async def _get_row(self, post_id: str) -> Optional[PostModel]:
        result = await self.session.execute(
            select(PostModel).where(PostModel.id == post_id)
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        async with self._translate_errors("find post by id"):
            row = await self._get_row(post_id)
        return _to_entity(row) if row else None

    async def find_all(self) -> List[Post]:
        async with self._translate_errors("list posts"):
            result = await self.session.execute(
                select(PostModel).order_by(PostModel.created_at)
            )
            rows = result.scalars().all()
        return [_to_entity(row) for row in rows]

    async def create(self, user_id: str, title: str, description: str) -> Post:
        row = PostModel(title=title, description=description, user_id=user_id)
        async with self._translate_errors("create post"):
            self.session.add(row)
            await self.session.flush()
        return _to_entity(row)

    async def update(self, post_id: str, title: str, description: str) -> Optional[Post]:
        async with self._translate_errors("update post"):
            row = await self._get_row(post_id)
            if row is None:
                return None
            row.title = title
            row.description = description
            await self.session.flush()
        return _to_entity(row)

    async def delete_by_id(self, post_id: str, user_id: str) -> bool:
        async with self._translate_errors("delete post"):
            result = await self.session.execute(
                delete(PostModel).where(
                    PostModel.id == post_id,
                    PostModel.user_id == user_id,
                )
            )
        return result.rowcount > 0

    async def delete_all(self) -> int:
        async with self._translate_errors("delete all posts"):
            result = await self.session.execute(delete(PostModel))
        return result.rowcount
