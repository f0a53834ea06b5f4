"""
Twitter API — Comment Repository
==================================

What:  Storage operations for comments, always scoped to a parent post.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import delete, select

from twitter_api.entities import Comment
from twitter_api.models.comment import CommentModel
from twitter_api.repositories.base import SqlAlchemyRepository


def _to_entity(row: CommentModel) -> Comment:
    return Comment(
        id=row.id,
        content=row.content,
        post_id=row.post_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class CommentRepository(ABC):
    """Contract for comment storage."""

    @abstractmethod
    async def find_by_post(self, post_id: str) -> List[Comment]:
        ...

    @abstractmethod
    async def find_by_id(self, comment_id: str, post_id: str) -> Optional[Comment]:
        ...

    @abstractmethod
    async def create(self, post_id: str, content: str) -> Comment:
        ...

    @abstractmethod
    async def delete_by_id(self, comment_id: str, post_id: str) -> bool:
        ...

    @abstractmethod
    async def delete_by_post(self, post_id: str) -> int:
        ...


class SqlAlchemyCommentRepository(SqlAlchemyRepository, CommentRepository):
    """CommentRepository on top of an AsyncSession."""

    async def find_by_post(self, post_id: str) -> List[Comment]:
        async with self._translate_errors("list comments"):
            result = await self.session.execute(
                select(CommentModel)
                .where(CommentModel.post_id == post_id)
                .order_by(CommentModel.created_at)
            )
            rows = result.scalars().all()
        return [_to_entity(row) for row in rows]

    async def find_by_id(self, comment_id: str, post_id: str) -> Optional[Comment]:
        async with self._translate_errors("find comment by id"):
            result = await self.session.execute(
                select(CommentModel).where(
                    CommentModel.id == comment_id,
                    CommentModel.post_id == post_id,
                )
            )
            row = result.scalar_one_or_none()
        return _to_entity(row) if row else None

    async def create(self, post_id: str, content: str) -> Comment:
        row = CommentModel(content=content, post_id=post_id)
        async with self._translate_errors("create comment"):
            self.session.add(row)
            await self.session.flush()
        return _to_entity(row)

    async def delete_by_id(self, comment_id: str, post_id: str) -> bool:
        async with self._translate_errors("delete comment"):
            result = await self.session.execute(
                delete(CommentModel).where(
                    CommentModel.id == comment_id,
                    CommentModel.post_id == post_id,
                )
            )
        return result.rowcount > 0

    async def delete_by_post(self, post_id: str) -> int:
        async with self._translate_errors("delete comments of post"):
            result = await self.session.execute(
                delete(CommentModel).where(CommentModel.post_id == post_id)
            )
        return result.rowcount
