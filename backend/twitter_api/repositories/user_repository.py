"""
Twitter API — User Repository
===============================

What:  Storage operations for users behind a narrow interface.
Who:   UserService, AuthService and the authentication gate.

UserRepository is the contract services depend on; SqlAlchemyUserRepository
is the implementation used at runtime. Unit tests mock the contract.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import delete, select

from twitter_api.entities import User
from twitter_api.models.user import UserModel
from twitter_api.repositories.base import SqlAlchemyRepository

EMAIL_EXISTS = "Email already exists"


def _to_entity(row: UserModel) -> User:
    return User(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class UserRepository(ABC):
    """Contract for user storage."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        ...

    @abstractmethod
    async def find_all(self) -> List[User]:
        ...

    @abstractmethod
    async def create(self, name: str, email: str, password_hash: str) -> User:
        """Persist a user; raises ConflictError when the email is taken."""
        ...

    @abstractmethod
    async def update(
        self,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        """Apply the given fields; returns None when the user does not exist."""
        ...

    @abstractmethod
    async def delete_by_id(self, user_id: str) -> bool:
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...


class SqlAlchemyUserRepository(SqlAlchemyRepository, UserRepository):
    """UserRepository on top of an AsyncSession."""

    async def _get_row(self, user_id: str) -> Optional[UserModel]:
        result = await self.session.execute(
            select(UserModel).where(UserModel.id == user_id)
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: str) -> Optional[User]:
        async with self._translate_errors("find user by id"):
            row = await self._get_row(user_id)
        return _to_entity(row) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        async with self._translate_errors("find user by email"):
            result = await self.session.execute(
                select(UserModel).where(UserModel.email == email)
            )
            row = result.scalar_one_or_none()
        return _to_entity(row) if row else None

    async def find_all(self) -> List[User]:
        async with self._translate_errors("list users"):
            result = await self.session.execute(
                select(UserModel).order_by(UserModel.created_at)
            )
            rows = result.scalars().all()
        return [_to_entity(row) for row in rows]

    async def create(self, name: str, email: str, password_hash: str) -> User:
        row = UserModel(name=name, email=email, password=password_hash)
        async with self._translate_errors("create user", conflict_message=EMAIL_EXISTS):
            self.session.add(row)
            # Flush assigns defaults and surfaces the unique constraint now
            await self.session.flush()
        return _to_entity(row)

    async def update(
        self,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        async with self._translate_errors("update user", conflict_message=EMAIL_EXISTS):
            row = await self._get_row(user_id)
            if row is None:
                return None
            if name:
                row.name = name
            if email:
                row.email = email
            await self.session.flush()
        return _to_entity(row)

    async def delete_by_id(self, user_id: str) -> bool:
        async with self._translate_errors("delete user"):
            result = await self.session.execute(
                delete(UserModel).where(UserModel.id == user_id)
            )
        return result.rowcount > 0

    async def delete_all(self) -> int:
        async with self._translate_errors("delete all users"):
            result = await self.session.execute(delete(UserModel))
        return result.rowcount
