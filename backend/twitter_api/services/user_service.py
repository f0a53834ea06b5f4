"""
Twitter API — User Service
============================

What:  Business rules for user management behind the /users routes.
Who:   Called by routes/users.py.

Batch update semantics (PUT /users):
    Each element is validated, applied and committed on its own. A failing
    element is rolled back and reported; it never undoes the elements that
    were already committed, and later elements are still attempted.

        [{id: A, ok}, {id: B, missing}, {id: C, ok}]
            A ── commit ✔
            B ── rollback, reported as failed ("User not found")
            C ── commit ✔
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from twitter_api.entities import User, UserChanges
from twitter_api.exceptions import (
    ConflictError,
    NotFoundError,
    TwitterApiError,
    ValidationError,
)
from twitter_api.repositories.user_repository import UserRepository
from twitter_api.security import PasswordHasher
from twitter_api.services.validation import is_blank, require_valid_email

logger = logging.getLogger(__name__)


@dataclass
class BatchFailure:
    id: str
    reason: str


@dataclass
class BatchUpdateResult:
    updated: List[str] = field(default_factory=list)
    failed: List[BatchFailure] = field(default_factory=list)


class UserService:
    def __init__(self, users: UserRepository, password_hasher: PasswordHasher):
        self.users = users
        self.password_hasher = password_hasher

    async def list_users(self) -> List[User]:
        users = await self.users.find_all()
        if not users:
            raise NotFoundError(resource="user", message="No users found")
        return users

    async def get_user(self, user_id: str) -> User:
        user = await self.users.find_by_id(user_id)
        if user is None:
            raise NotFoundError(resource="user", resource_id=user_id)
        return user

    async def create_user(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> User:
        if is_blank(name) or is_blank(email) or not password:
            raise ValidationError(message="Name, email, and password are required")
        require_valid_email(email)

        if await self.users.find_by_email(email) is not None:
            raise ConflictError(message="Email already exists", context={"email": email})

        user = await self.users.create(
            name=name,
            email=email,
            password_hash=self.password_hasher.hash(password),
        )
        logger.info("User %s created", user.id)
        return user

    async def update_user(
        self,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        """
        Update name and/or email of one user.

        Raises:
            ValidationError: neither field given, or email malformed (400)
            NotFoundError: no such user (404)
            ConflictError: email belongs to another user (409)
        """
        if is_blank(name) and is_blank(email):
            raise ValidationError(message="Name or email is required")
        name = None if is_blank(name) else name
        email = None if is_blank(email) else email
        require_valid_email(email)

        if await self.users.find_by_id(user_id) is None:
            raise NotFoundError(resource="user", resource_id=user_id)
        await self._ensure_email_free(email, user_id)

        user = await self.users.update(user_id, name=name, email=email)
        if user is None:
            # Deleted between the lookup and the update
            raise NotFoundError(resource="user", resource_id=user_id)
        logger.info("User %s updated", user_id)
        return user

    async def update_many(self, changes: Sequence[UserChanges]) -> BatchUpdateResult:
        """
        Apply a batch of updates independently (best-effort, non-atomic).

        Raises:
            ValidationError: the batch itself is empty. Per-element problems
            are reported in the result instead of raised.
        """
        if not changes:
            raise ValidationError(message="Invalid input", field="users")

        result = BatchUpdateResult()
        for change in changes:
            try:
                await self.update_user(change.id, name=change.name, email=change.email)
                await self.users.commit()
            except TwitterApiError as e:
                await self.users.rollback()
                logger.warning("Batch update of user %s failed: %s", change.id, e.message)
                result.failed.append(BatchFailure(id=change.id, reason=e.message))
            else:
                result.updated.append(change.id)

        logger.info(
            "Batch user update: %d updated, %d failed",
            len(result.updated),
            len(result.failed),
        )
        return result

    async def delete_user(self, user_id: str) -> None:
        if not await self.users.delete_by_id(user_id):
            raise NotFoundError(resource="user", resource_id=user_id)
        logger.info("User %s deleted", user_id)

    async def delete_all_users(self) -> int:
        count = await self.users.delete_all()
        logger.info("Deleted all users (%d rows)", count)
        return count

    async def _ensure_email_free(self, email: Optional[str], user_id: str) -> None:
        if email is None:
            return
        owner = await self.users.find_by_email(email)
        if owner is not None and owner.id != user_id:
            raise ConflictError(message="Email already exists", context={"email": email})
