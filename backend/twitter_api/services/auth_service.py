"""
Twitter API — Auth Service
============================

What:  Sign-up and sign-in.
Who:   Called by the /signup and /signin route handlers.

Sign-in flow:
    find user by email ──▶ verify bcrypt hash ──▶ issue JWT {id}
            │ absent               │ mismatch
            ▼                      ▼
        AuthenticationError("Invalid credentials")  (same error for both)

    When the email is unknown a dummy hash verification still runs, so the
    two failure paths take comparable time as well as returning the same body.
"""

import logging
from typing import Optional

from twitter_api.entities import User
from twitter_api.exceptions import AuthenticationError, ConflictError, ValidationError
from twitter_api.repositories.user_repository import UserRepository
from twitter_api.security import PasswordHasher, TokenService
from twitter_api.services.validation import is_blank, require_valid_email

logger = logging.getLogger(__name__)


class AuthService:
    """Stateless apart from its collaborators; one instance per request."""

    def __init__(
        self,
        users: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.users = users
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def sign_in(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Exchange credentials for a bearer token.

        Returns:
            The signed token string.

        Raises:
            ValidationError: email or password missing.
            AuthenticationError: unknown email or wrong password.
        """
        if is_blank(email) or not password:
            raise ValidationError(message="Email and password are required")

        user = await self.users.find_by_email(email)
        if user is None:
            self.password_hasher.dummy_verify()
            logger.warning("Sign-in rejected: unknown email")
            raise AuthenticationError()

        if not self.password_hasher.verify(password, user.password_hash):
            logger.warning("Sign-in rejected for user %s: password mismatch", user.id)
            raise AuthenticationError()

        logger.info("User %s signed in", user.id)
        return self.token_service.issue(user.id)

    async def sign_up(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> User:
        """
        Register a new account.

        The email check runs before insert for a clean 409; the unique
        constraint still catches concurrent sign-ups with the same address.

        Raises:
            ValidationError: a field is missing or the email is malformed.
            ConflictError: the email is already registered.
        """
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
        logger.info("User %s signed up", user.id)
        return user
