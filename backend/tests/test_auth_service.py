"""
Twitter API — Auth Service Unit Tests
=======================================

What we test:
    ✅ Sign-up hashes the password and rejects duplicates / bad input
    ✅ Sign-in issues a token carrying the user id
    ✅ Unknown email and wrong password fail identically
"""

import pytest

from twitter_api.exceptions import AuthenticationError, ConflictError, ValidationError
from twitter_api.services.auth_service import AuthService


@pytest.fixture
def auth_service(mock_user_repository, password_hasher, token_service):
    return AuthService(
        users=mock_user_repository,
        password_hasher=password_hasher,
        token_service=token_service,
    )


class TestSignUp:
    @pytest.mark.asyncio
    async def test_sign_up_stores_hash_not_plaintext(
        self, auth_service, mock_user_repository, password_hasher, user_factory
    ):
        mock_user_repository.find_by_email.return_value = None
        mock_user_repository.create.return_value = user_factory(email="jane@example.com")

        user = await auth_service.sign_up("Jane", "jane@example.com", "s3cret!")

        assert user.email == "jane@example.com"
        kwargs = mock_user_repository.create.await_args.kwargs
        assert kwargs["password_hash"] != "s3cret!"
        assert password_hasher.verify("s3cret!", kwargs["password_hash"])

    @pytest.mark.asyncio
    async def test_sign_up_duplicate_email_conflicts(
        self, auth_service, mock_user_repository, user_factory
    ):
        mock_user_repository.find_by_email.return_value = user_factory(email="jane@example.com")

        with pytest.raises(ConflictError) as exc_info:
            await auth_service.sign_up("Jane", "jane@example.com", "s3cret!")

        assert exc_info.value.message == "Email already exists"
        mock_user_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name,email,password",
        [(None, "jane@example.com", "pw"), ("Jane", None, "pw"), ("Jane", "jane@example.com", None), ("  ", "jane@example.com", "pw")],
    )
    async def test_sign_up_missing_field(self, auth_service, mock_user_repository, name, email, password):
        with pytest.raises(ValidationError) as exc_info:
            await auth_service.sign_up(name, email, password)

        assert exc_info.value.message == "Name, email, and password are required"
        mock_user_repository.find_by_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_sign_up_malformed_email(self, auth_service, mock_user_repository):
        with pytest.raises(ValidationError) as exc_info:
            await auth_service.sign_up("Jane", "not-an-email", "pw")

        assert exc_info.value.message == "Invalid email format"
        assert exc_info.value.field == "email"


class TestSignIn:
    @pytest.mark.asyncio
    async def test_sign_in_returns_token_for_user(
        self, auth_service, mock_user_repository, password_hasher, token_service, user_factory
    ):
        user = user_factory(password_hash=password_hasher.hash("s3cret!"))
        mock_user_repository.find_by_email.return_value = user

        token = await auth_service.sign_in(user.email, "s3cret!")

        assert token_service.decode(token) == user.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(
        self, auth_service, mock_user_repository, password_hasher, user_factory
    ):
        user = user_factory(password_hash=password_hasher.hash("s3cret!"))

        mock_user_repository.find_by_email.return_value = user
        with pytest.raises(AuthenticationError) as wrong_password:
            await auth_service.sign_in(user.email, "wrong")

        mock_user_repository.find_by_email.return_value = None
        with pytest.raises(AuthenticationError) as unknown_email:
            await auth_service.sign_in("nobody@example.com", "wrong")

        assert wrong_password.value.message == unknown_email.value.message == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_sign_in_requires_both_fields(self, auth_service, mock_user_repository):
        with pytest.raises(ValidationError) as exc_info:
            await auth_service.sign_in("jane@example.com", None)

        assert exc_info.value.message == "Email and password are required"
        mock_user_repository.find_by_email.assert_not_awaited()
