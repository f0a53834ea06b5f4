"""
Twitter API — Password Hashing & Token Tests
==============================================
"""

import pytest
from jose import jwt

from twitter_api.exceptions import AuthenticationError
from twitter_api.security import TokenService

TEST_SECRET = "test-secret-not-real"


class TestPasswordHasher:
    def test_hash_verifies_and_differs_from_plaintext(self, password_hasher):
        hashed = password_hasher.hash("s3cret!")

        assert hashed != "s3cret!"
        assert password_hasher.verify("s3cret!", hashed)
        assert not password_hasher.verify("wrong", hashed)

    def test_same_password_hashes_differently(self, password_hasher):
        assert password_hasher.hash("s3cret!") != password_hasher.hash("s3cret!")

    def test_unrecognized_stored_hash_fails_verification(self, password_hasher):
        assert password_hasher.verify("s3cret!", "plaintext-in-db") is False


class TestTokenService:
    def test_token_carries_user_id_and_expiry(self, token_service):
        token = token_service.issue("user-1")

        claims = jwt.get_unverified_claims(token)
        assert claims["id"] == "user-1"
        assert "exp" in claims
        assert token_service.decode(token) == "user-1"

    def test_expired_token_rejected(self):
        expired = TokenService(secret=TEST_SECRET, expires_minutes=-1)
        token = expired.issue("user-1")

        with pytest.raises(AuthenticationError) as exc_info:
            expired.decode(token)

        assert exc_info.value.message == "Invalid or expired token"

    def test_token_signed_with_other_secret_rejected(self, token_service):
        foreign = TokenService(secret="another-secret").issue("user-1")

        with pytest.raises(AuthenticationError):
            token_service.decode(foreign)

    def test_garbage_token_rejected(self, token_service):
        with pytest.raises(AuthenticationError):
            token_service.decode("not.a.jwt")

    def test_token_without_id_rejected(self, token_service):
        token = jwt.encode({"sub": "user-1"}, TEST_SECRET, algorithm="HS256")

        with pytest.raises(AuthenticationError) as exc_info:
            token_service.decode(token)

        assert exc_info.value.message == "Invalid token payload"
