"""
Twitter API — Password Hashing & Bearer Tokens
================================================

What:  The two cryptographic primitives the API needs.
How:   PasswordHasher wraps a passlib CryptContext (bcrypt);
       TokenService signs and verifies JWTs with python-jose.
Who:   Built once per application by the dependency container and shared by
       AuthService, UserService and the authentication gate.

Token format:
    Header:  {"alg": "HS256", "typ": "JWT"}
    Payload: {"id": "<user id>", "exp": <unix seconds>}
    Sessions are stateless: there is no refresh token and no server-side
    revocation. A token stays valid until it expires or its user is deleted.
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from twitter_api.exceptions import AuthenticationError


class PasswordHasher:
    """bcrypt hashing with a configurable cost factor."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Compare a plaintext password against a stored hash."""
        try:
            return self._context.verify(password, password_hash)
        except ValueError:
            # Stored value is not a recognizable hash
            return False

    def dummy_verify(self) -> None:
        """Burn the time of one verification (used when the email is unknown)."""
        self._context.dummy_verify()


class TokenService:
    """Issues and verifies the bearer tokens presented on protected routes."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 10080):
        self._secret = secret
        self._algorithm = algorithm
        self._expires = timedelta(minutes=expires_minutes)

    def issue(self, user_id: str) -> str:
        payload = {
            "id": user_id,
            "exp": datetime.now(timezone.utc) + self._expires,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> str:
        """
        Verify the signature and expiry of a token and return its user id.

        Raises:
            AuthenticationError: Bad signature, expired, malformed, or no `id`.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            raise AuthenticationError(
                message="Invalid or expired token",
                context={"reason": type(e).__name__},
            ) from e

        user_id = payload.get("id")
        if not user_id or not isinstance(user_id, str):
            raise AuthenticationError(message="Invalid token payload")
        return user_id
