"""
Twitter API — Auth Schemas
============================

Request fields are optional at the schema level so that a missing field
produces the API's own 400 message ("Name, email, and password are
required") rather than a generic schema error. Unknown keys, including a
client-supplied `id`, are ignored.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    name: Optional[str] = Field(default=None, description="Display name", examples=["Jane"])
    email: Optional[str] = Field(default=None, description="Unique email address", examples=["jane@example.com"])
    password: Optional[str] = Field(default=None, description="Plaintext password (hashed before storage)")


class SignInRequest(BaseModel):
    email: Optional[str] = Field(default=None, examples=["jane@example.com"])
    password: Optional[str] = Field(default=None)


class TokenResponse(BaseModel):
    """Returned by POST /signin; send it back as `Authorization: Bearer <token>`."""
    token: str = Field(description="Signed JWT whose payload carries the user id")
