"""
Twitter API — Authentication Gate
===================================

What:  The bearer-token check attached to every protected router.
How:   1. HTTPBearer extracts `Authorization: Bearer <token>` (auto_error off,
          so a missing header becomes our 401 body instead of FastAPI's 403)
       2. TokenService verifies signature and expiry and yields the user id
       3. The user is loaded; a token for a deleted user is rejected
       4. The identity is attached to `request.state.user` and returned

Usage:
    router = APIRouter(dependencies=[Depends(require_user)])
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from twitter_api.container import Container
from twitter_api.dependencies import get_container, get_user_repository
from twitter_api.exceptions import AuthenticationError
from twitter_api.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False, description="JWT issued by POST /signin")


@dataclass(frozen=True)
class Identity:
    """Who is making the request; only the id travels in the token."""
    id: str


async def require_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    container: Container = Depends(get_container),
    users: UserRepository = Depends(get_user_repository),
) -> Identity:
    if credentials is None:
        raise AuthenticationError(message="Not authenticated")

    user_id = container.token_service.decode(credentials.credentials)

    user = await users.find_by_id(user_id)
    if user is None:
        logger.warning("Token rejected: user %s no longer exists", user_id)
        raise AuthenticationError(message="User no longer exists")

    identity = Identity(id=user.id)
    request.state.user = identity
    return identity
