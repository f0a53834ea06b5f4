"""
Twitter API — Auth Route Handlers
===================================

What:  POST /signup and POST /signin, the only public endpoints besides
       /health and the documentation.

Bodies default to an empty DTO: a request without a body reaches the
service and gets the same "... are required" message as one with gaps.
"""

import logging

from fastapi import APIRouter, Depends

from twitter_api.dependencies import get_auth_service
from twitter_api.schemas.auth import SignInRequest, SignUpRequest, TokenResponse
from twitter_api.schemas.common import ErrorResponse
from twitter_api.schemas.user import UserResponse
from twitter_api.services import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post(
    "/signup",
    status_code=201,
    response_model=UserResponse,
    responses={
        400: {"description": "Missing fields or malformed email", "model": ErrorResponse},
        409: {"description": "Email already exists", "model": ErrorResponse},
    },
    summary="Register a new user",
)
async def sign_up(
    body: SignUpRequest = SignUpRequest(),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    user = await auth_service.sign_up(body.name, body.email, body.password)
    return UserResponse.model_validate(user)


@router.post(
    "/signin",
    response_model=TokenResponse,
    responses={
        400: {"description": "Missing email or password", "model": ErrorResponse},
        401: {"description": "Invalid credentials", "model": ErrorResponse},
    },
    summary="Exchange credentials for a bearer token",
)
async def sign_in(
    body: SignInRequest = SignInRequest(),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    token = await auth_service.sign_in(body.email, body.password)
    return TokenResponse(token=token)
