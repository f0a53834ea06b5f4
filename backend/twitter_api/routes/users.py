"""
Twitter API — User Route Handlers
===================================

What:  /users collection and /users/{id} item endpoints. All require a
       bearer token.

Route Inventory:
    GET    /users        list all users
    POST   /users        create a user
    PUT    /users        batch update (non-atomic, per-element report)
    DELETE /users        delete every user
    GET    /users/{id}   fetch one user
    PUT    /users/{id}   update name and/or email
    DELETE /users/{id}   delete one user
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from twitter_api.auth import require_user
from twitter_api.dependencies import get_user_service
from twitter_api.entities import UserChanges
from twitter_api.schemas.common import ErrorResponse, MessageResponse
from twitter_api.schemas.user import (
    BatchFailureItem,
    BatchUpdateResponse,
    BatchUpdateUsersRequest,
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)
from twitter_api.services import UserService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    dependencies=[Depends(require_user)],
    responses={401: {"description": "Missing or invalid bearer token", "model": ErrorResponse}},
)


@router.get(
    "",
    response_model=List[UserResponse],
    responses={404: {"description": "No users found", "model": ErrorResponse}},
    summary="List all users",
)
async def list_users(
    user_service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    users = await user_service.list_users()
    return [UserResponse.model_validate(user) for user in users]


@router.post(
    "",
    status_code=201,
    response_model=UserResponse,
    responses={
        400: {"description": "Missing fields or malformed email", "model": ErrorResponse},
        409: {"description": "Email already exists", "model": ErrorResponse},
    },
    summary="Create a user",
)
async def create_user(
    body: CreateUserRequest = CreateUserRequest(),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.create_user(body.name, body.email, body.password)
    return UserResponse.model_validate(user)


@router.put(
    "",
    response_model=BatchUpdateResponse,
    responses={400: {"description": "Empty or malformed batch", "model": ErrorResponse}},
    summary="Update several users",
    description=(
        "Applies each element independently. Elements that fail (unknown id, "
        "invalid email, duplicate email) are listed under `failed`; the others "
        "are committed regardless."
    ),
)
async def update_multiple_users(
    body: BatchUpdateUsersRequest = BatchUpdateUsersRequest(),
    user_service: UserService = Depends(get_user_service),
) -> BatchUpdateResponse:
    result = await user_service.update_many(
        [UserChanges(id=item.id, name=item.name, email=item.email) for item in body.users]
    )
    return BatchUpdateResponse(
        message="Users updated successfully",
        updated=result.updated,
        failed=[BatchFailureItem(id=f.id, reason=f.reason) for f in result.failed],
    )


@router.delete("", response_model=MessageResponse, summary="Delete all users")
async def delete_all_users(
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    await user_service.delete_all_users()
    return MessageResponse(message="All users deleted successfully")


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"description": "User not found", "model": ErrorResponse}},
    summary="Get a user by id",
)
async def get_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.get_user(user_id)
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Name or email is required", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
        409: {"description": "Email already exists", "model": ErrorResponse},
    },
    summary="Update a user by id",
)
async def update_user(
    user_id: str,
    body: UpdateUserRequest = UpdateUserRequest(),
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    await user_service.update_user(user_id, name=body.name, email=body.email)
    return MessageResponse(message="User updated successfully")


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses={404: {"description": "User not found", "model": ErrorResponse}},
    summary="Delete a user by id",
)
async def delete_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    await user_service.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")
