"""
Twitter API — Post Route Handlers
===================================

What:  Post endpoints. Creation and deletion are addressed through the
       owning user (`/users/{id}/post`), reads and updates through the post.

Route Inventory:
    GET    /posts                          list all posts
    DELETE /posts                          delete every post
    GET    /posts/{id}                     fetch one post
    PUT    /posts/{id}                     replace title and description
    POST   /users/{id}/post                create a post for a user
    DELETE /users/{userId}/post/{postId}   delete a post owned by the user
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from twitter_api.auth import require_user
from twitter_api.dependencies import get_post_service
from twitter_api.schemas.common import ErrorResponse, MessageResponse
from twitter_api.schemas.post import PostBody, PostResponse
from twitter_api.services import PostService

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Posts"],
    dependencies=[Depends(require_user)],
    responses={401: {"description": "Missing or invalid bearer token", "model": ErrorResponse}},
)


@router.get(
    "/posts",
    response_model=List[PostResponse],
    responses={404: {"description": "No posts found", "model": ErrorResponse}},
    summary="List all posts",
)
async def list_posts(
    post_service: PostService = Depends(get_post_service),
) -> List[PostResponse]:
    posts = await post_service.list_posts()
    return [PostResponse.model_validate(post) for post in posts]


@router.delete("/posts", response_model=MessageResponse, summary="Delete all posts")
async def delete_all_posts(
    post_service: PostService = Depends(get_post_service),
) -> MessageResponse:
    await post_service.delete_all_posts()
    return MessageResponse(message="All posts deleted successfully")


@router.get(
    "/posts/{post_id}",
    response_model=PostResponse,
    responses={404: {"description": "Post not found", "model": ErrorResponse}},
    summary="Get a post by id",
)
async def get_post(
    post_id: str,
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await post_service.get_post(post_id)
    return PostResponse.model_validate(post)


@router.put(
    "/posts/{post_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Title and description are required", "model": ErrorResponse},
        404: {"description": "Post not found", "model": ErrorResponse},
    },
    summary="Update a post by id",
)
async def update_post(
    post_id: str,
    body: PostBody = PostBody(),
    post_service: PostService = Depends(get_post_service),
) -> MessageResponse:
    await post_service.update_post(post_id, title=body.title, description=body.description)
    return MessageResponse(message="Post updated successfully")


@router.post(
    "/users/{user_id}/post",
    status_code=201,
    response_model=PostResponse,
    responses={
        400: {"description": "Title and description are required", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    summary="Create a post for a user",
)
async def create_post(
    user_id: str,
    body: PostBody = PostBody(),
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await post_service.create_post(user_id, title=body.title, description=body.description)
    return PostResponse.model_validate(post)


@router.delete(
    "/users/{user_id}/post/{post_id}",
    response_model=MessageResponse,
    responses={404: {"description": "User or post not found, or post not owned by user", "model": ErrorResponse}},
    summary="Delete a post owned by a user",
)
async def delete_post(
    user_id: str,
    post_id: str,
    post_service: PostService = Depends(get_post_service),
) -> MessageResponse:
    await post_service.delete_post(user_id=user_id, post_id=post_id)
    return MessageResponse(message="Post deleted successfully")
