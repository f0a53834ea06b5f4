"""
Twitter API — Comment Route Handlers
======================================

Route Inventory:
    GET    /posts/{id}/comments                    list a post's comments
    POST   /posts/{id}/comments                    comment on a post
    DELETE /posts/{id}/comments                    delete all of a post's comments
    GET    /posts/{postId}/comment/{commentId}     fetch one comment
    DELETE /posts/{postId}/comment/{commentId}     delete one comment
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from twitter_api.auth import require_user
from twitter_api.dependencies import get_comment_service
from twitter_api.schemas.comment import CommentBody, CommentResponse
from twitter_api.schemas.common import ErrorResponse, MessageResponse
from twitter_api.services import CommentService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/posts",
    tags=["Comments"],
    dependencies=[Depends(require_user)],
    responses={
        401: {"description": "Missing or invalid bearer token", "model": ErrorResponse},
        404: {"description": "Post not found", "model": ErrorResponse},
    },
)


@router.get(
    "/{post_id}/comments",
    response_model=List[CommentResponse],
    summary="List comments of a post",
)
async def list_comments(
    post_id: str,
    comment_service: CommentService = Depends(get_comment_service),
) -> List[CommentResponse]:
    comments = await comment_service.list_comments(post_id)
    return [CommentResponse.model_validate(comment) for comment in comments]


@router.post(
    "/{post_id}/comments",
    status_code=201,
    response_model=CommentResponse,
    responses={400: {"description": "Comment content is required", "model": ErrorResponse}},
    summary="Comment on a post",
)
async def create_comment(
    post_id: str,
    body: CommentBody = CommentBody(),
    comment_service: CommentService = Depends(get_comment_service),
) -> CommentResponse:
    comment = await comment_service.create_comment(post_id, body.content)
    return CommentResponse.model_validate(comment)


@router.delete(
    "/{post_id}/comments",
    response_model=MessageResponse,
    summary="Delete all comments of a post",
)
async def delete_all_comments(
    post_id: str,
    comment_service: CommentService = Depends(get_comment_service),
) -> MessageResponse:
    await comment_service.delete_all_comments(post_id)
    return MessageResponse(message="All comments for this post deleted successfully")


@router.get(
    "/{post_id}/comment/{comment_id}",
    response_model=CommentResponse,
    summary="Get a comment by id",
)
async def get_comment(
    post_id: str,
    comment_id: str,
    comment_service: CommentService = Depends(get_comment_service),
) -> CommentResponse:
    comment = await comment_service.get_comment(post_id, comment_id)
    return CommentResponse.model_validate(comment)


@router.delete(
    "/{post_id}/comment/{comment_id}",
    response_model=MessageResponse,
    summary="Delete a comment by id",
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    comment_service: CommentService = Depends(get_comment_service),
) -> MessageResponse:
    await comment_service.delete_comment(post_id, comment_id)
    return MessageResponse(message="Comment deleted successfully")
