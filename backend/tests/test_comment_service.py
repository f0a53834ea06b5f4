"""
Twitter API — Comment Service Unit Tests
==========================================

What we test:
    ✅ Every operation requires the parent post
    ✅ Nothing is written when content is blank or the post is missing
"""

import pytest

from twitter_api.exceptions import NotFoundError, ValidationError
from twitter_api.services.comment_service import CommentService


@pytest.fixture
def comment_service(mock_comment_repository, mock_post_repository):
    return CommentService(comments=mock_comment_repository, posts=mock_post_repository)


class TestCreateComment:
    @pytest.mark.asyncio
    async def test_comment_on_missing_post_writes_nothing(
        self, comment_service, mock_post_repository, mock_comment_repository
    ):
        mock_post_repository.find_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.create_comment("missing", "Nice post!")

        assert exc_info.value.message == "Post not found"
        mock_comment_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_content_checked_before_post(
        self, comment_service, mock_post_repository, mock_comment_repository
    ):
        with pytest.raises(ValidationError) as exc_info:
            await comment_service.create_comment("any", "   ")

        assert exc_info.value.message == "Comment content is required"
        mock_post_repository.find_by_id.assert_not_awaited()
        mock_comment_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_success(
        self, comment_service, mock_post_repository, mock_comment_repository, post_factory, comment_factory
    ):
        post = post_factory()
        mock_post_repository.find_by_id.return_value = post
        mock_comment_repository.create.return_value = comment_factory(post_id=post.id)

        comment = await comment_service.create_comment(post.id, "Nice post!")

        assert comment.post_id == post.id
        mock_comment_repository.create.assert_awaited_once_with(post_id=post.id, content="Nice post!")


class TestCommentQueries:
    @pytest.mark.asyncio
    async def test_list_comments_empty(
        self, comment_service, mock_post_repository, mock_comment_repository, post_factory
    ):
        mock_post_repository.find_by_id.return_value = post_factory()
        mock_comment_repository.find_by_post.return_value = []

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.list_comments("post-id")

        assert exc_info.value.message == "No comments found"

    @pytest.mark.asyncio
    async def test_get_comment_on_missing_post(
        self, comment_service, mock_post_repository, mock_comment_repository
    ):
        mock_post_repository.find_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.get_comment("missing", "comment-id")

        assert exc_info.value.message == "Post not found"
        mock_comment_repository.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_unknown_comment(
        self, comment_service, mock_post_repository, mock_comment_repository, post_factory
    ):
        mock_post_repository.find_by_id.return_value = post_factory()
        mock_comment_repository.delete_by_id.return_value = False

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.delete_comment("post-id", "missing")

        assert exc_info.value.message == "Comment not found"

    @pytest.mark.asyncio
    async def test_delete_all_comments_of_missing_post(
        self, comment_service, mock_post_repository, mock_comment_repository
    ):
        mock_post_repository.find_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await comment_service.delete_all_comments("missing")

        mock_comment_repository.delete_by_post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_all_comments_of_post(
        self, comment_service, mock_post_repository, mock_comment_repository, post_factory
    ):
        post = post_factory()
        mock_post_repository.find_by_id.return_value = post
        mock_comment_repository.delete_by_post.return_value = 3

        assert await comment_service.delete_all_comments(post.id) == 3
        mock_comment_repository.delete_by_post.assert_awaited_once_with(post.id)
