"""
Twitter API — User Service Unit Tests
=======================================

What we test:
    ✅ Empty listings and unknown ids raise NotFoundError
    ✅ Update checks: fields (400) → existence (404) → email owner (409)
    ✅ Batch update commits good elements and reports bad ones
"""

import pytest

from twitter_api.entities import UserChanges
from twitter_api.exceptions import ConflictError, NotFoundError, ValidationError
from twitter_api.services.user_service import UserService


@pytest.fixture
def user_service(mock_user_repository, password_hasher):
    return UserService(users=mock_user_repository, password_hasher=password_hasher)


class TestUserQueries:
    @pytest.mark.asyncio
    async def test_list_users_empty_is_not_found(self, user_service, mock_user_repository):
        mock_user_repository.find_all.return_value = []

        with pytest.raises(NotFoundError) as exc_info:
            await user_service.list_users()

        assert exc_info.value.message == "No users found"

    @pytest.mark.asyncio
    async def test_get_user_unknown_id(self, user_service, mock_user_repository):
        mock_user_repository.find_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await user_service.get_user("999")

        assert exc_info.value.message == "User not found"
        assert exc_info.value.resource_id == "999"


class TestUpdateUser:
    @pytest.mark.asyncio
    async def test_update_requires_name_or_email(self, user_service, mock_user_repository):
        with pytest.raises(ValidationError) as exc_info:
            await user_service.update_user("some-id", name="", email=None)

        assert exc_info.value.message == "Name or email is required"
        mock_user_repository.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_unknown_user_before_email_check(self, user_service, mock_user_repository):
        mock_user_repository.find_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await user_service.update_user("missing", email="taken@example.com")

        mock_user_repository.find_by_email.assert_not_awaited()
        mock_user_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_to_email_of_other_user_conflicts(
        self, user_service, mock_user_repository, user_factory
    ):
        me = user_factory()
        other = user_factory(email="taken@example.com")
        mock_user_repository.find_by_id.return_value = me
        mock_user_repository.find_by_email.return_value = other

        with pytest.raises(ConflictError):
            await user_service.update_user(me.id, email="taken@example.com")

        mock_user_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_keeping_own_email(self, user_service, mock_user_repository, user_factory):
        me = user_factory(email="me@example.com")
        mock_user_repository.find_by_id.return_value = me
        mock_user_repository.find_by_email.return_value = me
        mock_user_repository.update.return_value = me

        await user_service.update_user(me.id, name="Janet", email="me@example.com")

        mock_user_repository.update.assert_awaited_once_with(
            me.id, name="Janet", email="me@example.com"
        )


class TestBatchUpdate:
    @pytest.mark.asyncio
    async def test_invalid_element_does_not_undo_the_others(
        self, user_service, mock_user_repository, user_factory
    ):
        first = user_factory()
        last = user_factory()
        known = {first.id: first, last.id: last}

        async def find_by_id(user_id):
            return known.get(user_id)

        mock_user_repository.find_by_id.side_effect = find_by_id
        mock_user_repository.find_by_email.return_value = None
        mock_user_repository.update.return_value = first

        result = await user_service.update_many([
            UserChanges(id=first.id, name="One"),
            UserChanges(id="missing", name="Two"),
            UserChanges(id=last.id, name="Three"),
        ])

        assert result.updated == [first.id, last.id]
        assert [(f.id, f.reason) for f in result.failed] == [("missing", "User not found")]
        assert mock_user_repository.commit.await_count == 2
        assert mock_user_repository.rollback.await_count == 1

    @pytest.mark.asyncio
    async def test_malformed_email_is_reported_not_raised(
        self, user_service, mock_user_repository, user_factory
    ):
        user = user_factory()
        mock_user_repository.find_by_id.return_value = user

        result = await user_service.update_many([UserChanges(id=user.id, email="nope")])

        assert result.updated == []
        assert result.failed[0].reason == "Invalid email format"

    @pytest.mark.asyncio
    async def test_empty_batch_is_invalid(self, user_service):
        with pytest.raises(ValidationError) as exc_info:
            await user_service.update_many([])

        assert exc_info.value.message == "Invalid input"


class TestDeleteUser:
    @pytest.mark.asyncio
    async def test_delete_unknown_user(self, user_service, mock_user_repository):
        mock_user_repository.delete_by_id.return_value = False

        with pytest.raises(NotFoundError):
            await user_service.delete_user("missing")

    @pytest.mark.asyncio
    async def test_delete_all_returns_count(self, user_service, mock_user_repository):
        mock_user_repository.delete_all.return_value = 3

        assert await user_service.delete_all_users() == 3
