"""Unit tests for UserService."""

from unittest.mock import MagicMock

import pytest

from user_directory.core.exceptions import UserNotFoundError
from user_directory.domain.entities.user import PageRequest, User, UserPage
from user_directory.domain.services.user_service import UserService


@pytest.fixture
def service(repository: MagicMock) -> UserService:
    return UserService(repository)


class TestCreate:
    @pytest.mark.asyncio
    async def test_delegates_to_repository(
        self, service: UserService, repository: MagicMock, alice: User
    ):
        stored = User(first_name="Alice", id="u-1")
        repository.add.return_value = stored

        result = await service.create(alice)

        assert result is stored
        repository.add.assert_called_once_with(alice)


class TestGetById:
    @pytest.mark.asyncio
    async def test_returns_user(self, service: UserService, repository: MagicMock):
        stored = User(first_name="Alice", id="u-1")
        repository.get.return_value = stored

        assert await service.get_by_id("u-1") is stored

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: UserService, repository: MagicMock):
        repository.get.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            await service.get_by_id("missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.details == {"user_id": "missing"}


class TestList:
    @pytest.mark.asyncio
    async def test_passes_query_through(self, service: UserService, repository: MagicMock):
        page = UserPage(total=0, users=[])
        repository.list.return_value = page
        query = PageRequest(page=2, page_size=5, country="UK")

        assert await service.list(query) is page
        repository.list.assert_called_once_with(query)


class TestUpdate:
    @pytest.mark.asyncio
    async def test_returns_updated(
        self, service: UserService, repository: MagicMock, alice: User
    ):
        stored = User(first_name="Alice", id="u-1")
        repository.update.return_value = stored

        assert await service.update("u-1", alice) is stored
        repository.update.assert_called_once_with("u-1", alice)

    @pytest.mark.asyncio
    async def test_raises_not_found(
        self, service: UserService, repository: MagicMock, alice: User
    ):
        repository.update.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.update("missing", alice)


class TestDelete:
    @pytest.mark.asyncio
    async def test_deletes(self, service: UserService, repository: MagicMock):
        repository.delete.return_value = True

        await service.delete("u-1")

        repository.delete.assert_called_once_with("u-1")

    @pytest.mark.asyncio
    async def test_raises_not_found(self, service: UserService, repository: MagicMock):
        repository.delete.return_value = False

        with pytest.raises(UserNotFoundError):
            await service.delete("missing")


class TestCount:
    @pytest.mark.asyncio
    async def test_counts(self, service: UserService, repository: MagicMock):
        repository.count.return_value = 7

        assert await service.count() == 7
