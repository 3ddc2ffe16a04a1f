"""User service layer with business logic."""

import structlog

from user_directory.core.exceptions import UserNotFoundError
from user_directory.domain.entities.user import PageRequest, User, UserPage
from user_directory.domain.repositories.user_repository import IUserRepository

logger = structlog.get_logger()


class UserService:
    """Service layer for User business logic."""

    def __init__(self, repository: IUserRepository) -> None:
        self._users = repository

    async def create(self, user: User) -> User:
        """Create a new user; the ID and timestamps are assigned here."""
        created = self._users.add(user)
        logger.info("user_created", user_id=created.id)
        return created

    async def get_by_id(self, user_id: str) -> User:
        """Get a specific user."""
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def list(self, query: PageRequest) -> UserPage:
        """Get one page of users, optionally filtered by country."""
        return self._users.list(query)

    async def update(self, user_id: str, user: User) -> User:
        """Replace every writable field of an existing user.

        Fields missing from ``user`` are cleared, not preserved.
        """
        updated = self._users.update(user_id, user)
        if updated is None:
            raise UserNotFoundError(user_id)
        logger.info("user_updated", user_id=user_id)
        return updated

    async def delete(self, user_id: str) -> None:
        """Delete a user."""
        if not self._users.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info("user_deleted", user_id=user_id)

    async def count(self) -> int:
        return self._users.count()
