"""User repository protocol."""

from typing import Protocol

from user_directory.domain.entities.user import PageRequest, User, UserPage


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    def add(self, user: User) -> User:
        """Store a new user under a freshly assigned ID."""
        ...

    def get(self, user_id: str) -> User | None:
        """Get a user by ID."""
        ...

    def list(self, query: PageRequest) -> UserPage:
        """Get one page of users matching the query's country filter."""
        ...

    def update(self, user_id: str, user: User) -> User | None:
        """Replace an existing user, keeping its ID and creation time."""
        ...

    def delete(self, user_id: str) -> bool:
        """Delete a user and return success status."""
        ...

    def count(self) -> int:
        """Get the number of stored users."""
        ...
