"""Dependency injection factories for the API."""

from fastapi import Request

from user_directory.domain.services.user_service import UserService
from user_directory.infrastructure.memory.user_store import InMemoryUserStore


def get_user_store(request: Request) -> InMemoryUserStore:
    """Get the store created for this application instance."""
    return request.app.state.user_store  # type: ignore[no-any-return]


def get_user_service(request: Request) -> UserService:
    """Get User service instance bound to the application's store."""
    return UserService(get_user_store(request))
