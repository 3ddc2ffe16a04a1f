"""Shared fixtures for unit tests."""

from unittest.mock import MagicMock

import pytest

from user_directory.domain.entities.user import User


@pytest.fixture
def repository() -> MagicMock:
    """A mocked user repository."""
    return MagicMock()


@pytest.fixture
def alice() -> User:
    return User(
        first_name="Alice",
        last_name="Smith",
        nickname="alice123",
        password="securepassword",
        email="alice@smith.com",
        country="UK",
    )
