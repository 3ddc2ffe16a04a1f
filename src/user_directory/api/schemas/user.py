"""Pydantic schemas for User API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from user_directory.core.exceptions import MalformedInputError
from user_directory.domain.entities.user import User


class UserWrite(BaseModel):
    """Schema for creating or replacing a User.

    Every field is optional; on replace, an omitted field is cleared.
    Unknown keys such as ``id`` or ``created_at`` are ignored, and a JSON
    ``null`` (for the whole body or a field) decodes as empty.
    """

    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    password: str = ""
    email: str = ""
    country: str = ""

    @model_validator(mode="before")
    @classmethod
    def null_body_as_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def decode(cls, raw: bytes) -> "UserWrite":
        """Decode a request body as JSON whatever its declared content type."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise MalformedInputError.from_errors(exc.errors()) from exc

    def to_entity(self) -> User:
        return User(**self.model_dump())


class UserResponse(BaseModel):
    """Schema for User response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "first_name": "Alice",
                "last_name": "Smith",
                "nickname": "alice123",
                "password": "securepassword",
                "email": "alice@smith.com",
                "country": "UK",
                "created_at": "2026-01-28T10:00:00Z",
                "updated_at": "2026-01-28T10:00:00Z",
            }
        },
    )

    id: str
    first_name: str
    last_name: str
    nickname: str
    password: str
    email: str
    country: str
    created_at: datetime
    updated_at: datetime


class UserListResponse(BaseModel):
    """Schema for a page of Users."""

    total: int
    users: list[UserResponse]
