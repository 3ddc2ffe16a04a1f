"""Custom exceptions and error codes."""

from collections.abc import Iterable
from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Validation errors (400)
    INVALID_INPUT = "INVALID_INPUT"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class MalformedInputError(AppException):
    """Request body could not be decoded."""

    def __init__(self, details: Any | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_INPUT,
            message="Invalid input",
            status_code=400,
            details=details,
        )

    @classmethod
    def from_errors(cls, errors: Iterable[Any]) -> "MalformedInputError":
        """Build from pydantic-style error dicts, keeping field, message and type."""
        return cls(
            details=[
                {
                    "field": ".".join(str(x) for x in err["loc"]),
                    "message": err["msg"],
                    "type": err["type"],
                }
                for err in errors
            ]
        )


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
            status_code=404,
            details={"user_id": user_id},
        )
