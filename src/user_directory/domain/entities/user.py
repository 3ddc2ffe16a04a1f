"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class User:
    """Domain entity for a User.

    ``id``, ``created_at`` and ``updated_at`` are owned by the store; values
    supplied by callers are overwritten on add and update.
    """

    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    password: str = ""
    email: str = ""
    country: str = ""
    id: str = ""
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def matches_country(self, country: str) -> bool:
        """Case-insensitive country match; an empty filter matches everyone."""
        return not country or self.country.casefold() == country.casefold()


@dataclass(frozen=True, slots=True)
class UserPage:
    """Read-only value object: one window of a filtered user listing."""

    total: int
    users: list[User]


@dataclass(frozen=True, slots=True)
class PageRequest:
    """Normalized paging and filtering parameters for a listing."""

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE
    country: str = ""

    @classmethod
    def from_query(
        cls,
        page: str | int | None = None,
        page_size: str | int | None = None,
        country: str | None = None,
    ) -> "PageRequest":
        """Build from raw query values, falling back to defaults.

        Missing, unparsable and non-positive values are all treated as absent.
        """
        return cls(
            page=_positive_int(page, DEFAULT_PAGE),
            page_size=_positive_int(page_size, DEFAULT_PAGE_SIZE),
            country=country or "",
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def _positive_int(value: str | int | None, default: int) -> int:
    if value is None:
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default
