"""In-memory implementation of the user repository."""

from dataclasses import replace
from uuid import uuid4

from user_directory.core.concurrency import ReadWriteLock
from user_directory.domain.entities.user import PageRequest, User, UserPage, utcnow


class InMemoryUserStore:
    """Process-lifetime user directory guarded by a reader/writer lock.

    Records are frozen, so handing them out never exposes the mapping itself.
    Listings are ordered by ``(created_at, id)`` before windowing.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = ReadWriteLock()

    # ── write operations ─────────────────────────────────────

    def add(self, user: User) -> User:
        now = utcnow()
        created = replace(user, id=str(uuid4()), created_at=now, updated_at=now)
        with self._lock.write_locked():
            self._users[created.id] = created
        return created

    def update(self, user_id: str, user: User) -> User | None:
        with self._lock.write_locked():
            existing = self._users.get(user_id)
            if existing is None:
                return None

            updated = replace(
                user,
                id=existing.id,
                created_at=existing.created_at,
                updated_at=max(utcnow(), existing.updated_at),
            )
            self._users[user_id] = updated
            return updated

    def delete(self, user_id: str) -> bool:
        with self._lock.write_locked():
            return self._users.pop(user_id, None) is not None

    # ── read operations ──────────────────────────────────────

    def get(self, user_id: str) -> User | None:
        with self._lock.read_locked():
            return self._users.get(user_id)

    def list(self, query: PageRequest) -> UserPage:
        with self._lock.read_locked():
            matched = [u for u in self._users.values() if u.matches_country(query.country)]

        matched.sort(key=lambda u: (u.created_at, u.id))
        total = len(matched)
        start = min(query.offset, total)
        end = min(start + query.page_size, total)
        return UserPage(total=total, users=matched[start:end])

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._users)
