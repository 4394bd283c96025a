"""Port for admin session persistence."""

from abc import ABC, abstractmethod
from datetime import datetime

from blog.domain.entities import AdminSession


class AdminSessionRepository(ABC):
    """Session storage with a unique ``session_id``."""

    @abstractmethod
    async def create(self, session: AdminSession) -> AdminSession:
        """Insert a new session record."""
        ...

    @abstractmethod
    async def get_live(self, session_id: str, now: datetime) -> AdminSession | None:
        """Fetch the session only if its expires_at is after ``now``."""
        ...

    @abstractmethod
    async def update(self, session: AdminSession) -> AdminSession:
        """Persist expires_at / last_accessed_at changes."""
        ...

    @abstractmethod
    async def delete(self, session_id: str) -> bool:
        """Delete one session. Returns False if it did not exist."""
        ...

    @abstractmethod
    async def delete_for_user(self, user_id: str) -> int:
        """Delete every session owned by ``user_id``; returns the count."""
        ...

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete sessions whose expires_at is before ``now``; returns the count."""
        ...
