"""Domain entities for admin authentication."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from blog.domain.time import is_expired, utcnow

# Upper bound for session lifetimes and extensions (ten years)
MAX_SESSION_HOURS = 24 * 365 * 10


@dataclass
class AdminSession:
    """Server-side session binding an opaque token to a principal."""

    session_id: str
    user_id: str
    expires_at: datetime
    id: int | None = None
    created_at: datetime = field(default_factory=utcnow)
    last_accessed_at: datetime = field(default_factory=utcnow)
    ip_address: str | None = None
    user_agent: str | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        return is_expired(self.expires_at, now)

    def mark_accessed(self, now: datetime) -> None:
        self.last_accessed_at = now

    def extend(self, hours: float, now: datetime) -> None:
        """Push expiry to ``now + hours`` (not relative to the old expiry)."""
        self.expires_at = now + timedelta(hours=hours)
        self.last_accessed_at = now


@dataclass(frozen=True)
class AuthUser:
    """The authenticated principal returned by a successful validation."""

    user_id: str
    name: str
    role: str = "admin"


@dataclass(frozen=True)
class SessionInfo:
    """Live session details exposed to the session-status endpoint."""

    user: AuthUser
    expires_at: datetime
