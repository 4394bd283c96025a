"""Admin session lifecycle: create, validate, extend, delete, reap."""

import hmac
import ipaddress
import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from blog.application.interfaces import AdminSessionRepository
from blog.config import Settings
from blog.domain.entities import AdminSession, AuthUser, SessionInfo
from blog.domain.entities.admin_session import MAX_SESSION_HOURS
from blog.domain.time import utcnow

logger = logging.getLogger(__name__)
security_logger = logging.getLogger("security.admin_auth")

DEFAULT_SESSION_HOURS = 24
USER_AGENT_MAX_LENGTH = 500
_LOCALHOST_NAMES = frozenset({"localhost"})


@dataclass
class SessionOptions:
    ip_address: str | None = None
    user_agent: str | None = None
    expiration_hours: float = DEFAULT_SESSION_HOURS


def generate_session_id() -> str:
    """64-character URL-safe token from the OS CSPRNG."""
    return secrets.token_urlsafe(48)


def clean_ip_address(value: str | None) -> str | None:
    """Return the address if it parses as IPv4/IPv6 or is ``localhost``, else None."""
    if not value:
        return None
    value = value.strip()
    if value in _LOCALHOST_NAMES:
        return value
    try:
        return str(ipaddress.ip_address(value))
    except ValueError:
        return None


def clean_user_agent(value: str | None) -> str | None:
    if not value:
        return None
    return value.strip()[:USER_AGENT_MAX_LENGTH] or None


def verify_credentials(username: str, password: str, settings: Settings) -> bool:
    """Constant-time comparison against the configured admin credentials."""
    if not settings.admin_password:
        return False
    user_ok = hmac.compare_digest(username.encode(), settings.admin_username.encode())
    password_ok = hmac.compare_digest(password.encode(), settings.admin_password.encode())
    return user_ok and password_ok


class SessionService:
    """Issues and checks opaque session tokens.

    At most one live session exists per user: ``create`` removes every
    earlier session for the user before inserting the new one. Expired
    sessions are never returned by ``validate`` or revived by ``extend``,
    whether or not ``reap`` has removed them yet.
    """

    def __init__(
        self,
        repository: AdminSessionRepository,
        display_name: str = "Admin",
        clock: Callable[[], datetime] = utcnow,
    ):
        self._repository = repository
        self._display_name = display_name
        self._clock = clock

    async def create(self, user_id: str, options: SessionOptions | None = None) -> str:
        options = options or SessionOptions()
        hours = options.expiration_hours
        if hours <= 0:
            logger.warning("Creating session for %s with non-positive lifetime", user_id)
            hours = 0
        elif hours > MAX_SESSION_HOURS:
            logger.warning(
                "Session lifetime %sh for %s capped at %sh", hours, user_id, MAX_SESSION_HOURS
            )
            hours = MAX_SESSION_HOURS
        now = self._clock()
        session = AdminSession(
            session_id=generate_session_id(),
            user_id=user_id,
            expires_at=now + timedelta(hours=hours),
            created_at=now,
            last_accessed_at=now,
            ip_address=clean_ip_address(options.ip_address),
            user_agent=clean_user_agent(options.user_agent),
        )

        # Delete before insert: a failure in between leaves no session, never two.
        removed = await self._repository.delete_for_user(user_id)
        await self._repository.create(session)

        security_logger.info(
            "Admin session created",
            extra={
                "event": "session_created",
                "user_id": user_id,
                "client_ip": session.ip_address,
                "replaced": removed,
                "expires_at": session.expires_at.isoformat(),
            },
        )
        return session.session_id

    async def validate(self, session_id: str | None) -> AuthUser | None:
        """Return the principal for a live session and record the access."""
        session = await self._touch(session_id)
        if session is None:
            return None
        return self._principal(session)

    async def describe(self, session_id: str | None) -> SessionInfo | None:
        session = await self._touch(session_id)
        if session is None:
            return None
        return SessionInfo(user=self._principal(session), expires_at=session.expires_at)

    async def extend(self, session_id: str | None, hours: float = DEFAULT_SESSION_HOURS) -> bool:
        if not session_id or not 0 < hours <= MAX_SESSION_HOURS:
            return False
        now = self._clock()
        session = await self._repository.get_live(session_id, now)
        if session is None:
            return False
        session.extend(hours, now)
        await self._repository.update(session)
        return True

    async def delete(self, session_id: str | None) -> None:
        if not session_id:
            return
        await self._repository.delete(session_id)

    async def delete_all_for_user(self, user_id: str) -> int:
        return await self._repository.delete_for_user(user_id)

    async def reap(self) -> int:
        """Remove expired sessions. Housekeeping only; validity never depends on it."""
        deleted = await self._repository.delete_expired(self._clock())
        if deleted:
            logger.info("Reaped %d expired admin sessions", deleted)
        return deleted

    async def _touch(self, session_id: str | None) -> AdminSession | None:
        if not session_id:
            return None
        now = self._clock()
        session = await self._repository.get_live(session_id, now)
        if session is None or session.is_expired(now):
            return None
        session.mark_accessed(now)
        return await self._repository.update(session)

    def _principal(self, session: AdminSession) -> AuthUser:
        return AuthUser(user_id=session.user_id, name=self._display_name, role="admin")
