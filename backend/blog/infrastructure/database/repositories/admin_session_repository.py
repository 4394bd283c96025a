"""SQLAlchemy-backed storage for admin sessions."""

from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import AdminSessionRepository
from blog.domain.entities import AdminSession
from blog.domain.exceptions import DuplicateEntityError
from blog.domain.time import ensure_utc
from blog.infrastructure.database.models import AdminSessionModel


class SQLAlchemyAdminSessionRepository(AdminSessionRepository):
    """Implements the AdminSessionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AdminSessionModel) -> AdminSession:
        return AdminSession(
            id=model.id,
            session_id=model.session_id,
            user_id=model.user_id,
            expires_at=ensure_utc(model.expires_at),
            created_at=ensure_utc(model.created_at),
            last_accessed_at=ensure_utc(model.last_accessed_at),
            ip_address=model.ip_address,
            user_agent=model.user_agent,
        )

    async def create(self, session: AdminSession) -> AdminSession:
        model = AdminSessionModel(
            session_id=session.session_id,
            user_id=session.user_id,
            expires_at=session.expires_at,
            created_at=session.created_at,
            last_accessed_at=session.last_accessed_at,
            ip_address=session.ip_address,
            user_agent=session.user_agent,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise DuplicateEntityError("AdminSession", "session_id", "<redacted>") from exc
        return self._to_entity(model)

    async def get_live(self, session_id: str, now: datetime) -> AdminSession | None:
        stmt = select(AdminSessionModel).where(
            AdminSessionModel.session_id == session_id,
            AdminSessionModel.expires_at > now,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def update(self, session: AdminSession) -> AdminSession:
        stmt = select(AdminSessionModel).where(AdminSessionModel.session_id == session.session_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise ValueError("AdminSession not found in database")
        model.expires_at = session.expires_at
        model.last_accessed_at = session.last_accessed_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, session_id: str) -> bool:
        stmt = (
            delete(AdminSessionModel)
            .where(AdminSessionModel.session_id == session_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def delete_for_user(self, user_id: str) -> int:
        stmt = (
            delete(AdminSessionModel)
            .where(AdminSessionModel.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        stmt = (
            delete(AdminSessionModel)
            .where(AdminSessionModel.expires_at < now)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount
