"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog.config import Settings, get_settings
from blog.application.services import ArticleService, SessionService
from blog.domain.entities import AuthUser
from blog.infrastructure.database.session import get_db_session
from blog.infrastructure.database.repositories import (
    SQLAlchemyAdminSessionRepository,
    SQLAlchemyArticleRepository,
)


def build_session_service(session: AsyncSession, settings: Settings | None = None) -> SessionService:
    """SessionService bound to one database session (requests and the reaper)."""
    settings = settings or get_settings()
    return SessionService(
        SQLAlchemyAdminSessionRepository(session),
        display_name=settings.admin_display_name,
    )


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return getattr(request.app.state, "settings", None) or get_settings()


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository)


async def get_session_service(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[SessionService, None]:
    """Provides a SessionService backed by the admin_sessions table."""
    yield build_session_service(session, settings)


async def get_optional_user(
    request: Request,
    sessions: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_app_settings),
) -> AuthUser | None:
    """Principal for the request's session cookie, or None."""
    session_id = request.cookies.get(settings.session_cookie_name)
    return await sessions.validate(session_id)


async def require_admin(
    user: AuthUser | None = Depends(get_optional_user),
) -> AuthUser:
    """Reject requests without a live admin session."""
    if user is None or user.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized. Admin access required.",
        )
    return user
