"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import Settings, get_settings
from blog.application.services import SessionReaper
from blog.infrastructure.database import Database
from blog.infrastructure.dependencies import build_session_service
from blog.infrastructure.logging.log_config import setup_logging
from blog.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: open the database, create tables, start the reaper."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    # 1. One database handle for the whole process
    database = Database(settings.database_url, echo=settings.database_echo)
    app.state.database = database

    # 2. Create all database tables
    await database.create_all()
    logger.info("Database ready")

    # 3. Purge expired sessions now and periodically
    reaper = SessionReaper(
        database=database,
        service_factory=lambda session: build_session_service(session, settings),
        interval_seconds=settings.session_reap_interval_seconds,
    )
    await reaper.start()

    yield

    # Shutdown
    await reaper.stop()
    await database.dispose()
    logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
