"""Health check endpoint: no dependencies, always available."""

from fastapi import APIRouter, Depends

from blog.config import Settings
from blog.infrastructure.dependencies import get_app_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)) -> dict:
    """Returns the current application health status."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
    }
