"""Health check endpoint, free of database dependencies."""

from fastapi import APIRouter

from interior_planner.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Report service liveness along with the running version."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
    }
