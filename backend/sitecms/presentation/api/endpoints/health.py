"""Health check endpoint: no backend round trip, always available."""

from fastapi import APIRouter, Depends

from sitecms.infrastructure.container import Container
from sitecms.infrastructure.dependencies import get_container

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(container: Container = Depends(get_container)) -> dict:
    """Returns the current application health status."""
    settings = container.settings
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "backend": container.document_store.backend_name,
    }
