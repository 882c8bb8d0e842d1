"""Health check endpoints."""

from fastapi import APIRouter, Depends

from article_renderer.api.deps import get_app_settings
from article_renderer.core.config import Settings
from article_renderer.schemas import HealthResponse

router = APIRouter()


@router.get("/health", tags=["system"], response_model=HealthResponse)
def healthcheck(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Simple readiness probe."""

    return HealthResponse(status="ok", app=settings.app_name, environment=settings.environment)
