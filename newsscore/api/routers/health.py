"""Health check endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ..core.config import settings
from ..deps import get_score_service
from ..services.score_service import ScoreService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
def healthcheck(service: ScoreService = Depends(get_score_service)) -> dict[str, str | int]:
    return {
        "status": "ok" if service.loaded else "unconfigured",
        "version": settings.api_version,
        "measurement_types": len(service.catalogue) if service.loaded else 0,
    }
