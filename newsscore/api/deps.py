"""Common FastAPI dependencies."""
from __future__ import annotations

from .services.score_service import ScoreService, score_service


def get_score_service() -> ScoreService:
    return score_service
