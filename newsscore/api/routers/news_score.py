"""API endpoints for NEWS score calculation."""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ...core.errors import BoundsError, ConfigError, ConfigurationMismatchError, NewsScoreError, ValidationError
from ..deps import get_score_service
from ..schemas.news_score import (
    ErrorResponse,
    MeasurementRequest,
    MeasurementTypeOut,
    RangeOut,
    ScoreItem,
    ScoreResponse,
)
from ..services.score_service import ScoreService

logger = logging.getLogger("newsscore.api")

router = APIRouter(prefix="/NEWSScore", tags=["news-score"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _status_for(error: NewsScoreError) -> int:
    if isinstance(error, (ValidationError, BoundsError)):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_response(error: NewsScoreError) -> JSONResponse:
    code = _status_for(error)
    if isinstance(error, ConfigurationMismatchError):
        logger.error("Configuration mismatch for %s value %s: %s", error.type_name, error.value, error)
    elif code >= 500:
        logger.error("Scoring unavailable: %s", error)
    else:
        logger.warning("Rejected batch (%s): %s", type(error).__name__, error)
    return JSONResponse(status_code=code, content={"error": error.message})


@router.post("/Calculate", response_model=ScoreResponse, responses=_ERROR_RESPONSES)
def calculate_news_score(payload: MeasurementRequest, service: ScoreService = Depends(get_score_service)):
    try:
        result = service.calculate(payload.measurements)
    except ConfigError as exc:
        return _error_response(exc)
    if result.error is not None:
        return _error_response(result.error)
    return ScoreResponse(
        score=result.unwrap(),
        breakdown=[ScoreItem(type=item.type, value=item.value, points=item.points) for item in result.breakdown],
    )


@router.get("/types", response_model=List[MeasurementTypeOut], responses=_ERROR_RESPONSES)
def list_measurement_types(service: ScoreService = Depends(get_score_service)):
    try:
        catalogue = service.catalogue
    except ConfigError as exc:
        return _error_response(exc)
    return [
        MeasurementTypeOut(
            name=item.name,
            description=item.description,
            min_value=item.min_value,
            max_value=item.max_value,
            ranges=[RangeOut(start=r.start, end=r.end, value=r.value) for r in item.ranges],
        )
        for item in catalogue
    ]
