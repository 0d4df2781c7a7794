"""Pydantic schemas for NEWS score requests and responses."""
from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt


class MeasurementIn(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = Field(..., validation_alias=AliasChoices("type", "Type"))
    value: StrictInt = Field(..., validation_alias=AliasChoices("value", "Value"))


class MeasurementRequest(BaseModel):
    measurements: List[MeasurementIn] = Field(..., validation_alias=AliasChoices("measurements", "Measurements"))


class ScoreItem(BaseModel):
    type: str
    value: int
    points: int


class ScoreResponse(BaseModel):
    score: int
    breakdown: List[ScoreItem] = Field(default_factory=list)


class RangeOut(BaseModel):
    start: int
    end: int
    value: int


class MeasurementTypeOut(BaseModel):
    name: str
    description: str
    min_value: int
    max_value: int
    ranges: List[RangeOut]


class ErrorResponse(BaseModel):
    error: str
