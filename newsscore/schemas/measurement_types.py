"""Schemas describing the measurement type configuration document."""

from __future__ import annotations

from typing import List

from pydantic import AliasChoices, Field, StrictInt, TypeAdapter

from .common import FrozenModel


class RangeRecord(FrozenModel):
    start: StrictInt = Field(validation_alias=AliasChoices("start", "Start"))
    end: StrictInt = Field(validation_alias=AliasChoices("end", "End"))
    value: StrictInt = Field(validation_alias=AliasChoices("value", "Value"))


class MeasurementTypeRecord(FrozenModel):
    name: str = Field(min_length=1, validation_alias=AliasChoices("name", "Name"))
    description: str = Field(default="", validation_alias=AliasChoices("description", "Description"))
    ranges: List[RangeRecord] = Field(validation_alias=AliasChoices("ranges", "Ranges"))


MeasurementTypeList = TypeAdapter(List[MeasurementTypeRecord])
