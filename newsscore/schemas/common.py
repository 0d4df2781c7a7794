"""Common schema utilities for the NEWS score service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """Immutable base model that tolerates unknown fields."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
