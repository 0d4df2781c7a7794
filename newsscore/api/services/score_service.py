"""Holds the measurement type snapshot and scores batches against it."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from ...content import load_catalogue
from ...core.engine import MeasurementLike, ScoreResult, calculate_score
from ...core.errors import ConfigError
from ...core.types import MeasurementCatalogue
from ..core.config import settings

logger = logging.getLogger("newsscore.service")

PathLike = Union[str, Path]


class ScoreService:
    """Score measurement batches against an immutable catalogue snapshot.

    Loading builds a complete new catalogue before publishing it with a
    single reference assignment, so a call already in flight keeps the
    snapshot it started with.
    """

    def __init__(self, *, source: Optional[PathLike] = None) -> None:
        self._source = source
        self._catalogue: Optional[MeasurementCatalogue] = None

    @property
    def source(self) -> Optional[PathLike]:
        return self._source

    @property
    def loaded(self) -> bool:
        return self._catalogue is not None

    @property
    def catalogue(self) -> MeasurementCatalogue:
        catalogue = self._catalogue
        if catalogue is None:
            raise ConfigError("Measurement types have not been loaded")
        return catalogue

    def load(self, path: Optional[PathLike] = None) -> MeasurementCatalogue:
        source = path if path is not None else self._source
        if source is None:
            source = settings.measurement_types_path
        catalogue = load_catalogue(source)
        self._catalogue = catalogue
        self._source = source
        return catalogue

    def reload(self) -> MeasurementCatalogue:
        """Re-read the current source; the old snapshot stays on failure."""

        return self.load(self._source)

    def calculate(self, batch: Sequence[MeasurementLike]) -> ScoreResult:
        catalogue = self.catalogue
        result = calculate_score(batch, catalogue)
        if result.is_ok:
            logger.debug("Scored %d measurements: %s", len(batch), result.score)
        return result


score_service = ScoreService()
