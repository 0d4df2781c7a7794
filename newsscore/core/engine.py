"""Batch validation and aggregate score calculation."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Sequence, Tuple, cast

from .errors import BoundsError, ConfigurationMismatchError, NewsScoreError, ValidationError
from .types import MeasurementCatalogue, fold_name

__all__ = [
    "Measurement",
    "ScoredMeasurement",
    "ScoreResult",
    "validate_input_data",
    "calculate_score",
]


class MeasurementLike(Protocol):
    type: str
    value: int


@dataclass(frozen=True)
class Measurement:
    type: str
    value: int


@dataclass(frozen=True)
class ScoredMeasurement:
    type: str
    value: int
    points: int


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of one scoring call: a total or the first error found."""

    score: Optional[int] = None
    error: Optional[NewsScoreError] = None
    breakdown: Tuple[ScoredMeasurement, ...] = field(default_factory=tuple)

    @classmethod
    def ok(cls, score: int, breakdown: Sequence[ScoredMeasurement] = ()) -> "ScoreResult":
        return cls(score=score, breakdown=tuple(breakdown))

    @classmethod
    def failed(cls, error: NewsScoreError) -> "ScoreResult":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        if self.error is not None:
            raise self.error
        return cast(int, self.score)


def _first_spellings(names: Sequence[str]) -> Dict[str, str]:
    spellings: Dict[str, str] = {}
    for name in names:
        spellings.setdefault(fold_name(name), name)
    return spellings


def validate_input_data(
    batch: Sequence[MeasurementLike], catalogue: MeasurementCatalogue
) -> Optional[ValidationError]:
    """Check that *batch* names every configured type exactly once.

    Categories are evaluated in a fixed order (missing, unexpected,
    duplicate) and only the first non-empty one is reported.
    """

    valid_keys = catalogue.keys
    input_names = [measurement.type for measurement in batch]
    input_keys = [fold_name(name) for name in input_names]

    if len(valid_keys) == len(input_keys) and set(valid_keys) == set(input_keys):
        return None

    present = set(input_keys)
    missing = [item.name for item in catalogue if item.key not in present]
    if missing:
        return ValidationError("missing", missing)

    spellings = _first_spellings(input_names)
    unexpected = [spelling for key, spelling in spellings.items() if key not in catalogue]
    if unexpected:
        return ValidationError("unexpected", unexpected)

    counts = Counter(input_keys)
    duplicated = [spelling for key, spelling in spellings.items() if counts[key] > 1]
    if duplicated:
        return ValidationError("duplicate", duplicated)
    return None


def calculate_score(batch: Sequence[MeasurementLike], catalogue: MeasurementCatalogue) -> ScoreResult:
    """Validate *batch* and sum the points of the range each value falls in.

    No partial total is ever returned: the first failure ends the call.
    """

    error = validate_input_data(batch, catalogue)
    if error is not None:
        return ScoreResult.failed(error)

    total = 0
    breakdown: List[ScoredMeasurement] = []
    for measurement in batch:
        measurement_type = catalogue.find_by_name(measurement.type)
        if measurement_type is None:
            return ScoreResult.failed(ValidationError("unexpected", [measurement.type]))
        value = measurement.value
        if not measurement_type.in_bounds(value):
            return ScoreResult.failed(
                BoundsError(
                    measurement_type.name,
                    measurement_type.description,
                    measurement_type.min_value,
                    measurement_type.max_value,
                    value,
                )
            )
        matched = measurement_type.find_range(value)
        if matched is None:
            return ScoreResult.failed(
                ConfigurationMismatchError(measurement_type.name, measurement_type.description, value)
            )
        total += matched.value
        breakdown.append(ScoredMeasurement(type=measurement_type.name, value=value, points=matched.value))
    return ScoreResult.ok(total, breakdown)
