"""Immutable catalogue of measurement types and their scored ranges."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from pydantic import ValidationError as SchemaError

from ..schemas.measurement_types import MeasurementTypeList
from .errors import ConfigError

__all__ = ["ScoringRange", "MeasurementType", "MeasurementCatalogue", "fold_name", "load"]


def fold_name(name: str) -> str:
    """Return the locale-independent matching key for a type name."""

    return name.casefold()


@dataclass(frozen=True)
class ScoringRange:
    """Half-open interval ``(start, end]`` worth ``value`` points."""

    start: int
    end: int
    value: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ConfigError(
                f"Start of a range should not be more than the end (start={self.start}, end={self.end})"
            )

    def contains(self, value: int) -> bool:
        return self.start < value <= self.end


@dataclass(frozen=True)
class MeasurementType:
    """One scorable physiological parameter.

    ``min_value`` and ``max_value`` are derived from the ranges when the
    instance is built and are never recomputed.
    """

    name: str
    description: str
    ranges: Tuple[ScoringRange, ...]
    min_value: int = field(init=False)
    max_value: int = field(init=False)

    def __post_init__(self) -> None:
        ranges = tuple(self.ranges)
        if not ranges:
            raise ConfigError(f"Measurement type {self.name} has no ranges configured")
        object.__setattr__(self, "ranges", ranges)
        object.__setattr__(self, "min_value", min(item.start for item in ranges))
        object.__setattr__(self, "max_value", max(item.end for item in ranges))

    @property
    def key(self) -> str:
        return fold_name(self.name)

    def in_bounds(self, value: int) -> bool:
        return self.min_value < value <= self.max_value

    def find_range(self, value: int) -> Optional[ScoringRange]:
        # First match wins when ranges overlap.
        for scoring_range in self.ranges:
            if scoring_range.contains(value):
                return scoring_range
        return None


class MeasurementCatalogue:
    """Read-only lookup over the configured measurement types."""

    __slots__ = ("_types", "_by_key")

    def __init__(self, types: Iterable[MeasurementType]):
        ordered = tuple(types)
        if not ordered:
            raise ConfigError("Valid types not found in the type data file. Please validate the configuration")
        by_key: Dict[str, MeasurementType] = {}
        for measurement_type in ordered:
            if measurement_type.key in by_key:
                raise ConfigError(f"Measurement type {measurement_type.name} is configured more than once")
            by_key[measurement_type.key] = measurement_type
        self._types = ordered
        self._by_key = by_key

    def __iter__(self) -> Iterator[MeasurementType]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and fold_name(name) in self._by_key

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(item.name for item in self._types)

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(self._by_key)

    def find_by_name(self, name: str) -> Optional[MeasurementType]:
        return self._by_key.get(fold_name(name))


def load(records: Any) -> MeasurementCatalogue:
    """Build a catalogue from parsed type records.

    Each record carries ``name``, ``description`` and an ordered ``ranges``
    list of ``{start, end, value}`` integer mappings. Any malformed record
    or range fails the whole load with :class:`ConfigError`.
    """

    try:
        parsed = MeasurementTypeList.validate_python(records)
    except SchemaError as exc:
        raise ConfigError(f"Measurement type records are invalid: {exc}") from exc

    types = [
        MeasurementType(
            name=record.name,
            description=record.description,
            ranges=tuple(ScoringRange(start=item.start, end=item.end, value=item.value) for item in record.ranges),
        )
        for record in parsed
    ]
    return MeasurementCatalogue(types)
