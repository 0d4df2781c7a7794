"""Configuration model and scoring engine."""

from .engine import Measurement, ScoredMeasurement, ScoreResult, calculate_score, validate_input_data
from .errors import BoundsError, ConfigError, ConfigurationMismatchError, NewsScoreError, ValidationError
from .types import MeasurementCatalogue, MeasurementType, ScoringRange, load

__all__ = [
    "BoundsError",
    "ConfigError",
    "ConfigurationMismatchError",
    "Measurement",
    "MeasurementCatalogue",
    "MeasurementType",
    "NewsScoreError",
    "ScoredMeasurement",
    "ScoreResult",
    "ScoringRange",
    "ValidationError",
    "calculate_score",
    "load",
    "validate_input_data",
]
