"""Error kinds raised or returned by the scoring core."""

from __future__ import annotations

from typing import Iterable, Literal, Tuple

__all__ = [
    "NewsScoreError",
    "ConfigError",
    "ValidationError",
    "BoundsError",
    "ConfigurationMismatchError",
]

ValidationCategory = Literal["missing", "unexpected", "duplicate"]

_VALIDATION_TEMPLATES = {
    "missing": "Measurement for {name} missing in input.",
    "unexpected": "Invalid type: {name} present in input.",
    "duplicate": "Measurement for {name} is duplicated in input.",
}


class NewsScoreError(Exception):
    """Base class for every error produced by the scoring core."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigError(NewsScoreError):
    """The configuration source is missing, unreadable, empty or malformed."""


class ValidationError(NewsScoreError):
    """The batch does not carry exactly one measurement per configured type."""

    def __init__(self, category: ValidationCategory, names: Iterable[str]) -> None:
        self.category = category
        self.names: Tuple[str, ...] = tuple(names)
        template = _VALIDATION_TEMPLATES[category]
        super().__init__(" ".join(template.format(name=name) for name in self.names))


class BoundsError(NewsScoreError):
    """A value lies outside the overall interval of its measurement type."""

    def __init__(self, type_name: str, description: str, min_value: int, max_value: int, value: int) -> None:
        self.type_name = type_name
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.value = value
        super().__init__(
            f"Value of {description}({type_name}) is out of valid range "
            f"{min_value}(Exclusive)-{max_value}(Inclusive)"
        )


class ConfigurationMismatchError(NewsScoreError):
    """A value passed the bounds check but no configured range covers it."""

    def __init__(self, type_name: str, description: str, value: int) -> None:
        self.type_name = type_name
        self.description = description
        self.value = value
        super().__init__(
            f"The value {value} for {description}({type_name}) is not found in any of the defined ranges"
        )
