"""Helpers to read the measurement type configuration."""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError as SchemaError

from ..core.errors import ConfigError
from ..core.types import MeasurementCatalogue, load
from ..schemas.measurement_types import MeasurementTypeList

__all__ = ["default_types_path", "read_measurement_types", "load_catalogue"]

logger = logging.getLogger("newsscore.content")

_YAML_SUFFIXES = {".yml", ".yaml"}


def default_types_path() -> Path:
    """Return the packaged measurement type table."""

    return Path(str(resources.files(__name__).joinpath("measurement_types.yml")))


def _parse(path: Path, text: str) -> Any:
    if path.suffix.lower() in _YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def read_measurement_types(path: Union[str, Path, None]) -> List[Dict[str, Any]]:
    """Read and schema-check the type records stored at *path*.

    Every failure mode is reported as a single :class:`ConfigError`.
    """

    if path is None or not str(path).strip():
        raise ConfigError("Unable to find the path to type data file. Please validate the configuration")
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read type data file {source}: {exc}") from exc
    try:
        raw = _parse(source, text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Type data file {source} is not well formed: {exc}") from exc
    if not raw:
        raise ConfigError("Valid types not found in the type data file. Please validate the configuration")
    try:
        records = MeasurementTypeList.validate_python(raw)
    except SchemaError as exc:
        raise ConfigError(f"Type data file {source} is invalid: {exc}") from exc
    return [record.model_dump() for record in records]


def load_catalogue(path: Union[str, Path, None] = None) -> MeasurementCatalogue:
    """Read *path* (or the packaged table) and build a catalogue from it."""

    source: Optional[Union[str, Path]] = default_types_path() if path is None else path
    try:
        catalogue = load(read_measurement_types(source))
    except ConfigError as exc:
        logger.error("Failed to load measurement types from %s: %s", source, exc)
        raise
    logger.info("Loaded %d measurement types from %s", len(catalogue), source)
    return catalogue
