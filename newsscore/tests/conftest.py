from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

from newsscore.core.types import MeasurementCatalogue, MeasurementType, ScoringRange


def hr_ranges() -> tuple[ScoringRange, ...]:
    return (
        ScoringRange(40, 50, 1),
        ScoringRange(50, 90, 0),
        ScoringRange(90, 110, 1),
        ScoringRange(110, 130, 2),
    )


@pytest.fixture
def hr_type() -> MeasurementType:
    return MeasurementType(name="HR", description="Heart rate", ranges=hr_ranges())


@pytest.fixture
def catalogue(hr_type: MeasurementType) -> MeasurementCatalogue:
    sbp = MeasurementType(
        name="SBP",
        description="Systolic blood pressure",
        ranges=(
            ScoringRange(70, 90, 3),
            ScoringRange(90, 100, 2),
            ScoringRange(100, 110, 1),
            ScoringRange(110, 219, 0),
            ScoringRange(219, 300, 3),
        ),
    )
    return MeasurementCatalogue([hr_type, sbp])


@pytest.fixture
def type_records() -> List[Dict[str, Any]]:
    return [
        {
            "name": "HR",
            "description": "Heart rate",
            "ranges": [
                {"start": 40, "end": 50, "value": 1},
                {"start": 50, "end": 90, "value": 0},
                {"start": 90, "end": 110, "value": 1},
                {"start": 110, "end": 130, "value": 2},
            ],
        },
        {
            "name": "RR",
            "description": "Respiratory rate",
            "ranges": [
                {"start": 3, "end": 8, "value": 3},
                {"start": 8, "end": 11, "value": 1},
                {"start": 11, "end": 20, "value": 0},
            ],
        },
    ]


@pytest.fixture
def write_types(tmp_path: Path) -> Callable[..., Path]:
    def _write(records: Any, name: str = "types.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write
