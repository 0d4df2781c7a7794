from __future__ import annotations

import pytest

from newsscore.api.services.score_service import ScoreService
from newsscore.core.engine import Measurement
from newsscore.core.errors import ConfigError


def test_calculate_before_load_raises():
    service = ScoreService()
    assert not service.loaded
    with pytest.raises(ConfigError):
        service.calculate([Measurement("HR", 60)])


def test_load_and_calculate(write_types, type_records):
    service = ScoreService(source=write_types(type_records))
    service.load()
    result = service.calculate([Measurement("HR", 95), Measurement("RR", 9)])
    assert result.unwrap() == 2


def test_reload_publishes_new_snapshot(write_types, type_records):
    path = write_types(type_records)
    service = ScoreService(source=path)
    old = service.load()

    type_records[0]["ranges"][2]["value"] = 3
    write_types(type_records)
    new = service.reload()

    assert new is not old
    assert new is service.catalogue
    assert old.find_by_name("HR").find_range(95).value == 1
    assert service.calculate([Measurement("HR", 95), Measurement("RR", 15)]).unwrap() == 3


def test_failed_reload_keeps_previous_snapshot(write_types, type_records):
    path = write_types(type_records)
    service = ScoreService(source=path)
    current = service.load()

    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ConfigError):
        service.reload()
    assert service.catalogue is current


def test_load_falls_back_to_configured_path(monkeypatch, write_types, type_records):
    from newsscore.api.services import score_service as service_module

    monkeypatch.setattr(service_module.settings, "measurement_types_path", write_types(type_records))
    service = ScoreService()
    assert service.load().names == ("HR", "RR")
