from __future__ import annotations

import pytest

from newsscore.core.engine import Measurement, calculate_score, validate_input_data
from newsscore.core.errors import BoundsError, ConfigurationMismatchError, ValidationError
from newsscore.core.types import MeasurementCatalogue, MeasurementType, ScoringRange


def batch(**values: int) -> list[Measurement]:
    return [Measurement(type=name, value=value) for name, value in values.items()]


def test_valid_batch_sums_matched_ranges(catalogue):
    result = calculate_score(batch(HR=95, SBP=95), catalogue)
    assert result.is_ok
    assert result.score == 3
    assert [(item.type, item.points) for item in result.breakdown] == [("HR", 1), ("SBP", 2)]


def test_batch_order_does_not_matter(catalogue):
    first = calculate_score(batch(HR=120, SBP=80), catalogue)
    second = calculate_score(batch(SBP=80, HR=120), catalogue)
    assert first.score == second.score == 5


def test_type_names_match_case_insensitively(catalogue):
    result = calculate_score([Measurement("hr", 60), Measurement("sBp", 150)], catalogue)
    assert result.score == 0


@pytest.mark.parametrize(
    ("value", "points"),
    [(41, 1), (50, 1), (51, 0), (90, 0), (110, 1), (111, 2), (130, 2)],
)
def test_range_edges(catalogue, value, points):
    result = calculate_score(batch(HR=value, SBP=150), catalogue)
    assert result.score == points


@pytest.mark.parametrize("value", [40, 0, 131, -7])
def test_out_of_bounds_value_fails(catalogue, value):
    result = calculate_score(batch(HR=value, SBP=150), catalogue)
    assert not result.is_ok
    assert isinstance(result.error, BoundsError)
    assert result.score is None
    assert result.error.message == "Value of Heart rate(HR) is out of valid range 40(Exclusive)-130(Inclusive)"


def test_missing_type_is_reported(catalogue):
    error = validate_input_data(batch(HR=60), catalogue)
    assert isinstance(error, ValidationError)
    assert error.category == "missing"
    assert error.names == ("SBP",)
    assert str(error) == "Measurement for SBP missing in input."


def test_every_missing_type_is_listed(catalogue):
    error = validate_input_data([], catalogue)
    assert error.names == ("HR", "SBP")


def test_missing_takes_precedence_over_duplicates(catalogue):
    error = validate_input_data([Measurement("HR", 60), Measurement("HR", 70)], catalogue)
    assert error.category == "missing"
    assert error.names == ("SBP",)


def test_unexpected_type_is_reported(catalogue):
    error = validate_input_data(batch(HR=60, SBP=150, Temp=37), catalogue)
    assert error.category == "unexpected"
    assert error.names == ("Temp",)
    assert str(error) == "Invalid type: Temp present in input."


def test_duplicate_type_is_reported(catalogue):
    measurements = [Measurement("HR", 60), Measurement("SBP", 150), Measurement("hr", 61)]
    error = validate_input_data(measurements, catalogue)
    assert error.category == "duplicate"
    assert error.names == ("HR",)
    assert str(error) == "Measurement for HR is duplicated in input."


def test_unexpected_takes_precedence_over_duplicates(catalogue):
    measurements = [
        Measurement("HR", 60),
        Measurement("HR", 60),
        Measurement("SBP", 150),
        Measurement("GCS", 15),
    ]
    error = validate_input_data(measurements, catalogue)
    assert error.category == "unexpected"


def test_validation_failure_prevents_scoring(catalogue):
    result = calculate_score(batch(HR=1000), catalogue)
    assert isinstance(result.error, ValidationError)
    with pytest.raises(ValidationError):
        result.unwrap()


def test_gap_between_ranges_is_a_configuration_mismatch():
    catalogue = MeasurementCatalogue(
        [
            MeasurementType(
                name="X",
                description="Gapped",
                ranges=(ScoringRange(0, 10, 1), ScoringRange(20, 30, 2)),
            )
        ]
    )
    result = calculate_score(batch(X=15), catalogue)
    assert isinstance(result.error, ConfigurationMismatchError)
    assert str(result.error) == "The value 15 for Gapped(X) is not found in any of the defined ranges"
    assert calculate_score(batch(X=25), catalogue).unwrap() == 2


def test_negative_points_are_not_clamped():
    catalogue = MeasurementCatalogue(
        [MeasurementType(name="X", description="Bonus", ranges=(ScoringRange(0, 10, -2),))]
    )
    assert calculate_score(batch(X=5), catalogue).unwrap() == -2


def test_catalogue_is_not_mutated_by_scoring(catalogue):
    before = [(item.name, item.ranges) for item in catalogue]
    calculate_score(batch(HR=60, SBP=150), catalogue)
    calculate_score(batch(HR=1), catalogue)
    assert [(item.name, item.ranges) for item in catalogue] == before


def test_successful_result_unwraps_to_score(catalogue):
    result = calculate_score(batch(HR=60, SBP=150), catalogue)
    assert result.unwrap() == 0
    assert result.error is None


def test_padded_type_name_does_not_match(catalogue):
    error = validate_input_data([Measurement(" HR", 60), Measurement("SBP", 150)], catalogue)
    assert error.category == "missing"
    assert error.names == ("HR",)
