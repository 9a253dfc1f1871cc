import dataclasses

import pytest
from BMI.category import BMICategory
from BMI.evaluator import HumanBMI, InvalidMeasurementError


@pytest.mark.parametrize(
    "weight, height, expected_bmi, expected_category",
    [
        (80, 1.80, 24.691358024691358, BMICategory.NORMAL),
        (60, 1.75, 19.591836734693878, BMICategory.NORMAL),
        (100, 1.90, 27.700831024930746, BMICategory.OVERWEIGHT),
        (50, 2.0, 12.5, BMICategory.UNDERWEIGHT),
        (74, 2.0, 18.5, BMICategory.NORMAL),
        (100, 2.0, 25.0, BMICategory.OVERWEIGHT),
        (120, 2.0, 30.0, BMICategory.OBESE),
    ],
)
def test_sample_measurements(weight, height, expected_bmi, expected_category):
    person = HumanBMI(weight, height)
    assert person.calculate_bmi() == pytest.approx(expected_bmi)
    assert person.get_bmi_category() is expected_category


def test_bmi_is_weight_over_height_squared_unrounded():
    person = HumanBMI(weight_in_kilograms=72.3, height_in_meters=1.83)
    assert person.calculate_bmi() == 72.3 / (1.83 * 1.83)


def test_inputs_are_exposed_unchanged():
    person = HumanBMI(80, 1.80)
    assert person.weight_in_kilograms == 80
    assert person.height_in_meters == 1.80


def test_instances_are_immutable():
    person = HumanBMI(80, 1.80)
    with pytest.raises(dataclasses.FrozenInstanceError):
        person.weight_in_kilograms = 90


@pytest.mark.parametrize(
    "weight, height",
    [
        (-70, 1.70),
        (0, 1.70),
        (70, 0),
        (70, -1.70),
        (0, 0),
        (float("nan"), 1.70),
        (70, float("nan")),
    ],
)
def test_non_positive_values_raise(weight, height):
    """Zero, negative and NaN values must trigger an InvalidMeasurementError."""
    with pytest.raises(InvalidMeasurementError):
        HumanBMI(weight, height)


@pytest.mark.parametrize("bad_value", ["80", None, True, [80]])
def test_non_numeric_values_raise(bad_value):
    with pytest.raises(InvalidMeasurementError):
        HumanBMI(bad_value, 1.80)


def test_invalid_measurement_error_is_a_value_error():
    with pytest.raises(ValueError, match="must be positive"):
        HumanBMI(-70, 1.70)


def test_bmi_never_decreases_with_weight():
    bmis = [HumanBMI(weight, 1.75).calculate_bmi() for weight in range(30, 200, 5)]
    assert bmis == sorted(bmis)


@pytest.mark.parametrize(
    "weight, height",
    [
        (float("inf"), 1.70),
        (70, float("inf")),
        (float("inf"), float("inf")),
        (float("-inf"), 1.70),
    ],
)
def test_non_finite_values_raise(weight, height):
    """Infinite values would yield an inf/NaN BMI, so construction rejects them."""
    with pytest.raises(InvalidMeasurementError):
        HumanBMI(weight, height)
