"""
BMI evaluator domain model.

Defines the HumanBMI dataclass, a validated (weight, height) pair that
computes its Body Mass Index and maps it to a BMICategory.

Inputs are assumed to be pre-converted to kilograms and meters. Validation
happens once, at construction; instances are frozen afterwards.
"""

import math
import numbers
from dataclasses import dataclass

from .category import BMICategory


class InvalidMeasurementError(ValueError):
    """Raised when weight or height is not a positive finite real number."""


def _is_real(value) -> bool:
    # bool is an Integral subclass but never a measurement
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class HumanBMI:
    """
    Represents a single body measurement.

    Attributes:
        weight_in_kilograms: Body weight in kilograms. Must be positive.
        height_in_meters: Body height in meters. Must be positive.

    Raises:
        InvalidMeasurementError: If weight or height is not a positive finite number.
    """

    weight_in_kilograms: float
    height_in_meters: float

    def __post_init__(self):
        # Validate types
        for name in ("weight_in_kilograms", "height_in_meters"):
            value = getattr(self, name)
            if not _is_real(value):
                raise InvalidMeasurementError(
                    f"{name} must be a real number, got {type(value).__name__}"
                )

        # Validate sign and finiteness; `not x > 0` also rejects NaN
        if not (self.weight_in_kilograms > 0 and self.height_in_meters > 0):
            raise InvalidMeasurementError("Weight and height must be positive values.")
        if not (math.isfinite(self.weight_in_kilograms) and math.isfinite(self.height_in_meters)):
            raise InvalidMeasurementError("Weight and height must be finite values.")

    def calculate_bmi(self) -> float:
        """
        Weight divided by the square of height, unrounded.
        """
        return self.weight_in_kilograms / (self.height_in_meters * self.height_in_meters)

    def get_bmi_category(self) -> BMICategory:
        """Classify the BMI of this measurement."""
        return BMICategory.from_bmi(self.calculate_bmi())
