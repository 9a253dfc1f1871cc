"""
BMI category domain model.

Defines the BMICategory enum and the fixed thresholds that separate its
members. Thresholds are compared with strict less-than, so a BMI sitting
exactly on a boundary falls into the higher category.
"""

from enum import Enum, auto

UNDERWEIGHT_THRESHOLD = 18.5
NORMAL_THRESHOLD = 25.0
OVERWEIGHT_THRESHOLD = 30.0


class BMICategory(Enum):
    """
    Enumeration of BMI categories, declared in ascending order.
    Members compare by that order (UNDERWEIGHT < NORMAL < OVERWEIGHT < OBESE).
    """
    UNDERWEIGHT = auto()
    NORMAL = auto()
    OVERWEIGHT = auto()
    OBESE = auto()

    def __lt__(self, other):
        if not isinstance(other, BMICategory):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other):
        if not isinstance(other, BMICategory):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other):
        if not isinstance(other, BMICategory):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, BMICategory):
            return NotImplemented
        return self.value >= other.value

    @property
    def label(self) -> str:
        """Human-readable label, e.g. 'Underweight'."""
        return self.name.capitalize()

    @classmethod
    def from_bmi(cls, bmi: float) -> "BMICategory":
        """
        Classify a BMI value against the ascending thresholds.
        """
        if bmi < UNDERWEIGHT_THRESHOLD:
            return cls.UNDERWEIGHT
        elif bmi < NORMAL_THRESHOLD:
            return cls.NORMAL
        elif bmi < OVERWEIGHT_THRESHOLD:
            return cls.OVERWEIGHT
        else:
            return cls.OBESE

    @classmethod
    def from_label(cls, label: str) -> "BMICategory":
        """
        Convert a human-readable label into the corresponding enum.
        Ignores casing, surrounding whitespace and inner spaces/underscores.
        """
        key = label.strip().lower().replace(" ", "").replace("_", "").replace("-", "")
        mapping = {
            "underweight": cls.UNDERWEIGHT,
            "normal": cls.NORMAL,
            "overweight": cls.OVERWEIGHT,
            "obese": cls.OBESE,
        }
        try:
            return mapping[key]
        except KeyError:
            raise ValueError(f"Unknown BMI category label: {label!r}")
