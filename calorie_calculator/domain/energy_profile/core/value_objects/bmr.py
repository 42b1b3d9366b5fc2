"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass
from enum import Enum


class BmrFormula(str, Enum):
    """Equation used to estimate BMR.

    Katch-McArdle needs body fat percentage and takes precedence when it
    is known; Mifflin-St Jeor is the default.
    """

    KATCH_MCARDLE = "katch_mcardle"
    MIFFLIN_ST_JEOR = "mifflin_st_jeor"

    def display_name(self) -> str:
        """Human-readable formula name.

        Returns:
            str: Formula name as printed in reports
        """
        names = {
            BmrFormula.KATCH_MCARDLE: "Katch-McArdle",
            BmrFormula.MIFFLIN_ST_JEOR: "Mifflin-St Jeor",
        }
        return names[self]


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the minimum calories needed for basic bodily functions
    at rest (breathing, circulation, cell production, nutrient processing).
    The value is carried unrounded.

    Attributes:
        value: BMR in kcal/day (must be positive)
        formula: Equation that produced the value
    """

    value: float
    formula: BmrFormula = BmrFormula.MIFFLIN_ST_JEOR

    def __post_init__(self) -> None:
        """Validate BMR is positive.

        Raises:
            ValueError: If BMR is not positive
        """
        if self.value <= 0:
            raise ValueError(f"BMR must be positive, got {self.value}")

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: BMR with unit
        """
        return f"{self.value:.0f} kcal/day"
