"""ResultSet value object - everything derived from one calculation."""

from dataclasses import dataclass

from .bmi import BMI
from .bmr import BMR
from .macro_split import MacroSplit
from .tdee import TDEE
from .waist_to_height import WaistToHeightRatio


@dataclass(frozen=True)
class ResultSet:
    """Immutable calculation output.

    BMR, TDEE and goal calories are unrounded; BMI, waist-to-height and
    macros carry their display rounding.

    Attributes:
        bmr: Basal metabolic rate and the formula used
        tdee: Total daily energy expenditure
        goal_calories: Daily target after goal adjustment and floor
        bmi: Body mass index with category
        waist_to_height: Waist-to-height ratio with risk category
        macros: Protein/carbs/fat split
    """

    bmr: BMR
    tdee: TDEE
    goal_calories: float
    bmi: BMI
    waist_to_height: WaistToHeightRatio
    macros: MacroSplit

    def __post_init__(self) -> None:
        """Validate goal calories.

        Raises:
            ValueError: If goal calories are not positive
        """
        if self.goal_calories <= 0:
            raise ValueError(f"Goal calories must be positive, got {self.goal_calories}")
