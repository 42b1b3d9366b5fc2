"""Energy profile bounded context.

BMR, TDEE, goal calories, macro split, BMI and waist-to-height ratio
derived from a completed questionnaire.
"""

from .calculation import CalculationEngine
from .core.exceptions import (
    CalculationError,
    ImplausibleResultError,
    IncompleteAnswerSetError,
)
from .core.value_objects import (
    BMI,
    BMR,
    TDEE,
    BMICategory,
    BmrFormula,
    CalculationOutcome,
    CalorieFloorWarning,
    MacroNutrient,
    MacroSplit,
    Recommendations,
    ResultSet,
    WaistToHeightCategory,
    WaistToHeightRatio,
)

__all__ = [
    "CalculationEngine",
    "CalculationOutcome",
    "ResultSet",
    "Recommendations",
    "CalorieFloorWarning",
    "BMR",
    "BmrFormula",
    "TDEE",
    "BMI",
    "BMICategory",
    "WaistToHeightRatio",
    "WaistToHeightCategory",
    "MacroNutrient",
    "MacroSplit",
    "CalculationError",
    "IncompleteAnswerSetError",
    "ImplausibleResultError",
]
