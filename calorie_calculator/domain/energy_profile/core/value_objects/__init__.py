"""Value objects for the energy profile domain."""

from .bmi import BMI, BMICategory
from .bmr import BMR, BmrFormula
from .body_profile import BodyProfile
from .calculation_outcome import CalculationOutcome
from .calculation_warning import CalorieFloorWarning
from .macro_split import MacroNutrient, MacroSplit
from .recommendations import Recommendations
from .result_set import ResultSet
from .tdee import TDEE
from .waist_to_height import WaistToHeightCategory, WaistToHeightRatio

__all__ = [
    "BodyProfile",
    "BMR",
    "BmrFormula",
    "TDEE",
    "MacroNutrient",
    "MacroSplit",
    "BMI",
    "BMICategory",
    "WaistToHeightRatio",
    "WaistToHeightCategory",
    "CalorieFloorWarning",
    "Recommendations",
    "ResultSet",
    "CalculationOutcome",
]
