"""Calculation services for the energy profile."""

from .bmr_service import BMRService
from .body_metrics_service import BodyMetricsService
from .calculation_engine import PLAUSIBLE_BMR_KCAL, CalculationEngine
from .goal_calorie_service import DEFAULT_CALORIE_FLOOR_KCAL, GoalCalorieService
from .macro_service import MacroService
from .recommendation_service import RecommendationService
from .tdee_service import TDEEService

__all__ = [
    "CalculationEngine",
    "BMRService",
    "TDEEService",
    "GoalCalorieService",
    "MacroService",
    "BodyMetricsService",
    "RecommendationService",
    "PLAUSIBLE_BMR_KCAL",
    "DEFAULT_CALORIE_FLOOR_KCAL",
]
