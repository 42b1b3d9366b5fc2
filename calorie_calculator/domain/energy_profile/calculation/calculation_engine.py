"""CalculationEngine - turns a completed answer store into results."""

from typing import Optional

import structlog

from calorie_calculator.domain.shared.entities.answer_store import AnswerStore
from calorie_calculator.domain.shared.value_objects.goal import DEFAULT_GAIN_SURPLUS_KCAL

from ..core.exceptions.domain_errors import CalculationError, ImplausibleResultError
from ..core.ports.calculators import (
    IBMRCalculator,
    IBodyMetricsCalculator,
    IMacroCalculator,
    IRecommendationProvider,
    ITDEECalculator,
)
from ..core.value_objects.body_profile import BodyProfile
from ..core.value_objects.calculation_outcome import CalculationOutcome
from ..core.value_objects.result_set import ResultSet
from .bmr_service import BMRService
from .body_metrics_service import BodyMetricsService
from .goal_calorie_service import DEFAULT_CALORIE_FLOOR_KCAL, GoalCalorieService
from .macro_service import MacroService
from .recommendation_service import RecommendationService
from .tdee_service import TDEEService

logger = structlog.get_logger(__name__)

PLAUSIBLE_BMR_KCAL = (800.0, 4000.0)


class CalculationEngine:
    """
    Orchestrates the calculation services for one answer store.

    Flow:
    1. Snapshot the store into a BodyProfile (fails if incomplete)
    2. Calculate BMR and check it is physiologically plausible
    3. Calculate TDEE from BMR and activity level
    4. Apply goal adjustment and calorie floor
    5. Calculate BMI, waist-to-height ratio and macro split
    6. Derive recommendations

    Expected failures (incomplete answers, implausible BMR) are returned
    in the outcome. A value object invariant violation is a bug and
    propagates.
    """

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        macro_service: Optional[IMacroCalculator] = None,
        body_metrics_service: Optional[IBodyMetricsCalculator] = None,
        recommendation_service: Optional[IRecommendationProvider] = None,
        gain_surplus: float = DEFAULT_GAIN_SURPLUS_KCAL,
        calorie_floor: float = DEFAULT_CALORIE_FLOOR_KCAL,
        bmr_bounds: tuple[float, float] = PLAUSIBLE_BMR_KCAL,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._macro_service = macro_service or MacroService()
        self._body_metrics_service = body_metrics_service or BodyMetricsService()
        self._recommendation_service = recommendation_service or RecommendationService()
        self._goal_calorie_service = GoalCalorieService(
            gain_surplus=gain_surplus, calorie_floor=calorie_floor
        )
        self._bmr_bounds = bmr_bounds

    def compute(self, store: AnswerStore) -> CalculationOutcome:
        """Calculate every result for the store.

        Pure with respect to the store: repeated calls on an unchanged
        store give equal outcomes.

        Args:
            store: Answers collected by the questionnaire

        Returns:
            CalculationOutcome: Result, recommendations and warnings, or
            the CalculationError that prevented them

        Raises:
            ValueError: If a value object invariant is violated
        """
        try:
            return self._compute(store)
        except CalculationError as error:
            logger.info(
                "Calculation failed",
                error_type=type(error).__name__,
                error=str(error),
            )
            return CalculationOutcome.failure(error)

    def _compute(self, store: AnswerStore) -> CalculationOutcome:
        profile = BodyProfile.from_store(store)

        # Step 1: BMR
        bmr = self._bmr_service.calculate(profile)
        low, high = self._bmr_bounds
        if not (low <= bmr.value <= high):
            logger.warning(
                "Implausible BMR",
                bmr=round(bmr.value, 1),
                formula=bmr.formula.value,
            )
            raise ImplausibleResultError(bmr.value, self._bmr_bounds)
        logger.debug("BMR calculated", bmr=bmr.value, formula=bmr.formula.value)

        # Step 2: TDEE
        tdee = self._tdee_service.calculate(bmr, profile.activity)
        logger.debug(
            "TDEE calculated",
            bmr=bmr.value,
            multiplier=tdee.multiplier,
            tdee=tdee.value,
        )

        # Step 3: Goal calories with safety floor
        goal_calories, floor_warning = self._goal_calorie_service.calculate(
            tdee, profile.goal
        )
        logger.debug("Goal calories calculated", goal_calories=goal_calories)

        # Step 4: Body metrics
        bmi = self._body_metrics_service.bmi(profile.weight_kg, profile.height_cm)
        logger.debug("BMI calculated", bmi=bmi.value, category=bmi.category.value)
        waist_to_height = self._body_metrics_service.waist_to_height(
            profile.waist_cm, profile.height_cm
        )
        logger.debug(
            "Waist-to-height ratio calculated",
            ratio=waist_to_height.value,
            category=waist_to_height.category.value,
        )

        # Step 5: Macros
        macros = self._macro_service.calculate(
            goal_calories=goal_calories,
            weight_kg=profile.weight_kg,
            goal=profile.goal,
            activity_level=profile.activity,
        )
        logger.debug("Macros calculated", macros=str(macros))

        result = ResultSet(
            bmr=bmr,
            tdee=tdee,
            goal_calories=goal_calories,
            bmi=bmi,
            waist_to_height=waist_to_height,
            macros=macros,
        )
        recommendations = self._recommendation_service.recommend(profile)
        warnings = (floor_warning,) if floor_warning is not None else ()

        logger.info(
            "Calculation completed",
            bmr=round(bmr.value),
            tdee=round(tdee.value),
            goal_calories=round(goal_calories),
            warnings=len(warnings),
        )
        return CalculationOutcome.success(result, recommendations, warnings)
