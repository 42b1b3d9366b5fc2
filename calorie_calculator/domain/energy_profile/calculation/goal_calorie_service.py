"""GoalCalorieService - daily calorie target for the user's goal."""

from typing import Optional

import structlog

from calorie_calculator.domain.shared.value_objects import Goal
from calorie_calculator.domain.shared.value_objects.goal import (
    DEFAULT_GAIN_SURPLUS_KCAL,
    MAX_GAIN_SURPLUS_KCAL,
    MIN_GAIN_SURPLUS_KCAL,
)

from ..core.value_objects.calculation_warning import CalorieFloorWarning
from ..core.value_objects.tdee import TDEE

logger = structlog.get_logger(__name__)

DEFAULT_CALORIE_FLOOR_KCAL = 1000.0


class GoalCalorieService:
    """Adjust TDEE for the goal and enforce a safety minimum.

    - lose: TDEE - 500
    - maintain: TDEE
    - gain: TDEE + surplus (300-500, default 300)

    Targets below the floor are raised to it and reported with a
    CalorieFloorWarning instead of being applied silently.
    """

    def __init__(
        self,
        gain_surplus: float = DEFAULT_GAIN_SURPLUS_KCAL,
        calorie_floor: float = DEFAULT_CALORIE_FLOOR_KCAL,
    ):
        """Create the service.

        Args:
            gain_surplus: Surplus applied for GAIN (300-500 kcal)
            calorie_floor: Minimum daily target (kcal, positive)

        Raises:
            ValueError: If gain_surplus is outside 300-500 or floor is not positive
        """
        if not (MIN_GAIN_SURPLUS_KCAL <= gain_surplus <= MAX_GAIN_SURPLUS_KCAL):
            raise ValueError(
                f"Gain surplus must be {MIN_GAIN_SURPLUS_KCAL:.0f}-"
                f"{MAX_GAIN_SURPLUS_KCAL:.0f} kcal, got {gain_surplus}"
            )
        if calorie_floor <= 0:
            raise ValueError(f"Calorie floor must be positive, got {calorie_floor}")
        self._gain_surplus = gain_surplus
        self._calorie_floor = calorie_floor

    def calculate(
        self, tdee: TDEE, goal: Goal
    ) -> tuple[float, Optional[CalorieFloorWarning]]:
        """Calculate goal calories.

        Args:
            tdee: Total daily energy expenditure
            goal: Weight goal

        Returns:
            tuple: (goal calories, floor warning or None)
        """
        requested = goal.calorie_adjustment(tdee.value, self._gain_surplus)
        if requested >= self._calorie_floor:
            return requested, None

        logger.warning(
            "Goal calories clamped to floor",
            requested=round(requested, 1),
            floor=self._calorie_floor,
        )
        return self._calorie_floor, CalorieFloorWarning(
            requested=requested, floor=self._calorie_floor
        )
