"""TDEEService - Total Daily Energy Expenditure calculation."""

from calorie_calculator.domain.shared.value_objects import ActivityLevel

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - Sedentary: 1.2 (little/no exercise)
        - Light: 1.375 (light exercise 1-3 days/week)
        - Moderate: 1.55 (moderate exercise 3-5 days/week)
        - Active: 1.725 (hard exercise 6-7 days/week)
        - Super: 1.9 (very hard exercise + physical job)
    """

    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Unrounded total daily energy expenditure in kcal/day

        Example:
            >>> service.calculate(BMR(value=1264.0), ActivityLevel.LIGHT).value
            1738.0
        """
        return TDEE(
            value=bmr.value * activity_level.pal_multiplier(), activity=activity_level
        )
