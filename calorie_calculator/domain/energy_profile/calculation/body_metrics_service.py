"""BodyMetricsService - BMI and waist-to-height ratio."""

from calorie_calculator.domain.shared.rounding import round_half_up

from ..core.ports.calculators import IBodyMetricsCalculator
from ..core.value_objects.bmi import BMI, BMICategory
from ..core.value_objects.waist_to_height import (
    WaistToHeightCategory,
    WaistToHeightRatio,
)

BMI_PRECISION = 2
WHTR_PRECISION = 3


class BodyMetricsService(IBodyMetricsCalculator):
    """Body composition indicators.

    Values are rounded before classification so the category always
    agrees with the displayed number.
    """

    def bmi(self, weight_kg: float, height_cm: float) -> BMI:
        """Calculate Body Mass Index.

        Args:
            weight_kg: Body weight in kg
            height_cm: Height in cm

        Returns:
            BMI: weight / height(m)², rounded to 2 decimals

        Example:
            >>> BodyMetricsService().bmi(70.0, 175.0).value
            22.86
        """
        height_m = height_cm / 100
        value = round_half_up(weight_kg / (height_m * height_m), BMI_PRECISION)
        return BMI(value=value, category=BMICategory.classify(value))

    def waist_to_height(self, waist_cm: float, height_cm: float) -> WaistToHeightRatio:
        """Calculate waist-to-height ratio.

        Args:
            waist_cm: Waist circumference in cm
            height_cm: Height in cm

        Returns:
            WaistToHeightRatio: waist / height, rounded to 3 decimals

        Example:
            >>> BodyMetricsService().waist_to_height(80.0, 175.0).value
            0.457
        """
        value = round_half_up(waist_cm / height_cm, WHTR_PRECISION)
        return WaistToHeightRatio(
            value=value, category=WaistToHeightCategory.classify(value)
        )
