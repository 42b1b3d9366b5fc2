"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.body_profile import BodyProfile
from ..core.value_objects.bmr import BMR, BmrFormula


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate.

    Katch-McArdle is used whenever body fat percentage is known, because
    lean mass predicts resting expenditure better than weight alone.
    Otherwise Mifflin-St Jeor applies.

    Formula:
        Katch-McArdle: BMR = 370 + 21.6 × lean mass(kg)
                       lean mass = weight × (1 - body fat% / 100)
        Mifflin-St Jeor: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + offset
                         offset: male +5, female -161, other -78

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, profile: BodyProfile) -> BMR:
        """Calculate BMR from a body profile.

        Args:
            profile: Completed answers

        Returns:
            BMR: Unrounded basal metabolic rate in kcal/day

        Example:
            >>> bmr = service.calculate(profile)  # 70 kg, 20% body fat
            >>> bmr.value
            1579.6
        """
        if profile.has_body_fat():
            return BMR(
                value=370 + 21.6 * profile.lean_mass_kg(),
                formula=BmrFormula.KATCH_MCARDLE,
            )

        base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
        return BMR(
            value=base + profile.gender.bmr_offset(),
            formula=BmrFormula.MIFFLIN_ST_JEOR,
        )
