"""MacroService - Macronutrient distribution calculation."""

from calorie_calculator.domain.shared.rounding import round_half_up_int
from calorie_calculator.domain.shared.value_objects import ActivityLevel, Goal

from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.macro_split import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroNutrient,
    MacroSplit,
)

FAT_SHARE = 0.25


class MacroService(IMacroCalculator):
    """Distribute goal calories into protein, carbohydrates and fat.

    Protein:
        - 1.8 g/kg when gaining
        - 1.6 g/kg for active/super activity
        - 1.2 g/kg otherwise
    Fat: 25% of goal calories
    Carbs: remaining calories, never negative

    Percentages are shares of the sum of the three component calories,
    which can differ slightly from goal calories after rounding.
    """

    def calculate(
        self,
        goal_calories: float,
        weight_kg: float,
        goal: Goal,
        activity_level: ActivityLevel,
    ) -> MacroSplit:
        """Calculate macro distribution.

        Args:
            goal_calories: Daily calorie target
            weight_kg: Body weight in kg
            goal: Weight goal
            activity_level: Physical activity level

        Returns:
            MacroSplit: Protein/carbs/fat grams, calories and percentages

        Example:
            >>> split = service.calculate(2000.0, 70.0, Goal.MAINTAIN, ActivityLevel.LIGHT)
            >>> split.protein.grams, split.fat.calories, split.carbs.grams
            (84, 500, 291)
        """
        # 1. Protein (goal and activity dependent g/kg)
        protein_g = round_half_up_int(weight_kg * goal.protein_per_kg(activity_level))
        protein_cal = protein_g * PROTEIN_KCAL_PER_G

        # 2. Fat (fixed share of calories)
        fat_cal = round_half_up_int(goal_calories * FAT_SHARE)
        fat_g = round_half_up_int(fat_cal / FAT_KCAL_PER_G)

        # 3. Carbs (remaining calories)
        carbs_cal = max(0.0, goal_calories - protein_cal - fat_cal)
        carbs_g = round_half_up_int(carbs_cal / CARBS_KCAL_PER_G)

        total = protein_cal + fat_cal + carbs_cal

        return MacroSplit(
            protein=MacroNutrient(
                grams=protein_g,
                calories=protein_cal,
                percentage=_percentage(protein_cal, total),
            ),
            carbs=MacroNutrient(
                grams=carbs_g,
                calories=round_half_up_int(carbs_cal),
                percentage=_percentage(carbs_cal, total),
            ),
            fat=MacroNutrient(
                grams=fat_g,
                calories=fat_cal,
                percentage=_percentage(fat_cal, total),
            ),
        )


def _percentage(part: float, total: float) -> int:
    if total <= 0:
        return 0
    return round_half_up_int(part / total * 100)
