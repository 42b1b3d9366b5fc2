"""MacroSplit value object - macronutrient distribution."""

from dataclasses import dataclass

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


@dataclass(frozen=True)
class MacroNutrient:
    """Daily target for one macronutrient.

    Attributes:
        grams: Grams per day
        calories: kcal per day
        percentage: Share of the combined macro calories (0-100)
    """

    grams: int
    calories: int
    percentage: int

    def __post_init__(self) -> None:
        """Validate amounts are non-negative.

        Raises:
            ValueError: If any amount is negative or percentage exceeds 100
        """
        if self.grams < 0:
            raise ValueError(f"Grams must be non-negative, got {self.grams}")
        if self.calories < 0:
            raise ValueError(f"Calories must be non-negative, got {self.calories}")
        if not (0 <= self.percentage <= 100):
            raise ValueError(f"Percentage must be 0-100, got {self.percentage}")

    def __str__(self) -> str:
        return f"{self.grams}g ({self.percentage}%)"


@dataclass(frozen=True)
class MacroSplit:
    """Protein/carbohydrate/fat distribution.

    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g.

    Attributes:
        protein: Protein target
        carbs: Carbohydrate target
        fat: Fat target
    """

    protein: MacroNutrient
    carbs: MacroNutrient
    fat: MacroNutrient

    def total_calories(self) -> int:
        """Sum of the three component calories.

        Returns:
            int: Total macro kcal
        """
        return self.protein.calories + self.carbs.calories + self.fat.calories

    def total_percentage(self) -> int:
        """Sum of the three percentages (100 give or take rounding).

        Returns:
            int: Percentage total
        """
        return self.protein.percentage + self.carbs.percentage + self.fat.percentage

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: Macros in P/C/F format
        """
        return f"{self.protein.grams}P / {self.carbs.grams}C / {self.fat.grams}F"
