"""Goal value object - user's weight objective."""

from enum import Enum

from .activity_level import ActivityLevel

DEFAULT_GAIN_SURPLUS_KCAL = 300.0
MIN_GAIN_SURPLUS_KCAL = 300.0
MAX_GAIN_SURPLUS_KCAL = 500.0


class Goal(str, Enum):
    """User's goal determining calorie adjustment.

    - LOSE: Weight loss with calorie deficit (-500 kcal/day)
    - MAINTAIN: Weight maintenance at TDEE
    - GAIN: Muscle gain with a conservative surplus (+300 kcal/day default)
    """

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"

    def calorie_adjustment(
        self, tdee: float, gain_surplus: float = DEFAULT_GAIN_SURPLUS_KCAL
    ) -> float:
        """Apply calorie adjustment to TDEE based on goal.

        Args:
            tdee: Total Daily Energy Expenditure (kcal/day)
            gain_surplus: Surplus applied for GAIN (300-500 kcal)

        Returns:
            float: Adjusted calories target

        Raises:
            ValueError: If gain_surplus is outside 300-500 kcal

        Example:
            >>> Goal.LOSE.calorie_adjustment(2500.0)
            2000.0
        """
        if not (MIN_GAIN_SURPLUS_KCAL <= gain_surplus <= MAX_GAIN_SURPLUS_KCAL):
            raise ValueError(
                f"Gain surplus must be {MIN_GAIN_SURPLUS_KCAL:.0f}-"
                f"{MAX_GAIN_SURPLUS_KCAL:.0f} kcal, got {gain_surplus}"
            )
        adjustments = {
            Goal.LOSE: -500.0,
            Goal.MAINTAIN: 0.0,
            Goal.GAIN: gain_surplus,
        }
        return tdee + adjustments[self]

    def protein_per_kg(self, activity_level: ActivityLevel) -> float:
        """Get protein requirement (g/kg body weight).

        Gain takes precedence over activity; otherwise hard training
        raises the baseline.

        Args:
            activity_level: Physical activity level

        Returns:
            float: Protein grams per kg body weight

        Example:
            >>> Goal.LOSE.protein_per_kg(ActivityLevel.SUPER)
            1.6
        """
        if self is Goal.GAIN:
            return 1.8
        if activity_level.is_high_intensity():
            return 1.6
        return 1.2

    def label(self) -> str:
        """Short caption shown next to the goal calories.

        Returns:
            str: Goal label
        """
        labels = {
            Goal.LOSE: "For weight loss",
            Goal.MAINTAIN: "To maintain weight",
            Goal.GAIN: "For muscle gain",
        }
        return labels[self]

    def weekly_target(self) -> str:
        """Safe weekly rate of change for the goal.

        Returns:
            str: Weekly target description
        """
        targets = {
            Goal.LOSE: "Safe weekly weight loss: 0.5-1.0 kg (1-2 lbs)",
            Goal.MAINTAIN: "Focus on maintaining current weight with balanced nutrition",
            Goal.GAIN: "Safe weekly weight gain: 0.25-0.5 kg (0.5-1 lbs)",
        }
        return targets[self]
