"""BMI value object - Body Mass Index with classification."""

from dataclasses import dataclass
from enum import Enum


class BMICategory(str, Enum):
    """BMI classification.

    Bands are inclusive on their lower bound:
        - underweight: < 18.5
        - normal: 18.5 to < 24.9
        - overweight: 24.9 to < 29.9
        - obese: >= 29.9
    """

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    @staticmethod
    def classify(value: float) -> "BMICategory":
        """Classify a BMI value.

        Args:
            value: BMI (kg/m²)

        Returns:
            BMICategory: Matching band

        Example:
            >>> BMICategory.classify(24.9)
            <BMICategory.OVERWEIGHT: 'overweight'>
        """
        if value < 18.5:
            return BMICategory.UNDERWEIGHT
        elif value < 24.9:
            return BMICategory.NORMAL
        elif value < 29.9:
            return BMICategory.OVERWEIGHT
        else:
            return BMICategory.OBESE

    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class BMI:
    """Body Mass Index rounded to 2 decimals.

    Attributes:
        value: BMI (kg/m², positive)
        category: Classification of the rounded value
    """

    value: float
    category: BMICategory

    def __post_init__(self) -> None:
        """Validate BMI is positive and matches its category.

        Raises:
            ValueError: If BMI is not positive or category mismatches
        """
        if self.value <= 0:
            raise ValueError(f"BMI must be positive, got {self.value}")
        if BMICategory.classify(self.value) != self.category:
            raise ValueError(
                f"BMI {self.value} does not belong to category {self.category.value}"
            )

    def __str__(self) -> str:
        return f"{self.value:.2f} ({self.category.label()})"
