"""Waist-to-height ratio value object."""

from dataclasses import dataclass
from enum import Enum


class WaistToHeightCategory(str, Enum):
    """Health risk indicated by the waist-to-height ratio.

    - low_risk: < 0.5
    - increased_risk: 0.5 to < 0.6
    - high_risk: >= 0.6
    """

    LOW_RISK = "low_risk"
    INCREASED_RISK = "increased_risk"
    HIGH_RISK = "high_risk"

    @staticmethod
    def classify(value: float) -> "WaistToHeightCategory":
        """Classify a ratio.

        Args:
            value: Waist / height

        Returns:
            WaistToHeightCategory: Matching risk band
        """
        if value < 0.5:
            return WaistToHeightCategory.LOW_RISK
        elif value < 0.6:
            return WaistToHeightCategory.INCREASED_RISK
        else:
            return WaistToHeightCategory.HIGH_RISK

    def label(self) -> str:
        labels = {
            WaistToHeightCategory.LOW_RISK: "Low Risk",
            WaistToHeightCategory.INCREASED_RISK: "Increased Risk",
            WaistToHeightCategory.HIGH_RISK: "High Risk",
        }
        return labels[self]


@dataclass(frozen=True)
class WaistToHeightRatio:
    """Waist circumference divided by height, rounded to 3 decimals.

    Attributes:
        value: Ratio (positive)
        category: Risk classification of the rounded value
    """

    value: float
    category: WaistToHeightCategory

    def __post_init__(self) -> None:
        """Validate ratio is positive and matches its category.

        Raises:
            ValueError: If ratio is not positive or category mismatches
        """
        if self.value <= 0:
            raise ValueError(f"Waist-to-height ratio must be positive, got {self.value}")
        if WaistToHeightCategory.classify(self.value) != self.category:
            raise ValueError(
                f"Ratio {self.value} does not belong to category {self.category.value}"
            )

    def __str__(self) -> str:
        return f"{self.value:.3f} ({self.category.label()})"
