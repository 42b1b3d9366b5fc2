"""TDEE value object - daily burn including activity."""

import math
from dataclasses import dataclass
from typing import Optional

from calorie_calculator.domain.shared.value_objects import ActivityLevel


@dataclass(frozen=True)
class TDEE:
    """BMR scaled by the activity level's PAL factor, kept unrounded.

    Attributes:
        value: kcal/day, finite and positive
        activity: Level whose factor produced the value, when known
    """

    value: float
    activity: Optional[ActivityLevel] = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.value) or self.value <= 0:
            raise ValueError(f"TDEE must be a positive number, got {self.value}")

    @property
    def multiplier(self) -> Optional[float]:
        return self.activity.pal_multiplier() if self.activity else None

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
