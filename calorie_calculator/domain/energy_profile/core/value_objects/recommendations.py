"""Recommendations value object - guidance shown next to the results."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Recommendations:
    """Plain-language guidance derived from the answers.

    Attributes:
        weekly_target: Safe weekly rate of change for the goal
        lifestyle_tip: One tip picked from sleep, stress and work answers
        body_fat_note: Note shown when body fat drove the BMR, else None
    """

    weekly_target: str
    lifestyle_tip: str
    body_fat_note: Optional[str] = None

    def lines(self) -> list[str]:
        """Recommendation lines in display order.

        Returns:
            list[str]: Labelled lines
        """
        result = [
            f"Weekly Target: {self.weekly_target}",
            f"Lifestyle Tip: {self.lifestyle_tip}",
        ]
        if self.body_fat_note:
            result.append(self.body_fat_note)
        return result
