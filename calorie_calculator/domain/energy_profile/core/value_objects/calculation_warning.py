"""Non-blocking warnings attached to a calculation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CalorieFloorWarning:
    """Goal calories were raised to the safety minimum.

    Attributes:
        requested: Goal calories before clamping
        floor: Minimum applied
    """

    requested: float
    floor: float

    def message(self) -> str:
        """Message to show the user.

        Returns:
            str: Warning text
        """
        return (
            f"Very low calorie target detected ({self.requested:.0f} kcal). "
            f"Using {self.floor:.0f} kcal minimum."
        )

    def __str__(self) -> str:
        return self.message()
