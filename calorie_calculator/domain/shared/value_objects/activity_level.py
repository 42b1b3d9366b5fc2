"""ActivityLevel value object - weekly training volume."""

from enum import Enum


class ActivityLevel(str, Enum):
    """How much the user trains, from desk-bound to athlete.

    Each level maps to the PAL factor applied to BMR; ``active`` and
    ``super`` also raise the protein target for the lose goal.
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    SUPER = "super"

    def pal_multiplier(self) -> float:
        """PAL factor for this level.

        Example:
            >>> ActivityLevel.SUPER.pal_multiplier()
            1.9
        """
        return _PAL_MULTIPLIERS[self]

    def is_high_intensity(self) -> bool:
        return self in _HIGH_INTENSITY


_PAL_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.SUPER: 1.9,
}

_HIGH_INTENSITY = frozenset({ActivityLevel.ACTIVE, ActivityLevel.SUPER})
