"""Gender value object - selects the Mifflin-St Jeor constant."""

from enum import Enum


class Gender(str, Enum):
    """Gender as answered in the questionnaire.

    - MALE: +5 kcal constant
    - FEMALE: -161 kcal constant
    - OTHER: -78 kcal, the midpoint of the two constants
    """

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    def bmr_offset(self) -> float:
        """Get the sex-specific Mifflin-St Jeor constant.

        Returns:
            float: kcal/day added to the common part of the equation

        Example:
            >>> Gender.FEMALE.bmr_offset()
            -161.0
        """
        offsets = {
            Gender.MALE: 5.0,
            Gender.FEMALE: -161.0,
            Gender.OTHER: -78.0,  # midpoint approximation, not a third formula
        }
        return offsets[self]
