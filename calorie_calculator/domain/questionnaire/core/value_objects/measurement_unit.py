"""MeasurementUnit value object - unit the user typed a value in."""

from enum import Enum


class MeasurementUnit(str, Enum):
    """Unit selected for a measured answer.

    Canonical units are CM (height, waist) and KG (weight). The other
    members are converted at validation time.
    """

    CM = "cm"
    FT_IN = "ft_in"
    IN = "in"
    KG = "kg"
    LBS = "lbs"

    def is_imperial(self) -> bool:
        """Check whether the unit needs conversion.

        Returns:
            bool: True for FT_IN, IN and LBS
        """
        return self in (MeasurementUnit.FT_IN, MeasurementUnit.IN, MeasurementUnit.LBS)
