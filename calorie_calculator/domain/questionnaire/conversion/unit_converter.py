"""Unit conversion between imperial and metric measurements.

Answers are stored in metric (cm, kg) whatever unit the user typed.
Every conversion rounds to 2 decimals so downstream range checks compare
stable values; converting there and back lands within 0.1 of the input.
"""

from calorie_calculator.domain.shared.rounding import round_half_up

CM_PER_INCH = 2.54
KG_PER_LB = 0.453592
INCHES_PER_FOOT = 12
PRECISION = 2


def feet_inches_to_cm(feet: float, inches: float) -> float:
    """Convert feet and inches to centimeters.

    Example:
        >>> feet_inches_to_cm(5, 10)
        177.8
    """
    return round_half_up((feet * INCHES_PER_FOOT + inches) * CM_PER_INCH, PRECISION)


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms.

    Example:
        >>> lbs_to_kg(150)
        68.04
    """
    return round_half_up(lbs * KG_PER_LB, PRECISION)


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return round_half_up(inches * CM_PER_INCH, PRECISION)


def cm_to_feet_inches(cm: float) -> tuple[int, float]:
    """Convert centimeters to (feet, inches).

    Inches carry the remainder with 2 decimals.

    Example:
        >>> cm_to_feet_inches(177.8)
        (5, 10.0)
    """
    total_inches = round_half_up(cm / CM_PER_INCH, PRECISION)
    feet = int(total_inches // INCHES_PER_FOOT)
    inches = round_half_up(total_inches - feet * INCHES_PER_FOOT, PRECISION)
    return feet, inches


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return round_half_up(kg / KG_PER_LB, PRECISION)


def cm_to_inches(cm: float) -> float:
    """Convert centimeters to inches."""
    return round_half_up(cm / CM_PER_INCH, PRECISION)
