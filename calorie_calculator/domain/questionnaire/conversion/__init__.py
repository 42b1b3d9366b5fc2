"""Metric/imperial conversions."""

from .unit_converter import (
    cm_to_feet_inches,
    cm_to_inches,
    feet_inches_to_cm,
    inches_to_cm,
    kg_to_lbs,
    lbs_to_kg,
)

__all__ = [
    "feet_inches_to_cm",
    "lbs_to_kg",
    "inches_to_cm",
    "cm_to_feet_inches",
    "kg_to_lbs",
    "cm_to_inches",
]
