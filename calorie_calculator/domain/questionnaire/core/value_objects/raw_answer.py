"""RawAnswer value object - unvalidated input for one step."""

from dataclasses import dataclass
from typing import Optional, Union

from .measurement_unit import MeasurementUnit

RawScalar = Union[str, int, float, None]


@dataclass(frozen=True)
class RawAnswer:
    """Answer exactly as the surrounding UI extracted it.

    The core never reads widgets; it receives the typed text (or a number),
    the selected option, or nothing, along with the unit the user picked.

    Attributes:
        value: Numeric string/number, option value, or None when empty
        unit: Selected unit for measured steps (None = step default)
        inches: Inches component when height is entered as ft/in
        skipped: True when the user explicitly skipped an optional step
    """

    value: RawScalar = None
    unit: Optional[MeasurementUnit] = None
    inches: RawScalar = None
    skipped: bool = False

    @staticmethod
    def number(value: RawScalar, unit: Optional[MeasurementUnit] = None) -> "RawAnswer":
        """Answer for a numeric step.

        Args:
            value: Typed value
            unit: Selected unit (optional)

        Returns:
            RawAnswer: Numeric answer
        """
        return RawAnswer(value=value, unit=unit)

    @staticmethod
    def feet_inches(feet: RawScalar, inches: RawScalar) -> "RawAnswer":
        """Height answer entered in feet and inches.

        Args:
            feet: Feet component
            inches: Inches component

        Returns:
            RawAnswer: Answer with FT_IN unit
        """
        return RawAnswer(value=feet, unit=MeasurementUnit.FT_IN, inches=inches)

    @staticmethod
    def choice(value: Optional[str]) -> "RawAnswer":
        """Answer for a single-choice step.

        Args:
            value: Selected option, None if nothing selected

        Returns:
            RawAnswer: Choice answer
        """
        return RawAnswer(value=value)

    @staticmethod
    def skip() -> "RawAnswer":
        """Explicitly skipped optional step.

        Returns:
            RawAnswer: Skipped answer
        """
        return RawAnswer(skipped=True)

    def is_blank(self) -> bool:
        """Check whether nothing was entered.

        Returns:
            bool: True if value and inches are empty
        """
        return _blank(self.value) and _blank(self.inches)


def _blank(value: RawScalar) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
