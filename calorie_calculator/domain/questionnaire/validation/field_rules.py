"""Question definitions and range rules for each questionnaire step.

Bounds are in canonical units. A value outside the hard range is rejected;
a value inside it but outside the typical band needs an explicit override.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from calorie_calculator.domain.shared.value_objects import (
    ActivityLevel,
    AnswerField,
    Gender,
    Goal,
    StressLevel,
    WorkType,
)

from ..core.value_objects.measurement_unit import MeasurementUnit


class StepKind(str, Enum):
    """How a step's raw answer is interpreted."""

    NUMBER = "number"
    OPTIONAL_NUMBER = "optional_number"
    CHOICE = "choice"


@dataclass(frozen=True)
class RangeRule:
    """Numeric bounds for a measured answer.

    Attributes:
        hard_min: Lowest accepted value
        hard_max: Highest accepted value
        typical_min: Lowest value accepted without confirmation
        typical_max: Highest value accepted without confirmation
        unit_label: Unit shown in messages ("cm", "years")
        whole_number: Reject fractional values
    """

    hard_min: float
    hard_max: float
    typical_min: Optional[float] = None
    typical_max: Optional[float] = None
    unit_label: str = ""
    whole_number: bool = False

    def __post_init__(self) -> None:
        """Validate bound ordering.

        Raises:
            ValueError: If the typical band is not inside the hard range
        """
        if self.hard_min > self.hard_max:
            raise ValueError(f"Invalid hard range {self.hard_min}-{self.hard_max}")
        low = self.typical_min if self.typical_min is not None else self.hard_min
        high = self.typical_max if self.typical_max is not None else self.hard_max
        if not (self.hard_min <= low <= high <= self.hard_max):
            raise ValueError(f"Typical band {low}-{high} must lie inside hard range")

    def within_hard(self, value: float) -> bool:
        return self.hard_min <= value <= self.hard_max

    def within_typical(self, value: float) -> bool:
        if self.typical_min is not None and value < self.typical_min:
            return False
        if self.typical_max is not None and value > self.typical_max:
            return False
        return True

    def typical_band(self) -> str:
        low = self.typical_min if self.typical_min is not None else self.hard_min
        high = self.typical_max if self.typical_max is not None else self.hard_max
        return f"{low:g}-{high:g} {self.unit_label}".rstrip()


@dataclass(frozen=True)
class StepDefinition:
    """One question of the questionnaire.

    Attributes:
        field: Answer written when the step passes
        kind: How raw input is interpreted
        rejection_message: Message for missing or out-of-range input
        rule: Range rule for numeric steps
        units: Units the step accepts; first one is the default
        choices: Enum of allowed options for choice steps
    """

    field: AnswerField
    kind: StepKind
    rejection_message: str
    rule: Optional[RangeRule] = None
    units: tuple[MeasurementUnit, ...] = ()
    choices: Optional[type[Enum]] = None

    @property
    def default_unit(self) -> Optional[MeasurementUnit]:
        return self.units[0] if self.units else None


# Under 13 is refused; 13 and 14 are accepted after confirmation.
AGE_RULE = RangeRule(
    hard_min=13, hard_max=120, typical_min=15, typical_max=100,
    unit_label="years", whole_number=True,
)
HEIGHT_RULE = RangeRule(
    hard_min=50, hard_max=300, typical_min=100, typical_max=250, unit_label="cm"
)
WEIGHT_RULE = RangeRule(
    hard_min=10, hard_max=500, typical_min=20, typical_max=300, unit_label="kg"
)
BODY_FAT_RULE = RangeRule(hard_min=5, hard_max=50, unit_label="%")
WAIST_RULE = RangeRule(hard_min=40, hard_max=200, unit_label="cm")
SLEEP_RULE = RangeRule(hard_min=3, hard_max=15, unit_label="hours")


QUESTIONNAIRE_STEPS: tuple[StepDefinition, ...] = (
    StepDefinition(
        field=AnswerField.AGE,
        kind=StepKind.NUMBER,
        rule=AGE_RULE,
        rejection_message="Please enter a valid age (13-120 years)",
    ),
    StepDefinition(
        field=AnswerField.GENDER,
        kind=StepKind.CHOICE,
        choices=Gender,
        rejection_message="Please select your gender",
    ),
    StepDefinition(
        field=AnswerField.HEIGHT_CM,
        kind=StepKind.NUMBER,
        rule=HEIGHT_RULE,
        units=(MeasurementUnit.CM, MeasurementUnit.FT_IN),
        rejection_message="Please enter a valid height (50-300 cm)",
    ),
    StepDefinition(
        field=AnswerField.WEIGHT_KG,
        kind=StepKind.NUMBER,
        rule=WEIGHT_RULE,
        units=(MeasurementUnit.KG, MeasurementUnit.LBS),
        rejection_message="Please enter a valid weight (10-500 kg)",
    ),
    StepDefinition(
        field=AnswerField.GOAL,
        kind=StepKind.CHOICE,
        choices=Goal,
        rejection_message="Please select your goal",
    ),
    StepDefinition(
        field=AnswerField.ACTIVITY,
        kind=StepKind.CHOICE,
        choices=ActivityLevel,
        rejection_message="Please select your activity level",
    ),
    StepDefinition(
        field=AnswerField.BODY_FAT_PCT,
        kind=StepKind.OPTIONAL_NUMBER,
        rule=BODY_FAT_RULE,
        rejection_message="Body fat percentage should be between 5% and 50%",
    ),
    StepDefinition(
        field=AnswerField.WAIST_CM,
        kind=StepKind.NUMBER,
        rule=WAIST_RULE,
        units=(MeasurementUnit.CM, MeasurementUnit.IN),
        rejection_message="Please enter a valid waist measurement (40-200 cm)",
    ),
    StepDefinition(
        field=AnswerField.WORK,
        kind=StepKind.CHOICE,
        choices=WorkType,
        rejection_message="Please select your work type",
    ),
    StepDefinition(
        field=AnswerField.SLEEP_HOURS,
        kind=StepKind.NUMBER,
        rule=SLEEP_RULE,
        rejection_message="Please enter sleep hours between 3 and 15",
    ),
    StepDefinition(
        field=AnswerField.STRESS,
        kind=StepKind.CHOICE,
        choices=StressLevel,
        rejection_message="Please select your stress level",
    ),
)

TOTAL_STEPS = len(QUESTIONNAIRE_STEPS)
