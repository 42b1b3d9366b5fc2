"""Per-step validation of questionnaire answers."""

from .field_rules import (
    QUESTIONNAIRE_STEPS,
    TOTAL_STEPS,
    RangeRule,
    StepDefinition,
    StepKind,
)
from .step_validator import StepValidator

__all__ = [
    "StepValidator",
    "StepDefinition",
    "StepKind",
    "RangeRule",
    "QUESTIONNAIRE_STEPS",
    "TOTAL_STEPS",
]
