"""Questionnaire bounded context.

Guided multi-step collection of health answers: per-step validation with
unit conversion, unusual-value confirmation and step navigation.
"""

from .core.exceptions import QuestionnaireDomainError, UnknownStepError
from .core.value_objects import (
    Accepted,
    MeasurementUnit,
    NeedsConfirmation,
    Outcome,
    RawAnswer,
    Rejected,
    StepProgress,
    StepTransition,
)
from .state_machine import StepStateMachine
from .validation import QUESTIONNAIRE_STEPS, TOTAL_STEPS, StepValidator

__all__ = [
    "StepStateMachine",
    "StepValidator",
    "QUESTIONNAIRE_STEPS",
    "TOTAL_STEPS",
    "MeasurementUnit",
    "RawAnswer",
    "Accepted",
    "Rejected",
    "NeedsConfirmation",
    "Outcome",
    "StepTransition",
    "StepProgress",
    "QuestionnaireDomainError",
    "UnknownStepError",
]
