"""Value objects for the questionnaire domain."""

from .measurement_unit import MeasurementUnit
from .outcome import Accepted, NeedsConfirmation, Outcome, Rejected
from .raw_answer import RawAnswer
from .step_progress import StepProgress
from .step_transition import StepTransition

__all__ = [
    "MeasurementUnit",
    "RawAnswer",
    "Accepted",
    "Rejected",
    "NeedsConfirmation",
    "Outcome",
    "StepTransition",
    "StepProgress",
]
