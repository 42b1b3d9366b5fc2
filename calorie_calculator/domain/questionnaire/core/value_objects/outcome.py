"""Outcome value objects - result of validating one step.

A validation never raises for expected user mistakes. It returns exactly
one of three variants:

- Accepted: value is valid and has been written to the answer store
- Rejected: value is outside hard bounds or nothing was selected
- NeedsConfirmation: value is plausible but unusual; an explicit override
  is required before it is written
"""

from dataclasses import dataclass
from typing import Union

from calorie_calculator.domain.shared.entities.answer_store import AnswerValue


@dataclass(frozen=True)
class Accepted:
    """Validated canonical value.

    Attributes:
        value: Value in canonical units (None for skipped body fat)
    """

    value: AnswerValue


@dataclass(frozen=True)
class Rejected:
    """Validation failure; the step cannot advance.

    Attributes:
        reason: Message to show the user
    """

    reason: str


@dataclass(frozen=True)
class NeedsConfirmation:
    """Unusual value awaiting an explicit override.

    Attributes:
        value: Converted value that will be written on override
        reason: Confirmation prompt to show the user
    """

    value: AnswerValue
    reason: str


Outcome = Union[Accepted, Rejected, NeedsConfirmation]
