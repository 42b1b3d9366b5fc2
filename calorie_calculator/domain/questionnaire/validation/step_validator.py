"""StepValidator - parse, convert, range-check and store one answer."""

import math
from enum import Enum
from typing import Optional

import structlog

from calorie_calculator.domain.shared.entities.answer_store import (
    AnswerStore,
    AnswerValue,
)

from ..conversion.unit_converter import feet_inches_to_cm, inches_to_cm, lbs_to_kg
from ..core.exceptions.domain_errors import UnknownStepError
from ..core.value_objects.measurement_unit import MeasurementUnit
from ..core.value_objects.outcome import Accepted, NeedsConfirmation, Outcome, Rejected
from ..core.value_objects.raw_answer import RawAnswer, RawScalar
from .field_rules import QUESTIONNAIRE_STEPS, TOTAL_STEPS, StepDefinition, StepKind

logger = structlog.get_logger(__name__)


class StepValidator:
    """Validate raw answers step by step and write accepted values.

    Validation never raises for user mistakes: it returns an Outcome.
    Only accepted values reach the store; a NeedsConfirmation value is
    written later through commit() once the user overrides.

    Example:
        >>> store = AnswerStore()
        >>> validator = StepValidator(store)
        >>> validator.validate(1, RawAnswer.number("30"))
        Accepted(value=30)
        >>> store.age
        30
    """

    def __init__(self, store: AnswerStore):
        self._store = store

    @property
    def store(self) -> AnswerStore:
        return self._store

    @staticmethod
    def definition(step: int) -> StepDefinition:
        """Look up a step's question definition.

        Args:
            step: Step index (1-based)

        Returns:
            StepDefinition: Question definition

        Raises:
            UnknownStepError: If step is outside 1..N
        """
        if not 1 <= step <= TOTAL_STEPS:
            raise UnknownStepError(step, TOTAL_STEPS)
        return QUESTIONNAIRE_STEPS[step - 1]

    def validate(self, step: int, raw: RawAnswer) -> Outcome:
        """Validate the answer for a step.

        On Accepted the canonical value is written to the store; on
        Rejected or NeedsConfirmation the store is left untouched.

        Args:
            step: Step index (1-based)
            raw: Raw answer from the input boundary

        Returns:
            Outcome: Accepted, Rejected or NeedsConfirmation

        Raises:
            UnknownStepError: If step is outside 1..N
        """
        definition = self.definition(step)

        if definition.kind == StepKind.CHOICE:
            outcome = self._validate_choice(definition, raw)
        else:
            outcome = self._validate_number(definition, raw)

        if isinstance(outcome, Accepted):
            self._store.record(definition.field, outcome.value)
            logger.debug(
                "Answer accepted",
                step=step,
                field=definition.field.value,
                value=_loggable(outcome.value),
            )
        elif isinstance(outcome, NeedsConfirmation):
            logger.debug(
                "Answer needs confirmation",
                step=step,
                field=definition.field.value,
                value=_loggable(outcome.value),
            )
        else:
            logger.debug(
                "Answer rejected",
                step=step,
                field=definition.field.value,
                reason=outcome.reason,
            )
        return outcome

    def commit(self, step: int, value: AnswerValue) -> None:
        """Write an already-validated value without re-checking ranges.

        Used when the user overrides a confirmation prompt.

        Args:
            step: Step index (1-based)
            value: Canonical value carried by NeedsConfirmation

        Raises:
            UnknownStepError: If step is outside 1..N
        """
        definition = self.definition(step)
        self._store.record(definition.field, value)
        logger.debug(
            "Answer committed after override",
            step=step,
            field=definition.field.value,
            value=_loggable(value),
        )

    def _validate_choice(self, definition: StepDefinition, raw: RawAnswer) -> Outcome:
        choices = definition.choices
        assert choices is not None

        value = raw.value
        if isinstance(value, choices):
            return Accepted(value)
        if not isinstance(value, str) or not value.strip():
            return Rejected(definition.rejection_message)
        try:
            return Accepted(choices(value.strip().lower()))
        except ValueError:
            return Rejected(definition.rejection_message)

    def _validate_number(self, definition: StepDefinition, raw: RawAnswer) -> Outcome:
        rule = definition.rule
        assert rule is not None

        if definition.kind == StepKind.OPTIONAL_NUMBER and (raw.skipped or raw.is_blank()):
            return Accepted(None)

        unit = raw.unit or definition.default_unit
        if unit is not None and unit not in definition.units:
            return Rejected(
                f"Unsupported unit '{unit.value}' for {definition.field.label()}"
            )

        value = self._canonical_value(unit, raw)
        if value is None:
            return Rejected(definition.rejection_message)

        if rule.whole_number:
            if not float(value).is_integer():
                return Rejected(definition.rejection_message)
            value = int(value)

        if not rule.within_hard(value):
            return Rejected(definition.rejection_message)

        if not rule.within_typical(value):
            return NeedsConfirmation(
                value=value,
                reason=(
                    f"{definition.field.label()} {value:g} {rule.unit_label} is outside "
                    f"the typical range ({rule.typical_band()}). Use it anyway?"
                ),
            )

        return Accepted(value)

    @staticmethod
    def _canonical_value(unit: Optional[MeasurementUnit], raw: RawAnswer) -> Optional[float]:
        """Parse the raw value and convert it to metric.

        Returns:
            Canonical number, None when missing or not numeric
        """
        if unit == MeasurementUnit.FT_IN:
            if raw.is_blank():
                return None
            feet = _parse_number(raw.value, blank_as_zero=True)
            inches = _parse_number(raw.inches, blank_as_zero=True)
            if feet is None or inches is None:
                return None
            if feet == 0 and inches == 0:
                return None
            return feet_inches_to_cm(feet, inches)

        number = _parse_number(raw.value)
        if number is None:
            return None
        if unit == MeasurementUnit.LBS:
            return lbs_to_kg(number)
        if unit == MeasurementUnit.IN:
            return inches_to_cm(number)
        return number


def _parse_number(value: RawScalar, blank_as_zero: bool = False) -> Optional[float]:
    """Parse a typed number.

    Args:
        value: Text or number from the input boundary
        blank_as_zero: Treat an empty entry as 0

    Returns:
        Finite float, None if missing or not a number
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0.0 if blank_as_zero else None
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    elif isinstance(value, (int, float)):
        number = float(value)
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _loggable(value: AnswerValue) -> object:
    return value.value if isinstance(value, Enum) else value
