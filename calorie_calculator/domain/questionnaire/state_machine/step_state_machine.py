"""StepStateMachine - forward/backward navigation through the questionnaire."""

from dataclasses import dataclass
from typing import Optional

import structlog

from calorie_calculator.domain.shared.entities.answer_store import AnswerValue

from ..core.value_objects.outcome import Accepted, NeedsConfirmation
from ..core.value_objects.raw_answer import RawAnswer
from ..core.value_objects.step_progress import StepProgress
from ..core.value_objects.step_transition import StepTransition
from ..validation.field_rules import TOTAL_STEPS
from ..validation.step_validator import StepValidator

logger = structlog.get_logger(__name__)

COMPUTE_RESULTS_MESSAGE = "All questions answered - compute the results instead"
NOTHING_TO_CONFIRM_MESSAGE = "There is no value waiting for confirmation"
NOT_FINISHED_MESSAGE = "Answer every question before showing results"


@dataclass(frozen=True)
class _PendingConfirmation:
    step: int
    value: AnswerValue


class StepStateMachine:
    """Owns the current step and drives the validator on forward moves.

    ``current_step`` counts answered questions: 0 is the introduction and
    ``advance`` validates the answer to question ``current_step + 1``.
    Once every question is answered the machine can enter the terminal
    Results state.

    The step only grows through a validated or overridden transition, by
    exactly one; it only shrinks through ``retreat`` and never below 0.

    Example:
        >>> machine = StepStateMachine(StepValidator(AnswerStore()))
        >>> machine.advance(RawAnswer.number("14")).needs_confirmation
        True
        >>> machine.confirm_override().step
        1
    """

    def __init__(self, validator: StepValidator, total_steps: int = TOTAL_STEPS):
        self._validator = validator
        self._total_steps = total_steps
        self._current_step = 0
        self._pending: Optional[_PendingConfirmation] = None
        self._in_results = False

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def total_steps(self) -> int:
        return self._total_steps

    @property
    def pending_confirmation(self) -> bool:
        return self._pending is not None

    @property
    def in_results(self) -> bool:
        return self._in_results

    def advance(self, raw: RawAnswer) -> StepTransition:
        """Validate the next answer and move forward on success.

        A pending confirmation is discarded: the new input is validated
        from scratch.

        Args:
            raw: Answer to question ``current_step + 1``

        Returns:
            StepTransition: moved, failed, or awaiting confirmation
        """
        if self._current_step >= self._total_steps:
            return StepTransition.failed(
                self._current_step, COMPUTE_RESULTS_MESSAGE, in_results=self._in_results
            )

        self._pending = None
        target = self._current_step + 1
        outcome = self._validator.validate(target, raw)

        if isinstance(outcome, Accepted):
            return self._move_to(target)

        if isinstance(outcome, NeedsConfirmation):
            self._pending = _PendingConfirmation(step=target, value=outcome.value)
            logger.info("Confirmation requested", step=target)
            return StepTransition.confirmation_required(self._current_step, outcome.reason)

        return StepTransition.failed(self._current_step, outcome.reason)

    def confirm_override(self) -> StepTransition:
        """Accept the pending unusual value and move forward.

        Returns:
            StepTransition: moved, or failed if nothing is pending
        """
        if self._pending is None:
            return StepTransition.failed(
                self._current_step, NOTHING_TO_CONFIRM_MESSAGE, in_results=self._in_results
            )

        pending = self._pending
        self._pending = None
        self._validator.commit(pending.step, pending.value)
        logger.info("Confirmation accepted", step=pending.step)
        return self._move_to(pending.step)

    def retreat(self) -> StepTransition:
        """Go back one step without re-validating.

        From Results the machine returns to the last question. At the
        introduction nothing changes.

        Returns:
            StepTransition: always ok
        """
        self._pending = None
        if self._in_results:
            self._in_results = False
        elif self._current_step > 0:
            self._current_step -= 1
        logger.debug("Step retreated", step=self._current_step)
        return StepTransition.moved(self._current_step)

    def jump_to_results(self) -> StepTransition:
        """Enter the Results state once every question is answered.

        Returns:
            StepTransition: moved into Results, or failed before the end
        """
        if self._current_step != self._total_steps:
            return StepTransition.failed(self._current_step, NOT_FINISHED_MESSAGE)
        self._pending = None
        self._in_results = True
        logger.debug("Results shown", step=self._current_step)
        return StepTransition.moved(self._current_step, in_results=True)

    def reset(self) -> StepTransition:
        """Return to the introduction and forget every answer.

        Returns:
            StepTransition: ok, at step 0
        """
        self._validator.store.clear()
        self._current_step = 0
        self._pending = None
        self._in_results = False
        logger.info("Questionnaire reset")
        return StepTransition.moved(0)

    def progress(self) -> StepProgress:
        """Progress bar position for the question on screen.

        The question on screen is ``current_step + 1``; once every question
        is answered, or in Results, the bar shows the last step.

        Returns:
            StepProgress: Display step and percent
        """
        on_screen = min(self._current_step + 1, self._total_steps)
        return StepProgress.at(on_screen, self._total_steps)

    def _move_to(self, step: int) -> StepTransition:
        self._current_step = step
        logger.debug("Step advanced", step=step)
        return StepTransition.moved(step)
