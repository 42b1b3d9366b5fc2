"""QuestionnaireSession - one user's pass through the calculator."""

from typing import Optional

import structlog

from calorie_calculator.domain.energy_profile.calculation import CalculationEngine
from calorie_calculator.domain.energy_profile.core.value_objects import (
    CalculationOutcome,
    ResultSet,
)
from calorie_calculator.domain.questionnaire.core.value_objects import (
    RawAnswer,
    StepProgress,
    StepTransition,
)
from calorie_calculator.domain.questionnaire.state_machine import StepStateMachine
from calorie_calculator.domain.questionnaire.validation import (
    QUESTIONNAIRE_STEPS,
    StepDefinition,
    StepValidator,
)
from calorie_calculator.domain.shared.entities.answer_store import AnswerStore

logger = structlog.get_logger(__name__)


class QuestionnaireSession:
    """
    Owns the answer store, state machine and engine for one session.

    Flow:
    1. submit() one answer per step (confirm_override() for unusual values)
    2. go_back() to revise earlier answers
    3. compute() once the last step is answered
    4. reset() to start over

    There is no process-wide state: callers create as many sessions as
    they need.
    """

    def __init__(self, engine: Optional[CalculationEngine] = None):
        self._store = AnswerStore()
        self._validator = StepValidator(self._store)
        self._machine = StepStateMachine(self._validator)
        self._engine = engine or CalculationEngine()
        self._last_outcome: Optional[CalculationOutcome] = None

    @property
    def store(self) -> AnswerStore:
        return self._store

    @property
    def machine(self) -> StepStateMachine:
        return self._machine

    @property
    def current_step(self) -> int:
        return self._machine.current_step

    @property
    def in_results(self) -> bool:
        return self._machine.in_results

    @property
    def is_answering(self) -> bool:
        """True while a question still needs an answer."""
        return self._machine.current_step < self._machine.total_steps

    @property
    def last_outcome(self) -> Optional[CalculationOutcome]:
        """Most recent successful calculation, None before the first one."""
        return self._last_outcome

    @property
    def last_result(self) -> Optional[ResultSet]:
        if self._last_outcome is None:
            return None
        return self._last_outcome.result

    def next_question(self) -> Optional[StepDefinition]:
        """Definition of the question awaiting an answer.

        Returns:
            StepDefinition, or None once every question is answered
        """
        if not self.is_answering:
            return None
        return QUESTIONNAIRE_STEPS[self._machine.current_step]

    def progress(self) -> StepProgress:
        return self._machine.progress()

    def submit(self, raw: RawAnswer) -> StepTransition:
        """Answer the next question.

        Args:
            raw: Raw answer from the input boundary

        Returns:
            StepTransition: moved, failed or awaiting confirmation
        """
        return self._machine.advance(raw)

    def confirm_override(self) -> StepTransition:
        return self._machine.confirm_override()

    def go_back(self) -> StepTransition:
        return self._machine.retreat()

    def compute(self) -> CalculationOutcome:
        """Run the calculation engine on the current answers.

        A successful outcome replaces the previous one and, when every
        question has been answered, moves the machine into Results. A
        failed outcome leaves the previous result in place.

        Returns:
            CalculationOutcome: Result or expected error

        Raises:
            ValueError: If an internal invariant is violated; the previous
                result is kept
        """
        outcome = self._engine.compute(self._store)
        if not outcome.ok:
            return outcome

        self._last_outcome = outcome
        if self._machine.current_step == self._machine.total_steps:
            self._machine.jump_to_results()
        logger.info("Session results updated", warnings=len(outcome.warnings))
        return outcome

    def reset(self) -> StepTransition:
        """Clear answers, navigation and results.

        Returns:
            StepTransition: ok, at step 0
        """
        self._last_outcome = None
        return self._machine.reset()
