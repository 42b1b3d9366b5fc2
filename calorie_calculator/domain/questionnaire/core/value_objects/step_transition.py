"""StepTransition value object - result of a state machine operation."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class StepTransition:
    """Outcome of advance/retreat/confirm_override/jump_to_results/reset.

    This is what the presenter consumes to show errors, toasts and
    confirmation dialogs.

    Attributes:
        ok: Whether the requested transition happened
        step: Current step after the operation
        error: Failure reason when ok is False
        needs_confirmation: True when an unusual value awaits override
        prompt: Confirmation question when needs_confirmation is True
        in_results: True when the machine is on the results screen
    """

    ok: bool
    step: int
    error: Optional[str] = None
    needs_confirmation: bool = False
    prompt: Optional[str] = None
    in_results: bool = False

    @staticmethod
    def moved(step: int, in_results: bool = False) -> "StepTransition":
        """Successful transition.

        Args:
            step: New current step
            in_results: Whether the results screen is now showing

        Returns:
            StepTransition: ok transition
        """
        return StepTransition(ok=True, step=step, in_results=in_results)

    @staticmethod
    def failed(step: int, error: str, in_results: bool = False) -> "StepTransition":
        """Transition refused; state unchanged.

        Args:
            step: Unchanged current step
            error: Reason to show the user
            in_results: Whether the results screen is showing

        Returns:
            StepTransition: failed transition
        """
        return StepTransition(ok=False, step=step, error=error, in_results=in_results)

    @staticmethod
    def confirmation_required(step: int, prompt: str) -> "StepTransition":
        """Transition halted until the user confirms an unusual value.

        Args:
            step: Unchanged current step
            prompt: Confirmation question

        Returns:
            StepTransition: pending transition
        """
        return StepTransition(ok=False, step=step, needs_confirmation=True, prompt=prompt)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the presenter contract.

        Optional keys are present only when meaningful.

        Returns:
            dict[str, Any]: ``{ok, step, error?, needsConfirmation?, prompt?}``
        """
        result: dict[str, Any] = {"ok": self.ok, "step": self.step}
        if self.error is not None:
            result["error"] = self.error
        if self.needs_confirmation:
            result["needsConfirmation"] = True
            result["prompt"] = self.prompt
        if self.in_results:
            result["inResults"] = True
        return result
