"""StepProgress value object - progress bar position."""

from dataclasses import dataclass

from calorie_calculator.domain.shared.rounding import round_half_up_int


@dataclass(frozen=True)
class StepProgress:
    """Progress through the questionnaire.

    Attributes:
        display_step: Step number to show ("Step 3 of 11"), never below 1
        total_steps: Number of question steps
        percent: Progress bar fill (0-100)
    """

    display_step: int
    total_steps: int
    percent: int

    @staticmethod
    def at(current_step: int, total_steps: int) -> "StepProgress":
        """Compute progress for the step on screen.

        The introduction (step 0) and step 1 both show as step 1 with an
        empty bar; the last step fills it.

        Args:
            current_step: Step on screen (0..total_steps)
            total_steps: Number of question steps

        Returns:
            StepProgress: Progress snapshot

        Example:
            >>> StepProgress.at(6, 11).percent
            50
        """
        display_step = min(total_steps, max(1, current_step))
        if total_steps > 1:
            percent = round_half_up_int((current_step - 1) / (total_steps - 1) * 100)
        else:
            percent = 0
        return StepProgress(
            display_step=display_step,
            total_steps=total_steps,
            percent=max(0, percent),
        )

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: "Step x of y"
        """
        return f"Step {self.display_step} of {self.total_steps}"
