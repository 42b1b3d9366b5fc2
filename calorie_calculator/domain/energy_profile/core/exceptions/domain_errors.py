"""Domain exceptions for the energy profile calculation."""

from typing import Sequence

from calorie_calculator.domain.shared.value_objects import AnswerField


class CalculationError(Exception):
    """Base exception for expected calculation failures."""

    pass


class IncompleteAnswerSetError(CalculationError):
    """Raised when a required answer is missing."""

    def __init__(self, missing_fields: Sequence[AnswerField]):
        self.missing_fields = list(missing_fields)
        self.missing_labels = [
            f"{answer_field.label()} (Step {answer_field.step()})"
            for answer_field in self.missing_fields
        ]
        super().__init__(
            f"Missing required data: {', '.join(self.missing_labels)}"
        )


class ImplausibleResultError(CalculationError):
    """Raised when individually valid answers produce an implausible BMR."""

    def __init__(self, bmr: float, bounds: tuple[float, float]):
        super().__init__(
            f"Calculated BMR {bmr:.0f} kcal is outside the plausible range "
            f"({bounds[0]:.0f}-{bounds[1]:.0f} kcal). Please check your answers."
        )
        self.bmr = bmr
        self.bounds = bounds
