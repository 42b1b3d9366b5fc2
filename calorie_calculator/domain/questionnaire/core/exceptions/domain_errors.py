"""Domain exceptions for the questionnaire."""


class QuestionnaireDomainError(Exception):
    """Base exception for questionnaire domain errors."""

    pass


class UnknownStepError(QuestionnaireDomainError):
    """Raised when a step index has no question behind it."""

    def __init__(self, step: int, total_steps: int):
        super().__init__(f"Unknown questionnaire step {step} (valid: 1-{total_steps})")
        self.step = step
        self.total_steps = total_steps
