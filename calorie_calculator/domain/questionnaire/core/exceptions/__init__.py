"""Domain exceptions for the questionnaire."""

from .domain_errors import QuestionnaireDomainError, UnknownStepError

__all__ = [
    "QuestionnaireDomainError",
    "UnknownStepError",
]
