"""Questionnaire application services."""

from .session import QuestionnaireSession

__all__ = ["QuestionnaireSession"]
