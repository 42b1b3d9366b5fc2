"""Shared entities."""

from .answer_store import AnswerStore, AnswerValue

__all__ = ["AnswerStore", "AnswerValue"]
