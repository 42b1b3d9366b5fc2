"""Questionnaire navigation."""

from .step_state_machine import StepStateMachine

__all__ = ["StepStateMachine"]
