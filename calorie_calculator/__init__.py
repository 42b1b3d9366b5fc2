"""Calorie Calculator - guided questionnaire and energy/macro targets."""

__version__ = "1.0.0"
