"""Ports for energy profile calculations."""

from .calculators import (
    IBMRCalculator,
    IBodyMetricsCalculator,
    IMacroCalculator,
    IRecommendationProvider,
    ITDEECalculator,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "IMacroCalculator",
    "IBodyMetricsCalculator",
    "IRecommendationProvider",
]
