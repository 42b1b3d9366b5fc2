"""Domain exceptions for the energy profile calculation."""

from .domain_errors import (
    CalculationError,
    ImplausibleResultError,
    IncompleteAnswerSetError,
)

__all__ = [
    "CalculationError",
    "IncompleteAnswerSetError",
    "ImplausibleResultError",
]
