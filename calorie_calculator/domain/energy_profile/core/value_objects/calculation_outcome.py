"""CalculationOutcome - result or error of one compute() call."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .calculation_warning import CalorieFloorWarning
from .recommendations import Recommendations
from .result_set import ResultSet

if TYPE_CHECKING:
    from ..exceptions.domain_errors import CalculationError


@dataclass(frozen=True)
class CalculationOutcome:
    """Either a result with its warnings, or the error that stopped it.

    Attributes:
        result: Computed results, None on error
        recommendations: Guidance for the result, None on error
        warnings: Non-blocking warnings raised while computing
        error: Expected failure (incomplete answers, implausible BMR)
    """

    result: Optional[ResultSet] = None
    recommendations: Optional[Recommendations] = None
    warnings: tuple[CalorieFloorWarning, ...] = field(default_factory=tuple)
    error: Optional["CalculationError"] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None

    @staticmethod
    def success(
        result: ResultSet,
        recommendations: Recommendations,
        warnings: tuple[CalorieFloorWarning, ...] = (),
    ) -> "CalculationOutcome":
        return CalculationOutcome(
            result=result, recommendations=recommendations, warnings=warnings
        )

    @staticmethod
    def failure(error: "CalculationError") -> "CalculationOutcome":
        return CalculationOutcome(error=error)
