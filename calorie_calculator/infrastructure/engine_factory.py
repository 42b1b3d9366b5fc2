"""Factory for creating calculation engine instances."""

from typing import Optional

from calorie_calculator.domain.energy_profile.calculation import CalculationEngine

from .config import CalculatorSettings


def create_calculation_engine(
    settings: Optional[CalculatorSettings] = None,
) -> CalculationEngine:
    """
    Create a calculation engine configured from settings.

    Args:
        settings: Calculator settings, read from the environment if omitted

    Returns:
        CalculationEngine with the configured surplus and calorie floor

    Raises:
        ConfigurationError: If settings come from an invalid environment
    """
    if settings is None:
        settings = CalculatorSettings.from_env()
    return CalculationEngine(
        gain_surplus=settings.gain_surplus_kcal,
        calorie_floor=settings.calorie_floor_kcal,
    )
