"""Configuration utilities for infrastructure layer.

Settings come from environment variables, optionally loaded from a
``.env`` file.

Example .env:
    CALC_GAIN_SURPLUS_KCAL=400
    CALC_CALORIE_FLOOR_KCAL=1200
    CALC_LOG_LEVEL=DEBUG
    CALC_LOG_JSON=true
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from calorie_calculator.domain.energy_profile.calculation import (
    DEFAULT_CALORIE_FLOOR_KCAL,
)
from calorie_calculator.domain.shared.value_objects.goal import (
    DEFAULT_GAIN_SURPLUS_KCAL,
    MAX_GAIN_SURPLUS_KCAL,
    MIN_GAIN_SURPLUS_KCAL,
)

GAIN_SURPLUS_ENV = "CALC_GAIN_SURPLUS_KCAL"
CALORIE_FLOOR_ENV = "CALC_CALORIE_FLOOR_KCAL"
LOG_LEVEL_ENV = "CALC_LOG_LEVEL"
LOG_JSON_ENV = "CALC_LOG_JSON"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


class ConfigurationError(ValueError):
    """Raised when an environment variable holds an invalid value."""

    def __init__(self, variable: str, value: str, reason: str):
        super().__init__(f"Invalid {variable}={value!r}: {reason}")
        self.variable = variable
        self.value = value


def load_env_file(path: Optional[Union[str, Path]] = None) -> bool:
    """Load variables from a .env file without overriding the environment.

    Args:
        path: .env file, defaults to searching from the working directory

    Returns:
        bool: True if a file was found and loaded
    """
    if path is None:
        return load_dotenv()
    return load_dotenv(Path(path))


def _get_float(variable: str, default: float) -> float:
    raw = os.getenv(variable)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(variable, raw, "expected a number") from None


def get_gain_surplus_kcal() -> float:
    """
    Get calorie surplus applied for the gain goal.

    Returns:
        Surplus from CALC_GAIN_SURPLUS_KCAL, defaults to 300

    Raises:
        ConfigurationError: If not a number in 300-500
    """
    value = _get_float(GAIN_SURPLUS_ENV, DEFAULT_GAIN_SURPLUS_KCAL)
    if not (MIN_GAIN_SURPLUS_KCAL <= value <= MAX_GAIN_SURPLUS_KCAL):
        raise ConfigurationError(
            GAIN_SURPLUS_ENV,
            os.getenv(GAIN_SURPLUS_ENV, ""),
            f"must be between {MIN_GAIN_SURPLUS_KCAL:.0f} and {MAX_GAIN_SURPLUS_KCAL:.0f}",
        )
    return value


def get_calorie_floor_kcal() -> float:
    """
    Get minimum daily calorie target.

    Returns:
        Floor from CALC_CALORIE_FLOOR_KCAL, defaults to 1000

    Raises:
        ConfigurationError: If not a positive number
    """
    value = _get_float(CALORIE_FLOOR_ENV, DEFAULT_CALORIE_FLOOR_KCAL)
    if value <= 0:
        raise ConfigurationError(
            CALORIE_FLOOR_ENV, os.getenv(CALORIE_FLOOR_ENV, ""), "must be positive"
        )
    return value


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-case level from CALC_LOG_LEVEL, defaults to "INFO"

    Raises:
        ConfigurationError: If not a known level name
    """
    raw = os.getenv(LOG_LEVEL_ENV, "INFO")
    level = raw.strip().upper() or "INFO"
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            LOG_LEVEL_ENV, raw, f"expected one of {', '.join(LOG_LEVELS)}"
        )
    return level


def get_log_json() -> bool:
    """
    Get whether logs are rendered as JSON.

    Returns:
        True when CALC_LOG_JSON is 1/true/yes/on, defaults to False

    Raises:
        ConfigurationError: If not a recognised boolean
    """
    raw = os.getenv(LOG_JSON_ENV, "")
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(LOG_JSON_ENV, raw, "expected true or false")


@dataclass(frozen=True)
class CalculatorSettings:
    """Runtime settings for the calculator.

    Attributes:
        gain_surplus_kcal: Surplus for the gain goal (300-500)
        calorie_floor_kcal: Minimum goal calories
        log_level: Log level name
        log_json: Render logs as JSON lines
    """

    gain_surplus_kcal: float = DEFAULT_GAIN_SURPLUS_KCAL
    calorie_floor_kcal: float = DEFAULT_CALORIE_FLOOR_KCAL
    log_level: str = "INFO"
    log_json: bool = False

    @staticmethod
    def from_env() -> "CalculatorSettings":
        """Read every setting from the environment.

        Returns:
            CalculatorSettings: Current settings

        Raises:
            ConfigurationError: If any variable is invalid
        """
        return CalculatorSettings(
            gain_surplus_kcal=get_gain_surplus_kcal(),
            calorie_floor_kcal=get_calorie_floor_kcal(),
            log_level=get_log_level(),
            log_json=get_log_json(),
        )
