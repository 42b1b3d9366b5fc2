"""StressLevel value object."""

from enum import Enum


class StressLevel(str, Enum):
    """Self-reported everyday stress."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
