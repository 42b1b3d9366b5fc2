"""WorkType value object - kind of daily work."""

from enum import Enum


class WorkType(str, Enum):
    """Type of work the user does most days."""

    DESK = "desk"
    ACTIVE = "active"
    MANUAL = "manual"

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Work type description
        """
        descriptions = {
            WorkType.DESK: "Desk job, mostly sitting",
            WorkType.ACTIVE: "On my feet most of the day",
            WorkType.MANUAL: "Physical labour",
        }
        return descriptions[self]
