"""Value objects shared by the questionnaire and energy profile contexts."""

from .activity_level import ActivityLevel
from .answer_field import AnswerField
from .gender import Gender
from .goal import Goal
from .stress_level import StressLevel
from .work_type import WorkType

__all__ = [
    "AnswerField",
    "Gender",
    "Goal",
    "ActivityLevel",
    "WorkType",
    "StressLevel",
]
