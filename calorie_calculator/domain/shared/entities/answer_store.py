"""AnswerStore entity - validated questionnaire answers for one session."""

from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.answer_field import AnswerField
from ..value_objects.gender import Gender
from ..value_objects.goal import Goal
from ..value_objects.stress_level import StressLevel
from ..value_objects.work_type import WorkType

AnswerValue = Union[int, float, Gender, Goal, ActivityLevel, WorkType, StressLevel, None]

_EXPECTED_TYPES: dict[AnswerField, tuple[type, ...]] = {
    AnswerField.AGE: (int,),
    AnswerField.GENDER: (Gender,),
    AnswerField.HEIGHT_CM: (int, float),
    AnswerField.WEIGHT_KG: (int, float),
    AnswerField.GOAL: (Goal,),
    AnswerField.ACTIVITY: (ActivityLevel,),
    AnswerField.BODY_FAT_PCT: (int, float),
    AnswerField.WAIST_CM: (int, float),
    AnswerField.WORK: (WorkType,),
    AnswerField.SLEEP_HOURS: (int, float),
    AnswerField.STRESS: (StressLevel,),
}


@dataclass
class AnswerStore:
    """Mutable record of validated answers, keyed by field.

    Values are always in canonical units (cm, kg) - conversion happens
    before a value reaches the store. The store remembers which fields have
    been answered so a skipped body fat (answered, ``None``) is told apart
    from a question not reached yet.

    Attributes:
        age: Age in years
        gender: Gender
        height_cm: Height in centimeters
        weight_kg: Body weight in kilograms
        goal: Weight goal
        activity: Physical activity level
        body_fat_pct: Body fat percentage, None when skipped
        waist_cm: Waist circumference in centimeters
        work: Work type
        sleep_hours: Average nightly sleep
        stress: Stress level
    """

    age: Optional[int] = None
    gender: Optional[Gender] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    goal: Optional[Goal] = None
    activity: Optional[ActivityLevel] = None
    body_fat_pct: Optional[float] = None
    waist_cm: Optional[float] = None
    work: Optional[WorkType] = None
    sleep_hours: Optional[float] = None
    stress: Optional[StressLevel] = None
    _answered: set[AnswerField] = field(default_factory=set, repr=False)

    @staticmethod
    def from_answers(answers: dict[AnswerField, AnswerValue]) -> "AnswerStore":
        """Create a store with the given fields already answered.

        Args:
            answers: Canonical values keyed by field

        Returns:
            AnswerStore: Store with every given field recorded

        Raises:
            ValueError: If any value has the wrong type for its field
        """
        store = AnswerStore()
        for answer_field, value in answers.items():
            store.record(answer_field, value)
        return store

    def record(self, answer_field: AnswerField, value: AnswerValue) -> None:
        """Write a canonical value for a field.

        Args:
            answer_field: Field to write
            value: Canonical value (None only allowed for body fat)

        Raises:
            ValueError: If the value has the wrong type for the field
        """
        if value is None:
            if not answer_field.is_optional():
                raise ValueError(f"{answer_field.label()} cannot be empty")
        else:
            expected = _EXPECTED_TYPES[answer_field]
            # bool is an int subclass but never a valid answer
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ValueError(
                    f"{answer_field.label()} expects "
                    f"{'/'.join(t.__name__ for t in expected)}, "
                    f"got {type(value).__name__}"
                )
        setattr(self, answer_field.value, value)
        self._answered.add(answer_field)

    def get(self, answer_field: AnswerField) -> AnswerValue:
        """Read the stored value for a field.

        Args:
            answer_field: Field to read

        Returns:
            Stored value, None if unanswered or skipped
        """
        return getattr(self, answer_field.value)

    def is_answered(self, answer_field: AnswerField) -> bool:
        """Check whether a field has been written.

        Args:
            answer_field: Field to check

        Returns:
            bool: True once the field's step has been passed
        """
        return answer_field in self._answered

    def missing_fields(self) -> list[AnswerField]:
        """List required fields that have no value yet.

        Returns:
            list[AnswerField]: Missing fields in question order
        """
        return [
            f
            for f in AnswerField
            if not f.is_optional() and (not self.is_answered(f) or self.get(f) is None)
        ]

    def is_complete(self) -> bool:
        """Check that every required field is present.

        Returns:
            bool: True when the calculation engine can run
        """
        return not self.missing_fields()

    def clear(self) -> None:
        """Discard every answer (explicit restart)."""
        for answer_field in AnswerField:
            setattr(self, answer_field.value, None)
        self._answered.clear()

    def snapshot(self) -> "AnswerStore":
        """Independent copy of the current answers.

        Returns:
            AnswerStore: Deep copy
        """
        return deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        """Plain representation with enum values unwrapped.

        Only answered fields are included.

        Returns:
            dict[str, Any]: Field name to primitive value
        """
        result: dict[str, Any] = {}
        for answer_field in AnswerField:
            if not self.is_answered(answer_field):
                continue
            value = self.get(answer_field)
            result[answer_field.value] = value.value if isinstance(value, Enum) else value
        return result

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: Progress summary
        """
        return f"AnswerStore({len(self._answered)}/{len(AnswerField)} answered)"
