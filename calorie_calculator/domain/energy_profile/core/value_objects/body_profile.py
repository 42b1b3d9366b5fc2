"""BodyProfile value object - complete answer set ready for calculation."""

from dataclasses import dataclass
from typing import Optional

from calorie_calculator.domain.shared.entities.answer_store import AnswerStore
from calorie_calculator.domain.shared.value_objects import (
    ActivityLevel,
    Gender,
    Goal,
    StressLevel,
    WorkType,
)


@dataclass(frozen=True)
class BodyProfile:
    """Immutable snapshot of a completed questionnaire.

    All measurements are in canonical units. Only body fat may be absent.

    Attributes:
        age: Age in years
        gender: Gender
        height_cm: Height in centimeters
        weight_kg: Body weight in kilograms
        goal: Weight goal
        activity: Physical activity level
        body_fat_pct: Body fat percentage, None if skipped
        waist_cm: Waist circumference in centimeters
        work: Work type
        sleep_hours: Average nightly sleep
        stress: Stress level
    """

    age: int
    gender: Gender
    height_cm: float
    weight_kg: float
    goal: Goal
    activity: ActivityLevel
    waist_cm: float
    work: WorkType
    sleep_hours: float
    stress: StressLevel
    body_fat_pct: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate measurements are positive.

        Raises:
            ValueError: If any measurement is not positive
        """
        for name in ("age", "height_cm", "weight_kg", "waist_cm", "sleep_hours"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.body_fat_pct is not None and not (0 < self.body_fat_pct < 100):
            raise ValueError(f"body_fat_pct must be 0-100, got {self.body_fat_pct}")

    @staticmethod
    def from_store(store: AnswerStore) -> "BodyProfile":
        """Build a profile from a complete answer store.

        Args:
            store: Answer store

        Returns:
            BodyProfile: Snapshot of the answers

        Raises:
            IncompleteAnswerSetError: If any required answer is missing
        """
        # Import here to avoid circular dependency
        from ..exceptions.domain_errors import IncompleteAnswerSetError

        missing = store.missing_fields()
        if missing:
            raise IncompleteAnswerSetError(missing)

        return BodyProfile(
            age=store.age,
            gender=store.gender,
            height_cm=store.height_cm,
            weight_kg=store.weight_kg,
            goal=store.goal,
            activity=store.activity,
            body_fat_pct=store.body_fat_pct,
            waist_cm=store.waist_cm,
            work=store.work,
            sleep_hours=store.sleep_hours,
            stress=store.stress,
        )

    def has_body_fat(self) -> bool:
        return self.body_fat_pct is not None and self.body_fat_pct > 0

    def lean_mass_kg(self) -> float:
        """Lean body mass.

        Returns:
            float: weight × (1 - body fat / 100)

        Raises:
            ValueError: If body fat is unknown
        """
        if self.body_fat_pct is None:
            raise ValueError("Lean mass requires body fat percentage")
        return self.weight_kg * (1 - self.body_fat_pct / 100)
