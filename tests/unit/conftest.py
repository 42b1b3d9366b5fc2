"""Unit test fixtures.

Scenario A answers: 30-year-old male, 175 cm, 70 kg, moderate activity,
maintaining weight, body fat skipped.
"""

import pytest

from calorie_calculator.domain.energy_profile.calculation import CalculationEngine
from calorie_calculator.domain.energy_profile.core.value_objects import (
    CalculationOutcome,
)
from calorie_calculator.domain.questionnaire.core.value_objects import RawAnswer
from calorie_calculator.domain.shared.entities.answer_store import (
    AnswerStore,
    AnswerValue,
)
from calorie_calculator.domain.shared.value_objects import (
    ActivityLevel,
    AnswerField,
    Gender,
    Goal,
    StressLevel,
    WorkType,
)

CALC_ENV_VARS = (
    "CALC_GAIN_SURPLUS_KCAL",
    "CALC_CALORIE_FLOOR_KCAL",
    "CALC_LOG_LEVEL",
    "CALC_LOG_JSON",
)


@pytest.fixture(autouse=True)
def _clear_calc_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CALC_* variables so settings start from defaults."""
    for name in CALC_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def scenario_a_answers() -> dict[AnswerField, AnswerValue]:
    """Canonical answers for Scenario A."""
    return {
        AnswerField.AGE: 30,
        AnswerField.GENDER: Gender.MALE,
        AnswerField.HEIGHT_CM: 175.0,
        AnswerField.WEIGHT_KG: 70.0,
        AnswerField.GOAL: Goal.MAINTAIN,
        AnswerField.ACTIVITY: ActivityLevel.MODERATE,
        AnswerField.BODY_FAT_PCT: None,
        AnswerField.WAIST_CM: 80.0,
        AnswerField.WORK: WorkType.DESK,
        AnswerField.SLEEP_HOURS: 8.0,
        AnswerField.STRESS: StressLevel.MEDIUM,
    }


@pytest.fixture
def scenario_a_store(scenario_a_answers: dict[AnswerField, AnswerValue]) -> AnswerStore:
    """Complete answer store for Scenario A."""
    return AnswerStore.from_answers(scenario_a_answers)


@pytest.fixture
def scenario_a_raw_answers() -> list[RawAnswer]:
    """Raw answers for Scenario A, one per step."""
    return [
        RawAnswer.number("30"),
        RawAnswer.choice("male"),
        RawAnswer.number("175"),
        RawAnswer.number("70"),
        RawAnswer.choice("maintain"),
        RawAnswer.choice("moderate"),
        RawAnswer.skip(),
        RawAnswer.number("80"),
        RawAnswer.choice("desk"),
        RawAnswer.number("8"),
        RawAnswer.choice("medium"),
    ]


@pytest.fixture
def scenario_a_outcome(scenario_a_store: AnswerStore) -> CalculationOutcome:
    """Successful calculation for Scenario A."""
    return CalculationEngine().compute(scenario_a_store)
