"""Unit tests for the engine factory."""

import pytest

from calorie_calculator.domain.shared.entities import AnswerStore
from calorie_calculator.domain.shared.value_objects import AnswerField, Goal
from calorie_calculator.infrastructure.config import (
    GAIN_SURPLUS_ENV,
    CalculatorSettings,
    ConfigurationError,
)
from calorie_calculator.infrastructure.engine_factory import create_calculation_engine


class TestCreateCalculationEngine:
    """Test engine creation from settings."""

    def _gain_store(self, answers):
        answers[AnswerField.GOAL] = Goal.GAIN
        return AnswerStore.from_answers(answers)

    def test_explicit_settings(self, scenario_a_answers):
        """Test surplus from settings is applied."""
        engine = create_calculation_engine(CalculatorSettings(gain_surplus_kcal=500))

        outcome = engine.compute(self._gain_store(scenario_a_answers))

        assert outcome.result.goal_calories == pytest.approx(3055.5625)

    def test_settings_from_env(self, monkeypatch, scenario_a_answers):
        """Test environment is read when no settings are given."""
        monkeypatch.setenv(GAIN_SURPLUS_ENV, "400")

        outcome = create_calculation_engine().compute(self._gain_store(scenario_a_answers))

        assert outcome.result.goal_calories == pytest.approx(2955.5625)

    def test_calorie_floor_from_settings(self, scenario_a_store):
        """Test a floor above the target clamps it."""
        engine = create_calculation_engine(CalculatorSettings(calorie_floor_kcal=3000))

        outcome = engine.compute(scenario_a_store)

        assert outcome.result.goal_calories == 3000
        assert len(outcome.warnings) == 1

    def test_invalid_env(self, monkeypatch):
        """Test invalid environment is reported."""
        monkeypatch.setenv(GAIN_SURPLUS_ENV, "100")

        with pytest.raises(ConfigurationError):
            create_calculation_engine()
