"""Unit tests for CalculationEngine."""

import pytest

from calorie_calculator.domain.energy_profile.calculation import (
    BodyMetricsService,
    CalculationEngine,
)
from calorie_calculator.domain.energy_profile.calculation.recommendation_service import (
    DESK_TIP,
)
from calorie_calculator.domain.energy_profile.core.exceptions import (
    ImplausibleResultError,
    IncompleteAnswerSetError,
)
from calorie_calculator.domain.energy_profile.core.value_objects import (
    BMI,
    BMICategory,
    BmrFormula,
    WaistToHeightCategory,
)
from calorie_calculator.domain.shared.entities import AnswerStore
from calorie_calculator.domain.shared.value_objects import (
    ActivityLevel,
    AnswerField,
    Gender,
    Goal,
)


class _BrokenBodyMetrics(BodyMetricsService):
    """Returns a BMI whose category does not match its value."""

    def bmi(self, weight_kg, height_cm):
        return BMI(value=22.0, category=BMICategory.OBESE)


class TestCalculationEngine:
    """Test the full calculation flow."""

    def setup_method(self):
        """Set up test fixtures."""
        self.engine = CalculationEngine()

    def test_scenario_a(self, scenario_a_store):
        """Test 30-year-old male, 175 cm, 70 kg, moderate, maintain."""
        outcome = self.engine.compute(scenario_a_store)

        assert outcome.ok
        result = outcome.result
        assert result.bmr.value == 1648.75
        assert result.bmr.formula == BmrFormula.MIFFLIN_ST_JEOR
        assert 1600 <= result.bmr.value <= 1750
        assert result.tdee.value == pytest.approx(2555.5625)
        assert 2550 <= result.tdee.value <= 2700
        assert result.goal_calories == result.tdee.value
        assert result.bmi.value == 22.86
        assert result.bmi.category == BMICategory.NORMAL
        assert result.waist_to_height.value == 0.457
        assert result.waist_to_height.category == WaistToHeightCategory.LOW_RISK
        assert str(result.macros) == "84P / 395C / 71F"
        assert outcome.recommendations.lifestyle_tip == DESK_TIP
        assert outcome.warnings == ()

    def test_scenario_b(self, scenario_a_answers):
        """Test 25-year-old female, 160 cm, 55 kg, light, lose."""
        scenario_a_answers.update(
            {
                AnswerField.AGE: 25,
                AnswerField.GENDER: Gender.FEMALE,
                AnswerField.HEIGHT_CM: 160.0,
                AnswerField.WEIGHT_KG: 55.0,
                AnswerField.ACTIVITY: ActivityLevel.LIGHT,
                AnswerField.GOAL: Goal.LOSE,
            }
        )

        outcome = self.engine.compute(AnswerStore.from_answers(scenario_a_answers))

        assert outcome.result.bmr.value == 1264.0
        assert outcome.result.tdee.value == 1738.0
        assert outcome.result.goal_calories == 1238.0

    def test_body_fat_uses_katch_mcardle(self, scenario_a_answers):
        """Test body fat answer changes the formula."""
        scenario_a_answers[AnswerField.BODY_FAT_PCT] = 20.0

        outcome = self.engine.compute(AnswerStore.from_answers(scenario_a_answers))

        assert outcome.result.bmr.formula == BmrFormula.KATCH_MCARDLE
        assert outcome.result.bmr.value == pytest.approx(1579.6)
        assert outcome.recommendations.body_fat_note is not None

    def test_gain_uses_configured_surplus(self, scenario_a_answers):
        """Test engine passes the surplus to the goal service."""
        scenario_a_answers[AnswerField.GOAL] = Goal.GAIN
        store = AnswerStore.from_answers(scenario_a_answers)

        default = self.engine.compute(store)
        larger = CalculationEngine(gain_surplus=500).compute(store)

        assert default.result.goal_calories == pytest.approx(2855.5625)
        assert default.result.macros.protein.grams == 126
        assert larger.result.goal_calories == pytest.approx(3055.5625)

    def test_deterministic(self, scenario_a_store):
        """Test repeated calls on the same store give equal outcomes."""
        first = self.engine.compute(scenario_a_store)
        second = self.engine.compute(scenario_a_store)

        assert first == second

    def test_store_not_modified(self, scenario_a_store):
        """Test compute only reads the store."""
        before = scenario_a_store.to_dict()

        self.engine.compute(scenario_a_store)

        assert scenario_a_store.to_dict() == before

    def test_calorie_floor_warning(self, scenario_a_answers):
        """Test very low targets are clamped and reported."""
        scenario_a_answers.update(
            {
                AnswerField.AGE: 60,
                AnswerField.GENDER: Gender.FEMALE,
                AnswerField.HEIGHT_CM: 150.0,
                AnswerField.WEIGHT_KG: 40.0,
                AnswerField.ACTIVITY: ActivityLevel.SEDENTARY,
                AnswerField.GOAL: Goal.LOSE,
            }
        )

        outcome = self.engine.compute(AnswerStore.from_answers(scenario_a_answers))

        assert outcome.ok
        assert outcome.result.bmr.value == 876.5
        assert outcome.result.goal_calories == 1000.0
        assert len(outcome.warnings) == 1
        assert outcome.warnings[0].requested == pytest.approx(551.8)
        macros = outcome.result.macros
        assert (macros.protein.grams, macros.fat.grams, macros.carbs.grams) == (48, 28, 140)

    def test_incomplete_answers(self):
        """Test missing answers are reported with their step."""
        store = AnswerStore()
        store.record(AnswerField.GENDER, Gender.MALE)

        outcome = self.engine.compute(store)

        assert not outcome.ok
        assert outcome.result is None
        assert isinstance(outcome.error, IncompleteAnswerSetError)
        assert outcome.error.missing_labels[0] == "Age (Step 1)"
        assert AnswerField.GENDER not in outcome.error.missing_fields
        assert str(outcome.error).startswith("Missing required data: Age (Step 1), Height (Step 3)")

    def test_implausibly_low_bmr(self, scenario_a_answers):
        """Test individually valid answers producing BMR below 800 kcal."""
        scenario_a_answers.update(
            {
                AnswerField.AGE: 100,
                AnswerField.GENDER: Gender.FEMALE,
                AnswerField.HEIGHT_CM: 100.0,
                AnswerField.WEIGHT_KG: 20.0,
            }
        )

        outcome = self.engine.compute(AnswerStore.from_answers(scenario_a_answers))

        assert not outcome.ok
        assert isinstance(outcome.error, ImplausibleResultError)
        assert outcome.error.bmr == 164.0

    def test_implausibly_high_bmr(self, scenario_a_answers):
        """Test BMR above 4000 kcal is refused."""
        scenario_a_answers[AnswerField.WEIGHT_KG] = 400.0

        outcome = self.engine.compute(AnswerStore.from_answers(scenario_a_answers))

        assert isinstance(outcome.error, ImplausibleResultError)
        assert "4949" in str(outcome.error)

    def test_invariant_violation_propagates(self, scenario_a_store):
        """Test a broken value object is not turned into an outcome."""
        engine = CalculationEngine(body_metrics_service=_BrokenBodyMetrics())

        with pytest.raises(ValueError):
            engine.compute(scenario_a_store)
