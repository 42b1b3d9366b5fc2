"""Unit tests for energy profile value objects."""

import pytest

from calorie_calculator.domain.energy_profile.core.exceptions import (
    IncompleteAnswerSetError,
)
from calorie_calculator.domain.energy_profile.core.value_objects import (
    BMI,
    BMR,
    TDEE,
    BMICategory,
    BmrFormula,
    BodyProfile,
    CalculationOutcome,
    CalorieFloorWarning,
    MacroNutrient,
    Recommendations,
    WaistToHeightCategory,
    WaistToHeightRatio,
)
from calorie_calculator.domain.shared.entities import AnswerStore
from calorie_calculator.domain.shared.value_objects import ActivityLevel, AnswerField


class TestBMRAndTDEE:
    """Test BMR and TDEE value objects."""

    def test_bmr_positive(self):
        """Test BMR must be positive."""
        with pytest.raises(ValueError, match="BMR must be positive"):
            BMR(value=0)

    def test_bmr_default_formula(self):
        """Test Mifflin-St Jeor is the default formula."""
        bmr = BMR(value=1648.75)

        assert bmr.formula == BmrFormula.MIFFLIN_ST_JEOR
        assert str(bmr) == "1649 kcal/day"

    def test_formula_display_names(self):
        """Test formula names shown in reports."""
        assert BmrFormula.KATCH_MCARDLE.display_name() == "Katch-McArdle"
        assert BmrFormula.MIFFLIN_ST_JEOR.display_name() == "Mifflin-St Jeor"

    def test_tdee_positive(self):
        """Test TDEE must be positive."""
        with pytest.raises(ValueError):
            TDEE(value=-1)

    def test_tdee_rejects_non_finite(self):
        """Test NaN and infinity are not a daily burn."""
        for value in (float("nan"), float("inf")):
            with pytest.raises(ValueError, match="TDEE must be a positive number"):
                TDEE(value=value)

    def test_tdee_multiplier_follows_activity(self):
        """Test the PAL factor is read from the recorded activity level."""
        assert TDEE(value=2555.5625, activity=ActivityLevel.MODERATE).multiplier == 1.55
        assert TDEE(value=2000.0).multiplier is None


class TestBodyMetricsValueObjects:
    """Test BMI and waist-to-height value objects."""

    def test_bmi_category_bands(self):
        """Test BMI bands are inclusive on the lower bound."""
        assert BMICategory.classify(18.49) == BMICategory.UNDERWEIGHT
        assert BMICategory.classify(18.5) == BMICategory.NORMAL
        assert BMICategory.classify(24.89) == BMICategory.NORMAL
        assert BMICategory.classify(24.9) == BMICategory.OVERWEIGHT
        assert BMICategory.classify(29.9) == BMICategory.OBESE

    def test_bmi_category_must_match(self):
        """Test inconsistent category is refused."""
        with pytest.raises(ValueError, match="does not belong"):
            BMI(value=22.86, category=BMICategory.OBESE)

    def test_bmi_str(self):
        """Test string representation."""
        assert str(BMI(value=22.86, category=BMICategory.NORMAL)) == "22.86 (Normal)"

    def test_whtr_bands(self):
        """Test waist-to-height risk bands."""
        assert WaistToHeightCategory.classify(0.499) == WaistToHeightCategory.LOW_RISK
        assert WaistToHeightCategory.classify(0.5) == WaistToHeightCategory.INCREASED_RISK
        assert WaistToHeightCategory.classify(0.6) == WaistToHeightCategory.HIGH_RISK

    def test_whtr_str(self):
        """Test string representation."""
        ratio = WaistToHeightRatio(value=0.457, category=WaistToHeightCategory.LOW_RISK)

        assert str(ratio) == "0.457 (Low Risk)"

    def test_whtr_category_must_match(self):
        """Test inconsistent category is refused."""
        with pytest.raises(ValueError):
            WaistToHeightRatio(value=0.65, category=WaistToHeightCategory.LOW_RISK)


class TestMacroNutrient:
    """Test MacroNutrient value object."""

    def test_negative_refused(self):
        """Test amounts cannot be negative."""
        with pytest.raises(ValueError):
            MacroNutrient(grams=-1, calories=0, percentage=0)
        with pytest.raises(ValueError):
            MacroNutrient(grams=0, calories=0, percentage=101)

    def test_str(self):
        """Test string representation."""
        assert str(MacroNutrient(grams=84, calories=336, percentage=13)) == "84g (13%)"


class TestBodyProfile:
    """Test BodyProfile creation."""

    def test_from_complete_store(self, scenario_a_store):
        """Test snapshot of a complete store."""
        profile = BodyProfile.from_store(scenario_a_store)

        assert profile.age == 30
        assert profile.weight_kg == 70.0
        assert not profile.has_body_fat()

    def test_from_incomplete_store(self, scenario_a_answers):
        """Test missing answer raises with the field list."""
        del scenario_a_answers[AnswerField.WAIST_CM]

        with pytest.raises(IncompleteAnswerSetError) as exc_info:
            BodyProfile.from_store(AnswerStore.from_answers(scenario_a_answers))

        assert exc_info.value.missing_fields == [AnswerField.WAIST_CM]
        assert str(exc_info.value) == "Missing required data: Waist (Step 8)"

    def test_lean_mass(self, scenario_a_answers):
        """Test lean mass from body fat."""
        scenario_a_answers[AnswerField.BODY_FAT_PCT] = 20.0
        profile = BodyProfile.from_store(AnswerStore.from_answers(scenario_a_answers))

        assert profile.has_body_fat()
        assert profile.lean_mass_kg() == pytest.approx(56.0)

    def test_lean_mass_without_body_fat(self, scenario_a_store):
        """Test lean mass needs body fat."""
        with pytest.raises(ValueError):
            BodyProfile.from_store(scenario_a_store).lean_mass_kg()


class TestOutcomeAndWarnings:
    """Test CalculationOutcome, warnings and recommendations."""

    def test_failure_is_not_ok(self):
        """Test failed outcome."""
        outcome = CalculationOutcome.failure(IncompleteAnswerSetError([AnswerField.AGE]))

        assert not outcome.ok
        assert outcome.result is None

    def test_success_is_ok(self, scenario_a_outcome):
        """Test successful outcome."""
        assert scenario_a_outcome.ok
        assert scenario_a_outcome.error is None

    def test_floor_warning_message(self):
        """Test warning text."""
        warning = CalorieFloorWarning(requested=551.8, floor=1000.0)

        assert str(warning) == (
            "Very low calorie target detected (552 kcal). Using 1000 kcal minimum."
        )

    def test_recommendation_lines(self):
        """Test labelled lines."""
        recs = Recommendations(weekly_target="W", lifestyle_tip="T", body_fat_note="B")

        assert recs.lines() == ["Weekly Target: W", "Lifestyle Tip: T", "B"]
