"""Pydantic models for the JSON export.

Keys are camelCase on the wire and snake_case in Python; both are accepted
when parsing.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from calorie_calculator.domain.energy_profile.core.value_objects import (
    BMICategory,
    BmrFormula,
    WaistToHeightCategory,
)
from calorie_calculator.domain.shared.value_objects import (
    ActivityLevel,
    Gender,
    Goal,
    StressLevel,
    WorkType,
)

EXPORT_FORMAT_VERSION = 1


class ExportModel(BaseModel):
    """Base model: camelCase aliases, immutable, unknown keys rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


class AnswersModel(ExportModel):
    """Answers in canonical units (cm, kg)."""

    age: int = Field(..., gt=0, description="Age in years")
    gender: Gender
    height_cm: float = Field(..., gt=0, description="Height in cm")
    weight_kg: float = Field(..., gt=0, description="Weight in kg")
    goal: Goal
    activity: ActivityLevel
    body_fat_pct: Optional[float] = Field(
        default=None, gt=0, lt=100, description="Body fat %, null when skipped"
    )
    waist_cm: float = Field(..., gt=0, description="Waist in cm")
    work: WorkType
    sleep_hours: float = Field(..., gt=0, description="Sleep hours per night")
    stress: StressLevel


class BmrModel(ExportModel):
    value: float = Field(..., gt=0, description="BMR in kcal/day, unrounded")
    formula: BmrFormula


class BmiModel(ExportModel):
    value: float = Field(..., gt=0)
    category: BMICategory


class WaistToHeightModel(ExportModel):
    value: float = Field(..., gt=0)
    category: WaistToHeightCategory


class MacroNutrientModel(ExportModel):
    grams: int = Field(..., ge=0)
    calories: int = Field(..., ge=0)
    percentage: int = Field(..., ge=0, le=100)


class MacrosModel(ExportModel):
    protein: MacroNutrientModel
    carbs: MacroNutrientModel
    fat: MacroNutrientModel


class ResultsModel(ExportModel):
    """Every field of a ResultSet."""

    bmr: BmrModel
    tdee: float = Field(..., gt=0, description="TDEE in kcal/day, unrounded")
    goal_calories: float = Field(..., gt=0, description="Daily target in kcal")
    bmi: BmiModel
    waist_to_height_ratio: WaistToHeightModel
    macros: MacrosModel


class RecommendationsModel(ExportModel):
    weekly_target: str
    lifestyle_tip: str
    body_fat_note: Optional[str] = None


class CalorieFloorWarningModel(ExportModel):
    requested: float
    floor: float
    message: str


class ExportDocument(ExportModel):
    """Top-level JSON export.

    Example:
        >>> doc = ExportDocument.model_validate_json(text)
        >>> doc.results.goal_calories
        1238.0
    """

    format_version: int = Field(default=EXPORT_FORMAT_VERSION, ge=1)
    answers: AnswersModel
    results: ResultsModel
    recommendations: Optional[RecommendationsModel] = None
    warnings: list[CalorieFloorWarningModel] = Field(default_factory=list)
