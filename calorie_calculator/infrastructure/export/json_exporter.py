"""JSON export of a calculation and the answers it came from."""

from dataclasses import dataclass, field
from typing import Optional, Sequence

import structlog
from pydantic import ValidationError

from calorie_calculator.domain.energy_profile.core.value_objects import (
    BMI,
    BMR,
    TDEE,
    CalorieFloorWarning,
    MacroNutrient,
    MacroSplit,
    Recommendations,
    ResultSet,
    WaistToHeightRatio,
)
from calorie_calculator.domain.shared.entities.answer_store import AnswerStore
from calorie_calculator.domain.shared.value_objects import AnswerField

from .models import (
    AnswersModel,
    BmiModel,
    BmrModel,
    CalorieFloorWarningModel,
    ExportDocument,
    MacroNutrientModel,
    MacrosModel,
    RecommendationsModel,
    ResultsModel,
    WaistToHeightModel,
)

logger = structlog.get_logger(__name__)


class ExportFormatError(ValueError):
    """Raised when exported JSON cannot be parsed back."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


@dataclass(frozen=True)
class ParsedExport:
    """Domain objects rebuilt from a JSON export.

    Attributes:
        store: Answers, every field answered
        result: Calculation results
        recommendations: Guidance, None if absent from the export
        warnings: Floor warnings recorded at export time
    """

    store: AnswerStore
    result: ResultSet
    recommendations: Optional[Recommendations] = None
    warnings: tuple[CalorieFloorWarning, ...] = field(default_factory=tuple)


class JsonExporter:
    """Serialize results to camelCase JSON and parse them back.

    The export is complete: every ResultSet and AnswerStore field is
    present, with BMR, TDEE and goal calories unrounded, so parsing the
    JSON rebuilds equal domain objects.
    """

    def __init__(self, indent: Optional[int] = 2):
        self._indent = indent

    def build_document(
        self,
        store: AnswerStore,
        result: ResultSet,
        recommendations: Optional[Recommendations] = None,
        warnings: Sequence[CalorieFloorWarning] = (),
    ) -> ExportDocument:
        """Build the export model.

        Args:
            store: Complete answer store
            result: Results computed from the store
            recommendations: Guidance for the results
            warnings: Floor warnings from the calculation

        Returns:
            ExportDocument: Export model

        Raises:
            ExportFormatError: If the store is incomplete
        """
        try:
            answers = AnswersModel(
                **{answer_field.value: store.get(answer_field) for answer_field in AnswerField}
            )
        except ValidationError as error:
            raise ExportFormatError(
                "Cannot export an incomplete answer set", cause=error
            ) from error

        return ExportDocument(
            answers=answers,
            results=_results_model(result),
            recommendations=(
                RecommendationsModel(
                    weekly_target=recommendations.weekly_target,
                    lifestyle_tip=recommendations.lifestyle_tip,
                    body_fat_note=recommendations.body_fat_note,
                )
                if recommendations is not None
                else None
            ),
            warnings=[
                CalorieFloorWarningModel(
                    requested=warning.requested,
                    floor=warning.floor,
                    message=warning.message(),
                )
                for warning in warnings
            ],
        )

    def to_json(
        self,
        store: AnswerStore,
        result: ResultSet,
        recommendations: Optional[Recommendations] = None,
        warnings: Sequence[CalorieFloorWarning] = (),
    ) -> str:
        """Serialize results and answers to JSON.

        Args:
            store: Complete answer store
            result: Results computed from the store
            recommendations: Guidance for the results
            warnings: Floor warnings from the calculation

        Returns:
            str: JSON text with camelCase keys

        Raises:
            ExportFormatError: If the store is incomplete
        """
        document = self.build_document(store, result, recommendations, warnings)
        text = document.model_dump_json(by_alias=True, indent=self._indent)
        logger.debug("JSON export built", size=len(text))
        return text

    def parse(self, text: str) -> ParsedExport:
        """Rebuild domain objects from exported JSON.

        Args:
            text: JSON produced by to_json

        Returns:
            ParsedExport: Answers, results, recommendations and warnings

        Raises:
            ExportFormatError: If the JSON is malformed or inconsistent
        """
        try:
            document = ExportDocument.model_validate_json(text)
        except ValidationError as error:
            logger.info("JSON export rejected", errors=error.error_count())
            raise ExportFormatError(
                f"Invalid calculator export: {error.error_count()} error(s)",
                cause=error,
            ) from error

        try:
            return _parsed_export(document)
        except ValueError as error:
            raise ExportFormatError(
                f"Inconsistent calculator export: {error}", cause=error
            ) from error


def _results_model(result: ResultSet) -> ResultsModel:
    return ResultsModel(
        bmr=BmrModel(value=result.bmr.value, formula=result.bmr.formula),
        tdee=result.tdee.value,
        goal_calories=result.goal_calories,
        bmi=BmiModel(value=result.bmi.value, category=result.bmi.category),
        waist_to_height_ratio=WaistToHeightModel(
            value=result.waist_to_height.value,
            category=result.waist_to_height.category,
        ),
        macros=MacrosModel(
            protein=_macro_model(result.macros.protein),
            carbs=_macro_model(result.macros.carbs),
            fat=_macro_model(result.macros.fat),
        ),
    )


def _macro_model(nutrient: MacroNutrient) -> MacroNutrientModel:
    return MacroNutrientModel(
        grams=nutrient.grams,
        calories=nutrient.calories,
        percentage=nutrient.percentage,
    )


def _macro_nutrient(model: MacroNutrientModel) -> MacroNutrient:
    return MacroNutrient(
        grams=model.grams, calories=model.calories, percentage=model.percentage
    )


def _parsed_export(document: ExportDocument) -> ParsedExport:
    answers = document.answers
    store = AnswerStore.from_answers(
        {
            answer_field: getattr(answers, answer_field.value)
            for answer_field in AnswerField
        }
    )

    results = document.results
    result = ResultSet(
        bmr=BMR(value=results.bmr.value, formula=results.bmr.formula),
        tdee=TDEE(value=results.tdee, activity=store.activity),
        goal_calories=results.goal_calories,
        bmi=BMI(value=results.bmi.value, category=results.bmi.category),
        waist_to_height=WaistToHeightRatio(
            value=results.waist_to_height_ratio.value,
            category=results.waist_to_height_ratio.category,
        ),
        macros=MacroSplit(
            protein=_macro_nutrient(results.macros.protein),
            carbs=_macro_nutrient(results.macros.carbs),
            fat=_macro_nutrient(results.macros.fat),
        ),
    )

    recommendations = None
    if document.recommendations is not None:
        recommendations = Recommendations(
            weekly_target=document.recommendations.weekly_target,
            lifestyle_tip=document.recommendations.lifestyle_tip,
            body_fat_note=document.recommendations.body_fat_note,
        )

    warnings = tuple(
        CalorieFloorWarning(requested=warning.requested, floor=warning.floor)
        for warning in document.warnings
    )
    return ParsedExport(
        store=store,
        result=result,
        recommendations=recommendations,
        warnings=warnings,
    )
