"""Plain-text document export of the results."""

from pathlib import Path
from typing import Optional, Sequence, Union

import structlog

from calorie_calculator.domain.energy_profile.core.value_objects import (
    CalorieFloorWarning,
    Recommendations,
    ResultSet,
)
from calorie_calculator.domain.shared.entities.answer_store import AnswerStore
from calorie_calculator.domain.shared.rounding import round_half_up_int

logger = structlog.get_logger(__name__)

DOCUMENT_TITLE = "Calorie Calculator Results"
DEFAULT_FILENAME = "calorie-calculator-results.txt"


class DocumentExporter:
    """Lay out answers and results as a readable report.

    Energy values are shown as whole calories; the unrounded values stay
    in the ResultSet and the JSON export.
    """

    def render(
        self,
        store: AnswerStore,
        result: ResultSet,
        recommendations: Optional[Recommendations] = None,
        warnings: Sequence[CalorieFloorWarning] = (),
    ) -> str:
        """Render the report.

        Args:
            store: Answers the results came from
            result: Calculation results
            recommendations: Guidance to append
            warnings: Floor warnings to list

        Returns:
            str: Report text ending with a newline
        """
        lines = [DOCUMENT_TITLE, "=" * len(DOCUMENT_TITLE), ""]
        lines.extend(self._user_lines(store))
        lines.append("")

        lines.append("Calculated Results:")
        lines.append(
            f"BMR (Base Metabolic Rate): {round_half_up_int(result.bmr.value)} calories"
            f" ({result.bmr.formula.display_name()})"
        )
        lines.append(
            f"TDEE (Total Daily Energy): {round_half_up_int(result.tdee.value)} calories"
        )
        goal_label = f" ({store.goal.label()})" if store.goal is not None else ""
        lines.append(
            f"Goal Calories: {round_half_up_int(result.goal_calories)} calories{goal_label}"
        )
        lines.append(f"BMI: {result.bmi.value:.2f} ({result.bmi.category.label()})")
        lines.append(
            f"Waist-to-Height Ratio: {result.waist_to_height.value:.3f} "
            f"({result.waist_to_height.category.label()})"
        )
        lines.append("")

        macros = result.macros
        lines.append("Macronutrient Breakdown:")
        lines.append(f"Protein: {macros.protein.grams}g ({macros.protein.percentage}%)")
        lines.append(f"Carbohydrates: {macros.carbs.grams}g ({macros.carbs.percentage}%)")
        lines.append(f"Fats: {macros.fat.grams}g ({macros.fat.percentage}%)")

        if recommendations is not None:
            lines.append("")
            lines.append("Recommendations:")
            lines.extend(recommendations.lines())

        if warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(warning.message() for warning in warnings)

        return "\n".join(lines) + "\n"

    def write(
        self,
        path: Union[str, Path],
        store: AnswerStore,
        result: ResultSet,
        recommendations: Optional[Recommendations] = None,
        warnings: Sequence[CalorieFloorWarning] = (),
    ) -> Path:
        """Render the report and write it to a file.

        Args:
            path: Target file, or a directory to place DEFAULT_FILENAME in
            store: Answers the results came from
            result: Calculation results
            recommendations: Guidance to append
            warnings: Floor warnings to list

        Returns:
            Path: File written

        Raises:
            OSError: If the file cannot be written
        """
        target = Path(path)
        if target.is_dir():
            target = target / DEFAULT_FILENAME
        target.write_text(
            self.render(store, result, recommendations, warnings), encoding="utf-8"
        )
        logger.info("Report written", path=str(target))
        return target

    @staticmethod
    def _user_lines(store: AnswerStore) -> list[str]:
        lines = ["Your Information:"]
        if store.age is not None:
            lines.append(f"Age: {store.age} years")
        if store.gender is not None:
            lines.append(f"Gender: {store.gender.value}")
        if store.height_cm is not None:
            lines.append(f"Height: {store.height_cm:.0f}cm")
        if store.weight_kg is not None:
            lines.append(f"Weight: {store.weight_kg:.1f}kg")
        if store.goal is not None:
            lines.append(f"Goal: {store.goal.value}")
        if store.activity is not None:
            lines.append(f"Activity: {store.activity.value}")
        if store.body_fat_pct is not None:
            lines.append(f"Body Fat: {store.body_fat_pct:g}%")
        if store.waist_cm is not None:
            lines.append(f"Waist: {store.waist_cm:.0f}cm")
        return lines
