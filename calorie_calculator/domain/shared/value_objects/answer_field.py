"""AnswerField value object - names of the questionnaire answers."""

from enum import Enum


class AnswerField(str, Enum):
    """One answer collected by the questionnaire.

    The enum order is the question order; ``step()`` gives the 1-based
    step that collects the field.
    """

    AGE = "age"
    GENDER = "gender"
    HEIGHT_CM = "height_cm"
    WEIGHT_KG = "weight_kg"
    GOAL = "goal"
    ACTIVITY = "activity"
    BODY_FAT_PCT = "body_fat_pct"
    WAIST_CM = "waist_cm"
    WORK = "work"
    SLEEP_HOURS = "sleep_hours"
    STRESS = "stress"

    def step(self) -> int:
        """Get the questionnaire step collecting this field.

        Returns:
            int: Step index (1-11)

        Example:
            >>> AnswerField.WAIST_CM.step()
            8
        """
        return list(AnswerField).index(self) + 1

    def label(self) -> str:
        """Get human-readable field name.

        Returns:
            str: Field label
        """
        labels = {
            AnswerField.AGE: "Age",
            AnswerField.GENDER: "Gender",
            AnswerField.HEIGHT_CM: "Height",
            AnswerField.WEIGHT_KG: "Weight",
            AnswerField.GOAL: "Goal",
            AnswerField.ACTIVITY: "Activity",
            AnswerField.BODY_FAT_PCT: "Body Fat",
            AnswerField.WAIST_CM: "Waist",
            AnswerField.WORK: "Work Type",
            AnswerField.SLEEP_HOURS: "Sleep",
            AnswerField.STRESS: "Stress",
        }
        return labels[self]

    def is_optional(self) -> bool:
        """Whether the engine can run without this field.

        Returns:
            bool: True only for body fat
        """
        return self is AnswerField.BODY_FAT_PCT

    @staticmethod
    def for_step(step: int) -> "AnswerField":
        """Get the field collected by a step.

        Args:
            step: Step index (1-11)

        Returns:
            AnswerField: Field for the step

        Raises:
            ValueError: If no step has that index
        """
        fields = list(AnswerField)
        if not (1 <= step <= len(fields)):
            raise ValueError(f"No questionnaire step {step}")
        return fields[step - 1]
