"""Calculator ports - interfaces for the energy profile calculations."""

from abc import ABC, abstractmethod

from calorie_calculator.domain.shared.value_objects import ActivityLevel, Goal

from ..value_objects.bmi import BMI
from ..value_objects.body_profile import BodyProfile
from ..value_objects.bmr import BMR
from ..value_objects.macro_split import MacroSplit
from ..value_objects.recommendations import Recommendations
from ..value_objects.tdee import TDEE
from ..value_objects.waist_to_height import WaistToHeightRatio


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(self, profile: BodyProfile) -> BMR:
        """Calculate BMR from a body profile.

        Args:
            profile: Completed answers

        Returns:
            BMR: Basal metabolic rate with the formula used
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation."""

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution calculation."""

    @abstractmethod
    def calculate(
        self,
        goal_calories: float,
        weight_kg: float,
        goal: Goal,
        activity_level: ActivityLevel,
    ) -> MacroSplit:
        """Calculate macro distribution.

        Args:
            goal_calories: Daily calorie target
            weight_kg: Body weight in kg
            goal: Weight goal
            activity_level: Physical activity level

        Returns:
            MacroSplit: Protein/carbs/fat targets
        """
        pass


class IBodyMetricsCalculator(ABC):
    """Port for BMI and waist-to-height ratio."""

    @abstractmethod
    def bmi(self, weight_kg: float, height_cm: float) -> BMI:
        pass

    @abstractmethod
    def waist_to_height(self, waist_cm: float, height_cm: float) -> WaistToHeightRatio:
        pass


class IRecommendationProvider(ABC):
    """Port for result guidance."""

    @abstractmethod
    def recommend(self, profile: BodyProfile) -> Recommendations:
        pass
