"""RecommendationService - guidance shown with the results."""

from typing import Optional

from calorie_calculator.domain.shared.value_objects import StressLevel, WorkType

from ..core.ports.calculators import IRecommendationProvider
from ..core.value_objects.body_profile import BodyProfile
from ..core.value_objects.recommendations import Recommendations

RECOMMENDED_MIN_SLEEP_HOURS = 7

SLEEP_TIP = (
    "Consider getting more sleep (7-9 hours) to support your metabolism and recovery."
)
STRESS_TIP = "High stress can affect your metabolism. Consider stress management techniques."
DESK_TIP = "With a desk job, try to add more movement throughout your day."
DEFAULT_TIP = "Stay consistent with your nutrition and exercise routine."


class RecommendationService(IRecommendationProvider):
    """Derive weekly target, lifestyle tip and body fat note.

    Only one lifestyle tip is given, in priority order: short sleep,
    then high stress, then desk work.
    """

    def recommend(self, profile: BodyProfile) -> Recommendations:
        """Build recommendations for a profile.

        Args:
            profile: Completed answers

        Returns:
            Recommendations: Guidance lines
        """
        return Recommendations(
            weekly_target=profile.goal.weekly_target(),
            lifestyle_tip=self._lifestyle_tip(profile),
            body_fat_note=self._body_fat_note(profile),
        )

    @staticmethod
    def _lifestyle_tip(profile: BodyProfile) -> str:
        if profile.sleep_hours < RECOMMENDED_MIN_SLEEP_HOURS:
            return SLEEP_TIP
        if profile.stress == StressLevel.HIGH:
            return STRESS_TIP
        if profile.work == WorkType.DESK:
            return DESK_TIP
        return DEFAULT_TIP

    @staticmethod
    def _body_fat_note(profile: BodyProfile) -> Optional[str]:
        if not profile.has_body_fat():
            return None
        return (
            f"Body Fat: {profile.body_fat_pct:g}% "
            "(used for more accurate BMR calculation)"
        )
