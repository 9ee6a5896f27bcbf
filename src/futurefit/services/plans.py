"""Plan generation for stored users."""

from dataclasses import dataclass, replace

from futurefit.domain.errors import ProfileNotFound
from futurefit.domain.plans import NutritionPlan, WorkoutPlan
from futurefit.services.nutrition import generate_nutrition_plan
from futurefit.services.profiles import ProfileService
from futurefit.services.scans import ScanService
from futurefit.services.workouts import generate_workout_plan


@dataclass(frozen=True)
class UserPlans:
    """Workout and nutrition plans generated together."""

    workout: WorkoutPlan
    nutrition: NutritionPlan


@dataclass
class PlanService:
    """Builds plans from a user's stored profile and latest scan."""

    profile_service: ProfileService
    scan_service: ScanService

    def generate(self, user_id: str) -> UserPlans:
        """Return plans for the user, using the latest body fat when available."""
        profile = self.profile_service.get(user_id)
        if profile is None:
            raise ProfileNotFound(user_id)
        latest = self.scan_service.latest(user_id)
        if latest is not None:
            profile = replace(
                profile, body_fat_percentage=latest.result.body_fat_percentage
            )
        return UserPlans(
            workout=generate_workout_plan(profile),
            nutrition=generate_nutrition_plan(profile),
        )
