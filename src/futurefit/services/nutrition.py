"""Rules-based nutrition plan generation."""

import logging
import math
from dataclasses import dataclass

from futurefit.domain.plans import Macros, MealPlan, NutritionPlan
from futurefit.domain.profiles import (
    ActivityLevel,
    Goal,
    Profile,
    Sex,
    parse_activity_level,
    parse_goal,
    parse_sex,
)

CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MacroTarget:
    """Calorie offset and macro split for a goal."""

    calorie_offset: int
    protein_g_per_kg: float
    carbs_share: float
    fat_share: float


MACRO_TARGETS: dict[Goal, MacroTarget] = {
    Goal.LOSE_FAT: MacroTarget(
        calorie_offset=-500, protein_g_per_kg=2.2, carbs_share=0.35, fat_share=0.25
    ),
    Goal.GAIN_MUSCLE: MacroTarget(
        calorie_offset=300, protein_g_per_kg=2.0, carbs_share=0.45, fat_share=0.25
    ),
    Goal.MAINTAIN: MacroTarget(
        calorie_offset=0, protein_g_per_kg=1.6, carbs_share=0.40, fat_share=0.30
    ),
}

MEAL_SUGGESTIONS = MealPlan(
    breakfast=(
        "Oatmeal with berries and protein powder",
        "Greek yogurt with granola and fruit",
        "Scrambled eggs with whole grain toast",
        "Protein smoothie with banana and spinach",
    ),
    lunch=(
        "Grilled chicken salad with quinoa",
        "Turkey and avocado wrap",
        "Salmon with sweet potato and vegetables",
        "Lentil soup with whole grain bread",
    ),
    dinner=(
        "Lean beef with brown rice and broccoli",
        "Baked fish with quinoa and roasted vegetables",
        "Chicken stir-fry with vegetables",
        "Turkey meatballs with whole grain pasta",
    ),
    snacks=(
        "Apple with almond butter",
        "Greek yogurt with berries",
        "Protein bar",
        "Mixed nuts and dried fruit",
    ),
)

GUIDELINES: dict[Goal, tuple[str, ...]] = {
    Goal.LOSE_FAT: (
        "Eat protein with every meal to preserve muscle mass",
        "Focus on whole, unprocessed foods",
        "Stay hydrated - drink at least 8 glasses of water daily",
        "Eat plenty of vegetables for fiber and nutrients",
        "Limit processed foods and added sugars",
        "Consider intermittent fasting if it fits your lifestyle",
    ),
    Goal.GAIN_MUSCLE: (
        "Eat protein within 30 minutes of workouts",
        "Consume complex carbs before and after training",
        "Eat frequent, smaller meals throughout the day",
        "Include healthy fats for hormone production",
        "Stay consistent with your eating schedule",
        "Consider a post-workout protein shake",
    ),
    Goal.MAINTAIN: (
        "Eat a balanced diet with all macronutrients",
        "Listen to your body's hunger and fullness cues",
        "Stay hydrated throughout the day",
        "Include a variety of colorful fruits and vegetables",
        "Moderate your intake of processed foods",
        "Enjoy treats in moderation",
    ),
}


def calculate_bmr(profile: Profile) -> float:
    """Return basal metabolic rate using the Mifflin-St Jeor equation."""
    base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age_years
    if parse_sex(profile.sex) == Sex.MALE:
        return base + 5
    return base - 161


def calculate_tdee(profile: Profile) -> float:
    """Return total daily energy expenditure for the profile's activity level."""
    multiplier = ACTIVITY_MULTIPLIERS[parse_activity_level(profile.activity_level)]
    return calculate_bmr(profile) * multiplier


def generate_nutrition_plan(profile: Profile) -> NutritionPlan:
    """Return calorie and macro targets with static meal suggestions."""
    goal = parse_goal(profile.goal)
    target = MACRO_TARGETS[goal]
    daily_calories = calculate_tdee(profile) + target.calorie_offset
    _logger.debug(
        "Generating nutrition plan: goal=%s kcal=%.1f", goal.value, daily_calories
    )

    label = goal.value.replace("_", " ")
    return NutritionPlan(
        title=f"{label.upper()} Nutrition Plan",
        description=f"Personalized nutrition plan for {label} goals",
        daily_calories=round_half_up(daily_calories),
        macros=Macros(
            protein_g=round_half_up(profile.weight_kg * target.protein_g_per_kg),
            carbs_g=round_half_up(
                daily_calories * target.carbs_share / CARBS_KCAL_PER_G
            ),
            fat_g=round_half_up(daily_calories * target.fat_share / FAT_KCAL_PER_G),
        ),
        meal_plan=MEAL_SUGGESTIONS,
        guidelines=GUIDELINES[goal],
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)
