"""Tests for nutrition plan generation."""

import pytest

from futurefit.domain.errors import InvalidGoal
from futurefit.domain.profiles import ActivityLevel, Goal, Sex
from futurefit.services.nutrition import (
    GUIDELINES,
    MEAL_SUGGESTIONS,
    calculate_bmr,
    calculate_tdee,
    generate_nutrition_plan,
    round_half_up,
)
from tests.conftest import make_profile


def test_maintenance_plan_for_reference_profile() -> None:
    profile = make_profile()

    plan = generate_nutrition_plan(profile)

    assert calculate_bmr(profile) == 1617.5
    assert calculate_tdee(profile) == pytest.approx(2507.125)
    assert plan.daily_calories == 2507
    assert plan.macros.protein_g == 112
    assert plan.macros.carbs_g == 251
    assert plan.macros.fat_g == 84
    assert plan.title == "MAINTAIN Nutrition Plan"
    assert plan.meal_plan == MEAL_SUGGESTIONS
    assert plan.guidelines == GUIDELINES[Goal.MAINTAIN]


def test_female_bmr_offset() -> None:
    profile = make_profile(weight_kg=60, height_cm=165, age_years=25, sex=Sex.FEMALE)

    assert calculate_bmr(profile) == 1345.25


def test_fat_loss_deficit_and_macros() -> None:
    profile = make_profile(
        weight_kg=80,
        height_cm=180,
        age_years=40,
        goal=Goal.LOSE_FAT,
        activity_level=ActivityLevel.ACTIVE,
    )

    plan = generate_nutrition_plan(profile)

    assert plan.daily_calories == 2484
    assert plan.macros.protein_g == 176
    assert plan.macros.carbs_g == 217
    assert plan.macros.fat_g == 69
    assert plan.title == "LOSE FAT Nutrition Plan"
    assert plan.description == "Personalized nutrition plan for lose fat goals"


def test_muscle_gain_surplus_and_macros() -> None:
    profile = make_profile(
        goal=Goal.GAIN_MUSCLE, activity_level=ActivityLevel.SEDENTARY
    )

    plan = generate_nutrition_plan(profile)

    assert plan.daily_calories == 2241
    assert plan.macros.protein_g == 140
    assert plan.macros.carbs_g == 252
    assert plan.macros.fat_g == 62


def test_invalid_goal_fails() -> None:
    with pytest.raises(InvalidGoal):
        generate_nutrition_plan(make_profile(goal="invalid"))


@pytest.mark.parametrize(
    ("value", "expected"), [(0.5, 1), (2.5, 3), (2716.375, 2716), (90.546, 91)]
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected
