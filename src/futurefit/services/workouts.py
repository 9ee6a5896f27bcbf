"""Rules-based workout plan generation."""

import logging
from collections.abc import Callable
from dataclasses import replace

from futurefit.domain.plans import Exercise, ExerciseType, Workout, WorkoutPlan
from futurefit.domain.profiles import Goal, Profile, parse_goal

SENIOR_AGE = 50
SENIOR_MIN_SETS = 2
SENIOR_EXTRA_REST_SEC = 30
BEGINNER_BODY_FAT = 25.0
BEGINNER_MAX_EXERCISES = 4

_logger = logging.getLogger(__name__)

_CARDIO_OPTIONS = (
    Exercise(name="Running/Jogging", duration_sec=30 * 60),
    Exercise(name="Cycling", duration_sec=30 * 60),
    Exercise(name="Swimming", duration_sec=30 * 60, notes="Continuous laps"),
)

BASE_WORKOUT_PLANS: dict[Goal, WorkoutPlan] = {
    Goal.LOSE_FAT: WorkoutPlan(
        title="Fat Loss Program",
        description=(
            "High-intensity workouts focused on burning calories "
            "and preserving muscle"
        ),
        duration_weeks=12,
        rest_days=frozenset({"Sunday"}),
        workouts=(
            Workout(
                name="Full Body Strength",
                type=ExerciseType.STRENGTH,
                duration_min=45,
                exercises=(
                    Exercise("Squats", sets=4, reps="12-15", rest_sec=60),
                    Exercise("Push-ups", sets=3, reps="10-15", rest_sec=45),
                    Exercise("Bent-over Rows", sets=3, reps="10-12", rest_sec=60),
                    Exercise("Lunges", sets=3, reps="12 each leg", rest_sec=45),
                    Exercise("Plank", sets=3, reps="30-60 seconds", rest_sec=30),
                    Exercise("Burpees", sets=3, reps="8-12", rest_sec=60),
                ),
                instructions=(
                    "Focus on compound movements",
                    "Keep rest periods short",
                    "Maintain proper form throughout",
                ),
            ),
            Workout(
                name="HIIT Cardio",
                type=ExerciseType.HIIT,
                duration_min=25,
                exercises=(
                    Exercise("Jumping Jacks", duration_sec=30, rest_sec=30),
                    Exercise("High Knees", duration_sec=30, rest_sec=30),
                    Exercise("Mountain Climbers", duration_sec=30, rest_sec=30),
                    Exercise("Burpees", duration_sec=30, rest_sec=30),
                    Exercise("Jump Squats", duration_sec=30, rest_sec=30),
                ),
                instructions=(
                    "Perform each exercise for 30 seconds",
                    "Rest for 30 seconds between exercises",
                    "Complete 4-5 rounds",
                ),
            ),
            Workout(
                name="Steady State Cardio",
                type=ExerciseType.CARDIO,
                duration_min=30,
                exercises=(
                    replace(_CARDIO_OPTIONS[0], notes="Maintain moderate pace"),
                    replace(_CARDIO_OPTIONS[1], notes="Indoor or outdoor cycling"),
                    _CARDIO_OPTIONS[2],
                ),
                instructions=(
                    "Choose one cardio activity",
                    "Maintain steady pace throughout",
                    "Keep heart rate in fat-burning zone",
                ),
            ),
        ),
    ),
    Goal.GAIN_MUSCLE: WorkoutPlan(
        title="Muscle Building Program",
        description="Progressive overload focused on building lean muscle mass",
        duration_weeks=16,
        rest_days=frozenset({"Wednesday", "Sunday"}),
        workouts=(
            Workout(
                name="Push Day",
                type=ExerciseType.STRENGTH,
                duration_min=60,
                exercises=(
                    Exercise("Bench Press", sets=4, reps="6-8", rest_sec=120),
                    Exercise("Overhead Press", sets=4, reps="6-8", rest_sec=120),
                    Exercise(
                        "Incline Dumbbell Press", sets=3, reps="8-10", rest_sec=90
                    ),
                    Exercise("Lateral Raises", sets=3, reps="12-15", rest_sec=60),
                    Exercise("Tricep Dips", sets=3, reps="10-12", rest_sec=60),
                    Exercise("Push-ups", sets=3, reps="15-20", rest_sec=60),
                ),
                instructions=(
                    "Focus on progressive overload",
                    "Increase weight when you can complete all reps",
                    "Maintain strict form",
                ),
            ),
            Workout(
                name="Pull Day",
                type=ExerciseType.STRENGTH,
                duration_min=60,
                exercises=(
                    Exercise("Deadlifts", sets=4, reps="5-6", rest_sec=180),
                    Exercise("Pull-ups/Chin-ups", sets=4, reps="6-10", rest_sec=120),
                    Exercise("Bent-over Rows", sets=4, reps="8-10", rest_sec=120),
                    Exercise("Lat Pulldowns", sets=3, reps="10-12", rest_sec=90),
                    Exercise("Bicep Curls", sets=3, reps="12-15", rest_sec=60),
                    Exercise("Face Pulls", sets=3, reps="15-20", rest_sec=60),
                ),
                instructions=(
                    "Focus on back and bicep development",
                    "Use full range of motion",
                    "Control the weight on both phases",
                ),
            ),
            Workout(
                name="Legs Day",
                type=ExerciseType.STRENGTH,
                duration_min=60,
                exercises=(
                    Exercise("Squats", sets=4, reps="6-8", rest_sec=180),
                    Exercise("Romanian Deadlifts", sets=4, reps="8-10", rest_sec=120),
                    Exercise("Leg Press", sets=3, reps="12-15", rest_sec=90),
                    Exercise("Walking Lunges", sets=3, reps="20 steps", rest_sec=90),
                    Exercise("Calf Raises", sets=4, reps="15-20", rest_sec=60),
                    Exercise("Leg Curls", sets=3, reps="12-15", rest_sec=60),
                ),
                instructions=(
                    "Focus on compound movements",
                    "Don't skip leg day!",
                    "Use proper depth on squats",
                ),
            ),
        ),
    ),
    Goal.MAINTAIN: WorkoutPlan(
        title="Maintenance Program",
        description="Balanced approach to maintain current fitness level",
        duration_weeks=8,
        rest_days=frozenset({"Wednesday", "Sunday"}),
        workouts=(
            Workout(
                name="Full Body Strength",
                type=ExerciseType.STRENGTH,
                duration_min=45,
                exercises=(
                    Exercise("Squats", sets=3, reps="10-12", rest_sec=90),
                    Exercise("Push-ups", sets=3, reps="12-15", rest_sec=60),
                    Exercise("Bent-over Rows", sets=3, reps="10-12", rest_sec=90),
                    Exercise("Lunges", sets=3, reps="10 each leg", rest_sec=60),
                    Exercise("Plank", sets=3, reps="45-60 seconds", rest_sec=45),
                    Exercise("Shoulder Press", sets=3, reps="10-12", rest_sec=60),
                ),
                instructions=(
                    "Maintain current strength levels",
                    "Focus on form and consistency",
                    "Adjust intensity as needed",
                ),
            ),
            Workout(
                name="Cardio Session",
                type=ExerciseType.CARDIO,
                duration_min=30,
                exercises=(
                    replace(_CARDIO_OPTIONS[0], notes="Moderate pace"),
                    replace(_CARDIO_OPTIONS[1], notes="Steady state"),
                    _CARDIO_OPTIONS[2],
                ),
                instructions=(
                    "Choose your preferred cardio",
                    "Maintain conversational pace",
                    "Enjoy the activity",
                ),
            ),
            Workout(
                name="Flexibility & Mobility",
                type=ExerciseType.FLEXIBILITY,
                duration_min=20,
                exercises=(
                    Exercise("Dynamic Warm-up", duration_sec=5 * 60),
                    Exercise("Static Stretching", duration_sec=10 * 60),
                    Exercise("Foam Rolling", duration_sec=5 * 60),
                ),
                instructions=(
                    "Focus on major muscle groups",
                    "Hold stretches for 30-60 seconds",
                    "Don't bounce during stretches",
                ),
            ),
        ),
    ),
}


def generate_workout_plan(profile: Profile) -> WorkoutPlan:
    """Return the goal's base plan customized for age and body fat."""
    goal = parse_goal(profile.goal)
    _logger.debug(
        "Generating workout plan: goal=%s age=%s", goal.value, profile.age_years
    )
    plan = BASE_WORKOUT_PLANS[goal]

    if profile.age_years > SENIOR_AGE:
        plan = _map_exercises(plan, _ease_for_seniors)

    if (
        profile.body_fat_percentage is not None
        and profile.body_fat_percentage > BEGINNER_BODY_FAT
    ):
        plan = replace(
            plan,
            workouts=tuple(
                replace(workout, exercises=workout.exercises[:BEGINNER_MAX_EXERCISES])
                for workout in plan.workouts
            ),
        )
    return plan


def _map_exercises(
    plan: WorkoutPlan, func: Callable[[Exercise], Exercise]
) -> WorkoutPlan:
    return replace(
        plan,
        workouts=tuple(
            replace(workout, exercises=tuple(func(ex) for ex in workout.exercises))
            for workout in plan.workouts
        ),
    )


def _ease_for_seniors(exercise: Exercise) -> Exercise:
    sets = exercise.sets
    if sets is not None:
        sets = max(SENIOR_MIN_SETS, sets - 1)
    rest_sec = exercise.rest_sec
    if rest_sec is not None:
        rest_sec += SENIOR_EXTRA_REST_SEC
    return replace(exercise, sets=sets, rest_sec=rest_sec)
