"""Workout and nutrition plan models."""

from dataclasses import dataclass, field
from enum import Enum


class ExerciseType(str, Enum):
    """Training modality of a workout."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    HIIT = "hiit"
    FLEXIBILITY = "flexibility"


@dataclass(frozen=True)
class Exercise:
    """A single exercise prescription.

    Resistance work sets `sets` and `reps`; timed work sets `duration_sec`.
    """

    name: str
    sets: int | None = None
    reps: str | None = None
    duration_sec: int | None = None
    rest_sec: int | None = None
    notes: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary, omitting unset fields."""
        data: dict[str, object] = {"name": self.name}
        for key in ("sets", "reps", "duration_sec", "rest_sec", "notes"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class Workout:
    """A named training session."""

    name: str
    type: ExerciseType
    duration_min: int
    exercises: tuple[Exercise, ...]
    instructions: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "type": self.type.value,
            "duration_min": self.duration_min,
            "exercises": [exercise.to_dict() for exercise in self.exercises],
            "instructions": list(self.instructions),
        }


@dataclass(frozen=True)
class WorkoutPlan:
    """A multi-week workout program."""

    title: str
    description: str
    duration_weeks: int
    rest_days: frozenset[str]
    workouts: tuple[Workout, ...]

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "description": self.description,
            "duration_weeks": self.duration_weeks,
            "rest_days": sorted(self.rest_days),
            "workouts": [workout.to_dict() for workout in self.workouts],
        }


@dataclass(frozen=True)
class Macros:
    """Daily macronutrient targets in grams."""

    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class MealPlan:
    """Meal suggestions grouped by meal."""

    breakfast: tuple[str, ...]
    lunch: tuple[str, ...]
    dinner: tuple[str, ...]
    snacks: tuple[str, ...]


@dataclass(frozen=True)
class NutritionPlan:
    """Daily calorie and macro targets with suggestions."""

    title: str
    description: str
    daily_calories: int
    macros: Macros
    meal_plan: MealPlan
    guidelines: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "description": self.description,
            "daily_calories": self.daily_calories,
            "macros": {
                "protein_g": self.macros.protein_g,
                "carbs_g": self.macros.carbs_g,
                "fat_g": self.macros.fat_g,
            },
            "meal_plan": {
                "breakfast": list(self.meal_plan.breakfast),
                "lunch": list(self.meal_plan.lunch),
                "dinner": list(self.meal_plan.dinner),
                "snacks": list(self.meal_plan.snacks),
            },
            "guidelines": list(self.guidelines),
        }
