"""Profile domain models."""

from dataclasses import dataclass
from enum import Enum

from futurefit.domain.errors import InvalidGoal, ValidationError


class Sex(str, Enum):
    """Biological sex used by the anthropometric formulas."""

    MALE = "male"
    FEMALE = "female"


class Goal(str, Enum):
    """Primary fitness goal."""

    LOSE_FAT = "lose_fat"
    GAIN_MUSCLE = "gain_muscle"
    MAINTAIN = "maintain"


class ActivityLevel(str, Enum):
    """Self-reported daily activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


@dataclass(frozen=True)
class Profile:
    """Anthropometric snapshot of a user."""

    height_cm: float
    weight_kg: float
    age_years: int
    sex: Sex
    goal: Goal
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    body_fat_percentage: float | None = None

    def to_dict(self) -> dict[str, object]:
        """Convert to a plain dictionary for storage."""
        return {
            "height": self.height_cm,
            "weight": self.weight_kg,
            "age": self.age_years,
            "sex": parse_sex(self.sex).value,
            "goal": parse_goal(self.goal).value,
            "activity_level": parse_activity_level(self.activity_level).value,
        }

    @classmethod
    def from_dict(
        cls, data: dict[str, object], body_fat_percentage: float | None = None
    ) -> "Profile":
        """Create from a stored dictionary."""
        return cls(
            height_cm=float(data["height"]),
            weight_kg=float(data["weight"]),
            age_years=int(data["age"]),
            sex=parse_sex(data["sex"]),
            goal=parse_goal(data["goal"]),
            activity_level=parse_activity_level(
                data.get("activity_level") or ActivityLevel.MODERATE
            ),
            body_fat_percentage=body_fat_percentage,
        )


def parse_sex(value: object) -> Sex:
    """Return the Sex for a raw value or raise ValidationError."""
    try:
        return Sex(value)
    except ValueError:
        raise ValidationError(
            "sex", f"expected one of male, female; got {value!r}"
        ) from None


def parse_goal(value: object) -> Goal:
    """Return the Goal for a raw value or raise InvalidGoal."""
    try:
        return Goal(value)
    except ValueError:
        raise InvalidGoal(value) from None


def parse_activity_level(value: object) -> ActivityLevel:
    """Return the ActivityLevel for a raw value or raise ValidationError."""
    try:
        return ActivityLevel(value)
    except ValueError:
        allowed = ", ".join(level.value for level in ActivityLevel)
        raise ValidationError(
            "activity_level", f"expected one of {allowed}; got {value!r}"
        ) from None
