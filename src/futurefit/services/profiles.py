"""Profile storage and validation."""

from dataclasses import dataclass
from typing import Protocol

from futurefit.domain.errors import InvalidGoal, ValidationError
from futurefit.domain.profiles import (
    ActivityLevel,
    Goal,
    Profile,
    Sex,
    parse_activity_level,
    parse_goal,
    parse_sex,
)

HEIGHT_RANGE_CM = (100, 250)
WEIGHT_RANGE_KG = (30, 300)
AGE_RANGE_YEARS = (10, 100)

DEFAULT_SCAN_PROFILE = Profile(
    height_cm=170,
    weight_kg=70,
    age_years=30,
    sex=Sex.MALE,
    goal=Goal.MAINTAIN,
)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get(self, user_id: str) -> Profile | None:
        """Return the stored profile for a user, if present."""

    def put(self, user_id: str, profile: Profile) -> Profile:
        """Create or replace the profile for a user and return it."""


@dataclass
class ProfileService:
    """Application service for reading and validating profiles."""

    repository: ProfileRepository

    def get(self, user_id: str) -> Profile | None:
        """Return the user's profile, if present."""
        return self.repository.get(user_id)

    def get_for_scan(self, user_id: str) -> Profile:
        """Return the user's profile or a default one for anonymous scans."""
        return self.repository.get(user_id) or DEFAULT_SCAN_PROFILE

    def put(self, user_id: str, profile: Profile) -> Profile:
        """Validate and persist a profile."""
        return self.repository.put(user_id, validate_profile(profile))


def parse_profile(data: dict[str, object]) -> Profile:
    """Build a validated Profile from untrusted input."""
    for name in ("height", "weight", "age", "sex", "goal"):
        if data.get(name) in (None, ""):
            raise ValidationError(name, "is required")
    return validate_profile(
        Profile(
            height_cm=_number("height", data["height"]),
            weight_kg=_number("weight", data["weight"]),
            age_years=int(_number("age", data["age"])),
            sex=parse_sex(data["sex"]),
            goal=_goal(data["goal"]),
            activity_level=parse_activity_level(
                data.get("activity_level") or ActivityLevel.MODERATE
            ),
        )
    )


def validate_profile(profile: Profile) -> Profile:
    """Return the profile with enum fields resolved, or raise ValidationError."""
    _check_range("height", profile.height_cm, HEIGHT_RANGE_CM)
    _check_range("weight", profile.weight_kg, WEIGHT_RANGE_KG)
    _check_range("age", profile.age_years, AGE_RANGE_YEARS)
    return Profile(
        height_cm=profile.height_cm,
        weight_kg=profile.weight_kg,
        age_years=profile.age_years,
        sex=parse_sex(profile.sex),
        goal=_goal(profile.goal),
        activity_level=parse_activity_level(profile.activity_level),
        body_fat_percentage=profile.body_fat_percentage,
    )


def _goal(value: object) -> Goal:
    try:
        return parse_goal(value)
    except InvalidGoal:
        allowed = ", ".join(item.value for item in Goal)
        raise ValidationError(
            "goal", f"expected one of {allowed}; got {value!r}"
        ) from None


def _number(field: str, value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValidationError(field, f"expected a number; got {value!r}") from None


def _check_range(field: str, value: float, bounds: tuple[int, int]) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise ValidationError(field, f"{value} is outside [{low}, {high}]")
