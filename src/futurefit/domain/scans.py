"""Body composition scan models."""

from dataclasses import dataclass
from datetime import datetime

from futurefit.domain.profiles import Sex


@dataclass(frozen=True)
class Circumferences:
    """Body circumferences estimated from a photograph, in cm."""

    waist_cm: float
    neck_cm: float
    hip_cm: float | None = None


@dataclass(frozen=True)
class Measurements:
    """Inputs to the body-fat formula."""

    waist_cm: float
    neck_cm: float
    height_cm: float
    weight_kg: float
    age_years: int
    sex: Sex
    hip_cm: float | None = None

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-compatible dictionary."""
        return {
            "waist": self.waist_cm,
            "neck": self.neck_cm,
            "hip": self.hip_cm,
            "height": self.height_cm,
            "weight": self.weight_kg,
            "age": self.age_years,
            "sex": self.sex.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "Measurements":
        """Create from a stored dictionary."""
        hip = data.get("hip")
        return cls(
            waist_cm=float(data["waist"]),
            neck_cm=float(data["neck"]),
            hip_cm=float(hip) if hip is not None else None,
            height_cm=float(data["height"]),
            weight_kg=float(data["weight"]),
            age_years=int(data["age"]),
            sex=Sex(data["sex"]),
        )


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one body composition estimate."""

    body_fat_percentage: float
    measurements: Measurements | None
    confidence: float
    timestamp: datetime
    is_fallback: bool = False


@dataclass(frozen=True)
class ScanRecord:
    """A scan result persisted for a user."""

    id: str
    user_id: str
    result: ScanResult
    created_at: datetime
