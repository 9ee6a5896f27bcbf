"""Pose landmark domain models."""

from dataclasses import dataclass, fields

from futurefit.domain.errors import ValidationError


@dataclass(frozen=True)
class Point:
    """A 2D keypoint in normalized image coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class LandmarkSet:
    """Named body landmarks detected in a single photograph.

    Coordinates are normalized to the image size, so every value lies in
    [0, 1]. The hip point is optional and may only be missing for male
    subjects.
    """

    left_shoulder: Point
    right_shoulder: Point
    left_hip: Point
    right_hip: Point
    left_knee: Point
    right_knee: Point
    left_ankle: Point
    right_ankle: Point
    waist: Point
    neck: Point
    hip: Point | None = None

    def __post_init__(self) -> None:
        for item in fields(self):
            point = getattr(self, item.name)
            if point is None:
                continue
            for axis in ("x", "y"):
                value = getattr(point, axis)
                if not 0.0 <= value <= 1.0:
                    raise ValidationError(
                        f"{item.name}.{axis}", f"{value} is outside [0, 1]"
                    )

    @classmethod
    def from_dict(cls, data: dict[str, dict[str, float]]) -> "LandmarkSet":
        """Create from a mapping of landmark name to {"x", "y"}."""
        hip = data.get("hip")
        return cls(
            left_shoulder=_point(data["left_shoulder"]),
            right_shoulder=_point(data["right_shoulder"]),
            left_hip=_point(data["left_hip"]),
            right_hip=_point(data["right_hip"]),
            left_knee=_point(data["left_knee"]),
            right_knee=_point(data["right_knee"]),
            left_ankle=_point(data["left_ankle"]),
            right_ankle=_point(data["right_ankle"]),
            waist=_point(data["waist"]),
            neck=_point(data["neck"]),
            hip=_point(hip) if hip else None,
        )


def _point(raw: dict[str, float]) -> Point:
    return Point(x=float(raw["x"]), y=float(raw["y"]))
