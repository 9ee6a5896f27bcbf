"""Pose landmark providers."""

from dataclasses import dataclass, field
from typing import Protocol

from futurefit.domain.errors import DetectionFailed
from futurefit.domain.landmarks import LandmarkSet, Point

REFERENCE_LANDMARKS = LandmarkSet(
    left_shoulder=Point(0.3, 0.2),
    right_shoulder=Point(0.7, 0.2),
    left_hip=Point(0.35, 0.5),
    right_hip=Point(0.65, 0.5),
    left_knee=Point(0.4, 0.7),
    right_knee=Point(0.6, 0.7),
    left_ankle=Point(0.4, 0.9),
    right_ankle=Point(0.6, 0.9),
    waist=Point(0.5, 0.45),
    neck=Point(0.5, 0.15),
    hip=Point(0.5, 0.55),
)


class PoseLandmarkProvider(Protocol):
    """Interface for detecting body landmarks in a photograph."""

    async def detect(self, image_bytes: bytes) -> LandmarkSet:
        """Return landmarks for the image or raise DetectionFailed."""


@dataclass
class FixedLandmarkProvider(PoseLandmarkProvider):
    """Provider that ignores pixel content and returns a fixed landmark set."""

    landmarks: LandmarkSet = field(default=REFERENCE_LANDMARKS)

    async def detect(self, image_bytes: bytes) -> LandmarkSet:
        """Return the configured landmarks for any non-empty image."""
        if not image_bytes:
            raise DetectionFailed("Empty image payload")
        return self.landmarks
