"""Circumference estimation from pose landmarks."""

import math

from futurefit.domain.errors import InvalidMeasurement
from futurefit.domain.landmarks import LandmarkSet
from futurefit.domain.scans import Circumferences

MIN_WAIST_CM = 50.0
MIN_NECK_CM = 25.0
NECK_TO_SHOULDER_RATIO = 0.3


def estimate_circumferences(
    landmarks: LandmarkSet,
    height_cm: float,
    image_width: int,
    image_height: int,
) -> Circumferences:
    """Estimate waist, neck and hip circumferences from a front photo.

    The body's vertical extent (left shoulder to left ankle) is matched to the
    user's real height to get a cm-per-pixel scale. Each width is then treated
    as the diameter of a circular cross-section.
    """
    span = abs(landmarks.left_ankle.y - landmarks.left_shoulder.y)
    body_height_px = span * image_height
    if body_height_px <= 0:
        raise InvalidMeasurement("Shoulder and ankle landmarks share the same height")
    cm_per_px = height_cm / body_height_px

    hip_width_px = abs(landmarks.left_hip.x - landmarks.right_hip.x) * image_width
    shoulder_width_px = (
        abs(landmarks.left_shoulder.x - landmarks.right_shoulder.x) * image_width
    )
    neck_width_px = shoulder_width_px * NECK_TO_SHOULDER_RATIO

    waist_cm = _circumference(hip_width_px, cm_per_px)
    neck_cm = _circumference(neck_width_px, cm_per_px)
    # No dedicated hip-width landmark yet; the hip point only marks presence.
    hip_cm = _circumference(hip_width_px, cm_per_px) if landmarks.hip else None

    return Circumferences(
        waist_cm=max(waist_cm, MIN_WAIST_CM),
        neck_cm=max(neck_cm, MIN_NECK_CM),
        hip_cm=hip_cm,
    )


def _circumference(width_px: float, cm_per_px: float) -> float:
    return width_px * cm_per_px * math.pi
