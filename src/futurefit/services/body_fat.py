"""US Navy body-fat formula."""

import math

from futurefit.domain.errors import InvalidMeasurement, MissingHipMeasurement
from futurefit.domain.profiles import Sex
from futurefit.domain.scans import Measurements

MALE_RANGE = (3.0, 50.0)
FEMALE_RANGE = (8.0, 50.0)


def calculate_body_fat_percentage(measurements: Measurements) -> float:
    """Return body-fat percentage for circumference measurements.

    Male:   495 / (1.0324 - 0.19077 log10(waist - neck) + 0.15456 log10(height)) - 450
    Female: 495 / (1.29579 - 0.35004 log10(waist + hip - neck)
                    + 0.22100 log10(height)) - 450
    """
    if measurements.height_cm <= 0:
        raise InvalidMeasurement(
            f"Height must be positive, got {measurements.height_cm}"
        )
    log_height = math.log10(measurements.height_cm)

    if measurements.sex == Sex.MALE:
        spread = measurements.waist_cm - measurements.neck_cm
        if spread <= 0:
            raise InvalidMeasurement(
                f"Waist ({measurements.waist_cm}) must exceed "
                f"neck ({measurements.neck_cm})"
            )
        density = 1.0324 - 0.19077 * math.log10(spread) + 0.15456 * log_height
        return _clamp(_siri(density), *MALE_RANGE)

    if measurements.hip_cm is None:
        raise MissingHipMeasurement()
    spread = measurements.waist_cm + measurements.hip_cm - measurements.neck_cm
    if spread <= 0:
        raise InvalidMeasurement(
            f"Waist + hip ({measurements.waist_cm} + {measurements.hip_cm}) "
            f"must exceed neck ({measurements.neck_cm})"
        )
    density = 1.29579 - 0.35004 * math.log10(spread) + 0.22100 * log_height
    return _clamp(_siri(density), *FEMALE_RANGE)


def _siri(density: float) -> float:
    if density == 0:
        raise InvalidMeasurement("Body density estimate is zero")
    return 495 / density - 450


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
