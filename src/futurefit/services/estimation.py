"""Body composition estimation pipeline."""

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from futurefit.domain.errors import EstimationError, MissingHipMeasurement
from futurefit.domain.profiles import Profile, Sex
from futurefit.domain.scans import Measurements, ScanResult
from futurefit.services.body_fat import calculate_body_fat_percentage
from futurefit.services.circumference import estimate_circumferences
from futurefit.services.images import image_dimensions
from futurefit.services.pose import PoseLandmarkProvider

ESTIMATE_RANGE = (5.0, 45.0)
ESTIMATE_CONFIDENCE = 0.85
FALLBACK_CONFIDENCE = 0.0

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class EstimationService:
    """Runs pose detection, circumference estimation and the body-fat formula.

    `noise_pct` adds uniform jitter of +/- that many percentage points to
    simulate sensor noise. Any non-zero value makes results depend on `rng`;
    use 0 or a seeded `random.Random` for reproducible output.
    """

    provider: PoseLandmarkProvider
    noise_pct: float = 1.0
    rng: random.Random = field(default_factory=random.Random)
    default_image_size: tuple[int, int] = (1280, 720)
    fallback_range: tuple[float, float] = (15.0, 25.0)
    clock: Callable[[], datetime] = _utcnow

    async def estimate(
        self, front_photo: bytes, side_photo: bytes, profile: Profile
    ) -> ScanResult:
        """Estimate body fat from a photo pair, degrading to a fallback value."""
        try:
            return await self.measure(front_photo, side_photo, profile)
        except EstimationError as exc:
            _logger.warning("Body composition estimate failed, using fallback: %s", exc)
        except Exception:
            _logger.exception("Body composition pipeline crashed, using fallback")
        return self._fallback()

    async def measure(
        self, front_photo: bytes, side_photo: bytes, profile: Profile
    ) -> ScanResult:
        """Estimate body fat, raising EstimationError on failure."""
        front = await self.provider.detect(front_photo)
        # Side landmarks are collected for future depth refinement.
        await self.provider.detect(side_photo)
        if profile.sex == Sex.FEMALE and front.hip is None:
            raise MissingHipMeasurement()

        width, height = image_dimensions(front_photo) or self.default_image_size
        circumferences = estimate_circumferences(
            front, profile.height_cm, width, height
        )
        measurements = Measurements(
            waist_cm=circumferences.waist_cm,
            neck_cm=circumferences.neck_cm,
            hip_cm=circumferences.hip_cm,
            height_cm=profile.height_cm,
            weight_kg=profile.weight_kg,
            age_years=profile.age_years,
            sex=profile.sex,
        )
        body_fat = calculate_body_fat_percentage(measurements) + self._jitter()
        low, high = ESTIMATE_RANGE
        return ScanResult(
            body_fat_percentage=max(low, min(high, body_fat)),
            measurements=measurements,
            confidence=ESTIMATE_CONFIDENCE,
            timestamp=self.clock(),
        )

    def _jitter(self) -> float:
        if not self.noise_pct:
            return 0.0
        return (self.rng.random() - 0.5) * 2 * self.noise_pct

    def _fallback(self) -> ScanResult:
        low, high = self.fallback_range
        return ScanResult(
            body_fat_percentage=low + self.rng.random() * (high - low),
            measurements=None,
            confidence=FALLBACK_CONFIDENCE,
            timestamp=self.clock(),
            is_fallback=True,
        )
