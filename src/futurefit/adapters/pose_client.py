"""HTTP client for a remote pose-detection service."""

from dataclasses import dataclass

import httpx
from pydantic import BaseModel, Field

from futurefit.domain.errors import DetectionFailed, ValidationError
from futurefit.domain.landmarks import LandmarkSet
from futurefit.services.images import detect_mime_type
from futurefit.services.pose import PoseLandmarkProvider


class PointPayload(BaseModel):
    """Normalized keypoint returned by the pose service."""

    x: float = Field(ge=0.0, le=1.0)
    y: float = Field(ge=0.0, le=1.0)


class PoseDetectionPayload(BaseModel):
    """Pose service response body."""

    landmarks: dict[str, PointPayload]


@dataclass
class HttpxPoseClient(PoseLandmarkProvider):
    """Pose provider that delegates detection to an HTTP service."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxPoseClient":
        """Create a pose client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def detect(self, image_bytes: bytes) -> LandmarkSet:
        """Upload the image and parse the detected landmarks."""
        if not image_bytes:
            raise DetectionFailed("Empty image payload")
        try:
            response = await self.http_client.post(
                f"{self.base_url}/detect",
                content=image_bytes,
                headers={"Content-Type": detect_mime_type(image_bytes)},
                timeout=20,
            )
            response.raise_for_status()
            payload = PoseDetectionPayload.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            raise DetectionFailed(f"Pose service request failed: {exc}") from exc

        raw = {name: point.model_dump() for name, point in payload.landmarks.items()}
        try:
            return LandmarkSet.from_dict(raw)
        except KeyError as exc:
            raise DetectionFailed(f"Pose service omitted landmark {exc}") from exc
        except ValidationError as exc:
            raise DetectionFailed(str(exc)) from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
