"""Pydantic models for API payloads."""

from pydantic import BaseModel


class ProfilePayload(BaseModel):
    """Profile create/update request body."""

    height: float | None = None
    weight: float | None = None
    age: int | None = None
    sex: str | None = None
    goal: str | None = None
    activity_level: str | None = None


class ScanPayload(BaseModel):
    """Scan request body with base64-encoded photos.

    Data URLs (``data:image/jpeg;base64,...``) are accepted as well.
    """

    front_photo: str
    side_photo: str
