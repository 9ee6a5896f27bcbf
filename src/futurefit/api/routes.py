"""User-facing API endpoints."""

from __future__ import annotations

import base64
import binascii
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from futurefit.api.models import ProfilePayload, ScanPayload
from futurefit.domain.errors import ValidationError
from futurefit.services.profiles import parse_profile

if TYPE_CHECKING:
    from futurefit.containers import AppContainer
    from futurefit.domain.profiles import Profile
    from futurefit.domain.scans import ScanRecord
    from futurefit.services.progress import ProgressSummary

router = APIRouter(prefix="/users/{user_id}", tags=["users"])


@router.get("/profile")
async def get_profile(user_id: str, request: Request) -> dict[str, object]:
    """Return the stored profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get(user_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _serialize_profile(user_id, profile)


@router.put("/profile")
async def put_profile(
    user_id: str, payload: ProfilePayload, request: Request
) -> dict[str, object]:
    """Validate and store a profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.put(
        user_id, parse_profile(payload.model_dump())
    )
    return _serialize_profile(user_id, profile)


@router.post("/scans", status_code=status.HTTP_201_CREATED)
async def create_scan(
    user_id: str, payload: ScanPayload, request: Request
) -> dict[str, object]:
    """Estimate body fat from a photo pair and store the result."""
    container: AppContainer = request.app.state.container
    front = _decode_photo("front_photo", payload.front_photo)
    side = _decode_photo("side_photo", payload.side_photo)
    profile = container.profile_service.get_for_scan(user_id)
    result = await container.estimation_service.estimate(front, side, profile)
    record = container.scan_service.record(user_id, result)
    return _serialize_scan(record)


@router.get("/scans")
async def list_scans(
    user_id: str, request: Request, limit: int = Query(50, ge=1, le=500)
) -> dict[str, object]:
    """Return scan history, most recent first."""
    container: AppContainer = request.app.state.container
    records = container.scan_service.history(user_id, limit=limit)
    return {"scans": [_serialize_scan(record) for record in records]}


@router.get("/plans")
async def get_plans(user_id: str, request: Request) -> dict[str, object]:
    """Return workout and nutrition plans for the stored profile."""
    container: AppContainer = request.app.state.container
    plans = container.plan_service.generate(user_id)
    return {
        "workout": plans.workout.to_dict(),
        "nutrition": plans.nutrition.to_dict(),
    }


@router.get("/progress")
async def get_progress(user_id: str, request: Request) -> dict[str, object]:
    """Return a dashboard summary of scan history."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get(user_id)
    summary = container.progress_service.summarize(user_id, profile)
    return _serialize_progress(summary)


def _decode_photo(field: str, encoded: str) -> bytes:
    """Decode a base64 photo, accepting data URLs."""
    _, _, data = encoded.rpartition(",")
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError(field, "is not valid base64") from None


def _serialize_profile(user_id: str, profile: Profile) -> dict[str, object]:
    return {"user_id": user_id, **profile.to_dict()}


def _serialize_scan(record: ScanRecord) -> dict[str, object]:
    result = record.result
    return {
        "id": record.id,
        "user_id": record.user_id,
        "body_fat_percentage": result.body_fat_percentage,
        "measurements": result.measurements.to_dict()
        if result.measurements
        else None,
        "confidence": result.confidence,
        "is_fallback": result.is_fallback,
        "timestamp": result.timestamp.isoformat(),
        "created_at": record.created_at.isoformat(),
    }


def _serialize_progress(summary: ProgressSummary) -> dict[str, object]:
    return {
        "latest": _serialize_scan(summary.latest) if summary.latest else None,
        "body_fat_change": summary.body_fat_change,
        "goal_progress": summary.goal_progress,
        "total_scans": summary.total_scans,
    }
