"""Dependency container wiring for the application."""

import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from futurefit.adapters.pose_client import HttpxPoseClient
from futurefit.adapters.supabase_profile_repository import SupabaseProfileRepository
from futurefit.adapters.supabase_scan_repository import SupabaseScanRepository
from futurefit.config import Settings, validate_settings
from futurefit.services.estimation import EstimationService
from futurefit.services.plans import PlanService
from futurefit.services.pose import FixedLandmarkProvider, PoseLandmarkProvider
from futurefit.services.profiles import ProfileService
from futurefit.services.progress import ProgressService
from futurefit.services.scans import ScanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    scan_service: ScanService
    estimation_service: EstimationService
    plan_service: PlanService
    progress_service: ProgressService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    validate_settings(resolved_settings)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    scan_service = ScanService(SupabaseScanRepository(supabase_client))

    pose_client: HttpxPoseClient | None = None
    provider: PoseLandmarkProvider
    if resolved_settings.pose_service_url:
        pose_client = HttpxPoseClient.create(resolved_settings.pose_service_url)
        provider = pose_client
    else:
        provider = FixedLandmarkProvider()

    estimation_service = EstimationService(
        provider=provider,
        noise_pct=resolved_settings.estimation_noise_pct,
        rng=random.Random(resolved_settings.estimation_seed),
        default_image_size=(
            resolved_settings.default_image_width,
            resolved_settings.default_image_height,
        ),
    )
    plan_service = PlanService(
        profile_service=profile_service, scan_service=scan_service
    )
    progress_service = ProgressService(scan_service)

    async def close_resources() -> None:
        if pose_client is not None:
            await pose_client.close()

    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        scan_service=scan_service,
        estimation_service=estimation_service,
        plan_service=plan_service,
        progress_service=progress_service,
        close_resources=close_resources,
    )
