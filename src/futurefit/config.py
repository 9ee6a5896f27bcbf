"""Application configuration."""

import logging
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

_logger = logging.getLogger(__name__)

_PLACEHOLDERS: dict[str, tuple[str, ...]] = {
    "supabase_url": ("your-project", "example.supabase.co"),
    "supabase_service_key": ("your_service_key", "your-service-key", "changeme"),
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    pose_service_url: str | None = None
    log_level: str = "INFO"
    estimation_noise_pct: float = 1.0
    estimation_seed: int | None = None
    default_image_width: int = 1280
    default_image_height: int = 720
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def find_placeholder_settings(settings: Settings) -> list[str]:
    """Return names of settings that still hold template placeholder values."""
    flagged = []
    for name, markers in _PLACEHOLDERS.items():
        value = str(getattr(settings, name) or "").lower()
        if any(marker in value for marker in markers):
            flagged.append(name)
    return flagged


def validate_settings(settings: Settings) -> None:
    """Fail fast on placeholder settings in production, warn elsewhere."""
    flagged = find_placeholder_settings(settings)
    if settings.pose_service_url and not settings.pose_service_url.startswith(
        ("http://", "https://")
    ):
        flagged.append("pose_service_url")
    if not flagged:
        return
    if settings.environment == "production":
        raise RuntimeError(
            "Settings validation failed in production. "
            f"Invalid/placeholder: {', '.join(flagged)}"
        )
    _logger.warning("Using placeholder values for: %s", ", ".join(flagged))
