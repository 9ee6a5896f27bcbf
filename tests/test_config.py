"""Tests for settings validation."""

import logging

import pytest

from futurefit.config import Settings, find_placeholder_settings, validate_settings


def _settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "supabase_url": "https://your-project.supabase.co",
        "supabase_service_key": "your_service_key",
    }
    values.update(overrides)
    return Settings(**values)  # type: ignore[arg-type]


def test_find_placeholder_settings() -> None:
    flagged = find_placeholder_settings(_settings())

    assert flagged == ["supabase_url", "supabase_service_key"]


def test_validate_settings_raises_in_production() -> None:
    with pytest.raises(RuntimeError, match="supabase_url"):
        validate_settings(_settings(environment="production"))


def test_validate_settings_warns_outside_production(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="futurefit.config"):
        validate_settings(_settings(environment="local"))

    assert "supabase_url" in caplog.text


def test_validate_settings_rejects_non_http_pose_url() -> None:
    settings = _settings(
        supabase_url="https://abc.supabase.co",
        supabase_service_key="real-key",
        pose_service_url="ftp://pose",
        environment="production",
    )

    with pytest.raises(RuntimeError, match="pose_service_url"):
        validate_settings(settings)


def test_validate_settings_accepts_real_values(settings: Settings) -> None:
    validate_settings(settings)
