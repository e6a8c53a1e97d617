"""Application configuration."""

import os
from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    timezone: str | None = None
    default_step_goal: int = 9000
    water_serving_oz: float = 12.0
    health_provider_url: str | None = None
    health_provider_token: str | None = None
    health_provider_timeout_seconds: float = 10.0
    show_kid_variants: bool = False
    sync_steps_from_health: bool = True
    push_weight_to_health: bool = True
    cloud_sync_enabled: bool = False
    shared_rollups_enabled: bool = True

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_timezone(name: str | None) -> tzinfo | None:
    """Return the configured zone, or None for the system local time."""
    if name is None:
        return None
    cleaned = name.strip()
    if cleaned in {"", "local"}:
        return None
    if cleaned.upper() == "UTC":
        return UTC
    return ZoneInfo(cleaned)
