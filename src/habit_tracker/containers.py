"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from habit_tracker.adapters.health_client import (
    HealthProvider,
    HttpxHealthProvider,
    UnavailableHealthProvider,
)
from habit_tracker.config import Settings, resolve_timezone
from habit_tracker.services.catalog import ReferenceCatalog, build_default_catalog
from habit_tracker.services.daily_log import DailyLogService
from habit_tracker.services.entries import EntryRepository, InMemoryEntryRepository
from habit_tracker.services.health_sync import HealthSyncService
from habit_tracker.services.meal_plan import MealPlanService
from habit_tracker.services.preferences import Preferences, PreferencesService
from habit_tracker.services.profiles import ProfileService
from habit_tracker.services.rollups import RollupService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: ReferenceCatalog
    entry_repository: EntryRepository
    profile_service: ProfileService
    preferences_service: PreferencesService
    daily_log_service: DailyLogService
    rollup_service: RollupService
    meal_plan_service: MealPlanService
    health_sync_service: HealthSyncService
    close_resources: Callable[[], Awaitable[None]]


def build_health_provider(settings: Settings) -> HealthProvider:
    """Return the HTTP provider when configured, else the unavailable one."""
    if not settings.health_provider_url:
        return UnavailableHealthProvider()
    return HttpxHealthProvider.create(
        base_url=settings.health_provider_url,
        token=settings.health_provider_token,
        timeout=settings.health_provider_timeout_seconds,
    )


def build_container(
    settings: Settings | None = None, health_provider: HealthProvider | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    provider = health_provider or build_health_provider(resolved_settings)
    catalog = build_default_catalog()
    entry_repository = InMemoryEntryRepository(
        tz=resolve_timezone(resolved_settings.timezone),
        default_step_goal=resolved_settings.default_step_goal,
    )
    profile_service = ProfileService()
    preferences_service = PreferencesService(
        Preferences.from_settings(resolved_settings)
    )
    health_sync_service = HealthSyncService(
        provider=provider,
        repository=entry_repository,
        preferences=preferences_service,
    )
    daily_log_service = DailyLogService(
        repository=entry_repository,
        health_sync=health_sync_service,
        water_serving_oz=resolved_settings.water_serving_oz,
    )
    rollup_service = RollupService(
        repository=entry_repository,
        profiles=profile_service,
        preferences=preferences_service,
    )
    meal_plan_service = MealPlanService(
        catalog=catalog,
        repository=entry_repository,
        preferences=preferences_service,
    )

    async def close_resources() -> None:
        await health_sync_service.drain()
        await provider.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        entry_repository=entry_repository,
        profile_service=profile_service,
        preferences_service=preferences_service,
        daily_log_service=daily_log_service,
        rollup_service=rollup_service,
        meal_plan_service=meal_plan_service,
        health_sync_service=health_sync_service,
        close_resources=close_resources,
    )
