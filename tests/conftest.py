"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from datetime import date

import pytest

from habit_tracker.adapters.health_client import HealthProvider
from habit_tracker.config import Settings
from habit_tracker.containers import AppContainer, build_container
from habit_tracker.domain.health import HealthAuthorizationState
from habit_tracker.domain.models import UserProfile
from habit_tracker.services.entries import InMemoryEntryRepository
from habit_tracker.services.health_sync import HealthSyncService
from habit_tracker.services.preferences import PreferencesService


@dataclass
class FakeHealthProvider(HealthProvider):
    """Fake provider with scripted results that records calls."""

    current_state: HealthAuthorizationState = HealthAuthorizationState.NOT_DETERMINED
    granted_state: HealthAuthorizationState = HealthAuthorizationState.AUTHORIZED
    steps: dict[date, int] = field(default_factory=dict)
    save_result: bool = True
    save_error: Exception | None = None
    saved: list[tuple[float, date]] = field(default_factory=list)
    step_requests: list[date] = field(default_factory=list)
    closed: bool = False

    async def query_authorization(self) -> HealthAuthorizationState:
        return self.current_state

    async def request_authorization(self) -> HealthAuthorizationState:
        self.current_state = self.granted_state
        return self.granted_state

    async def fetch_steps(self, day: date) -> int | None:
        self.step_requests.append(day)
        return self.steps.get(day)

    async def save_weight(self, pounds: float, day: date) -> bool:
        if self.save_error is not None:
            raise self.save_error
        self.saved.append((pounds, day))
        return self.save_result

    async def close(self) -> None:
        self.closed = True


@dataclass
class GatedHealthProvider(FakeHealthProvider):
    """Provider whose step fetch waits until the test releases it."""

    release: asyncio.Event | None = None

    async def fetch_steps(self, day: date) -> int | None:
        self.step_requests.append(day)
        if self.release is not None:
            await self.release.wait()
        return self.steps.get(day)


@pytest.fixture
def settings() -> Settings:
    return Settings(timezone="UTC", health_provider_url=None)


@pytest.fixture
def health_provider() -> FakeHealthProvider:
    return FakeHealthProvider()


@pytest.fixture
def repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def preferences() -> PreferencesService:
    return PreferencesService()


@pytest.fixture
def health_sync(
    health_provider: FakeHealthProvider,
    repository: InMemoryEntryRepository,
    preferences: PreferencesService,
) -> HealthSyncService:
    return HealthSyncService(
        provider=health_provider,
        repository=repository,
        preferences=preferences,
    )


@pytest.fixture
def container(
    settings: Settings, health_provider: FakeHealthProvider
) -> AppContainer:
    return build_container(settings, health_provider=health_provider)


@pytest.fixture
def chris(container: AppContainer) -> UserProfile:
    profile = container.profile_service.find_by_name("Chris")
    assert profile is not None
    return profile


@pytest.fixture
def jill(container: AppContainer) -> UserProfile:
    profile = container.profile_service.find_by_name("Jill")
    assert profile is not None
    return profile
