"""Optional step pull and weight push against the health provider."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from habit_tracker.adapters.health_client import HealthProvider
from habit_tracker.domain.health import HealthAuthorizationState
from habit_tracker.domain.models import DayEntry
from habit_tracker.services.entries import EntryRepository
from habit_tracker.services.preferences import PreferencesService

_logger = logging.getLogger(__name__)

OnAuthorized = Callable[[], Awaitable[object] | object]


@dataclass
class HealthSyncService:
    """Gates provider calls on authorization state and preferences.

    Provider results resume on the event loop that owns the entry repository,
    so every write goes through the same serialized ``update`` path. A step
    fetch applies to the ``(user_id, day)`` captured when it was started.
    """

    provider: HealthProvider
    repository: EntryRepository
    preferences: PreferencesService
    state: HealthAuthorizationState = HealthAuthorizationState.UNKNOWN
    _pending: set[asyncio.Task[bool]] = field(default_factory=set)

    @property
    def is_authorized(self) -> bool:
        """Return True when the provider has granted access."""
        return self.state == HealthAuthorizationState.AUTHORIZED

    async def refresh_authorization(self) -> HealthAuthorizationState:
        """Query the provider's current state without prompting."""
        self._set_state(await self.provider.query_authorization())
        return self.state

    async def request_authorization(
        self, on_authorized: OnAuthorized | None = None
    ) -> HealthAuthorizationState:
        """Prompt for access and run ``on_authorized`` when it is granted."""
        self._set_state(await self.provider.request_authorization())
        if self.is_authorized and on_authorized is not None:
            result = on_authorized()
            if inspect.isawaitable(result):
                await result
        return self.state

    async def sync_steps(self, user_id: UUID, day: date | datetime) -> DayEntry | None:
        """Pull the day's step count into the entry when syncing is allowed."""
        if not (self.preferences.get().sync_steps_from_health and self.is_authorized):
            return None
        normalized = self.repository.normalize(day)
        steps = await self.provider.fetch_steps(normalized)
        if steps is None:
            return None

        def mutate(entry: DayEntry) -> None:
            entry.steps = steps

        return self.repository.update(user_id, normalized, mutate)

    async def push_weight(
        self, user_id: UUID, day: date | datetime, weight: float
    ) -> DayEntry:
        """Store the weight locally, then push it in the background if allowed."""
        normalized = self.repository.normalize(day)

        def mutate(entry: DayEntry) -> None:
            entry.weight = weight

        entry = self.repository.update(user_id, normalized, mutate)
        if self.preferences.get().push_weight_to_health and self.is_authorized:
            task = asyncio.create_task(self._save_weight(weight, normalized))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)
        return entry

    async def drain(self) -> None:
        """Wait for in-flight weight pushes, including ones scheduled meanwhile."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    async def _save_weight(self, weight: float, day: date) -> bool:
        try:
            saved = await self.provider.save_weight(weight, day)
        except Exception:
            _logger.exception("Health weight push raised for %s", day)
            return False
        if not saved:
            _logger.warning("Health weight push was not stored for %s", day)
        return saved

    def _set_state(self, state: HealthAuthorizationState) -> None:
        if state != self.state:
            _logger.info("Health authorization: %s -> %s", self.state, state)
        self.state = state
