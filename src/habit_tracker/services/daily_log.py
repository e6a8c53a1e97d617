"""Day-entry actions taken from the daily screen."""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from habit_tracker.domain.models import DayEntry
from habit_tracker.services.entries import EntryRepository
from habit_tracker.services.health_sync import HealthSyncService

_logger = logging.getLogger(__name__)


def parse_weight(text: str) -> float | None:
    """Parse weight text into pounds, or None when it isn't a usable number."""
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


@dataclass
class DailyLogService:
    """Applies single-field edits to a user's day entry."""

    repository: EntryRepository
    health_sync: HealthSyncService
    water_serving_oz: float = 12.0

    def get_entry(self, user_id: UUID, day: date | datetime) -> DayEntry:
        """Return the entry for a user's day, creating it if needed."""
        return self.repository.get_or_create(user_id, day)

    async def record_weight_text(
        self, user_id: UUID, day: date | datetime, text: str
    ) -> DayEntry:
        """Record typed weight; unparseable text leaves the entry unchanged."""
        weight = parse_weight(text)
        if weight is None:
            _logger.info("Skipping malformed weight input: %r", text)
            return self.repository.get_or_create(user_id, day)
        return await self.health_sync.push_weight(user_id, day, weight)

    def clear_weight(self, user_id: UUID, day: date | datetime) -> DayEntry:
        """Remove the recorded weight for a day."""

        def mutate(entry: DayEntry) -> None:
            entry.weight = None

        return self.repository.update(user_id, day, mutate)

    def set_workout(self, user_id: UUID, day: date | datetime, done: bool) -> DayEntry:
        """Mark the day's workout as done or not."""

        def mutate(entry: DayEntry) -> None:
            entry.did_workout = done

        return self.repository.update(user_id, day, mutate)

    def set_water_servings(
        self, user_id: UUID, day: date | datetime, servings: int
    ) -> DayEntry:
        """Set hydration from a count of fixed-size servings."""
        ounces = max(servings, 0) * self.water_serving_oz

        def mutate(entry: DayEntry) -> None:
            entry.water_ounces = ounces

        return self.repository.update(user_id, day, mutate)

    def set_step_goal(self, user_id: UUID, day: date | datetime, goal: int) -> DayEntry:
        """Change the step goal for a single day."""

        def mutate(entry: DayEntry) -> None:
            entry.step_goal = max(goal, 0)

        return self.repository.update(user_id, day, mutate)

    def set_notes(
        self, user_id: UUID, day: date | datetime, notes: str | None
    ) -> DayEntry:
        """Replace the day's notes; blank text clears them."""
        cleaned = notes.strip() if notes else None

        def mutate(entry: DayEntry) -> None:
            entry.notes = cleaned or None

        return self.repository.update(user_id, day, mutate)
