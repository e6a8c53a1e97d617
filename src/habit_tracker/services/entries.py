"""Per-user, per-day entry store."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from typing import Protocol
from uuid import UUID, uuid4

from habit_tracker.domain.models import DEFAULT_STEP_GOAL, DayEntry

_logger = logging.getLogger(__name__)

EntryMutator = Callable[[DayEntry], None]
EntryListener = Callable[[DayEntry], None]


def calendar_day(value: date | datetime, tz: tzinfo | None = None) -> date:
    """Truncate a timestamp to its local calendar day.

    Aware datetimes are converted to ``tz`` first (the system local zone when
    ``tz`` is None); naive datetimes are taken as already local.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


class EntryRepository(Protocol):
    """Storage interface for day entries."""

    def normalize(self, day: date | datetime) -> date:
        """Return the calendar day used as the storage key."""

    def get_or_create(self, user_id: UUID, day: date | datetime) -> DayEntry:
        """Return the entry for a user and day, creating a default one."""

    def update(
        self, user_id: UUID, day: date | datetime, mutator: EntryMutator
    ) -> DayEntry:
        """Apply a mutator to the entry for a user and day and store it."""

    def entries_for_user(self, user_id: UUID) -> list[DayEntry]:
        """Return every stored entry for a user, oldest first."""

    def subscribe(self, listener: EntryListener) -> Callable[[], None]:
        """Register a change listener and return its unsubscribe callable."""


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """Entry store kept in process memory, keyed by day then user."""

    tz: tzinfo | None = None
    default_step_goal: int = DEFAULT_STEP_GOAL
    _entries: dict[date, dict[UUID, DayEntry]] = field(default_factory=dict)
    _listeners: list[EntryListener] = field(default_factory=list)

    def normalize(self, day: date | datetime) -> date:
        """Return the calendar day of ``day`` in the store's zone."""
        return calendar_day(day, self.tz)

    def get_or_create(self, user_id: UUID, day: date | datetime) -> DayEntry:
        """Return a snapshot of the stored entry, creating it on first access."""
        return self._stored(user_id, self.normalize(day)).copy()

    def update(
        self, user_id: UUID, day: date | datetime, mutator: EntryMutator
    ) -> DayEntry:
        """Run ``mutator`` on a working copy and swap it in when it returns."""
        normalized = self.normalize(day)
        working = self._stored(user_id, normalized).copy()
        mutator(working)
        working.id = self._entries[normalized][user_id].id
        working.date = normalized
        working.user_id = user_id
        self._entries[normalized][user_id] = working
        self._notify(working)
        return working.copy()

    def entries_for_user(self, user_id: UUID) -> list[DayEntry]:
        """Return every stored entry for a user, oldest first."""
        return [
            by_user[user_id].copy()
            for _, by_user in sorted(self._entries.items())
            if user_id in by_user
        ]

    def subscribe(self, listener: EntryListener) -> Callable[[], None]:
        """Register a listener called with each entry after it is updated."""
        if listener not in self._listeners:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _stored(self, user_id: UUID, day: date) -> DayEntry:
        by_user = self._entries.setdefault(day, {})
        existing = by_user.get(user_id)
        if existing is not None:
            return existing
        created = DayEntry(
            id=uuid4(),
            date=day,
            user_id=user_id,
            step_goal=self.default_step_goal,
        )
        by_user[user_id] = created
        return created

    def _notify(self, entry: DayEntry) -> None:
        for listener in list(self._listeners):
            try:
                listener(entry.copy())
            except Exception:
                _logger.exception(
                    "Entry listener failed: user_id=%s day=%s",
                    entry.user_id,
                    entry.date,
                )
