"""Domain models for weekly statistics."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from habit_tracker.domain.models import DayEntry


@dataclass(frozen=True)
class WeekRollup:
    """Aggregated totals over a 7-day window."""

    workouts: int
    meals_logged: int
    average_water: float
    weight_change: float | None


@dataclass(frozen=True)
class DaySummary:
    """Goal flags for a single day in the window."""

    day: date
    weekday: str
    did_workout: bool
    meals_logged: bool
    step_goal_hit: bool
    water_goal_hit: bool
    weight: float | None


@dataclass(frozen=True)
class WeekSummary:
    """Entries, per-day flags and the roll-up for one user."""

    user_id: UUID
    user_name: str
    start: date
    end: date
    entries: list[DayEntry]
    days: list[DaySummary]
    rollup: WeekRollup
