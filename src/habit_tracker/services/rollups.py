"""Weekly roll-up statistics for day entries."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from uuid import UUID

from habit_tracker.domain.meals import Weekday
from habit_tracker.domain.models import DayEntry, UserProfile
from habit_tracker.domain.stats import DaySummary, WeekRollup, WeekSummary
from habit_tracker.services.entries import EntryRepository
from habit_tracker.services.preferences import PreferencesService
from habit_tracker.services.profiles import ProfileService

WINDOW_DAYS = 7


def compute_rollup(entries: Sequence[DayEntry]) -> WeekRollup:
    """Aggregate a chronological run of entries."""
    workouts = sum(1 for entry in entries if entry.did_workout)
    meals_logged = sum(1 for entry in entries if entry.meals_logged)
    total_water = sum(entry.water_ounces for entry in entries)
    average_water = total_water / len(entries) if entries else 0.0

    weights = [entry.weight for entry in entries if entry.weight is not None]
    weight_change = weights[-1] - weights[0] if weights else None

    return WeekRollup(
        workouts=workouts,
        meals_logged=meals_logged,
        average_water=average_water,
        weight_change=weight_change,
    )


@dataclass
class RollupService:
    """Builds 7-day windows and summaries for household members."""

    repository: EntryRepository
    profiles: ProfileService
    preferences: PreferencesService

    def entries_for_last_week(
        self, user_id: UUID, end: date | datetime
    ) -> list[DayEntry]:
        """Return the 7 entries ending on ``end``, oldest first."""
        last = self.repository.normalize(end)
        days = [last - timedelta(days=offset) for offset in range(WINDOW_DAYS)]
        entries = [self.repository.get_or_create(user_id, day) for day in days]
        return sorted(entries, key=lambda entry: entry.date)

    def week_summary(self, user_id: UUID, end: date | datetime) -> WeekSummary:
        """Return entries, per-day goal flags and the roll-up for a user."""
        profile = self.profiles.get(user_id)
        entries = self.entries_for_last_week(user_id, end)
        return WeekSummary(
            user_id=profile.id,
            user_name=profile.name,
            start=entries[0].date,
            end=entries[-1].date,
            entries=entries,
            days=[_summarize_day(entry, profile) for entry in entries],
            rollup=compute_rollup(entries),
        )

    def household_rollups(
        self, viewer_id: UUID, end: date | datetime
    ) -> list[WeekSummary]:
        """Return the viewer's summary, plus others' when sharing is enabled."""
        viewer = self.profiles.get(viewer_id)
        summaries = [self.week_summary(viewer.id, end)]
        if not self.preferences.get().shared_rollups_enabled:
            return summaries
        for profile in self.profiles.list_profiles():
            if profile.id != viewer.id:
                summaries.append(self.week_summary(profile.id, end))
        return summaries


def _summarize_day(entry: DayEntry, profile: UserProfile) -> DaySummary:
    return DaySummary(
        day=entry.date,
        weekday=Weekday.of(entry.date).value,
        did_workout=entry.did_workout,
        meals_logged=entry.meals_logged,
        step_goal_hit=entry.step_goal_hit,
        water_goal_hit=entry.water_goal_hit(profile.target_water_oz),
        weight=entry.weight,
    )
