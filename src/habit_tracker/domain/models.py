"""Domain models for the habit tracker."""

from dataclasses import dataclass, field, replace
from datetime import date
from uuid import UUID

DEFAULT_STEP_GOAL = 9000


@dataclass(frozen=True)
class UserProfile:
    """A household member with personal targets."""

    id: UUID
    name: str
    target_calories: int
    target_water_oz: int
    target_weight: float
    starting_weight: float
    is_primary: bool


@dataclass
class DayEntry:
    """Daily metrics for one user on one calendar day."""

    id: UUID
    date: date
    user_id: UUID
    weight: float | None = None
    did_workout: bool = False
    meals_logged: bool = False
    steps: int = 0
    step_goal: int = DEFAULT_STEP_GOAL
    completed_meal_ids: set[UUID] = field(default_factory=set)
    water_ounces: float = 0.0
    notes: str | None = None

    @property
    def step_goal_hit(self) -> bool:
        """Return True when the step count reaches the goal."""
        return self.steps >= self.step_goal

    def water_goal_hit(self, target_oz: float) -> bool:
        """Return True when hydration reaches the given target."""
        return self.water_ounces >= target_oz

    def weight_change_from_start(self, profile: UserProfile) -> float | None:
        """Return the change from the profile's starting weight, if weighed."""
        if self.weight is None:
            return None
        return self.weight - profile.starting_weight

    def copy(self) -> "DayEntry":
        """Return an independent copy, including the completion set."""
        return replace(self, completed_meal_ids=set(self.completed_meal_ids))
