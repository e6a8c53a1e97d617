"""Domain models for the weekly meal plan."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from uuid import UUID


class Weekday(StrEnum):
    """Short weekday names, Monday first."""

    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    @classmethod
    def of(cls, day: date) -> "Weekday":
        """Return the weekday of a calendar day."""
        return list(cls)[day.weekday()]

    @property
    def full_name(self) -> str:
        """Return the long weekday name."""
        return _FULL_NAMES[self]


_FULL_NAMES = {
    Weekday.MON: "Monday",
    Weekday.TUE: "Tuesday",
    Weekday.WED: "Wednesday",
    Weekday.THU: "Thursday",
    Weekday.FRI: "Friday",
    Weekday.SAT: "Saturday",
    Weekday.SUN: "Sunday",
}


class MealType(StrEnum):
    """Meal slots in a day, in serving order."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"


@dataclass(frozen=True)
class Recipe:
    """Recipe details linked from meal templates."""

    id: UUID
    title: str
    category: str
    ingredients: str
    instructions: str
    notes: str


@dataclass(frozen=True)
class MealTemplate:
    """A planned meal for a weekday slot."""

    id: UUID
    day_of_week: Weekday
    meal_type: MealType
    title: str
    description: str
    is_jill_variant: bool
    is_kid_variant: bool
    recipe_id: UUID | None = None


@dataclass(frozen=True)
class WorkoutPlan:
    """Suggested workout for a weekday."""

    day_of_week: Weekday
    title: str
    detail: str
