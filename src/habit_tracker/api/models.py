"""Pydantic request and response models for the HTTP API."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from habit_tracker.domain.meals import MealTemplate, Recipe
from habit_tracker.domain.models import DayEntry, UserProfile
from habit_tracker.domain.stats import DaySummary, WeekRollup, WeekSummary


class ProfileOut(BaseModel):
    """Household profile payload."""

    id: UUID
    name: str
    target_calories: int
    target_water_oz: int
    target_weight: float
    starting_weight: float
    is_primary: bool

    @classmethod
    def from_domain(cls, profile: UserProfile) -> "ProfileOut":
        return cls(
            id=profile.id,
            name=profile.name,
            target_calories=profile.target_calories,
            target_water_oz=profile.target_water_oz,
            target_weight=profile.target_weight,
            starting_weight=profile.starting_weight,
            is_primary=profile.is_primary,
        )


class ProfileTargetsIn(BaseModel):
    """Target edits for a profile; omitted fields are unchanged."""

    target_calories: int | None = Field(default=None, ge=0)
    target_water_oz: int | None = Field(default=None, ge=0)
    target_weight: float | None = Field(default=None, gt=0)


class PreferencesPayload(BaseModel):
    """Preference values; on PATCH omitted fields are unchanged."""

    show_kid_variants: bool | None = None
    sync_steps_from_health: bool | None = None
    push_weight_to_health: bool | None = None
    cloud_sync_enabled: bool | None = None
    shared_rollups_enabled: bool | None = None


class DayEntryOut(BaseModel):
    """Day entry payload with derived goal flags."""

    id: UUID
    date: date
    user_id: UUID
    weight: float | None
    did_workout: bool
    meals_logged: bool
    steps: int
    step_goal: int
    step_goal_hit: bool
    completed_meal_ids: list[UUID]
    water_ounces: float
    notes: str | None

    @classmethod
    def from_domain(cls, entry: DayEntry) -> "DayEntryOut":
        return cls(
            id=entry.id,
            date=entry.date,
            user_id=entry.user_id,
            weight=entry.weight,
            did_workout=entry.did_workout,
            meals_logged=entry.meals_logged,
            steps=entry.steps,
            step_goal=entry.step_goal,
            step_goal_hit=entry.step_goal_hit,
            completed_meal_ids=sorted(entry.completed_meal_ids, key=str),
            water_ounces=entry.water_ounces,
            notes=entry.notes,
        )


class DayEntryPatch(BaseModel):
    """Daily log edits; each present field is applied in turn."""

    weight_text: str | None = None
    clear_weight: bool = False
    did_workout: bool | None = None
    meals_logged: bool | None = None
    water_servings: int | None = Field(default=None, ge=0)
    step_goal: int | None = Field(default=None, ge=0)
    notes: str | None = None


class MealCompletionIn(BaseModel):
    """Meal completion toggle."""

    completed: bool


class MealTemplateOut(BaseModel):
    """Meal template payload."""

    id: UUID
    day_of_week: str
    meal_type: str
    title: str
    description: str
    is_jill_variant: bool
    is_kid_variant: bool
    recipe_id: UUID | None

    @classmethod
    def from_domain(cls, template: MealTemplate) -> "MealTemplateOut":
        return cls(
            id=template.id,
            day_of_week=template.day_of_week.value,
            meal_type=template.meal_type.value,
            title=template.title,
            description=template.description,
            is_jill_variant=template.is_jill_variant,
            is_kid_variant=template.is_kid_variant,
            recipe_id=template.recipe_id,
        )


class RecipeOut(BaseModel):
    """Recipe detail payload."""

    id: UUID
    title: str
    category: str
    ingredients: str
    instructions: str
    notes: str

    @classmethod
    def from_domain(cls, recipe: Recipe) -> "RecipeOut":
        return cls(
            id=recipe.id,
            title=recipe.title,
            category=recipe.category,
            ingredients=recipe.ingredients,
            instructions=recipe.instructions,
            notes=recipe.notes,
        )


class WeekRollupOut(BaseModel):
    """Roll-up payload."""

    workouts: int
    meals_logged: int
    average_water: float
    weight_change: float | None

    @classmethod
    def from_domain(cls, rollup: WeekRollup) -> "WeekRollupOut":
        return cls(
            workouts=rollup.workouts,
            meals_logged=rollup.meals_logged,
            average_water=rollup.average_water,
            weight_change=rollup.weight_change,
        )


class DaySummaryOut(BaseModel):
    """Per-day goal flags."""

    day: date
    weekday: str
    did_workout: bool
    meals_logged: bool
    step_goal_hit: bool
    water_goal_hit: bool
    weight: float | None

    @classmethod
    def from_domain(cls, summary: DaySummary) -> "DaySummaryOut":
        return cls(
            day=summary.day,
            weekday=summary.weekday,
            did_workout=summary.did_workout,
            meals_logged=summary.meals_logged,
            step_goal_hit=summary.step_goal_hit,
            water_goal_hit=summary.water_goal_hit,
            weight=summary.weight,
        )


class WeekSummaryOut(BaseModel):
    """Week view payload for one user."""

    user_id: UUID
    user_name: str
    start: date
    end: date
    days: list[DaySummaryOut]
    rollup: WeekRollupOut

    @classmethod
    def from_domain(cls, summary: WeekSummary) -> "WeekSummaryOut":
        return cls(
            user_id=summary.user_id,
            user_name=summary.user_name,
            start=summary.start,
            end=summary.end,
            days=[DaySummaryOut.from_domain(day) for day in summary.days],
            rollup=WeekRollupOut.from_domain(summary.rollup),
        )
