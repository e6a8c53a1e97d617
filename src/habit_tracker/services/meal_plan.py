"""Weekly meal plan selection and per-day completion tracking."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from habit_tracker.domain.errors import UnknownMealTemplateError
from habit_tracker.domain.meals import MealTemplate, Recipe, Weekday, WorkoutPlan
from habit_tracker.domain.models import DayEntry
from habit_tracker.services.catalog import ReferenceCatalog
from habit_tracker.services.entries import EntryRepository
from habit_tracker.services.preferences import PreferencesService


def select_templates(
    templates: Sequence[MealTemplate], day: Weekday, show_kid_variants: bool
) -> list[MealTemplate]:
    """Filter templates to one weekday, dropping kid variants unless shown."""
    return [
        template
        for template in templates
        if template.day_of_week == day
        and (show_kid_variants or not template.is_kid_variant)
    ]


def apply_meal_completion(
    entry: DayEntry,
    template_id: UUID,
    completed: bool,
    day_templates: Sequence[MealTemplate],
) -> None:
    """Mark a template done or not done and re-derive ``meals_logged``."""
    if completed:
        entry.completed_meal_ids.add(template_id)
    else:
        entry.completed_meal_ids.discard(template_id)
    entry.meals_logged = all(
        template.id in entry.completed_meal_ids for template in day_templates
    )


@dataclass
class MealPlanService:
    """Reads the static meal plan and records completed meals."""

    catalog: ReferenceCatalog
    repository: EntryRepository
    preferences: PreferencesService

    def templates_for(
        self, day: Weekday, show_kid_variants: bool | None = None
    ) -> list[MealTemplate]:
        """Return a weekday's templates in catalog order.

        When ``show_kid_variants`` is omitted the current preference applies.
        """
        if show_kid_variants is None:
            show_kid_variants = self.preferences.get().show_kid_variants
        return select_templates(self.catalog.templates, day, show_kid_variants)

    def weekly_plan(
        self, show_kid_variants: bool | None = None
    ) -> dict[Weekday, list[MealTemplate]]:
        """Return the plan for every weekday, Monday first."""
        return {day: self.templates_for(day, show_kid_variants) for day in Weekday}

    def toggle_meal_completion(
        self,
        user_id: UUID,
        day: date | datetime,
        template_id: UUID,
        completed: bool,
    ) -> DayEntry:
        """Record a meal as done or undone for a user's day."""
        weekday = Weekday.of(self.repository.normalize(day))
        template = self.catalog.get_template(template_id)
        if template is None or template.day_of_week != weekday:
            raise UnknownMealTemplateError(template_id)
        day_templates = self.templates_for(weekday)
        return self.repository.update(
            user_id,
            day,
            lambda entry: apply_meal_completion(
                entry, template_id, completed, day_templates
            ),
        )

    def set_meals_logged(
        self, user_id: UUID, day: date | datetime, logged: bool
    ) -> DayEntry:
        """Set the logged flag directly, leaving completed meals untouched."""

        def mutate(entry: DayEntry) -> None:
            entry.meals_logged = logged

        return self.repository.update(user_id, day, mutate)

    def recipe_for(self, template_id: UUID) -> Recipe | None:
        """Return the recipe linked from a template, if any."""
        template = self.catalog.get_template(template_id)
        if template is None:
            return None
        return self.catalog.get_recipe(template.recipe_id)

    def workout_for(self, day: Weekday) -> WorkoutPlan:
        """Return the workout planned for a weekday."""
        return self.catalog.get_workout(day)
