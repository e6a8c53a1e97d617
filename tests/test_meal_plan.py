"""Tests for meal plan selection and completion."""

from datetime import date
from uuid import uuid4

import pytest

from habit_tracker.containers import AppContainer
from habit_tracker.domain.errors import UnknownMealTemplateError
from habit_tracker.domain.meals import MealType, Weekday
from habit_tracker.domain.models import UserProfile

MONDAY = date(2025, 6, 9)
WEDNESDAY = date(2025, 6, 11)


def test_templates_for_day_in_meal_order(container: AppContainer) -> None:
    templates = container.meal_plan_service.templates_for(Weekday.MON, False)

    assert [t.meal_type for t in templates] == [
        MealType.BREAKFAST,
        MealType.LUNCH,
        MealType.DINNER,
    ]
    assert all(t.day_of_week == Weekday.MON for t in templates)


def test_kid_variants_filtered_on_saturday(container: AppContainer) -> None:
    hidden = container.meal_plan_service.templates_for(Weekday.SAT, False)
    shown = container.meal_plan_service.templates_for(Weekday.SAT, True)

    assert not any(t.is_kid_variant for t in hidden)
    assert [t.title for t in hidden] == ["Egg + Veg Scramble", "Date Night"]
    assert any(t.is_kid_variant for t in shown)
    assert len(shown) == 3


def test_templates_for_uses_current_preference(container: AppContainer) -> None:
    container.preferences_service.update(show_kid_variants=True)

    assert len(container.meal_plan_service.templates_for(Weekday.SAT)) == 3


def test_weekly_plan_covers_every_day(container: AppContainer) -> None:
    plan = container.meal_plan_service.weekly_plan(show_kid_variants=True)

    assert list(plan) == list(Weekday)
    assert sum(len(templates) for templates in plan.values()) == 21


def test_completing_all_meals_sets_meals_logged(
    container: AppContainer, chris: UserProfile
) -> None:
    service = container.meal_plan_service
    templates = service.templates_for(Weekday.MON, False)
    assert len(templates) == 3

    for template in templates[:2]:
        entry = service.toggle_meal_completion(chris.id, MONDAY, template.id, True)
        assert entry.meals_logged is False

    entry = service.toggle_meal_completion(chris.id, MONDAY, templates[2].id, True)
    assert entry.meals_logged is True
    assert entry.completed_meal_ids == {t.id for t in templates}

    entry = service.toggle_meal_completion(chris.id, MONDAY, templates[1].id, False)
    assert entry.meals_logged is False
    assert templates[1].id not in entry.completed_meal_ids


def test_meals_logged_follows_kid_variant_setting(
    container: AppContainer, chris: UserProfile
) -> None:
    service = container.meal_plan_service
    visible = service.templates_for(Weekday.WED, False)
    for template in visible:
        entry = service.toggle_meal_completion(chris.id, WEDNESDAY, template.id, True)
    assert entry.meals_logged is True

    container.preferences_service.update(show_kid_variants=True)
    entry = service.toggle_meal_completion(chris.id, WEDNESDAY, visible[0].id, True)

    # The chili kid bowl is now part of the day and is not done yet.
    assert entry.meals_logged is False


def test_toggle_unknown_template_raises(
    container: AppContainer, chris: UserProfile
) -> None:
    with pytest.raises(UnknownMealTemplateError):
        container.meal_plan_service.toggle_meal_completion(
            chris.id, MONDAY, uuid4(), True
        )

    assert container.entry_repository.entries_for_user(chris.id) == []


def test_toggle_template_from_another_day_raises(
    container: AppContainer, chris: UserProfile
) -> None:
    service = container.meal_plan_service
    tuesday_lunch = service.templates_for(Weekday.TUE, False)[1]

    with pytest.raises(UnknownMealTemplateError):
        service.toggle_meal_completion(chris.id, MONDAY, tuesday_lunch.id, True)

    assert container.entry_repository.entries_for_user(chris.id) == []


def test_bulk_meals_logged_keeps_completed_ids(
    container: AppContainer, chris: UserProfile
) -> None:
    service = container.meal_plan_service
    breakfast = service.templates_for(Weekday.MON, False)[0]
    service.toggle_meal_completion(chris.id, MONDAY, breakfast.id, True)

    entry = service.set_meals_logged(chris.id, MONDAY, True)

    assert entry.meals_logged is True
    assert entry.completed_meal_ids == {breakfast.id}


def test_recipe_for_linked_template(container: AppContainer) -> None:
    breakfast = container.meal_plan_service.templates_for(Weekday.MON, False)[0]

    recipe = container.meal_plan_service.recipe_for(breakfast.id)

    assert recipe is not None
    assert recipe.title == "Blueberry Overnight Oats"


def test_recipe_for_missing_links(container: AppContainer) -> None:
    salmon = container.meal_plan_service.templates_for(Weekday.TUE, False)[2]

    assert salmon.recipe_id is None
    assert container.meal_plan_service.recipe_for(salmon.id) is None
    assert container.meal_plan_service.recipe_for(uuid4()) is None


def test_workout_for_weekday(container: AppContainer) -> None:
    workout = container.meal_plan_service.workout_for(Weekday.WED)

    assert workout.title == "Lower body strength"
