"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date, datetime
from functools import partial
from uuid import UUID

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from habit_tracker.api.models import (
    DayEntryOut,
    DayEntryPatch,
    MealCompletionIn,
    MealTemplateOut,
    PreferencesPayload,
    ProfileOut,
    ProfileTargetsIn,
    RecipeOut,
    WeekSummaryOut,
)
from habit_tracker.app_logging import configure_logging
from habit_tracker.containers import AppContainer
from habit_tracker.domain.errors import UnknownMealTemplateError, UnknownProfileError
from habit_tracker.domain.meals import Weekday

RECIPE_UNAVAILABLE = "Recipe details coming soon."


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        try:
            await state_container.health_sync_service.refresh_authorization()
        except Exception:
            logger.exception("Failed to query health authorization")
        yield
        await state_container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    async def not_found(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    app.add_exception_handler(UnknownProfileError, not_found)
    app.add_exception_handler(UnknownMealTemplateError, not_found)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/profiles")
    async def list_profiles(request: Request) -> dict[str, list[ProfileOut]]:
        """Return household profiles."""
        state_container: AppContainer = request.app.state.container
        profiles = state_container.profile_service.list_profiles()
        return {"profiles": [ProfileOut.from_domain(p) for p in profiles]}

    @app.post("/profiles/{profile_id}/primary")
    async def set_primary(profile_id: UUID, request: Request) -> ProfileOut:
        """Make a profile the primary one."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.set_primary(profile_id)
        return ProfileOut.from_domain(profile)

    @app.patch("/profiles/{profile_id}")
    async def update_profile(
        profile_id: UUID, payload: ProfileTargetsIn, request: Request
    ) -> ProfileOut:
        """Edit a profile's targets."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.update_targets(
            profile_id,
            target_calories=payload.target_calories,
            target_water_oz=payload.target_water_oz,
            target_weight=payload.target_weight,
        )
        return ProfileOut.from_domain(profile)

    @app.get("/preferences")
    async def get_preferences(request: Request) -> PreferencesPayload:
        """Return current preferences."""
        state_container: AppContainer = request.app.state.container
        return _preferences_payload(state_container)

    @app.patch("/preferences")
    async def update_preferences(
        payload: PreferencesPayload, request: Request
    ) -> PreferencesPayload:
        """Change one or more preferences."""
        state_container: AppContainer = request.app.state.container
        state_container.preferences_service.update(
            **payload.model_dump(exclude_none=True)
        )
        return _preferences_payload(state_container)

    @app.get("/users/{user_id}/days/{day}")
    async def get_day(user_id: UUID, day: date, request: Request) -> DayEntryOut:
        """Return a user's entry for a day, creating it on first access."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.get(user_id)
        entry = state_container.daily_log_service.get_entry(user_id, day)
        return DayEntryOut.from_domain(entry)

    @app.patch("/users/{user_id}/days/{day}")
    async def update_day(
        user_id: UUID, day: date, payload: DayEntryPatch, request: Request
    ) -> DayEntryOut:
        """Apply daily log edits."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.get(user_id)
        daily_log = state_container.daily_log_service
        entry = daily_log.get_entry(user_id, day)
        if payload.clear_weight:
            entry = daily_log.clear_weight(user_id, day)
        elif payload.weight_text is not None:
            entry = await daily_log.record_weight_text(
                user_id, day, payload.weight_text
            )
        if payload.did_workout is not None:
            entry = daily_log.set_workout(user_id, day, payload.did_workout)
        if payload.meals_logged is not None:
            entry = state_container.meal_plan_service.set_meals_logged(
                user_id, day, payload.meals_logged
            )
        if payload.water_servings is not None:
            entry = daily_log.set_water_servings(user_id, day, payload.water_servings)
        if payload.step_goal is not None:
            entry = daily_log.set_step_goal(user_id, day, payload.step_goal)
        if "notes" in payload.model_fields_set:
            entry = daily_log.set_notes(user_id, day, payload.notes)
        return DayEntryOut.from_domain(entry)

    @app.put("/users/{user_id}/days/{day}/meals/{template_id}")
    async def toggle_meal(
        user_id: UUID,
        day: date,
        template_id: UUID,
        payload: MealCompletionIn,
        request: Request,
    ) -> DayEntryOut:
        """Mark a planned meal as completed or not."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.get(user_id)
        entry = state_container.meal_plan_service.toggle_meal_completion(
            user_id, day, template_id, payload.completed
        )
        return DayEntryOut.from_domain(entry)

    @app.post("/users/{user_id}/days/{day}/steps/sync")
    async def sync_steps(user_id: UUID, day: date, request: Request) -> dict:
        """Pull the day's step count from the health provider."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.get(user_id)
        synced = await state_container.health_sync_service.sync_steps(user_id, day)
        entry = synced or state_container.daily_log_service.get_entry(user_id, day)
        return {
            "synced": synced is not None,
            "entry": DayEntryOut.from_domain(entry),
        }

    @app.get("/users/{user_id}/week")
    async def week(
        user_id: UUID, request: Request, end: date | None = None
    ) -> WeekSummaryOut:
        """Return the 7-day summary ending on ``end`` (today by default)."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.rollup_service.week_summary(
            user_id, end or _today(state_container)
        )
        return WeekSummaryOut.from_domain(summary)

    @app.get("/users/{user_id}/household")
    async def household(
        user_id: UUID, request: Request, end: date | None = None
    ) -> dict[str, list[WeekSummaryOut]]:
        """Return the viewer's summary and any shared household summaries."""
        state_container: AppContainer = request.app.state.container
        summaries = state_container.rollup_service.household_rollups(
            user_id, end or _today(state_container)
        )
        return {"summaries": [WeekSummaryOut.from_domain(s) for s in summaries]}

    @app.get("/meal-plan")
    async def meal_plan(
        request: Request,
        day: Weekday | None = None,
        show_kid_variants: bool | None = None,
    ) -> dict:
        """Return the weekly plan, or a single weekday's meals and workout."""
        state_container: AppContainer = request.app.state.container
        plan_service = state_container.meal_plan_service
        if day is not None:
            return _day_plan(state_container, day, show_kid_variants)
        weekly = plan_service.weekly_plan(show_kid_variants)
        return {
            "days": [
                {
                    "day": weekday.value,
                    "name": weekday.full_name,
                    "templates": [MealTemplateOut.from_domain(t) for t in templates],
                }
                for weekday, templates in weekly.items()
            ]
        }

    @app.get("/meal-plan/templates/{template_id}/recipe")
    async def template_recipe(template_id: UUID, request: Request) -> dict:
        """Return the recipe linked from a template."""
        state_container: AppContainer = request.app.state.container
        template = state_container.catalog.get_template(template_id)
        if template is None:
            raise UnknownMealTemplateError(template_id)
        recipe = state_container.meal_plan_service.recipe_for(template_id)
        return {
            "template": MealTemplateOut.from_domain(template),
            "recipe": RecipeOut.from_domain(recipe) if recipe else None,
            "message": None if recipe else RECIPE_UNAVAILABLE,
        }

    @app.get("/workouts/{day}")
    async def workout(day: Weekday, request: Request) -> dict[str, str]:
        """Return the workout planned for a weekday."""
        state_container: AppContainer = request.app.state.container
        plan = state_container.meal_plan_service.workout_for(day)
        return {"day": plan.day_of_week.value, "title": plan.title, "detail": plan.detail}

    @app.get("/health-sync")
    async def health_sync_state(request: Request) -> dict[str, str]:
        """Return the health provider authorization state."""
        state_container: AppContainer = request.app.state.container
        return {"state": state_container.health_sync_service.state.value}

    @app.post("/health-sync/authorize")
    async def authorize(
        request: Request, user_id: UUID | None = None, day: date | None = None
    ) -> dict[str, str]:
        """Request provider access; on success sync the given user's steps."""
        state_container: AppContainer = request.app.state.container
        health_sync = state_container.health_sync_service
        on_authorized = None
        if user_id is not None:
            state_container.profile_service.get(user_id)
            on_authorized = partial(
                health_sync.sync_steps, user_id, day or _today(state_container)
            )

        state = await health_sync.request_authorization(on_authorized)
        return {"state": state.value}

    return app


def _today(container: AppContainer) -> date:
    return container.entry_repository.normalize(datetime.now().astimezone())


def _preferences_payload(container: AppContainer) -> PreferencesPayload:
    current = container.preferences_service.get()
    return PreferencesPayload(
        show_kid_variants=current.show_kid_variants,
        sync_steps_from_health=current.sync_steps_from_health,
        push_weight_to_health=current.push_weight_to_health,
        cloud_sync_enabled=current.cloud_sync_enabled,
        shared_rollups_enabled=current.shared_rollups_enabled,
    )


def _day_plan(
    container: AppContainer, day: Weekday, show_kid_variants: bool | None
) -> dict[str, object]:
    plan_service = container.meal_plan_service
    workout = plan_service.workout_for(day)
    return {
        "day": day.value,
        "name": day.full_name,
        "templates": [
            MealTemplateOut.from_domain(template)
            for template in plan_service.templates_for(day, show_kid_variants)
        ],
        "workout": {"title": workout.title, "detail": workout.detail},
    }
