"""Static reference data: recipes, meal templates and workouts."""

from dataclasses import dataclass
from uuid import UUID, uuid5

from habit_tracker.domain.meals import (
    MealTemplate,
    MealType,
    Recipe,
    Weekday,
    WorkoutPlan,
)

_NAMESPACE = UUID("6f1c3b8e-1f52-4c1e-9a57-2d3c4b5a6e70")


def _recipe_id(slug: str) -> UUID:
    return uuid5(_NAMESPACE, f"recipe:{slug}")


def _template_id(day: Weekday, meal_type: MealType) -> UUID:
    return uuid5(_NAMESPACE, f"template:{day}:{meal_type}")


@dataclass(frozen=True)
class ReferenceCatalog:
    """Read-only catalog built once at startup."""

    recipes: tuple[Recipe, ...]
    templates: tuple[MealTemplate, ...]
    workouts: tuple[WorkoutPlan, ...]

    def get_template(self, template_id: UUID) -> MealTemplate | None:
        """Return a meal template by id."""
        for template in self.templates:
            if template.id == template_id:
                return template
        return None

    def get_recipe(self, recipe_id: UUID | None) -> Recipe | None:
        """Return a recipe by id, or None when absent."""
        if recipe_id is None:
            return None
        for recipe in self.recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def get_workout(self, day: Weekday) -> WorkoutPlan:
        """Return the workout planned for a weekday."""
        return next(workout for workout in self.workouts if workout.day_of_week == day)


def build_default_catalog() -> ReferenceCatalog:
    """Build the household's seed recipes, weekly meal plan and workouts."""
    oats = Recipe(
        id=_recipe_id("overnight-oats"),
        title="Blueberry Overnight Oats",
        category="Breakfast",
        ingredients="Rolled oats, almond milk, chia seeds, maple syrup, blueberries",
        instructions=(
            "Combine ingredients in a jar, chill overnight, "
            "top with berries and nuts."
        ),
        notes="Prep 2 jars at once for Jill's early mornings.",
    )
    tacos = Recipe(
        id=_recipe_id("sheet-pan-tacos"),
        title="Sheet-Pan Chicken Tacos",
        category="Dinner",
        ingredients="Chicken thighs, peppers, onions, taco seasoning, tortillas, salsa",
        instructions=(
            "Season chicken and veggies, roast at 425°F for 20 minutes, "
            "serve with warm tortillas."
        ),
        notes="Kids version uses mild seasoning and shredded cheese.",
    )
    salad = Recipe(
        id=_recipe_id("power-salad"),
        title="Mediterranean Power Salad",
        category="Lunch",
        ingredients=(
            "Mixed greens, quinoa, cucumbers, tomatoes, olives, feta, "
            "lemon vinaigrette"
        ),
        instructions=(
            "Layer greens and grains, add veggies, toss with vinaigrette "
            "before serving."
        ),
        notes="Great with leftover grilled chicken.",
    )

    # (day, meal type, title, description, jill variant, kid variant, recipe)
    seed: list[tuple[Weekday, MealType, str, str, bool, bool, Recipe | None]] = [
        (Weekday.MON, MealType.BREAKFAST, "Protein Oats",
         "Oats + berries + protein powder", False, False, oats),
        (Weekday.MON, MealType.LUNCH, "Mediterranean Power Salad",
         "Quinoa, greens, olives", False, False, salad),
        (Weekday.MON, MealType.DINNER, "Sheet-Pan Chicken Tacos",
         "Peppers, onions, salsa", False, False, tacos),
        (Weekday.TUE, MealType.BREAKFAST, "Greek Yogurt Parfait",
         "Granola + berries", True, False, oats),
        (Weekday.TUE, MealType.LUNCH, "Leftover Tacos",
         "Warm and wrap", False, False, tacos),
        (Weekday.TUE, MealType.DINNER, "Salmon + Roasted Veg",
         "Sheet pan and chill", False, False, None),
        (Weekday.WED, MealType.BREAKFAST, "Egg + Avocado Toast",
         "Jill swap: cottage cheese toast", True, False, None),
        (Weekday.WED, MealType.LUNCH, "Mediterranean Power Salad",
         "Add beans for extra fiber", False, False, salad),
        (Weekday.WED, MealType.DINNER, "Slow Cooker Chili",
         "Kid bowl with cheese", False, True, None),
        (Weekday.THU, MealType.BREAKFAST, "Blueberry Overnight Oats",
         "Add peanut butter for Chris", False, False, oats),
        (Weekday.THU, MealType.LUNCH, "Chicken Wraps",
         "Spinach + hummus", False, False, tacos),
        (Weekday.THU, MealType.DINNER, "Pork Tenderloin",
         "Serve with green beans", False, True, None),
        (Weekday.FRI, MealType.BREAKFAST, "Protein Smoothie",
         "Spinach + banana", False, False, None),
        (Weekday.FRI, MealType.LUNCH, "Leftover Pork Bowls",
         "Add rice + veg", False, False, None),
        (Weekday.FRI, MealType.DINNER, "Pizza Night",
         "Side salad for Jill", True, True, None),
        (Weekday.SAT, MealType.BREAKFAST, "Egg + Veg Scramble",
         "Salsa + avocado", False, False, None),
        (Weekday.SAT, MealType.LUNCH, "BBQ Chicken Sandwiches",
         "Slaw + pickles", False, True, None),
        (Weekday.SAT, MealType.DINNER, "Date Night",
         "Eat out", False, False, None),
        (Weekday.SUN, MealType.BREAKFAST, "Pancakes + Fruit",
         "Protein pancakes for Chris", False, True, None),
        (Weekday.SUN, MealType.LUNCH, "Snack Plates",
         "Hummus, veg, crackers", False, True, None),
        (Weekday.SUN, MealType.DINNER, "Roast Chicken",
         "Leftovers for salads", False, True, None),
    ]  # fmt: skip
    templates = tuple(
        MealTemplate(
            id=_template_id(day, meal_type),
            day_of_week=day,
            meal_type=meal_type,
            title=title,
            description=description,
            is_jill_variant=jill,
            is_kid_variant=kid,
            recipe_id=recipe.id if recipe else None,
        )
        for day, meal_type, title, description, jill, kid, recipe in seed
    )

    workouts = (
        WorkoutPlan(Weekday.MON, "Upper body strength",
                    "Bench + rows, finish with 10-minute core."),
        WorkoutPlan(Weekday.TUE, "Zone 2 walk + core",
                    "45-minute walk; 3x plank, dead bug, side plank."),
        WorkoutPlan(Weekday.WED, "Lower body strength",
                    "Squats, hinges, and split squats with light sled pushes."),
        WorkoutPlan(Weekday.THU, "Intervals or peloton",
                    "10 x 1-min pushes on the bike with 1-min recoveries."),
        WorkoutPlan(Weekday.FRI, "Full-body lift",
                    "Compound lifts (press, hinge, squat) and band pull-aparts."),
        WorkoutPlan(Weekday.SAT, "Family walk or hike",
                    "Family cardio: stroller walk or easy hike."),
        WorkoutPlan(Weekday.SUN, "Mobility + stretch",
                    "20-minute mobility flow: hips, hamstrings, T-spine."),
    )  # fmt: skip

    return ReferenceCatalog(
        recipes=(oats, tacos, salad),
        templates=templates,
        workouts=workouts,
    )
