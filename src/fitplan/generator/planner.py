"""Custom diet plan generation.

Builds a multi-day plan by picking one recipe per meal slot per day from
the recipes that fit the chosen diet type:

1. Calorie target from the profile (goal-adjusted, floored by sex)
2. Macro grams from the diet type's split
3. Eligible pool: diet-type recipes without excluded ingredients, or all
   diet-type recipes if exclusions leave too few to choose from
4. Breakfast, lunch and dinner every day, plus a snack when the calorie
   target is high enough; a meal type with no eligible recipe is skipped

All randomness comes from the ``rng`` argument, so the same seed always
produces the same plan.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Protocol, Sequence

from fitplan.catalog.models import MealType, Recipe
from fitplan.catalog.repository import CatalogProvider, RecordNotFoundError
from fitplan.data.macro_splits import get_diet_type
from fitplan.generator.models import (
    DayNutrition,
    GeneratedPlan,
    MealSlot,
    PlanDay,
    PlanPreferences,
)
from fitplan.profiles.body_calc import UserProfile, compute_calorie_target

logger = logging.getLogger(__name__)

DEFAULT_PLAN_DAYS = 7

# Below this many eligible recipes, excluded ingredients are ignored
MIN_ELIGIBLE_RECIPES = 15

# Snacks are only added when the daily target is above this
SNACK_CALORIE_THRESHOLD = 1500

MAIN_MEALS = (MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER)

ORDER_INDEX = {
    MealType.BREAKFAST: 1,
    MealType.LUNCH: 2,
    MealType.DINNER: 3,
    MealType.SNACK: 4,
}


class RandomSource(Protocol):
    """The subset of ``random.Random`` the generator uses."""

    def choice(self, seq): ...

    def getrandbits(self, k: int) -> int: ...


def build_rng(seed: Optional[int] = None) -> random.Random:
    """Create a random source; a fixed seed makes generation reproducible."""
    return random.Random(seed)


def eligible_recipes(
    recipes: Sequence[Recipe],
    preferences: PlanPreferences,
    min_eligible: int = MIN_ELIGIBLE_RECIPES,
) -> tuple[list[Recipe], bool]:
    """Select the recipe pool for a custom plan.

    Args:
        recipes: All available recipes
        preferences: Diet type and excluded ingredients
        min_eligible: Smallest pool size that keeps exclusions in force

    Returns:
        Tuple of (pool, relaxed) where ``relaxed`` is True if excluded
        ingredients had to be ignored.
    """
    diet_recipes = [r for r in recipes if r.has_diet_type(preferences.diet_type)]

    pool = [
        r for r in diet_recipes
        if not any(r.contains_ingredient(e) for e in preferences.excluded_ingredients)
    ]

    if len(pool) >= min_eligible:
        return pool, False

    relaxed = bool(preferences.excluded_ingredients) and len(pool) < len(diet_recipes)
    if relaxed:
        logger.warning(
            "Only %d %s recipes avoid %s (need %d), ignoring ingredient exclusions",
            len(pool),
            preferences.diet_type,
            ", ".join(preferences.excluded_ingredients),
            min_eligible,
        )
    return diet_recipes, relaxed


def meal_types_for_day(
    target_calories: int,
    snack_threshold: int = SNACK_CALORIE_THRESHOLD,
) -> list[MealType]:
    """Meal slots to fill each day for a calorie target."""
    meals = list(MAIN_MEALS)
    if target_calories > snack_threshold:
        meals.append(MealType.SNACK)
    return meals


def _plan_name(diet_type: str) -> str:
    diet = get_diet_type(diet_type)
    label = diet.name if diet else diet_type[:1].upper() + diet_type[1:]
    return f"Custom {label} Plan"


def generate_custom_plan(
    profile: UserProfile,
    preferences: PlanPreferences,
    recipes: Sequence[Recipe],
    rng: RandomSource,
    days: int = DEFAULT_PLAN_DAYS,
    min_eligible: int = MIN_ELIGIBLE_RECIPES,
    snack_threshold: int = SNACK_CALORIE_THRESHOLD,
) -> GeneratedPlan:
    """Generate a custom diet plan.

    Args:
        profile: User profile (calorie target and goal)
        preferences: Diet type and excluded ingredients
        recipes: Recipe pool to draw from (not modified)
        rng: Random source (``random.Random`` or compatible)
        days: Number of days to plan
        min_eligible: Pool size below which exclusions are relaxed
        snack_threshold: Daily calories above which a snack is added

    Returns:
        GeneratedPlan. Days may be missing meals when a meal type has no
        eligible recipe.

    Raises:
        InvalidProfileError: If the profile fails validation
    """
    calorie_plan = compute_calorie_target(profile, preferences.diet_type)
    target = calorie_plan.target_calories

    pool, relaxed = eligible_recipes(recipes, preferences, min_eligible)
    by_meal: dict[MealType, list[Recipe]] = {
        meal_type: [r for r in pool if r.meal_type == meal_type]
        for meal_type in MealType
    }

    plan_id = f"custom-plan-{rng.getrandbits(32):08x}"

    plan_days: list[PlanDay] = []
    for day_number in range(1, days + 1):
        slots: list[MealSlot] = []
        for meal_type in meal_types_for_day(target, snack_threshold):
            options = by_meal[meal_type]
            if not options:
                logger.debug("Day %d: no %s recipes available, slot skipped",
                             day_number, meal_type.value)
                continue

            recipe = rng.choice(options)
            slots.append(
                MealSlot(
                    meal_type=meal_type,
                    recipe_id=recipe.id,
                    servings=1,
                    order_index=ORDER_INDEX[meal_type],
                )
            )
        plan_days.append(PlanDay(day_number=day_number, slots=tuple(slots)))

    goal = profile.goal_type.value
    return GeneratedPlan(
        id=plan_id,
        name=_plan_name(preferences.diet_type),
        description=(
            f"A custom {preferences.diet_type} diet plan designed for "
            f"{goal.replace('_', ' ')}."
        ),
        goal_type=goal,
        diet_type=preferences.diet_type,
        duration_days=days,
        daily_calories=target,
        daily_protein=calorie_plan.protein_g,
        daily_carbs=calorie_plan.carbs_g,
        daily_fat=calorie_plan.fat_g,
        days=tuple(plan_days),
        exclusions_relaxed=relaxed,
        excluded_ingredients=preferences.excluded_ingredients,
    )


def expand_plan(
    plan: GeneratedPlan,
    catalog: CatalogProvider,
) -> list[tuple[PlanDay, list[tuple[MealSlot, Recipe]]]]:
    """Resolve recipe ids to recipes, per day, in slot order.

    Raises:
        RecordNotFoundError: If a slot references a recipe not in the catalog
    """
    recipes = {r.id: r for r in catalog.recipes()}

    expanded = []
    for day in sorted(plan.days, key=lambda d: d.day_number):
        meals = []
        for slot in sorted(day.slots, key=lambda s: s.order_index):
            recipe = recipes.get(slot.recipe_id)
            if recipe is None:
                raise RecordNotFoundError(f"Recipe not found: {slot.recipe_id}")
            meals.append((slot, recipe))
        expanded.append((day, meals))
    return expanded


def plan_nutrition(plan: GeneratedPlan, catalog: CatalogProvider) -> list[DayNutrition]:
    """Total calories and macros for each day of a plan."""
    totals = []
    for day, meals in expand_plan(plan, catalog):
        nutrition = DayNutrition(day_number=day.day_number)
        for slot, recipe in meals:
            nutrition.calories += recipe.calories * slot.servings
            nutrition.protein += recipe.protein * slot.servings
            nutrition.carbs += recipe.carbs * slot.servings
            nutrition.fat += recipe.fat * slot.servings
        totals.append(nutrition)
    return totals
