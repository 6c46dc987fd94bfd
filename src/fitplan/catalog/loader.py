"""Load a plan/recipe catalog from YAML.

Expected layout::

    diet_plans:
      - id: 1
        name: Weight Loss Balanced Plan
        goal_type: weight_loss
        diet_type: balanced
        daily_calories: 1800
        days:
          - day_number: 1
            meals:
              - {recipe_id: 1, servings: 1, order_index: 1}
    workout_plans:
      - id: 1
        name: Weight Loss Beginner
        goal_type: weight_loss
        difficulty_level: beginner
        days:
          - day_number: 1
            focus_area: Full Body
            exercises:
              - {exercise_id: 1, sets: 3, reps: 10, rest_seconds: 60}
    recipes:
      - id: 1
        name: Greek Yogurt with Berries
        meal_type: breakfast
        diet_types: [balanced, vegetarian]
        ingredients:
          - {name: Greek yogurt, amount: 1, unit: cup}
    exercise_categories:
      - {id: 1, name: Strength}
    exercises:
      - {id: 1, name: Push-ups, category_id: 1, difficulty_level: beginner}
    foods:
      - {id: 1, name: Apple, calories: 95, serving_size: 1, serving_unit: medium}

Every section is optional.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import yaml

from fitplan.catalog.models import (
    DEFAULT_CALORIES_PER_MINUTE,
    DietPlan,
    DietPlanDay,
    Exercise,
    ExerciseCategory,
    Food,
    Ingredient,
    MealType,
    PlannedExercise,
    PlannedMeal,
    Recipe,
    WorkoutDay,
    WorkoutPlan,
)
from fitplan.catalog.repository import InMemoryCatalog
from fitplan.profiles.body_calc import DifficultyLevel, GoalType

T = TypeVar("T")


class CatalogFormatError(ValueError):
    """Raised when a catalog file has a malformed entry."""


def _optional(value: Any, cast: Callable[[Any], T]) -> Optional[T]:
    return None if value is None else cast(value)


def parse_planned_meal(data: dict[str, Any]) -> PlannedMeal:
    return PlannedMeal(
        recipe_id=int(data["recipe_id"]),
        servings=float(data.get("servings", 1)),
        order_index=int(data.get("order_index", 1)),
    )


def parse_diet_plan_day(data: dict[str, Any]) -> DietPlanDay:
    return DietPlanDay(
        day_number=int(data["day_number"]),
        description=str(data.get("description", "")),
        meals=tuple(parse_planned_meal(m) for m in data.get("meals") or []),
    )


def parse_diet_plan(data: dict[str, Any]) -> DietPlan:
    """Convert a mapping into a DietPlan."""
    return DietPlan(
        id=int(data["id"]),
        name=str(data["name"]),
        description=str(data.get("description", "")),
        goal_type=GoalType(data["goal_type"]),
        diet_type=str(data["diet_type"]).lower(),
        duration_days=int(data.get("duration_days", 28)),
        daily_calories=int(data["daily_calories"]),
        daily_protein=int(data.get("daily_protein", 0)),
        daily_carbs=int(data.get("daily_carbs", 0)),
        daily_fat=int(data.get("daily_fat", 0)),
        days=tuple(parse_diet_plan_day(d) for d in data.get("days") or []),
    )


def parse_planned_exercise(data: dict[str, Any]) -> PlannedExercise:
    return PlannedExercise(
        exercise_id=int(data["exercise_id"]),
        order_index=int(data.get("order_index", 1)),
        sets=_optional(data.get("sets"), int),
        reps=_optional(data.get("reps"), int),
        duration_minutes=_optional(data.get("duration_minutes"), float),
        rest_seconds=_optional(data.get("rest_seconds"), int),
        notes=str(data.get("notes") or ""),
    )


def parse_workout_day(data: dict[str, Any]) -> WorkoutDay:
    return WorkoutDay(
        day_number=int(data["day_number"]),
        focus_area=str(data.get("focus_area", "")),
        exercises=tuple(parse_planned_exercise(e) for e in data.get("exercises") or []),
    )


def parse_workout_plan(data: dict[str, Any]) -> WorkoutPlan:
    """Convert a mapping into a WorkoutPlan.

    ``focus_areas`` defaults to the focus of each listed day.
    """
    days = tuple(parse_workout_day(d) for d in data.get("days") or [])
    focus_areas = data.get("focus_areas")
    if focus_areas is None:
        focus_areas = [d.focus_area for d in sorted(days, key=lambda d: d.day_number)]

    return WorkoutPlan(
        id=int(data["id"]),
        name=str(data["name"]),
        description=str(data.get("description", "")),
        goal_type=GoalType(data["goal_type"]),
        difficulty_level=DifficultyLevel(data["difficulty_level"]),
        duration_weeks=int(data.get("duration_weeks", 8)),
        days_per_week=int(data.get("days_per_week", 3)),
        focus_areas=tuple(focus_areas),
        days=days,
    )


def parse_ingredient(data: Any) -> Ingredient:
    """Convert a mapping (or a bare ingredient name) into an Ingredient."""
    if isinstance(data, str):
        return Ingredient(name=data)
    return Ingredient(
        name=str(data["name"]),
        amount=float(data.get("amount", 0)),
        unit=str(data.get("unit", "")),
        optional=bool(data.get("optional", False)),
    )


def parse_recipe(data: dict[str, Any]) -> Recipe:
    """Convert a mapping into a Recipe."""
    return Recipe(
        id=int(data["id"]),
        name=str(data["name"]),
        description=str(data.get("description", "")),
        meal_type=MealType(data["meal_type"]),
        diet_types=tuple(str(d).lower() for d in data.get("diet_types", [])),
        prep_time_minutes=int(data.get("prep_time_minutes", 0)),
        cook_time_minutes=int(data.get("cook_time_minutes", 0)),
        servings=int(data.get("servings", 1)),
        calories=float(data.get("calories", 0)),
        protein=float(data.get("protein", 0)),
        carbs=float(data.get("carbs", 0)),
        fat=float(data.get("fat", 0)),
        fiber=float(data.get("fiber", 0)),
        ingredients=tuple(parse_ingredient(i) for i in data.get("ingredients", [])),
        instructions=tuple(str(s) for s in data.get("instructions", [])),
    )


def parse_exercise_category(data: dict[str, Any]) -> ExerciseCategory:
    return ExerciseCategory(
        id=int(data["id"]),
        name=str(data["name"]),
        description=str(data.get("description", "")),
    )


def parse_exercise(data: dict[str, Any]) -> Exercise:
    """Convert a mapping into an Exercise."""
    return Exercise(
        id=int(data["id"]),
        name=str(data["name"]),
        category_id=int(data["category_id"]),
        description=str(data.get("description", "")),
        difficulty_level=DifficultyLevel(data.get("difficulty_level", "beginner")),
        muscle_group=str(data.get("muscle_group", "")),
        equipment_needed=str(data.get("equipment_needed", "")),
        instructions=str(data.get("instructions", "")),
        calories_per_minute=float(
            data.get("calories_per_minute") or DEFAULT_CALORIES_PER_MINUTE
        ),
    )


def parse_food(data: dict[str, Any]) -> Food:
    """Convert a mapping into a Food."""
    return Food(
        id=int(data["id"]),
        name=str(data["name"]),
        brand=str(data.get("brand") or ""),
        calories=float(data.get("calories", 0)),
        protein=float(data.get("protein", 0)),
        carbs=float(data.get("carbs", 0)),
        fat=float(data.get("fat", 0)),
        fiber=float(data.get("fiber", 0)),
        sugar=float(data.get("sugar", 0)),
        serving_size=float(data.get("serving_size", 1)),
        serving_unit=str(data.get("serving_unit", "")),
        is_verified=bool(data.get("is_verified", True)),
    )


def _parse_section(
    data: dict[str, Any],
    section: str,
    parser: Callable[[dict[str, Any]], T],
) -> list[T]:
    entries = data.get(section) or []
    if not isinstance(entries, list):
        raise CatalogFormatError(f"'{section}' must be a list")

    parsed = []
    for index, entry in enumerate(entries):
        try:
            parsed.append(parser(entry))
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogFormatError(f"{section}[{index}]: {e}") from e
    return parsed


def catalog_from_dict(data: dict[str, Any]) -> InMemoryCatalog:
    """Build an InMemoryCatalog from parsed YAML/JSON data.

    Plan days are not checked against the recipe and exercise sections;
    a dangling id surfaces as RecordNotFoundError when the plan's schedule
    is resolved.

    Raises:
        CatalogFormatError: If a section or entry is malformed
    """
    if not isinstance(data, dict):
        raise CatalogFormatError("Catalog must be a mapping of sections")

    return InMemoryCatalog(
        diet_plans=_parse_section(data, "diet_plans", parse_diet_plan),
        workout_plans=_parse_section(data, "workout_plans", parse_workout_plan),
        recipes=_parse_section(data, "recipes", parse_recipe),
        exercise_categories=_parse_section(
            data, "exercise_categories", parse_exercise_category
        ),
        exercises=_parse_section(data, "exercises", parse_exercise),
        foods=_parse_section(data, "foods", parse_food),
    )


def load_catalog(path: Path) -> InMemoryCatalog:
    """Load a YAML catalog file.

    Args:
        path: Path to the YAML catalog

    Returns:
        InMemoryCatalog with the file's plans, recipes, exercises and foods

    Raises:
        FileNotFoundError: If file doesn't exist
        CatalogFormatError: If the file is not valid catalog YAML
    """
    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise CatalogFormatError(f"Invalid YAML in {path}: {e}") from e

    return catalog_from_dict(data)
