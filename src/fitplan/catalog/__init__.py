"""Static plan, recipe, exercise and food catalog."""

from __future__ import annotations

from fitplan.catalog.loader import CatalogFormatError, catalog_from_dict, load_catalog
from fitplan.catalog.models import (
    DietPlan,
    DietPlanDay,
    Exercise,
    ExerciseCategory,
    Food,
    Ingredient,
    MealType,
    PlanCandidate,
    PlannedExercise,
    PlannedMeal,
    Recipe,
    WorkoutDay,
    WorkoutPlan,
)
from fitplan.catalog.repository import (
    CatalogProvider,
    InMemoryCatalog,
    RecordNotFoundError,
    estimate_workout_day,
)

__all__ = [
    "CatalogFormatError",
    "CatalogProvider",
    "DietPlan",
    "DietPlanDay",
    "Exercise",
    "ExerciseCategory",
    "Food",
    "InMemoryCatalog",
    "Ingredient",
    "MealType",
    "PlanCandidate",
    "PlannedExercise",
    "PlannedMeal",
    "Recipe",
    "RecordNotFoundError",
    "WorkoutDay",
    "WorkoutPlan",
    "catalog_from_dict",
    "estimate_workout_day",
    "load_catalog",
]
