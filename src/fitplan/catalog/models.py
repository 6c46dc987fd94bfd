"""Data models for the static plan and recipe catalog.

Catalog entries are read-only from the point of view of the recommender
and the plan generator; they are built once by a loader and then only
queried.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from fitplan.profiles.body_calc import DifficultyLevel, GoalType


class MealType(Enum):
    """Meal slots within a day, in serving order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class Ingredient:
    """One ingredient line of a recipe."""

    name: str
    amount: float = 0.0
    unit: str = ""
    optional: bool = False


@dataclass(frozen=True)
class Recipe:
    """A single recipe, tagged with the diet types it fits.

    Attributes:
        id: Catalog identifier
        name: Recipe name
        meal_type: Which meal slot this recipe fills
        diet_types: Diet type ids this recipe is suitable for
        calories: Calories per serving
        protein: Protein grams per serving
        carbs: Carbohydrate grams per serving
        fat: Fat grams per serving
        fiber: Fiber grams per serving
        ingredients: Ingredient lines
    """

    id: int
    name: str
    meal_type: MealType
    diet_types: tuple[str, ...] = ()
    description: str = ""
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    prep_time_minutes: int = 0
    cook_time_minutes: int = 0
    servings: int = 1
    ingredients: tuple[Ingredient, ...] = ()
    instructions: tuple[str, ...] = ()

    def has_diet_type(self, diet_type: str) -> bool:
        diet_type = diet_type.strip().lower()
        return any(d.lower() == diet_type for d in self.diet_types)

    def mentions(self, term: str) -> bool:
        """Case-insensitive substring match on name, description or ingredients."""
        term = term.lower()
        return (
            term in self.name.lower()
            or term in self.description.lower()
            or any(term in ing.name.lower() for ing in self.ingredients)
        )

    def contains_ingredient(self, excluded: str) -> bool:
        """True if any ingredient name contains ``excluded`` (case-insensitive)."""
        excluded = excluded.lower()
        return any(excluded in ing.name.lower() for ing in self.ingredients)


@dataclass(frozen=True)
class PlannedMeal:
    """A recipe scheduled on one day of a prebuilt diet plan."""

    recipe_id: int
    servings: float = 1
    order_index: int = 1


@dataclass(frozen=True)
class DietPlanDay:
    """One day of a prebuilt diet plan. Days may have no meals listed yet."""

    day_number: int
    description: str = ""
    meals: tuple[PlannedMeal, ...] = ()


@dataclass(frozen=True)
class DietPlan:
    """A prebuilt diet plan that can be recommended to a user."""

    id: int
    name: str
    goal_type: GoalType
    diet_type: str
    daily_calories: int
    description: str = ""
    duration_days: int = 28
    daily_protein: int = 0
    daily_carbs: int = 0
    daily_fat: int = 0
    days: tuple[DietPlanDay, ...] = ()


@dataclass(frozen=True)
class ExerciseCategory:
    """A group of exercises such as Strength or Cardio."""

    id: int
    name: str
    description: str = ""


# Burn rate used when an exercise doesn't list one
DEFAULT_CALORIES_PER_MINUTE = 5.0


@dataclass(frozen=True)
class Exercise:
    """An exercise from the exercise library.

    Attributes:
        id: Catalog identifier
        name: Exercise name
        category_id: ExerciseCategory this exercise belongs to
        difficulty_level: Difficulty tier
        muscle_group: Muscles worked, as free text
        equipment_needed: Equipment, as free text
        instructions: How to perform the exercise
        calories_per_minute: Approximate burn rate
    """

    id: int
    name: str
    category_id: int
    description: str = ""
    difficulty_level: DifficultyLevel = DifficultyLevel.BEGINNER
    muscle_group: str = ""
    equipment_needed: str = ""
    instructions: str = ""
    calories_per_minute: float = DEFAULT_CALORIES_PER_MINUTE


@dataclass(frozen=True)
class PlannedExercise:
    """An exercise prescribed on one workout day.

    Strength work uses sets and reps; timed work uses ``duration_minutes``.
    """

    exercise_id: int
    order_index: int = 1
    sets: Optional[int] = None
    reps: Optional[int] = None
    duration_minutes: Optional[float] = None
    rest_seconds: Optional[int] = None
    notes: str = ""

    def prescription(self) -> str:
        """Short text such as ``3 x 10`` or ``3 x 1 min``."""
        parts = []
        if self.sets:
            parts.append(f"{self.sets} x")
        if self.reps:
            parts.append(str(self.reps))
        elif self.duration_minutes:
            parts.append(f"{self.duration_minutes:g} min")
        return " ".join(parts)


@dataclass(frozen=True)
class WorkoutDay:
    """One training day of a workout plan."""

    day_number: int
    focus_area: str = ""
    exercises: tuple[PlannedExercise, ...] = ()


@dataclass(frozen=True)
class Food:
    """A single food with nutrition per serving."""

    id: int
    name: str
    brand: str = ""
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    serving_size: float = 1.0
    serving_unit: str = ""
    is_verified: bool = True

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name or brand."""
        term = term.lower()
        return term in self.name.lower() or term in self.brand.lower()


@dataclass(frozen=True)
class WorkoutPlan:
    """A prebuilt workout program that can be recommended to a user."""

    id: int
    name: str
    goal_type: GoalType
    difficulty_level: DifficultyLevel
    description: str = ""
    duration_weeks: int = 8
    days_per_week: int = 3
    focus_areas: tuple[str, ...] = ()
    days: tuple[WorkoutDay, ...] = ()


PlanCandidate = Union[DietPlan, WorkoutPlan]
