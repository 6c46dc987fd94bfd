"""Read-only catalog access for plans, recipes, exercises and foods.

Core functions take plain sequences; the catalog provider is how callers
obtain those sequences. ``InMemoryCatalog`` is the only adapter: it is used
by the CLI (bundled sample data or a YAML file) and by tests.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from fitplan.catalog.models import (
    DietPlan,
    DietPlanDay,
    Exercise,
    ExerciseCategory,
    Food,
    MealType,
    PlannedExercise,
    PlannedMeal,
    Recipe,
    WorkoutDay,
    WorkoutPlan,
)

ALL = "all"

# (day, [(prescription, exercise), ...]) in day and order_index order
WorkoutSchedule = list[tuple[WorkoutDay, list[tuple[PlannedExercise, Exercise]]]]
# (day, [(planned meal, recipe), ...]) in day and order_index order
DietSchedule = list[tuple[DietPlanDay, list[tuple[PlannedMeal, Recipe]]]]


class RecordNotFoundError(LookupError):
    """Raised when a catalog id doesn't exist."""


class CatalogProvider(Protocol):
    """Anything that can hand out read-only snapshots of the catalog."""

    def diet_plans(self) -> tuple[DietPlan, ...]: ...

    def workout_plans(self) -> tuple[WorkoutPlan, ...]: ...

    def recipes(self) -> tuple[Recipe, ...]: ...

    def exercise_categories(self) -> tuple[ExerciseCategory, ...]: ...

    def exercises(self) -> tuple[Exercise, ...]: ...

    def foods(self) -> tuple[Food, ...]: ...


def _find(records: Iterable, record_id: int, label: str):
    for record in records:
        if record.id == record_id:
            return record
    raise RecordNotFoundError(f"{label} not found: {record_id}")


def estimate_workout_day(entries: list[tuple[PlannedExercise, Exercise]]) -> tuple[float, float]:
    """Total timed minutes and estimated calories for one workout day.

    Only exercises with a duration count; sets/reps work has no time estimate.
    """
    minutes = 0.0
    calories = 0.0
    for planned, exercise in entries:
        duration = planned.duration_minutes or 0
        minutes += duration
        calories += duration * exercise.calories_per_minute
    return minutes, calories


class InMemoryCatalog:
    """Catalog held in memory as immutable tuples."""

    def __init__(
        self,
        diet_plans: Iterable[DietPlan] = (),
        workout_plans: Iterable[WorkoutPlan] = (),
        recipes: Iterable[Recipe] = (),
        exercise_categories: Iterable[ExerciseCategory] = (),
        exercises: Iterable[Exercise] = (),
        foods: Iterable[Food] = (),
    ):
        self._diet_plans = tuple(diet_plans)
        self._workout_plans = tuple(workout_plans)
        self._recipes = tuple(recipes)
        self._exercise_categories = tuple(exercise_categories)
        self._exercises = tuple(exercises)
        self._foods = tuple(foods)

    def __repr__(self) -> str:
        return (
            f"InMemoryCatalog(diet_plans={len(self._diet_plans)}, "
            f"workout_plans={len(self._workout_plans)}, recipes={len(self._recipes)}, "
            f"exercises={len(self._exercises)}, foods={len(self._foods)})"
        )

    def diet_plans(self) -> tuple[DietPlan, ...]:
        return self._diet_plans

    def workout_plans(self) -> tuple[WorkoutPlan, ...]:
        return self._workout_plans

    def recipes(self) -> tuple[Recipe, ...]:
        return self._recipes

    def exercise_categories(self) -> tuple[ExerciseCategory, ...]:
        return self._exercise_categories

    def exercises(self) -> tuple[Exercise, ...]:
        return self._exercises

    def foods(self) -> tuple[Food, ...]:
        return self._foods

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_recipe(self, recipe_id: int) -> Recipe:
        """Get a recipe by id.

        Raises:
            RecordNotFoundError: If no recipe has this id
        """
        return _find(self._recipes, recipe_id, "Recipe")

    def get_diet_plan(self, plan_id: int) -> DietPlan:
        """Get a diet plan by id.

        Raises:
            RecordNotFoundError: If no diet plan has this id
        """
        return _find(self._diet_plans, plan_id, "Diet plan")

    def get_workout_plan(self, plan_id: int) -> WorkoutPlan:
        """Get a workout plan by id.

        Raises:
            RecordNotFoundError: If no workout plan has this id
        """
        return _find(self._workout_plans, plan_id, "Workout plan")

    def get_exercise_category(self, category_id: int) -> ExerciseCategory:
        return _find(self._exercise_categories, category_id, "Exercise category")

    def get_exercise(self, exercise_id: int) -> Exercise:
        return _find(self._exercises, exercise_id, "Exercise")

    def get_food(self, food_id: int) -> Food:
        return _find(self._foods, food_id, "Food")

    # ------------------------------------------------------------------
    # Plan schedules
    # ------------------------------------------------------------------

    def workout_schedule(self, plan_id: int) -> WorkoutSchedule:
        """Resolve a workout plan's days into their exercises.

        Returns:
            Days sorted by day number, each with (prescription, exercise)
            pairs sorted by order_index.

        Raises:
            RecordNotFoundError: If the plan or a referenced exercise is missing
        """
        plan = self.get_workout_plan(plan_id)
        schedule = []
        for day in sorted(plan.days, key=lambda d: d.day_number):
            planned = sorted(day.exercises, key=lambda e: e.order_index)
            schedule.append((day, [(p, self.get_exercise(p.exercise_id)) for p in planned]))
        return schedule

    def diet_schedule(self, plan_id: int) -> DietSchedule:
        """Resolve a diet plan's days into their recipes.

        Raises:
            RecordNotFoundError: If the plan or a referenced recipe is missing
        """
        plan = self.get_diet_plan(plan_id)
        schedule = []
        for day in sorted(plan.days, key=lambda d: d.day_number):
            meals = sorted(day.meals, key=lambda m: m.order_index)
            schedule.append((day, [(m, self.get_recipe(m.recipe_id)) for m in meals]))
        return schedule

    # ------------------------------------------------------------------
    # Exercise and food queries
    # ------------------------------------------------------------------

    def exercises_in_category(self, category_id: int) -> list[Exercise]:
        """Exercises of one category, in catalog order.

        Raises:
            RecordNotFoundError: If the category doesn't exist
        """
        self.get_exercise_category(category_id)
        return [e for e in self._exercises if e.category_id == category_id]

    def search_foods(self, query: str) -> list[Food]:
        """Case-insensitive search over food names and brands.

        An empty query returns no results.
        """
        if not query or not query.strip():
            return []
        return [f for f in self._foods if f.matches(query.strip())]

    # ------------------------------------------------------------------
    # Recipe queries
    # ------------------------------------------------------------------

    def recipes_for_diet_type(self, diet_type: str) -> list[Recipe]:
        return [r for r in self._recipes if r.has_diet_type(diet_type)]

    def recipes_for_meal_type(self, meal_type: MealType | str) -> list[Recipe]:
        meal_type = MealType(meal_type)
        return [r for r in self._recipes if r.meal_type == meal_type]

    def search_recipes(self, query: str) -> list[Recipe]:
        """Case-insensitive search over names, descriptions and ingredients.

        An empty query returns no results.
        """
        if not query or not query.strip():
            return []
        return [r for r in self._recipes if r.mentions(query.strip())]

    def filter_recipes(
        self,
        diet_type: str = ALL,
        meal_type: str = ALL,
        search_term: str = "",
    ) -> list[Recipe]:
        """Filter recipes the way the recipe browser does.

        Args:
            diet_type: Diet type id or "all"
            meal_type: Meal type value or "all"
            search_term: Optional case-insensitive search term

        Returns:
            Recipes matching every given filter, in catalog order.
        """
        results = list(self._recipes)

        if diet_type != ALL:
            results = [r for r in results if r.has_diet_type(diet_type)]

        if meal_type != ALL:
            wanted = MealType(meal_type)
            results = [r for r in results if r.meal_type == wanted]

        if search_term:
            results = [r for r in results if r.mentions(search_term)]

        return results
