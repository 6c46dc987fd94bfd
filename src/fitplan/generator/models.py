"""Data models for generated custom diet plans."""

from __future__ import annotations

from dataclasses import dataclass

from fitplan.catalog.models import MealType


@dataclass(frozen=True)
class PlanPreferences:
    """User choices for a custom plan.

    Attributes:
        diet_type: Diet type id recipes must be tagged with
        excluded_ingredients: Ingredient substrings to avoid (soft constraint)
    """

    diet_type: str = "balanced"
    excluded_ingredients: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        excluded = self.excluded_ingredients
        if isinstance(excluded, str):
            excluded = (excluded,)
        object.__setattr__(self, "diet_type", self.diet_type.strip().lower())
        object.__setattr__(
            self,
            "excluded_ingredients",
            tuple(e.strip() for e in excluded if e and e.strip()),
        )

    @classmethod
    def create(cls, diet_type: str, excluded_ingredients=()) -> "PlanPreferences":
        """Normalize diet type and drop blank exclusions."""
        return cls(diet_type=diet_type, excluded_ingredients=tuple(excluded_ingredients))


@dataclass(frozen=True)
class MealSlot:
    """One recipe assigned to a meal slot on a given day."""

    meal_type: MealType
    recipe_id: int
    servings: int = 1
    order_index: int = 1


@dataclass(frozen=True)
class PlanDay:
    """All meal slots for one day of a plan."""

    day_number: int
    slots: tuple[MealSlot, ...] = ()

    @property
    def description(self) -> str:
        return f"Day {self.day_number} of your custom plan"

    def meal_types(self) -> list[MealType]:
        return [s.meal_type for s in self.slots]


@dataclass(frozen=True)
class GeneratedPlan:
    """A custom multi-day diet plan.

    Attributes:
        id: Plan identifier (derived from the random source)
        goal_type: Goal the calorie target was adjusted for
        diet_type: Diet type used for macros and recipe selection
        daily_calories: Target calories per day
        daily_protein: Protein grams per day
        daily_carbs: Carbohydrate grams per day
        daily_fat: Fat grams per day
        days: One PlanDay per day; days may have missing meals
        exclusions_relaxed: True if excluded ingredients were ignored
            because too few recipes were left
    """

    id: str
    name: str
    description: str
    goal_type: str
    diet_type: str
    daily_calories: int
    daily_protein: int
    daily_carbs: int
    daily_fat: int
    days: tuple[PlanDay, ...] = ()
    duration_days: int = 7
    is_custom: bool = True
    exclusions_relaxed: bool = False
    excluded_ingredients: tuple[str, ...] = ()

    @property
    def recipe_ids(self) -> list[int]:
        return [slot.recipe_id for day in self.days for slot in day.slots]

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dict."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "goal_type": self.goal_type,
            "diet_type": self.diet_type,
            "duration_days": self.duration_days,
            "daily_calories": self.daily_calories,
            "daily_protein": self.daily_protein,
            "daily_carbs": self.daily_carbs,
            "daily_fat": self.daily_fat,
            "is_custom": self.is_custom,
            "exclusions_relaxed": self.exclusions_relaxed,
            "excluded_ingredients": list(self.excluded_ingredients),
            "days": [
                {
                    "day_number": day.day_number,
                    "slots": [
                        {
                            "meal_type": slot.meal_type.value,
                            "recipe_id": slot.recipe_id,
                            "servings": slot.servings,
                            "order_index": slot.order_index,
                        }
                        for slot in day.slots
                    ],
                }
                for day in self.days
            ],
        }


@dataclass
class DayNutrition:
    """Nutrition totals for one day of a plan."""

    day_number: int
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
