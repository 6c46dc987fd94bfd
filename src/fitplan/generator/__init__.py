"""Custom diet plan generation.

Recipes are sampled per meal slot per day from the pool that fits the
chosen diet type. Randomness is injected so plans are reproducible.
"""

from __future__ import annotations

from fitplan.generator.models import (
    DayNutrition,
    GeneratedPlan,
    MealSlot,
    PlanDay,
    PlanPreferences,
)
from fitplan.generator.planner import (
    build_rng,
    expand_plan,
    generate_custom_plan,
    plan_nutrition,
)

__all__ = [
    "DayNutrition",
    "GeneratedPlan",
    "MealSlot",
    "PlanDay",
    "PlanPreferences",
    "build_rng",
    "expand_plan",
    "generate_custom_plan",
    "plan_nutrition",
]
