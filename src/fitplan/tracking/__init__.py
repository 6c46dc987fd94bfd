"""Nutrition and progress tracking summaries.

Key components:
- Daily nutrition totals per meal type
- Calorie history adherence (days under/over goal, net deficit)
- Weight change and EMA weight trend
- Workout totals
"""

from __future__ import annotations

from fitplan.tracking.models import (
    DailyIntake,
    LoggedFood,
    LoggedMeal,
    MealHistoryEntry,
    WeightEntry,
    WorkoutSession,
)
from fitplan.tracking.progress import (
    calorie_history_stats,
    daily_nutrition_summary,
    meal_history_stats,
    projected_weight_change_lbs,
    weight_change,
    weight_trend,
    workout_totals,
)

__all__ = [
    "DailyIntake",
    "LoggedFood",
    "LoggedMeal",
    "MealHistoryEntry",
    "WeightEntry",
    "WorkoutSession",
    "calorie_history_stats",
    "daily_nutrition_summary",
    "meal_history_stats",
    "projected_weight_change_lbs",
    "weight_change",
    "weight_trend",
    "workout_totals",
]
