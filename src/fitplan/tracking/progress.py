"""Nutrition and progress summaries.

Pure aggregations over logged meals, daily intake history, weigh-ins and
workouts. Averages are rounded half-up to whole numbers; an empty history
produces an all-zero summary rather than an error.

The weight trend uses an exponentially smoothed moving average:
    T_n = T_{n-1} + smoothing × (W_n - T_{n-1})
with the smoothing factor scaled for gaps between weigh-ins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from fitplan.data.macro_splits import round_half_up
from fitplan.tracking.models import (
    DailyIntake,
    LoggedMeal,
    MealHistoryEntry,
    WeightEntry,
    WorkoutSession,
)

# 3500 calories = 1 lb of body weight
CALORIES_PER_POUND = 3500

DEFAULT_SMOOTHING = 0.1


@dataclass
class NutritionTotals:
    """Calories and macros summed over some foods."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0

    def add(self, calories: float, protein: float, carbs: float, fat: float) -> None:
        self.calories += calories
        self.protein += protein
        self.carbs += carbs
        self.fat += fat


@dataclass
class DailyNutritionSummary:
    """One day's totals, overall and per meal type."""

    totals: NutritionTotals = field(default_factory=NutritionTotals)
    by_meal: dict[str, NutritionTotals] = field(default_factory=dict)


@dataclass
class CalorieHistoryStats:
    """Averages and goal adherence over a run of days."""

    average_calories: int = 0
    average_protein: int = 0
    average_carbs: int = 0
    average_fat: int = 0
    calorie_deficit: int = 0
    days_under_goal: int = 0
    days_over_goal: int = 0


@dataclass
class MealHistoryStats:
    """Totals and averages over completed plan meals."""

    total_meals: int = 0
    total_calories: float = 0.0
    avg_calories_per_day: int = 0
    avg_protein: int = 0
    avg_carbs: int = 0
    avg_fat: int = 0


@dataclass
class WorkoutTotals:
    """Counts and sums over workouts."""

    total_workouts: int = 0
    total_minutes: float = 0.0
    total_calories_burned: float = 0.0


def daily_nutrition_summary(meals: Sequence[LoggedMeal]) -> DailyNutritionSummary:
    """Sum calories and macros for a day's meals, scaling by servings."""
    summary = DailyNutritionSummary()

    for meal in meals:
        meal_totals = summary.by_meal.setdefault(meal.meal_type, NutritionTotals())
        for food in meal.foods:
            values = (
                food.calories * food.servings,
                food.protein * food.servings,
                food.carbs * food.servings,
                food.fat * food.servings,
            )
            summary.totals.add(*values)
            meal_totals.add(*values)

    return summary


def calorie_history_stats(days: Sequence[DailyIntake]) -> CalorieHistoryStats:
    """Summarize intake against goals over several days.

    A day at or below its goal counts as under goal.
    """
    if not days:
        return CalorieHistoryStats()

    n = len(days)
    total_calories = sum(d.calories for d in days)
    total_goal = sum(d.goal for d in days)

    return CalorieHistoryStats(
        average_calories=round_half_up(total_calories / n),
        average_protein=round_half_up(sum(d.protein for d in days) / n),
        average_carbs=round_half_up(sum(d.carbs for d in days) / n),
        average_fat=round_half_up(sum(d.fat for d in days) / n),
        calorie_deficit=round_half_up(total_goal - total_calories),
        days_under_goal=sum(1 for d in days if d.calories <= d.goal),
        days_over_goal=sum(1 for d in days if d.calories > d.goal),
    )


def meal_history_stats(entries: Sequence[MealHistoryEntry]) -> MealHistoryStats:
    """Summarize completed plan meals.

    Calories per day are averaged over distinct dates; macros are averaged
    per meal.
    """
    if not entries:
        return MealHistoryStats()

    total_meals = len(entries)
    total_calories = sum(e.calories for e in entries)
    unique_days = len({e.meal_date for e in entries})

    return MealHistoryStats(
        total_meals=total_meals,
        total_calories=total_calories,
        avg_calories_per_day=round_half_up(total_calories / unique_days),
        avg_protein=round_half_up(sum(e.protein for e in entries) / total_meals),
        avg_carbs=round_half_up(sum(e.carbs for e in entries) / total_meals),
        avg_fat=round_half_up(sum(e.fat for e in entries) / total_meals),
    )


def weight_change(history: Sequence[WeightEntry]) -> float:
    """Latest weight minus earliest weight (0.0 with fewer than two weigh-ins)."""
    if len(history) < 2:
        return 0.0
    ordered = sorted(history, key=lambda e: e.measured_at)
    return ordered[-1].weight - ordered[0].weight


def projected_weight_change_lbs(days: Sequence[DailyIntake]) -> float:
    """Pounds lost (positive) or gained (negative) implied by the calorie balance."""
    deficit = sum(d.goal - d.calories for d in days)
    return round(deficit / CALORIES_PER_POUND, 2)


def time_scaled_alpha(base_alpha: float, days_elapsed: int) -> float:
    """Adjust smoothing factor for non-daily measurements.

    Example:
        >>> time_scaled_alpha(0.1, 3)
        0.271  # = 1 - 0.9^3
    """
    if days_elapsed <= 0:
        days_elapsed = 1
    return 1 - (1 - base_alpha) ** days_elapsed


def weight_trend(
    history: Sequence[WeightEntry],
    smoothing: float = DEFAULT_SMOOTHING,
) -> list[float]:
    """Smoothed weight trend, one value per weigh-in in date order.

    The first weigh-in seeds the trend. Gaps between weigh-ins give the new
    measurement more weight.
    """
    if not history:
        return []

    ordered = sorted(history, key=lambda e: e.measured_at)
    trends = [ordered[0].weight]
    for prev, curr in zip(ordered, ordered[1:]):
        alpha = time_scaled_alpha(smoothing, (curr.measured_at - prev.measured_at).days)
        trends.append(trends[-1] + alpha * (curr.weight - trends[-1]))
    return trends


def workout_totals(sessions: Sequence[WorkoutSession]) -> WorkoutTotals:
    """Count workouts and total their minutes and calories burned."""
    return WorkoutTotals(
        total_workouts=len(sessions),
        total_minutes=sum(s.duration_minutes for s in sessions),
        total_calories_burned=sum(s.calories_burned for s in sessions),
    )
