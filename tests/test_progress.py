"""Tests for nutrition and progress summaries."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from fitplan.tracking import (
    DailyIntake,
    LoggedFood,
    LoggedMeal,
    MealHistoryEntry,
    WeightEntry,
    WorkoutSession,
    calorie_history_stats,
    daily_nutrition_summary,
    meal_history_stats,
    projected_weight_change_lbs,
    weight_change,
    weight_trend,
    workout_totals,
)
from fitplan.tracking.progress import time_scaled_alpha

TODAY = date(2024, 3, 1)


def _days(*pairs):
    return [
        DailyIntake(date=TODAY + timedelta(days=i), calories=cal, goal=goal, protein=100)
        for i, (cal, goal) in enumerate(pairs)
    ]


class TestDailyNutritionSummary:
    """Tests for one day's meal totals."""

    def test_totals_scale_by_servings(self) -> None:
        meals = [
            LoggedMeal("breakfast", TODAY, [LoggedFood("Oats", 150, 5, 27, 3, servings=2)]),
            LoggedMeal("lunch", TODAY, [
                LoggedFood("Chicken", 200, 40, 0, 4),
                LoggedFood("Rice", 200, 4, 45, 0.5),
            ]),
        ]
        summary = daily_nutrition_summary(meals)
        assert summary.totals.calories == pytest.approx(700)
        assert summary.totals.protein == pytest.approx(54)
        assert summary.by_meal["breakfast"].carbs == pytest.approx(54)
        assert summary.by_meal["lunch"].calories == pytest.approx(400)

    def test_empty(self) -> None:
        summary = daily_nutrition_summary([])
        assert summary.totals.calories == 0
        assert summary.by_meal == {}


class TestCalorieHistoryStats:
    """Tests for intake adherence over several days."""

    def test_under_and_over(self) -> None:
        stats = calorie_history_stats(_days((1800, 2000), (2100, 2000), (2000, 2000)))
        assert stats.days_under_goal == 2
        assert stats.days_over_goal == 1
        assert stats.average_calories == 1967
        assert stats.calorie_deficit == 100
        assert stats.average_protein == 100

    def test_surplus_is_negative(self) -> None:
        stats = calorie_history_stats(_days((2500, 2000)))
        assert stats.calorie_deficit == -500

    def test_empty(self) -> None:
        stats = calorie_history_stats([])
        assert stats.average_calories == 0
        assert stats.days_under_goal == 0

    def test_projected_change(self) -> None:
        days = _days(*[(1500, 2000)] * 7)
        assert projected_weight_change_lbs(days) == 1.0


class TestMealHistoryStats:
    """Tests for completed plan meals."""

    def test_per_day_and_per_meal_averages(self) -> None:
        entries = [
            MealHistoryEntry(TODAY, 500, protein=30),
            MealHistoryEntry(TODAY, 700, protein=40),
            MealHistoryEntry(TODAY + timedelta(days=1), 600, protein=20),
        ]
        stats = meal_history_stats(entries)
        assert stats.total_meals == 3
        assert stats.total_calories == 1800
        assert stats.avg_calories_per_day == 900
        assert stats.avg_protein == 30

    def test_empty(self) -> None:
        assert meal_history_stats([]).total_meals == 0


class TestWeight:
    """Tests for weight change and trend."""

    def test_change_uses_date_order(self) -> None:
        history = [
            WeightEntry(TODAY + timedelta(days=7), 79.0),
            WeightEntry(TODAY, 81.5),
        ]
        assert weight_change(history) == pytest.approx(-2.5)

    def test_change_needs_two_entries(self) -> None:
        assert weight_change([WeightEntry(TODAY, 80)]) == 0.0

    def test_trend_seeded_by_first(self) -> None:
        trend = weight_trend([WeightEntry(TODAY, 80), WeightEntry(TODAY + timedelta(days=1), 81)])
        assert trend[0] == 80
        assert trend[1] == pytest.approx(80.1)

    def test_trend_gap_increases_weight(self) -> None:
        trend = weight_trend([WeightEntry(TODAY, 80), WeightEntry(TODAY + timedelta(days=3), 81)])
        assert trend[1] == pytest.approx(80 + time_scaled_alpha(0.1, 3))

    def test_trend_empty(self) -> None:
        assert weight_trend([]) == []

    @pytest.mark.parametrize("days, expected", [(1, 0.1), (0, 0.1), (-2, 0.1)])
    def test_time_scaled_alpha(self, days, expected) -> None:
        assert time_scaled_alpha(0.1, days) == pytest.approx(expected)


class TestWorkoutTotals:
    """Tests for workout sums."""

    def test_totals(self) -> None:
        sessions = [
            WorkoutSession(TODAY, 45, 300),
            WorkoutSession(TODAY + timedelta(days=2), 30, 250),
        ]
        totals = workout_totals(sessions)
        assert totals.total_workouts == 2
        assert totals.total_minutes == 75
        assert totals.total_calories_burned == 550

    def test_empty(self) -> None:
        assert workout_totals([]).total_workouts == 0
