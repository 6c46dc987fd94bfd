"""Data models for logged meals, daily intake and progress history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass
class LoggedFood:
    """A food eaten as part of a meal; nutrition values are per serving."""

    name: str
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    servings: float = 1.0


@dataclass
class LoggedMeal:
    """All foods logged for one meal on one date."""

    meal_type: str
    meal_date: date
    foods: list[LoggedFood] = field(default_factory=list)


@dataclass
class MealHistoryEntry:
    """One completed meal from a followed diet plan."""

    meal_date: date
    calories: float
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


@dataclass
class DailyIntake:
    """Totals eaten on one day, with that day's calorie goal."""

    date: date
    calories: float
    goal: float
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


@dataclass
class WeightEntry:
    """A single weigh-in."""

    measured_at: date
    weight: float


@dataclass
class WorkoutSession:
    """A completed workout."""

    performed_at: date
    duration_minutes: float
    calories_burned: float = 0.0
