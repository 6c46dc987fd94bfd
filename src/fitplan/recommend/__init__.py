"""Plan recommendation against a user profile."""

from __future__ import annotations

from fitplan.recommend.recommender import (
    filter_diet_plans,
    filter_workout_plans,
    recommend,
    recommend_diet_plans,
    recommend_workout_plans,
)

__all__ = [
    "filter_diet_plans",
    "filter_workout_plans",
    "recommend",
    "recommend_diet_plans",
    "recommend_workout_plans",
]
