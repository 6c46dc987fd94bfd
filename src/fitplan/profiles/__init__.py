"""User profiles and energy target calculation."""

from __future__ import annotations

from fitplan.profiles.body_calc import (
    ActivityLevel,
    CaloriePlan,
    DifficultyLevel,
    GoalType,
    InvalidProfileError,
    Sex,
    UserProfile,
    compute_calorie_target,
)

__all__ = [
    "ActivityLevel",
    "CaloriePlan",
    "DifficultyLevel",
    "GoalType",
    "InvalidProfileError",
    "Sex",
    "UserProfile",
    "compute_calorie_target",
]
