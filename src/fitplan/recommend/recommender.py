"""Rank catalog plans against a user profile.

Diet plans are narrowed by goal and dietary preference, then ordered by how
close their daily calories are to the profile's target. Workout plans are
narrowed by goal and ordered with the difficulty that suits the profile's
activity level first.

The goal always wins over secondary preferences: if no plan matches both,
the goal-only set is used instead of returning nothing.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from fitplan.catalog.models import DietPlan, PlanCandidate, WorkoutPlan
from fitplan.profiles.body_calc import (
    DifficultyLevel,
    UserProfile,
    compute_calorie_target,
    difficulty_for_activity,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 3
ALL = "all"


def _goal_matches(candidates: Sequence[PlanCandidate], profile: UserProfile) -> list:
    return [c for c in candidates if c.goal_type == profile.goal_type]


def recommend_diet_plans(
    plans: Sequence[DietPlan],
    profile: UserProfile,
    limit: int = DEFAULT_LIMIT,
) -> list[DietPlan]:
    """Recommend diet plans for a profile.

    Args:
        plans: Catalog diet plans (not modified)
        profile: User profile
        limit: Maximum number of plans to return

    Returns:
        Up to ``limit`` plans, closest calorie target first.

    Raises:
        InvalidProfileError: If the profile fails validation
    """
    goal_plans = _goal_matches(plans, profile)
    if not goal_plans:
        return []

    candidates = goal_plans
    if profile.dietary_preferences:
        preferred = [p for p in goal_plans if p.diet_type in profile.dietary_preferences]
        if preferred:
            candidates = preferred
        else:
            logger.info(
                "No %s plans match dietary preferences %s, using goal-only matches",
                profile.goal_type.value,
                sorted(profile.dietary_preferences),
            )

    target = compute_calorie_target(profile).target_calories

    # sorted() is stable, so equal distances keep catalog order
    ranked = sorted(candidates, key=lambda p: abs(p.daily_calories - target))
    return ranked[:limit]


def preferred_difficulty(profile: UserProfile) -> DifficultyLevel:
    """Explicit difficulty preference, else the one implied by activity level."""
    if profile.preferred_difficulty is not None:
        return profile.preferred_difficulty
    return difficulty_for_activity(profile.activity_level)


def recommend_workout_plans(
    plans: Sequence[WorkoutPlan],
    profile: UserProfile,
    limit: int = DEFAULT_LIMIT,
) -> list[WorkoutPlan]:
    """Recommend workout plans for a profile.

    Args:
        plans: Catalog workout plans (not modified)
        profile: User profile
        limit: Maximum number of plans to return

    Returns:
        Up to ``limit`` plans, matching difficulty first.
    """
    goal_plans = _goal_matches(plans, profile)
    if not goal_plans:
        return []

    difficulty = preferred_difficulty(profile)
    matching = [p for p in goal_plans if p.difficulty_level == difficulty]
    if matching:
        candidates = matching
    else:
        logger.info(
            "No %s plans at %s difficulty, using goal-only matches",
            profile.goal_type.value,
            difficulty.value,
        )
        candidates = goal_plans

    ranked = sorted(candidates, key=lambda p: p.difficulty_level != difficulty)
    return ranked[:limit]


def recommend(
    candidates: Sequence[PlanCandidate],
    profile: UserProfile,
    limit: int = DEFAULT_LIMIT,
) -> list[PlanCandidate]:
    """Recommend diet or workout plans, depending on the candidate type.

    Raises:
        TypeError: If the candidates mix diet and workout plans
    """
    if not candidates:
        return []

    if all(isinstance(c, DietPlan) for c in candidates):
        return recommend_diet_plans(candidates, profile, limit)  # type: ignore[arg-type]
    if all(isinstance(c, WorkoutPlan) for c in candidates):
        return recommend_workout_plans(candidates, profile, limit)  # type: ignore[arg-type]

    raise TypeError("Candidates must be all DietPlan or all WorkoutPlan")


def filter_diet_plans(
    plans: Sequence[DietPlan],
    goal: str = ALL,
    diet_type: str = ALL,
) -> list[DietPlan]:
    """Filter diet plans by goal and diet type ("all" disables a filter)."""
    return [
        p for p in plans
        if (goal == ALL or p.goal_type.value == goal)
        and (diet_type == ALL or p.diet_type == diet_type)
    ]


def filter_workout_plans(
    plans: Sequence[WorkoutPlan],
    goal: str = ALL,
    difficulty: Optional[str] = ALL,
) -> list[WorkoutPlan]:
    """Filter workout plans by goal and difficulty ("all" disables a filter)."""
    return [
        p for p in plans
        if (goal == ALL or p.goal_type.value == goal)
        and (difficulty in (ALL, None) or p.difficulty_level.value == difficulty)
    ]
