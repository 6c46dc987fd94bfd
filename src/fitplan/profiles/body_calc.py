"""Body metrics calculator for daily calorie and macro targets.

Calculates BMR, TDEE and a goal-adjusted calorie target from a user
profile, then splits the target into protein/carbs/fat grams for a diet
type.

Uses Mifflin-St Jeor equation for BMR as it's widely validated for
calculating resting metabolic rate.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional

from fitplan.data.macro_splits import DEFAULT_DIET_TYPE, macro_grams, round_half_up


class InvalidProfileError(ValueError):
    """Raised when a profile cannot produce meaningful energy estimates."""


class Sex(Enum):
    """Biological sex for BMR calculation."""
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Activity level multipliers for TDEE calculation."""
    SEDENTARY = "sedentary"                  # Little or no exercise
    LIGHTLY_ACTIVE = "lightly_active"        # Light exercise 1-3 days/week
    MODERATELY_ACTIVE = "moderately_active"  # Moderate exercise 3-5 days/week
    VERY_ACTIVE = "very_active"              # Hard exercise 6-7 days/week
    EXTREMELY_ACTIVE = "extremely_active"    # Very hard exercise, physical job


class GoalType(Enum):
    """Body composition goal."""
    WEIGHT_LOSS = "weight_loss"      # 500 cal deficit
    MUSCLE_GAIN = "muscle_gain"      # 300 cal surplus
    MAINTENANCE = "maintenance"      # TDEE
    TONING = "toning"                # TDEE, workout catalogs only


class DifficultyLevel(Enum):
    """Workout difficulty tiers."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# Activity level multipliers (Harris-Benedict activity factors)
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

DEFAULT_ACTIVITY_MULTIPLIER = 1.2

# Calorie adjustments by goal (deficit or surplus from TDEE)
GOAL_ADJUSTMENTS = {
    GoalType.WEIGHT_LOSS: -500,
    GoalType.MUSCLE_GAIN: 300,
    GoalType.MAINTENANCE: 0,
    GoalType.TONING: 0,
}

# Absolute floor applied to weight loss targets before the per-sex floor
WEIGHT_LOSS_FLOOR = 1200

# Minimum safe intake (never below 1200 for women, 1500 for men)
GENDER_FLOORS = {
    Sex.MALE: 1500,
    Sex.FEMALE: 1200,
}

ACTIVITY_DIFFICULTY = {
    ActivityLevel.SEDENTARY: DifficultyLevel.BEGINNER,
    ActivityLevel.LIGHTLY_ACTIVE: DifficultyLevel.BEGINNER,
    ActivityLevel.MODERATELY_ACTIVE: DifficultyLevel.INTERMEDIATE,
    ActivityLevel.VERY_ACTIVE: DifficultyLevel.ADVANCED,
    ActivityLevel.EXTREMELY_ACTIVE: DifficultyLevel.ADVANCED,
}


def _parse_enum(enum_cls, value: Any, field_name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        options = ", ".join(member.value for member in enum_cls)
        raise InvalidProfileError(
            f"Invalid {field_name} '{value}'. Expected one of: {options}"
        ) from None


def _parse_activity(value: Any) -> ActivityLevel | str:
    if isinstance(value, ActivityLevel):
        return value
    try:
        return ActivityLevel(str(value).strip().lower())
    except ValueError:
        return str(value)


@dataclass(frozen=True)
class UserProfile:
    """Immutable inputs to the calorie model and recommenders.

    Enum fields also accept their string values, which are coerced on
    construction. ``activity_level`` is kept as a string when it isn't one
    of the known levels; such profiles are scored with the sedentary
    multiplier.

    Raises:
        InvalidProfileError: If gender, goal or difficulty is unknown.
    """

    gender: Sex
    age: float
    weight_kg: float
    height_cm: float
    activity_level: ActivityLevel | str = ActivityLevel.SEDENTARY
    goal_type: GoalType = GoalType.MAINTENANCE
    dietary_preferences: frozenset[str] = field(default_factory=frozenset)
    preferred_difficulty: Optional[DifficultyLevel] = None

    def __post_init__(self) -> None:
        # Frozen dataclass, so coerced values go through object.__setattr__
        object.__setattr__(self, "gender", _parse_enum(Sex, self.gender, "gender"))
        object.__setattr__(self, "activity_level", _parse_activity(self.activity_level))
        object.__setattr__(
            self, "goal_type", _parse_enum(GoalType, self.goal_type, "goal_type")
        )
        object.__setattr__(
            self, "dietary_preferences", normalize_preferences(self.dietary_preferences)
        )
        if self.preferred_difficulty is not None:
            object.__setattr__(
                self,
                "preferred_difficulty",
                _parse_enum(DifficultyLevel, self.preferred_difficulty, "preferred_difficulty"),
            )

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Build a profile from a plain mapping (YAML file, CLI options).

        Accepts ``weight``/``height`` as aliases of ``weight_kg``/``height_cm``.

        Raises:
            InvalidProfileError: If gender, goal or difficulty is unknown.
        """
        return cls(
            gender=data.get("gender"),
            age=data.get("age"),
            weight_kg=data.get("weight_kg", data.get("weight")),
            height_cm=data.get("height_cm", data.get("height")),
            activity_level=data.get("activity_level", ActivityLevel.SEDENTARY.value),
            goal_type=data.get("goal_type", GoalType.MAINTENANCE.value),
            dietary_preferences=data.get("dietary_preferences"),
            preferred_difficulty=data.get("preferred_difficulty"),
        )


def normalize_preferences(preferences: Optional[Iterable[str] | str]) -> frozenset[str]:
    """Lowercase and strip diet-type preference tags.

    A single string is one tag, not a sequence of characters.
    """
    if not preferences:
        return frozenset()
    if isinstance(preferences, str):
        preferences = [preferences]
    return frozenset(
        str(p).strip().lower() for p in preferences if p and str(p).strip()
    )


@dataclass
class CaloriePlan:
    """Calculated energy and macro targets for one profile."""

    bmr: float                  # Basal Metabolic Rate
    tdee: float                 # Total Daily Energy Expenditure
    target_calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    diet_type: str = DEFAULT_DIET_TYPE

    @property
    def adjustment(self) -> int:
        """Calories above/below TDEE after goal and floor adjustments."""
        return self.target_calories - round_half_up(self.tdee)

    def summary(self) -> str:
        """Human-readable summary of targets."""
        lines = [
            f"BMR: {self.bmr:.0f} kcal/day",
            f"TDEE: {self.tdee:.0f} kcal/day",
            f"Target: {self.target_calories} kcal/day ({self.adjustment:+d} from TDEE)",
            f"Macros ({self.diet_type}): {self.protein_g}g protein, "
            f"{self.carbs_g}g carbs, {self.fat_g}g fat",
        ]
        return "\n".join(lines)


def validate_profile(profile: UserProfile) -> None:
    """Check the numeric profile fields needed by the BMR equation.

    Raises:
        InvalidProfileError: If age, weight or height is missing,
            non-numeric, non-finite or not positive.
    """
    for name in ("age", "weight_kg", "height_cm"):
        value = getattr(profile, name)
        if value is None:
            raise InvalidProfileError(f"Profile is missing '{name}'")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidProfileError(f"'{name}' must be a number, got {value!r}")
        if not math.isfinite(value) or value <= 0:
            raise InvalidProfileError(f"'{name}' must be positive, got {value}")


def calculate_bmr(
    age: float,
    sex: Sex,
    height_cm: float,
    weight_kg: float,
) -> float:
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Args:
        age: Age in years
        sex: Biological sex
        height_cm: Height in centimeters
        weight_kg: Weight in kilograms

    Returns:
        BMR in calories per day
    """
    if sex == Sex.MALE:
        return (10 * weight_kg) + (6.25 * height_cm) - (5 * age) + 5
    return (10 * weight_kg) + (6.25 * height_cm) - (5 * age) - 161


def activity_multiplier(activity_level: ActivityLevel | str) -> float:
    """Look up the TDEE multiplier, defaulting to sedentary for unknown levels."""
    if not isinstance(activity_level, ActivityLevel):
        try:
            activity_level = ActivityLevel(str(activity_level).strip().lower())
        except ValueError:
            return DEFAULT_ACTIVITY_MULTIPLIER
    return ACTIVITY_MULTIPLIERS[activity_level]


def calculate_tdee(
    bmr: float,
    activity_level: ActivityLevel | str,
) -> float:
    """Calculate Total Daily Energy Expenditure.

    Args:
        bmr: Basal Metabolic Rate
        activity_level: Activity level

    Returns:
        TDEE in calories per day
    """
    return bmr * activity_multiplier(activity_level)


def gender_floor(sex: Sex) -> int:
    """Minimum daily calorie target for the given sex."""
    return GENDER_FLOORS[sex]


def difficulty_for_activity(activity_level: ActivityLevel | str) -> DifficultyLevel:
    """Map an activity level to the workout difficulty it suggests."""
    if not isinstance(activity_level, ActivityLevel):
        try:
            activity_level = ActivityLevel(str(activity_level).strip().lower())
        except ValueError:
            return DifficultyLevel.BEGINNER
    return ACTIVITY_DIFFICULTY[activity_level]


def goal_adjusted_calories(tdee: float, goal: GoalType, sex: Sex) -> int:
    """Apply the goal deficit/surplus and the per-sex minimum to a TDEE."""
    target = tdee + GOAL_ADJUSTMENTS.get(goal, 0)
    if goal == GoalType.WEIGHT_LOSS:
        target = max(WEIGHT_LOSS_FLOOR, target)
    return max(round_half_up(target), gender_floor(sex))


def compute_calorie_target(
    profile: UserProfile,
    diet_type: Optional[str] = None,
) -> CaloriePlan:
    """Calculate BMR, TDEE, target calories and macro grams for a profile.

    Args:
        profile: User profile
        diet_type: Diet type whose macro split is applied (default "balanced")

    Returns:
        CaloriePlan with the recomputed targets

    Raises:
        InvalidProfileError: If the profile fails validation
    """
    validate_profile(profile)

    bmr = calculate_bmr(profile.age, profile.gender, profile.height_cm, profile.weight_kg)
    tdee = calculate_tdee(bmr, profile.activity_level)
    target = goal_adjusted_calories(tdee, profile.goal_type, profile.gender)

    diet = (diet_type or DEFAULT_DIET_TYPE).lower()
    grams = macro_grams(target, diet)

    return CaloriePlan(
        bmr=bmr,
        tdee=tdee,
        target_calories=target,
        protein_g=grams.protein_g,
        carbs_g=grams.carbs_g,
        fat_g=grams.fat_g,
        diet_type=diet,
    )


def calorie_plan_to_dict(plan: CaloriePlan) -> dict:
    """Convert CaloriePlan to dict for JSON output."""
    return {
        "calories": {
            "target": plan.target_calories,
            "adjustment": plan.adjustment,
        },
        "macros": {
            "diet_type": plan.diet_type,
            "protein_g": plan.protein_g,
            "carbs_g": plan.carbs_g,
            "fat_g": plan.fat_g,
        },
        "reference": {
            "bmr": round(plan.bmr, 1),
            "tdee": round(plan.tdee, 1),
        },
    }
