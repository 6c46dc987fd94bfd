"""Pytest fixtures for fitplan tests."""

from __future__ import annotations

import pytest

from fitplan.data.sample_catalog import sample_catalog
from fitplan.profiles.body_calc import ActivityLevel, GoalType, Sex, UserProfile


@pytest.fixture
def catalog():
    """Fresh copy of the bundled sample catalog."""
    return sample_catalog()


@pytest.fixture
def male_profile():
    """Moderately active man aiming for weight loss (target 2278 kcal)."""
    return UserProfile(
        gender=Sex.MALE,
        age=35,
        weight_kg=85,
        height_cm=178,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        goal_type=GoalType.WEIGHT_LOSS,
    )


@pytest.fixture
def female_profile():
    """Sedentary woman maintaining weight."""
    return UserProfile(
        gender=Sex.FEMALE,
        age=30,
        weight_kg=60,
        height_cm=165,
        activity_level=ActivityLevel.SEDENTARY,
        goal_type=GoalType.MAINTENANCE,
    )


@pytest.fixture
def small_profile():
    """Profile whose target lands on the 1500 kcal male floor."""
    return UserProfile(
        gender=Sex.MALE,
        age=70,
        weight_kg=50,
        height_cm=160,
        activity_level=ActivityLevel.SEDENTARY,
        goal_type=GoalType.WEIGHT_LOSS,
    )


@pytest.fixture
def catalog_yaml(tmp_path):
    """Write a small YAML catalog and return its path."""
    path = tmp_path / "catalog.yaml"
    path.write_text(
        """
diet_plans:
  - id: 10
    name: Lean Cut
    goal_type: weight_loss
    diet_type: low_carb
    daily_calories: 1900
workout_plans:
  - id: 20
    name: Starter Circuit
    goal_type: weight_loss
    difficulty_level: beginner
    focus_areas: [Full Body]
recipes:
  - id: 100
    name: Egg Muffins
    meal_type: breakfast
    diet_types: [low_carb, keto]
    calories: 300
    protein: 20
    carbs: 4
    fat: 22
    ingredients:
      - {name: Eggs, amount: 3, unit: large}
      - Spinach
"""
    )
    return path
