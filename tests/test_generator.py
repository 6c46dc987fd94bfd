"""Tests for custom diet plan generation."""

from __future__ import annotations

import json
import logging

import pytest

from fitplan.catalog import InMemoryCatalog, MealType, RecordNotFoundError
from fitplan.generator import (
    PlanPreferences,
    build_rng,
    expand_plan,
    generate_custom_plan,
    plan_nutrition,
)
from fitplan.generator.planner import eligible_recipes, meal_types_for_day
from fitplan.profiles.body_calc import InvalidProfileError, UserProfile


class FirstChoiceRng:
    """Deterministic stand-in for random.Random that always picks the first option."""

    def choice(self, seq):
        return seq[0]

    def getrandbits(self, k: int) -> int:
        return 0xABCD


def _generate(profile, catalog, diet_type="balanced", exclude=(), seed=7, **kwargs):
    return generate_custom_plan(
        profile,
        PlanPreferences.create(diet_type, exclude),
        catalog.recipes(),
        build_rng(seed),
        **kwargs,
    )


class TestPlanPreferences:
    """Tests for preference normalization."""

    def test_create_normalizes(self) -> None:
        prefs = PlanPreferences.create(" Keto ", ["  ", "Bacon ", ""])
        assert prefs.diet_type == "keto"
        assert prefs.excluded_ingredients == ("Bacon",)

    def test_defaults(self) -> None:
        prefs = PlanPreferences()
        assert prefs.diet_type == "balanced"
        assert prefs.excluded_ingredients == ()

    def test_direct_construction_normalizes(self, catalog) -> None:
        prefs = PlanPreferences("Keto", "bacon")
        assert prefs.diet_type == "keto"
        assert prefs.excluded_ingredients == ("bacon",)
        pool, _ = eligible_recipes(catalog.recipes(), prefs, min_eligible=1)
        assert [r.id for r in pool] == [7, 11, 15]

    def test_recipe_diet_type_match_ignores_case(self, catalog) -> None:
        assert catalog.get_recipe(3).has_diet_type("KETO")
        assert [r.id for r in catalog.recipes_for_diet_type("Vegan")] == [4, 6, 10, 13]


class TestMealTypesForDay:
    """Tests for the snack threshold."""

    def test_at_threshold_no_snack(self) -> None:
        assert meal_types_for_day(1500) == [MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER]

    def test_above_threshold_adds_snack(self) -> None:
        assert meal_types_for_day(1501)[-1] == MealType.SNACK

    def test_custom_threshold(self) -> None:
        assert len(meal_types_for_day(1800, snack_threshold=2000)) == 3


class TestEligibleRecipes:
    """Tests for building the recipe pool."""

    def test_diet_type_filter(self, catalog) -> None:
        pool, relaxed = eligible_recipes(catalog.recipes(), PlanPreferences.create("vegan"))
        assert [r.id for r in pool] == [4, 6, 10, 13]
        assert not relaxed

    def test_exclusions_kept_when_pool_large_enough(self, catalog) -> None:
        prefs = PlanPreferences.create("balanced", ["egg"])
        pool, relaxed = eligible_recipes(catalog.recipes(), prefs, min_eligible=5)
        assert 2 not in [r.id for r in pool]
        assert not relaxed

    def test_exclusions_relaxed_when_pool_small(self, catalog, caplog) -> None:
        prefs = PlanPreferences.create("balanced", ["egg"])
        with caplog.at_level(logging.WARNING, logger="fitplan.generator.planner"):
            pool, relaxed = eligible_recipes(catalog.recipes(), prefs)
        assert relaxed
        assert 2 in [r.id for r in pool]
        assert "ignoring ingredient exclusions" in caplog.text

    def test_exclusion_matching_nothing_is_not_relaxed(self, catalog) -> None:
        prefs = PlanPreferences.create("vegan", ["tofu"])
        pool, relaxed = eligible_recipes(catalog.recipes(), prefs)
        assert len(pool) == 4
        assert not relaxed

    def test_exclusion_is_case_insensitive(self, catalog) -> None:
        prefs = PlanPreferences.create("keto", ["BACON"])
        pool, _ = eligible_recipes(catalog.recipes(), prefs, min_eligible=1)
        assert 3 not in [r.id for r in pool]


class TestGenerateCustomPlan:
    """Tests for generate_custom_plan."""

    def test_seven_days_four_meals(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog)
        assert plan.duration_days == 7
        assert [d.day_number for d in plan.days] == list(range(1, 8))
        for day in plan.days:
            assert day.meal_types() == [
                MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER, MealType.SNACK,
            ]
            assert [s.order_index for s in day.slots] == [1, 2, 3, 4]
            assert all(s.servings == 1 for s in day.slots)

    def test_targets_match_calorie_model(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog, diet_type="keto")
        assert plan.daily_calories == 2278
        # 2278 keto: 142.375 -> 142, 28.475 -> 28, 177.18 -> 177
        assert (plan.daily_protein, plan.daily_carbs, plan.daily_fat) == (142, 28, 177)

    def test_metadata(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog, diet_type="keto")
        assert plan.name == "Custom Ketogenic Plan"
        assert plan.description == "A custom keto diet plan designed for weight loss."
        assert plan.goal_type == "weight_loss"
        assert plan.diet_type == "keto"
        assert plan.is_custom
        assert plan.id.startswith("custom-plan-")

    def test_no_snack_at_floor(self, catalog, small_profile) -> None:
        plan = _generate(small_profile, catalog)
        assert plan.daily_calories == 1500
        assert all(MealType.SNACK not in d.meal_types() for d in plan.days)

    def test_recipes_fit_slot_and_diet(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog, diet_type="low_carb", seed=3)
        for day in plan.days:
            for slot in day.slots:
                recipe = catalog.get_recipe(slot.recipe_id)
                assert recipe.meal_type == slot.meal_type
                assert recipe.has_diet_type("low_carb")

    def test_same_seed_same_plan(self, catalog, male_profile) -> None:
        first = _generate(male_profile, catalog, seed=1234)
        second = _generate(male_profile, catalog, seed=1234)
        assert first == second

    def test_injected_rng(self, catalog, male_profile) -> None:
        plan = generate_custom_plan(
            male_profile,
            PlanPreferences.create("balanced"),
            catalog.recipes(),
            FirstChoiceRng(),
        )
        assert plan.id == "custom-plan-0000abcd"
        assert plan.days[0].slots[0].recipe_id == 1
        assert plan.recipe_ids[:4] == [1, 5, 9, 13]

    def test_vegan_small_pool_still_fills_week(self, catalog, male_profile) -> None:
        """Four vegan recipes is below the usual minimum; every day is still filled."""
        plan = _generate(male_profile, catalog, diet_type="vegan")
        assert len(plan.days) == 7
        assert not plan.exclusions_relaxed
        for day in plan.days:
            assert [s.recipe_id for s in day.slots] == [4, 6, 10, 13]

    def test_missing_meal_type_is_omitted(self, catalog, male_profile) -> None:
        """No Mediterranean snack exists, so the snack slot is skipped."""
        plan = _generate(male_profile, catalog, diet_type="mediterranean")
        for day in plan.days:
            assert day.meal_types() == [MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER]

    def test_unknown_diet_gives_empty_days(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog, diet_type="carnivore")
        assert len(plan.days) == 7
        assert plan.recipe_ids == []
        assert plan.name == "Custom Carnivore Plan"

    def test_relaxed_exclusions_flagged(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog, exclude=["egg"])
        assert plan.exclusions_relaxed
        assert plan.excluded_ingredients == ("egg",)

    def test_strict_exclusions_respected(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog, exclude=["yogurt"], min_eligible=3)
        assert not plan.exclusions_relaxed
        assert 1 not in plan.recipe_ids
        assert 14 not in plan.recipe_ids

    def test_custom_days(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog, days=3)
        assert plan.duration_days == 3
        assert len(plan.days) == 3

    def test_recipes_not_mutated(self, catalog, male_profile) -> None:
        recipes = list(catalog.recipes())
        snapshot = list(recipes)
        generate_custom_plan(
            male_profile, PlanPreferences.create("balanced", ["egg"]), recipes, build_rng(5)
        )
        assert recipes == snapshot

    def test_invalid_profile(self, catalog) -> None:
        profile = UserProfile.from_dict({"gender": "male", "age": 30, "weight": 0, "height": 180})
        with pytest.raises(InvalidProfileError):
            _generate(profile, catalog)

    def test_to_dict_is_json_serializable(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog)
        data = json.loads(json.dumps(plan.to_dict()))
        assert data["daily_calories"] == 2278
        assert len(data["days"]) == 7
        assert data["days"][0]["slots"][0]["meal_type"] == "breakfast"


class TestExpandPlan:
    """Tests for resolving plan slots into recipes."""

    def test_expand(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog, diet_type="vegan")
        expanded = expand_plan(plan, catalog)
        assert len(expanded) == 7
        day, meals = expanded[0]
        assert day.day_number == 1
        assert day.description == "Day 1 of your custom plan"
        assert [recipe.name for _, recipe in meals][0] == "Vegan Overnight Oats"

    def test_missing_recipe(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog)
        with pytest.raises(RecordNotFoundError):
            expand_plan(plan, InMemoryCatalog())

    def test_nutrition_totals(self, catalog, male_profile) -> None:
        plan = _generate(male_profile, catalog, diet_type="vegan")
        totals = plan_nutrition(plan, catalog)
        assert len(totals) == 7
        # 350 + 450 + 400 + 200
        assert totals[0].calories == pytest.approx(1400)
        assert totals[0].protein == pytest.approx(10 + 15 + 18 + 5)
