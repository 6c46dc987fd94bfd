"""Tests for catalog models, queries and the YAML loader."""

from __future__ import annotations

import pytest

from fitplan.catalog import (
    CatalogFormatError,
    InMemoryCatalog,
    MealType,
    PlannedExercise,
    RecordNotFoundError,
    catalog_from_dict,
    estimate_workout_day,
    load_catalog,
)
from fitplan.profiles.body_calc import DifficultyLevel, GoalType


class TestSampleCatalog:
    """Sanity checks on the bundled data."""

    def test_counts(self, catalog) -> None:
        assert len(catalog.diet_plans()) == 5
        assert len(catalog.workout_plans()) == 5
        assert len(catalog.recipes()) == 15

    def test_unique_ids(self, catalog) -> None:
        ids = [r.id for r in catalog.recipes()]
        assert len(ids) == len(set(ids))

    def test_every_meal_type_present(self, catalog) -> None:
        assert {r.meal_type for r in catalog.recipes()} == set(MealType)

    def test_repr(self, catalog) -> None:
        assert repr(catalog) == (
            "InMemoryCatalog(diet_plans=5, workout_plans=5, recipes=15, exercises=15, foods=10)"
        )

    def test_fresh_instance_each_call(self, catalog) -> None:
        from fitplan.data.sample_catalog import sample_catalog

        assert sample_catalog() is not catalog
        assert sample_catalog().recipes() == catalog.recipes()


class TestLookups:
    """Tests for id lookups."""

    def test_get_recipe(self, catalog) -> None:
        assert catalog.get_recipe(3).name == "Keto Breakfast Bowl"

    def test_get_recipe_missing(self, catalog) -> None:
        with pytest.raises(RecordNotFoundError, match="Recipe not found: 999"):
            catalog.get_recipe(999)

    def test_get_diet_plan(self, catalog) -> None:
        plan = catalog.get_diet_plan(3)
        assert plan.diet_type == "keto"
        assert plan.goal_type == GoalType.WEIGHT_LOSS

    def test_get_workout_plan(self, catalog) -> None:
        plan = catalog.get_workout_plan(3)
        assert plan.goal_type == GoalType.TONING
        assert plan.difficulty_level == DifficultyLevel.INTERMEDIATE

    def test_missing_plans(self, catalog) -> None:
        with pytest.raises(RecordNotFoundError):
            catalog.get_diet_plan(42)
        with pytest.raises(RecordNotFoundError):
            catalog.get_workout_plan(42)

    def test_not_found_is_lookup_error(self) -> None:
        assert issubclass(RecordNotFoundError, LookupError)


class TestRecipeQueries:
    """Tests for recipe filtering and search."""

    def test_by_diet_type(self, catalog) -> None:
        assert [r.id for r in catalog.recipes_for_diet_type("vegan")] == [4, 6, 10, 13]

    def test_by_meal_type(self, catalog) -> None:
        assert [r.id for r in catalog.recipes_for_meal_type("snack")] == [13, 14, 15]
        assert [r.id for r in catalog.recipes_for_meal_type(MealType.BREAKFAST)] == [1, 2, 3, 4]

    def test_search_name(self, catalog) -> None:
        assert [r.id for r in catalog.search_recipes("keto")] == [3, 7, 11, 15]

    def test_search_ingredient_case_insensitive(self, catalog) -> None:
        ids = [r.id for r in catalog.search_recipes("CHICKPEAS")]
        assert ids == [6, 8]

    def test_search_empty_query(self, catalog) -> None:
        assert catalog.search_recipes("") == []
        assert catalog.search_recipes("   ") == []

    def test_filter_all(self, catalog) -> None:
        assert len(catalog.filter_recipes()) == 15

    def test_filter_combined(self, catalog) -> None:
        results = catalog.filter_recipes(diet_type="keto", meal_type="dinner")
        assert [r.id for r in results] == [11]

    def test_filter_with_search(self, catalog) -> None:
        results = catalog.filter_recipes(diet_type="balanced", search_term="yogurt")
        assert [r.id for r in results] == [1, 14]

    def test_filter_unknown_meal_type(self, catalog) -> None:
        with pytest.raises(ValueError):
            catalog.filter_recipes(meal_type="brunch")

    def test_contains_ingredient(self, catalog) -> None:
        recipe = catalog.get_recipe(3)
        assert recipe.contains_ingredient("bacon")
        assert recipe.contains_ingredient("EGG")
        assert not recipe.contains_ingredient("tofu")


class TestLoader:
    """Tests for loading catalogs from YAML."""

    def test_load_file(self, catalog_yaml) -> None:
        catalog = load_catalog(catalog_yaml)
        assert isinstance(catalog, InMemoryCatalog)
        plan = catalog.get_diet_plan(10)
        assert plan.daily_calories == 1900
        assert plan.duration_days == 28

        workout = catalog.get_workout_plan(20)
        assert workout.focus_areas == ("Full Body",)
        assert workout.days_per_week == 3

    def test_ingredients_accept_plain_names(self, catalog_yaml) -> None:
        recipe = load_catalog(catalog_yaml).get_recipe(100)
        assert [i.name for i in recipe.ingredients] == ["Eggs", "Spinach"]
        assert recipe.ingredients[0].amount == 3
        assert recipe.diet_types == ("low_carb", "keto")

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("recipes: [unclosed\n")
        with pytest.raises(CatalogFormatError, match="Invalid YAML"):
            load_catalog(path)

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        catalog = load_catalog(path)
        assert catalog.recipes() == ()

    def test_missing_field_reports_entry(self) -> None:
        with pytest.raises(CatalogFormatError, match=r"recipes\[1\]"):
            catalog_from_dict({
                "recipes": [
                    {"id": 1, "name": "Toast", "meal_type": "breakfast"},
                    {"id": 2, "name": "No meal type"},
                ]
            })

    def test_bad_enum_value(self) -> None:
        with pytest.raises(CatalogFormatError, match=r"workout_plans\[0\]"):
            catalog_from_dict({
                "workout_plans": [
                    {"id": 1, "name": "X", "goal_type": "weight_loss", "difficulty_level": "expert"},
                ]
            })

    def test_section_must_be_list(self) -> None:
        with pytest.raises(CatalogFormatError, match="must be a list"):
            catalog_from_dict({"diet_plans": {"id": 1}})

    def test_top_level_must_be_mapping(self) -> None:
        with pytest.raises(CatalogFormatError):
            catalog_from_dict(["not", "a", "mapping"])


class TestPlanSchedules:
    """Tests for resolving plan days into exercises and recipes."""

    def test_workout_days_in_order(self, catalog) -> None:
        schedule = catalog.workout_schedule(1)
        assert [day.day_number for day, _ in schedule] == [1, 3, 5]
        assert [day.focus_area for day, _ in schedule] == ["Full Body", "Cardio", "Full Body"]

    def test_workout_exercises_in_order(self, catalog) -> None:
        _, entries = catalog.workout_schedule(1)[0]
        assert [e.name for _, e in entries] == ["Push-ups", "Squats", "Lunges", "Plank"]
        assert [p.order_index for p, _ in entries] == [1, 2, 3, 4]
        assert entries[0][0].prescription() == "3 x 10"
        assert entries[3][0].prescription() == "3 x 1 min"
        assert entries[3][0].rest_seconds == 30

    def test_days_without_exercises(self, catalog) -> None:
        schedule = catalog.workout_schedule(4)
        assert [day.focus_area for day, _ in schedule] == ["HIIT", "HIIT", "HIIT", "Active Recovery"]
        assert all(entries == [] for _, entries in schedule)

    def test_focus_areas_follow_days(self, catalog) -> None:
        assert catalog.get_workout_plan(3).focus_areas == (
            "Upper Body", "Lower Body", "Upper Body", "Lower Body",
        )

    def test_estimate_workout_day(self, catalog) -> None:
        schedule = catalog.workout_schedule(1)
        # Running 20 min at 10 kcal/min; jumping jacks are reps only
        assert estimate_workout_day(schedule[1][1]) == (20, 200)
        # Plank 1 min at 5 kcal/min
        assert estimate_workout_day(schedule[0][1]) == (1, 5)

    def test_timed_prescription_without_sets(self) -> None:
        assert PlannedExercise(exercise_id=11, duration_minutes=20).prescription() == "20 min"

    def test_diet_schedule(self, catalog) -> None:
        schedule = catalog.diet_schedule(2)
        assert len(schedule) == 1
        day, meals = schedule[0]
        assert day.description == "Day 1 of your muscle building plan"
        assert [r.id for _, r in meals] == [2, 5, 12, 14]
        assert meals[1][0].servings == 1.5

    def test_diet_day_without_meals(self, catalog) -> None:
        schedule = catalog.diet_schedule(1)
        assert [day.day_number for day, _ in schedule] == [1, 2]
        assert schedule[1][1] == []

    def test_plan_without_days(self, catalog) -> None:
        assert catalog.diet_schedule(5) == []

    def test_missing_plan(self, catalog) -> None:
        with pytest.raises(RecordNotFoundError, match="Workout plan not found: 42"):
            catalog.workout_schedule(42)
        with pytest.raises(RecordNotFoundError, match="Diet plan not found: 42"):
            catalog.diet_schedule(42)

    def test_dangling_exercise_id(self) -> None:
        catalog = catalog_from_dict({
            "workout_plans": [{
                "id": 1, "name": "X", "goal_type": "toning", "difficulty_level": "beginner",
                "days": [{"day_number": 1, "exercises": [{"exercise_id": 99}]}],
            }],
        })
        with pytest.raises(RecordNotFoundError, match="Exercise not found: 99"):
            catalog.workout_schedule(1)


class TestExercisesAndFoods:
    """Tests for the exercise library and food lookups."""

    def test_categories(self, catalog) -> None:
        names = [c.name for c in catalog.exercise_categories()]
        assert names == ["Strength", "Cardio", "Flexibility", "HIIT", "Mobility"]

    def test_exercises_in_category(self, catalog) -> None:
        assert [e.name for e in catalog.exercises_in_category(4)] == ["Burpees", "Mountain Climbers"]

    def test_empty_category(self, catalog) -> None:
        assert catalog.exercises_in_category(3) == []

    def test_unknown_category(self, catalog) -> None:
        with pytest.raises(RecordNotFoundError, match="Exercise category not found"):
            catalog.exercises_in_category(99)

    def test_get_exercise(self, catalog) -> None:
        exercise = catalog.get_exercise(5)
        assert exercise.name == "Deadlifts"
        assert exercise.difficulty_level == DifficultyLevel.INTERMEDIATE
        assert exercise.calories_per_minute == 9

    def test_get_exercise_missing(self, catalog) -> None:
        with pytest.raises(RecordNotFoundError):
            catalog.get_exercise(100)

    def test_search_foods_by_name(self, catalog) -> None:
        assert [f.id for f in catalog.search_foods("BUTTER")] == [10]

    def test_search_foods_by_brand(self, catalog) -> None:
        assert [f.name for f in catalog.search_foods("fage")] == ["Greek Yogurt"]

    def test_search_foods_empty_query(self, catalog) -> None:
        assert catalog.search_foods("  ") == []

    def test_get_food(self, catalog) -> None:
        food = catalog.get_food(3)
        assert food.name == "Chicken Breast"
        assert food.protein == 31
        assert food.serving_unit == "g"

    def test_get_food_missing(self, catalog) -> None:
        with pytest.raises(RecordNotFoundError, match="Food not found: 11"):
            catalog.get_food(11)


class TestLoaderSections:
    """Tests for the exercise, food and plan day sections of a catalog file."""

    def test_full_sections(self) -> None:
        catalog = catalog_from_dict({
            "exercise_categories": [{"id": 1, "name": "Strength"}],
            "exercises": [
                {"id": 7, "name": "Goblet Squat", "category_id": 1,
                 "difficulty_level": "intermediate"},
            ],
            "foods": [{"id": 1, "name": "Lentils", "brand": None, "calories": 230}],
            "workout_plans": [{
                "id": 1, "name": "Legs", "goal_type": "muscle_gain",
                "difficulty_level": "intermediate",
                "days": [
                    {"day_number": 2, "focus_area": "Legs",
                     "exercises": [{"exercise_id": 7, "sets": 4, "reps": 8, "order_index": 1}]},
                    {"day_number": 1, "focus_area": "Rest"},
                ],
            }],
        })
        exercise = catalog.get_exercise(7)
        assert exercise.calories_per_minute == 5.0
        assert catalog.get_food(1).brand == ""
        assert catalog.get_workout_plan(1).focus_areas == ("Rest", "Legs")

        schedule = catalog.workout_schedule(1)
        assert [d.day_number for d, _ in schedule] == [1, 2]
        planned, resolved = schedule[1][1][0]
        assert resolved is exercise
        assert (planned.sets, planned.reps, planned.duration_minutes) == (4, 8, None)

    def test_bad_exercise_entry(self) -> None:
        with pytest.raises(CatalogFormatError, match=r"exercises\[0\]"):
            catalog_from_dict({"exercises": [{"id": 1, "name": "No category"}]})

    def test_bad_plan_day(self) -> None:
        with pytest.raises(CatalogFormatError, match=r"diet_plans\[0\]"):
            catalog_from_dict({
                "diet_plans": [{
                    "id": 1, "name": "X", "goal_type": "maintenance", "diet_type": "balanced",
                    "daily_calories": 2000, "days": [{"meals": []}],
                }],
            })
