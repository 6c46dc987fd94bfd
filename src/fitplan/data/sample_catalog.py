"""Bundled sample catalog of plans, recipes, exercises and foods.

The CLI falls back to this catalog when no ``--catalog`` file is given.
``sample_catalog()`` builds a fresh InMemoryCatalog on every call so no
caller can mutate shared data.
"""

from __future__ import annotations

from typing import Any

from fitplan.catalog.loader import catalog_from_dict
from fitplan.catalog.repository import InMemoryCatalog


def _ingredients(*items: tuple) -> list[dict[str, Any]]:
    """Expand (name, amount, unit[, optional]) tuples into ingredient dicts."""
    result = []
    for item in items:
        name, amount, unit = item[:3]
        entry: dict[str, Any] = {"name": name, "amount": amount, "unit": unit}
        if len(item) > 3:
            entry["optional"] = item[3]
        result.append(entry)
    return result


def _diet_day(day_number: int, description: str, *recipes) -> dict[str, Any]:
    """Build a diet plan day; a recipe is an id or an (id, servings) pair."""
    meals = []
    for order, recipe in enumerate(recipes, start=1):
        recipe_id, servings = recipe if isinstance(recipe, tuple) else (recipe, 1)
        meals.append({"recipe_id": recipe_id, "servings": servings, "order_index": order})
    return {"day_number": day_number, "description": description, "meals": meals}


def _workout_day(day_number: int, focus_area: str, *exercises: dict) -> dict[str, Any]:
    """Build a workout day; exercises are numbered in the order given."""
    return {
        "day_number": day_number,
        "focus_area": focus_area,
        "exercises": [
            dict(exercise, order_index=order)
            for order, exercise in enumerate(exercises, start=1)
        ],
    }


# =============================================================================
# Diet plans
# =============================================================================

DIET_PLANS: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Weight Loss Balanced Plan",
        "description": "A balanced diet plan designed for sustainable weight loss.",
        "goal_type": "weight_loss",
        "diet_type": "balanced",
        "daily_calories": 1800,
        "daily_protein": 100,
        "daily_carbs": 180,
        "daily_fat": 60,
        "days": [
            _diet_day(1, "Day 1 of your balanced weight loss plan", 1, 5, 9, 13),
            _diet_day(2, "Day 2 of your balanced weight loss plan"),
        ],
    },
    {
        "id": 2,
        "name": "Muscle Building High Protein",
        "description": "A high protein diet plan designed to support muscle growth and recovery.",
        "goal_type": "muscle_gain",
        "diet_type": "high_protein",
        "daily_calories": 2500,
        "daily_protein": 180,
        "daily_carbs": 250,
        "daily_fat": 70,
        "days": [_diet_day(1, "Day 1 of your muscle building plan", 2, (5, 1.5), 12, 14)],
    },
    {
        "id": 3,
        "name": "Keto Weight Loss",
        "description": "A ketogenic diet plan for rapid weight loss through ketosis.",
        "goal_type": "weight_loss",
        "diet_type": "keto",
        "daily_calories": 1600,
        "daily_protein": 120,
        "daily_carbs": 20,
        "daily_fat": 120,
        "days": [_diet_day(1, "Day 1 of your keto weight loss plan", 3, 7, 11, (15, 2))],
    },
    {
        "id": 4,
        "name": "Vegan Maintenance",
        "description": "A plant-based diet plan for maintaining weight and overall health.",
        "goal_type": "maintenance",
        "diet_type": "vegan",
        "daily_calories": 2000,
        "daily_protein": 80,
        "daily_carbs": 280,
        "daily_fat": 60,
        "days": [_diet_day(1, "Day 1 of your vegan maintenance plan", 4, 6, 10, 13)],
    },
    {
        "id": 5,
        "name": "Mediterranean Lifestyle",
        "description": "A Mediterranean diet plan for heart health and longevity.",
        "goal_type": "maintenance",
        "diet_type": "mediterranean",
        "daily_calories": 2200,
        "daily_protein": 90,
        "daily_carbs": 250,
        "daily_fat": 80,
    },
]


# =============================================================================
# Workout plans
# =============================================================================

WORKOUT_PLANS: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Weight Loss Beginner",
        "description": "A beginner-friendly workout plan focused on burning calories and building basic strength.",
        "goal_type": "weight_loss",
        "difficulty_level": "beginner",
        "duration_weeks": 8,
        "days_per_week": 3,
        "days": [
            _workout_day(
                1, "Full Body",
                {"exercise_id": 1, "sets": 3, "reps": 10, "rest_seconds": 60},
                {"exercise_id": 2, "sets": 3, "reps": 12, "rest_seconds": 60},
                {"exercise_id": 8, "sets": 3, "reps": 10, "rest_seconds": 60},
                {"exercise_id": 9, "sets": 3, "duration_minutes": 1, "rest_seconds": 30},
            ),
            _workout_day(
                3, "Cardio",
                {"exercise_id": 11, "duration_minutes": 20},
                {"exercise_id": 13, "sets": 3, "reps": 30, "rest_seconds": 30},
            ),
            _workout_day(
                5, "Full Body",
                {"exercise_id": 3, "sets": 3, "reps": 12, "rest_seconds": 60},
                {"exercise_id": 10, "sets": 3, "reps": 12, "rest_seconds": 60},
                {"exercise_id": 2, "sets": 3, "reps": 15, "rest_seconds": 60},
                {"exercise_id": 15, "sets": 3, "duration_minutes": 1, "rest_seconds": 30},
            ),
        ],
    },
    {
        "id": 2,
        "name": "Muscle Building Intermediate",
        "description": "Build muscle mass with this intermediate strength training program.",
        "goal_type": "muscle_gain",
        "difficulty_level": "intermediate",
        "duration_weeks": 12,
        "days_per_week": 5,
        "days": [
            _workout_day(
                1, "Chest & Triceps",
                {"exercise_id": 6, "sets": 4, "reps": 8, "rest_seconds": 90},
                {"exercise_id": 1, "sets": 3, "reps": 12, "rest_seconds": 60},
                {"exercise_id": 10, "sets": 3, "reps": 15, "rest_seconds": 60},
            ),
            _workout_day(2, "Back & Biceps"),
            _workout_day(3, "Legs"),
            _workout_day(4, "Shoulders & Arms"),
            _workout_day(5, "Full Body"),
        ],
    },
    {
        "id": 3,
        "name": "Full Body Toning",
        "description": "A balanced workout plan to tone muscles and improve overall fitness.",
        "goal_type": "toning",
        "difficulty_level": "intermediate",
        "duration_weeks": 10,
        "days_per_week": 4,
        "days": [
            _workout_day(
                1, "Upper Body",
                {"exercise_id": 1, "sets": 3, "reps": 12, "rest_seconds": 60},
                {"exercise_id": 3, "sets": 3, "reps": 10, "rest_seconds": 90},
                {"exercise_id": 4, "sets": 3, "reps": 8, "rest_seconds": 90},
                {"exercise_id": 10, "sets": 3, "reps": 15, "rest_seconds": 60},
                {"exercise_id": 7, "sets": 3, "reps": 8, "rest_seconds": 90},
            ),
            _workout_day(2, "Lower Body"),
            _workout_day(4, "Upper Body"),
            _workout_day(5, "Lower Body"),
        ],
    },
    {
        "id": 4,
        "name": "HIIT Cardio Blast",
        "description": "High-intensity interval training for maximum calorie burn and cardiovascular health.",
        "goal_type": "weight_loss",
        "difficulty_level": "advanced",
        "duration_weeks": 6,
        "days_per_week": 4,
        "days": [
            _workout_day(1, "HIIT"),
            _workout_day(3, "HIIT"),
            _workout_day(5, "HIIT"),
            _workout_day(6, "Active Recovery"),
        ],
    },
    {
        "id": 5,
        "name": "Strength & Power Advanced",
        "description": "Advanced strength training program focused on building power and muscle mass.",
        "goal_type": "muscle_gain",
        "difficulty_level": "advanced",
        "duration_weeks": 16,
        "days_per_week": 6,
        "days": [
            _workout_day(number, focus)
            for number, focus in enumerate(
                ["Chest", "Back", "Legs", "Shoulders", "Arms", "Core & Cardio"], start=1
            )
        ],
    },
]


# =============================================================================
# Recipes
# =============================================================================

RECIPES: list[dict[str, Any]] = [
    # Breakfast
    {
        "id": 1,
        "name": "Greek Yogurt with Berries and Honey",
        "description": "A simple, protein-rich breakfast with fresh berries and a touch of honey.",
        "meal_type": "breakfast",
        "diet_types": ["balanced", "vegetarian", "high_protein", "mediterranean"],
        "prep_time_minutes": 5,
        "calories": 250, "protein": 20, "carbs": 30, "fat": 5, "fiber": 3,
        "ingredients": _ingredients(
            ("Greek yogurt", 1, "cup"),
            ("Mixed berries", 0.5, "cup"),
            ("Honey", 1, "teaspoon"),
            ("Almonds", 1, "tablespoon", True),
        ),
    },
    {
        "id": 2,
        "name": "Avocado Toast with Poached Egg",
        "description": "Creamy avocado on whole grain toast topped with a perfectly poached egg.",
        "meal_type": "breakfast",
        "diet_types": ["balanced", "vegetarian", "high_protein"],
        "prep_time_minutes": 5,
        "cook_time_minutes": 5,
        "calories": 350, "protein": 15, "carbs": 30, "fat": 20, "fiber": 8,
        "ingredients": _ingredients(
            ("Whole grain bread", 1, "slice"),
            ("Avocado", 0.5, "medium"),
            ("Egg", 1, "large"),
            ("Salt", 0.25, "teaspoon"),
            ("Pepper", 0.25, "teaspoon"),
            ("Red pepper flakes", 0.25, "teaspoon", True),
        ),
    },
    {
        "id": 3,
        "name": "Keto Breakfast Bowl",
        "description": "A low-carb, high-fat breakfast bowl with eggs, avocado, and bacon.",
        "meal_type": "breakfast",
        "diet_types": ["keto", "low_carb", "high_protein", "paleo"],
        "prep_time_minutes": 5,
        "cook_time_minutes": 10,
        "calories": 450, "protein": 25, "carbs": 5, "fat": 35, "fiber": 3,
        "ingredients": _ingredients(
            ("Eggs", 2, "large"),
            ("Bacon", 2, "slices"),
            ("Avocado", 0.5, "medium"),
            ("Spinach", 1, "cup"),
            ("Butter", 1, "teaspoon"),
        ),
    },
    {
        "id": 4,
        "name": "Vegan Overnight Oats",
        "description": "Creamy overnight oats made with plant-based milk and topped with fruits and nuts.",
        "meal_type": "breakfast",
        "diet_types": ["vegan", "vegetarian", "balanced"],
        "prep_time_minutes": 5,
        "calories": 350, "protein": 10, "carbs": 55, "fat": 10, "fiber": 8,
        "ingredients": _ingredients(
            ("Rolled oats", 0.5, "cup"),
            ("Almond milk", 0.75, "cup"),
            ("Chia seeds", 1, "tablespoon"),
            ("Maple syrup", 1, "teaspoon"),
            ("Banana", 0.5, "medium"),
            ("Berries", 0.25, "cup"),
            ("Walnuts", 1, "tablespoon"),
        ),
    },
    # Lunch
    {
        "id": 5,
        "name": "Grilled Chicken Salad",
        "description": "A hearty salad with grilled chicken, mixed greens, and a light vinaigrette.",
        "meal_type": "lunch",
        "diet_types": ["balanced", "high_protein", "low_carb", "paleo", "mediterranean"],
        "prep_time_minutes": 10,
        "cook_time_minutes": 15,
        "calories": 400, "protein": 35, "carbs": 15, "fat": 20, "fiber": 5,
        "ingredients": _ingredients(
            ("Chicken breast", 4, "ounces"),
            ("Mixed greens", 2, "cups"),
            ("Cherry tomatoes", 0.5, "cup"),
            ("Cucumber", 0.5, "medium"),
            ("Red onion", 0.25, "small"),
            ("Olive oil", 1, "tablespoon"),
            ("Lemon juice", 1, "tablespoon"),
        ),
    },
    {
        "id": 6,
        "name": "Quinoa Buddha Bowl",
        "description": "A nutritious bowl with quinoa, roasted vegetables, and tahini dressing.",
        "meal_type": "lunch",
        "diet_types": ["vegan", "vegetarian", "balanced", "mediterranean"],
        "prep_time_minutes": 15,
        "cook_time_minutes": 25,
        "calories": 450, "protein": 15, "carbs": 65, "fat": 15, "fiber": 12,
        "ingredients": _ingredients(
            ("Quinoa", 0.5, "cup"),
            ("Sweet potato", 0.5, "medium"),
            ("Broccoli", 1, "cup"),
            ("Chickpeas", 0.5, "cup"),
            ("Avocado", 0.25, "medium"),
            ("Tahini", 1, "tablespoon"),
            ("Olive oil", 1, "tablespoon"),
        ),
    },
    {
        "id": 7,
        "name": "Keto Tuna Salad Lettuce Wraps",
        "description": "Low-carb tuna salad served in crisp lettuce leaves.",
        "meal_type": "lunch",
        "diet_types": ["keto", "low_carb", "high_protein", "paleo"],
        "prep_time_minutes": 10,
        "calories": 350, "protein": 30, "carbs": 5, "fat": 25, "fiber": 2,
        "ingredients": _ingredients(
            ("Canned tuna", 1, "can (5 oz)"),
            ("Mayonnaise", 2, "tablespoons"),
            ("Celery", 1, "stalk"),
            ("Red onion", 2, "tablespoons"),
            ("Dijon mustard", 1, "teaspoon"),
            ("Romaine lettuce leaves", 4, "large leaves"),
        ),
    },
    {
        "id": 8,
        "name": "Mediterranean Chickpea Salad",
        "description": "A refreshing salad with chickpeas, cucumber, tomatoes, and feta cheese.",
        "meal_type": "lunch",
        "diet_types": ["vegetarian", "balanced", "mediterranean"],
        "prep_time_minutes": 15,
        "calories": 380, "protein": 15, "carbs": 45, "fat": 18, "fiber": 12,
        "ingredients": _ingredients(
            ("Chickpeas", 1, "cup"),
            ("Cucumber", 0.5, "medium"),
            ("Cherry tomatoes", 0.5, "cup"),
            ("Feta cheese", 2, "tablespoons"),
            ("Kalamata olives", 6, "olives"),
            ("Olive oil", 1, "tablespoon"),
        ),
    },
    # Dinner
    {
        "id": 9,
        "name": "Baked Salmon with Roasted Vegetables",
        "description": "Tender baked salmon fillet with a colorful medley of roasted vegetables.",
        "meal_type": "dinner",
        "diet_types": ["balanced", "high_protein", "low_carb", "paleo", "mediterranean"],
        "prep_time_minutes": 15,
        "cook_time_minutes": 25,
        "calories": 450, "protein": 35, "carbs": 20, "fat": 25, "fiber": 6,
        "ingredients": _ingredients(
            ("Salmon fillet", 5, "ounces"),
            ("Zucchini", 0.5, "medium"),
            ("Bell pepper", 0.5, "medium"),
            ("Cherry tomatoes", 0.5, "cup"),
            ("Olive oil", 1, "tablespoon"),
            ("Garlic", 2, "cloves"),
        ),
    },
    {
        "id": 10,
        "name": "Vegan Lentil Curry",
        "description": "A hearty and flavorful curry made with lentils, vegetables, and aromatic spices.",
        "meal_type": "dinner",
        "diet_types": ["vegan", "vegetarian", "balanced"],
        "prep_time_minutes": 15,
        "cook_time_minutes": 30,
        "calories": 400, "protein": 18, "carbs": 60, "fat": 10, "fiber": 15,
        "ingredients": _ingredients(
            ("Red lentils", 1, "cup"),
            ("Onion", 1, "medium"),
            ("Carrots", 2, "medium"),
            ("Spinach", 2, "cups"),
            ("Coconut milk", 1, "cup"),
            ("Curry powder", 2, "tablespoons"),
        ),
    },
    {
        "id": 11,
        "name": "Keto Cauliflower Crust Pizza",
        "description": "A low-carb pizza with a crispy cauliflower crust and your favorite toppings.",
        "meal_type": "dinner",
        "diet_types": ["keto", "low_carb", "vegetarian"],
        "prep_time_minutes": 20,
        "cook_time_minutes": 25,
        "calories": 450, "protein": 25, "carbs": 10, "fat": 35, "fiber": 4,
        "ingredients": _ingredients(
            ("Cauliflower rice", 2, "cups"),
            ("Mozzarella cheese", 1.5, "cups"),
            ("Egg", 1, "large"),
            ("Almond flour", 2, "tablespoons"),
            ("Tomato sauce", 0.25, "cup"),
            ("Pepperoni", 10, "slices", True),
        ),
    },
    {
        "id": 12,
        "name": "Grilled Steak with Chimichurri",
        "description": "Juicy grilled steak topped with fresh chimichurri sauce.",
        "meal_type": "dinner",
        "diet_types": ["high_protein", "low_carb", "paleo"],
        "prep_time_minutes": 15,
        "cook_time_minutes": 15,
        "calories": 500, "protein": 40, "carbs": 5, "fat": 35, "fiber": 2,
        "ingredients": _ingredients(
            ("Ribeye steak", 6, "ounces"),
            ("Parsley", 0.5, "cup"),
            ("Cilantro", 0.25, "cup"),
            ("Garlic", 2, "cloves"),
            ("Red wine vinegar", 1, "tablespoon"),
            ("Olive oil", 3, "tablespoons"),
        ),
    },
    # Snacks
    {
        "id": 13,
        "name": "Apple with Almond Butter",
        "description": "A simple, nutritious snack combining crisp apple with creamy almond butter.",
        "meal_type": "snack",
        "diet_types": ["balanced", "vegetarian", "vegan", "paleo"],
        "prep_time_minutes": 2,
        "calories": 200, "protein": 5, "carbs": 25, "fat": 10, "fiber": 5,
        "ingredients": _ingredients(
            ("Apple", 1, "medium"),
            ("Almond butter", 1, "tablespoon"),
            ("Cinnamon", 0.25, "teaspoon", True),
        ),
    },
    {
        "id": 14,
        "name": "Greek Yogurt with Honey and Walnuts",
        "description": "Creamy Greek yogurt topped with honey and crunchy walnuts.",
        "meal_type": "snack",
        "diet_types": ["balanced", "vegetarian", "high_protein"],
        "prep_time_minutes": 3,
        "calories": 180, "protein": 15, "carbs": 15, "fat": 8, "fiber": 1,
        "ingredients": _ingredients(
            ("Greek yogurt", 0.75, "cup"),
            ("Honey", 1, "teaspoon"),
            ("Walnuts", 1, "tablespoon"),
        ),
    },
    {
        "id": 15,
        "name": "Keto Fat Bombs",
        "description": "High-fat, low-carb snack perfect for a quick energy boost.",
        "meal_type": "snack",
        "diet_types": ["keto", "low_carb"],
        "prep_time_minutes": 15,
        "calories": 120, "protein": 2, "carbs": 1, "fat": 12, "fiber": 1,
        "ingredients": _ingredients(
            ("Coconut oil", 0.5, "cup"),
            ("Almond butter", 0.25, "cup"),
            ("Cocoa powder", 2, "tablespoons"),
            ("Erythritol", 2, "tablespoons"),
        ),
    },
]


# =============================================================================
# Exercise library
# =============================================================================

EXERCISE_CATEGORIES: list[dict[str, Any]] = [
    {"id": 1, "name": "Strength", "description": "Exercises focused on building muscle strength and size"},
    {"id": 2, "name": "Cardio", "description": "Exercises focused on cardiovascular health and endurance"},
    {"id": 3, "name": "Flexibility", "description": "Exercises focused on improving range of motion and flexibility"},
    {"id": 4, "name": "HIIT", "description": "High-Intensity Interval Training for efficient calorie burning"},
    {"id": 5, "name": "Mobility", "description": "Exercises focused on joint health and movement patterns"},
]

EXERCISES: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Push-ups",
        "category_id": 1,
        "description": "A classic bodyweight exercise that targets the chest, shoulders, and triceps.",
        "difficulty_level": "beginner",
        "muscle_group": "Chest, Shoulders, Triceps",
        "equipment_needed": "None",
        "instructions": "Start in a plank position with hands shoulder-width apart. Lower your "
                        "body until your chest nearly touches the floor, then push back up.",
        "calories_per_minute": 8,
    },
    {
        "id": 2,
        "name": "Squats",
        "category_id": 1,
        "description": "A compound exercise that targets the quadriceps, hamstrings, and glutes.",
        "difficulty_level": "beginner",
        "muscle_group": "Quadriceps, Hamstrings, Glutes",
        "equipment_needed": "None (bodyweight) or Barbell/Dumbbells",
        "instructions": "Stand with feet shoulder-width apart. Bend your knees and hips as if "
                        "sitting in a chair, keeping your chest up, then stand back up.",
        "calories_per_minute": 8,
    },
    {
        "id": 3,
        "name": "Dumbbell Rows",
        "category_id": 1,
        "description": "An upper body pulling exercise that targets the back and biceps.",
        "difficulty_level": "beginner",
        "muscle_group": "Back, Biceps",
        "equipment_needed": "Dumbbells, Bench",
        "instructions": "With one knee and hand on a bench, pull the dumbbell up to your side "
                        "keeping the elbow close to your body. Lower and repeat.",
        "calories_per_minute": 7,
    },
    {
        "id": 4,
        "name": "Shoulder Press",
        "category_id": 1,
        "description": "An upper body pushing exercise that targets the shoulders and triceps.",
        "difficulty_level": "intermediate",
        "muscle_group": "Shoulders, Triceps",
        "equipment_needed": "Dumbbells or Barbell",
        "instructions": "Press the weights from shoulder height overhead until your arms are "
                        "fully extended, then lower back to shoulder height.",
        "calories_per_minute": 7,
    },
    {
        "id": 5,
        "name": "Deadlifts",
        "category_id": 1,
        "description": "A compound exercise that targets the lower back, hamstrings, and glutes.",
        "difficulty_level": "intermediate",
        "muscle_group": "Lower Back, Hamstrings, Glutes",
        "equipment_needed": "Barbell",
        "instructions": "With the bar over midfoot, hinge at the hips to grip it. Keep your back "
                        "straight and stand up by extending hips and knees.",
        "calories_per_minute": 9,
    },
    {
        "id": 6,
        "name": "Bench Press",
        "category_id": 1,
        "description": "A compound exercise that targets the chest, shoulders, and triceps.",
        "difficulty_level": "intermediate",
        "muscle_group": "Chest, Shoulders, Triceps",
        "equipment_needed": "Barbell, Bench",
        "instructions": "Lie on a bench, lower the bar to your chest, then press it back up.",
        "calories_per_minute": 8,
    },
    {
        "id": 7,
        "name": "Pull-ups",
        "category_id": 1,
        "description": "A bodyweight exercise that targets the back, biceps, and shoulders.",
        "difficulty_level": "intermediate",
        "muscle_group": "Back, Biceps, Shoulders",
        "equipment_needed": "Pull-up Bar",
        "instructions": "Hang from the bar with palms facing away and pull up until your chin "
                        "clears the bar, then lower with control.",
        "calories_per_minute": 10,
    },
    {
        "id": 8,
        "name": "Lunges",
        "category_id": 1,
        "description": "A unilateral exercise that targets the quadriceps, hamstrings, and glutes.",
        "difficulty_level": "beginner",
        "muscle_group": "Quadriceps, Hamstrings, Glutes",
        "equipment_needed": "None (bodyweight) or Dumbbells",
        "instructions": "Step forward and lower until both knees are at 90 degrees. Push back "
                        "up and repeat with the other leg.",
        "calories_per_minute": 8,
    },
    {
        "id": 9,
        "name": "Plank",
        "category_id": 1,
        "description": "A core exercise that targets the abdominals and lower back.",
        "difficulty_level": "beginner",
        "muscle_group": "Core, Shoulders",
        "equipment_needed": "None",
        "instructions": "Rest on your forearms and toes with your body in a straight line from "
                        "head to heels. Hold the position.",
        "calories_per_minute": 5,
    },
    {
        "id": 10,
        "name": "Tricep Dips",
        "category_id": 1,
        "description": "An upper body exercise that targets the triceps.",
        "difficulty_level": "beginner",
        "muscle_group": "Triceps, Shoulders",
        "equipment_needed": "Bench or Chair",
        "instructions": "With hands on the edge of a bench, lower your body by bending your "
                        "elbows, then push back up.",
        "calories_per_minute": 7,
    },
    {
        "id": 11,
        "name": "Running",
        "category_id": 2,
        "description": "A cardiovascular exercise that improves endurance and burns calories.",
        "difficulty_level": "beginner",
        "muscle_group": "Legs, Core",
        "equipment_needed": "Running Shoes",
        "instructions": "Warm up with a walk, then build to a steady jog with relaxed shoulders.",
        "calories_per_minute": 10,
    },
    {
        "id": 12,
        "name": "Cycling",
        "category_id": 2,
        "description": "A low-impact cardiovascular exercise that targets the legs.",
        "difficulty_level": "beginner",
        "muscle_group": "Quadriceps, Hamstrings, Calves",
        "equipment_needed": "Bicycle or Stationary Bike",
        "instructions": "Keep a steady cadence and adjust resistance as needed.",
        "calories_per_minute": 8,
    },
    {
        "id": 13,
        "name": "Jumping Jacks",
        "category_id": 2,
        "description": "A full-body cardiovascular exercise.",
        "difficulty_level": "beginner",
        "muscle_group": "Full Body",
        "equipment_needed": "None",
        "instructions": "Jump while spreading your feet and raising your arms overhead, then "
                        "jump back to the start.",
        "calories_per_minute": 8,
    },
    {
        "id": 14,
        "name": "Burpees",
        "category_id": 4,
        "description": "A high-intensity full-body exercise that combines a squat, push-up, and jump.",
        "difficulty_level": "intermediate",
        "muscle_group": "Full Body",
        "equipment_needed": "None",
        "instructions": "Squat, jump your feet back to a plank, do a push-up, jump your feet "
                        "forward and jump up with arms overhead.",
        "calories_per_minute": 12,
    },
    {
        "id": 15,
        "name": "Mountain Climbers",
        "category_id": 4,
        "description": "A dynamic exercise that targets the core, shoulders, and legs.",
        "difficulty_level": "intermediate",
        "muscle_group": "Core, Shoulders, Legs",
        "equipment_needed": "None",
        "instructions": "From a plank, rapidly drive alternate knees toward your chest.",
        "calories_per_minute": 10,
    },
]


# =============================================================================
# Foods
# =============================================================================

FOODS: list[dict[str, Any]] = [
    {"id": 1, "name": "Apple", "calories": 95, "protein": 0.5, "carbs": 25, "fat": 0.3,
     "fiber": 4.4, "sugar": 19, "serving_size": 1, "serving_unit": "medium (182g)"},
    {"id": 2, "name": "Banana", "calories": 105, "protein": 1.3, "carbs": 27, "fat": 0.4,
     "fiber": 3.1, "sugar": 14, "serving_size": 1, "serving_unit": "medium (118g)"},
    {"id": 3, "name": "Chicken Breast", "calories": 165, "protein": 31, "carbs": 0, "fat": 3.6,
     "serving_size": 100, "serving_unit": "g"},
    {"id": 4, "name": "Brown Rice", "calories": 215, "protein": 5, "carbs": 45, "fat": 1.8,
     "fiber": 3.5, "sugar": 0.7, "serving_size": 1, "serving_unit": "cup cooked (195g)"},
    {"id": 5, "name": "Salmon", "calories": 206, "protein": 22, "carbs": 0, "fat": 13,
     "serving_size": 100, "serving_unit": "g"},
    {"id": 6, "name": "Greek Yogurt", "brand": "Fage", "calories": 130, "protein": 18,
     "carbs": 7, "fat": 0, "sugar": 7, "serving_size": 170, "serving_unit": "g"},
    {"id": 7, "name": "Avocado", "calories": 240, "protein": 3, "carbs": 12, "fat": 22,
     "fiber": 10, "sugar": 1, "serving_size": 1, "serving_unit": "medium (150g)"},
    {"id": 8, "name": "Egg", "calories": 70, "protein": 6, "carbs": 0.6, "fat": 5,
     "sugar": 0.6, "serving_size": 1, "serving_unit": "large (50g)"},
    {"id": 9, "name": "Oatmeal", "brand": "Quaker", "calories": 150, "protein": 5,
     "carbs": 27, "fat": 3, "fiber": 4, "sugar": 1, "serving_size": 40, "serving_unit": "g dry"},
    {"id": 10, "name": "Almond Butter", "calories": 98, "protein": 3.4, "carbs": 3, "fat": 9,
     "fiber": 1.6, "sugar": 0.7, "serving_size": 1, "serving_unit": "tbsp (16g)"},
]


def sample_catalog() -> InMemoryCatalog:
    """Build the bundled sample catalog."""
    return catalog_from_dict(
        {
            "diet_plans": DIET_PLANS,
            "workout_plans": WORKOUT_PLANS,
            "recipes": RECIPES,
            "exercise_categories": EXERCISE_CATEGORIES,
            "exercises": EXERCISES,
            "foods": FOODS,
        }
    )
