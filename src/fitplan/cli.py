"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from fitplan.catalog import (
    CatalogFormatError,
    Exercise,
    Food,
    InMemoryCatalog,
    Recipe,
    RecordNotFoundError,
    estimate_workout_day,
    load_catalog,
)
from fitplan.config import get_settings
from fitplan.profiles.body_calc import (
    InvalidProfileError,
    UserProfile,
    calorie_plan_to_dict,
    compute_calorie_target,
)

app = typer.Typer(
    help="Goal-driven diet and workout planning",
    no_args_is_help=True,
)
console = Console()

# Subcommand groups
recommend_app = typer.Typer(help="Recommend diet or workout plans for a profile")
recipes_app = typer.Typer(help="Browse and search recipes")
plans_app = typer.Typer(help="Browse diet and workout plans")
exercises_app = typer.Typer(help="Browse the exercise library")
foods_app = typer.Typer(help="Search foods and their nutrition")

app.add_typer(recommend_app, name="recommend")
app.add_typer(recipes_app, name="recipes")
app.add_typer(plans_app, name="plans")
app.add_typer(exercises_app, name="exercises")
app.add_typer(foods_app, name="foods")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def fail(command: str, message: str, json_output: bool, suggestions: Optional[list[str]] = None) -> None:
    """Report an error in the requested style and exit with status 1."""
    if json_output:
        output_json({
            "success": False,
            "command": command,
            "errors": [message],
            "suggestions": suggestions or [],
        })
    else:
        console.print(f"[red]{message}[/red]")
        for suggestion in suggestions or []:
            console.print(f"[dim]{suggestion}[/dim]")
    raise typer.Exit(1)


def split_csv(value: Optional[str]) -> list[str]:
    """Split a comma-separated option into stripped, non-empty items."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def get_catalog(catalog_path: Optional[Path], command: str, json_output: bool) -> InMemoryCatalog:
    """Load the catalog from --catalog, settings, or the bundled sample."""
    path = catalog_path or get_settings().catalog.path
    if path is None:
        from fitplan.data.sample_catalog import sample_catalog

        return sample_catalog()

    try:
        return load_catalog(path)
    except FileNotFoundError:
        fail(command, f"Catalog file not found: {path}", json_output)
    except CatalogFormatError as e:
        fail(command, f"Invalid catalog: {e}", json_output)


def read_yaml_mapping(path: Path, command: str, json_output: bool, label: str) -> dict:
    """Read a YAML file whose top level must be a mapping."""
    if not path.exists():
        fail(command, f"{label} file not found: {path}", json_output)
    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            fail(command, f"Invalid YAML in {path}: {e}", json_output)
    if not isinstance(data, dict):
        fail(command, f"{label} file must contain a mapping: {path}", json_output)
    return data


def build_profile(
    command: str,
    json_output: bool,
    profile_file: Optional[Path] = None,
    gender: Optional[str] = None,
    age: Optional[float] = None,
    weight: Optional[float] = None,
    height: Optional[float] = None,
    activity: Optional[str] = None,
    goal: Optional[str] = None,
    prefer: Optional[str] = None,
    difficulty: Optional[str] = None,
) -> UserProfile:
    """Combine a YAML profile file with command-line overrides."""
    data: dict = {}
    if profile_file:
        data = read_yaml_mapping(profile_file, command, json_output, "Profile")

    overrides = {
        "gender": gender,
        "age": age,
        "weight_kg": weight,
        "height_cm": height,
        "activity_level": activity,
        "goal_type": goal,
        "preferred_difficulty": difficulty,
    }
    for key, value in overrides.items():
        if value is not None:
            data[key] = value
    if prefer is not None:
        data["dietary_preferences"] = split_csv(prefer)

    try:
        profile = UserProfile.from_dict(data)
        # Validate eagerly so every command reports bad input the same way
        compute_calorie_target(profile)
    except InvalidProfileError as e:
        fail(
            command,
            str(e),
            json_output,
            suggestions=[
                "Provide --gender, --age, --weight (kg) and --height (cm), "
                "or --profile profile.yaml",
            ],
        )
    return profile


# ============================================================================
# Main callback
# ============================================================================


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show log messages"),
) -> None:
    """Calorie targets, plan recommendations and custom diet plans."""
    # Fallbacks are already reported in command output; logs are opt-in
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# ============================================================================
# Main Commands
# ============================================================================


@app.command()
def targets(
    profile_file: Optional[Path] = typer.Option(None, "--profile", "-p", help="YAML profile file"),
    gender: Optional[str] = typer.Option(None, "--gender", help="male or female"),
    age: Optional[float] = typer.Option(None, "--age", help="Age in years"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Weight in kg"),
    height: Optional[float] = typer.Option(None, "--height", help="Height in cm"),
    activity: Optional[str] = typer.Option(None, "--activity", help="Activity level"),
    goal: Optional[str] = typer.Option(None, "--goal", help="weight_loss, muscle_gain or maintenance"),
    diet: Optional[str] = typer.Option(None, "--diet", help="Diet type for the macro split"),
    output_format: Optional[str] = typer.Option(None, "--format", "-f", help="table, json or markdown"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Calculate BMR, TDEE, calorie target and macros for a profile."""
    from fitplan.export.formatters import get_formatter

    profile = build_profile(
        "targets", json_output, profile_file, gender, age, weight, height, activity, goal
    )
    diet_type = diet or get_settings().defaults.diet_type
    plan = compute_calorie_target(profile, diet_type)

    if json_output:
        output_json({
            "success": True,
            "command": "targets",
            "data": calorie_plan_to_dict(plan),
            "human_summary": f"Target: {plan.target_calories} kcal/day "
                             f"({plan.protein_g}P/{plan.carbs_g}C/{plan.fat_g}F g)",
        })
        return

    try:
        formatter = get_formatter(output_format or get_settings().defaults.output_format, console)
    except ValueError as e:
        fail("targets", str(e), json_output)

    rendered = formatter.format_targets(plan)
    if rendered is not None:
        print(rendered)


@app.command()
def macros(
    diet_type: str = typer.Argument(..., help="Diet type (keto, low_carb, vegan, ...)"),
    calories: int = typer.Option(..., "--calories", "-c", help="Daily calorie target"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Split a calorie target into macro grams for a diet type."""
    from fitplan.data.macro_splits import macro_grams, macro_split

    if calories <= 0:
        fail("macros", "--calories must be positive", json_output)

    split = macro_split(diet_type)
    grams = macro_grams(calories, diet_type)

    if json_output:
        output_json({
            "success": True,
            "command": "macros",
            "data": {
                "diet_type": diet_type,
                "calories": calories,
                "split": {
                    "protein_pct": split.protein_pct,
                    "carbs_pct": split.carbs_pct,
                    "fat_pct": split.fat_pct,
                },
                "grams": {
                    "protein": grams.protein_g,
                    "carbs": grams.carbs_g,
                    "fat": grams.fat_g,
                },
                "grams_calories": grams.calories,
            },
            "human_summary": f"{grams.protein_g}g protein, {grams.carbs_g}g carbs, {grams.fat_g}g fat",
        })
        return

    table = Table(title=f"Macros for {calories} kcal ({diet_type})")
    table.add_column("Macro")
    table.add_column("Share", justify="right")
    table.add_column("Grams", justify="right")
    table.add_row("Protein", f"{split.protein_pct:.0%}", str(grams.protein_g))
    table.add_row("Carbs", f"{split.carbs_pct:.0%}", str(grams.carbs_g))
    table.add_row("Fat", f"{split.fat_pct:.0%}", str(grams.fat_g))
    console.print(table)
    console.print(f"[dim]Rounded grams add up to {grams.calories} kcal[/dim]")


@app.command("diet-types")
def diet_types(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List the available diet types and their macro splits."""
    from fitplan.data.macro_splits import DIET_TYPES, macro_split

    if json_output:
        output_json({
            "success": True,
            "command": "diet-types",
            "data": [
                {"id": d.id, "name": d.name, "description": d.description}
                for d in DIET_TYPES
            ],
        })
        return

    table = Table(title="Diet Types")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("P/C/F")
    table.add_column("Description", style="dim")
    for d in DIET_TYPES:
        split = macro_split(d.id)
        table.add_row(
            d.id,
            d.name,
            f"{split.protein_pct:.0%}/{split.carbs_pct:.0%}/{split.fat_pct:.0%}",
            d.description,
        )
    console.print(table)


@app.command()
def generate(
    profile_file: Optional[Path] = typer.Option(None, "--profile", "-p", help="YAML profile file"),
    gender: Optional[str] = typer.Option(None, "--gender", help="male or female"),
    age: Optional[float] = typer.Option(None, "--age", help="Age in years"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Weight in kg"),
    height: Optional[float] = typer.Option(None, "--height", help="Height in cm"),
    activity: Optional[str] = typer.Option(None, "--activity", help="Activity level"),
    goal: Optional[str] = typer.Option(None, "--goal", help="weight_loss, muscle_gain or maintenance"),
    diet: Optional[str] = typer.Option(None, "--diet", help="Diet type recipes must fit"),
    exclude: Optional[str] = typer.Option(None, "--exclude", help="Comma-separated ingredients to avoid"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for reproducible plans"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    output_format: Optional[str] = typer.Option(None, "--format", "-f", help="table, json or markdown"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Generate a custom multi-day diet plan."""
    from fitplan.export.formatters import get_formatter
    from fitplan.generator import PlanPreferences, build_rng, generate_custom_plan

    settings = get_settings()
    profile = build_profile(
        "generate", json_output, profile_file, gender, age, weight, height, activity, goal
    )
    catalog = get_catalog(catalog_path, "generate", json_output)

    preferences = PlanPreferences.create(
        diet or settings.defaults.diet_type,
        split_csv(exclude),
    )
    rng = build_rng(seed if seed is not None else settings.generation.seed)

    plan = generate_custom_plan(
        profile,
        preferences,
        catalog.recipes(),
        rng,
        days=settings.generation.days,
        min_eligible=settings.generation.min_eligible_recipes,
        snack_threshold=settings.generation.snack_calorie_threshold,
    )

    if json_output:
        from fitplan.export.formatters import JSONFormatter

        output_json({
            "success": True,
            "command": "generate",
            "data": json.loads(JSONFormatter().format_plan(plan, catalog)),
            "human_summary": f"{plan.name}: {plan.daily_calories} kcal/day, "
                             f"{len(plan.recipe_ids)} meals over {plan.duration_days} days",
        })
        return

    try:
        formatter = get_formatter(output_format or settings.defaults.output_format, console)
    except ValueError as e:
        fail("generate", str(e), json_output)

    rendered = formatter.format_plan(plan, catalog)
    if rendered is not None:
        print(rendered)


@app.command()
def progress(
    log_file: Path = typer.Argument(..., help="YAML file with intake, weights and workouts"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Summarize calorie adherence, weight change and workouts from a log file."""
    from datetime import date as date_type

    from fitplan.tracking import (
        DailyIntake,
        WeightEntry,
        WorkoutSession,
        calorie_history_stats,
        projected_weight_change_lbs,
        weight_change,
        weight_trend,
        workout_totals,
    )

    data = read_yaml_mapping(log_file, "progress", json_output, "Log")

    def _date(value) -> date_type:
        return value if isinstance(value, date_type) else date_type.fromisoformat(str(value))

    try:
        intake = [
            DailyIntake(
                date=_date(row["date"]),
                calories=float(row["calories"]),
                goal=float(row["goal"]),
                protein=float(row.get("protein", 0)),
                carbs=float(row.get("carbs", 0)),
                fat=float(row.get("fat", 0)),
            )
            for row in data.get("intake", [])
        ]
        weights = [
            WeightEntry(measured_at=_date(row["date"]), weight=float(row["weight"]))
            for row in data.get("weights", [])
        ]
        sessions = [
            WorkoutSession(
                performed_at=_date(row["date"]),
                duration_minutes=float(row["duration"]),
                calories_burned=float(row.get("calories", 0)),
            )
            for row in data.get("workouts", [])
        ]
    except (KeyError, TypeError, ValueError) as e:
        fail("progress", f"Invalid log entry: {e}", json_output)

    stats = calorie_history_stats(intake)
    totals = workout_totals(sessions)
    change = weight_change(weights)
    trend = weight_trend(weights)
    projected = projected_weight_change_lbs(intake)

    if json_output:
        output_json({
            "success": True,
            "command": "progress",
            "data": {
                "calories": {
                    "average": stats.average_calories,
                    "average_protein": stats.average_protein,
                    "average_carbs": stats.average_carbs,
                    "average_fat": stats.average_fat,
                    "deficit": stats.calorie_deficit,
                    "days_under_goal": stats.days_under_goal,
                    "days_over_goal": stats.days_over_goal,
                    "projected_change_lbs": projected,
                },
                "weight": {
                    "change": round(change, 2),
                    "trend": round(trend[-1], 2) if trend else None,
                },
                "workouts": {
                    "count": totals.total_workouts,
                    "minutes": totals.total_minutes,
                    "calories_burned": totals.total_calories_burned,
                },
            },
        })
        return

    table = Table(title="Progress Summary")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Average calories", f"{stats.average_calories} kcal")
    table.add_row("Days under goal", str(stats.days_under_goal))
    table.add_row("Days over goal", str(stats.days_over_goal))
    table.add_row("Net deficit", f"{stats.calorie_deficit:+d} kcal")
    table.add_row("Projected change", f"{projected:.2f} lbs")
    table.add_row("Weight change", f"{change:+.1f}")
    if trend:
        table.add_row("Weight trend", f"{trend[-1]:.1f}")
    table.add_row("Workouts", f"{totals.total_workouts} ({totals.total_minutes:.0f} min)")
    table.add_row("Calories burned", f"{totals.total_calories_burned:.0f} kcal")
    console.print(table)


# ============================================================================
# Recommend Commands
# ============================================================================


@recommend_app.command("diets")
def recommend_diets(
    profile_file: Optional[Path] = typer.Option(None, "--profile", "-p", help="YAML profile file"),
    gender: Optional[str] = typer.Option(None, "--gender", help="male or female"),
    age: Optional[float] = typer.Option(None, "--age", help="Age in years"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Weight in kg"),
    height: Optional[float] = typer.Option(None, "--height", help="Height in cm"),
    activity: Optional[str] = typer.Option(None, "--activity", help="Activity level"),
    goal: Optional[str] = typer.Option(None, "--goal", help="weight_loss, muscle_gain or maintenance"),
    prefer: Optional[str] = typer.Option(None, "--prefer", help="Comma-separated preferred diet types"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Recommend up to three diet plans closest to the profile's calorie target."""
    from fitplan.recommend import recommend_diet_plans

    profile = build_profile(
        "recommend diets", json_output, profile_file, gender, age, weight, height,
        activity, goal, prefer,
    )
    catalog = get_catalog(catalog_path, "recommend diets", json_output)
    target = compute_calorie_target(profile).target_calories
    plans = recommend_diet_plans(
        catalog.diet_plans(), profile, limit=get_settings().recommendation.limit
    )

    if json_output:
        output_json({
            "success": True,
            "command": "recommend diets",
            "data": {
                "target_calories": target,
                "plans": [
                    {
                        "id": p.id,
                        "name": p.name,
                        "goal_type": p.goal_type.value,
                        "diet_type": p.diet_type,
                        "daily_calories": p.daily_calories,
                        "calorie_gap": abs(p.daily_calories - target),
                    }
                    for p in plans
                ],
            },
            "human_summary": f"{len(plans)} diet plans for {profile.goal_type.value}",
        })
        return

    if not plans:
        console.print(f"[yellow]No diet plans found for goal '{profile.goal_type.value}'[/yellow]")
        return

    table = Table(title=f"Recommended Diet Plans (target {target} kcal)")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Diet")
    table.add_column("Calories", justify="right")
    table.add_column("Gap", justify="right", style="dim")
    for p in plans:
        table.add_row(
            str(p.id), p.name, p.diet_type, str(p.daily_calories),
            str(abs(p.daily_calories - target)),
        )
    console.print(table)


@recommend_app.command("workouts")
def recommend_workouts(
    profile_file: Optional[Path] = typer.Option(None, "--profile", "-p", help="YAML profile file"),
    gender: Optional[str] = typer.Option(None, "--gender", help="male or female"),
    age: Optional[float] = typer.Option(None, "--age", help="Age in years"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Weight in kg"),
    height: Optional[float] = typer.Option(None, "--height", help="Height in cm"),
    activity: Optional[str] = typer.Option(None, "--activity", help="Activity level"),
    goal: Optional[str] = typer.Option(None, "--goal", help="weight_loss, muscle_gain, maintenance or toning"),
    difficulty: Optional[str] = typer.Option(None, "--difficulty", help="beginner, intermediate or advanced"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Recommend up to three workout plans, matching difficulty first."""
    from fitplan.recommend import recommend_workout_plans
    from fitplan.recommend.recommender import preferred_difficulty

    profile = build_profile(
        "recommend workouts", json_output, profile_file, gender, age, weight, height,
        activity, goal, difficulty=difficulty,
    )
    catalog = get_catalog(catalog_path, "recommend workouts", json_output)
    level = preferred_difficulty(profile)
    plans = recommend_workout_plans(
        catalog.workout_plans(), profile, limit=get_settings().recommendation.limit
    )

    if json_output:
        output_json({
            "success": True,
            "command": "recommend workouts",
            "data": {
                "difficulty": level.value,
                "plans": [
                    {
                        "id": p.id,
                        "name": p.name,
                        "goal_type": p.goal_type.value,
                        "difficulty_level": p.difficulty_level.value,
                        "duration_weeks": p.duration_weeks,
                        "days_per_week": p.days_per_week,
                    }
                    for p in plans
                ],
            },
            "human_summary": f"{len(plans)} workout plans for {profile.goal_type.value}",
        })
        return

    if not plans:
        console.print(f"[yellow]No workout plans found for goal '{profile.goal_type.value}'[/yellow]")
        return

    table = Table(title=f"Recommended Workout Plans ({level.value})")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Difficulty")
    table.add_column("Weeks", justify="right")
    table.add_column("Days/week", justify="right")
    for p in plans:
        table.add_row(
            str(p.id), p.name, p.difficulty_level.value,
            str(p.duration_weeks), str(p.days_per_week),
        )
    console.print(table)


# ============================================================================
# Recipe Commands
# ============================================================================


def _recipe_table(recipes: list[Recipe], title: str) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Meal")
    table.add_column("Calories", justify="right")
    table.add_column("P/C/F", justify="right")
    table.add_column("Diets", style="blue")
    for r in recipes:
        table.add_row(
            str(r.id),
            r.name,
            r.meal_type.value,
            f"{r.calories:.0f}",
            f"{r.protein:.0f}/{r.carbs:.0f}/{r.fat:.0f}",
            ", ".join(r.diet_types),
        )
    return table


def _recipe_summary(recipe: Recipe) -> dict:
    return {
        "id": recipe.id,
        "name": recipe.name,
        "meal_type": recipe.meal_type.value,
        "diet_types": list(recipe.diet_types),
        "calories": recipe.calories,
        "protein": recipe.protein,
        "carbs": recipe.carbs,
        "fat": recipe.fat,
    }


@recipes_app.command("list")
def recipes_list(
    diet: str = typer.Option("all", "--diet", help="Diet type or 'all'"),
    meal: str = typer.Option("all", "--meal", help="breakfast, lunch, dinner, snack or 'all'"),
    search: str = typer.Option("", "--search", "-s", help="Search term"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List recipes, optionally filtered by diet type, meal type and search term."""
    catalog = get_catalog(catalog_path, "recipes list", json_output)
    try:
        results = catalog.filter_recipes(diet_type=diet, meal_type=meal, search_term=search)
    except ValueError:
        fail("recipes list", f"Unknown meal type: {meal}", json_output,
             ["Use breakfast, lunch, dinner, snack or all"])

    if json_output:
        output_json({
            "success": True,
            "command": "recipes list",
            "data": [_recipe_summary(r) for r in results],
            "human_summary": f"{len(results)} recipes",
        })
        return

    if not results:
        console.print("[yellow]No recipes match these filters[/yellow]")
        return
    console.print(_recipe_table(results, "Recipes"))


@recipes_app.command("search")
def recipes_search(
    query: str = typer.Argument(..., help="Text to search names, descriptions and ingredients"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Search recipes by name, description or ingredient."""
    catalog = get_catalog(catalog_path, "recipes search", json_output)
    results = catalog.search_recipes(query)

    if json_output:
        output_json({
            "success": True,
            "command": "recipes search",
            "data": {
                "query": query,
                "results": [_recipe_summary(r) for r in results],
                "total_matches": len(results),
            },
            "human_summary": f"Found {len(results)} recipes matching '{query}'",
        })
        return

    if not results:
        console.print(f"[yellow]No recipes found matching '{query}'[/yellow]")
        return
    console.print(_recipe_table(results, f"Recipes matching '{query}'"))


@recipes_app.command("show")
def recipes_show(
    recipe_id: int = typer.Argument(..., help="Recipe ID"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show a recipe with its ingredients."""
    catalog = get_catalog(catalog_path, "recipes show", json_output)
    try:
        recipe = catalog.get_recipe(recipe_id)
    except RecordNotFoundError as e:
        fail("recipes show", str(e), json_output)

    if json_output:
        data = _recipe_summary(recipe)
        data["description"] = recipe.description
        data["ingredients"] = [
            {"name": i.name, "amount": i.amount, "unit": i.unit, "optional": i.optional}
            for i in recipe.ingredients
        ]
        data["instructions"] = list(recipe.instructions)
        output_json({"success": True, "command": "recipes show", "data": data})
        return

    console.print(f"\n[bold]{recipe.name}[/bold]")
    if recipe.description:
        console.print(recipe.description)
    console.print(f"Meal: {recipe.meal_type.value} | Diets: {', '.join(recipe.diet_types)}")
    console.print(
        f"{recipe.calories:.0f} kcal | P {recipe.protein:.0f}g | "
        f"C {recipe.carbs:.0f}g | F {recipe.fat:.0f}g"
    )
    for ingredient in recipe.ingredients:
        optional = " [dim](optional)[/dim]" if ingredient.optional else ""
        console.print(f"  - {ingredient.amount:g} {ingredient.unit} {ingredient.name}{optional}")


# ============================================================================
# Plan Catalog Commands
# ============================================================================


@plans_app.command("diets")
def plans_diets(
    goal: str = typer.Option("all", "--goal", help="Goal type or 'all'"),
    diet: str = typer.Option("all", "--diet", help="Diet type or 'all'"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List diet plans filtered by goal and diet type."""
    from fitplan.recommend import filter_diet_plans

    catalog = get_catalog(catalog_path, "plans diets", json_output)
    plans = filter_diet_plans(catalog.diet_plans(), goal=goal, diet_type=diet)

    if json_output:
        output_json({
            "success": True,
            "command": "plans diets",
            "data": [
                {
                    "id": p.id,
                    "name": p.name,
                    "goal_type": p.goal_type.value,
                    "diet_type": p.diet_type,
                    "daily_calories": p.daily_calories,
                    "duration_days": p.duration_days,
                }
                for p in plans
            ],
        })
        return

    table = Table(title="Diet Plans")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Goal")
    table.add_column("Diet")
    table.add_column("Calories", justify="right")
    for p in plans:
        table.add_row(str(p.id), p.name, p.goal_type.value, p.diet_type, str(p.daily_calories))
    console.print(table)


@plans_app.command("workouts")
def plans_workouts(
    goal: str = typer.Option("all", "--goal", help="Goal type or 'all'"),
    difficulty: str = typer.Option("all", "--difficulty", help="Difficulty or 'all'"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List workout plans filtered by goal and difficulty."""
    from fitplan.recommend import filter_workout_plans

    catalog = get_catalog(catalog_path, "plans workouts", json_output)
    plans = filter_workout_plans(catalog.workout_plans(), goal=goal, difficulty=difficulty)

    if json_output:
        output_json({
            "success": True,
            "command": "plans workouts",
            "data": [
                {
                    "id": p.id,
                    "name": p.name,
                    "goal_type": p.goal_type.value,
                    "difficulty_level": p.difficulty_level.value,
                    "duration_weeks": p.duration_weeks,
                    "days_per_week": p.days_per_week,
                }
                for p in plans
            ],
        })
        return

    table = Table(title="Workout Plans")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Goal")
    table.add_column("Difficulty")
    table.add_column("Weeks", justify="right")
    for p in plans:
        table.add_row(
            str(p.id), p.name, p.goal_type.value, p.difficulty_level.value,
            str(p.duration_weeks),
        )
    console.print(table)


PLAN_KINDS = ("diet", "workout")


@plans_app.command("show")
def plans_show(
    plan_id: int = typer.Argument(..., help="Plan ID"),
    kind: str = typer.Option("diet", "--kind", "-k", help="diet or workout"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show a diet plan's daily meals or a workout plan's daily exercises."""
    kind = kind.strip().lower()
    if kind not in PLAN_KINDS:
        fail("plans show", f"Unknown plan kind: {kind}", json_output, ["Use --kind diet or --kind workout"])

    catalog = get_catalog(catalog_path, "plans show", json_output)
    if kind == "workout":
        _show_workout_plan(catalog, plan_id, json_output)
    else:
        _show_diet_plan(catalog, plan_id, json_output)


def _show_diet_plan(catalog: InMemoryCatalog, plan_id: int, json_output: bool) -> None:
    try:
        plan = catalog.get_diet_plan(plan_id)
        schedule = catalog.diet_schedule(plan_id)
    except RecordNotFoundError as e:
        fail("plans show", str(e), json_output)

    if json_output:
        output_json({
            "success": True,
            "command": "plans show",
            "data": {
                "id": plan.id,
                "kind": "diet",
                "name": plan.name,
                "description": plan.description,
                "goal_type": plan.goal_type.value,
                "diet_type": plan.diet_type,
                "daily_calories": plan.daily_calories,
                "daily_protein": plan.daily_protein,
                "daily_carbs": plan.daily_carbs,
                "daily_fat": plan.daily_fat,
                "duration_days": plan.duration_days,
                "days": [
                    {
                        "day_number": day.day_number,
                        "description": day.description,
                        "meals": [
                            {
                                "recipe_id": recipe.id,
                                "name": recipe.name,
                                "meal_type": recipe.meal_type.value,
                                "servings": meal.servings,
                                "calories": recipe.calories * meal.servings,
                            }
                            for meal, recipe in meals
                        ],
                    }
                    for day, meals in schedule
                ],
            },
            "human_summary": f"{plan.name}: {plan.daily_calories} kcal/day, {len(schedule)} days listed",
        })
        return

    console.print(f"\n[bold]{plan.name}[/bold] ({plan.diet_type}, {plan.goal_type.value})")
    if plan.description:
        console.print(plan.description)
    console.print(
        f"{plan.daily_calories} kcal | P {plan.daily_protein}g | "
        f"C {plan.daily_carbs}g | F {plan.daily_fat}g | {plan.duration_days} days"
    )
    if not schedule:
        console.print("[yellow]No daily meal plans listed[/yellow]")
        return

    for day, meals in schedule:
        table = Table(title=day.description or f"Day {day.day_number}")
        table.add_column("Meal")
        table.add_column("Recipe")
        table.add_column("Servings", justify="right")
        table.add_column("Calories", justify="right")
        for meal, recipe in meals:
            table.add_row(
                recipe.meal_type.value, recipe.name, f"{meal.servings:g}",
                f"{recipe.calories * meal.servings:.0f}",
            )
        if not meals:
            table.add_row("-", "[dim]No meals listed[/dim]", "", "")
        console.print(table)


def _show_workout_plan(catalog: InMemoryCatalog, plan_id: int, json_output: bool) -> None:
    try:
        plan = catalog.get_workout_plan(plan_id)
        schedule = catalog.workout_schedule(plan_id)
    except RecordNotFoundError as e:
        fail("plans show", str(e), json_output)

    if json_output:
        days = []
        for day, entries in schedule:
            minutes, calories = estimate_workout_day(entries)
            days.append({
                "day_number": day.day_number,
                "focus_area": day.focus_area,
                "timed_minutes": minutes,
                "estimated_calories": calories,
                "exercises": [
                    {
                        "exercise_id": exercise.id,
                        "name": exercise.name,
                        "sets": planned.sets,
                        "reps": planned.reps,
                        "duration_minutes": planned.duration_minutes,
                        "rest_seconds": planned.rest_seconds,
                        "notes": planned.notes,
                        "order_index": planned.order_index,
                    }
                    for planned, exercise in entries
                ],
            })
        output_json({
            "success": True,
            "command": "plans show",
            "data": {
                "id": plan.id,
                "kind": "workout",
                "name": plan.name,
                "description": plan.description,
                "goal_type": plan.goal_type.value,
                "difficulty_level": plan.difficulty_level.value,
                "duration_weeks": plan.duration_weeks,
                "days_per_week": plan.days_per_week,
                "days": days,
            },
            "human_summary": f"{plan.name}: {plan.days_per_week} days/week for {plan.duration_weeks} weeks",
        })
        return

    console.print(
        f"\n[bold]{plan.name}[/bold] ({plan.difficulty_level.value}, {plan.goal_type.value})"
    )
    if plan.description:
        console.print(plan.description)
    console.print(f"{plan.days_per_week} days/week for {plan.duration_weeks} weeks")

    for day, entries in schedule:
        table = Table(title=f"Day {day.day_number}: {day.focus_area}")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Exercise")
        table.add_column("Sets x Reps")
        table.add_column("Rest", justify="right")
        for planned, exercise in entries:
            rest = f"{planned.rest_seconds}s" if planned.rest_seconds else ""
            table.add_row(str(planned.order_index), exercise.name, planned.prescription(), rest)
        if not entries:
            table.add_row("", "[dim]No exercises listed[/dim]", "", "")
        console.print(table)


# ============================================================================
# Exercise Commands
# ============================================================================


def _exercise_summary(exercise: Exercise) -> dict:
    return {
        "id": exercise.id,
        "name": exercise.name,
        "category_id": exercise.category_id,
        "difficulty_level": exercise.difficulty_level.value,
        "muscle_group": exercise.muscle_group,
        "calories_per_minute": exercise.calories_per_minute,
    }


@exercises_app.command("categories")
def exercises_categories(
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List exercise categories."""
    catalog = get_catalog(catalog_path, "exercises categories", json_output)
    categories = catalog.exercise_categories()

    if json_output:
        output_json({
            "success": True,
            "command": "exercises categories",
            "data": [
                {"id": c.id, "name": c.name, "description": c.description}
                for c in categories
            ],
        })
        return

    table = Table(title="Exercise Categories")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Description", style="dim")
    for c in categories:
        table.add_row(str(c.id), c.name, c.description)
    console.print(table)


@exercises_app.command("list")
def exercises_list(
    category: Optional[int] = typer.Option(None, "--category", "-c", help="Category ID"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List exercises, optionally for one category."""
    catalog = get_catalog(catalog_path, "exercises list", json_output)
    if category is None:
        results = list(catalog.exercises())
    else:
        try:
            results = catalog.exercises_in_category(category)
        except RecordNotFoundError as e:
            fail("exercises list", str(e), json_output,
                 ["Run 'fitplan exercises categories' to see category IDs"])

    if json_output:
        output_json({
            "success": True,
            "command": "exercises list",
            "data": [_exercise_summary(e) for e in results],
            "human_summary": f"{len(results)} exercises",
        })
        return

    if not results:
        console.print("[yellow]No exercises in this category[/yellow]")
        return

    table = Table(title="Exercises")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Difficulty")
    table.add_column("Muscles", style="dim")
    for e in results:
        table.add_row(str(e.id), e.name, e.difficulty_level.value, e.muscle_group)
    console.print(table)


@exercises_app.command("show")
def exercises_show(
    exercise_id: int = typer.Argument(..., help="Exercise ID"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show an exercise with its instructions."""
    catalog = get_catalog(catalog_path, "exercises show", json_output)
    try:
        exercise = catalog.get_exercise(exercise_id)
    except RecordNotFoundError as e:
        fail("exercises show", str(e), json_output)

    if json_output:
        data = _exercise_summary(exercise)
        data["description"] = exercise.description
        data["equipment_needed"] = exercise.equipment_needed
        data["instructions"] = exercise.instructions
        output_json({"success": True, "command": "exercises show", "data": data})
        return

    console.print(f"\n[bold]{exercise.name}[/bold] ({exercise.difficulty_level.value})")
    if exercise.description:
        console.print(exercise.description)
    console.print(f"Muscles: {exercise.muscle_group}")
    console.print(f"Equipment: {exercise.equipment_needed}")
    console.print(f"Burn: ~{exercise.calories_per_minute:g} kcal/min")
    if exercise.instructions:
        console.print(f"\n{exercise.instructions}")


# ============================================================================
# Food Commands
# ============================================================================


def _food_summary(food: Food) -> dict:
    return {
        "id": food.id,
        "name": food.name,
        "brand": food.brand,
        "calories": food.calories,
        "protein": food.protein,
        "carbs": food.carbs,
        "fat": food.fat,
        "serving_size": food.serving_size,
        "serving_unit": food.serving_unit,
    }


@foods_app.command("search")
def foods_search(
    query: str = typer.Argument(..., help="Text to search food names and brands"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Search foods by name or brand."""
    catalog = get_catalog(catalog_path, "foods search", json_output)
    results = catalog.search_foods(query)

    if json_output:
        output_json({
            "success": True,
            "command": "foods search",
            "data": {
                "query": query,
                "results": [_food_summary(f) for f in results],
                "total_matches": len(results),
            },
            "human_summary": f"Found {len(results)} foods matching '{query}'",
        })
        return

    if not results:
        console.print(f"[yellow]No foods found matching '{query}'[/yellow]")
        return

    table = Table(title=f"Foods matching '{query}'")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Brand", style="dim")
    table.add_column("Serving")
    table.add_column("Calories", justify="right")
    table.add_column("P/C/F", justify="right")
    for f in results:
        table.add_row(
            str(f.id), f.name, f.brand, f"{f.serving_size:g} {f.serving_unit}",
            f"{f.calories:.0f}", f"{f.protein:g}/{f.carbs:g}/{f.fat:g}",
        )
    console.print(table)


@foods_app.command("show")
def foods_show(
    food_id: int = typer.Argument(..., help="Food ID"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="YAML catalog file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show nutrition details for a food."""
    catalog = get_catalog(catalog_path, "foods show", json_output)
    try:
        food = catalog.get_food(food_id)
    except RecordNotFoundError as e:
        fail("foods show", str(e), json_output)

    if json_output:
        data = _food_summary(food)
        data["fiber"] = food.fiber
        data["sugar"] = food.sugar
        data["is_verified"] = food.is_verified
        output_json({"success": True, "command": "foods show", "data": data})
        return

    brand = f" ({food.brand})" if food.brand else ""
    console.print(f"\n[bold]{food.name}[/bold]{brand}")
    console.print(f"Per {food.serving_size:g} {food.serving_unit}:")
    console.print(
        f"{food.calories:.0f} kcal | P {food.protein:g}g | C {food.carbs:g}g | "
        f"F {food.fat:g}g | Fiber {food.fiber:g}g | Sugar {food.sugar:g}g"
    )


if __name__ == "__main__":
    app()
