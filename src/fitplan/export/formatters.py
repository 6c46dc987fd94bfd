"""Output formatters for calorie targets and generated plans."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fitplan.catalog.repository import CatalogProvider
from fitplan.generator.models import GeneratedPlan
from fitplan.generator.planner import expand_plan, plan_nutrition
from fitplan.profiles.body_calc import CaloriePlan, calorie_plan_to_dict


class TableFormatter:
    """Format results as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format_targets(self, plan: CaloriePlan) -> None:
        """Print calorie and macro targets."""
        table = Table(title="Daily Targets")
        table.add_column("Metric")
        table.add_column("Value", justify="right")

        table.add_row("BMR", f"{plan.bmr:.0f} kcal")
        table.add_row("TDEE", f"{plan.tdee:.0f} kcal")
        table.add_row(
            "[bold]Target[/bold]",
            f"[bold]{plan.target_calories} kcal[/bold] ({plan.adjustment:+d})",
        )
        table.add_row(f"Protein ({plan.diet_type})", f"{plan.protein_g} g")
        table.add_row(f"Carbs ({plan.diet_type})", f"{plan.carbs_g} g")
        table.add_row(f"Fat ({plan.diet_type})", f"{plan.fat_g} g")

        self.console.print(table)

    def format_plan(self, plan: GeneratedPlan, catalog: CatalogProvider) -> None:
        """Print a generated plan, one row per meal."""
        header_lines = [
            f"[bold]{plan.name}[/bold] - {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            plan.description,
            f"Target: {plan.daily_calories} kcal | P {plan.daily_protein}g | "
            f"C {plan.daily_carbs}g | F {plan.daily_fat}g",
        ]
        if plan.exclusions_relaxed:
            header_lines.append(
                "[yellow]Too few recipes without "
                f"{', '.join(plan.excluded_ingredients)}; exclusions were relaxed[/yellow]"
            )
        self.console.print(Panel("\n".join(header_lines), title=plan.id))

        table = Table(title="Meal Schedule")
        table.add_column("Day", justify="right")
        table.add_column("Meal")
        table.add_column("Recipe", style="cyan", max_width=45)
        table.add_column("Servings", justify="right")
        table.add_column("Calories", justify="right")

        totals = {n.day_number: n for n in plan_nutrition(plan, catalog)}
        for day, meals in expand_plan(plan, catalog):
            if not meals:
                table.add_row(str(day.day_number), "-", "[dim]no recipes available[/dim]", "", "")
            for slot, recipe in meals:
                table.add_row(
                    str(day.day_number),
                    slot.meal_type.value,
                    recipe.name,
                    str(slot.servings),
                    f"{recipe.calories * slot.servings:.0f}",
                )
            table.add_row(
                "", "[bold]total[/bold]", "", "",
                f"[bold]{totals[day.day_number].calories:.0f}[/bold]",
                end_section=True,
            )

        self.console.print(table)


class JSONFormatter:
    """Format results as JSON for programmatic use."""

    def format_targets(self, plan: CaloriePlan) -> str:
        return json.dumps(calorie_plan_to_dict(plan), indent=2)

    def format_plan(self, plan: GeneratedPlan, catalog: CatalogProvider) -> str:
        """Return JSON string with recipe names and daily totals resolved."""
        data = plan.to_dict()
        names = {r.id: r.name for r in catalog.recipes()}
        for day in data["days"]:
            for slot in day["slots"]:
                slot["recipe_name"] = names.get(slot["recipe_id"])
        data["daily_totals"] = [
            {
                "day_number": n.day_number,
                "calories": round(n.calories, 1),
                "protein": round(n.protein, 1),
                "carbs": round(n.carbs, 1),
                "fat": round(n.fat, 1),
            }
            for n in plan_nutrition(plan, catalog)
        ]
        return json.dumps(data, indent=2)


class MarkdownFormatter:
    """Format results as Markdown for sharing or documentation."""

    def format_targets(self, plan: CaloriePlan) -> str:
        lines = [
            "# Daily Targets",
            "",
            f"**BMR:** {plan.bmr:.0f} kcal",
            f"**TDEE:** {plan.tdee:.0f} kcal",
            f"**Target:** {plan.target_calories} kcal",
            "",
            "| Macro | Grams |",
            "|-------|-------|",
            f"| Protein | {plan.protein_g} |",
            f"| Carbs | {plan.carbs_g} |",
            f"| Fat | {plan.fat_g} |",
        ]
        return "\n".join(lines)

    def format_plan(self, plan: GeneratedPlan, catalog: CatalogProvider) -> str:
        lines = [
            f"# {plan.name}",
            "",
            plan.description,
            "",
            f"**Daily Calories:** {plan.daily_calories} kcal",
            f"**Macros:** {plan.daily_protein}g protein, {plan.daily_carbs}g carbs, "
            f"{plan.daily_fat}g fat",
        ]
        if plan.exclusions_relaxed:
            lines.append(
                f"**Note:** exclusions ({', '.join(plan.excluded_ingredients)}) were relaxed"
            )

        for day, meals in expand_plan(plan, catalog):
            lines.extend(["", f"## Day {day.day_number}", ""])
            if not meals:
                lines.append("_No recipes available_")
                continue
            lines.extend(["| Meal | Recipe | Calories |", "|------|--------|----------|"])
            for slot, recipe in meals:
                lines.append(
                    f"| {slot.meal_type.value} | {recipe.name} | "
                    f"{recipe.calories * slot.servings:.0f} |"
                )

        return "\n".join(lines)


def get_formatter(output_format: str, console: Optional[Console] = None):
    """Return the formatter for 'table', 'json' or 'markdown'."""
    if output_format == "table":
        return TableFormatter(console)
    elif output_format == "json":
        return JSONFormatter()
    elif output_format == "markdown":
        return MarkdownFormatter()
    else:
        raise ValueError(f"Unknown output format: {output_format}")
