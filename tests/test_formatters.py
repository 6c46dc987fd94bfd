"""Tests for output formatters."""

from __future__ import annotations

import json

import pytest
from rich.console import Console

from fitplan.export import JSONFormatter, MarkdownFormatter, TableFormatter, get_formatter
from fitplan.generator import PlanPreferences, build_rng, generate_custom_plan
from fitplan.profiles.body_calc import compute_calorie_target


@pytest.fixture
def vegan_plan(catalog, male_profile):
    return generate_custom_plan(
        male_profile,
        PlanPreferences.create("vegan"),
        catalog.recipes(),
        build_rng(1),
    )


class TestJSONFormatter:
    """Tests for JSON output."""

    def test_targets(self, male_profile) -> None:
        data = json.loads(JSONFormatter().format_targets(compute_calorie_target(male_profile)))
        assert data["calories"]["target"] == 2278

    def test_plan_resolves_names_and_totals(self, vegan_plan, catalog) -> None:
        data = json.loads(JSONFormatter().format_plan(vegan_plan, catalog))
        assert data["days"][0]["slots"][0]["recipe_name"] == "Vegan Overnight Oats"
        assert data["daily_totals"][0]["calories"] == 1400
        assert len(data["daily_totals"]) == 7


class TestMarkdownFormatter:
    """Tests for Markdown output."""

    def test_targets(self, male_profile) -> None:
        text = MarkdownFormatter().format_targets(compute_calorie_target(male_profile))
        assert "**Target:** 2278 kcal" in text

    def test_plan(self, vegan_plan, catalog) -> None:
        text = MarkdownFormatter().format_plan(vegan_plan, catalog)
        assert text.startswith("# Custom Vegan Plan")
        assert "## Day 7" in text
        assert "| snack | Apple with Almond Butter | 200 |" in text


class TestTableFormatter:
    """Tests for Rich table output."""

    def test_plan_renders(self, vegan_plan, catalog) -> None:
        console = Console(record=True, width=120)
        TableFormatter(console).format_plan(vegan_plan, catalog)
        output = console.export_text()
        assert "Meal Schedule" in output
        assert "Vegan Lentil Curry" in output

    def test_targets_render(self, male_profile) -> None:
        console = Console(record=True, width=120)
        TableFormatter(console).format_targets(compute_calorie_target(male_profile))
        assert "2278 kcal" in console.export_text()


class TestGetFormatter:
    """Tests for formatter lookup."""

    def test_known(self) -> None:
        assert isinstance(get_formatter("json"), JSONFormatter)
        assert isinstance(get_formatter("markdown"), MarkdownFormatter)
        assert isinstance(get_formatter("table"), TableFormatter)

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown output format"):
            get_formatter("csv")
