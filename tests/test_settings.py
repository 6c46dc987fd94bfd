"""Tests for YAML settings."""

from __future__ import annotations

from pathlib import Path

from fitplan.config.settings import Settings, get_settings, reload_settings


class TestSettings:
    """Tests for Settings.load and Settings.save."""

    def test_defaults_when_missing(self, tmp_path) -> None:
        settings = Settings.load(tmp_path / "missing.yaml")
        assert settings.catalog.path is None
        assert settings.generation.days == 7
        assert settings.generation.min_eligible_recipes == 15
        assert settings.generation.snack_calorie_threshold == 1500
        assert settings.generation.seed is None
        assert settings.recommendation.limit == 3
        assert settings.defaults.diet_type == "balanced"
        assert settings.defaults.output_format == "table"

    def test_partial_file(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("generation:\n  seed: 42\n  days: 5\ndefaults:\n  diet_type: Keto\n")
        settings = Settings.load(path)
        assert settings.generation.seed == 42
        assert settings.generation.days == 5
        assert settings.generation.min_eligible_recipes == 15
        assert settings.defaults.diet_type == "keto"

    def test_empty_sections(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("catalog:\ngeneration:\n")
        settings = Settings.load(path)
        assert settings.catalog.path is None
        assert settings.generation.days == 7

    def test_catalog_path_expanded(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("catalog:\n  path: ~/plans.yaml\n")
        settings = Settings.load(path)
        assert settings.catalog.path == Path.home() / "plans.yaml"

    def test_round_trip(self, tmp_path) -> None:
        path = tmp_path / "nested" / "config.yaml"
        settings = Settings()
        settings.recommendation.limit = 5
        settings.generation.snack_calorie_threshold = 1800
        settings.catalog.path = tmp_path / "catalog.yaml"
        settings.save(path)

        loaded = Settings.load(path)
        assert loaded.recommendation.limit == 5
        assert loaded.generation.snack_calorie_threshold == 1800
        assert loaded.catalog.path == tmp_path / "catalog.yaml"


class TestGlobalSettings:
    """Tests for the lazily loaded settings instance."""

    def test_reload_reads_default_location(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr("fitplan.config.settings._default_config_dir", lambda: tmp_path)
        monkeypatch.setattr("fitplan.config.settings._settings", None)
        (tmp_path / "config.yaml").write_text("recommendation:\n  limit: 2\n")

        settings = get_settings()
        assert settings.recommendation.limit == 2
        assert get_settings() is settings

        (tmp_path / "config.yaml").write_text("recommendation:\n  limit: 4\n")
        assert reload_settings().recommendation.limit == 4
