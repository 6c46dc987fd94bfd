"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".fitplan"


@dataclass
class CatalogConfig:
    """Catalog source configuration."""

    path: Optional[Path] = None  # None = bundled sample catalog


@dataclass
class GenerationConfig:
    """Custom plan generation settings."""

    days: int = 7
    min_eligible_recipes: int = 15
    snack_calorie_threshold: int = 1500
    seed: Optional[int] = None


@dataclass
class RecommendationConfig:
    """Plan recommendation settings."""

    limit: int = 3


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    diet_type: str = "balanced"
    output_format: str = "table"  # "table", "json", "markdown"


@dataclass
class Settings:
    """Main application settings."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    recommendation: RecommendationConfig = field(default_factory=RecommendationConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.fitplan/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse catalog config
        if "catalog" in data:
            catalog_data = data["catalog"] or {}
            if catalog_data.get("path"):
                settings.catalog.path = Path(catalog_data["path"]).expanduser()

        # Parse generation config
        if "generation" in data:
            gen_data = data["generation"] or {}
            if "days" in gen_data:
                settings.generation.days = int(gen_data["days"])
            if "min_eligible_recipes" in gen_data:
                settings.generation.min_eligible_recipes = int(
                    gen_data["min_eligible_recipes"]
                )
            if "snack_calorie_threshold" in gen_data:
                settings.generation.snack_calorie_threshold = int(
                    gen_data["snack_calorie_threshold"]
                )
            if gen_data.get("seed") is not None:
                settings.generation.seed = int(gen_data["seed"])

        # Parse recommendation config
        if "recommendation" in data:
            rec_data = data["recommendation"] or {}
            if "limit" in rec_data:
                settings.recommendation.limit = int(rec_data["limit"])

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "diet_type" in def_data:
                settings.defaults.diet_type = str(def_data["diet_type"]).lower()
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.fitplan/config.yaml
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "catalog": {
                "path": str(self.catalog.path) if self.catalog.path else None,
            },
            "generation": {
                "days": self.generation.days,
                "min_eligible_recipes": self.generation.min_eligible_recipes,
                "snack_calorie_threshold": self.generation.snack_calorie_threshold,
                "seed": self.generation.seed,
            },
            "recommendation": {
                "limit": self.recommendation.limit,
            },
            "defaults": {
                "diet_type": self.defaults.diet_type,
                "output_format": self.defaults.output_format,
            },
        }

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load()
    return _settings
