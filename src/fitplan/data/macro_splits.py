"""Macronutrient splits by diet type.

Each diet type maps to the share of daily calories that should come from
protein, carbohydrate and fat. Shares always sum to 1.0. Diet types that
aren't in the table (paleo, mediterranean, ...) use the balanced split.

Usage:
    from fitplan.data.macro_splits import macro_split, macro_grams
    split = macro_split("keto")
    grams = macro_grams(1600, "keto")  # 100g protein, 20g carbs, 124g fat
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Energy density (kcal per gram)
PROTEIN_KCAL_PER_GRAM = 4
CARBS_KCAL_PER_GRAM = 4
FAT_KCAL_PER_GRAM = 9

DEFAULT_DIET_TYPE = "balanced"


@dataclass(frozen=True)
class MacroSplit:
    """Share of calories per macronutrient (0.0 to 1.0 range)."""

    protein_pct: float
    carbs_pct: float
    fat_pct: float

    def total(self) -> float:
        return self.protein_pct + self.carbs_pct + self.fat_pct


@dataclass(frozen=True)
class MacroGrams:
    """Daily macronutrient targets in grams."""

    protein_g: int
    carbs_g: int
    fat_g: int

    @property
    def calories(self) -> int:
        """Calories implied by the rounded gram targets."""
        return (
            self.protein_g * PROTEIN_KCAL_PER_GRAM
            + self.carbs_g * CARBS_KCAL_PER_GRAM
            + self.fat_g * FAT_KCAL_PER_GRAM
        )


@dataclass(frozen=True)
class DietType:
    """Descriptor for a selectable diet type."""

    id: str
    name: str
    description: str


BALANCED_SPLIT = MacroSplit(protein_pct=0.25, carbs_pct=0.50, fat_pct=0.25)
PLANT_BASED_SPLIT = MacroSplit(protein_pct=0.20, carbs_pct=0.55, fat_pct=0.25)

MACRO_SPLITS: dict[str, MacroSplit] = {
    "keto": MacroSplit(protein_pct=0.25, carbs_pct=0.05, fat_pct=0.70),
    "low_carb": MacroSplit(protein_pct=0.30, carbs_pct=0.20, fat_pct=0.50),
    "high_protein": MacroSplit(protein_pct=0.40, carbs_pct=0.30, fat_pct=0.30),
    "vegan": PLANT_BASED_SPLIT,
    "vegetarian": PLANT_BASED_SPLIT,
    "balanced": BALANCED_SPLIT,
}


DIET_TYPES: list[DietType] = [
    DietType("balanced", "Balanced", "A balanced diet with a mix of all food groups"),
    DietType("low_carb", "Low Carb", "Reduced carbohydrate intake with higher protein and fat"),
    DietType("high_protein", "High Protein", "Increased protein intake for muscle building and recovery"),
    DietType("keto", "Ketogenic", "Very low carb, high fat diet to achieve ketosis"),
    DietType("vegetarian", "Vegetarian", "Plant-based diet excluding meat but including dairy and eggs"),
    DietType("vegan", "Vegan", "Plant-based diet excluding all animal products"),
    DietType("paleo", "Paleo", "Based on foods presumed to be available to paleolithic humans"),
    DietType("mediterranean", "Mediterranean", "Based on the traditional cuisine of Mediterranean countries"),
]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


def macro_split(diet_type: str | None) -> MacroSplit:
    """Get the macro split for a diet type (balanced if unknown)."""
    if not diet_type:
        return BALANCED_SPLIT
    return MACRO_SPLITS.get(diet_type.strip().lower(), BALANCED_SPLIT)


def grams_from_calories(target_calories: float, pct: float, kcal_per_gram: float) -> int:
    """Convert a share of daily calories to whole grams of one macronutrient."""
    return round_half_up(target_calories * pct / kcal_per_gram)


def macro_grams(target_calories: float, diet_type: str | None) -> MacroGrams:
    """Split a calorie target into protein/carbs/fat grams for a diet type.

    Each macro is rounded on its own, so ``MacroGrams.calories`` can drift
    from ``target_calories`` by a few kcal.
    """
    split = macro_split(diet_type)
    return MacroGrams(
        protein_g=grams_from_calories(target_calories, split.protein_pct, PROTEIN_KCAL_PER_GRAM),
        carbs_g=grams_from_calories(target_calories, split.carbs_pct, CARBS_KCAL_PER_GRAM),
        fat_g=grams_from_calories(target_calories, split.fat_pct, FAT_KCAL_PER_GRAM),
    )


def get_diet_type(diet_type_id: str) -> DietType | None:
    """Look up a diet type descriptor by id."""
    for diet in DIET_TYPES:
        if diet.id == diet_type_id:
            return diet
    return None
