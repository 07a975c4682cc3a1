"""Domain models for nutrition goals."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionGoals:
    """Daily calorie, macro and water targets."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None  # mg
    water: float | None = None  # ml


DEFAULT_GOALS = NutritionGoals(
    calories=2000,
    protein=150,
    carbs=250,
    fat=67,
    fiber=25,
    sugar=50,
    sodium=2300,
    water=2500,
)
