"""Domain models for the daily nutrition ledger."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

from nutrition_ledger.domain.goals import NutritionGoals

MealName = Literal["breakfast", "lunch", "dinner", "snacks"]
MEAL_NAMES: tuple[MealName, ...] = ("breakfast", "lunch", "dinner", "snacks")


@dataclass(frozen=True)
class NewMealEntry:
    """Entry data supplied by the caller before an id and timestamp are assigned.

    Macro values are already multiplied by ``quantity``.
    """

    food_id: str
    food_name: str
    serving_size: str
    quantity: float
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None


@dataclass(frozen=True)
class MealEntry:
    """A logged act of eating, with a snapshot of its nutrition."""

    id: str
    food_id: str
    food_name: str
    serving_size: str
    quantity: float
    calories: float
    protein: float
    carbs: float
    fat: float
    timestamp: datetime
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None

    def without_identity(self) -> NewMealEntry:
        """Return the entry data with id and timestamp stripped."""
        return NewMealEntry(
            food_id=self.food_id,
            food_name=self.food_name,
            serving_size=self.serving_size,
            quantity=self.quantity,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            fiber=self.fiber,
            sugar=self.sugar,
            sodium=self.sodium,
        )


@dataclass(frozen=True)
class Meal:
    """A named meal slot holding ordered entries."""

    id: str
    name: MealName
    entries: tuple[MealEntry, ...]
    timestamp: datetime


@dataclass(frozen=True)
class NutritionTotals:
    """Summed nutrition across a set of entries."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0


def sum_totals(meals: tuple[Meal, ...]) -> NutritionTotals:
    """Sum every entry of every meal from scratch."""
    entries = [entry for meal in meals for entry in meal.entries]
    return NutritionTotals(
        calories=sum(entry.calories for entry in entries),
        protein=sum(entry.protein for entry in entries),
        carbs=sum(entry.carbs for entry in entries),
        fat=sum(entry.fat for entry in entries),
        fiber=sum(entry.fiber or 0.0 for entry in entries),
        sugar=sum(entry.sugar or 0.0 for entry in entries),
        sodium=sum(entry.sodium or 0.0 for entry in entries),
    )


@dataclass(frozen=True)
class DailyNutritionRecord:
    """All meals and water logged on one local calendar date.

    ``totals`` is always derived from ``meals``; build records through
    :meth:`with_meals` so the two never drift apart.
    """

    date: str  # YYYY-MM-DD
    meals: tuple[Meal, ...]
    water_intake: float
    goals: NutritionGoals
    totals: NutritionTotals

    @classmethod
    def empty(cls, day: str, goals: NutritionGoals) -> "DailyNutritionRecord":
        """Create a record with no meals for the given date."""
        return cls(
            date=day,
            meals=(),
            water_intake=0.0,
            goals=goals,
            totals=NutritionTotals(),
        )

    def with_meals(self, meals: tuple[Meal, ...]) -> "DailyNutritionRecord":
        """Return a copy holding ``meals`` with totals recomputed."""
        return DailyNutritionRecord(
            date=self.date,
            meals=meals,
            water_intake=self.water_intake,
            goals=self.goals,
            totals=sum_totals(meals),
        )

    def find_meal(self, name: str) -> Meal | None:
        """Return the meal with the given name, if present."""
        for meal in self.meals:
            if meal.name == name:
                return meal
        return None

    @property
    def entries(self) -> list[MealEntry]:
        return [entry for meal in self.meals for entry in meal.entries]

    @property
    def total_calories(self) -> float:
        return self.totals.calories

    @property
    def total_protein(self) -> float:
        return self.totals.protein

    @property
    def total_carbs(self) -> float:
        return self.totals.carbs

    @property
    def total_fat(self) -> float:
        return self.totals.fat

    @property
    def total_fiber(self) -> float:
        return self.totals.fiber

    @property
    def total_sugar(self) -> float:
        return self.totals.sugar

    @property
    def total_sodium(self) -> float:
        return self.totals.sodium
