"""Whole-store state for the nutrition ledger."""

from dataclasses import dataclass

from nutrition_ledger.domain.catalog import FoodItem
from nutrition_ledger.domain.goals import DEFAULT_GOALS, NutritionGoals
from nutrition_ledger.domain.ledger import DailyNutritionRecord
from nutrition_ledger.domain.seed_foods import seed_foods
from nutrition_ledger.domain.templates import SavedMealTemplate


@dataclass(frozen=True)
class LedgerState:
    """Immutable snapshot of everything the ledger owns.

    Mutations never edit a snapshot in place; services build a new one and
    commit it to the store.
    """

    goals: NutritionGoals
    foods: tuple[FoodItem, ...]
    recent_food_ids: tuple[str, ...]
    favorite_food_ids: tuple[str, ...]
    daily_records: tuple[DailyNutritionRecord, ...]
    saved_meals: tuple[SavedMealTemplate, ...]

    @classmethod
    def initial(cls) -> "LedgerState":
        """Return the state of a brand new store."""
        return cls(
            goals=DEFAULT_GOALS,
            foods=seed_foods(),
            recent_food_ids=(),
            favorite_food_ids=(),
            daily_records=(),
            saved_meals=(),
        )
