"""Domain models for saved meal templates."""

from dataclasses import dataclass
from datetime import datetime

from nutrition_ledger.domain.ledger import Meal, NutritionTotals


@dataclass(frozen=True)
class SavedMealTemplate:
    """A named bundle of frozen meal entries that can be replayed into a day."""

    id: str
    name: str
    meals: tuple[Meal, ...]
    totals: NutritionTotals
    created_at: datetime
    use_count: int
    description: str | None = None
    last_used: datetime | None = None

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
