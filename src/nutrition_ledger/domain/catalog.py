"""Domain models for the food catalog."""

from dataclasses import dataclass

RECENT_FOODS_LIMIT = 10


@dataclass(frozen=True)
class FoodItem:
    """A known food with macros for one reference serving."""

    id: str
    name: str
    serving_size: str
    serving_size_grams: float
    calories: float
    protein: float
    carbs: float
    fat: float
    is_custom: bool
    brand: str | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    barcode: str | None = None

    def matches(self, query: str) -> bool:
        """Return True when the query is a case-insensitive substring of name or brand."""
        needle = query.lower()
        if needle in self.name.lower():
            return True
        return bool(self.brand) and needle in self.brand.lower()
