"""Services for the food catalog and its recent and favorite lists."""

import logging
from dataclasses import dataclass, replace
from uuid import uuid4

from nutrition_ledger.domain.catalog import RECENT_FOODS_LIMIT, FoodItem
from nutrition_ledger.services.store import NutritionStore
from nutrition_ledger.services.updates import partial_changes

_logger = logging.getLogger(__name__)


@dataclass
class FoodCatalogService:
    """Application service for catalog lookup and food bookkeeping."""

    store: NutritionStore

    def list_foods(self) -> list[FoodItem]:
        """Return every food in catalog order."""
        return list(self.store.state.foods)

    def get_food(self, food_id: str) -> FoodItem | None:
        """Return a food by id, if present."""
        for food in self.store.state.foods:
            if food.id == food_id:
                return food
        return None

    def search_foods(self, query: str) -> list[FoodItem]:
        """Return foods whose name or brand contains the query."""
        return [food for food in self.store.state.foods if food.matches(query)]

    def add_food(self, payload: dict[str, object]) -> FoodItem:
        """Add a food to the catalog under a fresh id."""
        food = _food_from_payload(uuid4().hex, payload)
        state = self.store.state
        self.store.commit(replace(state, foods=(*state.foods, food)))
        return food

    def update_food(self, food_id: str, payload: dict[str, object]) -> FoodItem | None:
        """Apply a partial update to a food; logged entries keep their snapshot."""
        current = self.get_food(food_id)
        if current is None:
            return None
        changes = partial_changes(FoodItem, payload, managed={"id"})
        updated = replace(current, **changes)
        state = self.store.state
        self.store.commit(
            replace(
                state,
                foods=tuple(updated if food.id == food_id else food for food in state.foods),
            )
        )
        return updated

    def remove_food(self, food_id: str) -> None:
        """Remove a food from the catalog; unknown ids are ignored."""
        state = self.store.state
        foods = tuple(food for food in state.foods if food.id != food_id)
        if len(foods) == len(state.foods):
            return
        self.store.commit(replace(state, foods=foods))

    def add_to_recent(self, food_id: str) -> list[str]:
        """Move a food id to the front of the bounded recents list."""
        state = self.store.state
        recent = (
            food_id,
            *(existing for existing in state.recent_food_ids if existing != food_id),
        )[:RECENT_FOODS_LIMIT]
        self.store.commit(replace(state, recent_food_ids=recent))
        return list(recent)

    def toggle_favorite(self, food_id: str) -> bool:
        """Add or remove a favorite; return True when the food is now a favorite."""
        state = self.store.state
        if food_id in state.favorite_food_ids:
            favorites = tuple(fid for fid in state.favorite_food_ids if fid != food_id)
            is_favorite = False
        else:
            favorites = (*state.favorite_food_ids, food_id)
            is_favorite = True
        self.store.commit(replace(state, favorite_food_ids=favorites))
        return is_favorite

    def get_recent_foods(self) -> list[FoodItem]:
        """Return recent foods, skipping ids no longer in the catalog."""
        return self._resolve(self.store.state.recent_food_ids)

    def get_favorite_foods(self) -> list[FoodItem]:
        """Return favorite foods, skipping ids no longer in the catalog."""
        return self._resolve(self.store.state.favorite_food_ids)

    def _resolve(self, food_ids: tuple[str, ...]) -> list[FoodItem]:
        by_id = {food.id: food for food in self.store.state.foods}
        missing = [food_id for food_id in food_ids if food_id not in by_id]
        if missing:
            _logger.debug("Skipping unknown catalog ids: %s", missing)
        return [by_id[food_id] for food_id in food_ids if food_id in by_id]


def _food_from_payload(food_id: str, payload: dict[str, object]) -> FoodItem:
    return FoodItem(
        id=food_id,
        name=str(payload.get("name", "")),
        brand=payload.get("brand"),
        serving_size=str(payload.get("serving_size", "")),
        serving_size_grams=float(payload.get("serving_size_grams", 0.0)),
        calories=float(payload.get("calories", 0.0)),
        protein=float(payload.get("protein", 0.0)),
        carbs=float(payload.get("carbs", 0.0)),
        fat=float(payload.get("fat", 0.0)),
        fiber=_optional_float(payload.get("fiber")),
        sugar=_optional_float(payload.get("sugar")),
        sodium=_optional_float(payload.get("sodium")),
        is_custom=bool(payload.get("is_custom", True)),
        barcode=payload.get("barcode"),
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    return None
