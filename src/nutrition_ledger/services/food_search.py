"""Remote food search backed by USDA FoodData Central."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nutrition_ledger.adapters.fdc_client import FdcClient
from nutrition_ledger.domain.catalog import FoodItem
from nutrition_ledger.services.cache import Cache

# FDC reports nutrients per 100 g for the data types we search.
_NUTRIENT_IDS = {
    "calories": 1008,
    "protein": 1003,
    "fat": 1004,
    "carbs": 1005,
    "fiber": 1079,
    "sugar": 2000,
    "sodium": 1093,
}

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class FoodSearchService:
    """Looks up foods remotely and maps them to catalog items, with caching."""

    fdc_client: FdcClient
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(self, query: str, limit: int = 20) -> list[FoodItem]:
        """Search FDC foods by text."""
        cache_key = f"fdc:search:{query.lower()}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(query, page_size=limit),
            action="search",
        )
        foods = [_to_food_item(food) for food in payload.get("foods") or []]
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        _logger.info("Food search: query=%s results=%s", query, len(foods))
        return foods

    async def get_food(self, fdc_id: int) -> FoodItem:
        """Fetch one FDC food as a catalog item."""
        cache_key = f"fdc:food:{fdc_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodItem):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )
        food = _to_food_item(payload)
        self.cache.set(cache_key, food, ttl_seconds=self.food_ttl_seconds)
        return food

    async def lookup_barcode(self, barcode: str) -> FoodItem | None:
        """Find a branded food by UPC/GTIN; None when nothing matches."""
        if not _normalize_upc(barcode):
            return None
        cache_key = f"fdc:barcode:{barcode}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodItem):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(
                barcode, page_size=5, data_types=["Branded"]
            ),
            action=f"barcode:{barcode}",
        )
        for food in payload.get("foods") or []:
            if _normalize_upc(food.get("gtinUpc")) == _normalize_upc(barcode):
                item = _to_food_item(food, food_id=f"barcode-{barcode}", barcode=barcode)
                self.cache.set(cache_key, item, ttl_seconds=self.food_ttl_seconds)
                return item
        _logger.info("Barcode not found: barcode=%s", barcode)
        return None

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Food lookup %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    _status_code_from_exception(exc),
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _to_food_item(
    payload: dict[str, object], food_id: str | None = None, barcode: str | None = None
) -> FoodItem:
    nutrients = _extract_nutrients(payload.get("foodNutrients") or [])
    return FoodItem(
        id=food_id or f"usda-{payload.get('fdcId')}",
        name=str(payload.get("description") or "Unknown Food"),
        brand=payload.get("brandOwner") or payload.get("brandName") or None,
        serving_size="100g",
        serving_size_grams=100,
        calories=nutrients["calories"],
        protein=nutrients["protein"],
        carbs=nutrients["carbs"],
        fat=nutrients["fat"],
        fiber=nutrients["fiber"],
        sugar=nutrients["sugar"],
        sodium=nutrients["sodium"],
        is_custom=False,
        barcode=barcode or payload.get("gtinUpc") or None,
    )


def _extract_nutrients(food_nutrients: list[dict[str, object]]) -> dict[str, float]:
    """Pick the tracked nutrients out of an FDC nutrient list."""
    values = dict.fromkeys(_NUTRIENT_IDS, 0.0)
    by_id = {nutrient_id: name for name, nutrient_id in _NUTRIENT_IDS.items()}
    for nutrient in food_nutrients:
        nutrient_info = nutrient.get("nutrient") or {}
        nutrient_id = nutrient_info.get("id") or nutrient.get("nutrientId")
        # search results carry "value", food details carry "amount"
        amount = nutrient.get("amount", nutrient.get("value"))
        name = by_id.get(nutrient_id)
        if name is not None and amount is not None:
            values[name] = float(amount)
    return values


def _normalize_upc(value: object) -> str:
    return str(value or "").strip().lstrip("0")
