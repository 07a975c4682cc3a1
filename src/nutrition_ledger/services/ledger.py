"""Daily ledger service: per-day meals, entries, water and totals."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from uuid import uuid4

from nutrition_ledger.domain.ledger import (
    DailyNutritionRecord,
    Meal,
    MealEntry,
    MealName,
    NewMealEntry,
)
from nutrition_ledger.services.catalog import FoodCatalogService
from nutrition_ledger.services.clock import Clock
from nutrition_ledger.services.store import NutritionStore
from nutrition_ledger.services.updates import partial_changes

_logger = logging.getLogger(__name__)


@dataclass
class DailyLedgerService:
    """Service that owns daily records and keeps their totals derived."""

    store: NutritionStore
    catalog_service: FoodCatalogService
    clock: Clock

    def list_days(self) -> list[DailyNutritionRecord]:
        """Return every daily record in creation order."""
        return list(self.store.state.daily_records)

    def get_day(self, day: str) -> DailyNutritionRecord | None:
        """Return the record for a YYYY-MM-DD date key, if present."""
        for record in self.store.state.daily_records:
            if record.date == day:
                return record
        return None

    def get_today_nutrition(self) -> DailyNutritionRecord | None:
        """Return today's record without creating it."""
        return self.get_day(self.clock.today())

    def add_meal_entry(
        self, meal_name: MealName, entry: NewMealEntry
    ) -> DailyNutritionRecord:
        """Log an entry into today's meal of the given name."""
        now = self.clock.now()
        logged = MealEntry(
            id=uuid4().hex,
            food_id=entry.food_id,
            food_name=entry.food_name,
            serving_size=entry.serving_size,
            quantity=entry.quantity,
            calories=entry.calories,
            protein=entry.protein,
            carbs=entry.carbs,
            fat=entry.fat,
            timestamp=now,
            fiber=entry.fiber,
            sugar=entry.sugar,
            sodium=entry.sodium,
        )
        record = self._today_or_new()
        existing = record.find_meal(meal_name)
        if existing is None:
            meals = (
                *record.meals,
                Meal(id=uuid4().hex, name=meal_name, entries=(logged,), timestamp=now),
            )
        else:
            meals = tuple(
                replace(meal, entries=(*meal.entries, logged))
                if meal.name == meal_name
                else meal
                for meal in record.meals
            )
        updated = record.with_meals(meals)
        self._store_record(updated)
        self.catalog_service.add_to_recent(entry.food_id)
        return updated

    def update_meal_entry(
        self, entry_id: str, updates: dict[str, object]
    ) -> DailyNutritionRecord | None:
        """Apply a partial update to an entry on any day and refresh totals."""
        changes = partial_changes(MealEntry, updates, managed={"id"})
        return self._rewrite_entry(
            entry_id,
            lambda entries: tuple(
                replace(entry, **changes) if entry.id == entry_id else entry
                for entry in entries
            ),
        )

    def remove_meal_entry(self, entry_id: str) -> DailyNutritionRecord | None:
        """Remove an entry from whichever day holds it and refresh totals."""
        return self._rewrite_entry(
            entry_id,
            lambda entries: tuple(entry for entry in entries if entry.id != entry_id),
        )

    def update_water_intake(self, amount: float) -> DailyNutritionRecord:
        """Set today's water intake in ml (absolute, not cumulative)."""
        record = replace(self._today_or_new(), water_intake=amount)
        self._store_record(record)
        return record

    def _today_or_new(self) -> DailyNutritionRecord:
        today = self.clock.today()
        record = self.get_day(today)
        if record is None:
            _logger.info("Creating daily record: date=%s", today)
            return DailyNutritionRecord.empty(today, self.store.state.goals)
        return record

    def _store_record(self, record: DailyNutritionRecord) -> None:
        state = self.store.state
        if any(existing.date == record.date for existing in state.daily_records):
            records = tuple(
                record if existing.date == record.date else existing
                for existing in state.daily_records
            )
        else:
            records = (*state.daily_records, record)
        self.store.commit(replace(state, daily_records=records))

    def _rewrite_entry(
        self,
        entry_id: str,
        rewrite: Callable[[tuple[MealEntry, ...]], tuple[MealEntry, ...]],
    ) -> DailyNutritionRecord | None:
        for record in self.store.state.daily_records:
            if not any(entry.id == entry_id for entry in record.entries):
                continue
            meals = tuple(
                replace(meal, entries=rewrite(meal.entries)) for meal in record.meals
            )
            updated = record.with_meals(meals)
            self._store_record(updated)
            return updated
        _logger.debug("Meal entry not found: entry_id=%s", entry_id)
        return None
