"""Saved meal template service."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace
from uuid import uuid4

from nutrition_ledger.domain.ledger import Meal, MealName, sum_totals
from nutrition_ledger.domain.templates import SavedMealTemplate
from nutrition_ledger.services.clock import Clock
from nutrition_ledger.services.ledger import DailyLedgerService
from nutrition_ledger.services.store import NutritionStore
from nutrition_ledger.services.updates import partial_changes

_MANAGED_FIELDS = {"id", "totals", "created_at", "use_count", "last_used"}

_logger = logging.getLogger(__name__)


@dataclass
class SavedMealService:
    """Service for creating, editing and replaying saved meal templates."""

    store: NutritionStore
    ledger_service: DailyLedgerService
    clock: Clock

    def list_saved_meals(self) -> list[SavedMealTemplate]:
        """Return templates ranked by recent use then frequency."""
        return self._rank(list(self.store.state.saved_meals))

    def get_saved_meal(self, saved_meal_id: str) -> SavedMealTemplate | None:
        """Return a template by id, if present."""
        for template in self.store.state.saved_meals:
            if template.id == saved_meal_id:
                return template
        return None

    def save_meal(
        self, name: str, meals: Sequence[Meal], description: str | None = None
    ) -> SavedMealTemplate:
        """Store a new template; totals are derived from its meals."""
        frozen = tuple(meals)
        template = SavedMealTemplate(
            id=uuid4().hex,
            name=name,
            description=description,
            meals=frozen,
            totals=sum_totals(frozen),
            created_at=self.clock.now(),
            use_count=0,
        )
        state = self.store.state
        self.store.commit(replace(state, saved_meals=(*state.saved_meals, template)))
        return template

    def update_saved_meal(
        self, saved_meal_id: str, updates: dict[str, object]
    ) -> SavedMealTemplate | None:
        """Apply a partial update to the name, description or meals."""
        current = self.get_saved_meal(saved_meal_id)
        if current is None:
            return None
        changes = partial_changes(SavedMealTemplate, updates, managed=_MANAGED_FIELDS)
        if "meals" in changes:
            meals = tuple(changes["meals"])  # type: ignore[arg-type]
            changes["meals"] = meals
            changes["totals"] = sum_totals(meals)
        updated = replace(current, **changes)
        self._store_template(updated)
        return updated

    def delete_saved_meal(self, saved_meal_id: str) -> None:
        """Delete a template; unknown ids are ignored."""
        state = self.store.state
        remaining = tuple(t for t in state.saved_meals if t.id != saved_meal_id)
        if len(remaining) == len(state.saved_meals):
            return
        self.store.commit(replace(state, saved_meals=remaining))

    def use_saved_meal(
        self, saved_meal_id: str, meal_name: MealName
    ) -> SavedMealTemplate | None:
        """Replay every template entry into today's meal and bump usage."""
        template = self.get_saved_meal(saved_meal_id)
        if template is None:
            return None
        for meal in template.meals:
            for entry in meal.entries:
                self.ledger_service.add_meal_entry(meal_name, entry.without_identity())
        used = replace(
            template,
            use_count=template.use_count + 1,
            last_used=self.clock.now(),
        )
        self._store_template(used)
        _logger.info(
            "Saved meal used: id=%s meal=%s use_count=%s",
            saved_meal_id,
            meal_name,
            used.use_count,
        )
        return used

    def _store_template(self, template: SavedMealTemplate) -> None:
        state = self.store.state
        self.store.commit(
            replace(
                state,
                saved_meals=tuple(
                    template if existing.id == template.id else existing
                    for existing in state.saved_meals
                ),
            )
        )

    @staticmethod
    def _rank(items: list[SavedMealTemplate]) -> list[SavedMealTemplate]:
        """Rank templates by recent use then use count."""
        return sorted(
            items,
            key=lambda item: (
                item.last_used.timestamp() if item.last_used else float("-inf"),
                item.use_count,
            ),
            reverse=True,
        )
