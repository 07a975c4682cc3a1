"""Goal configuration service."""

from dataclasses import dataclass, replace

from nutrition_ledger.domain.goals import NutritionGoals
from nutrition_ledger.services.store import NutritionStore


@dataclass
class GoalService:
    """Service for reading and replacing the active nutrition goals."""

    store: NutritionStore

    def get_goals(self) -> NutritionGoals:
        """Return the active goals."""
        return self.store.state.goals

    def set_goals(self, goals: NutritionGoals) -> NutritionGoals:
        """Replace the active goals wholesale."""
        self.store.commit(replace(self.store.state, goals=goals))
        return goals
