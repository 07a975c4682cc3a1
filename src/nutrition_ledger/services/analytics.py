"""Read-only analytics over the daily ledger history."""

from dataclasses import dataclass
from datetime import date, timedelta

from nutrition_ledger.domain.ledger import DailyNutritionRecord
from nutrition_ledger.services.clock import Clock
from nutrition_ledger.services.store import NutritionStore

WEEK_DAYS = 7
MONTH_DAYS = 30


@dataclass
class PeriodSummary:
    """Averages over the days that have a record in a window."""

    days: list[DailyNutritionRecord]
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float
    total_water: float


@dataclass
class AnalyticsService:
    """Service for trailing-window views of daily records."""

    store: NutritionStore
    clock: Clock

    def get_weekly_nutrition(self) -> list[DailyNutritionRecord]:
        """Return records from the trailing 7 days, today included."""
        return self._window(WEEK_DAYS)

    def get_monthly_nutrition(self) -> list[DailyNutritionRecord]:
        """Return records from the trailing 30 days, today included."""
        return self._window(MONTH_DAYS)

    def get_weekly_summary(self) -> PeriodSummary:
        """Return averages for the trailing week."""
        return summarize(self.get_weekly_nutrition())

    def get_monthly_summary(self) -> PeriodSummary:
        """Return averages for the trailing month."""
        return summarize(self.get_monthly_nutrition())

    def _window(self, days: int) -> list[DailyNutritionRecord]:
        today = self.clock.today()
        start = (date.fromisoformat(today) - timedelta(days=days)).isoformat()
        return [
            record
            for record in self.store.state.daily_records
            if start <= record.date <= today
        ]


def summarize(records: list[DailyNutritionRecord]) -> PeriodSummary:
    """Average the four macro totals over the given records."""
    count = max(len(records), 1)
    return PeriodSummary(
        days=records,
        avg_calories=sum(record.total_calories for record in records) / count,
        avg_protein=sum(record.total_protein for record in records) / count,
        avg_carbs=sum(record.total_carbs for record in records) / count,
        avg_fat=sum(record.total_fat for record in records) / count,
        total_water=sum(record.water_intake for record in records),
    )
