"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

import pytest

from nutrition_ledger.adapters.fdc_client import FdcClient
from nutrition_ledger.config import Settings
from nutrition_ledger.containers import AppContainer, build_services
from nutrition_ledger.domain.ledger import NewMealEntry
from nutrition_ledger.domain.state import LedgerState
from nutrition_ledger.services.analytics import AnalyticsService
from nutrition_ledger.services.cache import InMemoryCache
from nutrition_ledger.services.catalog import FoodCatalogService
from nutrition_ledger.services.clock import Clock
from nutrition_ledger.services.food_search import FoodSearchService
from nutrition_ledger.services.goals import GoalService
from nutrition_ledger.services.ledger import DailyLedgerService
from nutrition_ledger.services.store import NutritionStore, StateRepository
from nutrition_ledger.services.templates import SavedMealService


@dataclass
class FixedClock(Clock):
    """Clock pinned to a settable instant."""

    current: datetime = field(
        default_factory=lambda: datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc)
    )

    def now(self) -> datetime:
        return self.current

    def today(self) -> str:
        return self.current.date().isoformat()

    def advance(self, **kwargs: float) -> None:
        self.current = self.current + timedelta(**kwargs)


@dataclass
class InMemoryStateRepository(StateRepository):
    """In-memory state repository that counts saves."""

    states: dict[str, LedgerState] = field(default_factory=dict)
    saves: int = 0

    def load(self, namespace: str) -> LedgerState | None:
        return self.states.get(namespace)

    def save(self, namespace: str, state: LedgerState) -> None:
        self.states[namespace] = state
        self.saves += 1


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory responses."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "foods": [
                {
                    "fdcId": 171077,
                    "description": "Chicken, broilers or fryers, breast, meat only",
                    "dataType": "SR Legacy",
                    "foodNutrients": [
                        {"nutrientId": 1008, "value": 120},
                        {"nutrientId": 1003, "value": 22.5},
                        {"nutrientId": 1004, "value": 2.6},
                        {"nutrientId": 1005, "value": 0},
                        {"nutrientId": 1093, "value": 45},
                    ],
                }
            ]
        }
    )
    food_payload: dict[str, object] = field(
        default_factory=lambda: {
            "fdcId": 171077,
            "description": "Chicken, broilers or fryers, breast, meat only",
            "foodNutrients": [
                {"nutrient": {"id": 1008}, "amount": 120},
                {"nutrient": {"id": 1003}, "amount": 22.5},
                {"nutrient": {"id": 1004}, "amount": 2.6},
                {"nutrient": {"id": 1005}, "amount": 0},
            ],
        }
    )
    search_calls: int = 0
    food_calls: int = 0
    last_data_types: list[str] | None = None

    async def search_foods(
        self, query: str, page_size: int = 20, data_types: list[str] | None = None
    ) -> dict[str, object]:
        self.search_calls += 1
        self.last_data_types = data_types
        return self.search_payload

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.food_calls += 1
        return self.food_payload


def make_entry(
    calories: float,
    protein: float = 0,
    carbs: float = 0,
    fat: float = 0,
    food_id: str = "f1",
    food_name: str = "Oats",
    quantity: float = 1,
) -> NewMealEntry:
    return NewMealEntry(
        food_id=food_id,
        food_name=food_name,
        serving_size="1 cup",
        quantity=quantity,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", fdc_api_key="fdc-key")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def state_repository() -> InMemoryStateRepository:
    return InMemoryStateRepository()


@pytest.fixture
def store(state_repository: InMemoryStateRepository) -> NutritionStore:
    return NutritionStore.open("test", state_repository)


@pytest.fixture
def goal_service(store: NutritionStore) -> GoalService:
    return GoalService(store)


@pytest.fixture
def catalog_service(store: NutritionStore) -> FoodCatalogService:
    return FoodCatalogService(store)


@pytest.fixture
def ledger_service(
    store: NutritionStore, catalog_service: FoodCatalogService, clock: FixedClock
) -> DailyLedgerService:
    return DailyLedgerService(store=store, catalog_service=catalog_service, clock=clock)


@pytest.fixture
def saved_meal_service(
    store: NutritionStore, ledger_service: DailyLedgerService, clock: FixedClock
) -> SavedMealService:
    return SavedMealService(store=store, ledger_service=ledger_service, clock=clock)


@pytest.fixture
def analytics_service(store: NutritionStore, clock: FixedClock) -> AnalyticsService:
    return AnalyticsService(store=store, clock=clock)


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def container(
    settings: Settings,
    store: NutritionStore,
    clock: FixedClock,
    fdc_client: FakeFdcClient,
) -> AppContainer:
    food_search_service = FoodSearchService(
        fdc_client=fdc_client,
        cache=InMemoryCache(clock),
    )

    async def close_resources() -> None:
        return None

    return build_services(settings, store, clock, food_search_service, close_resources)
