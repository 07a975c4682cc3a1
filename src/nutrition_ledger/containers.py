"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from nutrition_ledger.adapters.fdc_client import HttpxFdcClient
from nutrition_ledger.adapters.json_file_state_repository import (
    JsonFileStateRepository,
)
from nutrition_ledger.adapters.supabase_state_repository import (
    SupabaseStateRepository,
)
from nutrition_ledger.config import Settings, parse_timezone
from nutrition_ledger.services.analytics import AnalyticsService
from nutrition_ledger.services.cache import InMemoryCache
from nutrition_ledger.services.catalog import FoodCatalogService
from nutrition_ledger.services.clock import Clock, SystemClock
from nutrition_ledger.services.food_search import FoodSearchService
from nutrition_ledger.services.goals import GoalService
from nutrition_ledger.services.ledger import DailyLedgerService
from nutrition_ledger.services.store import NutritionStore, StateRepository
from nutrition_ledger.services.templates import SavedMealService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    store: NutritionStore
    goal_service: GoalService
    catalog_service: FoodCatalogService
    ledger_service: DailyLedgerService
    saved_meal_service: SavedMealService
    analytics_service: AnalyticsService
    food_search_service: FoodSearchService
    close_resources: Callable[[], Awaitable[None]]


def build_state_repository(settings: Settings) -> StateRepository | None:
    """Create the persistence adapter selected by ``storage_backend``."""
    backend = settings.storage_backend.strip().lower()
    if backend == "memory":
        return None
    if backend == "json":
        return JsonFileStateRepository(Path(settings.data_dir).expanduser())
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires supabase_url and key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseStateRepository(client)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


def build_services(
    settings: Settings,
    store: NutritionStore,
    clock: Clock,
    food_search_service: FoodSearchService,
    close_resources: Callable[[], Awaitable[None]],
) -> AppContainer:
    """Wire the ledger services around an existing store."""
    goal_service = GoalService(store)
    catalog_service = FoodCatalogService(store)
    ledger_service = DailyLedgerService(
        store=store,
        catalog_service=catalog_service,
        clock=clock,
    )
    saved_meal_service = SavedMealService(
        store=store,
        ledger_service=ledger_service,
        clock=clock,
    )
    analytics_service = AnalyticsService(store=store, clock=clock)
    return AppContainer(
        settings=settings,
        clock=clock,
        store=store,
        goal_service=goal_service,
        catalog_service=catalog_service,
        ledger_service=ledger_service,
        saved_meal_service=saved_meal_service,
        analytics_service=analytics_service,
        food_search_service=food_search_service,
        close_resources=close_resources,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    clock = SystemClock(parse_timezone(resolved_settings.timezone))
    store = NutritionStore.open(
        resolved_settings.storage_namespace,
        build_state_repository(resolved_settings),
    )
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    food_search_service = FoodSearchService(
        fdc_client=fdc_client,
        cache=InMemoryCache(clock),
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return build_services(
        resolved_settings, store, clock, food_search_service, close_resources
    )
