"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import uuid4

import httpx
from fastapi import FastAPI, HTTPException, Request, status

from nutrition_ledger.api.models import (
    FoodPayload,
    FoodUpdatePayload,
    GoalsPayload,
    MealEntryPayload,
    MealEntryUpdatePayload,
    SavedMealPayload,
    SavedMealUpdatePayload,
    UseSavedMealPayload,
    WaterPayload,
    meals_from_payload,
)
from nutrition_ledger.app_logging import configure_logging
from nutrition_ledger.containers import AppContainer
from nutrition_ledger.domain.ledger import MealName


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    def _container(request: Request) -> AppContainer:
        return request.app.state.container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/goals")
    async def get_goals(request: Request) -> dict[str, object]:
        return {"goals": _container(request).goal_service.get_goals()}

    @app.put("/goals")
    async def set_goals(payload: GoalsPayload, request: Request) -> dict[str, object]:
        goals = _container(request).goal_service.set_goals(payload.to_domain())
        return {"goals": goals}

    @app.get("/foods")
    async def search_foods(request: Request, q: str = "") -> dict[str, object]:
        """Search the local catalog; an empty query lists every food."""
        catalog = _container(request).catalog_service
        foods = catalog.search_foods(q) if q else catalog.list_foods()
        return {"foods": foods}

    @app.post("/foods", status_code=status.HTTP_201_CREATED)
    async def add_food(payload: FoodPayload, request: Request) -> dict[str, object]:
        food = _container(request).catalog_service.add_food(payload.model_dump())
        return {"food": food}

    @app.patch("/foods/{food_id}")
    async def update_food(
        food_id: str, payload: FoodUpdatePayload, request: Request
    ) -> dict[str, object]:
        food = _container(request).catalog_service.update_food(
            food_id, payload.model_dump(exclude_unset=True)
        )
        if food is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"food": food}

    @app.delete("/foods/{food_id}")
    async def remove_food(food_id: str, request: Request) -> dict[str, str]:
        _container(request).catalog_service.remove_food(food_id)
        return {"status": "ok"}

    @app.get("/foods/recent")
    async def recent_foods(request: Request) -> dict[str, object]:
        return {"foods": _container(request).catalog_service.get_recent_foods()}

    @app.get("/foods/favorites")
    async def favorite_foods(request: Request) -> dict[str, object]:
        return {"foods": _container(request).catalog_service.get_favorite_foods()}

    @app.post("/foods/{food_id}/recent")
    async def add_to_recent(food_id: str, request: Request) -> dict[str, object]:
        return {"recent": _container(request).catalog_service.add_to_recent(food_id)}

    @app.post("/foods/{food_id}/favorite")
    async def toggle_favorite(food_id: str, request: Request) -> dict[str, object]:
        favorite = _container(request).catalog_service.toggle_favorite(food_id)
        return {"food_id": food_id, "favorite": favorite}

    @app.get("/lookup/search")
    async def remote_search(q: str, request: Request) -> dict[str, object]:
        """Search USDA FoodData Central."""
        try:
            foods = await _container(request).food_search_service.search(q)
        except httpx.HTTPError as exc:
            logger.exception("Remote food search failed", extra={"query": q})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Food search is unavailable.",
            ) from exc
        return {"foods": foods}

    @app.get("/lookup/barcode/{barcode}")
    async def barcode_lookup(barcode: str, request: Request) -> dict[str, object]:
        try:
            food = await _container(request).food_search_service.lookup_barcode(
                barcode
            )
        except httpx.HTTPError as exc:
            logger.exception("Barcode lookup failed", extra={"barcode": barcode})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Barcode lookup is unavailable.",
            ) from exc
        if food is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"food": food}

    @app.get("/nutrition/today")
    async def today(request: Request) -> dict[str, object]:
        return {"record": _container(request).ledger_service.get_today_nutrition()}

    @app.post("/nutrition/today/meals/{meal_name}/entries")
    async def add_meal_entry(
        meal_name: MealName, payload: MealEntryPayload, request: Request
    ) -> dict[str, object]:
        record = _container(request).ledger_service.add_meal_entry(
            meal_name, payload.to_domain()
        )
        return {"record": record}

    @app.patch("/nutrition/entries/{entry_id}")
    async def update_meal_entry(
        entry_id: str, payload: MealEntryUpdatePayload, request: Request
    ) -> dict[str, object]:
        record = _container(request).ledger_service.update_meal_entry(
            entry_id, payload.model_dump(exclude_unset=True)
        )
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"record": record}

    @app.delete("/nutrition/entries/{entry_id}")
    async def remove_meal_entry(entry_id: str, request: Request) -> dict[str, object]:
        record = _container(request).ledger_service.remove_meal_entry(entry_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"record": record}

    @app.put("/nutrition/today/water")
    async def update_water(payload: WaterPayload, request: Request) -> dict[str, object]:
        record = _container(request).ledger_service.update_water_intake(payload.amount)
        return {"record": record}

    @app.get("/nutrition/week")
    async def week(request: Request) -> dict[str, object]:
        analytics = _container(request).analytics_service
        return {"summary": analytics.get_weekly_summary()}

    @app.get("/nutrition/month")
    async def month(request: Request) -> dict[str, object]:
        analytics = _container(request).analytics_service
        return {"summary": analytics.get_monthly_summary()}

    @app.get("/saved-meals")
    async def list_saved_meals(request: Request) -> dict[str, object]:
        return {"saved_meals": _container(request).saved_meal_service.list_saved_meals()}

    @app.post("/saved-meals", status_code=status.HTTP_201_CREATED)
    async def save_meal(payload: SavedMealPayload, request: Request) -> dict[str, object]:
        state_container = _container(request)
        meals = meals_from_payload(
            payload.meals, state_container.clock.now(), lambda: uuid4().hex
        )
        template = state_container.saved_meal_service.save_meal(
            payload.name, meals, description=payload.description
        )
        return {"saved_meal": template}

    @app.patch("/saved-meals/{saved_meal_id}")
    async def update_saved_meal(
        saved_meal_id: str, payload: SavedMealUpdatePayload, request: Request
    ) -> dict[str, object]:
        state_container = _container(request)
        updates: dict[str, object] = payload.model_dump(
            exclude_unset=True, exclude={"meals"}
        )
        if payload.meals is not None:
            updates["meals"] = meals_from_payload(
                payload.meals, state_container.clock.now(), lambda: uuid4().hex
            )
        template = state_container.saved_meal_service.update_saved_meal(
            saved_meal_id, updates
        )
        if template is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"saved_meal": template}

    @app.delete("/saved-meals/{saved_meal_id}")
    async def delete_saved_meal(saved_meal_id: str, request: Request) -> dict[str, str]:
        _container(request).saved_meal_service.delete_saved_meal(saved_meal_id)
        return {"status": "ok"}

    @app.post("/saved-meals/{saved_meal_id}/use")
    async def use_saved_meal(
        saved_meal_id: str, payload: UseSavedMealPayload, request: Request
    ) -> dict[str, object]:
        state_container = _container(request)
        template = state_container.saved_meal_service.use_saved_meal(
            saved_meal_id, payload.meal_name
        )
        if template is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {
            "saved_meal": template,
            "record": state_container.ledger_service.get_today_nutrition(),
        }

    return app
