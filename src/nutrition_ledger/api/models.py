"""Request models for the ledger HTTP API."""

from collections.abc import Callable
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from nutrition_ledger.domain.goals import NutritionGoals
from nutrition_ledger.domain.ledger import Meal, MealEntry, MealName, NewMealEntry


class GoalsPayload(BaseModel):
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    water: float | None = None

    def to_domain(self) -> NutritionGoals:
        return NutritionGoals(**self.model_dump())


class FoodPayload(BaseModel):
    name: str
    serving_size: str
    serving_size_grams: float
    calories: float
    protein: float
    carbs: float
    fat: float
    brand: str | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    is_custom: bool = True
    barcode: str | None = None


class MealEntryPayload(BaseModel):
    """Entry data as logged by the client; macros already scaled by quantity."""

    food_id: str
    food_name: str
    serving_size: str
    quantity: float = 1
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None

    def to_domain(self) -> NewMealEntry:
        return NewMealEntry(**self.model_dump())


class WaterPayload(BaseModel):
    amount: float


class SavedMealEntryPayload(MealEntryPayload):
    id: str | None = None
    timestamp: datetime | None = None


class SavedMealGroupPayload(BaseModel):
    name: MealName
    entries: list[SavedMealEntryPayload] = Field(default_factory=list)


class SavedMealPayload(BaseModel):
    name: str
    description: str | None = None
    meals: list[SavedMealGroupPayload] = Field(default_factory=list)


class UseSavedMealPayload(BaseModel):
    meal_name: MealName


def meals_from_payload(
    groups: list[SavedMealGroupPayload], now: datetime, new_id: Callable[[], str]
) -> tuple[Meal, ...]:
    """Build frozen meals for a template from request data."""
    meals = []
    for group in groups:
        entries = tuple(
            MealEntry(
                id=entry.id or new_id(),
                timestamp=entry.timestamp or now,
                **entry.model_dump(exclude={"id", "timestamp"}),
            )
            for entry in group.entries
        )
        meals.append(Meal(id=new_id(), name=group.name, entries=entries, timestamp=now))
    return tuple(meals)


def _reject_null(value: object) -> object:
    if value is None:
        raise ValueError("value cannot be null")
    return value


class MealEntryUpdatePayload(BaseModel):
    """Partial entry update; only fields sent by the client are applied.

    Fields default to None so they can be omitted, but only the optional
    nutrients accept an explicit null.
    """

    food_id: str | None = None
    food_name: str | None = None
    serving_size: str | None = None
    quantity: float | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None

    check_required = field_validator(
        "food_id",
        "food_name",
        "serving_size",
        "quantity",
        "calories",
        "protein",
        "carbs",
        "fat",
        mode="before",
    )(_reject_null)


class FoodUpdatePayload(BaseModel):
    name: str | None = None
    brand: str | None = None
    serving_size: str | None = None
    serving_size_grams: float | None = None
    calories: float | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    barcode: str | None = None

    check_required = field_validator(
        "name",
        "serving_size",
        "serving_size_grams",
        "calories",
        "protein",
        "carbs",
        "fat",
        mode="before",
    )(_reject_null)


class SavedMealUpdatePayload(BaseModel):
    name: str | None = None
    description: str | None = None
    meals: list[SavedMealGroupPayload] | None = None

    check_required = field_validator("name", "meals", mode="before")(_reject_null)
