"""JSON-compatible encoding of the whole ledger state."""

from dataclasses import asdict
from datetime import datetime

from nutrition_ledger.domain.catalog import FoodItem
from nutrition_ledger.domain.goals import DEFAULT_GOALS, NutritionGoals
from nutrition_ledger.domain.ledger import (
    DailyNutritionRecord,
    Meal,
    MealEntry,
    sum_totals,
)
from nutrition_ledger.domain.state import LedgerState
from nutrition_ledger.domain.templates import SavedMealTemplate

SCHEMA_VERSION = 1


def state_to_dict(state: LedgerState) -> dict[str, object]:
    """Encode a state snapshot as plain JSON types."""
    return {
        "version": SCHEMA_VERSION,
        "goals": asdict(state.goals),
        "foods": [asdict(food) for food in state.foods],
        "recent_food_ids": list(state.recent_food_ids),
        "favorite_food_ids": list(state.favorite_food_ids),
        "daily_records": [_record_to_dict(record) for record in state.daily_records],
        "saved_meals": [_template_to_dict(template) for template in state.saved_meals],
    }


def state_from_dict(payload: dict[str, object]) -> LedgerState:
    """Decode a stored payload; missing sections fall back to a fresh store."""
    initial = LedgerState.initial()
    foods = payload.get("foods")
    return LedgerState(
        goals=_parse_goals(payload.get("goals")),
        foods=(
            tuple(_parse_food(row) for row in foods)
            if isinstance(foods, list)
            else initial.foods
        ),
        recent_food_ids=tuple(str(fid) for fid in payload.get("recent_food_ids") or []),
        favorite_food_ids=tuple(
            str(fid) for fid in payload.get("favorite_food_ids") or []
        ),
        daily_records=tuple(
            _parse_record(row) for row in payload.get("daily_records") or []
        ),
        saved_meals=tuple(
            _parse_template(row) for row in payload.get("saved_meals") or []
        ),
    )


def _record_to_dict(record: DailyNutritionRecord) -> dict[str, object]:
    return {
        "date": record.date,
        "meals": [_meal_to_dict(meal) for meal in record.meals],
        "water_intake": record.water_intake,
        "goals": asdict(record.goals),
    }


def _template_to_dict(template: SavedMealTemplate) -> dict[str, object]:
    return {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "meals": [_meal_to_dict(meal) for meal in template.meals],
        "created_at": template.created_at.isoformat(),
        "last_used": template.last_used.isoformat() if template.last_used else None,
        "use_count": template.use_count,
    }


def _meal_to_dict(meal: Meal) -> dict[str, object]:
    return {
        "id": meal.id,
        "name": meal.name,
        "timestamp": meal.timestamp.isoformat(),
        "entries": [
            {**asdict(entry), "timestamp": entry.timestamp.isoformat()}
            for entry in meal.entries
        ],
    }


def _parse_goals(row: object) -> NutritionGoals:
    if not isinstance(row, dict):
        return DEFAULT_GOALS
    return NutritionGoals(
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        fiber=_optional_float(row.get("fiber")),
        sugar=_optional_float(row.get("sugar")),
        sodium=_optional_float(row.get("sodium")),
        water=_optional_float(row.get("water")),
    )


def _parse_food(row: dict[str, object]) -> FoodItem:
    return FoodItem(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        brand=row.get("brand"),
        serving_size=str(row.get("serving_size", "")),
        serving_size_grams=float(row.get("serving_size_grams", 0.0)),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        fiber=_optional_float(row.get("fiber")),
        sugar=_optional_float(row.get("sugar")),
        sodium=_optional_float(row.get("sodium")),
        is_custom=bool(row.get("is_custom", False)),
        barcode=row.get("barcode"),
    )


def _parse_entry(row: dict[str, object]) -> MealEntry:
    return MealEntry(
        id=str(row["id"]),
        food_id=str(row.get("food_id", "")),
        food_name=str(row.get("food_name", "")),
        serving_size=str(row.get("serving_size", "")),
        quantity=float(row.get("quantity", 0.0)),
        calories=float(row.get("calories", 0.0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        timestamp=datetime.fromisoformat(str(row["timestamp"])),
        fiber=_optional_float(row.get("fiber")),
        sugar=_optional_float(row.get("sugar")),
        sodium=_optional_float(row.get("sodium")),
    )


def _parse_meal(row: dict[str, object]) -> Meal:
    return Meal(
        id=str(row["id"]),
        name=row["name"],  # type: ignore[arg-type]
        entries=tuple(_parse_entry(entry) for entry in row.get("entries") or []),
        timestamp=datetime.fromisoformat(str(row["timestamp"])),
    )


def _parse_record(row: dict[str, object]) -> DailyNutritionRecord:
    """Rebuild a day; totals are derived again rather than trusted from storage."""
    meals = tuple(_parse_meal(meal) for meal in row.get("meals") or [])
    return DailyNutritionRecord(
        date=str(row["date"]),
        meals=meals,
        water_intake=float(row.get("water_intake", 0.0)),
        goals=_parse_goals(row.get("goals")),
        totals=sum_totals(meals),
    )


def _parse_template(row: dict[str, object]) -> SavedMealTemplate:
    meals = tuple(_parse_meal(meal) for meal in row.get("meals") or [])
    last_used_raw = row.get("last_used")
    return SavedMealTemplate(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        description=row.get("description"),
        meals=meals,
        totals=sum_totals(meals),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        last_used=(
            datetime.fromisoformat(last_used_raw)
            if isinstance(last_used_raw, str) and last_used_raw
            else None
        ),
        use_count=int(row.get("use_count", 0)),
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    return None
