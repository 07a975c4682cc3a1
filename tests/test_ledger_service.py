"""Tests for the daily ledger service."""

from nutrition_ledger.domain.goals import NutritionGoals
from nutrition_ledger.domain.ledger import DailyNutritionRecord, NewMealEntry
from nutrition_ledger.services.catalog import FoodCatalogService
from nutrition_ledger.services.goals import GoalService
from nutrition_ledger.services.ledger import DailyLedgerService
from tests.conftest import FixedClock, make_entry


def _assert_totals_match_entries(record: DailyNutritionRecord) -> None:
    entries = record.entries
    assert record.total_calories == sum(entry.calories for entry in entries)
    assert record.total_protein == sum(entry.protein for entry in entries)
    assert record.total_carbs == sum(entry.carbs for entry in entries)
    assert record.total_fat == sum(entry.fat for entry in entries)


def test_today_is_none_before_any_log(ledger_service: DailyLedgerService) -> None:
    assert ledger_service.get_today_nutrition() is None
    assert ledger_service.list_days() == []


def test_first_entry_creates_record_and_meal(
    ledger_service: DailyLedgerService,
) -> None:
    ledger_service.add_meal_entry(
        "breakfast", make_entry(calories=300, protein=20, carbs=30, fat=10)
    )

    today = ledger_service.get_today_nutrition()

    assert today is not None
    assert today.date == "2024-03-15"
    assert today.total_calories == 300
    assert [meal.name for meal in today.meals] == ["breakfast"]
    assert len(today.meals[0].entries) == 1
    assert today.meals[0].entries[0].id
    _assert_totals_match_entries(today)


def test_second_entry_appends_to_existing_meal(
    ledger_service: DailyLedgerService,
) -> None:
    ledger_service.add_meal_entry("breakfast", make_entry(calories=300, protein=20))
    ledger_service.add_meal_entry("breakfast", make_entry(calories=100, protein=5))

    today = ledger_service.get_today_nutrition()

    assert today is not None
    assert len(today.meals) == 1
    assert len(today.meals[0].entries) == 2
    assert today.total_calories == 400
    assert today.total_protein == 25


def test_meal_names_stay_unique(ledger_service: DailyLedgerService) -> None:
    for meal_name in ("lunch", "dinner", "lunch", "snacks", "dinner"):
        ledger_service.add_meal_entry(meal_name, make_entry(calories=50))

    today = ledger_service.get_today_nutrition()

    assert today is not None
    names = [meal.name for meal in today.meals]
    assert names == ["lunch", "dinner", "snacks"]
    assert today.total_calories == 250
    _assert_totals_match_entries(today)


def test_entries_get_distinct_ids(ledger_service: DailyLedgerService) -> None:
    ledger_service.add_meal_entry("lunch", make_entry(calories=10))
    record = ledger_service.add_meal_entry("lunch", make_entry(calories=20))

    ids = [entry.id for entry in record.entries]

    assert len(set(ids)) == 2


def test_new_record_snapshots_current_goals(
    ledger_service: DailyLedgerService, goal_service: GoalService, clock: FixedClock
) -> None:
    first_goals = NutritionGoals(calories=1800, protein=120, carbs=200, fat=60)
    goal_service.set_goals(first_goals)
    ledger_service.add_meal_entry("lunch", make_entry(calories=10))

    goal_service.set_goals(NutritionGoals(calories=2500, protein=180, carbs=300, fat=80))
    ledger_service.add_meal_entry("dinner", make_entry(calories=10))
    clock.advance(days=1)
    ledger_service.add_meal_entry("lunch", make_entry(calories=10))

    days = ledger_service.list_days()
    assert days[0].goals == first_goals
    assert days[1].goals.calories == 2500


def test_add_meal_entry_records_recent_food(
    ledger_service: DailyLedgerService, catalog_service: FoodCatalogService
) -> None:
    ledger_service.add_meal_entry("lunch", make_entry(calories=165, food_id="1"))
    ledger_service.add_meal_entry("lunch", make_entry(calories=208, food_id="2"))

    assert catalog_service.store.state.recent_food_ids == ("2", "1")


def test_days_are_partitioned_by_clock_date(
    ledger_service: DailyLedgerService, clock: FixedClock
) -> None:
    ledger_service.add_meal_entry("breakfast", make_entry(calories=300))
    clock.advance(days=1)
    ledger_service.add_meal_entry("breakfast", make_entry(calories=120))
    ledger_service.add_meal_entry("dinner", make_entry(calories=80))

    first = ledger_service.get_day("2024-03-15")
    second = ledger_service.get_day("2024-03-16")

    assert first is not None and second is not None
    assert first.total_calories == 300
    assert second.total_calories == 200
    assert ledger_service.get_today_nutrition() == second


def test_update_meal_entry_recomputes_totals(
    ledger_service: DailyLedgerService,
) -> None:
    record = ledger_service.add_meal_entry(
        "lunch", make_entry(calories=200, protein=10, carbs=20, fat=5)
    )
    entry_id = record.entries[0].id

    updated = ledger_service.update_meal_entry(
        entry_id, {"quantity": 2, "calories": 400, "protein": 20}
    )

    assert updated is not None
    assert updated.entries[0].id == entry_id
    assert updated.entries[0].quantity == 2
    assert updated.total_calories == 400
    assert updated.total_protein == 20
    assert updated.total_carbs == 20
    _assert_totals_match_entries(updated)


def test_update_meal_entry_cannot_change_id(
    ledger_service: DailyLedgerService,
) -> None:
    record = ledger_service.add_meal_entry("lunch", make_entry(calories=200))
    entry_id = record.entries[0].id

    updated = ledger_service.update_meal_entry(entry_id, {"id": "other", "calories": 1})

    assert updated is not None
    assert updated.entries[0].id == entry_id


def test_update_meal_entry_on_past_day(
    ledger_service: DailyLedgerService, clock: FixedClock
) -> None:
    record = ledger_service.add_meal_entry("dinner", make_entry(calories=500))
    entry_id = record.entries[0].id
    clock.advance(days=2)
    ledger_service.add_meal_entry("dinner", make_entry(calories=100))

    updated = ledger_service.update_meal_entry(entry_id, {"calories": 450})

    assert updated is not None
    assert updated.date == "2024-03-15"
    assert updated.total_calories == 450
    today = ledger_service.get_today_nutrition()
    assert today is not None
    assert today.total_calories == 100


def test_remove_meal_entry_recomputes_totals(
    ledger_service: DailyLedgerService,
) -> None:
    ledger_service.add_meal_entry("lunch", make_entry(calories=200, fat=4))
    record = ledger_service.add_meal_entry("lunch", make_entry(calories=150, fat=6))
    removed_id = record.entries[0].id

    updated = ledger_service.remove_meal_entry(removed_id)

    assert updated is not None
    assert removed_id not in [entry.id for entry in updated.entries]
    assert updated.total_calories == 150
    assert updated.total_fat == 6
    assert [meal.name for meal in updated.meals] == ["lunch"]


def test_unknown_entry_ids_are_noops(ledger_service: DailyLedgerService) -> None:
    ledger_service.add_meal_entry("lunch", make_entry(calories=200))
    before = ledger_service.list_days()

    assert ledger_service.update_meal_entry("missing", {"calories": 1}) is None
    assert ledger_service.remove_meal_entry("missing") is None
    assert ledger_service.list_days() == before


def test_water_intake_is_set_not_added(ledger_service: DailyLedgerService) -> None:
    ledger_service.update_water_intake(500)
    record = ledger_service.update_water_intake(750)

    assert record.water_intake == 750
    assert record.meals == ()
    assert record.total_calories == 0
    assert len(ledger_service.list_days()) == 1


def test_water_then_food_share_one_record(ledger_service: DailyLedgerService) -> None:
    ledger_service.update_water_intake(300)
    record = ledger_service.add_meal_entry("snacks", make_entry(calories=90))

    assert record.water_intake == 300
    assert record.total_calories == 90
    assert len(ledger_service.list_days()) == 1


def test_zero_and_negative_entries_are_recorded(
    ledger_service: DailyLedgerService,
) -> None:
    ledger_service.add_meal_entry("lunch", make_entry(calories=0, quantity=0))
    record = ledger_service.add_meal_entry("lunch", make_entry(calories=-50, quantity=-1))

    assert len(record.entries) == 2
    assert record.total_calories == -50


def test_catalog_edits_do_not_change_logged_entries(
    ledger_service: DailyLedgerService, catalog_service: FoodCatalogService
) -> None:
    food = catalog_service.get_food("1")
    assert food is not None
    ledger_service.add_meal_entry(
        "lunch",
        make_entry(
            calories=food.calories * 2,
            protein=food.protein * 2,
            food_id=food.id,
            food_name=food.name,
            quantity=2,
        ),
    )

    catalog_service.update_food("1", {"calories": 999, "name": "Renamed"})
    catalog_service.remove_food("1")

    today = ledger_service.get_today_nutrition()
    assert today is not None
    entry = today.entries[0]
    assert entry.calories == 330
    assert entry.protein == 62
    assert entry.food_name == "Chicken Breast"
    assert today.total_calories == 330


def test_mutations_commit_new_state(
    ledger_service: DailyLedgerService, state_repository
) -> None:
    before = ledger_service.store.state

    ledger_service.add_meal_entry("lunch", make_entry(calories=10))

    assert ledger_service.store.state is not before
    assert before.daily_records == ()
    assert state_repository.states["test"] is ledger_service.store.state


def test_optional_nutrients_sum_as_zero_when_missing(
    ledger_service: DailyLedgerService,
) -> None:
    ledger_service.add_meal_entry(
        "breakfast",
        NewMealEntry(
            food_id="10",
            food_name="Oatmeal",
            serving_size="1 cup cooked",
            quantity=1,
            calories=154,
            protein=6,
            carbs=27,
            fat=3,
            fiber=4,
            sodium=7,
        ),
    )
    record = ledger_service.add_meal_entry("breakfast", make_entry(calories=100))

    assert record.total_fiber == 4
    assert record.total_sodium == 7
    assert record.total_sugar == 0


def test_update_meal_entry_ignores_null_for_required_fields(
    ledger_service: DailyLedgerService,
) -> None:
    record = ledger_service.add_meal_entry(
        "lunch",
        NewMealEntry(
            food_id="10",
            food_name="Oatmeal",
            serving_size="1 cup cooked",
            quantity=1,
            calories=154,
            protein=6,
            carbs=27,
            fat=3,
            fiber=4,
        ),
    )
    entry_id = record.entries[0].id

    updated = ledger_service.update_meal_entry(
        entry_id, {"calories": None, "food_name": None, "fiber": None}
    )

    assert updated is not None
    assert updated.entries[0].calories == 154
    assert updated.entries[0].food_name == "Oatmeal"
    assert updated.entries[0].fiber is None
    assert updated.total_calories == 154
    assert updated.total_fiber == 0
