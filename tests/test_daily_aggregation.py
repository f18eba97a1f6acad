"""Daily aggregation: recalculate keeps the daily log equal to the sum of its sources."""
from types import SimpleNamespace

import pytest

from fittrack.core.errors import DailyLogConflictError
from fittrack.db.store import RecordStore
from fittrack.models.daily_log import DailyLog
from fittrack.services import daily_logs, meal_logs
from fittrack.services.daily_aggregation import compute_daily_totals, recalculate
from fittrack.schemas.daily_log import DailyLogRead, DailyLogUpdate

from tests.factories import add_exercise, add_meal

DAY = "2026-02-04"


def test_compute_daily_totals_sums_macros_and_counts_exercises():
    meals = [
        SimpleNamespace(calories=500, protein=30, carbs=50, fat=10),
        SimpleNamespace(calories=300, protein=25, carbs=20, fat=5),
    ]
    totals = compute_daily_totals(meals, [object(), object(), object()])
    assert totals.total_calories == 800
    assert totals.total_protein == 55
    assert totals.total_carbs == 70
    assert totals.total_fat == 15
    assert totals.exercise_count == 3


def test_compute_daily_totals_empty_day_is_zero():
    totals = compute_daily_totals([], [])
    assert totals.model_dump() == {
        "total_calories": 0,
        "total_protein": 0,
        "total_carbs": 0,
        "total_fat": 0,
        "exercise_count": 0,
    }


@pytest.mark.asyncio
async def test_recalculate_scenario(db):
    await add_meal(db, DAY, 500, 30, 50, 10)
    await add_meal(db, DAY, 300, 25, 20, 5, meal_type="dinner")
    await add_exercise(db, DAY)
    await add_exercise(db, DAY, name="Squat")
    # Other dates must not leak in
    await add_meal(db, "2026-02-05", 900, 40, 90, 30)
    await add_exercise(db, "2026-02-03")

    log_id = await recalculate(db, DAY)

    daily = await daily_logs.get_by_date(db, DAY)
    assert daily.id == log_id
    assert daily.date == DAY
    assert daily.total_calories == 800
    assert daily.total_protein == 55
    assert daily.total_carbs == 70
    assert daily.total_fat == 15
    assert daily.exercise_count == 2
    assert daily.notes is None


@pytest.mark.asyncio
async def test_recalculate_empty_day_creates_zeroed_row(db):
    log_id = await recalculate(db, "2026-03-01")

    daily = await daily_logs.get_by_date(db, "2026-03-01")
    assert daily is not None
    assert daily.id == log_id
    assert (daily.total_calories, daily.total_protein, daily.total_carbs, daily.total_fat) == (0, 0, 0, 0)
    assert daily.exercise_count == 0


@pytest.mark.asyncio
async def test_recalculate_malformed_date_matches_nothing(db):
    await add_meal(db, DAY, 500, 30, 50, 10)

    await recalculate(db, "04/02/2026")

    daily = await daily_logs.get_by_date(db, "04/02/2026")
    assert daily.total_calories == 0
    assert daily.exercise_count == 0


@pytest.mark.asyncio
async def test_recalculate_is_idempotent(db):
    await add_meal(db, DAY, 500, 30, 50, 10)
    await add_exercise(db, DAY)

    first_id = await recalculate(db, DAY)
    first = DailyLogRead.model_validate(await daily_logs.get_by_date(db, DAY))
    second_id = await recalculate(db, DAY)
    second = DailyLogRead.model_validate(await daily_logs.get_by_date(db, DAY))

    assert first_id == second_id
    assert second == first
    assert len(await RecordStore(db, DailyLog).query_by_index("date", DAY)) == 1


@pytest.mark.asyncio
async def test_recalculate_updates_in_place_and_keeps_notes(db):
    await add_meal(db, DAY, 500, 30, 50, 10)
    log_id = await recalculate(db, DAY)
    await daily_logs.update(db, log_id, DailyLogUpdate(notes="Felt great"))

    await add_meal(db, DAY, 300, 25, 20, 5)
    await add_exercise(db, DAY)
    second_id = await recalculate(db, DAY)

    daily = await daily_logs.get_by_date(db, DAY)
    assert second_id == log_id
    assert daily.notes == "Felt great"
    assert daily.total_calories == 800
    assert daily.exercise_count == 1


@pytest.mark.asyncio
async def test_recalculate_overwrites_manual_edits(db):
    await add_meal(db, DAY, 500, 30, 50, 10)
    log_id = await recalculate(db, DAY)
    await daily_logs.update(db, log_id, DailyLogUpdate(total_calories=9999, exercise_count=7))

    await recalculate(db, DAY)

    daily = await daily_logs.get_by_date(db, DAY)
    assert daily.total_calories == 500
    assert daily.exercise_count == 0


@pytest.mark.asyncio
async def test_daily_log_is_stale_until_recalculated(db):
    await add_meal(db, DAY, 500, 30, 50, 10)
    await recalculate(db, DAY)

    # Writers do not recompute on their own
    await add_meal(db, DAY, 300, 25, 20, 5)
    assert (await daily_logs.get_by_date(db, DAY)).total_calories == 500

    await recalculate(db, DAY)
    assert (await daily_logs.get_by_date(db, DAY)).total_calories == 800


@pytest.mark.asyncio
async def test_concurrent_first_insert_is_reported(db, monkeypatch):
    await recalculate(db, DAY)

    async def missed_existing(self, field, value):
        return None

    # Simulate a racing recompute that read before the other one inserted.
    monkeypatch.setattr(RecordStore, "first_by_index", missed_existing)

    with pytest.raises(DailyLogConflictError):
        await recalculate(db, DAY)


@pytest.mark.asyncio
async def test_conflict_keeps_the_callers_other_writes(db, monkeypatch):
    await recalculate(db, DAY)
    meal = await add_meal(db, DAY, 500, 30, 50, 10)

    async def missed_existing(self, field, value):
        return None

    monkeypatch.setattr(RecordStore, "first_by_index", missed_existing)
    with pytest.raises(DailyLogConflictError):
        await recalculate(db, DAY)
    monkeypatch.undo()

    # Only the failed insert was rolled back; the session is still usable.
    await db.commit()
    assert [m.id for m in await meal_logs.get_by_date(db, DAY)] == [meal.id]
    assert len(await RecordStore(db, DailyLog).query_by_index("date", DAY)) == 1
