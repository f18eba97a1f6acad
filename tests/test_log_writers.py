"""Exercise and meal log writers: create, partial update, delete."""
import uuid

import pytest
from pydantic import ValidationError

from fittrack.core.errors import RecordNotFoundError
from fittrack.schemas.exercise_log import ExerciseLogCreate, ExerciseLogUpdate
from fittrack.schemas.meal_log import MealLogCreate, MealLogUpdate
from fittrack.services import daily_logs, exercise_logs, meal_logs

from tests.factories import add_exercise, add_meal

DAY = "2026-02-04"


@pytest.mark.asyncio
async def test_create_exercise_stamps_created_at(db):
    log = await exercise_logs.create(
        db,
        ExerciseLogCreate(date=DAY, exercise_name="Deadlift", sets=5, reps=5, weight=100),
    )
    assert isinstance(log.id, uuid.UUID)
    assert log.created_at is not None
    assert log.weight == 100
    assert log.duration is None


@pytest.mark.asyncio
async def test_create_does_not_touch_daily_log(db):
    await add_meal(db, DAY, 500, 30, 50, 10)
    await add_exercise(db, DAY)
    assert await daily_logs.get_by_date(db, DAY) is None


def test_create_rejects_malformed_date():
    with pytest.raises(ValidationError):
        ExerciseLogCreate(date="2026-2-4", exercise_name="Squat", sets=3, reps=5)


def test_create_rejects_negative_macros():
    with pytest.raises(ValidationError):
        MealLogCreate(
            date=DAY, meal_type="lunch", food_name="Rice", calories=-1, protein=0, carbs=0, fat=0
        )


@pytest.mark.asyncio
async def test_update_exercise_changes_only_given_fields(db):
    log = await add_exercise(db, DAY, sets=3, reps=10, weight=60)

    updated = await exercise_logs.update(db, log.id, ExerciseLogUpdate(reps=12))

    assert updated.reps == 12
    assert updated.sets == 3
    assert updated.weight == 60
    assert updated.exercise_name == "Bench Press"
    assert updated.date == DAY


@pytest.mark.asyncio
async def test_update_explicit_null_clears_optional_field(db):
    log = await add_exercise(db, DAY, weight=60)

    updated = await exercise_logs.update(db, log.id, ExerciseLogUpdate(weight=None))

    assert updated.weight is None
    assert updated.sets == 3


def test_update_rejects_clearing_required_field():
    with pytest.raises(ValidationError):
        ExerciseLogUpdate(sets=None)
    with pytest.raises(ValidationError):
        MealLogUpdate.model_validate({"calories": None})


def test_update_changes_only_reports_sent_fields():
    assert ExerciseLogUpdate().changes() == {}
    assert ExerciseLogUpdate(notes=None, reps=8).changes() == {"notes": None, "reps": 8}


@pytest.mark.asyncio
async def test_update_missing_log_raises(db):
    with pytest.raises(RecordNotFoundError):
        await exercise_logs.update(db, uuid.uuid4(), ExerciseLogUpdate(reps=5))


@pytest.mark.asyncio
async def test_update_meal_keeps_other_macros(db):
    meal = await add_meal(db, DAY, 500, 30, 50, 10)

    updated = await meal_logs.update(db, meal.id, MealLogUpdate(calories=450, quantity="1 bowl"))

    assert updated.calories == 450
    assert updated.quantity == "1 bowl"
    assert (updated.protein, updated.carbs, updated.fat) == (30, 50, 10)


@pytest.mark.asyncio
async def test_delete_reports_whether_row_existed(db):
    log = await add_exercise(db, DAY)

    assert await exercise_logs.delete(db, log.id) is True
    assert await exercise_logs.delete(db, log.id) is False
    assert await exercise_logs.get_by_date(db, DAY) == []


@pytest.mark.asyncio
async def test_delete_meal(db):
    meal = await add_meal(db, DAY, 500, 30, 50, 10)
    assert await meal_logs.delete(db, meal.id) is True
    assert await meal_logs.get_by_date(db, DAY) == []
