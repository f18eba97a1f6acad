"""Daily aggregation: rebuild a date's DailyLog from its meal and exercise logs.

recalculate() is a read-compute-write sequence with no lock around it. A log
written between the reads and the write is missed until the next call, and two
concurrent calls for one date end with whichever wrote last. Callers that change
a log are expected to call recalculate() again for the affected date.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.errors import DailyLogConflictError
from fittrack.db.store import RecordStore
from fittrack.models.daily_log import DailyLog
from fittrack.models.exercise_log import ExerciseLog
from fittrack.models.meal_log import MealLog
from fittrack.schemas.daily_log import DailyTotals

logger = logging.getLogger(__name__)


def compute_daily_totals(
    meals: Iterable[MealLog],
    exercises: Iterable[ExerciseLog],
) -> DailyTotals:
    """Sum macros over meals and count exercises. An empty day is all zeros."""
    calories = protein = carbs = fat = 0.0
    for meal in meals:
        calories += meal.calories
        protein += meal.protein
        carbs += meal.carbs
        fat += meal.fat
    return DailyTotals(
        total_calories=calories,
        total_protein=protein,
        total_carbs=carbs,
        total_fat=fat,
        exercise_count=sum(1 for _ in exercises),
    )


async def recalculate(db: AsyncSession, date: str) -> uuid.UUID:
    """Recompute the DailyLog for `date` and return its id.

    The date is matched by equality only; a malformed value matches nothing and
    produces a zeroed row. An existing row keeps its id and notes.
    """
    meals = await RecordStore(db, MealLog).query_by_index("date", date)
    exercises = await RecordStore(db, ExerciseLog).query_by_index("date", date)
    totals = compute_daily_totals(meals, exercises)

    daily = RecordStore(db, DailyLog)
    existing = await daily.first_by_index("date", date)
    if existing is not None:
        await daily.patch(existing.id, totals.model_dump())
        log_id = existing.id
    else:
        # Savepoint: losing the race must not roll back the caller's own writes.
        try:
            async with db.begin_nested():
                log_id = await daily.insert({"date": date, **totals.model_dump()})
        except IntegrityError as e:
            # Another recompute inserted this date between our read and write.
            raise DailyLogConflictError(date) from e

    logger.debug(
        "Recalculated %s: %d meals, %d exercises, %.0f kcal",
        date,
        len(meals),
        totals.exercise_count,
        totals.total_calories,
    )
    return log_id
