"""Meal log writers and queries."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.constants import DEFAULT_RECENT_LIMIT
from fittrack.core.dates import today_iso, utcnow
from fittrack.db.store import RecordStore
from fittrack.models.meal_log import MealLog
from fittrack.schemas.meal_log import MealLogCreate, MealLogUpdate, NutritionTotals

logger = logging.getLogger(__name__)


def _store(db: AsyncSession) -> RecordStore[MealLog]:
    return RecordStore(db, MealLog)


async def create(db: AsyncSession, payload: MealLogCreate) -> MealLog:
    store = _store(db)
    log_id = await store.insert({**payload.model_dump(), "created_at": utcnow()})
    logger.info(
        "Logged %s: %s (%.0f kcal) on %s",
        payload.meal_type.value,
        payload.food_name,
        payload.calories,
        payload.date,
    )
    return await store.get(log_id)


async def update(db: AsyncSession, log_id: uuid.UUID, payload: MealLogUpdate) -> MealLog:
    return await _store(db).patch(log_id, payload.changes())


async def delete(db: AsyncSession, log_id: uuid.UUID) -> bool:
    return await _store(db).delete(log_id)


async def get_by_date(db: AsyncSession, date: str) -> list[MealLog]:
    return await _store(db).query_by_index("date", date)


async def get_by_date_range(db: AsyncSession, start: str, end: str) -> list[MealLog]:
    """Inclusive range, ascending by date."""
    return await _store(db).query_range("date", start, end, order_by="date")


async def get_recent(db: AsyncSession, limit: int = DEFAULT_RECENT_LIMIT) -> list[MealLog]:
    return await _store(db).query_all(order_by="-created_at", limit=limit)


def sum_meals(meals: list[MealLog]) -> NutritionTotals:
    totals = NutritionTotals()
    for meal in meals:
        totals.calories += meal.calories
        totals.protein += meal.protein
        totals.carbs += meal.carbs
        totals.fat += meal.fat
        totals.meal_count += 1
    return totals


async def get_today_totals(db: AsyncSession) -> NutritionTotals:
    """Sums today's meals directly. Can disagree with a stale daily log."""
    return sum_meals(await get_by_date(db, today_iso()))
