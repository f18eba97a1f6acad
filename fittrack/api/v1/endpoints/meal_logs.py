"""Meal log endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.constants import DATE_PATTERN, DEFAULT_RECENT_LIMIT
from fittrack.db.session import get_db
from fittrack.schemas.meal_log import MealLogCreate, MealLogRead, MealLogUpdate, NutritionTotals
from fittrack.services import meal_logs

router = APIRouter()


@router.get("", response_model=list[MealLogRead])
async def list_meal_logs(
    date: str = Query(..., description="YYYY-MM-DD"),
    db: AsyncSession = Depends(get_db),
):
    return await meal_logs.get_by_date(db, date)


@router.get("/range", response_model=list[MealLogRead])
async def list_meal_logs_in_range(
    start: str = Query(..., pattern=DATE_PATTERN),
    end: str = Query(..., pattern=DATE_PATTERN),
    db: AsyncSession = Depends(get_db),
):
    """Meal logs with start <= date <= end, ascending by date."""
    return await meal_logs.get_by_date_range(db, start, end)


@router.get("/recent", response_model=list[MealLogRead])
async def list_recent_meal_logs(
    limit: int = Query(DEFAULT_RECENT_LIMIT, ge=1, le=200),
    db: AsyncSession = Depends(get_db),
):
    return await meal_logs.get_recent(db, limit)


@router.get("/today/totals", response_model=NutritionTotals)
async def today_totals(db: AsyncSession = Depends(get_db)):
    """Sums of today's meals, computed fresh (independent of the daily log)."""
    return await meal_logs.get_today_totals(db)


@router.post("", response_model=MealLogRead, status_code=201)
async def create_meal_log(payload: MealLogCreate, db: AsyncSession = Depends(get_db)):
    return await meal_logs.create(db, payload)


@router.patch("/{log_id}", response_model=MealLogRead)
async def update_meal_log(
    log_id: uuid.UUID,
    payload: MealLogUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await meal_logs.update(db, log_id, payload)


@router.delete("/{log_id}", status_code=204)
async def delete_meal_log(log_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    if not await meal_logs.delete(db, log_id):
        raise HTTPException(status_code=404, detail="Meal log not found")
    return None
