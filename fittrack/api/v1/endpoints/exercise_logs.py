"""Exercise log endpoints.

Writes here do not touch the daily log; call POST /daily-logs/{date}/recalculate
afterwards to refresh it.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.constants import DATE_PATTERN, DEFAULT_RECENT_LIMIT
from fittrack.db.session import get_db
from fittrack.schemas.exercise_log import ExerciseLogCreate, ExerciseLogRead, ExerciseLogUpdate
from fittrack.services import exercise_logs

router = APIRouter()


@router.get("", response_model=list[ExerciseLogRead])
async def list_exercise_logs(
    date: str = Query(..., description="YYYY-MM-DD"),
    db: AsyncSession = Depends(get_db),
):
    """All exercise logs for one date (empty list if none)."""
    return await exercise_logs.get_by_date(db, date)


@router.get("/range", response_model=list[ExerciseLogRead])
async def list_exercise_logs_in_range(
    start: str = Query(..., pattern=DATE_PATTERN),
    end: str = Query(..., pattern=DATE_PATTERN),
    db: AsyncSession = Depends(get_db),
):
    """Exercise logs with start <= date <= end. Order is not guaranteed."""
    return await exercise_logs.get_by_date_range(db, start, end)


@router.get("/recent", response_model=list[ExerciseLogRead])
async def list_recent_exercise_logs(
    limit: int = Query(DEFAULT_RECENT_LIMIT, ge=1, le=200),
    db: AsyncSession = Depends(get_db),
):
    """Most recently created logs first."""
    return await exercise_logs.get_recent(db, limit)


@router.get("/today/count")
async def today_exercise_count(db: AsyncSession = Depends(get_db)):
    return {"count": await exercise_logs.get_today_count(db)}


@router.post("", response_model=ExerciseLogRead, status_code=201)
async def create_exercise_log(payload: ExerciseLogCreate, db: AsyncSession = Depends(get_db)):
    return await exercise_logs.create(db, payload)


@router.patch("/{log_id}", response_model=ExerciseLogRead)
async def update_exercise_log(
    log_id: uuid.UUID,
    payload: ExerciseLogUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update only the fields sent. Send null to clear weight, duration or notes."""
    return await exercise_logs.update(db, log_id, payload)


@router.delete("/{log_id}", status_code=204)
async def delete_exercise_log(log_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    if not await exercise_logs.delete(db, log_id):
        raise HTTPException(status_code=404, detail="Exercise log not found")
    return None
