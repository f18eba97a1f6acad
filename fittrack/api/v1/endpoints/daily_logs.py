"""Daily log endpoints: summaries, manual edits and recompute."""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.constants import DATE_PATTERN, DEFAULT_RECENT_DAYS
from fittrack.db.session import get_db
from fittrack.schemas.daily_log import (
    DailyLogRead,
    DailyLogUpdate,
    DailyLogUpsert,
    RecalculateResult,
)
from fittrack.services import daily_aggregation, daily_logs

router = APIRouter()


@router.get("/range", response_model=list[DailyLogRead])
async def list_daily_logs_in_range(
    start: str = Query(..., pattern=DATE_PATTERN),
    end: str = Query(..., pattern=DATE_PATTERN),
    db: AsyncSession = Depends(get_db),
):
    """Daily logs with start <= date <= end, ascending by date (for charts)."""
    return await daily_logs.get_by_date_range(db, start, end)


@router.get("/recent", response_model=list[DailyLogRead])
async def list_recent_daily_logs(
    days: int = Query(DEFAULT_RECENT_DAYS, ge=0, le=366),
    db: AsyncSession = Depends(get_db),
):
    """Daily logs from the last `days` days through today."""
    return await daily_logs.get_recent(db, days)


@router.get("/{date}", response_model=Optional[DailyLogRead])
async def get_daily_log(date: str, db: AsyncSession = Depends(get_db)):
    """Summary for one date, or null when nothing has been recorded."""
    return await daily_logs.get_by_date(db, date)


@router.put("", response_model=DailyLogRead)
async def upsert_daily_log(payload: DailyLogUpsert, db: AsyncSession = Depends(get_db)):
    """Create or overwrite a day's summary by hand."""
    await daily_logs.upsert(db, payload)
    return await daily_logs.get_by_date(db, payload.date)


@router.patch("/{log_id}", response_model=DailyLogRead)
async def update_daily_log(
    log_id: uuid.UUID,
    payload: DailyLogUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await daily_logs.update(db, log_id, payload)


@router.post("/{date}/recalculate", response_model=RecalculateResult)
async def recalculate_daily_log(date: str, db: AsyncSession = Depends(get_db)):
    """Rebuild the day's totals from its meal and exercise logs."""
    log_id = await daily_aggregation.recalculate(db, date)
    return RecalculateResult(id=log_id, date=date)
