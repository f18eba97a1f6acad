"""Daily log queries and manual writes."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.constants import DEFAULT_RECENT_DAYS
from fittrack.core.dates import days_ago_iso, today_iso
from fittrack.db.store import RecordStore
from fittrack.models.daily_log import DailyLog
from fittrack.schemas.daily_log import DailyLogUpdate, DailyLogUpsert

logger = logging.getLogger(__name__)


def _store(db: AsyncSession) -> RecordStore[DailyLog]:
    return RecordStore(db, DailyLog)


async def get_by_date(db: AsyncSession, date: str) -> DailyLog | None:
    return await _store(db).first_by_index("date", date)


async def get_by_date_range(db: AsyncSession, start: str, end: str) -> list[DailyLog]:
    """Inclusive range, ascending by date."""
    return await _store(db).query_range("date", start, end, order_by="date")


async def get_recent(db: AsyncSession, days: int = DEFAULT_RECENT_DAYS) -> list[DailyLog]:
    """Daily logs dated within [today - days, today]."""
    return await get_by_date_range(db, days_ago_iso(days), today_iso())


async def upsert(db: AsyncSession, payload: DailyLogUpsert) -> uuid.UUID:
    """Manual write. Bypasses the source logs, so the row may drift until recalculated."""
    store = _store(db)
    existing = await get_by_date(db, payload.date)
    if existing is not None:
        fields = payload.model_dump(exclude={"date"})
        if "notes" not in payload.model_fields_set:
            fields.pop("notes")
        await store.patch(existing.id, fields)
        return existing.id
    logger.info("Manual daily log created for %s", payload.date)
    return await store.insert(payload.model_dump())


async def update(db: AsyncSession, log_id: uuid.UUID, payload: DailyLogUpdate) -> DailyLog:
    return await _store(db).patch(log_id, payload.changes())
