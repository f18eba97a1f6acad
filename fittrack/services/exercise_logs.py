"""Exercise log writers and queries.

Writers never recompute the daily log themselves; see daily_aggregation.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.constants import DEFAULT_RECENT_LIMIT
from fittrack.core.dates import today_iso, utcnow
from fittrack.db.store import RecordStore
from fittrack.models.exercise_log import ExerciseLog
from fittrack.schemas.exercise_log import ExerciseLogCreate, ExerciseLogUpdate

logger = logging.getLogger(__name__)


def _store(db: AsyncSession) -> RecordStore[ExerciseLog]:
    return RecordStore(db, ExerciseLog)


async def create(db: AsyncSession, payload: ExerciseLogCreate) -> ExerciseLog:
    store = _store(db)
    log_id = await store.insert({**payload.model_dump(), "created_at": utcnow()})
    logger.info("Logged exercise %s on %s", payload.exercise_name, payload.date)
    return await store.get(log_id)


async def update(db: AsyncSession, log_id: uuid.UUID, payload: ExerciseLogUpdate) -> ExerciseLog:
    """Patch only the fields present in the payload. Raises RecordNotFoundError."""
    return await _store(db).patch(log_id, payload.changes())


async def delete(db: AsyncSession, log_id: uuid.UUID) -> bool:
    return await _store(db).delete(log_id)


async def get_by_date(db: AsyncSession, date: str) -> list[ExerciseLog]:
    return await _store(db).query_by_index("date", date)


async def get_by_date_range(db: AsyncSession, start: str, end: str) -> list[ExerciseLog]:
    """Inclusive range. Rows come back in store order, not sorted by date."""
    return await _store(db).query_range("date", start, end)


async def get_recent(db: AsyncSession, limit: int = DEFAULT_RECENT_LIMIT) -> list[ExerciseLog]:
    """The `limit` most recently created logs, newest first (regardless of their date)."""
    return await _store(db).query_all(order_by="-created_at", limit=limit)


async def get_today_count(db: AsyncSession) -> int:
    return len(await get_by_date(db, today_iso()))
