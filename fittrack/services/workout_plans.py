"""Workout plans authored by the assistants."""

from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.dates import utcnow
from fittrack.db.store import RecordStore
from fittrack.models.workout_plan import WorkoutPlan
from fittrack.schemas.workout_plan import WorkoutPlanCreate, WorkoutPlanUpdate


def _store(db: AsyncSession) -> RecordStore[WorkoutPlan]:
    return RecordStore(db, WorkoutPlan)


async def list_all(db: AsyncSession) -> list[WorkoutPlan]:
    return await _store(db).query_all(order_by="created_at")


async def get(db: AsyncSession, plan_id: uuid.UUID) -> WorkoutPlan | None:
    return await _store(db).get(plan_id)


async def list_by_creator(db: AsyncSession, created_by: str) -> list[WorkoutPlan]:
    return await _store(db).query_by_index("created_by", created_by)


async def create(db: AsyncSession, payload: WorkoutPlanCreate) -> WorkoutPlan:
    store = _store(db)
    fields = payload.model_dump()
    fields["created_by"] = payload.created_by.value
    plan_id = await store.insert({**fields, "created_at": utcnow()})
    return await store.get(plan_id)


async def update(db: AsyncSession, plan_id: uuid.UUID, payload: WorkoutPlanUpdate) -> WorkoutPlan:
    return await _store(db).patch(plan_id, payload.changes())


async def remove(db: AsyncSession, plan_id: uuid.UUID) -> bool:
    return await _store(db).delete(plan_id)


async def remove_all(db: AsyncSession) -> int:
    """Delete every plan (profile reset). Returns how many were removed."""
    store = _store(db)
    plans = await store.query_all()
    for plan in plans:
        await store.delete(plan.id)
    return len(plans)
