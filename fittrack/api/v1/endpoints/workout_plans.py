"""Workout plan endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.enums import AssistantName
from fittrack.db.session import get_db
from fittrack.schemas.workout_plan import WorkoutPlanCreate, WorkoutPlanRead, WorkoutPlanUpdate
from fittrack.services import workout_plans

router = APIRouter()


@router.get("", response_model=list[WorkoutPlanRead])
async def list_workout_plans(
    created_by: AssistantName | None = None,
    db: AsyncSession = Depends(get_db),
):
    """All plans, or only those authored by one assistant."""
    if created_by is not None:
        return await workout_plans.list_by_creator(db, created_by.value)
    return await workout_plans.list_all(db)


@router.get("/{plan_id}", response_model=WorkoutPlanRead)
async def get_workout_plan(plan_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    plan = await workout_plans.get(db, plan_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Workout plan not found")
    return plan


@router.post("", response_model=WorkoutPlanRead, status_code=201)
async def create_workout_plan(payload: WorkoutPlanCreate, db: AsyncSession = Depends(get_db)):
    return await workout_plans.create(db, payload)


@router.patch("/{plan_id}", response_model=WorkoutPlanRead)
async def update_workout_plan(
    plan_id: uuid.UUID,
    payload: WorkoutPlanUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update name, description or the full exercise list."""
    return await workout_plans.update(db, plan_id, payload)


@router.delete("/{plan_id}", status_code=204)
async def delete_workout_plan(plan_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    if not await workout_plans.remove(db, plan_id):
        raise HTTPException(status_code=404, detail="Workout plan not found")
    return None


@router.delete("")
async def delete_all_workout_plans(db: AsyncSession = Depends(get_db)):
    """Remove every plan (used by the settings reset)."""
    return {"deleted": await workout_plans.remove_all(db)}
