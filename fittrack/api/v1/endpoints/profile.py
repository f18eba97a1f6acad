"""User profile endpoints: singleton create, read, update and delete."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.enums import FitnessGoal
from fittrack.db.session import get_db
from fittrack.schemas.user_profile import (
    CalorieTargetRead,
    UserProfileCreate,
    UserProfileRead,
    UserProfileUpdate,
)
from fittrack.services import user_profile
from fittrack.services.calorie_target import suggest_daily_calorie_target

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=Optional[UserProfileRead])
async def get_profile(db: AsyncSession = Depends(get_db)):
    """The profile, or null before onboarding."""
    return await user_profile.get(db)


@router.post("", response_model=UserProfileRead, status_code=201)
async def create_profile(payload: UserProfileCreate, db: AsyncSession = Depends(get_db)):
    """Onboarding. 409 if a profile already exists."""
    return await user_profile.create(db, payload)


@router.patch("", response_model=UserProfileRead)
async def update_profile(payload: UserProfileUpdate, db: AsyncSession = Depends(get_db)):
    """404 if there is no profile yet."""
    return await user_profile.update(db, payload)


@router.delete("", status_code=204)
async def delete_profile(db: AsyncSession = Depends(get_db)):
    """Reset. Succeeds whether or not a profile exists."""
    await user_profile.remove(db)
    return None


@router.get("/calorie-target", response_model=CalorieTargetRead)
async def calorie_target(
    weight: float = Query(..., gt=20, lt=400),
    fitness_goal: FitnessGoal = FitnessGoal.MAINTAIN,
):
    """Suggested daily calories for a weight and goal (used by the onboarding form)."""
    return CalorieTargetRead(
        weight=weight,
        fitness_goal=fitness_goal,
        daily_calorie_target=suggest_daily_calorie_target(weight, fitness_goal),
    )
