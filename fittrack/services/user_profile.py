"""UserProfile singleton: at most one row, always under PROFILE_ID."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.constants import PROFILE_ID
from fittrack.core.dates import utcnow
from fittrack.core.errors import ProfileAlreadyExistsError, ProfileNotFoundError
from fittrack.db.store import RecordStore
from fittrack.models.user_profile import UserProfile
from fittrack.schemas.user_profile import UserProfileCreate, UserProfileUpdate
from fittrack.services.calorie_target import suggest_daily_calorie_target

logger = logging.getLogger(__name__)


def _store(db: AsyncSession) -> RecordStore[UserProfile]:
    return RecordStore(db, UserProfile)


async def get(db: AsyncSession) -> UserProfile | None:
    return await _store(db).get(PROFILE_ID)


async def create(db: AsyncSession, payload: UserProfileCreate) -> UserProfile:
    """Create the profile during onboarding. Raises ProfileAlreadyExistsError."""
    if await get(db) is not None:
        raise ProfileAlreadyExistsError()

    fields = payload.model_dump()
    if fields["daily_calorie_target"] is None:
        fields["daily_calorie_target"] = suggest_daily_calorie_target(
            payload.weight, payload.fitness_goal
        )
    now = utcnow()
    try:
        await _store(db).insert({**fields, "id": PROFILE_ID, "created_at": now, "updated_at": now})
    except IntegrityError as e:
        raise ProfileAlreadyExistsError() from e
    logger.info("Profile created for %s (goal=%s)", payload.name, payload.fitness_goal.value)
    return await get(db)


async def update(db: AsyncSession, payload: UserProfileUpdate) -> UserProfile:
    """Patch provided fields and bump updated_at. Raises ProfileNotFoundError."""
    if await get(db) is None:
        raise ProfileNotFoundError()
    return await _store(db).patch(PROFILE_ID, {**payload.changes(), "updated_at": utcnow()})


async def remove(db: AsyncSession) -> None:
    """Delete the profile; nothing happens when there is none."""
    if await _store(db).delete(PROFILE_ID):
        logger.info("Profile removed")
