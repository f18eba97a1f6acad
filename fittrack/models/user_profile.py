"""UserProfile model: the singleton profile created during onboarding."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Float, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.core.enums import FitnessGoal
from fittrack.db.base import Base


class UserProfile(Base):
    """Name, body stats and goal of the single user.

    Singleton pattern: the only row uses PROFILE_ID as its primary key, so the
    store rejects a second insert even if the existence check is raced.
    """

    __tablename__ = "user_profile"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    height: Mapped[float] = mapped_column(Float, nullable=False)  # cm
    weight: Mapped[float] = mapped_column(Float, nullable=False)  # kg
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    fitness_goal: Mapped[FitnessGoal] = mapped_column(
        Enum(FitnessGoal, values_callable=lambda e: [g.value for g in e]), nullable=False
    )
    daily_calorie_target: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
