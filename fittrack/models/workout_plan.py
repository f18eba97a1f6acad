"""Workout plan - ordered exercise list authored by one of the assistants."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, String, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.db.base import Base


class WorkoutPlan(Base):
    """Saved plan. Exercises are stored in order as a JSON list:
    [{"exercise_id": null, "name": "Squat", "sets": 3, "reps": 8, "rest_seconds": 90}, ...]
    """

    __tablename__ = "workout_plans"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    exercises: Mapped[list[dict]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=list
    )
    created_by: Mapped[str] = mapped_column(String(20), nullable=False)  # butler / trainer
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
