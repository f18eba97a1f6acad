"""ExerciseLog model - one exercise performed on one date."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.db.base import Base


class ExerciseLog(Base):
    """A logged exercise, e.g. "bench press 3 sets of 10 at 60kg" on 2026-02-04."""

    __tablename__ = "exercise_logs"
    __table_args__ = (Index("ix_exercise_logs_date", "date"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    date: Mapped[str] = mapped_column(String(10), nullable=False)  # "YYYY-MM-DD"
    exercise_id: Mapped[str | None] = mapped_column(String(64), nullable=True)  # external catalogue id
    exercise_name: Mapped[str] = mapped_column(String(255), nullable=False)
    sets: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)  # kg
    duration: Mapped[float | None] = mapped_column(Float, nullable=True)  # minutes, for cardio
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
