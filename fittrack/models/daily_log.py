"""DailyLog model - cached per-date summary derived from meal and exercise logs."""

from __future__ import annotations

import uuid

from sqlalchemy import Float, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.db.base import Base


class DailyLog(Base):
    """Totals for one date.

    After recalculate(date): total_* equal the sums over that date's meal logs and
    exercise_count equals the number of exercise logs. Manual edits may drift from
    the source logs until the next recalculate.
    """

    __tablename__ = "daily_logs"
    __table_args__ = (Index("ix_daily_logs_date", "date", unique=True),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    date: Mapped[str] = mapped_column(String(10), nullable=False)
    total_calories: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    total_protein: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    total_carbs: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    total_fat: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    exercise_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
