"""MealLog model - one food entry with its macros."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Float, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.core.enums import MealType
from fittrack.db.base import Base


class MealLog(Base):
    """A logged meal. Nutrition numbers are estimates supplied by the caller."""

    __tablename__ = "meal_logs"
    __table_args__ = (Index("ix_meal_logs_date", "date"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    date: Mapped[str] = mapped_column(String(10), nullable=False)
    meal_type: Mapped[MealType] = mapped_column(
        Enum(MealType, values_callable=lambda e: [m.value for m in e]), nullable=False
    )
    food_name: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[str | None] = mapped_column(String(100), nullable=True)  # "1 bowl", "200g"
    calories: Mapped[float] = mapped_column(Float, nullable=False)
    protein: Mapped[float] = mapped_column(Float, nullable=False)  # grams
    carbs: Mapped[float] = mapped_column(Float, nullable=False)  # grams
    fat: Mapped[float] = mapped_column(Float, nullable=False)  # grams
    fiber: Mapped[float | None] = mapped_column(Float, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
