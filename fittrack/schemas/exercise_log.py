"""Exercise log schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fittrack.schemas.common import DateKey, PartialUpdate


class ExerciseLogBase(BaseModel):
    date: DateKey
    exercise_id: str | None = Field(None, max_length=64)
    exercise_name: str = Field(..., min_length=1, max_length=255)
    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=1)
    weight: float | None = Field(None, ge=0, description="Weight in kg")
    duration: float | None = Field(None, ge=0, description="Duration in minutes")
    notes: str | None = None


class ExerciseLogCreate(ExerciseLogBase):
    pass


class ExerciseLogUpdate(PartialUpdate):
    required_fields = ("sets", "reps")

    sets: int | None = Field(None, ge=1)
    reps: int | None = Field(None, ge=1)
    weight: float | None = Field(None, ge=0)
    duration: float | None = Field(None, ge=0)
    notes: str | None = None


class ExerciseLogRead(ExerciseLogBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    created_at: datetime
