"""Workout plan schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fittrack.core.enums import AssistantName
from fittrack.schemas.common import PartialUpdate


class PlanExercise(BaseModel):
    exercise_id: str | None = None
    name: str = Field(..., min_length=1, max_length=255)
    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=1)
    rest_seconds: int = Field(60, ge=0)


class WorkoutPlanBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    exercises: list[PlanExercise] = []


class WorkoutPlanCreate(WorkoutPlanBase):
    created_by: AssistantName


class WorkoutPlanUpdate(PartialUpdate):
    required_fields = ("name", "exercises")

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    exercises: list[PlanExercise] | None = None


class WorkoutPlanRead(WorkoutPlanBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    created_by: str
    created_at: datetime
