"""User profile Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fittrack.core.enums import FitnessGoal
from fittrack.schemas.common import PartialUpdate


class UserProfileCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    height: float = Field(..., gt=50, lt=300, description="Height in centimetres")
    weight: float = Field(..., gt=20, lt=400, description="Body weight in kg")
    age: Optional[int] = Field(None, ge=10, le=120, description="Age in years")
    fitness_goal: FitnessGoal = FitnessGoal.MAINTAIN
    daily_calorie_target: Optional[int] = Field(
        None, gt=0, lt=10000, description="Omit to derive it from weight and goal"
    )


class UserProfileUpdate(PartialUpdate):
    required_fields = ("name", "height", "weight", "fitness_goal")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    height: Optional[float] = Field(None, gt=50, lt=300)
    weight: Optional[float] = Field(None, gt=20, lt=400)
    age: Optional[int] = Field(None, ge=10, le=120)
    fitness_goal: Optional[FitnessGoal] = None
    daily_calorie_target: Optional[int] = Field(None, gt=0, lt=10000)


class UserProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    height: float
    weight: float
    age: Optional[int] = None
    fitness_goal: FitnessGoal
    daily_calorie_target: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class CalorieTargetRead(BaseModel):
    weight: float
    fitness_goal: FitnessGoal
    daily_calorie_target: int
