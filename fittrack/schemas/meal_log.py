"""Meal log schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fittrack.core.enums import MealType
from fittrack.schemas.common import DateKey, PartialUpdate


class MealLogBase(BaseModel):
    date: DateKey
    meal_type: MealType
    food_name: str = Field(..., min_length=1, max_length=255)
    quantity: str | None = Field(None, max_length=100)
    calories: float = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fat: float = Field(..., ge=0)
    fiber: float | None = Field(None, ge=0)
    notes: str | None = None


class MealLogCreate(MealLogBase):
    pass


class MealLogUpdate(PartialUpdate):
    required_fields = ("food_name", "calories", "protein", "carbs", "fat")

    food_name: str | None = Field(None, min_length=1, max_length=255)
    quantity: str | None = Field(None, max_length=100)
    calories: float | None = Field(None, ge=0)
    protein: float | None = Field(None, ge=0)
    carbs: float | None = Field(None, ge=0)
    fat: float | None = Field(None, ge=0)
    fiber: float | None = Field(None, ge=0)
    notes: str | None = None


class MealLogRead(MealLogBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    created_at: datetime


class NutritionTotals(BaseModel):
    """Today's sums computed straight from meal logs (not from the daily log)."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    meal_count: int = 0
