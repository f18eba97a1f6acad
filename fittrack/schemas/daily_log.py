"""Daily log schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fittrack.schemas.common import DateKey, PartialUpdate


class DailyTotals(BaseModel):
    total_calories: float = Field(0, ge=0)
    total_protein: float = Field(0, ge=0)
    total_carbs: float = Field(0, ge=0)
    total_fat: float = Field(0, ge=0)
    exercise_count: int = Field(0, ge=0)


class DailyLogUpsert(DailyTotals):
    """Manual create-or-overwrite for one date."""

    date: DateKey
    notes: str | None = None


class DailyLogUpdate(PartialUpdate):
    required_fields = (
        "total_calories",
        "total_protein",
        "total_carbs",
        "total_fat",
        "exercise_count",
    )

    total_calories: float | None = Field(None, ge=0)
    total_protein: float | None = Field(None, ge=0)
    total_carbs: float | None = Field(None, ge=0)
    total_fat: float | None = Field(None, ge=0)
    exercise_count: int | None = Field(None, ge=0)
    notes: str | None = None


class DailyLogRead(DailyTotals):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    date: str
    notes: str | None = None


class RecalculateResult(BaseModel):
    id: UUID
    date: str
