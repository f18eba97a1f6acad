"""Assistant tool inputs/outputs and conversation payloads."""

from __future__ import annotations

from typing import Any, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from fittrack.core.enums import MealType
from fittrack.schemas.common import DateKey
from fittrack.schemas.meal_log import NutritionTotals
from fittrack.schemas.user_profile import UserProfileRead
from fittrack.schemas.workout_plan import PlanExercise


# ── Tool inputs ──────────────────────────────────────────────────────────

class NoInput(BaseModel):
    pass


class DateInput(BaseModel):
    date: Optional[DateKey] = Field(None, description="Date in YYYY-MM-DD format. Defaults to today.")


class LogExerciseInput(BaseModel):
    exercise_name: str = Field(..., min_length=1, description="Name of the exercise (e.g. 'Bench Press')")
    sets: int = Field(..., ge=1, description="Number of sets completed")
    reps: int = Field(..., ge=1, description="Number of reps per set")
    weight: Optional[float] = Field(None, ge=0, description="Weight used in kg")
    duration: Optional[float] = Field(None, ge=0, description="Duration in minutes (cardio)")
    date: Optional[DateKey] = Field(None, description="Date in YYYY-MM-DD format. Defaults to today.")
    notes: Optional[str] = None


class LogMealInput(BaseModel):
    food_name: str = Field(..., min_length=1, description="Description of the food")
    meal_type: MealType
    quantity: Optional[str] = Field(None, description="e.g. '1 bowl', '200g'")
    date: Optional[DateKey] = Field(None, description="Date in YYYY-MM-DD format. Defaults to today.")
    calories: float = Field(..., ge=0, description="Estimated calories")
    protein: float = Field(..., ge=0, description="Estimated protein in grams")
    carbs: float = Field(..., ge=0, description="Estimated carbohydrates in grams")
    fat: float = Field(..., ge=0, description="Estimated fat in grams")


class ProgressHistoryInput(BaseModel):
    days: int = Field(7, ge=1, le=365, description="Number of days to look back")


class CreateWorkoutPlanInput(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    exercises: list[PlanExercise]


# ── Tool outputs ─────────────────────────────────────────────────────────

class ToolResult(BaseModel):
    success: bool
    message: str
    id: Optional[UUID] = None


class ExerciseSummary(BaseModel):
    name: str
    sets: int
    reps: int
    weight: Optional[float] = None


class DailyExercisesOutput(BaseModel):
    date: str
    exercises: list[ExerciseSummary]
    count: int


class MealSummary(BaseModel):
    food_name: str
    meal_type: MealType
    calories: float
    protein: float
    carbs: float
    fat: float


class DailyMealsOutput(BaseModel):
    date: str
    meals: list[MealSummary]
    totals: NutritionTotals


class DailyProgressOutput(BaseModel):
    date: str
    exercise_count: int
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    calorie_target: int
    calorie_progress: int = Field(..., description="Percentage of calorie target consumed")


class WeeklyStatsOutput(BaseModel):
    total_exercises: int
    avg_calories: float
    avg_protein: float
    days_tracked: int
    streak_days: int


class ProfileLookupOutput(BaseModel):
    found: bool
    profile: Optional[UserProfileRead] = None


class HistoryExercise(BaseModel):
    date: str
    name: str
    sets: int
    reps: int
    weight: Optional[float] = None


class HistoryDay(BaseModel):
    date: str
    calories: float
    exercise_count: int


class ProgressHistoryOutput(BaseModel):
    exercises: list[HistoryExercise]
    daily_stats: list[HistoryDay]


class PlanSummary(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    exercise_count: int


class WorkoutPlansOutput(BaseModel):
    plans: list[PlanSummary]


# ── Conversation ─────────────────────────────────────────────────────────

class ToolCall(BaseModel):
    id: str
    name: str
    arguments: dict[str, Any] = {}


class ChatMessage(BaseModel):
    role: Literal["user", "assistant", "tool"]
    content: Any = None
    tool_calls: list[ToolCall] = []
    tool_call_id: Optional[str] = None
    name: Optional[str] = None


class ComponentInstruction(BaseModel):
    """'Render card X with props Y'."""

    name: str
    props: dict[str, Any]


class AgentTurn(BaseModel):
    """One response from the assistant runtime: tool calls to run, or a final reply."""

    text: Optional[str] = None
    component: Optional[ComponentInstruction] = None
    tool_calls: list[ToolCall] = []


class AssistantMessageRequest(BaseModel):
    message: str = Field(..., min_length=1)
    history: list[ChatMessage] = []


class AssistantReply(BaseModel):
    assistant: str
    text: Optional[str] = None
    component: Optional[ComponentInstruction] = None
    tool_calls_made: list[str] = []


class ToolInfo(BaseModel):
    name: str
    description: str
    input_schema: dict[str, Any]
    output_schema: dict[str, Any]


class ComponentInfo(BaseModel):
    name: str
    description: str
    props_schema: dict[str, Any]


class AssistantInfo(BaseModel):
    name: str
    description: str
    system_prompt: str
    tools: list[ToolInfo]
    components: list[ComponentInfo]
