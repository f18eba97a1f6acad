"""Props for the cards an assistant can ask the UI to render."""

from typing import Literal

from pydantic import BaseModel, Field

from fittrack.core.enums import MealType


# ── Butler ───────────────────────────────────────────────────────────────

class ExerciseLogCardProps(BaseModel):
    exercise_name: str | None = Field(None, description="Name of the exercise")
    sets: int | None = Field(None, description="Number of sets")
    reps: int | None = Field(None, description="Number of reps per set")
    weight: float | None = Field(None, description="Weight in kg")
    duration: float | None = Field(None, description="Duration in minutes")
    date: str | None = Field(None, description="Date of the exercise")
    notes: str | None = Field(None, description="Additional notes")


class MealLogCardProps(BaseModel):
    food_name: str = Field(..., description="Name/description of the food")
    meal_type: MealType = Field(..., description="Type of meal")
    quantity: str | None = Field(None, description="Quantity description")
    calories: float = Field(..., description="Calories")
    protein: float = Field(..., description="Protein in grams")
    carbs: float = Field(..., description="Carbohydrates in grams")
    fat: float = Field(..., description="Fat in grams")
    date: str = Field(..., description="Date of the meal")


class DailyProgressCardProps(BaseModel):
    date: str | None = Field(None, description="Date for the progress")
    exercise_count: int = Field(..., description="Number of exercises completed")
    total_calories: float = Field(..., description="Total calories consumed")
    total_protein: float = Field(..., description="Total protein in grams")
    total_carbs: float = Field(..., description="Total carbs in grams")
    total_fat: float = Field(..., description="Total fat in grams")
    calorie_target: float = Field(..., description="Daily calorie target")


class SuggestedExercise(BaseModel):
    id: str | None = Field(None, description="Exercise id from the exercise catalogue")
    name: str
    body_part: str | None = None
    equipment: str | None = None
    gif_url: str | None = None
    instructions: list[str] | None = None


class ExerciseSuggestionListProps(BaseModel):
    title: str | None = None
    body_part: str | None = Field(None, description="Body part filter used")
    equipment: str | None = Field(None, description="Equipment filter used")
    exercises: list[SuggestedExercise]


# ── Trainer ──────────────────────────────────────────────────────────────

class PlanCardExercise(BaseModel):
    name: str
    sets: int
    reps: int
    rest_seconds: int = Field(..., description="Rest time between sets in seconds")
    notes: str | None = None


class WorkoutPlanCardProps(BaseModel):
    plan_name: str
    description: str | None = None
    target_goal: str | None = None
    estimated_duration: float | None = Field(None, description="Estimated duration in minutes")
    exercises: list[PlanCardExercise]


class ExerciseAdviceCardProps(BaseModel):
    exercise_name: str
    target_muscles: list[str]
    form_tips: list[str]
    common_mistakes: list[str]
    variations: list[str] | None = None
    safety_notes: str | None = None


class FormCorrection(BaseModel):
    issue: str
    correction: str
    importance: Literal["critical", "important", "minor"]


class FormCorrectionCardProps(BaseModel):
    exercise_name: str
    overall_assessment: str
    corrections: list[FormCorrection]
    do_list: list[str]
    dont_list: list[str]
