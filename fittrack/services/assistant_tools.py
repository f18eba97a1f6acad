"""Tools the chat assistants call to read and write fitness data.

Each tool has a pydantic input and output model; the JSON schemas of those
models are what gets registered with the hosted agent framework. Logging tools
recompute the daily log right after writing, unlike the plain REST writers.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date, timedelta

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.config import get_settings
from fittrack.core.dates import days_ago_iso, today_iso, utcnow
from fittrack.core.enums import AssistantName
from fittrack.schemas.assistant import (
    CreateWorkoutPlanInput,
    DailyExercisesOutput,
    DailyMealsOutput,
    DailyProgressOutput,
    DateInput,
    ExerciseSummary,
    HistoryDay,
    HistoryExercise,
    LogExerciseInput,
    LogMealInput,
    MealSummary,
    NoInput,
    PlanSummary,
    ProfileLookupOutput,
    ProgressHistoryInput,
    ProgressHistoryOutput,
    ToolResult,
    WeeklyStatsOutput,
    WorkoutPlansOutput,
)
from fittrack.schemas.exercise_log import ExerciseLogCreate
from fittrack.schemas.meal_log import MealLogCreate
from fittrack.schemas.user_profile import UserProfileRead
from fittrack.schemas.workout_plan import WorkoutPlanCreate
from fittrack.services import (
    daily_aggregation,
    daily_logs,
    exercise_logs,
    meal_logs,
    user_profile,
    workout_plans,
)

logger = logging.getLogger(__name__)

# Limit the streak scan to ~14 months of daily logs
STREAK_LOOKBACK_DAYS = 430
WEEKLY_STATS_DAYS = 7


@dataclass
class ToolContext:
    db: AsyncSession
    assistant: AssistantName


ToolHandler = Callable[[ToolContext, BaseModel], Awaitable[BaseModel]]


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    input_model: type[BaseModel]
    output_model: type[BaseModel]
    handler: ToolHandler


TOOLS: dict[str, Tool] = {}


def tool(name: str, description: str, input_model: type[BaseModel], output_model: type[BaseModel]):
    """Register an async handler under a tool name."""

    def decorator(fn: ToolHandler) -> ToolHandler:
        TOOLS[name] = Tool(name, description, input_model, output_model, fn)
        return fn

    return decorator


def current_streak(active_dates: list[date], today: date) -> int:
    """Consecutive active days ending today or yesterday; 0 if the run is broken."""
    days = sorted(set(active_dates), reverse=True)
    if not days or days[0] < today - timedelta(days=1):
        return 0
    streak = 1
    for i in range(1, len(days)):
        if days[i] == days[i - 1] - timedelta(days=1):
            streak += 1
        else:
            break
    return streak


# ── Butler: logging ──────────────────────────────────────────────────────

@tool(
    "logExercise",
    "Log a completed exercise with sets, reps, and optional weight. "
    "Use this when the user says they did an exercise.",
    LogExerciseInput,
    ToolResult,
)
async def log_exercise(ctx: ToolContext, data: LogExerciseInput) -> ToolResult:
    log_date = data.date or today_iso()
    log = await exercise_logs.create(
        ctx.db,
        ExerciseLogCreate(**data.model_dump(exclude={"date"}), date=log_date),
    )
    await daily_aggregation.recalculate(ctx.db, log_date)
    weight = f" @ {data.weight:g}kg" if data.weight is not None else ""
    return ToolResult(
        success=True,
        message=f"Logged: {data.exercise_name} - {data.sets} sets x {data.reps} reps{weight}",
        id=log.id,
    )


@tool(
    "logMeal",
    "Log a meal with estimated calories and macros. Use this when the user says they ate something.",
    LogMealInput,
    ToolResult,
)
async def log_meal(ctx: ToolContext, data: LogMealInput) -> ToolResult:
    log_date = data.date or today_iso()
    log = await meal_logs.create(
        ctx.db,
        MealLogCreate(**data.model_dump(exclude={"date"}), date=log_date),
    )
    await daily_aggregation.recalculate(ctx.db, log_date)
    return ToolResult(
        success=True,
        message=(
            f"Logged {data.meal_type.value}: {data.food_name} - {data.calories:g} cal | "
            f"{data.protein:g}g protein | {data.carbs:g}g carbs | {data.fat:g}g fat"
        ),
        id=log.id,
    )


# ── Shared reads ─────────────────────────────────────────────────────────

@tool("getDailyExercises", "Get all exercises logged for a specific date", DateInput, DailyExercisesOutput)
async def get_daily_exercises(ctx: ToolContext, data: DateInput) -> DailyExercisesOutput:
    log_date = data.date or today_iso()
    logs = await exercise_logs.get_by_date(ctx.db, log_date)
    return DailyExercisesOutput(
        date=log_date,
        exercises=[
            ExerciseSummary(name=log.exercise_name, sets=log.sets, reps=log.reps, weight=log.weight)
            for log in logs
        ],
        count=len(logs),
    )


@tool(
    "getDailyMeals",
    "Get all meals logged for a specific date with nutrition totals",
    DateInput,
    DailyMealsOutput,
)
async def get_daily_meals(ctx: ToolContext, data: DateInput) -> DailyMealsOutput:
    log_date = data.date or today_iso()
    logs = await meal_logs.get_by_date(ctx.db, log_date)
    return DailyMealsOutput(
        date=log_date,
        meals=[
            MealSummary(
                food_name=log.food_name,
                meal_type=log.meal_type,
                calories=log.calories,
                protein=log.protein,
                carbs=log.carbs,
                fat=log.fat,
            )
            for log in logs
        ],
        totals=meal_logs.sum_meals(logs),
    )


# ── Butler: progress ─────────────────────────────────────────────────────

async def _calorie_target(db: AsyncSession) -> int:
    profile = await user_profile.get(db)
    if profile is not None and profile.daily_calorie_target:
        return profile.daily_calorie_target
    return get_settings().default_calorie_target


@tool(
    "getDailyProgress",
    "Get a day's overall progress including exercises and nutrition",
    DateInput,
    DailyProgressOutput,
)
async def get_daily_progress(ctx: ToolContext, data: DateInput) -> DailyProgressOutput:
    log_date = data.date or today_iso()
    daily = await daily_logs.get_by_date(ctx.db, log_date)
    target = await _calorie_target(ctx.db)
    calories = daily.total_calories if daily else 0.0
    return DailyProgressOutput(
        date=log_date,
        exercise_count=daily.exercise_count if daily else 0,
        total_calories=calories,
        total_protein=daily.total_protein if daily else 0.0,
        total_carbs=daily.total_carbs if daily else 0.0,
        total_fat=daily.total_fat if daily else 0.0,
        calorie_target=target,
        calorie_progress=round(calories / target * 100) if target > 0 else 0,
    )


@tool("getWeeklyStats", "Get statistics for the past 7 days", NoInput, WeeklyStatsOutput)
async def get_weekly_stats(ctx: ToolContext, data: NoInput) -> WeeklyStatsOutput:
    # get_recent(n) spans n + 1 calendar days including today
    week = await daily_logs.get_recent(ctx.db, WEEKLY_STATS_DAYS - 1)
    tracked = len(week)

    today = utcnow().date()
    history = await daily_logs.get_by_date_range(
        ctx.db, days_ago_iso(STREAK_LOOKBACK_DAYS, today), today.isoformat()
    )
    active = [date.fromisoformat(d.date) for d in history if d.exercise_count > 0]

    return WeeklyStatsOutput(
        total_exercises=sum(d.exercise_count for d in week),
        avg_calories=round(sum(d.total_calories for d in week) / tracked) if tracked else 0,
        avg_protein=round(sum(d.total_protein for d in week) / tracked) if tracked else 0,
        days_tracked=tracked,
        streak_days=current_streak(active, today),
    )


# ── Trainer ──────────────────────────────────────────────────────────────

@tool(
    "getUserProfile",
    "Get the user's profile including fitness goal and stats",
    NoInput,
    ProfileLookupOutput,
)
async def get_user_profile(ctx: ToolContext, data: NoInput) -> ProfileLookupOutput:
    profile = await user_profile.get(ctx.db)
    if profile is None:
        return ProfileLookupOutput(found=False)
    return ProfileLookupOutput(found=True, profile=UserProfileRead.model_validate(profile))


@tool(
    "getUserProgressHistory",
    "Get the user's exercise and nutrition history for analysis",
    ProgressHistoryInput,
    ProgressHistoryOutput,
)
async def get_user_progress_history(ctx: ToolContext, data: ProgressHistoryInput) -> ProgressHistoryOutput:
    start, end = days_ago_iso(data.days), today_iso()
    exercises = await exercise_logs.get_by_date_range(ctx.db, start, end)
    days = await daily_logs.get_by_date_range(ctx.db, start, end)
    return ProgressHistoryOutput(
        exercises=[
            HistoryExercise(
                date=e.date, name=e.exercise_name, sets=e.sets, reps=e.reps, weight=e.weight
            )
            for e in sorted(exercises, key=lambda e: e.date)
        ],
        daily_stats=[
            HistoryDay(date=d.date, calories=d.total_calories, exercise_count=d.exercise_count)
            for d in days
        ],
    )


@tool(
    "createWorkoutPlan",
    "Create and save a new workout plan for the user",
    CreateWorkoutPlanInput,
    ToolResult,
)
async def create_workout_plan(ctx: ToolContext, data: CreateWorkoutPlanInput) -> ToolResult:
    plan = await workout_plans.create(
        ctx.db, WorkoutPlanCreate(**data.model_dump(), created_by=ctx.assistant)
    )
    return ToolResult(
        success=True,
        message=f"Created workout plan: {plan.name} with {len(plan.exercises)} exercises",
        id=plan.id,
    )


@tool("getWorkoutPlans", "Get all saved workout plans", NoInput, WorkoutPlansOutput)
async def get_workout_plans(ctx: ToolContext, data: NoInput) -> WorkoutPlansOutput:
    plans = await workout_plans.list_all(ctx.db)
    return WorkoutPlansOutput(
        plans=[
            PlanSummary(
                id=p.id, name=p.name, description=p.description, exercise_count=len(p.exercises)
            )
            for p in plans
        ]
    )
