"""API v1 router aggregation."""

from fastapi import APIRouter

from fittrack.api.v1.endpoints import (
    assistants,
    daily_logs,
    exercise_logs,
    health,
    meal_logs,
    profile,
    workout_plans,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercise_logs.router, prefix="/exercise-logs", tags=["exercise-logs"])
api_router.include_router(meal_logs.router, prefix="/meal-logs", tags=["meal-logs"])
api_router.include_router(daily_logs.router, prefix="/daily-logs", tags=["daily-logs"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(workout_plans.router, prefix="/workout-plans", tags=["workout-plans"])
api_router.include_router(assistants.router, prefix="/assistants", tags=["assistants"])
