"""ORM models - import all so Base.metadata is complete for migrations."""

from fittrack.models.daily_log import DailyLog
from fittrack.models.exercise_log import ExerciseLog
from fittrack.models.meal_log import MealLog
from fittrack.models.user_profile import UserProfile
from fittrack.models.workout_plan import WorkoutPlan

__all__ = [
    "DailyLog",
    "ExerciseLog",
    "MealLog",
    "UserProfile",
    "WorkoutPlan",
]
