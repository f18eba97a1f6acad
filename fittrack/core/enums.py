"""Shared enums for models and API."""

from enum import Enum


class MealType(str, Enum):
    """Which meal of the day a food entry belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class FitnessGoal(str, Enum):
    """Primary goal chosen during onboarding."""

    LOSE_WEIGHT = "lose_weight"
    BUILD_MUSCLE = "build_muscle"
    MAINTAIN = "maintain"


class AssistantName(str, Enum):
    """Chat assistants. Also used as the author tag on workout plans."""

    BUTLER = "butler"  # Quick logging
    TRAINER = "trainer"  # Advice and planning
