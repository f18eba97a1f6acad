"""Onboarding calorie target.

A deliberately rough estimate: body weight times a flat kcal/kg factor, scaled
down for weight loss and up for muscle gain. The user can override it.
"""

from __future__ import annotations

from fittrack.core.constants import BASE_KCAL_PER_KG, GOAL_CALORIE_MULTIPLIERS
from fittrack.core.enums import FitnessGoal


def suggest_daily_calorie_target(weight_kg: float, fitness_goal: FitnessGoal | str) -> int:
    """Suggested kcal/day for the given weight and goal. Unknown goals count as maintain."""
    goal = fitness_goal.value if isinstance(fitness_goal, FitnessGoal) else fitness_goal
    base = weight_kg * BASE_KCAL_PER_KG
    multiplier = GOAL_CALORIE_MULTIPLIERS.get(goal, 1.0)
    return round(base * multiplier)
