"""Application constants."""

import uuid

# Single implicit user: the profile row always lives under this primary key.
PROFILE_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")

# Onboarding calorie estimate: kcal per kg body weight, scaled by goal
BASE_KCAL_PER_KG = 24
GOAL_CALORIE_MULTIPLIERS = {
    "lose_weight": 0.8,
    "build_muscle": 1.2,
    "maintain": 1.0,
}

# Query defaults
DEFAULT_RECENT_DAYS = 7
DEFAULT_RECENT_LIMIT = 10

# Date key format stored on every log ("YYYY-MM-DD")
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
