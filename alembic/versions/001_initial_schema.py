"""Initial schema: exercise_logs, meal_logs, daily_logs, user_profile, workout_plans.

Revision ID: 001
Revises:
Create Date: 2026-02-04

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

meal_type = sa.Enum("breakfast", "lunch", "dinner", "snack", name="mealtype")
fitness_goal = sa.Enum("lose_weight", "build_muscle", "maintain", name="fitnessgoal")


def upgrade() -> None:
    op.create_table(
        "exercise_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("date", sa.String(length=10), nullable=False),
        sa.Column("exercise_id", sa.String(length=64), nullable=True),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column("sets", sa.Integer(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("duration", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_exercise_logs_date", "exercise_logs", ["date"])

    op.create_table(
        "meal_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("date", sa.String(length=10), nullable=False),
        sa.Column("meal_type", meal_type, nullable=False),
        sa.Column("food_name", sa.String(length=255), nullable=False),
        sa.Column("quantity", sa.String(length=100), nullable=True),
        sa.Column("calories", sa.Float(), nullable=False),
        sa.Column("protein", sa.Float(), nullable=False),
        sa.Column("carbs", sa.Float(), nullable=False),
        sa.Column("fat", sa.Float(), nullable=False),
        sa.Column("fiber", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_meal_logs_date", "meal_logs", ["date"])

    # daily_logs: one cached summary row per date
    op.create_table(
        "daily_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("date", sa.String(length=10), nullable=False),
        sa.Column("total_calories", sa.Float(), nullable=False, server_default="0"),
        sa.Column("total_protein", sa.Float(), nullable=False, server_default="0"),
        sa.Column("total_carbs", sa.Float(), nullable=False, server_default="0"),
        sa.Column("total_fat", sa.Float(), nullable=False, server_default="0"),
        sa.Column("exercise_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_daily_logs_date", "daily_logs", ["date"], unique=True)

    # user_profile: singleton under a fixed primary key
    op.create_table(
        "user_profile",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("height", sa.Float(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("fitness_goal", fitness_goal, nullable=False),
        sa.Column("daily_calorie_target", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "workout_plans",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "exercises",
            sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), "postgresql"),
            nullable=False,
        ),
        sa.Column("created_by", sa.String(length=20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("workout_plans")
    op.drop_table("user_profile")
    op.drop_index("ix_daily_logs_date", table_name="daily_logs")
    op.drop_table("daily_logs")
    op.drop_index("ix_meal_logs_date", table_name="meal_logs")
    op.drop_table("meal_logs")
    op.drop_index("ix_exercise_logs_date", table_name="exercise_logs")
    op.drop_table("exercise_logs")
    fitness_goal.drop(op.get_bind(), checkfirst=True)
    meal_type.drop(op.get_bind(), checkfirst=True)
