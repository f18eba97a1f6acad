"""Assistant tools and the conversation loop, driven by a scripted runtime."""
from datetime import date

import pytest
from pydantic import ValidationError

from fittrack.core.dates import days_ago_iso, today_iso
from fittrack.core.errors import UnknownAssistantError, UnknownToolError
from fittrack.db.store import RecordStore
from fittrack.schemas.assistant import AgentTurn, ComponentInstruction, ToolCall
from fittrack.schemas.user_profile import UserProfileCreate
from fittrack.services import daily_aggregation, daily_logs, exercise_logs, meal_logs, user_profile
from fittrack.services.assistant_tools import current_streak
from fittrack.services.assistants import (
    ASSISTANTS,
    BUTLER,
    TRAINER,
    AssistantReplyError,
    converse,
    get_assistant,
    run_tool,
)

from tests.factories import add_exercise, add_meal

MEAL_ARGS = {
    "food_name": "Oatmeal with banana",
    "meal_type": "breakfast",
    "calories": 960,
    "protein": 20,
    "carbs": 150,
    "fat": 12,
}


class ScriptedRuntime:
    """Replays canned turns and records what it was sent."""

    def __init__(self, *turns):
        self.turns = list(turns)
        self.calls = []

    async def respond(self, assistant, messages):
        self.calls.append(list(messages))
        return self.turns.pop(0)


class LoopingRuntime:
    """Never stops asking for tools."""

    def __init__(self):
        self.calls = 0

    async def respond(self, assistant, messages):
        self.calls += 1
        return AgentTurn(tool_calls=[ToolCall(id=f"c{self.calls}", name="getWeeklyStats")])


# ── Registry ─────────────────────────────────────────────────────────────

def test_assistant_tool_sets():
    assert set(BUTLER.tools) == {
        "logExercise",
        "getDailyExercises",
        "logMeal",
        "getDailyMeals",
        "getDailyProgress",
        "getWeeklyStats",
    }
    assert set(TRAINER.tools) == {
        "getUserProfile",
        "getUserProgressHistory",
        "createWorkoutPlan",
        "getWorkoutPlans",
        "getDailyExercises",
        "getDailyMeals",
    }


def test_info_exposes_tool_and_component_schemas():
    info = ASSISTANTS["butler"].info()

    log_meal = next(t for t in info.tools if t.name == "logMeal")
    assert "food_name" in log_meal.input_schema["properties"]
    assert {c.name for c in info.components} == {
        "ExerciseLogCard",
        "MealLogCard",
        "DailyProgressCard",
        "ExerciseSuggestionList",
    }


def test_unknown_assistant():
    with pytest.raises(UnknownAssistantError):
        get_assistant("chef")


# ── Tools ────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_log_exercise_defaults_to_today_and_recalculates(db):
    result = await run_tool(
        db, BUTLER, "logExercise", {"exercise_name": "Bench Press", "sets": 3, "reps": 10, "weight": 60}
    )

    assert result.success is True
    assert result.message == "Logged: Bench Press - 3 sets x 10 reps @ 60kg"
    logs = await exercise_logs.get_by_date(db, today_iso())
    assert [log.id for log in logs] == [result.id]
    assert (await daily_logs.get_by_date(db, today_iso())).exercise_count == 1


@pytest.mark.asyncio
async def test_log_meal_on_given_date_recalculates(db):
    await add_meal(db, "2026-02-04", 500, 30, 50, 10)

    result = await run_tool(db, BUTLER, "logMeal", {**MEAL_ARGS, "date": "2026-02-04"})

    assert result.success is True
    daily = await daily_logs.get_by_date(db, "2026-02-04")
    assert daily.total_calories == 1460
    assert daily.total_carbs == 200


@pytest.mark.asyncio
async def test_tool_arguments_are_validated(db):
    with pytest.raises(ValidationError):
        await run_tool(db, BUTLER, "logExercise", {"exercise_name": "Squat", "sets": 0, "reps": 5})
    assert await exercise_logs.get_by_date(db, today_iso()) == []


@pytest.mark.asyncio
async def test_tool_outside_assistant_set_is_rejected(db):
    with pytest.raises(UnknownToolError):
        await run_tool(db, BUTLER, "createWorkoutPlan", {"name": "Plan", "exercises": []})
    with pytest.raises(UnknownToolError):
        await run_tool(db, TRAINER, "logMeal", MEAL_ARGS)


@pytest.mark.asyncio
async def test_daily_meals_include_totals(db):
    await add_meal(db, "2026-02-04", 500, 30, 50, 10)
    await add_meal(db, "2026-02-04", 300, 25, 20, 5, meal_type="dinner")

    result = await run_tool(db, TRAINER, "getDailyMeals", {"date": "2026-02-04"})

    assert len(result.meals) == 2
    assert result.totals.calories == 800
    assert result.totals.meal_count == 2


@pytest.mark.asyncio
async def test_daily_progress_uses_profile_target(db):
    await user_profile.create(
        db, UserProfileCreate(name="Sam", height=178, weight=80, fitness_goal="maintain")
    )
    await run_tool(db, BUTLER, "logMeal", MEAL_ARGS)

    progress = await run_tool(db, BUTLER, "getDailyProgress", {})

    assert progress.date == today_iso()
    assert progress.calorie_target == 1920
    assert progress.total_calories == 960
    assert progress.calorie_progress == 50


@pytest.mark.asyncio
async def test_daily_progress_without_profile_or_log(db):
    progress = await run_tool(db, BUTLER, "getDailyProgress", {"date": "2026-02-04"})

    assert progress.calorie_target == 2000
    assert progress.total_calories == 0
    assert progress.exercise_count == 0
    assert progress.calorie_progress == 0


@pytest.mark.asyncio
async def test_weekly_stats(db):
    today = today_iso()
    for day in (today, days_ago_iso(1), days_ago_iso(3)):
        await add_exercise(db, day)
    await add_meal(db, today, 600, 40, 60, 20)
    for day in (today, days_ago_iso(1), days_ago_iso(3), days_ago_iso(10)):
        await daily_aggregation.recalculate(db, day)

    stats = await run_tool(db, BUTLER, "getWeeklyStats", {})

    assert stats.days_tracked == 3
    assert stats.total_exercises == 3
    assert stats.avg_calories == 200
    assert stats.avg_protein == 13
    assert stats.streak_days == 2


def test_current_streak():
    today = date(2026, 3, 10)
    assert current_streak([], today) == 0
    assert current_streak([date(2026, 3, 10), date(2026, 3, 9), date(2026, 3, 8)], today) == 3
    # A run ending yesterday still counts
    assert current_streak([date(2026, 3, 9), date(2026, 3, 8), date(2026, 3, 6)], today) == 2
    assert current_streak([date(2026, 3, 8), date(2026, 3, 7)], today) == 0
    assert current_streak([date(2026, 3, 10), date(2026, 3, 10)], today) == 1


@pytest.mark.asyncio
async def test_user_profile_lookup(db):
    missing = await run_tool(db, TRAINER, "getUserProfile", {})
    assert missing.found is False
    assert missing.profile is None

    await user_profile.create(db, UserProfileCreate(name="Sam", height=178, weight=80))
    found = await run_tool(db, TRAINER, "getUserProfile", {})
    assert found.found is True
    assert found.profile.name == "Sam"


@pytest.mark.asyncio
async def test_progress_history(db):
    await add_exercise(db, today_iso(), name="Squat", weight=100)
    await add_exercise(db, days_ago_iso(2), name="Row")
    await add_exercise(db, days_ago_iso(20), name="Old")
    await daily_aggregation.recalculate(db, today_iso())

    history = await run_tool(db, TRAINER, "getUserProgressHistory", {"days": 7})

    assert [e.name for e in history.exercises] == ["Row", "Squat"]
    assert [d.date for d in history.daily_stats] == [today_iso()]


@pytest.mark.asyncio
async def test_trainer_creates_plan_tagged_with_its_name(db):
    result = await run_tool(
        db,
        TRAINER,
        "createWorkoutPlan",
        {"name": "Leg Day", "exercises": [{"name": "Squat", "sets": 5, "reps": 5}]},
    )
    assert result.message == "Created workout plan: Leg Day with 1 exercises"

    plans = await run_tool(db, TRAINER, "getWorkoutPlans", {})
    assert [(p.name, p.exercise_count) for p in plans.plans] == [("Leg Day", 1)]


# ── Conversation loop ────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_converse_runs_tools_then_returns_component(db):
    runtime = ScriptedRuntime(
        AgentTurn(tool_calls=[ToolCall(id="call-1", name="logMeal", arguments=MEAL_ARGS)]),
        AgentTurn(
            text="Logged your breakfast.",
            component=ComponentInstruction(
                name="MealLogCard", props={**MEAL_ARGS, "date": today_iso()}
            ),
        ),
    )

    reply = await converse(runtime, db, BUTLER, "I had oatmeal with a banana")

    assert reply.assistant == "butler"
    assert reply.text == "Logged your breakfast."
    assert reply.component.name == "MealLogCard"
    assert reply.component.props["meal_type"] == "breakfast"
    assert reply.tool_calls_made == ["logMeal"]
    assert len(await meal_logs.get_by_date(db, today_iso())) == 1

    # The tool result was fed back on the second round
    tool_message = runtime.calls[1][-1]
    assert tool_message.role == "tool"
    assert tool_message.tool_call_id == "call-1"
    assert tool_message.content["success"] is True


@pytest.mark.asyncio
async def test_converse_reports_tool_errors_to_the_runtime(db):
    runtime = ScriptedRuntime(
        AgentTurn(tool_calls=[ToolCall(id="call-1", name="createWorkoutPlan", arguments={})]),
        AgentTurn(text="I can't create plans, ask the trainer."),
    )

    reply = await converse(runtime, db, BUTLER, "Make me a plan")

    assert reply.text == "I can't create plans, ask the trainer."
    assert "error" in runtime.calls[1][-1].content


@pytest.mark.asyncio
async def test_converse_rejects_invalid_component_props(db):
    runtime = ScriptedRuntime(
        AgentTurn(component=ComponentInstruction(name="MealLogCard", props={"food_name": "Toast"}))
    )
    with pytest.raises(AssistantReplyError):
        await converse(runtime, db, BUTLER, "Show me that meal")


@pytest.mark.asyncio
async def test_converse_rejects_other_assistants_components(db):
    runtime = ScriptedRuntime(
        AgentTurn(component=ComponentInstruction(name="WorkoutPlanCard", props={}))
    )
    with pytest.raises(AssistantReplyError):
        await converse(runtime, db, BUTLER, "Plan please")


@pytest.mark.asyncio
async def test_converse_gives_up_after_max_tool_rounds(db):
    runtime = LoopingRuntime()

    with pytest.raises(AssistantReplyError):
        await converse(runtime, db, BUTLER, "Stats?")

    assert runtime.calls == 6


@pytest.mark.asyncio
async def test_converse_survives_a_lost_daily_log_race(db, monkeypatch):
    await daily_aggregation.recalculate(db, today_iso())

    async def missed_existing(self, field, value):
        return None

    # The summary row exists, but this recompute reads before it appears.
    monkeypatch.setattr(RecordStore, "first_by_index", missed_existing)
    runtime = ScriptedRuntime(
        AgentTurn(
            tool_calls=[
                ToolCall(
                    id="call-1",
                    name="logExercise",
                    arguments={"exercise_name": "Squat", "sets": 5, "reps": 5},
                )
            ]
        ),
        AgentTurn(tool_calls=[ToolCall(id="call-2", name="getDailyExercises")]),
        AgentTurn(text="Logged, but the summary needs a refresh."),
    )

    reply = await converse(runtime, db, BUTLER, "I did squats")

    assert reply.tool_calls_made == ["logExercise", "getDailyExercises"]
    assert "error" in runtime.calls[1][-1].content
    # The exercise written before the conflict is still there
    assert runtime.calls[2][-1].content["count"] == 1
    await db.commit()
    assert len(await exercise_logs.get_by_date(db, today_iso())) == 1


@pytest.mark.asyncio
async def test_weekly_stats_cover_seven_calendar_days(db):
    for n in range(8):
        day = days_ago_iso(n)
        await add_exercise(db, day)
        await daily_aggregation.recalculate(db, day)

    stats = await run_tool(db, BUTLER, "getWeeklyStats", {})

    assert stats.days_tracked == 7
    assert stats.total_exercises == 7
    assert stats.streak_days == 8
