"""Butler and Trainer assistant configuration and the conversation loop.

The language model lives in a hosted agent runtime that this service only talks
to through AssistantRuntime: hand it the conversation, get back either tool
calls to execute or a final reply (plain text and/or a component to render).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.config import get_settings
from fittrack.core.enums import AssistantName
from fittrack.core.errors import FitTrackError, UnknownAssistantError, UnknownToolError
from fittrack.schemas.assistant import (
    AgentTurn,
    AssistantInfo,
    AssistantReply,
    ChatMessage,
    ComponentInfo,
    ComponentInstruction,
    ToolInfo,
)
from fittrack.schemas.components import (
    DailyProgressCardProps,
    ExerciseAdviceCardProps,
    ExerciseLogCardProps,
    ExerciseSuggestionListProps,
    FormCorrectionCardProps,
    MealLogCardProps,
    WorkoutPlanCardProps,
)
from fittrack.services.assistant_tools import TOOLS, ToolContext

logger = logging.getLogger(__name__)


class AssistantReplyError(FitTrackError):
    """The runtime returned something this service cannot use."""

    status_code = 502


@dataclass(frozen=True)
class Component:
    name: str
    description: str
    props_model: type[BaseModel]


@dataclass(frozen=True)
class AssistantConfig:
    name: AssistantName
    description: str
    system_prompt: str
    tools: tuple[str, ...]
    components: tuple[Component, ...] = field(default_factory=tuple)

    def component(self, name: str) -> Component | None:
        return next((c for c in self.components if c.name == name), None)

    def info(self) -> AssistantInfo:
        return AssistantInfo(
            name=self.name.value,
            description=self.description,
            system_prompt=self.system_prompt,
            tools=[
                ToolInfo(
                    name=t.name,
                    description=t.description,
                    input_schema=t.input_model.model_json_schema(),
                    output_schema=t.output_model.model_json_schema(),
                )
                for t in (TOOLS[name] for name in self.tools)
            ],
            components=[
                ComponentInfo(
                    name=c.name,
                    description=c.description,
                    props_schema=c.props_model.model_json_schema(),
                )
                for c in self.components
            ],
        )


class AssistantRuntime(Protocol):
    """Hosted agent runtime. Implementations wrap whatever SDK hosts the model."""

    async def respond(self, assistant: AssistantConfig, messages: list[ChatMessage]) -> AgentTurn:
        ...


BUTLER_SYSTEM_PROMPT = """You are FitLog, a quick and efficient fitness tracking assistant.

Your primary tasks:
1. SUGGEST EXERCISES based on body part or equipment
2. LOG WORKOUTS: when the user says "I did X", log it with sets/reps/weight
3. LOG MEALS: when the user says "I ate X", estimate and log calories/protein/carbs/fat
4. TRACK PROGRESS: show daily summaries and progress

Keep responses SHORT and ACTION-FOCUSED. Always confirm what you logged.
Example: "Logged: Bench Press - 3 sets x 10 reps @ 60kg"

When estimating nutrition, use typical serving sizes and say that the numbers are estimates.
"""

TRAINER_SYSTEM_PROMPT = """You are FitCoach, an expert personal trainer and nutritionist.

Your expertise includes:
1. EXERCISE ADVICE: form tips, common mistakes and corrections for any exercise
2. WORKOUT PLANNING: personalised plans based on goals, equipment and fitness level
3. PROGRESS ANALYSIS: analyse logged history and suggest evidence-based improvements
4. NUTRITION GUIDANCE: dietary advice tailored to the user's fitness goal

Reference the user's logged data when giving personalised advice and keep
recommendations actionable. Include warm-up, cool-down and safety notes in plans.
"""

BUTLER = AssistantConfig(
    name=AssistantName.BUTLER,
    description="Daily tracking and data entry: log workouts and meals, show progress.",
    system_prompt=BUTLER_SYSTEM_PROMPT,
    tools=(
        "logExercise",
        "getDailyExercises",
        "logMeal",
        "getDailyMeals",
        "getDailyProgress",
        "getWeeklyStats",
    ),
    components=(
        Component(
            "ExerciseLogCard",
            "Displays a logged exercise with sets, reps, weight, and date. "
            "Use when confirming an exercise has been logged.",
            ExerciseLogCardProps,
        ),
        Component(
            "MealLogCard",
            "Displays a logged meal with calories and macros. "
            "Use when confirming a meal has been logged.",
            MealLogCardProps,
        ),
        Component(
            "DailyProgressCard",
            "Shows exercise count, calorie intake and macro totals for a day.",
            DailyProgressCardProps,
        ),
        Component(
            "ExerciseSuggestionList",
            "Displays suggested exercises with body part and equipment info.",
            ExerciseSuggestionListProps,
        ),
    ),
)

TRAINER = AssistantConfig(
    name=AssistantName.TRAINER,
    description="Expert fitness advice, workout planning and progress analysis.",
    system_prompt=TRAINER_SYSTEM_PROMPT,
    tools=(
        "getUserProfile",
        "getUserProgressHistory",
        "createWorkoutPlan",
        "getWorkoutPlans",
        "getDailyExercises",
        "getDailyMeals",
    ),
    components=(
        Component("WorkoutPlanCard", "Shows a workout plan with its exercises.", WorkoutPlanCardProps),
        Component(
            "ExerciseAdviceCard",
            "Form tips, target muscles and common mistakes for one exercise.",
            ExerciseAdviceCardProps,
        ),
        Component(
            "FormCorrectionCard",
            "Assessment of the user's form with prioritised corrections.",
            FormCorrectionCardProps,
        ),
    ),
)

ASSISTANTS: dict[str, AssistantConfig] = {a.name.value: a for a in (BUTLER, TRAINER)}


def get_assistant(name: str) -> AssistantConfig:
    try:
        return ASSISTANTS[name]
    except KeyError:
        raise UnknownAssistantError(name) from None


async def run_tool(
    db: AsyncSession,
    assistant: AssistantConfig,
    tool_name: str,
    arguments: dict[str, Any],
) -> BaseModel:
    """Validate arguments against the tool's input model and run it.

    Raises UnknownToolError if the assistant does not expose the tool and
    pydantic.ValidationError if the arguments do not fit.
    """
    if tool_name not in assistant.tools:
        raise UnknownToolError(assistant.name.value, tool_name)
    t = TOOLS[tool_name]
    data = t.input_model.model_validate(arguments)
    logger.info("%s -> %s", assistant.name.value, tool_name)
    return await t.handler(ToolContext(db=db, assistant=assistant.name), data)


def _finalize(assistant: AssistantConfig, turn: AgentTurn, tools_used: list[str]) -> AssistantReply:
    component = None
    if turn.component is not None:
        card = assistant.component(turn.component.name)
        if card is None:
            raise AssistantReplyError(
                f"Assistant '{assistant.name.value}' has no component '{turn.component.name}'"
            )
        try:
            props = card.props_model.model_validate(turn.component.props)
        except ValidationError as e:
            raise AssistantReplyError(f"Invalid props for {card.name}: {e}") from e
        component = ComponentInstruction(name=card.name, props=props.model_dump(mode="json"))
    return AssistantReply(
        assistant=assistant.name.value,
        text=turn.text,
        component=component,
        tool_calls_made=tools_used,
    )


async def converse(
    runtime: AssistantRuntime,
    db: AsyncSession,
    assistant: AssistantConfig,
    message: str,
    history: list[ChatMessage] | None = None,
) -> AssistantReply:
    """Submit one user message and run tool calls until the runtime gives a final reply."""
    max_rounds = get_settings().assistant_max_tool_rounds
    messages = [*(history or []), ChatMessage(role="user", content=message)]
    tools_used: list[str] = []

    for _ in range(max_rounds + 1):
        turn = await runtime.respond(assistant, messages)
        if not turn.tool_calls:
            return _finalize(assistant, turn, tools_used)

        messages.append(ChatMessage(role="assistant", content=turn.text, tool_calls=turn.tool_calls))
        for call in turn.tool_calls:
            tools_used.append(call.name)
            try:
                result = await run_tool(db, assistant, call.name, call.arguments)
                content = result.model_dump(mode="json")
            except (ValidationError, FitTrackError) as e:
                # Report the failure back to the model so it can correct itself.
                logger.warning("Tool %s failed: %s", call.name, e)
                content = {"error": str(e)}
            messages.append(
                ChatMessage(role="tool", name=call.name, tool_call_id=call.id, content=content)
            )

    raise AssistantReplyError(f"No final reply after {max_rounds} tool rounds")
