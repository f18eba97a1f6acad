"""Assistant endpoints: configuration, tool callbacks and chat messages."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.errors import AssistantRuntimeUnavailableError
from fittrack.db.session import get_db
from fittrack.schemas.assistant import AssistantInfo, AssistantMessageRequest, AssistantReply
from fittrack.services.assistants import ASSISTANTS, converse, get_assistant, run_tool

router = APIRouter()


@router.get("", response_model=list[AssistantInfo])
async def list_assistants():
    """Both assistants with their prompts, tool schemas and component schemas."""
    return [a.info() for a in ASSISTANTS.values()]


@router.get("/{name}", response_model=AssistantInfo)
async def get_assistant_info(name: str):
    return get_assistant(name).info()


@router.post("/{name}/tools/{tool_name}")
async def invoke_tool(
    name: str,
    tool_name: str,
    arguments: dict[str, Any] | None = Body(None),
    db: AsyncSession = Depends(get_db),
):
    """Tool callback from the hosted agent runtime."""
    assistant = get_assistant(name)
    try:
        result = await run_tool(db, assistant, tool_name, arguments or {})
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False)) from e
    return result.model_dump(mode="json")


@router.post("/{name}/messages", response_model=AssistantReply)
async def send_message(
    name: str,
    payload: AssistantMessageRequest,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    """Send one user message; tools run server-side until the assistant replies."""
    assistant = get_assistant(name)
    runtime = getattr(request.app.state, "assistant_runtime", None)
    if runtime is None:
        raise AssistantRuntimeUnavailableError()
    return await converse(runtime, db, assistant, payload.message, payload.history)
