"""
Assistant API routes: the editor commands (explain, generate, refactor,
generate tests), the chat panel and a raw completion call.
"""

from collections import OrderedDict
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from roo_code.api.deps import get_ai_client, get_assistant_service, to_http_exception
from roo_code.core.logging import get_logger
from roo_code.schemas import (
    AssistantResponse,
    ChatMessageSchema,
    ChatRequest,
    ChatResponse,
    CodeRequest,
    GenerateRequest,
    RefactorRequest,
)
from roo_code.services.ai_client import AIClient
from roo_code.services.ai_providers import AssistantError, ModelConfig, TokenUsage
from roo_code.services.assistant import AssistantService, ChatMessage, ChatSession

logger = get_logger()

router = APIRouter(prefix="/assistant", tags=["Assistant"])

# Chat panel histories by session id, least recently used first (UI state, not sent upstream)
MAX_CHAT_SESSIONS = 100
_chat_histories: "OrderedDict[str, List[ChatMessage]]" = OrderedDict()


def _session_history(session_id: str) -> List[ChatMessage]:
    """History for a session, evicting the least recently used sessions past the cap."""
    history = _chat_histories.get(session_id)
    if history is None:
        history = _chat_histories[session_id] = []
    _chat_histories.move_to_end(session_id)
    while len(_chat_histories) > MAX_CHAT_SESSIONS:
        evicted, _ = _chat_histories.popitem(last=False)
        logger.debug("Evicted chat session %s", evicted)
    return history


class CompletionRequest(BaseModel):
    """Raw prompt; ``config`` overrides the current provider/model settings."""

    prompt: str
    config: Optional[ModelConfig] = None


class CompletionResponse(BaseModel):
    content: str
    model: str
    usage: Optional[TokenUsage] = None


def _bad_request(e: ValueError) -> HTTPException:
    return HTTPException(status_code=400, detail=str(e))


@router.post("/complete", response_model=CompletionResponse)
async def complete(request: CompletionRequest, client: AIClient = Depends(get_ai_client)):
    """
    Send a prompt as-is. Errors are returned as HTTP errors:
    400 unsupported provider, 401 no API key, 502 provider failure.
    """
    try:
        response = await client.send(request.prompt, request.config)
    except AssistantError as e:
        raise to_http_exception(e)
    return CompletionResponse(content=response.content, model=response.model, usage=response.usage)


@router.post("/explain", response_model=AssistantResponse)
async def explain_code(request: CodeRequest, service: AssistantService = Depends(get_assistant_service)):
    try:
        return await service.explain_code(request.code)
    except ValueError as e:
        raise _bad_request(e)


@router.post("/generate", response_model=AssistantResponse)
async def generate_code(request: GenerateRequest, service: AssistantService = Depends(get_assistant_service)):
    try:
        return await service.generate_code(request.prompt)
    except ValueError as e:
        raise _bad_request(e)


@router.post("/refactor", response_model=AssistantResponse)
async def refactor_code(request: RefactorRequest, service: AssistantService = Depends(get_assistant_service)):
    try:
        return await service.refactor_code(request.code, request.instructions)
    except ValueError as e:
        raise _bad_request(e)


@router.post("/tests", response_model=AssistantResponse)
async def generate_tests(request: CodeRequest, service: AssistantService = Depends(get_assistant_service)):
    try:
        return await service.generate_tests(request.code)
    except ValueError as e:
        raise _bad_request(e)


@router.post("/chat", response_model=ChatResponse)
async def send_chat_message(request: ChatRequest, service: AssistantService = Depends(get_assistant_service)):
    """Send a chat panel message; the reply is an apology text when the provider fails."""
    history = _session_history(request.session_id)
    session = ChatSession(service=service, history=history)
    try:
        reply = await session.handle_user_message(request.message)
    except ValueError as e:
        raise _bad_request(e)

    return ChatResponse(
        session_id=request.session_id,
        reply=ChatMessageSchema.model_validate(reply),
        history=[ChatMessageSchema.model_validate(m) for m in session.history],
    )


@router.delete("/chat/{session_id}")
async def clear_chat(session_id: str):
    """Clear a chat panel's history."""
    _chat_histories.pop(session_id, None)
    logger.debug("Cleared chat session %s", session_id)
    return {"session_id": session_id, "cleared": True}
