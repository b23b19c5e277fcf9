"""
Assistant operations behind the editor commands: explain, generate, refactor,
generate tests and chat.

Each operation builds a task prompt, sends it through the AI client and tells
the host where the answer goes (new markdown document or insert at cursor).
Chat replies are plain text. Dispatcher failures never escape: they become a
failed result carrying a user-facing message and the underlying diagnostic.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from roo_code.core.logging import get_logger
from roo_code.services.ai_client import AIClient
from roo_code.services.ai_providers import AssistantError
from roo_code.services.prompts import (
    EXPLAIN_CODE_PROMPT,
    GENERATE_CODE_PROMPT,
    GENERATE_TESTS_PROMPT,
    REFACTOR_CODE_PROMPT,
)

logger = get_logger()

TARGET_DOCUMENT = "document"
TARGET_INSERT = "insert"

CHAT_FALLBACK_MESSAGE = "Sorry, I encountered an error processing your request."

# Messages kept per chat panel (user and assistant turns both count)
MAX_CHAT_HISTORY = 100


@dataclass
class AssistantResult:
    """What the host should show, and where."""

    title: str
    content: str = ""
    language: str = "markdown"
    target: str = TARGET_DOCUMENT
    success: bool = True
    error: Optional[str] = None


@dataclass
class ChatMessage:
    role: str  # "user" | "assistant"
    content: str


def _require(value: Optional[str], warning: str) -> str:
    """Reject blank editor input with the warning the editor shows."""
    if not value or not value.strip():
        raise ValueError(warning)
    return value


class AssistantService:
    """Editor-facing assistant commands."""

    def __init__(self, client: AIClient):
        self._client = client

    async def _run(self, title: str, failure_label: str, prompt: str, target: str) -> AssistantResult:
        try:
            content = await self._client.send_request(prompt)
        except AssistantError as e:
            logger.warning("%s: %s", failure_label, e)
            return AssistantResult(
                title=title,
                target=target,
                success=False,
                error=f"{failure_label}: {e}",
            )
        return AssistantResult(title=title, content=content, target=target)

    async def explain_code(self, code: str) -> AssistantResult:
        code = _require(code, "Please select code to explain")
        return await self._run(
            "Code Explanation",
            "Failed to explain code",
            EXPLAIN_CODE_PROMPT.format(code=code),
            TARGET_DOCUMENT,
        )

    async def generate_code(self, request: str) -> AssistantResult:
        """Generated code is inserted at the cursor (a new document when no editor is open)."""
        request = _require(request, "Please describe what code you want to generate")
        return await self._run(
            "Generated Code",
            "Failed to generate code",
            GENERATE_CODE_PROMPT.format(request=request),
            TARGET_INSERT,
        )

    async def refactor_code(self, code: str, instructions: str) -> AssistantResult:
        code = _require(code, "Please select code to refactor")
        instructions = _require(instructions, "Please describe how to refactor this code")
        return await self._run(
            "Refactored Code",
            "Failed to refactor code",
            REFACTOR_CODE_PROMPT.format(instructions=instructions, code=code),
            TARGET_DOCUMENT,
        )

    async def generate_tests(self, code: str) -> AssistantResult:
        code = _require(code, "Please select code to generate tests for")
        return await self._run(
            "Generated Tests",
            "Failed to generate tests",
            GENERATE_TESTS_PROMPT.format(code=code),
            TARGET_DOCUMENT,
        )

    async def send_chat_message(self, message: str) -> str:
        """Send a free-text message; failures return a fixed apology instead of raising."""
        try:
            return await self._client.send_request(message)
        except AssistantError as e:
            logger.warning("Failed to send chat message: %s", e)
            return CHAT_FALLBACK_MESSAGE


@dataclass
class ChatSession:
    """Chat panel state. Only the newest message is sent upstream.

    The history keeps at most ``max_history`` messages; older ones are dropped
    in place so a list shared with the caller stays bounded too.
    """

    service: AssistantService
    history: List[ChatMessage] = field(default_factory=list)
    max_history: int = MAX_CHAT_HISTORY

    async def handle_user_message(self, message: str) -> ChatMessage:
        message = _require(message, "Please enter a message")
        self.history.append(ChatMessage(role="user", content=message))
        reply = ChatMessage(role="assistant", content=await self.service.send_chat_message(message))
        self.history.append(reply)
        if len(self.history) > self.max_history:
            del self.history[: len(self.history) - self.max_history]
        return reply

    def clear(self) -> None:
        self.history.clear()
