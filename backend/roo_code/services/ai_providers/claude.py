"""
Anthropic Claude provider via the Messages REST API.
"""

from typing import Any, List, Optional

from roo_code.services.ai_providers._response import extract_text, optional_int, reported_model
from roo_code.services.ai_providers.types import (
    AIResponse,
    ModelConfig,
    ProviderId,
    ProviderRequest,
    TokenUsage,
)
from roo_code.services.prompts import with_persona

ANTHROPIC_VERSION = "2023-06-01"


class ClaudeAdapter:
    """Claude mapping. The persona is prepended to the single user message."""

    provider_id = ProviderId.CLAUDE
    display_name = "Claude"

    messages_url = "https://api.anthropic.com/v1/messages"

    def build_request(self, prompt: str, config: ModelConfig, api_key: str) -> ProviderRequest:
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "anthropic-version": ANTHROPIC_VERSION,
        }
        body = {
            "model": config.model,
            "max_tokens": config.max_tokens,
            "temperature": config.temperature,
            "messages": [
                {"role": "user", "content": with_persona(prompt)},
            ],
        }
        return ProviderRequest("POST", self.messages_url, headers, body)

    def parse_response(self, data: Any, config: ModelConfig) -> AIResponse:
        content = extract_text(data, ("content", 0, "text"), self.display_name)
        return AIResponse(
            content=content,
            model=reported_model(data, config.model),
            usage=_usage(data),
        )

    def build_models_request(self, api_key: str) -> Optional[ProviderRequest]:
        return None

    def parse_models(self, data: Any) -> List[str]:
        return []


def _usage(data: Any) -> Optional[TokenUsage]:
    usage = data.get("usage") if isinstance(data, dict) else None
    if not isinstance(usage, dict):
        return None
    prompt_tokens = optional_int(usage, "input_tokens")
    completion_tokens = optional_int(usage, "output_tokens")
    total = None
    if prompt_tokens is not None and completion_tokens is not None:
        total = prompt_tokens + completion_tokens
    return TokenUsage(
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        total_tokens=total,
    )
