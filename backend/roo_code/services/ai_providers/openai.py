"""
OpenAI provider (GPT models) via the Chat Completions REST API.
"""

from typing import Any, Dict, List, Optional

from roo_code.services.ai_providers._response import extract_text, optional_int, reported_model
from roo_code.services.ai_providers.types import (
    AIResponse,
    ModelConfig,
    ProviderId,
    ProviderRequest,
    TokenUsage,
)
from roo_code.services.prompts import PERSONA_INSTRUCTION


class OpenAIAdapter:
    """OpenAI chat-completions mapping. Also the base for OpenAI-compatible providers."""

    provider_id = ProviderId.OPENAI
    display_name = "OpenAI"

    completions_url = "https://api.openai.com/v1/chat/completions"
    models_url = "https://api.openai.com/v1/models"

    def headers(self, api_key: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def build_request(self, prompt: str, config: ModelConfig, api_key: str) -> ProviderRequest:
        body = {
            "model": config.model,
            "messages": [
                {"role": "system", "content": PERSONA_INSTRUCTION},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": config.max_tokens,
            "temperature": config.temperature,
        }
        return ProviderRequest("POST", self.completions_url, self.headers(api_key), body)

    def parse_response(self, data: Any, config: ModelConfig) -> AIResponse:
        content = extract_text(data, ("choices", 0, "message", "content"), self.display_name)
        return AIResponse(
            content=content,
            model=reported_model(data, config.model),
            usage=_chat_usage(data),
        )

    def build_models_request(self, api_key: str) -> Optional[ProviderRequest]:
        return ProviderRequest("GET", self.models_url, {"Authorization": f"Bearer {api_key}"})

    def parse_models(self, data: Any) -> List[str]:
        return [model_id for model_id in _model_ids(data) if self.keep_model(model_id)]

    def keep_model(self, model_id: str) -> bool:
        # The models endpoint also lists embeddings, audio, moderation... keep chat models
        return "gpt" in model_id


def _chat_usage(data: Any) -> Optional[TokenUsage]:
    """Usage block shared by OpenAI-compatible chat-completions responses."""
    usage = data.get("usage") if isinstance(data, dict) else None
    if not isinstance(usage, dict):
        return None
    return TokenUsage(
        prompt_tokens=optional_int(usage, "prompt_tokens"),
        completion_tokens=optional_int(usage, "completion_tokens"),
        total_tokens=optional_int(usage, "total_tokens"),
    )


def _model_ids(data: Any) -> List[str]:
    """Ids from an OpenAI-style ``{"data": [{"id": ...}, ...]}`` listing."""
    raw = data.get("data") if isinstance(data, dict) else None
    if not isinstance(raw, list):
        raise ValueError("models response has no 'data' list")
    return [m["id"] for m in raw if isinstance(m, dict) and isinstance(m.get("id"), str)]
