"""
Google Gemini provider via the generateContent REST API.

The API key travels in the URL query string; there is no auth header.
"""

from typing import Any, List, Optional
from urllib.parse import quote

from roo_code.services.ai_providers._response import extract_text, optional_int, reported_model
from roo_code.services.ai_providers.types import (
    AIResponse,
    ModelConfig,
    ProviderId,
    ProviderRequest,
    TokenUsage,
)
from roo_code.services.prompts import with_persona

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiAdapter:
    """Gemini mapping. The persona is prepended to the only text part."""

    provider_id = ProviderId.GEMINI
    display_name = "Gemini"

    def generate_url(self, model: str, api_key: str) -> str:
        return f"{GEMINI_BASE_URL}/models/{model}:generateContent?key={quote(api_key, safe='')}"

    def build_request(self, prompt: str, config: ModelConfig, api_key: str) -> ProviderRequest:
        body = {
            "contents": [
                {"parts": [{"text": with_persona(prompt)}]},
            ],
            "generationConfig": {
                "temperature": config.temperature,
                "maxOutputTokens": config.max_tokens,
            },
        }
        return ProviderRequest(
            "POST",
            self.generate_url(config.model, api_key),
            {"Content-Type": "application/json"},
            body,
        )

    def parse_response(self, data: Any, config: ModelConfig) -> AIResponse:
        content = extract_text(
            data, ("candidates", 0, "content", "parts", 0, "text"), self.display_name
        )
        return AIResponse(
            content=content,
            model=reported_model(data, config.model, key="modelVersion"),
            usage=_usage(data),
        )

    def build_models_request(self, api_key: str) -> Optional[ProviderRequest]:
        return None

    def parse_models(self, data: Any) -> List[str]:
        return []


def _usage(data: Any) -> Optional[TokenUsage]:
    metadata = data.get("usageMetadata") if isinstance(data, dict) else None
    if not isinstance(metadata, dict):
        return None
    return TokenUsage(
        prompt_tokens=optional_int(metadata, "promptTokenCount"),
        completion_tokens=optional_int(metadata, "candidatesTokenCount"),
        total_tokens=optional_int(metadata, "totalTokenCount"),
    )
