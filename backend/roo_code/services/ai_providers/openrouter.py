"""
OpenRouter provider. OpenAI-compatible chat completions plus two identifying headers.
"""

from typing import Dict

from roo_code.services.ai_providers.openai import OpenAIAdapter
from roo_code.services.ai_providers.types import ProviderId

APP_REFERER = "https://github.com/sparc-ide/sparc-ide"
APP_TITLE = "SPARC IDE Roo Code"


class OpenRouterAdapter(OpenAIAdapter):
    """OpenRouter aggregator; model ids look like ``anthropic/claude-3-haiku-20240307``."""

    provider_id = ProviderId.OPENROUTER
    display_name = "OpenRouter"

    completions_url = "https://openrouter.ai/api/v1/chat/completions"
    models_url = "https://openrouter.ai/api/v1/models"

    def headers(self, api_key: str) -> Dict[str, str]:
        headers = super().headers(api_key)
        headers["HTTP-Referer"] = APP_REFERER
        headers["X-Title"] = APP_TITLE
        return headers

    def keep_model(self, model_id: str) -> bool:
        return True
