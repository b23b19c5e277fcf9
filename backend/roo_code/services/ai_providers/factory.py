"""
Registry of provider adapters, one per ProviderId.
"""

from typing import Dict, List, Union

from roo_code.services.ai_providers.claude import ClaudeAdapter
from roo_code.services.ai_providers.gemini import GeminiAdapter
from roo_code.services.ai_providers.interface import ProviderAdapter
from roo_code.services.ai_providers.openai import OpenAIAdapter
from roo_code.services.ai_providers.openrouter import OpenRouterAdapter
from roo_code.services.ai_providers.types import ProviderId

_PROVIDER_ADAPTERS: Dict[ProviderId, ProviderAdapter] = {
    ProviderId.OPENROUTER: OpenRouterAdapter(),
    ProviderId.CLAUDE: ClaudeAdapter(),
    ProviderId.OPENAI: OpenAIAdapter(),
    ProviderId.GEMINI: GeminiAdapter(),
}

# A ProviderId without an adapter is a programming error; fail at import
_missing = set(ProviderId) - set(_PROVIDER_ADAPTERS)
if _missing:
    raise RuntimeError(f"No adapter registered for: {', '.join(sorted(p.value for p in _missing))}")


def get_provider_adapter(provider: Union[str, ProviderId]) -> ProviderAdapter:
    """
    Return the adapter for a provider name or id.

    Raises:
        UnsupportedProviderError: If the provider is unknown.
    """
    return _PROVIDER_ADAPTERS[ProviderId.parse(provider)]


def list_provider_names() -> List[str]:
    """Return registered provider names in ProviderId order."""
    return [provider.value for provider in ProviderId]
