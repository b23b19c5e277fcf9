"""
Credential resolver: finds the API key for a provider.

Resolution order, first hit wins:
1. plain configuration store, key ``apiKey.<provider>``
2. secure secret store, key ``<provider>.apiKey``
3. interactive prompt (masked); a non-blank answer is persisted to both stores

Keys are never cached here: every call reads the stores again.
"""

from typing import List, Optional, Union

from roo_code.core.logging import get_logger
from roo_code.services.ai_providers import ProviderId
from roo_code.services.stores import ConfigurationStore, InputPrompt, SecretStore

logger = get_logger()

PROVIDER_DISPLAY_NAMES = {
    ProviderId.OPENROUTER: "OpenRouter",
    ProviderId.CLAUDE: "Anthropic Claude",
    ProviderId.OPENAI: "OpenAI",
    ProviderId.GEMINI: "Google Gemini",
}

# Shallow syntactic checks only; a key that passes can still be rejected upstream
_KEY_PREFIXES = {
    ProviderId.OPENROUTER: "sk-or-",
    ProviderId.OPENAI: "sk-",
    ProviderId.CLAUDE: "sk-ant-",
}
_GEMINI_MIN_LENGTH = 20

ProviderName = Union[str, ProviderId]


def _provider_key(provider: ProviderName) -> str:
    """Store-key form of a provider: enum value, or the normalized raw name."""
    if isinstance(provider, ProviderId):
        return provider.value
    return (provider or "").strip().lower()


def config_key(provider: ProviderName) -> str:
    return f"apiKey.{_provider_key(provider)}"


def secret_key(provider: ProviderName) -> str:
    return f"{_provider_key(provider)}.apiKey"


def get_provider_display_name(provider: ProviderName) -> str:
    """Human-readable provider name; unknown providers are shown as given."""
    name = _provider_key(provider)
    for provider_id, display_name in PROVIDER_DISPLAY_NAMES.items():
        if provider_id.value == name:
            return display_name
    return str(provider)


class CredentialResolver:
    """Resolves, stores and removes provider API keys."""

    def __init__(
        self,
        config_store: ConfigurationStore,
        secret_store: SecretStore,
        input_prompt: Optional[InputPrompt] = None,
    ):
        """
        Args:
            config_store: Plain settings store (checked first).
            secret_store: Secure store (checked second).
            input_prompt: Asks the user for a key; None means non-interactive.
        """
        self._config_store = config_store
        self._secret_store = secret_store
        self._input_prompt = input_prompt

    def peek(self, provider: ProviderName) -> Optional[str]:
        """Look the key up in both stores without ever prompting."""
        api_key = self._config_store.get(config_key(provider))
        if api_key:
            return api_key

        api_key = self._secret_store.get(secret_key(provider))
        if api_key:
            return api_key
        return None

    async def resolve(self, provider: ProviderName) -> Optional[str]:
        """
        Return the provider's API key, prompting the user as a last resort.

        Returns None (not an error) when no key is available and the user
        cancelled or no prompt is configured.
        """
        api_key = self.peek(provider)
        if api_key:
            return api_key

        if self._input_prompt is None:
            return None

        label = f"Enter your {get_provider_display_name(provider)} API key"
        answer = await self._input_prompt(label, masked=True)
        answer = (answer or "").strip()
        if not answer:
            logger.info("API key prompt for %s cancelled", _provider_key(provider))
            return None

        self.store(provider, answer)
        return answer

    def store(self, provider: ProviderName, api_key: str) -> None:
        """Persist a key to the secure store and, for convenience, the plain store."""
        self._secret_store.set(secret_key(provider), api_key)
        self._config_store.set(config_key(provider), api_key)
        logger.info("Stored API key for %s", _provider_key(provider))

    def remove(self, provider: ProviderName) -> None:
        """Delete the key from both stores."""
        self._secret_store.delete(secret_key(provider))
        self._config_store.delete(config_key(provider))
        logger.info("Removed API key for %s", _provider_key(provider))

    @staticmethod
    def validate_format(provider: ProviderName, candidate: Optional[str]) -> bool:
        """
        Advisory check that a key looks right for the provider.

        Non-empty is required; known providers also need their key prefix
        (Gemini: longer than 20 characters). Unknown providers accept any
        non-empty key.
        """
        if not candidate or not candidate.strip():
            return False

        name = _provider_key(provider)
        if name == ProviderId.GEMINI.value:
            return len(candidate) > _GEMINI_MIN_LENGTH
        for provider_id, prefix in _KEY_PREFIXES.items():
            if provider_id.value == name:
                return candidate.startswith(prefix)
        return True

    def list_configured(self) -> List[ProviderId]:
        """Providers with a stored key, in ProviderId order. Never prompts."""
        return [provider for provider in ProviderId if self.peek(provider)]
