"""
AI client: the operations exposed to the host.

Combines the configuration manager (which provider/model), the credential
resolver (which key) and the dispatcher (one HTTP call).
"""

from typing import List, Optional

from roo_code.core.logging import get_logger
from roo_code.services.ai_providers import (
    AIResponse,
    MissingCredentialError,
    ModelConfig,
    RequestDispatcher,
    UnsupportedProviderError,
    get_provider_adapter,
)
from roo_code.services.configuration import ConfigurationManager
from roo_code.services.credentials import CredentialResolver
from roo_code.services.model_fetcher import fetch_models
from roo_code.services.prompts import CONNECTION_ACK, CONNECTION_TEST_PROMPT

logger = get_logger()


class AIClient:
    """Sends prompts to the configured provider."""

    def __init__(
        self,
        resolver: CredentialResolver,
        configuration: ConfigurationManager,
        dispatcher: Optional[RequestDispatcher] = None,
    ):
        self._resolver = resolver
        self._configuration = configuration
        self._dispatcher = dispatcher or RequestDispatcher()

    async def send(self, prompt: str, config: Optional[ModelConfig] = None) -> AIResponse:
        """
        Send a prompt and return the full response (content, model, usage).

        Args:
            prompt: Prompt text.
            config: Request settings; defaults to the current configuration.

        Raises:
            UnsupportedProviderError: Before the credential is resolved.
            MissingCredentialError: If no key is stored and the user gave none.
            UpstreamError, MalformedResponseError, ProviderConnectionError: From the call.
        """
        config = config or self._configuration.get_model_config()
        adapter = get_provider_adapter(config.provider)

        api_key = await self._resolver.resolve(adapter.provider_id)
        if not api_key:
            raise MissingCredentialError(adapter.provider_id.value)

        return await self._dispatcher.send(prompt, config, api_key)

    async def send_request(self, prompt: str, config: Optional[ModelConfig] = None) -> str:
        """Send a prompt and return the generated text."""
        response = await self.send(prompt, config)
        return response.content

    async def test_connection(self) -> bool:
        """Send a short test prompt; True when the reply acknowledges it. Never raises."""
        try:
            response = await self.send_request(CONNECTION_TEST_PROMPT)
        except Exception as e:
            logger.warning("Connection test failed: %s", e)
            return False
        return CONNECTION_ACK in response.lower()

    async def get_available_models(self) -> List[str]:
        """
        Model ids offered by the current provider. Never raises.

        Uses only stored keys: listing models never prompts for one.
        """
        provider = self._configuration.get_current_provider()
        try:
            adapter = get_provider_adapter(provider)
        except UnsupportedProviderError as e:
            logger.warning("Cannot list models: %s", e)
            return []

        api_key = self._resolver.peek(adapter.provider_id)
        if not api_key:
            return []
        return await fetch_models(adapter.provider_id, api_key, self._dispatcher)
