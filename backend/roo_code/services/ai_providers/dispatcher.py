"""
Request dispatcher: one outbound HTTP call per request, no retries.

Given a prompt, a ModelConfig and a credential, the dispatcher picks the
provider's adapter, performs the wire request it builds and hands the decoded
body back to the adapter for extraction. The HTTP client is injectable so
tests can use ``httpx.MockTransport``.
"""

from typing import List, Optional, Union

import httpx

from roo_code.core.config import get_config
from roo_code.core.logging import get_logger
from roo_code.services.ai_providers.errors import (
    MalformedResponseError,
    MissingCredentialError,
    ProviderConnectionError,
    UpstreamError,
)
from roo_code.services.ai_providers.factory import get_provider_adapter
from roo_code.services.ai_providers.interface import ProviderAdapter
from roo_code.services.ai_providers.types import AIResponse, ModelConfig, ProviderId, ProviderRequest

logger = get_logger()


class RequestDispatcher:
    """Builds, performs and parses provider requests."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: Optional[float] = None):
        """
        Args:
            client: Optional shared client. When omitted a client is opened per call.
            timeout: Request timeout in seconds (default: assistant.request_timeout).
        """
        self._client = client
        self._timeout = timeout if timeout is not None else get_config().assistant.request_timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    async def send(self, prompt: str, config: ModelConfig, credential: Optional[str]) -> AIResponse:
        """
        Send a prompt and return the parsed response.

        Raises:
            UnsupportedProviderError: Unknown provider; raised before any network call.
            MissingCredentialError: Empty credential.
            UpstreamError: Non-2xx status (carries status code and body).
            MalformedResponseError: Body is not JSON or lacks the text field.
            ProviderConnectionError: Network failure or timeout.
        """
        adapter = get_provider_adapter(config.provider)
        if not credential:
            raise MissingCredentialError(adapter.provider_id.value)

        request = adapter.build_request(prompt, config, credential)
        logger.debug(
            "Sending %s request: model=%s, max_tokens=%s, prompt_chars=%d",
            adapter.provider_id.value,
            config.model,
            config.max_tokens,
            len(prompt),
        )
        response = await self._perform(adapter, request)
        self._raise_for_status(adapter, response)

        try:
            data = response.json()
        except ValueError:
            raise MalformedResponseError(adapter.display_name, "body", "not valid JSON") from None

        result = adapter.parse_response(data, config)
        logger.debug(
            "%s response received: chars=%d, total_tokens=%s",
            adapter.provider_id.value,
            len(result.content),
            result.usage.total_tokens if result.usage else None,
        )
        return result

    async def send_request(self, prompt: str, config: ModelConfig, credential: Optional[str]) -> str:
        """Send a prompt and return only the generated text."""
        response = await self.send(prompt, config, credential)
        return response.content

    async def list_models(self, provider: Union[str, ProviderId], credential: str) -> List[str]:
        """
        List model ids from the provider's models endpoint.

        Providers without a models endpoint return [] without a network call.
        Errors propagate; see roo_code.services.model_fetcher for the safe variant.
        """
        adapter = get_provider_adapter(provider)
        request = adapter.build_models_request(credential)
        if request is None:
            return []

        response = await self._perform(adapter, request)
        self._raise_for_status(adapter, response)
        try:
            data = response.json()
        except ValueError:
            raise MalformedResponseError(adapter.display_name, "body", "not valid JSON") from None
        return adapter.parse_models(data)

    async def _perform(self, adapter: ProviderAdapter, request: ProviderRequest) -> httpx.Response:
        try:
            if self._client is not None:
                return await self._send(self._client, request)
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                return await self._send(client, request)
        except httpx.TimeoutException as e:
            logger.warning("%s request timed out after %ss", adapter.provider_id.value, self._timeout)
            raise ProviderConnectionError(
                adapter.display_name, f"timed out after {self._timeout:g}s"
            ) from e
        except httpx.TransportError as e:
            logger.warning("%s transport error: %s", adapter.provider_id.value, type(e).__name__)
            raise ProviderConnectionError(adapter.display_name, str(e) or type(e).__name__) from e

    async def _send(self, client: httpx.AsyncClient, request: ProviderRequest) -> httpx.Response:
        return await client.request(
            request.method,
            request.url,
            headers=request.headers,
            json=request.json,
            timeout=self._timeout,
        )

    @staticmethod
    def _raise_for_status(adapter: ProviderAdapter, response: httpx.Response) -> None:
        if response.is_success:
            return
        logger.warning(
            "%s API returned HTTP %s: %s",
            adapter.provider_id.value,
            response.status_code,
            response.text[:500],
        )
        raise UpstreamError(adapter.display_name, response.status_code, response.text)
