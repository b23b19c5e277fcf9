"""
Common interface for all AI provider adapters.

An adapter is a pure request-builder / response-parser pair: it never performs
I/O. The dispatcher performs the single HTTP call. Adding a provider means
adding a ProviderId member and one adapter registered in factory.py.
"""

from typing import Any, List, Optional, Protocol, runtime_checkable

from roo_code.services.ai_providers.types import AIResponse, ModelConfig, ProviderId, ProviderRequest


@runtime_checkable
class ProviderAdapter(Protocol):
    """Wire mapping for one provider."""

    provider_id: ProviderId
    display_name: str

    def build_request(self, prompt: str, config: ModelConfig, api_key: str) -> ProviderRequest:
        """
        Build the completion request for a prompt.

        Args:
            prompt: User prompt; the persona instruction is added by the adapter.
            config: Model and generation parameters.
            api_key: Provider credential.

        Returns:
            The wire request (method, url, headers, JSON body).
        """
        ...

    def parse_response(self, data: Any, config: ModelConfig) -> AIResponse:
        """
        Extract the generated text (and usage, when present) from a decoded body.

        Raises:
            MalformedResponseError: If the text is not at the expected path.
        """
        ...

    def build_models_request(self, api_key: str) -> Optional[ProviderRequest]:
        """Request listing the provider's models, or None when not supported."""
        ...

    def parse_models(self, data: Any) -> List[str]:
        """Extract model ids from a decoded models response."""
        ...
