"""
Errors raised by the AI request adapter.

Everything derives from AssistantError so callers can catch a single type;
the message is always human-readable and safe to show to the user.
"""

from typing import Optional


class AssistantError(Exception):
    """Base class for adapter failures."""

    pass


class MissingCredentialError(AssistantError):
    """No API key could be resolved for the provider."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"No API key configured for provider: {provider}")


class UnsupportedProviderError(AssistantError):
    """The provider id is not one of the known providers."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")


class UpstreamError(AssistantError):
    """The provider answered with a non-2xx status."""

    def __init__(self, provider_name: str, status_code: int, body: str):
        self.provider_name = provider_name
        self.status_code = status_code
        self.body = body
        super().__init__(f"{provider_name} API error: {status_code} - {body}")


class MalformedResponseError(AssistantError):
    """The response body did not contain text at the expected field path."""

    def __init__(self, provider_name: str, path: str, detail: Optional[str] = None):
        self.provider_name = provider_name
        self.path = path
        message = f"{provider_name} API returned an unexpected response: missing {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ProviderConnectionError(AssistantError):
    """The request never produced an HTTP response (DNS, refused, timeout)."""

    def __init__(self, provider_name: str, reason: str):
        self.provider_name = provider_name
        self.reason = reason
        super().__init__(f"Could not reach {provider_name} API: {reason}")
