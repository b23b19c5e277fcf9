"""
Multi-provider AI request adapter. Callers build a ModelConfig and use
RequestDispatcher.send_request(prompt, config, credential); provider-specific
wire details live in one adapter module per provider.
"""

from .dispatcher import RequestDispatcher
from .errors import (
    AssistantError,
    MalformedResponseError,
    MissingCredentialError,
    ProviderConnectionError,
    UnsupportedProviderError,
    UpstreamError,
)
from .factory import get_provider_adapter, list_provider_names
from .interface import ProviderAdapter
from .types import AIResponse, ModelConfig, ProviderId, ProviderRequest, TokenUsage

__all__ = [
    "AIResponse",
    "AssistantError",
    "MalformedResponseError",
    "MissingCredentialError",
    "ModelConfig",
    "ProviderAdapter",
    "ProviderConnectionError",
    "ProviderId",
    "ProviderRequest",
    "RequestDispatcher",
    "TokenUsage",
    "UnsupportedProviderError",
    "UpstreamError",
    "get_provider_adapter",
    "list_provider_names",
]
