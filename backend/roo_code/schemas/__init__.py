"""
Schemas package initialization.
"""

from roo_code.schemas.assistant import (
    AssistantResponse,
    ChatMessageSchema,
    ChatRequest,
    ChatResponse,
    CodeRequest,
    GenerateRequest,
    RefactorRequest,
    SparcAssistanceRequest,
    SparcPhaseInfo,
    SparcReviewRequest,
)
from roo_code.schemas.settings import (
    ApiKeyResponse,
    ApiKeyUpdate,
    AssistantConfigResponse,
    AssistantConfigUpdate,
    ConfiguredProvidersResponse,
    ModelsResponse,
    ProviderInfo,
    SwitchModelRequest,
    SwitchProviderRequest,
    SwitchProviderResponse,
    TestConnectionResponse,
)

__all__ = [
    "ApiKeyResponse",
    "ApiKeyUpdate",
    "AssistantConfigResponse",
    "AssistantConfigUpdate",
    "AssistantResponse",
    "ChatMessageSchema",
    "ChatRequest",
    "ChatResponse",
    "CodeRequest",
    "ConfiguredProvidersResponse",
    "GenerateRequest",
    "ModelsResponse",
    "ProviderInfo",
    "RefactorRequest",
    "SparcAssistanceRequest",
    "SparcPhaseInfo",
    "SparcReviewRequest",
    "SwitchModelRequest",
    "SwitchProviderRequest",
    "SwitchProviderResponse",
    "TestConnectionResponse",
]
