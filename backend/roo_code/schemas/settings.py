"""
Pydantic schemas for Settings API.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ProviderInfo(BaseModel):
    """Information about an AI provider."""

    name: str
    display_name: str
    is_configured: bool
    available_models: List[str]


class AssistantConfigResponse(BaseModel):
    """Effective assistant configuration. API keys are never returned."""

    default_provider: str
    default_model: str
    max_tokens: int
    temperature: float
    sparc_integration: bool
    auto_suggest: bool
    providers: List[ProviderInfo]


class AssistantConfigUpdate(BaseModel):
    """Partial update; omitted fields keep their value."""

    default_provider: Optional[str] = None
    default_model: Optional[str] = Field(None, min_length=1)
    max_tokens: Optional[int] = Field(None, gt=0)
    temperature: Optional[float] = Field(None, ge=0.0, le=2.0)
    sparc_integration: Optional[bool] = None
    auto_suggest: Optional[bool] = None


class SwitchProviderRequest(BaseModel):
    provider: str = Field(..., description="Provider: openrouter, claude, openai, gemini")


class SwitchProviderResponse(BaseModel):
    provider: str
    model: str
    message: str


class SwitchModelRequest(BaseModel):
    model: str


class ApiKeyUpdate(BaseModel):
    api_key: str


class ApiKeyResponse(BaseModel):
    provider: str
    stored: bool
    format_valid: bool
    message: str


class ConfiguredProvidersResponse(BaseModel):
    providers: List[str]


class TestConnectionResponse(BaseModel):
    """Response from testing connection to the current provider."""

    success: bool
    provider: str
    model: str
    message: str


class ModelsResponse(BaseModel):
    provider: str
    models: List[str]
    message: str
