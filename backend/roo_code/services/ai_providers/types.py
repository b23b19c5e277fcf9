"""
Value types shared by the provider adapters, the dispatcher and the resolver.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from roo_code.services.ai_providers.errors import UnsupportedProviderError


class ProviderId(str, Enum):
    """Known AI providers. Order is the order used when listing providers."""

    OPENROUTER = "openrouter"
    CLAUDE = "claude"
    OPENAI = "openai"
    GEMINI = "gemini"

    @classmethod
    def parse(cls, value: Union[str, "ProviderId"]) -> "ProviderId":
        """
        Normalize a provider name to a ProviderId.

        Raises:
            UnsupportedProviderError: If the name is not a known provider.
        """
        if isinstance(value, cls):
            return value
        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedProviderError(str(value)) from None


class ModelConfig(BaseModel):
    """Per-request snapshot of provider, model and generation parameters."""

    model_config = ConfigDict(frozen=True)

    # Plain string: unknown providers are rejected at dispatch, not here
    provider: str
    model: str = Field(..., min_length=1)
    max_tokens: int = Field(4000, gt=0)
    temperature: float = Field(0.7, ge=0.0, le=2.0)


class TokenUsage(BaseModel):
    """Best-effort token accounting reported by the provider."""

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class AIResponse(BaseModel):
    """Uniform result of one completion call."""

    content: str
    model: str
    usage: Optional[TokenUsage] = None


@dataclass(frozen=True)
class ProviderRequest:
    """A fully built wire request, ready to be performed by the dispatcher."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    json: Optional[Dict[str, Any]] = None
