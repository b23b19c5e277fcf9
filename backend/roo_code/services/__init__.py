"""
Services package initialization.
"""

from roo_code.services.ai_client import AIClient
from roo_code.services.assistant import AssistantResult, AssistantService, ChatMessage, ChatSession
from roo_code.services.configuration import ConfigurationManager
from roo_code.services.credentials import CredentialResolver
from roo_code.services.model_fetcher import fetch_models
from roo_code.services.sparc import EditorContext, PhaseNotFoundError, SparcMethodology, SparcPhase

__all__ = [
    "AIClient",
    "AssistantResult",
    "AssistantService",
    "ChatMessage",
    "ChatSession",
    "ConfigurationManager",
    "CredentialResolver",
    "EditorContext",
    "PhaseNotFoundError",
    "SparcMethodology",
    "SparcPhase",
    "fetch_models",
]
