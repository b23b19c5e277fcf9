"""
FastAPI dependencies wiring the stores, resolver and clients per request.

The host's interactive API-key prompt is the optional ``X-Api-Key`` header:
when a request needs a key that is not stored yet, the header value is taken
as the user's answer and persisted.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from roo_code.core.database import get_db
from roo_code.services.ai_client import AIClient
from roo_code.services.ai_providers import (
    AssistantError,
    MissingCredentialError,
    RequestDispatcher,
    UnsupportedProviderError,
)
from roo_code.services.assistant import AssistantService
from roo_code.services.configuration import ConfigurationManager
from roo_code.services.credentials import CredentialResolver
from roo_code.services.sparc import SparcMethodology
from roo_code.services.stores import EncryptedSecretStore, SettingsConfigurationStore, StaticInputPrompt


def get_dispatcher() -> RequestDispatcher:
    return RequestDispatcher()


def get_config_store(db: Session = Depends(get_db)) -> SettingsConfigurationStore:
    return SettingsConfigurationStore(db)


def get_configuration_manager(
    store: SettingsConfigurationStore = Depends(get_config_store),
) -> ConfigurationManager:
    return ConfigurationManager(store)


def get_credential_resolver(
    db: Session = Depends(get_db),
    store: SettingsConfigurationStore = Depends(get_config_store),
    x_api_key: Optional[str] = Header(None),
) -> CredentialResolver:
    return CredentialResolver(store, EncryptedSecretStore(db), StaticInputPrompt(x_api_key))


def get_ai_client(
    resolver: CredentialResolver = Depends(get_credential_resolver),
    configuration: ConfigurationManager = Depends(get_configuration_manager),
    dispatcher: RequestDispatcher = Depends(get_dispatcher),
) -> AIClient:
    return AIClient(resolver, configuration, dispatcher)


def get_assistant_service(client: AIClient = Depends(get_ai_client)) -> AssistantService:
    return AssistantService(client)


def get_sparc_methodology(
    assistant: AssistantService = Depends(get_assistant_service),
) -> SparcMethodology:
    return SparcMethodology(assistant)


def to_http_exception(error: AssistantError) -> HTTPException:
    """Map adapter errors to HTTP status codes for the host."""
    if isinstance(error, UnsupportedProviderError):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, MissingCredentialError):
        return HTTPException(status_code=401, detail=str(error))
    return HTTPException(status_code=502, detail=str(error))
