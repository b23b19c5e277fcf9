"""
Settings API routes (provider/model selection, generation parameters, API keys).
"""

from fastapi import APIRouter, Depends, HTTPException

from roo_code.api.deps import get_ai_client, get_configuration_manager, get_credential_resolver
from roo_code.core.logging import get_logger
from roo_code.schemas import (
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
from roo_code.services.ai_client import AIClient
from roo_code.services.ai_providers import ProviderId, UnsupportedProviderError
from roo_code.services.configuration import (
    AUTO_SUGGEST_KEY,
    DEFAULT_PROVIDER_KEY,
    MAX_TOKENS_KEY,
    SPARC_INTEGRATION_KEY,
    TEMPERATURE_KEY,
    ConfigurationManager,
)
from roo_code.services.credentials import CredentialResolver, get_provider_display_name

logger = get_logger()

router = APIRouter(prefix="/settings", tags=["Settings"])

# Update-schema field -> configuration store key
_UPDATE_FIELDS = {
    "default_provider": DEFAULT_PROVIDER_KEY,
    "max_tokens": MAX_TOKENS_KEY,
    "temperature": TEMPERATURE_KEY,
    "sparc_integration": SPARC_INTEGRATION_KEY,
    "auto_suggest": AUTO_SUGGEST_KEY,
}


def _parse_provider(provider: str) -> ProviderId:
    try:
        return ProviderId.parse(provider)
    except UnsupportedProviderError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=AssistantConfigResponse)
async def get_settings(
    configuration: ConfigurationManager = Depends(get_configuration_manager),
    resolver: CredentialResolver = Depends(get_credential_resolver),
):
    """Effective configuration plus which providers have a stored key."""
    configured = set(resolver.list_configured())
    model_config = configuration.get_model_config()

    providers = [
        ProviderInfo(
            name=provider.value,
            display_name=get_provider_display_name(provider),
            is_configured=provider in configured,
            available_models=configuration.get_default_models(provider),
        )
        for provider in ProviderId
    ]

    return AssistantConfigResponse(
        default_provider=model_config.provider,
        default_model=model_config.model,
        max_tokens=model_config.max_tokens,
        temperature=model_config.temperature,
        sparc_integration=configuration.is_sparc_integration_enabled(),
        auto_suggest=configuration.is_auto_suggest_enabled(),
        providers=providers,
    )


@router.post("", response_model=AssistantConfigResponse)
async def update_settings(
    update: AssistantConfigUpdate,
    configuration: ConfigurationManager = Depends(get_configuration_manager),
    resolver: CredentialResolver = Depends(get_credential_resolver),
):
    """Update only the fields present in the request."""
    changes = update.model_dump(exclude_none=True)
    if "default_provider" in changes:
        changes["default_provider"] = _parse_provider(changes["default_provider"]).value

    model = changes.pop("default_model", None)
    if model is not None:
        try:
            configuration.switch_model(model)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    for field, value in changes.items():
        configuration.update_configuration(_UPDATE_FIELDS[field], value)

    logger.info("Updated assistant settings: %s", sorted(changes))
    return await get_settings(configuration, resolver)


@router.post("/provider", response_model=SwitchProviderResponse)
async def switch_provider(
    request: SwitchProviderRequest,
    configuration: ConfigurationManager = Depends(get_configuration_manager),
):
    provider = _parse_provider(request.provider)
    model = configuration.switch_provider(provider)
    return SwitchProviderResponse(
        provider=provider.value,
        model=model,
        message=f"Switched to {provider.value} with model {model}",
    )


@router.post("/model")
async def switch_model(
    request: SwitchModelRequest,
    configuration: ConfigurationManager = Depends(get_configuration_manager),
):
    try:
        configuration.switch_model(request.model)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    model = configuration.get_current_model()
    return {"model": model, "message": f"Switched to model {model}"}


@router.post("/reset")
async def reset_settings(configuration: ConfigurationManager = Depends(get_configuration_manager)):
    configuration.reset_to_defaults()
    return {"message": "Roo Code configuration reset to defaults"}


@router.get("/export")
async def export_settings(configuration: ConfigurationManager = Depends(get_configuration_manager)):
    """Configuration as a JSON document the host can open and save as a backup."""
    return configuration.export_configuration()


@router.get("/providers", response_model=ConfiguredProvidersResponse)
async def list_configured_providers(resolver: CredentialResolver = Depends(get_credential_resolver)):
    """Providers with a stored API key. Never prompts for missing keys."""
    return ConfiguredProvidersResponse(providers=[p.value for p in resolver.list_configured()])


@router.put("/api-keys/{provider}", response_model=ApiKeyResponse)
async def store_api_key(
    provider: str,
    update: ApiKeyUpdate,
    resolver: CredentialResolver = Depends(get_credential_resolver),
):
    """
    Store an API key. The format check is advisory: a key that does not look
    right is still stored, with a warning in the message.
    """
    provider_id = _parse_provider(provider)
    api_key = update.api_key.strip()
    if not api_key:
        raise HTTPException(status_code=400, detail="API key must not be empty")

    format_valid = resolver.validate_format(provider_id, api_key)
    resolver.store(provider_id, api_key)

    display_name = get_provider_display_name(provider_id)
    message = f"{display_name} API key stored"
    if not format_valid:
        message += " (warning: it does not look like a valid key for this provider)"
    return ApiKeyResponse(provider=provider_id.value, stored=True, format_valid=format_valid, message=message)


@router.delete("/api-keys/{provider}", response_model=ApiKeyResponse)
async def remove_api_key(provider: str, resolver: CredentialResolver = Depends(get_credential_resolver)):
    provider_id = _parse_provider(provider)
    resolver.remove(provider_id)
    return ApiKeyResponse(
        provider=provider_id.value,
        stored=False,
        format_valid=False,
        message=f"{get_provider_display_name(provider_id)} API key removed",
    )


@router.post("/test-connection", response_model=TestConnectionResponse)
async def test_connection(
    client: AIClient = Depends(get_ai_client),
    configuration: ConfigurationManager = Depends(get_configuration_manager),
):
    """Send a short test prompt to the current provider."""
    provider = configuration.get_current_provider()
    model = configuration.get_current_model()
    success = await client.test_connection()
    message = (
        f"Connection to {provider} successful"
        if success
        else f"Connection to {provider} failed. Check your API key and model."
    )
    return TestConnectionResponse(success=success, provider=provider, model=model, message=message)


@router.get("/models", response_model=ModelsResponse)
async def get_models(
    client: AIClient = Depends(get_ai_client),
    configuration: ConfigurationManager = Depends(get_configuration_manager),
):
    """Models offered by the current provider's API (openrouter and openai only)."""
    provider = configuration.get_current_provider()
    models = await client.get_available_models()
    return ModelsResponse(
        provider=provider,
        models=models,
        message=f"Found {len(models)} models" if models else "No models found",
    )
