"""
Assistant configuration: current provider/model, generation parameters and
feature flags, read from the plain configuration store with defaults from
config.yaml.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from roo_code.core.config import AssistantConfig, get_config
from roo_code.core.logging import get_logger
from roo_code.services.ai_providers import ModelConfig, ProviderId, UnsupportedProviderError
from roo_code.services.stores import ConfigurationStore

logger = get_logger()

# Model catalogue offered when switching provider or model
DEFAULT_MODELS: Dict[ProviderId, List[str]] = {
    ProviderId.OPENROUTER: [
        "anthropic/claude-3-sonnet-20240229",
        "anthropic/claude-3-haiku-20240307",
        "openai/gpt-4-turbo-preview",
        "openai/gpt-3.5-turbo",
        "google/gemini-pro",
    ],
    ProviderId.CLAUDE: [
        "claude-3-sonnet-20240229",
        "claude-3-haiku-20240307",
        "claude-2.1",
    ],
    ProviderId.OPENAI: [
        "gpt-4-turbo-preview",
        "gpt-4",
        "gpt-3.5-turbo",
    ],
    ProviderId.GEMINI: [
        "gemini-pro",
        "gemini-pro-vision",
    ],
}

DEFAULT_PROVIDER_KEY = "defaultProvider"
DEFAULT_MODEL_KEY = "defaultModel"
MAX_TOKENS_KEY = "maxTokens"
TEMPERATURE_KEY = "temperature"
SPARC_INTEGRATION_KEY = "sparcIntegration"
AUTO_SUGGEST_KEY = "autoSuggest"

# Keys owned by the configuration manager (API keys are managed by the resolver)
CONFIGURATION_KEYS = [
    DEFAULT_PROVIDER_KEY,
    DEFAULT_MODEL_KEY,
    MAX_TOKENS_KEY,
    TEMPERATURE_KEY,
    SPARC_INTEGRATION_KEY,
    AUTO_SUGGEST_KEY,
]


class ConfigurationManager:
    """Reads and updates assistant settings in a ConfigurationStore."""

    def __init__(self, store: ConfigurationStore, defaults: Optional[AssistantConfig] = None):
        self._store = store
        self._defaults = defaults or get_config().assistant

    def _default_for(self, key: str) -> Any:
        return {
            DEFAULT_PROVIDER_KEY: self._defaults.default_provider,
            DEFAULT_MODEL_KEY: self._defaults.default_model,
            MAX_TOKENS_KEY: self._defaults.max_tokens,
            TEMPERATURE_KEY: self._defaults.temperature,
            SPARC_INTEGRATION_KEY: self._defaults.sparc_integration,
            AUTO_SUGGEST_KEY: self._defaults.auto_suggest,
        }.get(key)

    def get_current_provider(self) -> str:
        return self._store.get(DEFAULT_PROVIDER_KEY, self._defaults.default_provider)

    def get_current_model(self) -> str:
        return self._store.get(DEFAULT_MODEL_KEY, self._defaults.default_model)

    def get_model_config(self) -> ModelConfig:
        """
        Snapshot of the current provider, model and generation parameters.

        The provider is not validated here; an unknown one is rejected when the
        request is dispatched. Stored values that fail validation (an empty
        model, a negative token limit...) are replaced by their defaults.
        """
        values = {
            "provider": self.get_current_provider(),
            "model": self.get_current_model(),
            "max_tokens": self._store.get(MAX_TOKENS_KEY, self._defaults.max_tokens),
            "temperature": self._store.get(TEMPERATURE_KEY, self._defaults.temperature),
        }
        try:
            return ModelConfig(**values)
        except ValidationError as e:
            invalid = sorted({str(error["loc"][0]) for error in e.errors() if error["loc"]})
            logger.warning("Ignoring invalid stored settings %s; using defaults", invalid)

        defaults = {
            "provider": self._defaults.default_provider,
            "model": self._defaults.default_model,
            "max_tokens": self._defaults.max_tokens,
            "temperature": self._defaults.temperature,
        }
        for name in invalid:
            values[name] = defaults[name]
        return ModelConfig(**values)

    @staticmethod
    def get_default_models(provider: Union[str, ProviderId]) -> List[str]:
        """Catalogue models for a provider; empty for unknown providers."""
        try:
            return list(DEFAULT_MODELS[ProviderId.parse(provider)])
        except UnsupportedProviderError:
            return []

    def switch_provider(self, provider: Union[str, ProviderId]) -> str:
        """
        Make ``provider`` current and select its first catalogue model.

        Returns:
            The model now selected.

        Raises:
            UnsupportedProviderError: If the provider is unknown.
        """
        provider_id = ProviderId.parse(provider)
        model = DEFAULT_MODELS[provider_id][0]
        self._store.set(DEFAULT_PROVIDER_KEY, provider_id.value)
        self._store.set(DEFAULT_MODEL_KEY, model)
        logger.info("Switched to %s with model %s", provider_id.value, model)
        return model

    def switch_model(self, model: str) -> None:
        """Select a model for the current provider (any id the provider accepts)."""
        model = (model or "").strip()
        if not model:
            raise ValueError("Model must not be empty")
        self._store.set(DEFAULT_MODEL_KEY, model)
        logger.info("Switched to model %s", model)

    def is_sparc_integration_enabled(self) -> bool:
        return bool(self._store.get(SPARC_INTEGRATION_KEY, self._defaults.sparc_integration))

    def is_auto_suggest_enabled(self) -> bool:
        return bool(self._store.get(AUTO_SUGGEST_KEY, self._defaults.auto_suggest))

    def get_configuration(self, key: str, default: Any = None) -> Any:
        if default is None:
            default = self._default_for(key)
        return self._store.get(key, default)

    def update_configuration(self, key: str, value: Any) -> None:
        """Set a key; ``None`` removes it so the default applies again."""
        if value is None:
            self._store.delete(key)
        else:
            self._store.set(key, value)

    def reset_to_defaults(self) -> None:
        for key in CONFIGURATION_KEYS:
            self._store.delete(key)
        logger.info("Assistant configuration reset to defaults")

    def export_configuration(self) -> Dict[str, Any]:
        """Effective values of all configuration keys (API keys excluded)."""
        return {key: self.get_configuration(key) for key in CONFIGURATION_KEYS}
