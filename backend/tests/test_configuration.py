"""
Tests for ConfigurationManager and the YAML/environment config loader.
"""

import pytest

from conftest import DictStore
from roo_code.core.config import load_config
from roo_code.services.ai_providers import ProviderId, UnsupportedProviderError
from roo_code.services.configuration import DEFAULT_MODELS, ConfigurationManager


@pytest.fixture
def store():
    return DictStore()


@pytest.fixture
def manager(store, assistant_defaults):
    return ConfigurationManager(store, assistant_defaults)


class TestConfigurationManager:
    def test_defaults(self, manager):
        config = manager.get_model_config()
        assert config.provider == "openrouter"
        assert config.model == "anthropic/claude-3-sonnet-20240229"
        assert config.max_tokens == 4000
        assert config.temperature == 0.7
        assert manager.is_sparc_integration_enabled() is True
        assert manager.is_auto_suggest_enabled() is True

    def test_stored_values_override_defaults(self, manager, store):
        store.data.update({"defaultProvider": "gemini", "defaultModel": "gemini-pro", "maxTokens": 512})
        config = manager.get_model_config()
        assert (config.provider, config.model, config.max_tokens) == ("gemini", "gemini-pro", 512)

    def test_invalid_stored_values_fall_back_to_defaults(self, manager, store):
        store.data.update({"defaultModel": "", "maxTokens": 0, "temperature": 0.2})

        config = manager.get_model_config()

        assert config.model == "anthropic/claude-3-sonnet-20240229"
        assert config.max_tokens == 4000
        # Valid values are kept
        assert config.temperature == 0.2

    def test_switch_provider_selects_first_catalogue_model(self, manager, store):
        model = manager.switch_provider("claude")

        assert model == "claude-3-sonnet-20240229"
        assert store.data["defaultProvider"] == "claude"
        assert manager.get_current_model() == model

    def test_switch_to_unknown_provider(self, manager, store):
        with pytest.raises(UnsupportedProviderError):
            manager.switch_provider("mistral")
        assert "defaultProvider" not in store.data

    def test_switch_model(self, manager):
        manager.switch_model("openai/gpt-3.5-turbo")
        assert manager.get_current_model() == "openai/gpt-3.5-turbo"

        with pytest.raises(ValueError):
            manager.switch_model("  ")

    def test_default_models(self):
        assert ConfigurationManager.get_default_models(ProviderId.GEMINI) == ["gemini-pro", "gemini-pro-vision"]
        assert ConfigurationManager.get_default_models("unknown") == []
        # Returned lists are copies
        ConfigurationManager.get_default_models("openai").append("x")
        assert "x" not in DEFAULT_MODELS[ProviderId.OPENAI]

    def test_update_reset_and_export(self, manager, store):
        manager.update_configuration("temperature", 0.1)
        manager.update_configuration("sparcIntegration", False)
        store.data["apiKey.openai"] = "sk-keep"
        assert manager.get_configuration("temperature") == 0.1
        assert manager.is_sparc_integration_enabled() is False

        manager.reset_to_defaults()

        assert manager.get_configuration("temperature") == 0.7
        assert store.data == {"apiKey.openai": "sk-keep"}
        exported = manager.export_configuration()
        assert exported["defaultProvider"] == "openrouter"
        assert "apiKey.openai" not in exported

    def test_update_with_none_restores_default(self, manager):
        manager.update_configuration("maxTokens", 10)
        manager.update_configuration("maxTokens", None)
        assert manager.get_configuration("maxTokens") == 4000


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "absent.yaml"))
        assert config.server.port == 8091
        assert config.assistant.request_timeout == 45.0

    def test_yaml_values(self, tmp_path, monkeypatch):
        monkeypatch.delenv("ROO_CODE_REQUEST_TIMEOUT", raising=False)
        monkeypatch.delenv("ROO_CODE_DEFAULT_PROVIDER", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(
            "server:\n  port: 9000\nassistant:\n  default_provider: claude\n  request_timeout: 30\n",
            encoding="utf-8",
        )
        config = load_config(str(path))
        assert config.server.port == 9000
        assert config.assistant.default_provider == "claude"
        assert config.assistant.request_timeout == 30.0

    def test_environment_beats_yaml(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ROO_CODE_REQUEST_TIMEOUT", "60")
        path = tmp_path / "config.yaml"
        path.write_text("assistant:\n  request_timeout: 30\n", encoding="utf-8")
        assert load_config(str(path)).assistant.request_timeout == 60.0
