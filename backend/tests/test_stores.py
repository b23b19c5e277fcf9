"""
Tests for the database-backed configuration and secret stores.
"""

import pytest

from roo_code.models import Settings, StoredSecret
from roo_code.services.credentials import CredentialResolver
from roo_code.services.ai_providers import ProviderId
from roo_code.services.stores import (
    ConfigurationStore,
    EncryptedSecretStore,
    SecretStore,
    SettingsConfigurationStore,
    StaticInputPrompt,
)


class TestSettingsConfigurationStore:
    def test_get_default_when_missing(self, db_session):
        store = SettingsConfigurationStore(db_session)
        assert store.get("defaultProvider") is None
        assert store.get("defaultProvider", "openrouter") == "openrouter"

    def test_set_get_delete(self, db_session):
        store = SettingsConfigurationStore(db_session)
        store.set("maxTokens", 1024)
        store.set("defaultProvider", "claude")

        assert store.get("maxTokens") == 1024
        assert store.snapshot() == {"maxTokens": 1024, "defaultProvider": "claude"}

        store.delete("maxTokens")
        assert store.get("maxTokens", 4000) == 4000

    def test_set_none_deletes(self, db_session):
        store = SettingsConfigurationStore(db_session)
        store.set("temperature", 0.1)
        store.set("temperature", None)
        assert "temperature" not in store.snapshot()

    def test_values_visible_to_new_session_store(self, db_session):
        SettingsConfigurationStore(db_session).set("autoSuggest", False)
        assert SettingsConfigurationStore(db_session).get("autoSuggest") is False
        assert db_session.query(Settings).count() == 1

    def test_satisfies_protocol(self, db_session):
        assert isinstance(SettingsConfigurationStore(db_session), ConfigurationStore)


class TestEncryptedSecretStore:
    def test_value_encrypted_at_rest(self, db_session):
        store = EncryptedSecretStore(db_session, password="test-password")
        store.set("openai.apiKey", "sk-secret-value")

        row = db_session.query(StoredSecret).filter(StoredSecret.key == "openai.apiKey").one()
        assert "sk-secret-value" not in row.value
        assert store.get("openai.apiKey") == "sk-secret-value"

    def test_overwrite_and_delete(self, db_session):
        store = EncryptedSecretStore(db_session, password="test-password")
        store.set("claude.apiKey", "sk-ant-1")
        store.set("claude.apiKey", "sk-ant-2")
        assert store.get("claude.apiKey") == "sk-ant-2"
        assert db_session.query(StoredSecret).count() == 1

        store.delete("claude.apiKey")
        assert store.get("claude.apiKey") is None

    def test_wrong_password_reads_as_missing(self, db_session):
        EncryptedSecretStore(db_session, password="first").set("gemini.apiKey", "AIza-key")
        assert EncryptedSecretStore(db_session, password="second").get("gemini.apiKey") is None

    def test_satisfies_protocol(self, db_session):
        assert isinstance(EncryptedSecretStore(db_session), SecretStore)


class TestStaticInputPrompt:
    @pytest.mark.asyncio
    async def test_answers_and_records_labels(self):
        prompt = StaticInputPrompt("sk-typed")
        assert await prompt("Enter your OpenAI API key", masked=True) == "sk-typed"
        assert prompt.labels == ["Enter your OpenAI API key"]

    @pytest.mark.asyncio
    async def test_no_answer_means_cancelled(self):
        assert await StaticInputPrompt()("Enter your OpenAI API key") is None


@pytest.mark.asyncio
async def test_resolver_round_trip_over_database(db_session):
    """A prompted key is persisted and found again without prompting."""
    config_store = SettingsConfigurationStore(db_session)
    secret_store = EncryptedSecretStore(db_session, password="test-password")
    prompt = StaticInputPrompt("sk-or-typed")
    resolver = CredentialResolver(config_store, secret_store, prompt)

    assert await resolver.resolve(ProviderId.OPENROUTER) == "sk-or-typed"
    assert config_store.get("apiKey.openrouter") == "sk-or-typed"
    assert secret_store.get("openrouter.apiKey") == "sk-or-typed"

    again = CredentialResolver(config_store, secret_store, StaticInputPrompt(None))
    assert await again.resolve(ProviderId.OPENROUTER) == "sk-or-typed"
