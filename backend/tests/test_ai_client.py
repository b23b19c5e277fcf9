"""
Tests for AIClient: send, test_connection and get_available_models.
"""

import httpx
import pytest

from conftest import DictStore, RecordingPrompt, json_response, openai_chat_payload
from roo_code.services.ai_client import AIClient
from roo_code.services.ai_providers import MissingCredentialError, ModelConfig, UnsupportedProviderError
from roo_code.services.configuration import ConfigurationManager
from roo_code.services.credentials import CredentialResolver
from roo_code.services.model_fetcher import fetch_models


@pytest.fixture
def build_client(make_dispatcher, assistant_defaults):
    """Factory: (handler, provider, stored key, prompt answer) -> (AIClient, recorder, prompt)."""

    def factory(handler, provider="openai", api_key="sk-test", answer=None):
        config_store = DictStore({"defaultProvider": provider, "defaultModel": "gpt-4"})
        if api_key:
            config_store.data[f"apiKey.{provider}"] = api_key
        prompt = RecordingPrompt(answer)
        resolver = CredentialResolver(config_store, DictStore(), prompt)
        configuration = ConfigurationManager(config_store, assistant_defaults)
        dispatcher, recorder = make_dispatcher(handler)
        return AIClient(resolver, configuration, dispatcher), recorder, prompt

    return factory


class TestSend:
    @pytest.mark.asyncio
    async def test_uses_current_configuration(self, build_client):
        client, recorder, _ = build_client(json_response(openai_chat_payload("Hi!")))

        assert await client.send_request("Hello") == "Hi!"
        body = recorder.last_json
        assert body["model"] == "gpt-4"
        assert body["max_tokens"] == 4000
        assert body["temperature"] == 0.7

    @pytest.mark.asyncio
    async def test_explicit_config_overrides(self, build_client):
        client, recorder, _ = build_client(json_response(openai_chat_payload("ok")))
        config = ModelConfig(provider="openai", model="gpt-3.5-turbo", max_tokens=50, temperature=0.0)

        await client.send("Hello", config)
        assert recorder.last_json["model"] == "gpt-3.5-turbo"
        assert recorder.last_json["max_tokens"] == 50

    @pytest.mark.asyncio
    async def test_missing_key_and_cancelled_prompt(self, build_client):
        client, recorder, prompt = build_client(json_response({}), api_key=None, answer=None)

        with pytest.raises(MissingCredentialError, match="openai"):
            await client.send("Hello")
        assert len(prompt.calls) == 1
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_prompted_key_is_used(self, build_client):
        client, recorder, _ = build_client(
            json_response(openai_chat_payload("ok")), api_key=None, answer="sk-typed"
        )

        await client.send("Hello")
        assert recorder.requests[0].headers["Authorization"] == "Bearer sk-typed"

    @pytest.mark.asyncio
    async def test_unsupported_provider_does_not_prompt(self, build_client):
        client, recorder, prompt = build_client(json_response({}), provider="mistral", answer="key")

        with pytest.raises(UnsupportedProviderError):
            await client.send("Hello")
        assert prompt.calls == []
        assert recorder.requests == []


class TestConnection:
    @pytest.mark.asyncio
    async def test_acknowledged(self, build_client):
        client, _, _ = build_client(json_response(openai_chat_payload("Connection Successful!")))
        assert await client.test_connection() is True

    @pytest.mark.asyncio
    async def test_unexpected_reply(self, build_client):
        client, _, _ = build_client(json_response(openai_chat_payload("Hello, how can I help?")))
        assert await client.test_connection() is False

    @pytest.mark.asyncio
    async def test_upstream_error_returns_false(self, build_client):
        client, _, _ = build_client(lambda request: httpx.Response(500, text="boom"))
        assert await client.test_connection() is False

    @pytest.mark.asyncio
    async def test_missing_key_returns_false(self, build_client):
        client, _, _ = build_client(json_response({}), api_key=None)
        assert await client.test_connection() is False


class TestAvailableModels:
    @pytest.mark.asyncio
    async def test_openai_keeps_gpt_models(self, build_client):
        payload = {"data": [{"id": "gpt-4o"}, {"id": "dall-e-3"}, {"id": "gpt-3.5-turbo"}]}
        client, recorder, _ = build_client(json_response(payload))

        assert await client.get_available_models() == ["gpt-4o", "gpt-3.5-turbo"]
        assert str(recorder.requests[0].url) == "https://api.openai.com/v1/models"

    @pytest.mark.asyncio
    async def test_openrouter_keeps_all_models(self, build_client):
        payload = {"data": [{"id": "anthropic/claude-3-haiku"}, {"id": "mistralai/mixtral"}]}
        client, recorder, _ = build_client(json_response(payload), provider="openrouter", api_key="sk-or-x")

        assert await client.get_available_models() == ["anthropic/claude-3-haiku", "mistralai/mixtral"]
        assert recorder.requests[0].url.host == "openrouter.ai"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("provider", ["claude", "gemini"])
    async def test_other_providers_make_no_call(self, build_client, provider):
        client, recorder, _ = build_client(json_response({}), provider=provider)

        assert await client.get_available_models() == []
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_no_stored_key_never_prompts(self, build_client):
        client, recorder, prompt = build_client(json_response({}), api_key=None, answer="sk-typed")

        assert await client.get_available_models() == []
        assert prompt.calls == []
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_upstream_failure_degrades_to_empty(self, build_client):
        client, _, _ = build_client(lambda request: httpx.Response(401, text="bad key"))
        assert await client.get_available_models() == []

    @pytest.mark.asyncio
    async def test_unknown_provider(self, build_client):
        client, _, _ = build_client(json_response({}), provider="mistral")
        assert await client.get_available_models() == []


class TestFetchModels:
    @pytest.mark.asyncio
    async def test_without_key(self, make_dispatcher):
        dispatcher, recorder = make_dispatcher(json_response({}))
        assert await fetch_models("openai", None, dispatcher) == []
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_unexpected_body(self, make_dispatcher):
        dispatcher, _ = make_dispatcher(json_response({"models": []}))
        assert await fetch_models("openrouter", "sk-or-x", dispatcher) == []

    @pytest.mark.asyncio
    async def test_network_failure(self, make_dispatcher):
        def refuse(request):
            raise httpx.ConnectError("refused", request=request)

        dispatcher, _ = make_dispatcher(refuse)
        assert await fetch_models("openai", "sk-x", dispatcher) == []
