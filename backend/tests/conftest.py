"""
Test configuration and fixtures
"""

import json
import os
import sys
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from roo_code.core.config import AssistantConfig  # noqa: E402
from roo_code.core.database import init_db  # noqa: E402
from roo_code.services.ai_providers import ModelConfig, RequestDispatcher  # noqa: E402


class DictStore:
    """In-memory ConfigurationStore/SecretStore that counts lookups."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data = dict(data or {})
        self.get_calls: List[str] = []

    def get(self, key, default=None):
        self.get_calls.append(key)
        value = self.data.get(key)
        return default if value is None else value

    def set(self, key, value):
        self.data[key] = value

    def delete(self, key):
        self.data.pop(key, None)


class RecordingPrompt:
    """InputPrompt returning a preset answer and recording each call."""

    def __init__(self, answer: Optional[str] = None):
        self.answer = answer
        self.calls: List[Dict[str, Any]] = []

    async def __call__(self, label, masked=False):
        self.calls.append({"label": label, "masked": masked})
        return self.answer


class RecordingTransport:
    """Builds an httpx.MockTransport and keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        self.transport = httpx.MockTransport(record)

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status_code, json=payload)


def openai_chat_payload(text: str, model: str = "gpt-4") -> Dict[str, Any]:
    return {
        "model": model,
        "choices": [{"message": {"role": "assistant", "content": text}}],
        "usage": {"prompt_tokens": 12, "completion_tokens": 5, "total_tokens": 17},
    }


@pytest.fixture
def make_dispatcher():
    """Factory: handler -> (RequestDispatcher, RecordingTransport)."""

    def factory(handler):
        recorder = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=recorder.transport)
        return RequestDispatcher(client=client, timeout=5.0), recorder

    return factory


@pytest.fixture
def assistant_defaults():
    """Assistant defaults independent of config.yaml and ROO_CODE_* variables."""
    return AssistantConfig.model_construct(
        default_provider="openrouter",
        default_model="anthropic/claude-3-sonnet-20240229",
        max_tokens=4000,
        temperature=0.7,
        request_timeout=45.0,
        sparc_integration=True,
        auto_suggest=True,
    )


@pytest.fixture
def openai_config():
    return ModelConfig(provider="openai", model="gpt-4", max_tokens=256, temperature=0.2)


@pytest.fixture
def db_engine():
    """In-memory SQLite shared across connections, with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)()
    yield session
    session.close()
