"""Pytest configuration and fixtures."""

import os
from typing import AsyncIterator, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app modules
os.environ["API_KEYS"] = "test-api-key"
os.environ["REQUIRE_API_KEY"] = "true"
os.environ["GOOGLE_API_KEY"] = ""

from app.services.llm_client import BaseLLMClient  # noqa: E402


class FakeLLMClient(BaseLLMClient):
    """LLM client that streams canned fragments."""

    def __init__(self, chunks: List[Optional[str]], error: Optional[Exception] = None):
        self.model = "fake-model"
        self.chunks = chunks
        self.error = error
        self.prompts: List[str] = []

    async def stream(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ) -> AsyncIterator[str]:
        self.prompts.append(prompt)
        for chunk in self.chunks:
            yield chunk
        if self.error:
            raise self.error


@pytest.fixture
def test_api_key() -> str:
    """Test API key."""
    return "test-api-key"


@pytest.fixture
def fake_llm_client():
    """Factory for fake LLM clients."""

    def _make(chunks: List[Optional[str]], error: Optional[Exception] = None) -> FakeLLMClient:
        return FakeLLMClient(chunks, error)

    return _make


@pytest.fixture
def settings_env() -> Generator[None, None, None]:
    """Clear cached settings around a test."""
    from app.core.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_app_client(settings_env):
    """Build a test client whose summarizer streams the given chunks."""
    from app.core.config import get_settings
    from app.main import create_app
    from app.services.summarizer import SummarizerService, get_summarizer

    clients = []

    def _make(
        chunks: List[Optional[str]] = (),
        error: Optional[Exception] = None,
    ) -> TestClient:
        get_settings.cache_clear()
        app = create_app()
        llm_client = FakeLLMClient(list(chunks), error)
        app.dependency_overrides[get_summarizer] = lambda: SummarizerService(
            settings=get_settings(), client=llm_client
        )
        client = TestClient(app)
        client.llm_client = llm_client
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def app_client(make_app_client) -> TestClient:
    """Test client answering with a plain abstract."""
    return make_app_client(["**Summary:** Revenue ", "grew 10%."])
