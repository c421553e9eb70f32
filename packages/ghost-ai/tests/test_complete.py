"""Tests for completion dispatch and the OpenAI-compatible provider."""

from __future__ import annotations

import asyncio
import os
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from ghost.ai.complete import complete_text, create_completion_fn
from ghost.ai.errors import ProviderError
from ghost.ai.providers import openai_completions, register_builtin_providers
from ghost.ai.registry import ApiProvider, register_api_provider, unregister_api_provider
from ghost.ai.types import CompletionOptions, Model


def make_model(api: str = "openai-completions", provider: str = "openrouter") -> Model:
    return Model(
        id="test-model",
        name="Test",
        api=api,
        provider=provider,
        baseUrl="https://example.invalid/v1",
        maxTokens=64,
    )


class _FakeCompletions:
    def __init__(self, content: str | None) -> None:
        self.content = content
        self.params: dict = {}

    async def create(self, **params):
        self.params = params
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class _FakeClient:
    def __init__(self, content: str | None) -> None:
        self.chat = SimpleNamespace(completions=_FakeCompletions(content))

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return None


def setup_function():
    register_builtin_providers()


class TestDispatch:
    async def test_unknown_api_raises(self):
        with pytest.raises(ValueError, match="No API provider"):
            await complete_text(make_model(api="nope"), "Hello")

    async def test_dispatches_to_registered_provider(self):
        async def fake_complete(model, text, options):
            return f"{text}!"

        register_api_provider(ApiProvider(api="fake-api", complete=fake_complete))
        try:
            assert await complete_text(make_model(api="fake-api"), "Hi") == "Hi!"
        finally:
            unregister_api_provider("fake-api")

    async def test_completion_fn_checks_token(self):
        fn = create_completion_fn(make_model())
        token = SimpleNamespace(cancelled=True)
        with pytest.raises(asyncio.CancelledError):
            await fn("Hello", token)


class TestOpenAICompletions:
    async def test_missing_api_key(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ProviderError, match="No API key"):
                await openai_completions.complete_openai_completions(make_model(), "Hello")

    async def test_returns_cleaned_content(self):
        fake = _FakeClient('"dear friend"\n')
        with patch.object(openai_completions, "_create_client", return_value=fake):
            result = await openai_completions.complete_openai_completions(
                make_model(), "Hello", CompletionOptions(api_key="sk-test", temperature=0.2)
            )
        assert result == "dear friend"
        params = fake.chat.completions.params
        assert params["model"] == "test-model"
        assert params["max_tokens"] == 64
        assert params["temperature"] == 0.2
        assert params["messages"][0]["role"] == "system"
        assert "Hello" in params["messages"][1]["content"]

    async def test_empty_content_is_empty_completion(self):
        fake = _FakeClient(None)
        with patch.object(openai_completions, "_create_client", return_value=fake):
            result = await openai_completions.complete_openai_completions(
                make_model(), "Hello", CompletionOptions(api_key="sk-test")
            )
        assert result == ""

    def test_build_params_prefers_option_max_tokens(self):
        params = openai_completions._build_params(make_model(), "x", CompletionOptions(max_tokens=10))
        assert params["max_tokens"] == 10
        assert params["stream"] is False
        assert "temperature" not in params
