"""Tests for environment-based API key resolution."""

import os
from unittest.mock import patch

from ghost.ai.env import get_env_api_key


def test_openrouter_key():
    with patch.dict(os.environ, {"OPENROUTER_API_KEY": "sk-or-123"}):
        assert get_env_api_key("openrouter") == "sk-or-123"


def test_openai_key():
    with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-openai"}, clear=False):
        assert get_env_api_key("openai") == "sk-openai"


def test_missing_key_returns_none():
    with patch.dict(os.environ, {}, clear=True):
        assert get_env_api_key("groq") is None


def test_unknown_provider():
    assert get_env_api_key("unknown-provider") is None
