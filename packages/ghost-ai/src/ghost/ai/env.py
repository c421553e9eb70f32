"""Environment-based API key resolution for completion providers."""

from __future__ import annotations

import os


def get_env_api_key(provider: str) -> str | None:
    """Get API key for a provider from environment variables.

    Returns None for providers with no configured key.
    """
    env_map: dict[str, str] = {
        "openai": "OPENAI_API_KEY",
        "openrouter": "OPENROUTER_API_KEY",
        "groq": "GROQ_API_KEY",
        "cerebras": "CEREBRAS_API_KEY",
        "xai": "XAI_API_KEY",
        "mistral": "MISTRAL_API_KEY",
        "deepseek": "DEEPSEEK_API_KEY",
    }

    env_var = env_map.get(provider)
    return os.environ.get(env_var) if env_var else None
