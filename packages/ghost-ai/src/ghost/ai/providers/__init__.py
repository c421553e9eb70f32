"""Register all built-in completion providers."""

from __future__ import annotations

from ghost.ai.providers.openai_completions import complete_openai_completions
from ghost.ai.registry import ApiProvider, register_api_provider


def register_builtin_providers() -> None:
    """Register all built-in completion API providers."""
    register_api_provider(
        ApiProvider(
            api="openai-completions",
            complete=complete_openai_completions,
        )
    )


__all__ = ["complete_openai_completions", "register_builtin_providers"]
