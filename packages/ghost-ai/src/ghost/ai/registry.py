"""Completion implementations keyed by API name."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ghost.ai.types import CompletionOptions, Model

# (model, user_text, options) -> completion text
CompleteFunction = Callable[[Model, str, CompletionOptions | None], Awaitable[str]]


@dataclass(frozen=True)
class ApiProvider:
    """A completion API implementation, e.g. ``openai-completions``."""

    api: str
    complete: CompleteFunction


_providers: dict[str, ApiProvider] = {}


def register_api_provider(provider: ApiProvider) -> ApiProvider | None:
    """Register ``provider`` for its API. Returns the implementation it replaced."""
    previous = _providers.get(provider.api)
    _providers[provider.api] = provider
    return previous


def get_api_provider(api: str) -> ApiProvider | None:
    return _providers.get(api)


def unregister_api_provider(api: str) -> None:
    _providers.pop(api, None)
