"""Top-level completion dispatch.

These are the entry points the suggestion coordinator and the web server use
to reach a model.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from ghost.ai.registry import get_api_provider
from ghost.ai.types import CompletionOptions, Model


class CancellationSignal(Protocol):
    @property
    def cancelled(self) -> bool: ...


CompletionFn = Callable[[str, Any], Awaitable[str]]


def _resolve_api_provider(api: str):
    provider = get_api_provider(api)
    if provider is None:
        raise ValueError(f"No API provider registered for api: {api}")
    return provider


async def complete_text(
    model: Model,
    user_text: str,
    options: CompletionOptions | None = None,
) -> str:
    """Complete ``user_text`` with the registered provider for the model's API."""
    provider = _resolve_api_provider(model.api)
    return await provider.complete(model, user_text, options)


def create_completion_fn(model: Model, options: CompletionOptions | None = None) -> CompletionFn:
    """Adapt :func:`complete_text` to the ``(text, token) -> completion`` contract.

    A token that is already cancelled short-circuits with ``CancelledError``;
    later cancellation arrives as task cancellation from the caller.
    """

    async def request_completion(text: str, token: CancellationSignal | None = None) -> str:
        if token is not None and token.cancelled:
            raise asyncio.CancelledError
        return await complete_text(model, text, options)

    return request_completion
