"""OpenAI Chat Completions provider.

Covers OpenAI and the OpenAI-compatible endpoints (OpenRouter, Groq, Mistral,
DeepSeek, ...) through the model's ``base_url``. Completions are short, so
the call is made without streaming.
"""

from __future__ import annotations

from typing import Any

from ghost.ai.env import get_env_api_key
from ghost.ai.errors import ProviderError
from ghost.ai.prompt import build_messages, clean_completion
from ghost.ai.types import CompletionOptions, Model


async def complete_openai_completions(
    model: Model,
    user_text: str,
    options: CompletionOptions | None = None,
) -> str:
    """Request a single completion of ``user_text`` from a chat-completions API."""
    import openai

    api_key = (options and options.api_key) or get_env_api_key(model.provider)
    if not api_key:
        raise ProviderError(f"No API key for provider: {model.provider}")

    params = _build_params(model, user_text, options)

    try:
        async with _create_client(model, api_key, options.headers if options else None) as client:
            response = await client.chat.completions.create(**params)
    except openai.APIStatusError as e:
        raise ProviderError(str(e), status_code=e.status_code) from e
    except openai.OpenAIError as e:
        raise ProviderError(str(e)) from e

    choices = getattr(response, "choices", None)
    if not choices:
        raise ProviderError("Provider returned no completion")

    content = getattr(choices[0].message, "content", None) or ""
    return clean_completion(content)


def _create_client(
    model: Model,
    api_key: str,
    options_headers: dict[str, str] | None = None,
) -> Any:
    import openai

    headers = dict(model.headers or {})
    if options_headers:
        headers.update(options_headers)

    return openai.AsyncOpenAI(
        api_key=api_key,
        base_url=model.base_url,
        default_headers=headers if headers else None,
    )


def _build_params(
    model: Model,
    user_text: str,
    options: CompletionOptions | None = None,
) -> dict[str, Any]:
    params: dict[str, Any] = {
        "model": model.id,
        "messages": build_messages(user_text),
        "stream": False,
    }

    max_tokens = (options and options.max_tokens) or model.max_tokens
    if max_tokens:
        params["max_tokens"] = max_tokens

    if options and options.temperature is not None:
        params["temperature"] = options.temperature

    return params
