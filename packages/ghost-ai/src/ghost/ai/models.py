"""Model registry with the built-in completion models.

Every built-in model speaks the OpenAI chat-completions protocol; OpenRouter
is the default provider.
"""

from __future__ import annotations

from ghost.ai.types import Model

DEFAULT_PROVIDER = "openrouter"
DEFAULT_MODEL_ID = "deepseek/deepseek-chat-v3-0324:free"

_OPENROUTER_BASE = "https://openrouter.ai/api/v1"
_OPENAI_BASE = "https://api.openai.com/v1"
_GROQ_BASE = "https://api.groq.com/openai/v1"
_MISTRAL_BASE = "https://api.mistral.ai/v1"
_DEEPSEEK_BASE = "https://api.deepseek.com/v1"

_model_registry: dict[str, dict[str, Model]] = {}


def register_models(provider: str, models: dict[str, Model]) -> None:
    """Register models for a provider, replacing any previous set."""
    _model_registry[provider] = models


def get_model(provider: str, model_id: str) -> Model | None:
    """Get a model by provider and model ID."""
    provider_models = _model_registry.get(provider)
    if provider_models is None:
        return None
    return provider_models.get(model_id)


def get_providers() -> list[str]:
    return list(_model_registry.keys())


def get_models(provider: str) -> list[Model]:
    provider_models = _model_registry.get(provider)
    return list(provider_models.values()) if provider_models else []


def resolve_model(provider: str | None = None, model_id: str | None = None) -> Model:
    """Look up a model, falling back to the defaults.

    Raises ValueError when the provider/model pair is not registered.
    """
    provider = provider or DEFAULT_PROVIDER
    model_id = model_id or DEFAULT_MODEL_ID
    model = get_model(provider, model_id)
    if model is None:
        raise ValueError(f"Unknown model: {provider}/{model_id}")
    return model


def _m(id: str, name: str, provider: str, base_url: str, *, max_tokens: int = 256) -> Model:
    return Model(
        id=id,
        name=name,
        api="openai-completions",
        provider=provider,
        baseUrl=base_url,
        maxTokens=max_tokens,
    )


def register_builtin_models() -> None:
    """Register the built-in models for every known provider."""
    builtins: dict[str, list[tuple[str, str]]] = {
        "openrouter": [
            ("deepseek/deepseek-chat-v3-0324:free", "DeepSeek V3 0324 (free)"),
            ("meta-llama/llama-3.3-70b-instruct", "Llama 3.3 70B Instruct"),
            ("mistralai/mistral-small-3.2-24b-instruct", "Mistral Small 3.2"),
            ("openai/gpt-4.1-mini", "GPT-4.1 mini"),
        ],
        "openai": [
            ("gpt-4.1-mini", "GPT-4.1 mini"),
            ("gpt-4.1-nano", "GPT-4.1 nano"),
            ("gpt-4o-mini", "GPT-4o mini"),
        ],
        "groq": [
            ("llama-3.1-8b-instant", "Llama 3.1 8B Instant"),
            ("llama-3.3-70b-versatile", "Llama 3.3 70B Versatile"),
        ],
        "mistral": [
            ("mistral-small-latest", "Mistral Small (latest)"),
        ],
        "deepseek": [
            ("deepseek-chat", "DeepSeek Chat"),
        ],
    }
    bases = {
        "openrouter": _OPENROUTER_BASE,
        "openai": _OPENAI_BASE,
        "groq": _GROQ_BASE,
        "mistral": _MISTRAL_BASE,
        "deepseek": _DEEPSEEK_BASE,
    }
    for provider, entries in builtins.items():
        register_models(
            provider,
            {model_id: _m(model_id, name, provider, bases[provider]) for model_id, name in entries},
        )


register_builtin_models()
