"""ghost-ai: completion providers for inline ghost-text suggestions."""

from ghost.ai.client import GenerateClient
from ghost.ai.complete import CompletionFn, complete_text, create_completion_fn
from ghost.ai.env import get_env_api_key
from ghost.ai.errors import ProviderError
from ghost.ai.models import (
    DEFAULT_MODEL_ID,
    DEFAULT_PROVIDER,
    get_model,
    get_models,
    get_providers,
    register_models,
    resolve_model,
)
from ghost.ai.providers import register_builtin_providers
from ghost.ai.registry import ApiProvider, get_api_provider, register_api_provider
from ghost.ai.types import (
    CompletionOptions,
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    Model,
)

register_builtin_providers()

__all__ = [
    "DEFAULT_MODEL_ID",
    "DEFAULT_PROVIDER",
    "ApiProvider",
    "CompletionFn",
    "CompletionOptions",
    "ErrorResponse",
    "GenerateClient",
    "GenerateRequest",
    "GenerateResponse",
    "Model",
    "ProviderError",
    "complete_text",
    "create_completion_fn",
    "get_api_provider",
    "get_env_api_key",
    "get_model",
    "get_models",
    "get_providers",
    "register_api_provider",
    "register_builtin_providers",
    "register_models",
    "resolve_model",
]
