"""Core types for the completion provider boundary.

All types use Pydantic models for validation and serialization.
snake_case naming throughout, with camelCase aliases for the JSON wire format.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# --- API and Provider identifiers ---

KnownApi = Literal["openai-completions"]

Api = str  # KnownApi or custom string

KnownProvider = Literal[
    "openai",
    "openrouter",
    "groq",
    "cerebras",
    "xai",
    "mistral",
    "deepseek",
]

Provider = str  # KnownProvider or custom string

# --- /api/generate wire format ---


class GenerateRequest(BaseModel):
    """Body of a completion request: the text the user has typed so far."""

    model_config = ConfigDict(populate_by_name=True)

    user_text: str | None = Field(default=None, alias="userText")


class GenerateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    completion: str


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str


# --- Model ---


class Model(BaseModel):
    """Model definition for the completion provider."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    api: str
    provider: str
    base_url: str = Field(alias="baseUrl")
    max_tokens: int = Field(default=0, alias="maxTokens")
    headers: dict[str, str] | None = None


# --- Request options ---


class CompletionOptions(BaseModel):
    """Options for a single completion call."""

    model_config = ConfigDict(populate_by_name=True)

    temperature: float | None = None
    max_tokens: int | None = Field(default=None, alias="maxTokens")
    api_key: str | None = Field(default=None, alias="apiKey")
    headers: dict[str, str] | None = None
