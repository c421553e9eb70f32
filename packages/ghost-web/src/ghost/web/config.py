"""Configuration for the ghost-text server."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ghost.ai.models import DEFAULT_MODEL_ID, DEFAULT_PROVIDER


@dataclass
class Config:
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    provider: str = DEFAULT_PROVIDER
    model_id: str = DEFAULT_MODEL_ID
    settings_path: str | None = field(default_factory=lambda: str(Path.home() / ".ghost" / "settings.json"))
    static_dir: str = field(default_factory=lambda: str(Path(__file__).parent / "static"))
