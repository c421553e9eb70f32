"""Policy settings for suggestion timing, filtering and acceptance.

Settings can be loaded from a JSON file using the camelCase keys below;
unknown keys are ignored and missing keys keep their defaults.

    {
        "debounceMs": 500,
        "minInputChars": 1,
        "echoTailWords": 4,
        "echoWindowWords": 8,
        "minEchoChars": 3,
        "progressiveSteps": 3,
        "progressiveDurationMs": 100
    }
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class CoordinatorSettings:
    """Controls when requests are issued and which results are surfaced."""

    debounce_seconds: float = 0.5
    min_input_chars: int = 1
    echo_tail_words: int = 4
    echo_window_words: int = 8
    min_echo_chars: int = 3

    def __post_init__(self) -> None:
        if self.debounce_seconds < 0:
            raise ValueError("debounce_seconds must be >= 0")
        if self.min_input_chars < 0:
            raise ValueError("min_input_chars must be >= 0")
        if self.echo_tail_words < 1 or self.echo_window_words < self.echo_tail_words:
            raise ValueError("echo windows must satisfy 1 <= echo_tail_words <= echo_window_words")


@dataclass
class AcceptanceSettings:
    """Controls the progressive reveal of an accepted suggestion."""

    progressive_steps: int = 3
    progressive_duration_seconds: float = 0.1

    def __post_init__(self) -> None:
        if self.progressive_steps < 1:
            raise ValueError("progressive_steps must be >= 1")
        if self.progressive_duration_seconds < 0:
            raise ValueError("progressive_duration_seconds must be >= 0")

    @property
    def step_interval(self) -> float:
        return self.progressive_duration_seconds / self.progressive_steps



def _convert(data: dict[str, Any], key: str, convert: Callable[[Any], Any]) -> Any:
    try:
        return convert(data[key])
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value for {key!r}: {data[key]!r}") from e


@dataclass
class GhostSettings:
    coordinator: CoordinatorSettings = field(default_factory=CoordinatorSettings)
    acceptance: AcceptanceSettings = field(default_factory=AcceptanceSettings)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GhostSettings:
        """Build settings from a camelCase dict (as stored in JSON)."""
        coordinator: dict[str, Any] = {}
        if "debounceMs" in data:
            coordinator["debounce_seconds"] = _convert(data, "debounceMs", float) / 1000
        if "minInputChars" in data:
            coordinator["min_input_chars"] = _convert(data, "minInputChars", int)
        if "echoTailWords" in data:
            coordinator["echo_tail_words"] = _convert(data, "echoTailWords", int)
        if "echoWindowWords" in data:
            coordinator["echo_window_words"] = _convert(data, "echoWindowWords", int)
        if "minEchoChars" in data:
            coordinator["min_echo_chars"] = _convert(data, "minEchoChars", int)

        acceptance: dict[str, Any] = {}
        if "progressiveSteps" in data:
            acceptance["progressive_steps"] = _convert(data, "progressiveSteps", int)
        if "progressiveDurationMs" in data:
            acceptance["progressive_duration_seconds"] = _convert(data, "progressiveDurationMs", float) / 1000

        return cls(
            coordinator=CoordinatorSettings(**coordinator),
            acceptance=AcceptanceSettings(**acceptance),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "debounceMs": round(self.coordinator.debounce_seconds * 1000),
            "minInputChars": self.coordinator.min_input_chars,
            "echoTailWords": self.coordinator.echo_tail_words,
            "echoWindowWords": self.coordinator.echo_window_words,
            "minEchoChars": self.coordinator.min_echo_chars,
            "progressiveSteps": self.acceptance.progressive_steps,
            "progressiveDurationMs": round(self.acceptance.progressive_duration_seconds * 1000),
        }


def load_settings(path: str | Path | None) -> GhostSettings:
    """Load settings from a JSON file. A missing path or file yields defaults."""
    if path is None:
        return GhostSettings()
    settings_path = Path(path)
    if not settings_path.exists():
        return GhostSettings()
    data = json.loads(settings_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a JSON object: {settings_path}")
    return GhostSettings.from_dict(data)
