"""Core types for the suggestion coordinator."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Literal

CoordinatorStatus = Literal["idle", "pending", "error"]


class CancellationToken:
    """Marks an in-flight completion request as obsolete.

    Backed by an ``asyncio.Event`` so providers can either poll ``cancelled``
    or ``await wait()``.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def wait(self) -> None:
        await self._event.wait()


@dataclass(frozen=True)
class SuggestionRequest:
    """One issued completion request, tagged with its generation number."""

    id: int
    source_text: str
    issued_at: float
    token: CancellationToken = field(default_factory=CancellationToken, compare=False)


@dataclass(frozen=True)
class GhostSuggestion:
    """A suggested continuation, valid only while the text equals ``base_text``."""

    base_text: str
    full_text: str

    @property
    def continuation(self) -> str:
        return self.full_text[len(self.base_text) :]

    def matches(self, text: str) -> bool:
        return text == self.base_text


@dataclass(frozen=True)
class GhostState:
    """Observable coordinator state."""

    ghost: GhostSuggestion | None = None
    status: CoordinatorStatus = "idle"
    error: str | None = None

    @property
    def ghost_text(self) -> str:
        return self.ghost.continuation if self.ghost else ""


# (sanitized_text, token) -> completion
CompletionFn = Callable[[str, CancellationToken], Awaitable[str]]

StateListener = Callable[[GhostState], None]
