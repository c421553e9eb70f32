"""Suggestion coordinator: debounce, request lifecycle, staleness and filtering.

Turns a stream of text changes into a stream of validated ghost suggestions.
Every mutation happens on the event loop thread; the only suspension points
are the debounce timer and the awaited provider call.

Lifecycle of one cycle::

    on_text_changed -> (debounce) -> issue request -> provider
        -> cancelled: ignored
        -> stale (newer request or text changed): ignored
        -> failure: status "error"
        -> success: filter -> ghost or nothing, status "idle"
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from ghost.core.filters import RepetitionMemory, filter_completion
from ghost.core.sanitize import sanitize_text
from ghost.core.scheduling import LoopScheduler, Scheduler, TimerHandle
from ghost.core.settings import CoordinatorSettings
from ghost.core.types import CompletionFn, GhostState, StateListener, SuggestionRequest

logger = logging.getLogger(__name__)


class SuggestionCoordinator:
    """Decides when to request completions and which results to surface."""

    def __init__(
        self,
        request_completion: CompletionFn,
        settings: CoordinatorSettings | None = None,
        *,
        scheduler: Scheduler | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._request_completion = request_completion
        self._settings = settings or CoordinatorSettings()
        self._scheduler = scheduler or LoopScheduler()
        self._clock = clock

        self._text: str = ""
        self._state = GhostState()
        self._memory = RepetitionMemory()
        self._listeners: list[StateListener] = []

        self._timer: TimerHandle | None = None
        self._generation = 0
        self._active: SuggestionRequest | None = None
        self._task: asyncio.Task[None] | None = None

    # --- Properties ---

    @property
    def state(self) -> GhostState:
        return self._state

    @property
    def text(self) -> str:
        return self._text

    @property
    def settings(self) -> CoordinatorSettings:
        return self._settings

    @property
    def memory(self) -> RepetitionMemory:
        return self._memory

    @property
    def active_request(self) -> SuggestionRequest | None:
        return self._active

    @property
    def debounce_pending(self) -> bool:
        return self._timer is not None

    # --- Subscriptions ---

    def subscribe(self, fn: StateListener) -> Any:
        """Subscribe to state changes. Returns an unsubscribe function."""
        self._listeners.append(fn)

        def unsubscribe() -> None:
            if fn in self._listeners:
                self._listeners.remove(fn)

        return unsubscribe

    def _set_state(self, **changes: Any) -> None:
        new_state = replace(self._state, **changes)
        if new_state == self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)

    # --- Inputs ---

    def on_text_changed(self, text: str) -> None:
        """Feed the current text. Restarts the debounce window."""
        self._text = text
        self._cancel_timer()

        if self._state.status == "error":
            self._set_state(status="idle", error=None)

        # a ghost is only valid for the exact text it was computed against
        ghost = self._state.ghost
        if ghost is not None and not ghost.matches(text):
            self._set_state(ghost=None)

        if len(text.strip()) < self._settings.min_input_chars:
            self._set_state(ghost=None, status="idle", error=None)
            return

        self._timer = self._scheduler.call_later(self._settings.debounce_seconds, self._on_debounce)

    def clear_ghost(self) -> None:
        """Drop the current ghost. In-flight requests are left to the staleness check."""
        self._set_state(ghost=None)

    def close(self) -> None:
        """Cancel the debounce timer and any in-flight request."""
        self._cancel_timer()
        self._cancel_active()
        if self._state.status == "pending":
            self._set_state(status="idle")

    # --- Request lifecycle ---

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _cancel_active(self) -> None:
        if self._active is not None:
            self._active.token.cancel()
            self._active = None
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def _on_debounce(self) -> None:
        self._timer = None
        self._issue(self._text)

    def _issue(self, source_text: str) -> None:
        # At most one request in flight: cancel before the next one starts.
        self._cancel_active()

        self._generation += 1
        request = SuggestionRequest(
            id=self._generation,
            source_text=source_text,
            issued_at=self._clock(),
        )
        self._active = request
        self._set_state(status="pending", error=None)
        logger.debug("Issuing completion request %d (%d chars)", request.id, len(source_text))
        self._task = asyncio.ensure_future(self._run(request))

    async def _run(self, request: SuggestionRequest) -> None:
        sanitized = sanitize_text(request.source_text)
        try:
            completion = await self._request_completion(sanitized, request.token)
        except asyncio.CancelledError:
            logger.debug("Completion request %d cancelled", request.id)
            return
        except Exception as err:
            self._on_failure(request, err)
            return
        if not isinstance(completion, str):
            self._on_failure(request, TypeError(f"Provider returned {type(completion).__name__}, expected str"))
            return
        self._on_success(request, sanitized, completion)

    def _is_stale(self, request: SuggestionRequest) -> bool:
        return (
            request is not self._active
            or request.token.cancelled
            or self._text != request.source_text
        )

    def _finish(self, request: SuggestionRequest) -> None:
        if self._active is request:
            self._active = None
            self._task = None

    def _on_failure(self, request: SuggestionRequest, err: Exception) -> None:
        if self._is_stale(request):
            logger.debug("Ignoring failure of stale request %d: %s", request.id, err)
            self._finish(request)
            return

        self._finish(request)
        logger.warning("Completion request %d failed: %s", request.id, err)
        self._set_state(status="error", error=str(err) or type(err).__name__)

    def _on_success(self, request: SuggestionRequest, sanitized: str, completion: str) -> None:
        if self._is_stale(request):
            logger.debug("Discarding stale completion for request %d", request.id)
            self._finish(request)
            return

        self._finish(request)
        suggestion = filter_completion(
            request.source_text,
            sanitized,
            completion,
            self._memory,
            self._settings,
        )
        if suggestion is None:
            self._set_state(ghost=None, status="idle", error=None)
            return

        self._memory.remember(suggestion.full_text)
        self._set_state(ghost=suggestion, status="idle", error=None)
