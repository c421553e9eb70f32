"""Ghost-text session: one editing surface wired to a coordinator and a controller.

This is the gesture interface a presentation layer talks to. User edits and
controller writes are kept apart: a user edit interrupts a running reveal
and drops the ghost, while text written by an accept path only starts the
next suggestion cycle.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ghost.core.acceptance import AcceptanceController
from ghost.core.coordinator import SuggestionCoordinator
from ghost.core.scheduling import Scheduler
from ghost.core.settings import GhostSettings
from ghost.core.surface import TextSurface
from ghost.core.types import CompletionFn, CoordinatorStatus


@dataclass(frozen=True)
class SessionState:
    """What the presentation layer renders."""

    text: str = ""
    ghost_text: str = ""
    status: CoordinatorStatus = "idle"
    revealing: bool = False
    error: str | None = None


SessionListener = Callable[[SessionState], None]


class GhostSession:
    def __init__(
        self,
        request_completion: CompletionFn,
        settings: GhostSettings | None = None,
        *,
        surface: TextSurface | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        settings = settings or GhostSettings()
        self._surface = surface or TextSurface()
        self._coordinator = SuggestionCoordinator(
            request_completion,
            settings.coordinator,
            scheduler=scheduler,
        )
        self._controller = AcceptanceController(
            self._surface,
            self._coordinator,
            settings.acceptance,
            scheduler=scheduler,
            on_text_applied=self._on_text_applied,
            on_reveal_done=self._emit,
        )
        self._listeners: list[SessionListener] = []
        self._last_state: SessionState | None = None
        self._unsubscribe = self._coordinator.subscribe(lambda _state: self._emit())

    # --- Properties ---

    @property
    def surface(self) -> TextSurface:
        return self._surface

    @property
    def coordinator(self) -> SuggestionCoordinator:
        return self._coordinator

    @property
    def controller(self) -> AcceptanceController:
        return self._controller

    @property
    def state(self) -> SessionState:
        ghost_state = self._coordinator.state
        ghost = ghost_state.ghost
        text = self._surface.text
        return SessionState(
            text=text,
            ghost_text=ghost.continuation if ghost is not None and ghost.matches(text) else "",
            status=ghost_state.status,
            revealing=self._controller.revealing,
            error=ghost_state.error,
        )

    # --- Subscriptions ---

    def subscribe(self, fn: SessionListener) -> Any:
        """Subscribe to session state changes. Returns an unsubscribe function."""
        self._listeners.append(fn)

        def unsubscribe() -> None:
            if fn in self._listeners:
                self._listeners.remove(fn)

        return unsubscribe

    def _emit(self) -> None:
        state = self.state
        if state == self._last_state:
            return
        self._last_state = state
        for listener in list(self._listeners):
            listener(state)

    # --- Gestures ---

    def on_text_changed(self, text: str) -> None:
        """A user edit."""
        self._controller.cancel_reveal()
        self._coordinator.clear_ghost()
        self._surface.set_text(text)
        self._coordinator.on_text_changed(text)
        self._emit()

    def on_accept_instant(self) -> bool:
        applied = self._controller.accept_instant()
        self._emit()
        return applied

    def on_accept_progressive(self) -> bool:
        applied = self._controller.accept_progressive()
        self._emit()
        return applied

    def on_dismiss(self) -> bool:
        dismissed = self._controller.dismiss()
        self._emit()
        return dismissed

    def close(self) -> None:
        self._controller.cancel_reveal()
        self._coordinator.close()
        self._unsubscribe()
        self._listeners.clear()

    # --- Internal ---

    def _on_text_applied(self, text: str) -> None:
        self._coordinator.on_text_changed(text)
        self._emit()
