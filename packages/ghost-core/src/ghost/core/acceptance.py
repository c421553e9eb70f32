"""Acceptance controller: merges an accepted ghost suggestion into the text.

Two accept paths exist: instant (one write) and progressive (a short
multi-step reveal). Both clear the ghost before the first write, so no ghost
ever refers to a base that the text has already moved past.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import TYPE_CHECKING

import grapheme as _grapheme

from ghost.core.scheduling import LoopScheduler, Scheduler, TimerHandle
from ghost.core.settings import AcceptanceSettings
from ghost.core.surface import TextSurface
from ghost.core.types import GhostSuggestion

if TYPE_CHECKING:
    from ghost.core.coordinator import SuggestionCoordinator

logger = logging.getLogger(__name__)


class ProgressiveReveal:
    """Cancellable step scheduler revealing ``target`` over ``steps`` ticks.

    Tick ``i`` shows ``ceil(n * i / steps)`` grapheme clusters of the
    continuation; the last tick writes ``target`` exactly. Ticks that would not
    change the text are skipped. Before each tick the reveal checks that the
    surface still holds the text it last wrote, and aborts if not.
    """

    def __init__(
        self,
        surface: TextSurface,
        base_text: str,
        target_text: str,
        *,
        steps: int,
        interval: float,
        scheduler: Scheduler,
        on_step: Callable[[str], None],
        on_done: Callable[[], None],
    ) -> None:
        self._surface = surface
        self._base = base_text
        self._target = target_text
        self._clusters: list[str] = list(_grapheme.graphemes(target_text[len(base_text) :]))
        self._steps = steps
        self._interval = interval
        self._scheduler = scheduler
        self._on_step = on_step
        self._on_done = on_done

        self._step = 0
        self._last_written = base_text
        self._handle: TimerHandle | None = None
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def target(self) -> str:
        return self._target

    @property
    def last_written(self) -> str:
        return self._last_written

    @property
    def steps_remaining(self) -> int:
        return self._steps - self._step if self._active else 0

    def start(self) -> None:
        self._active = True
        self._schedule_next()

    def cancel(self) -> None:
        """Tear the reveal down. No further characters are written."""
        self._active = False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule_next(self) -> None:
        self._handle = self._scheduler.call_later(self._interval, self._tick)

    def _text_for_step(self, step: int) -> str:
        if step >= self._steps:
            # exact target, whatever the rounding did
            return self._target
        count = math.ceil(len(self._clusters) * step / self._steps)
        return self._base + "".join(self._clusters[:count])

    def _tick(self) -> None:
        self._handle = None
        if not self._active:
            return

        if self._surface.text != self._last_written:
            logger.debug("Text changed under progressive reveal; aborting")
            self.cancel()
            return

        self._step += 1
        text = self._text_for_step(self._step)
        if text != self._last_written:
            self._last_written = text
            self._on_step(text)

        if self._step >= self._steps:
            self._active = False
            self._on_done()
        else:
            self._schedule_next()


class AcceptanceController:
    """Applies or discards the coordinator's ghost in response to user gestures.

    Gestures never raise; they return ``True`` when they changed something.
    """

    def __init__(
        self,
        surface: TextSurface,
        coordinator: SuggestionCoordinator,
        settings: AcceptanceSettings | None = None,
        *,
        scheduler: Scheduler | None = None,
        on_text_applied: Callable[[str], None] | None = None,
        on_reveal_done: Callable[[], None] | None = None,
    ) -> None:
        self._surface = surface
        self._coordinator = coordinator
        self._settings = settings or AcceptanceSettings()
        self._scheduler = scheduler or LoopScheduler()
        self._on_text_applied = on_text_applied
        self._notify_reveal_done = on_reveal_done
        self._reveal: ProgressiveReveal | None = None

    @property
    def revealing(self) -> bool:
        return self._reveal is not None and self._reveal.active

    @property
    def reveal(self) -> ProgressiveReveal | None:
        return self._reveal

    def _valid_ghost(self) -> GhostSuggestion | None:
        ghost = self._coordinator.state.ghost
        if ghost is None or not ghost.continuation:
            return None
        if not ghost.matches(self._surface.text):
            logger.debug("Ghost base no longer matches the text; ignoring gesture")
            return None
        return ghost

    def _apply(self, text: str) -> None:
        self._surface.set_text(text)
        if self._on_text_applied:
            self._on_text_applied(text)

    def _fast_forward(self) -> bool:
        """Finish a running reveal in one write."""
        reveal = self._reveal
        if reveal is None or not reveal.active:
            return False
        reveal.cancel()
        self._reveal = None
        if self._surface.text != reveal.last_written:
            return False
        self._apply(reveal.target)
        self._surface.focus()
        return True

    def accept_instant(self) -> bool:
        if self._fast_forward():
            return True

        ghost = self._valid_ghost()
        if ghost is None:
            return False

        self._coordinator.clear_ghost()
        self._apply(ghost.full_text)
        self._surface.focus()
        return True

    def accept_progressive(self) -> bool:
        if self._fast_forward():
            return True

        ghost = self._valid_ghost()
        if ghost is None:
            return False

        self._coordinator.clear_ghost()
        self._reveal = ProgressiveReveal(
            self._surface,
            ghost.base_text,
            ghost.full_text,
            steps=self._settings.progressive_steps,
            interval=self._settings.step_interval,
            scheduler=self._scheduler,
            on_step=self._apply,
            on_done=self._on_reveal_done,
        )
        self._reveal.start()
        return True

    def dismiss(self) -> bool:
        """Stop any reveal and drop the ghost. The text is left as it is."""
        stopped = self.cancel_reveal()
        had_ghost = self._coordinator.state.ghost is not None
        self._coordinator.clear_ghost()
        return stopped or had_ghost

    def cancel_reveal(self) -> bool:
        if self._reveal is None:
            return False
        was_active = self._reveal.active
        self._reveal.cancel()
        self._reveal = None
        return was_active

    def _on_reveal_done(self) -> None:
        self._reveal = None
        self._surface.focus()
        if self._notify_reveal_done:
            self._notify_reveal_done()
