"""ghost-core: inline ghost-text suggestion coordination."""

from ghost.core.acceptance import AcceptanceController, ProgressiveReveal
from ghost.core.coordinator import SuggestionCoordinator
from ghost.core.filters import RepetitionMemory, filter_completion, is_echo, normalize_completion
from ghost.core.sanitize import sanitize_text
from ghost.core.scheduling import LoopScheduler, Scheduler, TimerHandle
from ghost.core.session import GhostSession, SessionState
from ghost.core.settings import AcceptanceSettings, CoordinatorSettings, GhostSettings, load_settings
from ghost.core.surface import TextSurface
from ghost.core.types import (
    CancellationToken,
    CompletionFn,
    CoordinatorStatus,
    GhostState,
    GhostSuggestion,
    SuggestionRequest,
)

__all__ = [
    "AcceptanceController",
    "AcceptanceSettings",
    "CancellationToken",
    "CompletionFn",
    "CoordinatorSettings",
    "CoordinatorStatus",
    "GhostSession",
    "GhostSettings",
    "GhostState",
    "GhostSuggestion",
    "LoopScheduler",
    "ProgressiveReveal",
    "RepetitionMemory",
    "Scheduler",
    "SessionState",
    "SuggestionCoordinator",
    "SuggestionRequest",
    "TextSurface",
    "TimerHandle",
    "filter_completion",
    "is_echo",
    "load_settings",
    "normalize_completion",
    "sanitize_text",
]
