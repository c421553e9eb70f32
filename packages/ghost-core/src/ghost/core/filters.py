"""Result filtering: input echoes, repeats, and prefix normalization.

The echo checks are heuristics. They compare word tails by whole-word
containment, so the thresholds in :class:`CoordinatorSettings` are tuning knobs
rather than guarantees.
"""

from __future__ import annotations

import logging

from ghost.core.settings import CoordinatorSettings
from ghost.core.types import GhostSuggestion

logger = logging.getLogger(__name__)


class RepetitionMemory:
    """Remembers the last surfaced suggestion for the process lifetime."""

    def __init__(self) -> None:
        self._last: str | None = None

    @property
    def last(self) -> str | None:
        return self._last

    def remember(self, full_text: str) -> None:
        self._last = full_text

    def repeats(self, *candidates: str) -> bool:
        if self._last is None:
            return False
        last = self._last.strip()
        return any(c.strip() == last for c in candidates)


def tail_words(text: str, count: int) -> str:
    """The last ``count`` whitespace-separated words of ``text``, single-spaced."""
    words = text.split()
    return " ".join(words[-count:]) if count > 0 else ""


def is_echo(candidate: str, reference: str, settings: CoordinatorSettings) -> bool:
    """Symmetric tail check: either side's tail already appears in the other.

    The candidate's tail is looked up in the reference's recent window; the
    reference's tail is looked up in the whole candidate. Tails shorter than
    ``min_echo_chars`` never count.
    """
    candidate_tail = tail_words(candidate, settings.echo_tail_words)
    reference_tail = tail_words(reference, settings.echo_tail_words)
    reference_window = tail_words(reference, settings.echo_window_words)

    if len(candidate_tail) >= settings.min_echo_chars and _contains_words(reference_window, candidate_tail):
        return True
    if len(reference_tail) >= settings.min_echo_chars and _contains_words(candidate, reference_tail):
        return True
    return False


def _contains_words(haystack: str, needle: str) -> bool:
    # whole-word containment on single-spaced text
    return f" {needle} " in f" {' '.join(haystack.split())} "


def is_same_as_input(completion: str, source_text: str, sanitized_text: str) -> bool:
    stripped = completion.strip()
    return not stripped or stripped == source_text.strip() or stripped == sanitized_text


def _join(base: str, continuation: str) -> str:
    if base[-1:].isspace() and continuation[:1].isspace():
        continuation = continuation.lstrip(" \t")
    return base + continuation


def normalize_completion(source_text: str, sanitized_text: str, completion: str) -> str:
    """Return a full text that is guaranteed to start with ``source_text``.

    Providers may answer with the whole text or with just the continuation.
    A completion that repeats the sanitized (trimmed) input gets the user's
    exact text swapped back in as its prefix.
    """
    if completion.startswith(source_text):
        return completion
    if sanitized_text and completion.startswith(sanitized_text):
        return _join(source_text, completion[len(sanitized_text) :])
    return _join(source_text, completion)


def filter_completion(
    source_text: str,
    sanitized_text: str,
    completion: str,
    memory: RepetitionMemory,
    settings: CoordinatorSettings,
) -> GhostSuggestion | None:
    """Turn a provider result into a ghost suggestion, or ``None`` if it is filtered out."""
    if is_same_as_input(completion, source_text, sanitized_text):
        logger.debug("Discarding completion: empty or same as input")
        return None

    full_text = normalize_completion(source_text, sanitized_text, completion)
    continuation = full_text[len(source_text) :]
    if not continuation.strip():
        logger.debug("Discarding completion: nothing beyond the input")
        return None

    if memory.repeats(completion, full_text):
        logger.debug("Discarding completion: repeats the previous suggestion")
        return None

    if is_echo(continuation, source_text, settings):
        logger.debug("Discarding completion: echoes the input")
        return None

    if memory.last is not None and is_echo(continuation, memory.last, settings):
        logger.debug("Discarding completion: echoes the previous suggestion")
        return None

    return GhostSuggestion(base_text=source_text, full_text=full_text)
