"""Tests for ghost.core.filters -- echo, repeat and normalization rules."""

from __future__ import annotations

import pytest

from ghost.core.filters import (
    RepetitionMemory,
    filter_completion,
    is_echo,
    is_same_as_input,
    normalize_completion,
    tail_words,
)
from ghost.core.settings import CoordinatorSettings


@pytest.fixture
def settings() -> CoordinatorSettings:
    return CoordinatorSettings()


class TestTailWords:
    def test_last_words_single_spaced(self) -> None:
        assert tail_words("one  two\nthree four five", 3) == "three four five"

    def test_fewer_words_than_count(self) -> None:
        assert tail_words("just two", 4) == "just two"

    def test_zero_count(self) -> None:
        assert tail_words("anything", 0) == ""


class TestIsSameAsInput:
    def test_empty_completion(self) -> None:
        assert is_same_as_input("   ", "Hello", "Hello")

    def test_equal_to_trimmed_source(self) -> None:
        assert is_same_as_input("Hello there", "Hello there  ", "Hello there")

    def test_equal_to_sanitized_text(self) -> None:
        assert is_same_as_input("a\nb", "a\r\nb", "a\nb")

    def test_different_completion(self) -> None:
        assert not is_same_as_input(" world", "Hello", "Hello")


class TestIsEcho:
    def test_candidate_tail_in_reference_window(self, settings) -> None:
        assert is_echo(" to the store", "I went to the store", settings)

    def test_reference_tail_in_candidate(self, settings) -> None:
        assert is_echo("so I went to the store again today", "yesterday I went to the store", settings)

    def test_fresh_continuation_is_not_echo(self, settings) -> None:
        assert not is_echo(" jumps over the lazy dog", "The quick brown fox", settings)

    def test_partial_word_does_not_count(self, settings) -> None:
        assert not is_echo(" toreador", "went to the store", settings)

    def test_short_tails_never_count(self) -> None:
        settings = CoordinatorSettings(min_echo_chars=5)
        assert not is_echo(" a", "I ate a", settings)


class TestNormalizeCompletion:
    def test_continuation_is_appended(self) -> None:
        assert normalize_completion("Hello ", "Hello", "world") == "Hello world"

    def test_full_text_is_kept(self) -> None:
        assert normalize_completion("Hello", "Hello", "Hello world") == "Hello world"

    def test_sanitized_prefix_swapped_for_source(self) -> None:
        assert normalize_completion("  Hello ", "Hello", "Hello world") == "  Hello world"

    def test_no_double_space_at_join(self) -> None:
        assert normalize_completion("Hello ", "Hello", " world") == "Hello world"

    def test_result_starts_with_source(self) -> None:
        for completion in ["x", " y", "Hello z", ""]:
            assert normalize_completion("Hello ", "Hello", completion).startswith("Hello ")


class TestRepetitionMemory:
    def test_empty_memory_repeats_nothing(self) -> None:
        assert not RepetitionMemory().repeats("anything")

    def test_repeats_compares_trimmed(self) -> None:
        memory = RepetitionMemory()
        memory.remember("Hello world")
        assert memory.repeats("  Hello world\n")
        assert not memory.repeats("Hello there")


class TestFilterCompletion:
    def test_accepts_fresh_continuation(self, settings) -> None:
        suggestion = filter_completion("Hello ", "Hello", "world", RepetitionMemory(), settings)
        assert suggestion is not None
        assert suggestion.base_text == "Hello "
        assert suggestion.full_text == "Hello world"
        assert suggestion.continuation == "world"

    def test_rejects_completion_equal_to_input(self, settings) -> None:
        assert filter_completion("Hello world", "Hello world", "Hello world", RepetitionMemory(), settings) is None

    def test_rejects_empty_completion(self, settings) -> None:
        assert filter_completion("Hello", "Hello", "", RepetitionMemory(), settings) is None

    def test_rejects_whitespace_only_continuation(self, settings) -> None:
        assert filter_completion("Hello", "Hello", "Hello   ", RepetitionMemory(), settings) is None

    def test_rejects_repeat_of_previous_suggestion(self, settings) -> None:
        memory = RepetitionMemory()
        memory.remember("Hello world")
        assert filter_completion("Hello ", "Hello", "world", memory, settings) is None

    def test_rejects_echo_of_input(self, settings) -> None:
        source = "I went to the store"
        assert filter_completion(source, source, " to the store", RepetitionMemory(), settings) is None

    def test_rejects_echo_of_previous_suggestion(self, settings) -> None:
        memory = RepetitionMemory()
        memory.remember("Once upon a time in a land far away")
        result = filter_completion("The story began", "The story began", " in a land far away", memory, settings)
        assert result is None

    def test_filter_does_not_update_memory(self, settings) -> None:
        memory = RepetitionMemory()
        filter_completion("Hello ", "Hello", "world", memory, settings)
        assert memory.last is None
