"""Tests for ghost.core.session.GhostSession -- gestures end to end."""

from __future__ import annotations

import pytest
from core_fakes import settle

from ghost.core.session import GhostSession, SessionState
from ghost.core.settings import AcceptanceSettings, CoordinatorSettings, GhostSettings


@pytest.fixture
async def session(provider, scheduler):
    settings = GhostSettings(
        coordinator=CoordinatorSettings(debounce_seconds=0.5, min_input_chars=3),
        acceptance=AcceptanceSettings(progressive_steps=3, progressive_duration_seconds=0.3),
    )
    session = GhostSession(provider, settings, scheduler=scheduler)
    yield session
    session.close()


async def _type(session, provider, scheduler, text="Hello ", completion="world") -> None:
    session.on_text_changed(text)
    scheduler.advance(0.5)
    await settle()
    provider.last.resolve(completion)
    await settle()


class TestGhostSession:
    async def test_initial_state(self, session) -> None:
        assert session.state == SessionState()

    async def test_typing_produces_ghost(self, session, provider, scheduler) -> None:
        await _type(session, provider, scheduler)
        assert session.state.text == "Hello "
        assert session.state.ghost_text == "world"
        assert session.state.status == "idle"

    async def test_user_edit_drops_ghost_immediately(self, session, provider, scheduler) -> None:
        await _type(session, provider, scheduler)
        session.on_text_changed("Hello w")
        assert session.state.ghost_text == ""
        assert session.state.status == "idle"

    async def test_accept_instant(self, session, provider, scheduler) -> None:
        await _type(session, provider, scheduler)
        assert session.on_accept_instant()
        assert session.state.text == "Hello world"
        assert session.state.ghost_text == ""
        assert session.coordinator.text == "Hello world"

    async def test_accept_progressive(self, session, provider, scheduler) -> None:
        await _type(session, provider, scheduler)
        assert session.on_accept_progressive()
        assert session.state.revealing

        scheduler.advance(0.3)
        assert session.state.text == "Hello world"
        assert not session.state.revealing

    async def test_user_edit_interrupts_reveal(self, session, provider, scheduler) -> None:
        await _type(session, provider, scheduler)
        session.on_accept_progressive()
        scheduler.advance(0.1)

        session.on_text_changed("Hello wo!")
        assert not session.state.revealing
        scheduler.advance(0.3)
        assert session.state.text == "Hello wo!"

    async def test_dismiss(self, session, provider, scheduler) -> None:
        await _type(session, provider, scheduler)
        assert session.on_dismiss()
        assert session.state.ghost_text == ""
        assert session.state.text == "Hello "
        assert not session.on_dismiss()

    async def test_error_is_reported(self, session, provider, scheduler) -> None:
        session.on_text_changed("Hello")
        scheduler.advance(0.5)
        await settle()
        provider.last.fail(RuntimeError("upstream down"))
        await settle()
        assert session.state.status == "error"
        assert session.state.error == "upstream down"

    async def test_listeners_receive_distinct_states(self, session, provider, scheduler) -> None:
        states: list[SessionState] = []
        session.subscribe(states.append)
        await _type(session, provider, scheduler)

        assert states[-1].ghost_text == "world"
        assert all(a != b for a, b in zip(states, states[1:]))
        assert "pending" in [s.status for s in states]

    async def test_reveal_end_is_pushed(self, session, provider, scheduler) -> None:
        await _type(session, provider, scheduler)
        states: list[SessionState] = []
        session.subscribe(states.append)

        session.on_accept_progressive()
        scheduler.advance(0.3)
        assert states[-1] == SessionState(text="Hello world", status="idle")
